import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def restore_symcalc_logger():
    # main() wires handlers onto the shared "symcalc" logger; drop them after each test
    logger = logging.getLogger("symcalc")
    saved = list(logger.handlers)
    yield
    for h in list(logger.handlers):
        if h not in saved:
            logger.removeHandler(h)
            h.close()
