import argparse
import os
from typing import List, Union

from symcalc.config import load_config, terms_from_config
from symcalc.mathfs import is_math_exist, read_math
from symcalc.terms import Constant, Poly, differentiate, render_sum
from symcalc.utils import get_logger


def demo_differentiate(terms: List[Union[Poly, Constant]]) -> str:
    """
    Дифференцирует каждый член по отдельности и печатает сумму,
    например: d/dx 5x^3 + 3x^2 + -7x = 15x^2 + 6x + -7
    """
    derivatives = [differentiate(t) for t in terms]
    line = f"d/dx {render_sum(terms)} = {render_sum(derivatives)}"
    print(line)
    return line


def main():
    parser = argparse.ArgumentParser(description="symcalc: symbolic differentiation of polynomial terms")
    parser.add_argument("--config", type=str, default=os.path.join("configs", "demo.yaml"))
    args = parser.parse_args()

    cfg = load_config(args.config)
    logger = get_logger(log_file=cfg.get("log_file", os.path.join("results", "symcalc.log")), stream=True)

    terms = terms_from_config(cfg)
    if terms:
        logger.info(f"Differentiating {len(terms)} terms")
        demo_differentiate(terms)

    plot_dir = cfg.get("plot_dir")
    if plot_dir and terms:
        # matplotlib подгружаем только когда нужны графики
        from symcalc.analytics import plot_term_and_derivative

        for idx, term in enumerate(terms):
            plot_term_and_derivative(term, os.path.join(plot_dir, f"term_{idx}"))

    for name in cfg.get("exists") or []:
        print(f"Does file {name} exist? {is_math_exist(name)}")

    if cfg.get("read"):
        print(read_math(str(cfg["read"])))


if __name__ == "__main__":
    main()
