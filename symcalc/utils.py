import logging
import math
import os
import random
from typing import Optional

import numpy as np
import torch


def format_float(value: float) -> str:
    """
    Отображение числа так, как его печатает платформа по умолчанию:
    конечные значения в позиционной записи без лишних нулей
    (5.0 -> "5", 1e-05 -> "0.00001", -0.0 -> "-0"), NaN/inf — "NaN", "inf", "-inf".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0 and math.copysign(1.0, value) < 0:
        return "-0"
    return np.format_float_positional(value, trim="-")


def set_seed(seed: Optional[int] = None):
    if seed is None:
        return
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)


def get_logger(
    name: str = "symcalc",
    log_file: Optional[str] = os.path.join("results", "symcalc.log"),
    stream: bool = False,
    level: int = logging.INFO,
) -> logging.Logger:
    """Создает и настраивает логгер.

    Повторные вызовы корректно обновляют файловый хендлер, если путь изменился.
    При log_file=None файловый хендлер не создается.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    existing_file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    # FileHandler наследует StreamHandler, поэтому исключаем его явно
    existing_stream_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]

    if log_file is not None:
        need_new_file_handler = True
        if existing_file_handlers:
            current_path = os.path.abspath(existing_file_handlers[0].baseFilename)
            need_new_file_handler = current_path != os.path.abspath(log_file)

        if need_new_file_handler:
            for h in existing_file_handlers:
                logger.removeHandler(h)
                h.close()
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    if stream and not existing_stream_handlers:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    return logger


def tensor_constant(value: float, like: torch.Tensor) -> torch.Tensor:
    return torch.as_tensor(value, dtype=like.dtype, device=like.device)
