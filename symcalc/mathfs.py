"""Доступ к `.math` файлам: загрузка текста и проверка существования."""

from __future__ import annotations

import os

from .errors import MathFileError
from .utils import get_logger

MATH_SUFFIX = ".math"

logger = get_logger("symcalc.mathfs", log_file=None)


def normalize_math_path(name: str) -> str:
    if name.endswith(MATH_SUFFIX):
        return name
    return name + MATH_SUFFIX


def read_math(name: str) -> str:
    """
    Читает содержимое {name}.math (суффикс добавляется, если его нет)
    и возвращает его без пробелов по краям.
    Любая ошибка чтения приводит к MathFileError.
    """
    path = normalize_math_path(name)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise MathFileError(path, e) from e
    logger.info(f"Read {len(content)} chars from {path}")
    return content.strip()


def is_math_exist(name: str) -> bool:
    """
    Проверяет, существует ли {name}.math.
    Отсутствие файла — обычный результат False; прочие ошибки доступа — MathFileError.
    """
    path = normalize_math_path(name)
    try:
        os.stat(path)
    except FileNotFoundError:
        logger.debug(f"{path} does not exist")
        return False
    except OSError as e:
        logger.error(f"Failed to check {path}: {e}")
        raise MathFileError(path, e) from e
    return True
