from __future__ import annotations

from typing import Optional


class UnsupportedOperationError(NotImplementedError):
    """Операция объявлена, но ещё не реализована (разбор текста, составные выражения)."""

    def __init__(self, operation: str):
        super().__init__(f"Operation not supported: {operation}")
        self.operation = operation


class MathFileError(OSError):
    """Ошибка чтения или проверки `.math` файла."""

    def __init__(self, path: str, reason: Optional[BaseException] = None):
        message = f"Failed to access math file: {path}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason
