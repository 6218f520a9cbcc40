from __future__ import annotations

from enum import Enum, IntEnum


class AtomicKind(IntEnum):
    """
    Грубая классификация узла выражения (упорядочена):
    - LITERAL: десятичная числовая константа
    - CONSTANT: известная математическая константа (e, pi)
    - VAR: неизвестная переменная
    - EXPRESSION: составное выражение, уже не атомарное
    """
    LITERAL = 0
    CONSTANT = 1
    VAR = 2
    EXPRESSION = 3


class VariableSymbol(Enum):
    """Одна из 26 переменных, по одной на каждую строчную латинскую букву."""
    a = "a"
    b = "b"
    c = "c"
    d = "d"
    e = "e"
    f = "f"
    g = "g"
    h = "h"
    i = "i"
    j = "j"
    k = "k"
    l = "l"  # noqa: E741
    m = "m"
    n = "n"
    o = "o"
    p = "p"
    q = "q"
    r = "r"
    s = "s"
    t = "t"
    u = "u"
    v = "v"
    w = "w"
    x = "x"
    y = "y"
    z = "z"

    @staticmethod
    def from_char(ch: str) -> "VariableSymbol":
        if not isinstance(ch, str) or len(ch) != 1 or not ("a" <= ch <= "z"):
            raise ValueError(f"Unsupported variable symbol: {ch!r}")
        return VariableSymbol(ch)

    @staticmethod
    def independent() -> "VariableSymbol":
        """Независимая переменная по умолчанию."""
        return VariableSymbol.x

    @staticmethod
    def dependent() -> "VariableSymbol":
        return VariableSymbol.y

    def is_euler_alias(self) -> bool:
        # `e` зарезервирована как обозначение постоянной Эйлера
        return self is VariableSymbol.e

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()
