from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Union

import torch

from .utils import format_float, tensor_constant
from .variables import AtomicKind, VariableSymbol

if TYPE_CHECKING:
    from .expr import Expr


@dataclass(frozen=True)
class Poly:
    """
    Полиномиальный член `coefficient * variable^exponent`.
    Неизменяем: дифференцирование всегда возвращает новый узел.
    """
    variable: VariableSymbol
    coefficient: float
    exponent: float

    def __post_init__(self):
        if not isinstance(self.variable, VariableSymbol):
            raise TypeError(f"variable must be a VariableSymbol, got {type(self.variable).__name__}")
        object.__setattr__(self, "coefficient", float(self.coefficient))
        object.__setattr__(self, "exponent", float(self.exponent))

    @staticmethod
    def from_parts(coefficient: float, variable: VariableSymbol, exponent: float) -> "Poly":
        return Poly(variable=variable, coefficient=coefficient, exponent=exponent)

    @property
    def kind(self) -> AtomicKind:
        return AtomicKind.VAR

    def differentiate(self) -> "AtomicExpr":
        # степень 1: переменная исчезает, остается константа (а не член со степенью 0)
        if self.exponent == 1.0:
            return Constant(self.coefficient)
        return Poly(
            variable=self.variable,
            coefficient=self.coefficient * self.exponent,
            exponent=self.exponent - 1.0,
        )

    def render(self) -> str:
        if self.exponent == 1.0:
            return f"{format_float(self.coefficient)}{self.variable.render()}"
        return f"{format_float(self.coefficient)}{self.variable.render()}^{format_float(self.exponent)}"

    def compile(self) -> Callable[[torch.Tensor], torch.Tensor]:
        """
        Компилирует член в функцию PyTorch, совместимую с autograd.
        Сигнатура: f(x) -> torch.Tensor той же формы, что и x.
        """
        coefficient = self.coefficient
        exponent = self.exponent

        def term(x: torch.Tensor) -> torch.Tensor:
            return tensor_constant(coefficient, x) * torch.pow(x, exponent)

        return term

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Constant:
    """Константа, не зависящая от переменной."""
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    @property
    def kind(self) -> AtomicKind:
        return AtomicKind.LITERAL

    def differentiate(self) -> "AtomicExpr":
        return Constant(0.0)

    def render(self) -> str:
        return format_float(self.value)

    def compile(self) -> Callable[[torch.Tensor], torch.Tensor]:
        value = self.value

        def term(x: torch.Tensor) -> torch.Tensor:
            # x * 0 сохраняет связь с графом, чтобы autograd вернул нулевой градиент
            return torch.full_like(x, value) + x * 0

        return term

    def __str__(self) -> str:
        return self.render()


# Результат одного шага дифференцирования.
# TODO: добавить экспоненциальный и логарифмический члены (Exponent, Log) в AtomicExpr.
AtomicExpr = Union[Poly, Constant]

Differentiable = Union[Poly, Constant, "Expr"]


def differentiate(node: Differentiable) -> AtomicExpr:
    """Производная узла; перебор по закрытому набору видов узлов."""
    from .expr import Expr

    if isinstance(node, (Poly, Constant)):
        return node.differentiate()
    if isinstance(node, Expr):
        return node.differentiate()
    raise TypeError(f"Cannot differentiate object of type {type(node).__name__}")


def differentiate_n(node: Differentiable, n: int) -> Differentiable:
    if n < 0:
        raise ValueError(f"Derivative order must be non-negative, got {n}")
    for _ in range(n):
        node = differentiate(node)
    return node


def render_sum(nodes: Iterable[Differentiable]) -> str:
    return " + ".join(node.render() for node in nodes)
