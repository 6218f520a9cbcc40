from __future__ import annotations

import os
from typing import Union

import matplotlib.pyplot as plt
import numpy as np
import sympy as sp

from .errors import UnsupportedOperationError
from .expr import Expr
from .terms import Constant, Poly
from .utils import get_logger
from .variables import VariableSymbol

logger = get_logger("symcalc.analytics", log_file=None)


def _symbol_for(node: Union[Poly, Constant]) -> sp.Symbol:
    if isinstance(node, Poly):
        return sp.Symbol(node.variable.render())
    return sp.Symbol(VariableSymbol.independent().render())


def node_to_sympy(node: Union[Poly, Constant, Expr]) -> sp.Expr:
    if isinstance(node, Poly):
        return sp.Float(node.coefficient) * _symbol_for(node) ** sp.Float(node.exponent)
    if isinstance(node, Constant):
        return sp.Float(node.value)
    if isinstance(node, Expr):
        raise UnsupportedOperationError("node_to_sympy(Expr)")
    raise ValueError(f"Unsupported node for sympy: {node!r}")


def sympy_derivative(node: Union[Poly, Constant]) -> sp.Expr:
    """Эталонная производная, вычисленная SymPy по переменной узла."""
    return sp.diff(node_to_sympy(node), _symbol_for(node))


def _evaluate_on_grid(expr: sp.Expr, sym: sp.Symbol, xs: np.ndarray, label: str) -> np.ndarray:
    try:
        fn = sp.lambdify(sym, expr, "numpy")
    except (TypeError, ValueError) as e:
        logger.warning(f"lambdify({label}) failed: {e}")
        return np.zeros_like(xs)
    try:
        with np.errstate(all="ignore"):
            ys = np.asarray(fn(xs), dtype=float)
        # константы lambdify возвращает скаляром
        if ys.ndim == 0:
            ys = np.full_like(xs, float(ys))
        ys = ys.reshape(-1)
        if ys.size != xs.size:
            ys = np.zeros_like(xs)
    except (TypeError, ValueError, RuntimeError) as e:
        logger.warning(f"Error evaluating {label}: {e}")
        ys = np.zeros_like(xs)
    return ys


def plot_term_and_derivative(node: Union[Poly, Constant], save_dir: str, lo: float = 0.1, hi: float = 5.0) -> None:
    """
    Строит графики члена и его производной на отрезке [lo, hi].
    По умолчанию отрезок положительный, чтобы дробные и отрицательные степени были определены.
    """
    os.makedirs(save_dir, exist_ok=True)
    sym = _symbol_for(node)
    expr = node_to_sympy(node)
    dexpr = node_to_sympy(node.differentiate())

    xs = np.linspace(lo, hi, 400)
    ys = _evaluate_on_grid(expr, sym, xs, "term")
    dys = _evaluate_on_grid(dexpr, sym, xs, "derivative")
    name = sym.name

    plt.figure(figsize=(6, 4))
    plt.plot(xs, ys)
    plt.title(f"{node.render()}")
    plt.xlabel(name)
    plt.ylabel(f"f({name})")
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(os.path.join(save_dir, "term.png"))
    plt.close()

    plt.figure(figsize=(6, 4))
    plt.plot(xs, dys)
    plt.title(f"d/d{name} {node.render()}")
    plt.xlabel(name)
    plt.ylabel(f"f'({name})")
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(os.path.join(save_dir, "dterm.png"))
    plt.close()
    logger.info(f"Saved plots for {node.render()} to {save_dir}")
