from .errors import MathFileError, UnsupportedOperationError
from .expr import Expr
from .mathfs import is_math_exist, read_math
from .terms import AtomicExpr, Constant, Poly, differentiate, differentiate_n, render_sum
from .variables import AtomicKind, VariableSymbol

__version__ = "0.1.0"

__all__ = [
    "AtomicExpr",
    "AtomicKind",
    "Constant",
    "Expr",
    "MathFileError",
    "Poly",
    "UnsupportedOperationError",
    "VariableSymbol",
    "differentiate",
    "differentiate_n",
    "is_math_exist",
    "read_math",
    "render_sum",
    "__version__",
]
