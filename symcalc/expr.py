from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import UnsupportedOperationError
from .terms import AtomicExpr, Constant, Poly
from .utils import get_logger
from .variables import AtomicKind

logger = get_logger("symcalc.expr", log_file=None)


@dataclass
class Expr:
    """
    Составное выражение: тег вида и единственный вложенный дифференцируемый узел.
    Конверт владеет вложенным узлом; вложенным может быть другой Expr,
    что дает рекурсивное дерево без общих ссылок и циклов.
    """
    kind: AtomicKind = AtomicKind.EXPRESSION
    nested: Optional[Union[Poly, Constant, "Expr"]] = None

    @staticmethod
    def parse(text: str) -> "Expr":
        logger.error(f"Expr.parse is not implemented (input length {len(text)})")
        raise UnsupportedOperationError("Expr.parse")

    def differentiate(self) -> AtomicExpr:
        logger.error("Expr.differentiate is not implemented")
        raise UnsupportedOperationError("Expr.differentiate")

    def depth(self) -> int:
        depth = 1
        node = self.nested
        while isinstance(node, Expr):
            depth += 1
            node = node.nested
        return depth

    def leaf(self) -> Optional[Union[Poly, Constant]]:
        """Самый внутренний узел, не являющийся конвертом."""
        node = self.nested
        while isinstance(node, Expr):
            node = node.nested
        return node

    def render(self) -> str:
        if self.nested is None:
            return "()"
        return f"({self.nested.render()})"

    def __str__(self) -> str:
        return self.render()
