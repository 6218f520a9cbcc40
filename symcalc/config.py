from __future__ import annotations

from typing import Any, Dict, List, Union

import yaml

from .terms import Constant, Poly
from .variables import VariableSymbol


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    # пустой файл дает None
    return cfg or {}


def term_from_config(entry: Dict[str, Any]) -> Union[Poly, Constant]:
    """
    Строит узел из записи конфига:
    - {"constant": -7} -> Constant
    - {"coefficient": 5, "variable": "x", "exponent": 3} -> Poly
      (variable по умолчанию x, exponent по умолчанию 1)
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Term entry must be a mapping, got {entry!r}")
    if "constant" in entry:
        return Constant(float(entry["constant"]))
    if "coefficient" not in entry:
        raise ValueError(f"Term entry needs 'coefficient' or 'constant': {entry!r}")
    variable = VariableSymbol.from_char(str(entry.get("variable", VariableSymbol.independent().render())))
    return Poly.from_parts(float(entry["coefficient"]), variable, float(entry.get("exponent", 1.0)))


def terms_from_config(cfg: Dict[str, Any]) -> List[Union[Poly, Constant]]:
    return [term_from_config(entry) for entry in (cfg.get("terms") or [])]
