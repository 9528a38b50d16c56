from __future__ import annotations
import re
from typing import Optional

_NON_DIGITS = re.compile(r"[^0-9]")

def only_digits(s: Optional[str]) -> str:
    """Remove tudo que não for 0-9, preservando a ordem. None/vazio -> ''."""
    if s is None:
        return ""
    return _NON_DIGITS.sub("", str(s))

def all_equal(s: str) -> bool:
    """True quando todos os caracteres são iguais (ex.: '11111111111')."""
    return bool(s) and s == s[0] * len(s)

def safe_int(v, default: Optional[int] = None) -> Optional[int]:
    try:
        if v is None or v == "": return default
        return int(float(str(v)))
    except (TypeError, ValueError):
        return default
