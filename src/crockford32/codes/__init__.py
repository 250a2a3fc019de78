"""Codes — пользовательские коды: значение + check-символ.

- CodeFormatter: uint32 → код (группировка дефисами, check-символ)
- CodeParser: код → uint32 с проверкой check-символа
"""

from .formatter import CodeFormat, CodeFormatter
from .parser import CodeParser, ParsedCode

__all__ = [
    "CodeFormat",
    "CodeFormatter",
    "CodeParser",
    "ParsedCode",
]
