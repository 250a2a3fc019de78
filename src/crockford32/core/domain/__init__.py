"""
Domain models and value objects.

Contains Base32Value, CheckSymbol and CheckedCode.
"""

from crockford32.core.domain.code import Base32Value, CheckedCode, CheckSymbol

__all__ = [
    "Base32Value",
    "CheckSymbol",
    "CheckedCode",
]
