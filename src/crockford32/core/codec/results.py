"""Результаты try_* операций и sentinel-значения.

Невалидный результат — это sentinel-значение плюс ErrorCode, а не исключение:
- INVALID_BASE32 ("") отличается от значения "0"
- INVALID_CHECK ("\\x00") отличается от любого реального check-символа
"""

from dataclasses import dataclass
from typing import Final, Optional

from crockford32.core.errors import ErrorCode


# =============================================================================
# SENTINELS
# =============================================================================

INVALID_BASE32: Final[str] = ""
INVALID_CHECK: Final[str] = "\x00"

_INVALID_DISPLAY: Final[str] = "<invalid>"


def display_value(value: str) -> str:
    """Текстовое представление значения ("<invalid>" для sentinel)."""
    if value == INVALID_BASE32:
        return _INVALID_DISPLAY
    return value


def display_check(check: str) -> str:
    """Текстовое представление check-символа ("<invalid>" для sentinel)."""
    if check == INVALID_CHECK:
        return _INVALID_DISPLAY
    return check


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class DecodeResult:
    """Результат try_decode."""

    value: Optional[int]  # None при ошибке
    error: Optional[ErrorCode]

    # Детали
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class NormalizeResult:
    """Результат try_normalize."""

    value: str  # INVALID_BASE32 при ошибке
    error: Optional[ErrorCode]

    # Детали
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CheckParseResult:
    """Результат try_parse_check_symbol."""

    value: str  # INVALID_CHECK при ошибке
    error: Optional[ErrorCode]

    # Детали
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None
