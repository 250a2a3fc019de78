"""
Decoder — base-32 запись → uint32

Декодирование регистронезависимо и устойчиво к look-alike символам:
I/i/L/l читаются как 1, O/o как 0. U/u никогда не является цифрой значения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая строка → EmptyInputError (отличается от "0")
2. Проверка переполнения выполняется до поразрядного декодирования
3. Граница переполнения точная: "3ZZZZZZ" = 2^32 - 1 помещается, "4000000" — нет
"""

from typing import Final

from crockford32.core.alphabet import (
    BITS_PER_DIGIT,
    MAX_DIGITS,
    MAX_UINT32,
    decode_symbol,
)
from crockford32.core.codec.results import DecodeResult
from crockford32.core.errors import (
    Base32Error,
    Base32OverflowError,
    EmptyInputError,
    InvalidDigitError,
)

# Максимальное значение старшей цифры 7-значной записи: 2 бита → 3
_MAX_LEADING_DIGIT: Final[int] = MAX_UINT32 >> (BITS_PER_DIGIT * (MAX_DIGITS - 1))


# =============================================================================
# OVERFLOW CHECK
# =============================================================================


def will_fit(value: str) -> bool:
    """
    Проверка, помещается ли base-32 значение в uint32.

    Предполагается, что value валидно и не дополнено нулями слева.
    Иначе результат не определён.

    Правило:
        < 7 цифр  → всегда помещается
        > 7 цифр  → никогда
        = 7 цифр  → только если старшая цифра 0..3

    Args:
        value: Base-32 запись

    Returns:
        True если значение помещается в uint32

    Examples:
        >>> will_fit("ZZZZZZ")
        True
        >>> will_fit("3ZZZZZZ")
        True
        >>> will_fit("4000000")
        False
    """
    num_digits = len(value)

    if num_digits < MAX_DIGITS:
        return True

    if num_digits > MAX_DIGITS:
        return False

    msd = decode_symbol(value[0])
    return msd is not None and msd <= _MAX_LEADING_DIGIT


# =============================================================================
# DECODE
# =============================================================================


def decode(value: str) -> int:
    """
    Декодирование base-32 записи в целое.

    Args:
        value: Base-32 запись (регистр не важен, look-alike допустимы)

    Returns:
        Целое в [0, 2^32 - 1]

    Raises:
        EmptyInputError: Пустая строка
        Base32OverflowError: Значение не помещается в uint32
        InvalidDigitError: Символ не является цифрой значения

    Examples:
        >>> decode("2T")
        90
        >>> decode("o")
        0
        >>> decode("3zzzzzz")
        4294967295
    """
    if len(value) == 0:
        raise EmptyInputError()

    if not will_fit(value):
        raise Base32OverflowError(
            f"Base 32 value {value!r} is too big for a 32-bit unsigned integer "
            f"(max {MAX_UINT32})"
        )

    result = 0
    shift = (len(value) - 1) * BITS_PER_DIGIT

    for char in value:
        digit = decode_symbol(char)
        if digit is None:
            raise InvalidDigitError(f"Invalid Base32 digit {char!r} in {value!r}")

        result |= digit << shift
        shift -= BITS_PER_DIGIT

    return result


def try_decode(value: str) -> DecodeResult:
    """
    Декодирование без исключений.

    Returns:
        DecodeResult: value=None и error при ошибке
    """
    try:
        decoded = decode(value)
    except Base32Error as e:
        return DecodeResult(value=None, error=e.code, details=str(e))

    return DecodeResult(value=decoded, error=None)
