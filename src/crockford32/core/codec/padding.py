"""
Padding / Trim — фиксированная ширина без потери канонической формы

pad и trim взаимно обратны: trim(pad(v, w)) == v для любого канонического v.
"""

from crockford32.core.alphabet import ZERO_DIGIT, ZERO_DIGITS, ZERO_EQUIVALENTS
from crockford32.core.codec.results import INVALID_BASE32


def pad(value: str, width: int) -> str:
    """
    Дополнение нулями слева до ширины не меньше width.

    value должно быть валидным; иначе результат не определён.

    Args:
        value: Каноническая base-32 запись
        width: Минимальная ширина результата

    Returns:
        value, дополненное "0" слева (без изменений, если уже достаточно широкое)

    Raises:
        ValueError: Если width отрицательная

    Examples:
        >>> pad("Z", 5)
        '0000Z'
        >>> pad("ABCDEF", 5)
        'ABCDEF'
    """
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")

    missing = width - len(value)
    if missing <= 0:
        return value

    return ZERO_DIGIT * missing + value


def trim(padded: str) -> str:
    """
    Удаление ведущих нулей (0, o, O) и дефисов.

    Остаток строки возвращается без изменений. Если значимых символов нет:
    "0" при наличии хотя бы одной цифры нуля, иначе INVALID_BASE32.

    Examples:
        >>> trim("00-oo-00TEST")
        'TEST'
        >>> trim("0000")
        '0'
    """
    for index, char in enumerate(padded):
        if char not in ZERO_EQUIVALENTS:
            return padded[index:]

    if any(char in ZERO_DIGITS for char in padded):
        return ZERO_DIGIT

    return INVALID_BASE32
