"""
Encoder — uint32 → каноническая base-32 запись

Алгоритм:
- Разбиение числа на 7 групп по 5 бит, старшая группа первой
  (сдвиги 30, 25, 20, 15, 10, 5, 0; старшая группа несёт только 2 бита)
- Отображение каждой группы через ENCODE_SYMBOLS
- Отбрасывание ведущих нулевых групп; 0 кодируется как "0"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любое значение из [0, 2^32 - 1] имеет ровно одну каноническую запись
2. Результат не начинается с "0", кроме самого значения 0
3. Длина результата ≤ 7
"""

from typing import Final

from crockford32.core.alphabet import (
    DIGIT_MASK,
    ENCODE_SYMBOLS,
    MAX_DIGITS,
    MAX_UINT32,
)

# Сдвиги 5-битных групп, старшая первой
_GROUP_SHIFTS: Final[tuple[int, ...]] = (30, 25, 20, 15, 10, 5, 0)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_uint32(value: int, name: str = "value") -> int:
    """
    Валидация, что значение — целое в диапазоне uint32.

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Returns:
        value если валидное

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне [0, MAX_UINT32]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    if value < 0 or value > MAX_UINT32:
        raise ValueError(f"{name} {value} outside uint32 range [0, {MAX_UINT32}]")

    return value


# =============================================================================
# ENCODE
# =============================================================================


def encode(value: int) -> str:
    """
    Кодирование uint32 в каноническую base-32 строку.

    Args:
        value: Целое в [0, 2^32 - 1]

    Returns:
        Каноническая запись без ведущих нулей

    Raises:
        TypeError, ValueError: см. validate_uint32

    Examples:
        >>> encode(0)
        '0'
        >>> encode(90)
        '2T'
        >>> encode(8730)
        '8GT'
        >>> encode(4294967295)
        '3ZZZZZZ'
    """
    validate_uint32(value)

    groups = [(value >> shift) & DIGIT_MASK for shift in _GROUP_SHIFTS]

    # Для value == 0 ненулевая группа не найдётся → остаётся последняя позиция
    first_non_zero = MAX_DIGITS - 1
    for index, group in enumerate(groups):
        if group != 0:
            first_non_zero = index
            break

    return "".join(ENCODE_SYMBOLS[group] for group in groups[first_non_zero:])
