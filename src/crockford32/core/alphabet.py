"""
Alphabet Tables — символьные таблицы Crockford Base-32

Источник: http://www.crockford.com/wrmg/base32.html

Модуль содержит статические таблицы, на которых построены все остальные
компоненты кодека:
- Канонический алфавит значений (32 символа, без I, L, O, U)
- Расширенный алфавит check-символов (37 символов: канонический + *~$=U)
- Обратная таблица decode (индекс — код символа, None — не декодируется)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблицы строятся один раз при импорте и никогда не мутируются
2. DECODE_TABLE[ord(c)] is None ⇔ символ c не является цифрой значения
3. Look-alike коррекция: I/i/L/l → 1, O/o → 0; U/u никогда не цифра значения
4. Case folding затрагивает только ASCII a-z
"""

import string
from typing import Final, Optional

# =============================================================================
# АЛФАВИТЫ
# =============================================================================

# Канонический алфавит значений: 0-9 и 22 буквы (без I, L, O, U)
ENCODE_SYMBOLS: Final[str] = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

# Символы, допустимые только как check-символ (индексы 32..36)
CHECK_ONLY_SYMBOLS: Final[str] = "*~$=U"

# Расширенный алфавит check-символов (37 = простое число > 32)
CHECK_SYMBOLS: Final[str] = ENCODE_SYMBOLS + CHECK_ONLY_SYMBOLS


# =============================================================================
# ЧИСЛОВЫЕ КОНСТАНТЫ
# =============================================================================

BASE: Final[int] = 32
CHECKSUM_PRIME: Final[int] = 37

# Каждая base-32 цифра несёт 5 бит
BITS_PER_DIGIT: Final[int] = 5
DIGIT_MASK: Final[int] = 0x1F

# uint32: 6 полных цифр + 2 бита → максимум 7 цифр
MAX_DIGITS: Final[int] = 7
MAX_UINT32: Final[int] = 4294967295

# Максимальное значение, представимое N цифрами (например, "Z" = 31)
MAX_1_DIGIT_INT: Final[int] = (1 << 5) - 1
MAX_2_DIGIT_INT: Final[int] = (1 << 10) - 1
MAX_3_DIGIT_INT: Final[int] = (1 << 15) - 1
MAX_4_DIGIT_INT: Final[int] = (1 << 20) - 1
MAX_5_DIGIT_INT: Final[int] = (1 << 25) - 1
MAX_6_DIGIT_INT: Final[int] = (1 << 30) - 1
MAX_7_DIGIT_INT: Final[int] = MAX_UINT32

# Максимальное 7-значное значение, которое помещается в uint32
MAX_7_DIGIT_BASE32: Final[str] = "3ZZZZZZ"


# =============================================================================
# СЛУЖЕБНЫЕ СИМВОЛЫ
# =============================================================================

ZERO_DIGIT: Final[str] = "0"
HYPHEN: Final[str] = "-"

# Символы, которые trim/normalize считают ведущими нулями
ZERO_EQUIVALENTS: Final[frozenset[str]] = frozenset("0oO-")

# Цифры нуля среди zero-equivalents (без дефиса)
ZERO_DIGITS: Final[frozenset[str]] = frozenset("0oO")

# Look-alike коррекция
LOOKALIKES: Final[dict[str, str]] = {
    "O": "0",
    "o": "0",
    "I": "1",
    "i": "1",
    "L": "1",
    "l": "1",
}

_CANONICAL_SET: Final[frozenset[str]] = frozenset(ENCODE_SYMBOLS)

# Символы, которые normalize принимает на входе
NORMALIZE_ACCEPTED: Final[frozenset[str]] = frozenset(
    string.digits + string.ascii_letters + HYPHEN
) - {"u", "U"}

_ASCII_LOWERCASE: Final[frozenset[str]] = frozenset(string.ascii_lowercase)


# =============================================================================
# ОБРАТНАЯ ТАБЛИЦА DECODE
# =============================================================================


def _build_decode_table() -> tuple[Optional[int], ...]:
    """
    Построение обратной таблицы symbol → value.

    Индекс — код символа от 0 до ord('z') включительно. Неиспользуемые
    позиции содержат None.
    """
    table: list[Optional[int]] = [None] * (ord("z") + 1)

    for value, symbol in enumerate(ENCODE_SYMBOLS):
        table[ord(symbol)] = value
        table[ord(symbol.lower())] = value

    for symbol, replacement in LOOKALIKES.items():
        table[ord(symbol)] = ENCODE_SYMBOLS.index(replacement)

    return tuple(table)


DECODE_TABLE: Final[tuple[Optional[int], ...]] = _build_decode_table()


# =============================================================================
# ДОСТУП К ТАБЛИЦАМ
# =============================================================================


def decode_symbol(char: str) -> Optional[int]:
    """
    Значение цифры для одного символа.

    Args:
        char: Один символ

    Returns:
        Значение 0..31 или None, если символ не является цифрой значения

    Examples:
        >>> decode_symbol("Z")
        31
        >>> decode_symbol("l")
        1
        >>> decode_symbol("U") is None
        True
    """
    code = ord(char)
    if code >= len(DECODE_TABLE):
        return None
    return DECODE_TABLE[code]


def is_canonical_symbol(char: str) -> bool:
    """Символ входит в канонический алфавит (uppercase, без I/L/O/U)."""
    return char in _CANONICAL_SET


def ascii_upper(char: str) -> str:
    """
    ASCII case folding: a-z → A-Z, остальные символы без изменений.

    В отличие от str.upper() не трогает не-ASCII символы.
    """
    if char in _ASCII_LOWERCASE:
        return char.upper()
    return char
