"""
Normalizer — произвольный ввод → каноническая base-32 запись

Принимает небрежно набранный ввод и приводит его к виду, который Decoder
принимает без дополнительной очистки, либо детерминированно отклоняет.

Преобразования:
1. Ведущие нули (0, o, O) и дефисы отбрасываются
2. Внутренние дефисы удаляются (разделители, не цифры)
3. O/o → 0; I/i/L/l → 1
4. Строчные буквы → прописные

Normalizer не декодирует значение и не проверяет переполнение.

Вырожденный случай: ввод только из zero-equivalents и дефисов
- есть хотя бы одна цифра нуля ("00--oo") → "0"
- только дефисы ("---") → EmptyInputError
"""

from crockford32.core.alphabet import (
    HYPHEN,
    LOOKALIKES,
    NORMALIZE_ACCEPTED,
    ZERO_DIGIT,
    ZERO_DIGITS,
    ZERO_EQUIVALENTS,
    ascii_upper,
    is_canonical_symbol,
)
from crockford32.core.codec.results import INVALID_BASE32, NormalizeResult
from crockford32.core.errors import Base32Error, EmptyInputError, InvalidDigitError


# =============================================================================
# HELPERS
# =============================================================================


def _is_already_canonical(text: str) -> bool:
    """Fast path: все символы канонические и нет ведущего нуля."""
    if text[0] == ZERO_DIGIT:
        return False
    return all(is_canonical_symbol(char) for char in text)


def _first_significant_index(text: str) -> int | None:
    """Индекс первого символа, который не является zero-equivalent."""
    for index, char in enumerate(text):
        if char not in ZERO_EQUIVALENTS:
            return index
    return None


def _canonical_char(char: str) -> str:
    """Look-alike коррекция и ASCII uppercase для одного символа."""
    replacement = LOOKALIKES.get(char)
    if replacement is not None:
        return replacement
    return ascii_upper(char)


# =============================================================================
# NORMALIZE
# =============================================================================


def normalize(text: str) -> str:
    """
    Нормализация пользовательского ввода в каноническую base-32 запись.

    Args:
        text: Произвольная строка

    Returns:
        Каноническая запись (уже каноническая строка возвращается как есть)

    Raises:
        EmptyInputError: Пустая строка или строка только из дефисов
        InvalidDigitError: Символ вне цифр, букв (кроме u/U) и дефиса

    Examples:
        >>> normalize("AAA-bbb-o-l")
        'AAABBB01'
        >>> normalize("00-Example-00")
        'EXAMP1E00'
        >>> normalize("00--oo")
        '0'
    """
    if len(text) == 0:
        raise EmptyInputError()

    if _is_already_canonical(text):
        return text

    for char in text:
        if char not in NORMALIZE_ACCEPTED:
            raise InvalidDigitError(f"Invalid Base32 digit {char!r} in {text!r}")

    first = _first_significant_index(text)

    if first is None:
        if any(char in ZERO_DIGITS for char in text):
            return ZERO_DIGIT
        raise EmptyInputError(f"Base32 string {text!r} contains only separators")

    # Дефисы после first — внутренние разделители, в результат не попадают
    return "".join(_canonical_char(char) for char in text[first:] if char != HYPHEN)


def try_normalize(text: str) -> NormalizeResult:
    """
    Нормализация без исключений.

    Returns:
        NormalizeResult: value=INVALID_BASE32 и error при ошибке
    """
    try:
        normalized = normalize(text)
    except Base32Error as e:
        return NormalizeResult(value=INVALID_BASE32, error=e.code, details=str(e))

    return NormalizeResult(value=normalized, error=None)
