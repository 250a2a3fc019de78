"""
Checksum Engine — check-символ по модулю 37

Check-символ = CHECK_SYMBOLS[n mod 37]. Модуль 37 — простое число больше 32,
поэтому алфавит check-символов шире алфавита значений на 5 символов: *~$=U.

Операции:
- generate_check: check-символ для значения
- is_valid: проверка пары (base-32 запись, check-символ)
- parse_check_symbol: разбор check-символа из пользовательского ввода
"""

from crockford32.core.alphabet import (
    CHECK_ONLY_SYMBOLS,
    CHECK_SYMBOLS,
    CHECKSUM_PRIME,
    LOOKALIKES,
    ascii_upper,
    decode_symbol,
)
from crockford32.core.codec.decoder import try_decode
from crockford32.core.codec.encoder import validate_uint32
from crockford32.core.codec.results import INVALID_CHECK, CheckParseResult
from crockford32.core.errors import (
    Base32Error,
    InvalidCheckDigitError,
    InvalidCheckLengthError,
)


def generate_check(value: int) -> str:
    """
    Check-символ для значения.

    Args:
        value: Целое в [0, 2^32 - 1]

    Returns:
        Один из 0-9, A-Z (канонические), *, ~, $, = или U

    Examples:
        >>> generate_check(12)
        'C'
        >>> generate_check(36)
        'U'
    """
    validate_uint32(value)
    return CHECK_SYMBOLS[value % CHECKSUM_PRIME]


def is_valid(value: str, check: str) -> bool:
    """
    Проверка base-32 записи против check-символа.

    Ошибка декодирования value делает пару невалидной.
    """
    result = try_decode(value)
    if not result.ok:
        return False
    return generate_check(result.value) == check


def parse_check_symbol(text: str) -> str:
    """
    Разбор check-символа из пользовательского ввода.

    Применяет ту же коррекцию, что и Normalizer: uppercase, O → 0, I/L → 1.
    В отличие от значений, U/u допустим.

    Args:
        text: Строка из одного символа

    Returns:
        Нормализованный check-символ

    Raises:
        InvalidCheckLengthError: Длина не равна 1
        InvalidCheckDigitError: Символ вне расширенного алфавита
    """
    if len(text) != 1:
        raise InvalidCheckLengthError()

    upper = ascii_upper(text)
    if decode_symbol(text) is None and upper not in CHECK_ONLY_SYMBOLS:
        raise InvalidCheckDigitError(
            f"The input value {text!r} is not a valid checksum digit"
        )

    return LOOKALIKES.get(upper, upper)


def try_parse_check_symbol(text: str) -> CheckParseResult:
    """
    Разбор check-символа без исключений.

    Returns:
        CheckParseResult: value=INVALID_CHECK и error при ошибке
    """
    try:
        check = parse_check_symbol(text)
    except Base32Error as e:
        return CheckParseResult(value=INVALID_CHECK, error=e.code, details=str(e))

    return CheckParseResult(value=check, error=None)
