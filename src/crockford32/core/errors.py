"""
Errors — таксономия ошибок кодека

Каждая ошибка несёт машиночитаемый ErrorCode. Исключения наследуют
ValueError: некорректный ввод — это невалидное значение аргумента.

Функции кодека существуют в двух формах:
- Raising (decode, normalize, ...) — бросают Base32Error
- try_* (try_decode, ...) — возвращают result с sentinel-значением и ErrorCode
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorCode(str, Enum):
    """Код ошибки кодека"""

    EMPTY_INPUT = "empty_input"
    INVALID_DIGIT = "invalid_digit"
    OVERFLOW = "overflow"
    INVALID_LENGTH = "invalid_length"
    CHECK_MISMATCH = "check_mismatch"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Base32Error(ValueError):
    """
    Базовое исключение кодека.

    Атрибут code позволяет обрабатывать ошибки без разбора текста сообщения.
    """

    code: ErrorCode
    default_message: str = "Base32 error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyInputError(Base32Error):
    """Пустой ввод там, где требуется значение."""

    code = ErrorCode.EMPTY_INPUT
    default_message = "Cannot decode empty Base32 string"


class InvalidDigitError(Base32Error):
    """Символ вне допустимого алфавита."""

    code = ErrorCode.INVALID_DIGIT
    default_message = "Invalid Base32 digit"


class Base32OverflowError(Base32Error):
    """Значение не помещается в uint32."""

    code = ErrorCode.OVERFLOW
    default_message = "Base 32 value is too big for a 32-bit unsigned integer"


class InvalidCheckLengthError(Base32Error):
    """Check-строка не из одного символа."""

    code = ErrorCode.INVALID_LENGTH
    default_message = "A check string must be exactly 1 character long"


class InvalidCheckDigitError(InvalidDigitError):
    """Символ не входит в расширенный алфавит check-символов."""

    default_message = "The input value is not a valid checksum digit"


class CheckMismatchError(Base32Error):
    """Check-символ не соответствует декодированному значению."""

    code = ErrorCode.CHECK_MISMATCH
    default_message = "Check symbol does not match the decoded value"
