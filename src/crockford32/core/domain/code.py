"""
Code — value objects для base-32 значений и check-символов

Immutable Pydantic модели поверх функций кодека:
- Base32Value: валидированная каноническая запись uint32
- CheckSymbol: один символ расширенного алфавита
- CheckedCode: пара (значение, check-символ), check обязан совпадать

CheckedCode.model_dump() соответствует контракту checked_code.json.
"""

from pydantic import BaseModel, Field, field_validator

from crockford32.core.alphabet import (
    CHECK_SYMBOLS,
    MAX_7_DIGIT_BASE32,
    MAX_DIGITS,
    ZERO_DIGIT,
    is_canonical_symbol,
)
from crockford32.core.codec.checksum import generate_check, is_valid, parse_check_symbol
from crockford32.core.codec.decoder import decode, will_fit
from crockford32.core.codec.encoder import encode
from crockford32.core.codec.normalizer import normalize
from crockford32.core.codec.padding import pad
from crockford32.core.errors import Base32OverflowError


# =============================================================================
# CHECK SYMBOL
# =============================================================================


class CheckSymbol(BaseModel):
    """
    Check-символ.

    Один символ из 37-символьного алфавита: канонический + *~$=U.
    """

    symbol: str = Field(..., min_length=1, max_length=1, description="Check-символ")

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Проверка принадлежности расширенному алфавиту (без коррекции)."""
        if v not in CHECK_SYMBOLS:
            raise ValueError(f"symbol {v!r} is not a check symbol")
        return v

    @classmethod
    def for_int(cls, value: int) -> "CheckSymbol":
        """Check-символ для целого значения."""
        return cls(symbol=generate_check(value))

    @classmethod
    def parse(cls, text: str) -> "CheckSymbol":
        """
        Разбор пользовательского ввода с коррекцией регистра и look-alike.

        Raises:
            InvalidCheckLengthError, InvalidCheckDigitError
        """
        return cls(symbol=parse_check_symbol(text))

    def __str__(self) -> str:
        return self.symbol


# =============================================================================
# BASE32 VALUE
# =============================================================================


class Base32Value(BaseModel):
    """
    Каноническая base-32 запись uint32.

    Инварианты:
    - Только символы канонического алфавита (uppercase, без I/L/O/U)
    - Нет ведущего "0", кроме самого значения "0"
    - 1..7 цифр, значение помещается в uint32 (не больше "3ZZZZZZ")
    """

    digits: str = Field(
        ..., min_length=1, max_length=MAX_DIGITS, description="Каноническая base-32 запись"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_canonical(cls, v: str) -> str:
        """Проверка канонической формы."""
        invalid = "".join(char for char in v if not is_canonical_symbol(char))
        if invalid:
            raise ValueError(f"digits contain non-canonical symbols: {invalid!r}")

        if len(v) > 1 and v[0] == ZERO_DIGIT:
            raise ValueError(f"digits {v!r} must not be zero-padded")

        if not will_fit(v):
            raise ValueError(f"digits {v!r} exceed uint32 range (max {MAX_7_DIGIT_BASE32})")

        return v

    @classmethod
    def from_int(cls, value: int) -> "Base32Value":
        """Кодирование целого."""
        return cls(digits=encode(value))

    @classmethod
    def parse(cls, text: str) -> "Base32Value":
        """
        Разбор пользовательского ввода через normalize.

        Raises:
            EmptyInputError, InvalidDigitError: ошибки нормализации
            Base32OverflowError: нормализованное значение не помещается в uint32
        """
        digits = normalize(text)
        if not will_fit(digits):
            raise Base32OverflowError(
                f"Base 32 value {digits!r} is too big for a 32-bit unsigned integer "
                f"(max {MAX_7_DIGIT_BASE32})"
            )
        return cls(digits=digits)

    def to_int(self) -> int:
        """Декодированное значение."""
        return decode(self.digits)

    def check_symbol(self) -> CheckSymbol:
        """Check-символ для этого значения."""
        return CheckSymbol.for_int(self.to_int())

    def is_valid(self, check: CheckSymbol) -> bool:
        """Проверка check-символа."""
        return is_valid(self.digits, check.symbol)

    def padded(self, width: int) -> str:
        """Запись, дополненная нулями слева до width."""
        return pad(self.digits, width)

    def __str__(self) -> str:
        return self.digits


# =============================================================================
# CHECKED CODE
# =============================================================================


class CheckedCode(BaseModel):
    """
    Значение вместе с check-символом.

    Check-символ обязан соответствовать значению: пару с неверным
    check-символом создать нельзя.
    """

    value: Base32Value = Field(..., description="Base-32 значение")
    check: CheckSymbol = Field(..., description="Check-символ значения")

    model_config = {"frozen": True}

    @field_validator("check")
    @classmethod
    def validate_check_matches(cls, v: CheckSymbol, info) -> CheckSymbol:
        """Проверка, что check-символ соответствует value"""
        if "value" in info.data:
            value: Base32Value = info.data["value"]
            if not value.is_valid(v):
                raise ValueError(
                    f"check {v.symbol!r} does not match value {value.digits!r} "
                    f"(expected {value.check_symbol().symbol!r})"
                )
        return v

    @classmethod
    def from_int(cls, value: int) -> "CheckedCode":
        """Код для целого значения."""
        base32 = Base32Value.from_int(value)
        return cls(value=base32, check=base32.check_symbol())

    def to_int(self) -> int:
        return self.value.to_int()

    def __str__(self) -> str:
        return f"{self.value.digits}{self.check.symbol}"
