"""
Тесты для Decoder

Проверяет:
1. Round-trip decode(encode(n)) == n (исчерпывающе 0..1023 и 100 000 случайных)
2. Look-alike эквивалентность и регистронезависимость
3. Границу переполнения ("3ZZZZZZ", "4000000", 8 цифр)
4. will_fit
5. Отказы: пустая строка, U/u, недопустимые символы, случайный мусор
6. try_decode
"""

import random

import pytest

from crockford32.core.alphabet import MAX_7_DIGIT_BASE32, MAX_UINT32
from crockford32.core.codec.decoder import decode, try_decode, will_fit
from crockford32.core.codec.encoder import encode
from crockford32.core.errors import (
    Base32Error,
    Base32OverflowError,
    EmptyInputError,
    ErrorCode,
    InvalidDigitError,
)

# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """decode(encode(n)) == n"""

    def test_exhaustive_small_range(self) -> None:
        for value in range(1024):
            assert decode(encode(value)) == value

    def test_random_full_range_lowercased(self) -> None:
        """100 000 случайных значений, запись в нижнем регистре"""
        rng = random.Random(424242)
        for _ in range(100_000):
            value = rng.randint(0, MAX_UINT32)
            assert decode(encode(value).lower()) == value

    def test_bounds(self) -> None:
        assert decode(encode(0)) == 0
        assert decode(encode(MAX_UINT32)) == MAX_UINT32


# =============================================================================
# ИЗВЕСТНЫЕ ЗНАЧЕНИЯ И LOOK-ALIKE
# =============================================================================


class TestDecodeKnownValues:
    """Тесты decode на известных значениях"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", 0),
            ("2T", 90),
            ("2t", 90),
            ("8GT", 8730),
            ("ZZ", 1023),
            ("N0NoN0", 705331872),
        ],
    )
    def test_known_values(self, text: str, expected: int) -> None:
        assert decode(text) == expected

    @pytest.mark.parametrize("text", ["O", "o", "0", "o0", "OO"])
    def test_zero_lookalikes(self, text: str) -> None:
        assert decode(text) == 0

    @pytest.mark.parametrize("text", ["I", "i", "L", "l", "1", "0l", "oI"])
    def test_one_lookalikes(self, text: str) -> None:
        assert decode(text) == 1

    def test_leading_zeros_tolerated(self) -> None:
        """Ведущие нули в записи до 7 цифр не мешают декодированию"""
        assert decode("0Z") == 31
        assert decode("000002T") == 90


# =============================================================================
# ПЕРЕПОЛНЕНИЕ
# =============================================================================


class TestOverflow:
    """Граница uint32"""

    def test_max_value_decodes(self) -> None:
        assert decode(MAX_7_DIGIT_BASE32) == 4294967295
        assert decode("3zzzzzz") == 4294967295

    def test_four_leading_overflows(self) -> None:
        with pytest.raises(Base32OverflowError):
            decode("4000000")

    @pytest.mark.parametrize("text", ["4ZZZZZZ", "5ZZZZZZ", "ZZZZZZZ", "ZZZZZZZZ", "10000000"])
    def test_too_big(self, text: str) -> None:
        with pytest.raises(Base32OverflowError, match="too big"):
            decode(text)

    def test_any_eight_digit_value_overflows(self) -> None:
        """Любые 8 цифр — переполнение, даже с ведущими нулями"""
        rng = random.Random(8)
        for _ in range(200):
            text = "".join(rng.choice("0123456789ABCDEFGHJKMNPQRSTVWXYZ") for _ in range(8))
            with pytest.raises(Base32OverflowError):
                decode(text)
        with pytest.raises(Base32OverflowError):
            decode("00000001")


class TestWillFit:
    """Тесты для will_fit"""

    @pytest.mark.parametrize(
        "text",
        ["Z", "0Z", "ZZ", "ZZZ", "ZZZZ", "ZZZZZ", "ZZZZZZ", "0ZZZZZZ", "1ZZZZZZ", "2ZZZZZZ", "3ZZZZZZ"],
    )
    def test_fits(self, text: str) -> None:
        assert will_fit(text)

    @pytest.mark.parametrize("text", ["4000000", "4ZZZZZZ", "5ZZZZZZ", "ZZZZZZZ", "ZZZZZZZZ"])
    def test_does_not_fit(self, text: str) -> None:
        assert not will_fit(text)

    def test_lookalike_leading_digit(self) -> None:
        """Старшая цифра оценивается по значению: o и l — это 0 и 1"""
        assert will_fit("oZZZZZZ")
        assert will_fit("lZZZZZZ")


# =============================================================================
# ОТКАЗЫ
# =============================================================================


class TestDecodeRejections:
    """Невалидный ввод"""

    def test_empty_input(self) -> None:
        with pytest.raises(EmptyInputError, match="empty"):
            decode("")

    @pytest.mark.parametrize("text", ["U", "u", "CUT", "fun", "BEEF!", "a b", "a*b", "\x00", "-1"])
    def test_invalid_digit(self, text: str) -> None:
        with pytest.raises(InvalidDigitError):
            decode(text)

    def test_errors_are_value_errors(self) -> None:
        """Ошибки кодека — ValueError с кодом"""
        with pytest.raises(ValueError):
            decode("U")
        try:
            decode("")
        except Base32Error as e:
            assert e.code == ErrorCode.EMPTY_INPUT

    def test_random_malformed_input_rejected(self) -> None:
        """Строка с хотя бы одним символом ниже '0' всегда отклоняется"""
        rng = random.Random(99)
        for _ in range(10_000):
            length = rng.randint(1, 30)
            chars = [chr(rng.randint(0, 127)) for _ in range(length)]
            chars[rng.randrange(length)] = chr(rng.randint(0, ord("0") - 1))
            with pytest.raises(Base32Error):
                decode("".join(chars))


# =============================================================================
# TRY_DECODE
# =============================================================================


class TestTryDecode:
    """Тесты для try_decode"""

    def test_success(self) -> None:
        result = try_decode("2T")
        assert result.ok
        assert result.value == 90
        assert result.error is None

    @pytest.mark.parametrize(
        "text,error",
        [
            ("", ErrorCode.EMPTY_INPUT),
            ("4000000", ErrorCode.OVERFLOW),
            ("CUT", ErrorCode.INVALID_DIGIT),
        ],
    )
    def test_failure(self, text: str, error: ErrorCode) -> None:
        result = try_decode(text)
        assert not result.ok
        assert result.value is None
        assert result.error == error
        assert result.details

    def test_zero_is_not_failure(self) -> None:
        """Значение 0 отличается от ошибки"""
        result = try_decode("0")
        assert result.ok
        assert result.value == 0
