"""Code Parser — пользовательский код → uint32

Обратный поток к CodeFormatter:
1. Удаление пробелов по краям
2. Отделение check-символа (последний символ, если with_check)
3. Normalizer → Decoder
4. Сверка check-символа с generate_check

Отказ на любом шаге — ParsedCode с accepted=False и кодом ошибки.
Частичного успеха нет.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from crockford32.codes.formatter import CodeFormat
from crockford32.core.codec.checksum import generate_check, parse_check_symbol
from crockford32.core.codec.decoder import decode
from crockford32.core.codec.normalizer import normalize
from crockford32.core.codec.results import INVALID_BASE32, INVALID_CHECK
from crockford32.core.errors import (
    Base32Error,
    CheckMismatchError,
    EmptyInputError,
    ErrorCode,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ParsedCode:
    """Результат разбора пользовательского кода."""

    accepted: bool
    value: Optional[int]

    # Канонические части кода
    canonical: str  # INVALID_BASE32 если не дошли до нормализации
    check: str  # INVALID_CHECK если check не разобран или отключён

    error: Optional[ErrorCode]
    reason: str

    # Исключение шага, на котором код отклонён
    cause: Optional[Base32Error] = field(default=None, repr=False, compare=False)


# =============================================================================
# PARSER
# =============================================================================


class CodeParser:
    """Разбор и проверка пользовательских кодов.

    Порядок проверок:
    1. Check-символ (формат)
    2. Нормализация значения
    3. Декодирование (переполнение, недопустимые цифры)
    4. Соответствие check-символа значению
    """

    def __init__(self, config: CodeFormat | None = None):
        """
        Args:
            config: формат кода (опционально, используется default)
        """
        self.config = config or CodeFormat()

    def parse(self, text: str) -> ParsedCode:
        """Разбор кода.

        Args:
            text: пользовательский ввод

        Returns:
            ParsedCode с решением о допуске
        """
        text = text.strip()

        # 1. Check-символ
        check = INVALID_CHECK
        value_text = text
        if self.config.with_check:
            if len(text) == 0:
                return self._rejected(
                    "empty_code", EmptyInputError("Cannot parse empty code"), text
                )
            value_text, check_text = text[:-1], text[-1]
            try:
                check = parse_check_symbol(check_text)
            except Base32Error as e:
                return self._rejected(f"invalid_check: {e}", e, text)

        # 2. Нормализация
        try:
            canonical = normalize(value_text)
        except Base32Error as e:
            return self._rejected(f"invalid_value: {e}", e, text, check=check)

        # 3. Декодирование
        try:
            value = decode(canonical)
        except Base32Error as e:
            return self._rejected(
                f"invalid_value: {e}", e, text, canonical=canonical, check=check
            )

        # 4. Сверка check-символа
        if self.config.with_check:
            expected = generate_check(value)
            if check != expected:
                mismatch = CheckMismatchError(
                    f"{check!r} != {expected!r} for {canonical!r}"
                )
                return self._rejected(
                    f"check_mismatch: {mismatch}",
                    mismatch,
                    text,
                    canonical=canonical,
                    check=check,
                )

        return ParsedCode(
            accepted=True,
            value=value,
            canonical=canonical,
            check=check,
            error=None,
            reason="",
        )

    def parse_or_raise(self, text: str) -> int:
        """Разбор кода с исключением при отказе.

        Raises:
            Base32Error: исключение шага, на котором код отклонён
        """
        result = self.parse(text)
        if not result.accepted:
            raise result.cause
        return result.value

    def _rejected(
        self,
        reason: str,
        cause: Base32Error,
        text: str,
        canonical: str = INVALID_BASE32,
        check: str = INVALID_CHECK,
    ) -> ParsedCode:
        logger.debug("Rejected code %r: %s", text, reason)
        return ParsedCode(
            accepted=False,
            value=None,
            canonical=canonical,
            check=check,
            error=cause.code,
            reason=reason,
            cause=cause,
        )
