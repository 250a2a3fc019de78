"""Code Formatter — uint32 → пользовательский код

Объединяет Encoder и Checksum Engine:
- Каноническая запись значения
- Дополнение нулями до min_width
- Группировка дефисами по group_size символов (слева направо)
- Check-символ в конце (без разделителя)

Пример (group_size=2, with_check=True): 8730 → "8G-T="
"""

from dataclasses import dataclass

from crockford32.core.alphabet import HYPHEN
from crockford32.core.codec.checksum import generate_check
from crockford32.core.codec.encoder import encode
from crockford32.core.codec.padding import pad


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CodeFormat:
    """Конфигурация пользовательского кода.

    Общая для CodeFormatter и CodeParser: код, выпущенный форматтером,
    разбирается парсером с той же конфигурацией.
    """

    # Размер группы цифр между дефисами (0 — без группировки)
    group_size: int = 0

    # Минимальная ширина значения (дополняется "0" слева)
    min_width: int = 0

    # Добавлять check-символ в конец
    with_check: bool = True

    def __post_init__(self) -> None:
        if self.group_size < 0:
            raise ValueError(f"group_size must be non-negative, got {self.group_size}")
        if self.min_width < 0:
            raise ValueError(f"min_width must be non-negative, got {self.min_width}")


# =============================================================================
# FORMATTER
# =============================================================================


class CodeFormatter:
    """Выпуск пользовательских кодов для uint32 значений."""

    def __init__(self, config: CodeFormat | None = None):
        """
        Args:
            config: формат кода (опционально, используется default)
        """
        self.config = config or CodeFormat()

    def format(self, value: int) -> str:
        """Пользовательский код для значения.

        Args:
            value: целое в [0, 2^32 - 1]

        Returns:
            Код: группы цифр через дефис и check-символ (если включён)

        Raises:
            TypeError, ValueError: value не uint32
        """
        digits = pad(encode(value), self.config.min_width)
        code = self._group(digits)

        if self.config.with_check:
            code += generate_check(value)

        return code

    def _group(self, digits: str) -> str:
        size = self.config.group_size
        if size == 0:
            return digits
        return HYPHEN.join(digits[i : i + size] for i in range(0, len(digits), size))
