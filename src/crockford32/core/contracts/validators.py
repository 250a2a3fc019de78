"""
Checked Code Contract — JSON граница для CheckedCode

Входящие и исходящие JSON данные CheckedCode проходят две проверки:
1. Форма и алфавит — JSON Schema (core/contracts/schema/checked_code.json)
2. Соответствие check-символа значению — модель CheckedCode

Принимаются только данные, прошедшие обе проверки.
"""

import json
import logging
from pathlib import Path
from typing import Any, Final, Mapping

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from crockford32.core.domain.code import CheckedCode

logger = logging.getLogger(__name__)

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
CHECKED_CODE_SCHEMA: Final[str] = "checked_code"

# Разобранные схемы по пути файла
_SCHEMAS: dict[Path, dict[str, Any]] = {}
_VALIDATOR: Draft202012Validator | None = None


# =============================================================================
# SCHEMA
# =============================================================================


def load_schema(name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Чтение и meta-валидация JSON Schema.

    Повторные вызовы для того же файла возвращают закэшированную схему.

    Raises:
        FileNotFoundError: Файла схемы нет
        ValueError: Файл не является валидной Draft 2020-12 схемой
    """
    path = schema_dir / f"{name}.json"
    if path in _SCHEMAS:
        return _SCHEMAS[path]

    if not path.is_file():
        raise FileNotFoundError(f"Schema not found: {path}")

    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

    logger.debug("Loaded schema %s from %s", name, path)
    _SCHEMAS[path] = schema
    return schema


def _checked_code_validator() -> Draft202012Validator:
    global _VALIDATOR
    if _VALIDATOR is None:
        _VALIDATOR = Draft202012Validator(load_schema(CHECKED_CODE_SCHEMA))
    return _VALIDATOR


# =============================================================================
# CHECKED CODE
# =============================================================================


def checked_code_errors(data: Any) -> list[str]:
    """
    Нарушения схемы checked_code в виде "путь: сообщение".

    Пустой список не означает, что check-символ соответствует значению.
    """
    messages = []
    for error in _checked_code_validator().iter_errors(data):
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return sorted(messages)


def validate_checked_code(data: Mapping[str, Any]) -> CheckedCode:
    """
    Проверка JSON данных и построение CheckedCode.

    Args:
        data: Например {"value": {"digits": "8GT"}, "check": {"symbol": "="}}

    Returns:
        Провалидированный CheckedCode

    Raises:
        jsonschema.ValidationError: Нарушена форма или алфавит
        pydantic.ValidationError: Check-символ не соответствует значению
    """
    error = best_match(_checked_code_validator().iter_errors(data))
    if error is not None:
        logger.debug("checked_code rejected by schema: %s", error.message)
        raise error

    return CheckedCode.model_validate(data)


def parse_checked_code_json(text: str | bytes) -> CheckedCode:
    """
    Разбор JSON документа checked_code.

    Raises:
        json.JSONDecodeError: Текст не является JSON
        jsonschema.ValidationError, pydantic.ValidationError: см. validate_checked_code
    """
    return validate_checked_code(json.loads(text))


def dump_checked_code(code: CheckedCode) -> dict[str, Any]:
    """
    Выгрузка CheckedCode в JSON-совместимый dict.

    Результат проверяется схемой checked_code перед возвратом.
    """
    data = code.model_dump()
    _checked_code_validator().validate(data)
    return data
