"""
Tests for Checked Code Contract

Тестирование JSON границы CheckedCode:
- Загрузка и meta-валидация схемы
- Валидация правильных данных
- Детекция нарушений required полей, лишних полей и типов
- Детекция нарушений pattern (алфавит, ведущие нули, граница uint32)
- Отказ при несоответствии check-символа значению
- Выгрузка CheckedCode по контракту
"""

import json
import random

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as ModelValidationError

from crockford32.core.alphabet import MAX_UINT32
from crockford32.core.contracts import (
    CHECKED_CODE_SCHEMA,
    checked_code_errors,
    dump_checked_code,
    load_schema,
    parse_checked_code_json,
    validate_checked_code,
)
from crockford32.core.domain import CheckedCode


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_checked_code():
    """Валидный checked_code для 8730."""
    return {"value": {"digits": "8GT"}, "check": {"symbol": "="}}


# =============================================================================
# SCHEMA
# =============================================================================


class TestLoadSchema:
    """Тесты для load_schema"""

    def test_checked_code_schema_is_valid(self):
        schema = load_schema(CHECKED_CODE_SCHEMA)
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "CheckedCode"

    def test_schema_cached(self):
        assert load_schema(CHECKED_CODE_SCHEMA) is load_schema(CHECKED_CODE_SCHEMA)

    def test_missing_schema(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist", tmp_path)

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema("broken", tmp_path)


# =============================================================================
# VALIDATE CHECKED CODE
# =============================================================================


class TestValidateCheckedCode:
    """Тесты для validate_checked_code"""

    def test_valid(self, valid_checked_code):
        code = validate_checked_code(valid_checked_code)
        assert isinstance(code, CheckedCode)
        assert code.to_int() == 8730
        assert str(code) == "8GT="

    @pytest.mark.parametrize("value", [0, 31, 32, 36, 8730, MAX_UINT32])
    def test_valid_values(self, value):
        data = CheckedCode.from_int(value).model_dump()
        assert validate_checked_code(data).to_int() == value

    def test_missing_value(self, valid_checked_code):
        del valid_checked_code["value"]
        with pytest.raises(ValidationError):
            validate_checked_code(valid_checked_code)

    def test_missing_symbol(self, valid_checked_code):
        valid_checked_code["check"] = {}
        with pytest.raises(ValidationError):
            validate_checked_code(valid_checked_code)

    def test_additional_property(self, valid_checked_code):
        valid_checked_code["extra"] = 1
        with pytest.raises(ValidationError):
            validate_checked_code(valid_checked_code)

    def test_wrong_type(self, valid_checked_code):
        valid_checked_code["value"]["digits"] = 8730
        with pytest.raises(ValidationError):
            validate_checked_code(valid_checked_code)

    @pytest.mark.parametrize(
        "digits",
        ["", "8gt", "00", "02T", "CUT", "1I", "8G-T", "4000000", "ZZZZZZZ", "10000000"],
    )
    def test_invalid_digits(self, valid_checked_code, digits):
        valid_checked_code["value"]["digits"] = digits
        with pytest.raises(ValidationError):
            validate_checked_code(valid_checked_code)

    @pytest.mark.parametrize("symbol", ["", "u", "a", "I", "O", "-", "==", "!"])
    def test_invalid_symbols(self, valid_checked_code, symbol):
        valid_checked_code["check"]["symbol"] = symbol
        with pytest.raises(ValidationError):
            validate_checked_code(valid_checked_code)

    @pytest.mark.parametrize("symbol", ["0", "U", "*", "Z"])
    def test_check_mismatch_rejected(self, valid_checked_code, symbol):
        """Форма верна, но check-символ не соответствует 8GT"""
        valid_checked_code["check"]["symbol"] = symbol
        assert checked_code_errors(valid_checked_code) == []
        with pytest.raises(ModelValidationError, match="does not match"):
            validate_checked_code(valid_checked_code)


class TestCheckedCodeErrors:
    """Тесты для checked_code_errors"""

    def test_valid_data_has_no_errors(self, valid_checked_code):
        assert checked_code_errors(valid_checked_code) == []

    def test_reports_all_violations_with_paths(self):
        data = {"value": {"digits": "u"}, "check": {"symbol": "!!"}}
        errors = checked_code_errors(data)
        assert len(errors) == 2
        assert errors[0].startswith("check/symbol: ")
        assert errors[1].startswith("value/digits: ")

    def test_root_violation(self):
        errors = checked_code_errors([])
        assert errors == ["<root>: [] is not of type 'object'"]


# =============================================================================
# JSON ROUND TRIP
# =============================================================================


class TestJsonBoundary:
    """parse_checked_code_json и dump_checked_code"""

    def test_parse_json(self):
        code = parse_checked_code_json('{"value": {"digits": "2T"}, "check": {"symbol": "G"}}')
        assert code.to_int() == 90

    def test_parse_json_rejects_mismatch(self):
        with pytest.raises(ModelValidationError):
            parse_checked_code_json('{"value": {"digits": "2T"}, "check": {"symbol": "Z"}}')

    def test_parse_json_rejects_malformed(self):
        with pytest.raises(json.JSONDecodeError):
            parse_checked_code_json("{value: 2T}")

    def test_dump_matches_contract(self):
        rng = random.Random(2020)
        values = [0, 1, 31, 32, 36, MAX_UINT32] + [rng.randint(0, MAX_UINT32) for _ in range(500)]
        for value in values:
            code = CheckedCode.from_int(value)
            data = dump_checked_code(code)
            assert validate_checked_code(data) == code

    def test_dump_is_json_serializable(self):
        data = dump_checked_code(CheckedCode.from_int(8730))
        assert json.loads(json.dumps(data)) == {"value": {"digits": "8GT"}, "check": {"symbol": "="}}
