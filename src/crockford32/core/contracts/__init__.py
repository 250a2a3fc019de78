"""
Contract Validation Module

JSON граница crockford32: схема checked_code и модель CheckedCode.
"""

from .validators import (
    CHECKED_CODE_SCHEMA,
    SCHEMA_DIR,
    checked_code_errors,
    dump_checked_code,
    load_schema,
    parse_checked_code_json,
    validate_checked_code,
)

__all__ = [
    # Constants
    "CHECKED_CODE_SCHEMA",
    "SCHEMA_DIR",
    # Functions
    "checked_code_errors",
    "dump_checked_code",
    "load_schema",
    "parse_checked_code_json",
    "validate_checked_code",
]
