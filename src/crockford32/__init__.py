"""
crockford32 — Crockford base-32 notation for unsigned 32-bit integers.

Translates uint32 values to and from a human-friendly, error-resistant
base-32 text form (http://www.crockford.com/wrmg/base32.html) and computes
mod-37 check symbols that catch common transcription errors.

This is not a byte-string encoding like base64.b32encode: only integers in
[0, 2**32 - 1] are supported.

Example:
    >>> from crockford32 import encode, decode, generate_check, is_valid
    >>> encode(8730)
    '8GT'
    >>> decode("8gt")
    8730
    >>> is_valid("8GT", generate_check(8730))
    True
"""

from crockford32.core.alphabet import (
    CHECK_SYMBOLS,
    ENCODE_SYMBOLS,
    MAX_7_DIGIT_BASE32,
    MAX_UINT32,
)
from crockford32.core.codec import (
    INVALID_BASE32,
    INVALID_CHECK,
    CheckParseResult,
    DecodeResult,
    NormalizeResult,
    decode,
    display_check,
    display_value,
    encode,
    generate_check,
    is_valid,
    normalize,
    pad,
    parse_check_symbol,
    trim,
    try_decode,
    try_normalize,
    try_parse_check_symbol,
    will_fit,
)
from crockford32.core.errors import (
    Base32Error,
    Base32OverflowError,
    CheckMismatchError,
    EmptyInputError,
    ErrorCode,
    InvalidCheckDigitError,
    InvalidCheckLengthError,
    InvalidDigitError,
)

__version__ = "0.0.3"

__all__ = [
    # Alphabet
    "CHECK_SYMBOLS",
    "ENCODE_SYMBOLS",
    "MAX_7_DIGIT_BASE32",
    "MAX_UINT32",
    # Codec
    "decode",
    "encode",
    "generate_check",
    "is_valid",
    "normalize",
    "pad",
    "parse_check_symbol",
    "trim",
    "try_decode",
    "try_normalize",
    "try_parse_check_symbol",
    "will_fit",
    # Results
    "INVALID_BASE32",
    "INVALID_CHECK",
    "CheckParseResult",
    "DecodeResult",
    "NormalizeResult",
    "display_check",
    "display_value",
    # Errors
    "Base32Error",
    "Base32OverflowError",
    "CheckMismatchError",
    "EmptyInputError",
    "ErrorCode",
    "InvalidCheckDigitError",
    "InvalidCheckLengthError",
    "InvalidDigitError",
]
