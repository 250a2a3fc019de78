"""
Codec modules для crockford32

Кодирование, декодирование, нормализация, check-символы и pad/trim.
"""

# Encoder
from crockford32.core.codec.encoder import encode, validate_uint32

# Decoder
from crockford32.core.codec.decoder import decode, try_decode, will_fit

# Normalizer
from crockford32.core.codec.normalizer import normalize, try_normalize

# Checksum Engine
from crockford32.core.codec.checksum import (
    generate_check,
    is_valid,
    parse_check_symbol,
    try_parse_check_symbol,
)

# Padding / Trim
from crockford32.core.codec.padding import pad, trim

# Results
from crockford32.core.codec.results import (
    INVALID_BASE32,
    INVALID_CHECK,
    CheckParseResult,
    DecodeResult,
    NormalizeResult,
    display_check,
    display_value,
)

__all__ = [
    # Encoder
    "encode",
    "validate_uint32",
    # Decoder
    "decode",
    "try_decode",
    "will_fit",
    # Normalizer
    "normalize",
    "try_normalize",
    # Checksum Engine
    "generate_check",
    "is_valid",
    "parse_check_symbol",
    "try_parse_check_symbol",
    # Padding / Trim
    "pad",
    "trim",
    # Results — Sentinels
    "INVALID_BASE32",
    "INVALID_CHECK",
    # Results — Types
    "CheckParseResult",
    "DecodeResult",
    "NormalizeResult",
    # Results — Display
    "display_check",
    "display_value",
]
