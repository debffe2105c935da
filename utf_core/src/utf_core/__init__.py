"""Conversions between UTF-16 code units, UTF-8 bytes and Unicode scalar values."""
from .buffers import new_unit_buffer, units_from_bytes, units_to_bytes
from .decoder import utf8_decode, utf8_decode_to_string
from .encoder import (
    encode_scalars,
    encode_string,
    encode_utf8,
    utf16_encode,
    utf16_encode_rune,
    utf16_encode_string,
)
from .errors import BufferTooSmallError, CodeUnitRangeError, OddByteLengthError, UtfCoreError
from .sizer import utf8_count, utf8_rune_len, utf16_count, utf16_count_in_string, utf16_rune_len
from .surrogates import MAX_RUNE, REPLACEMENT_CHAR
from .version import __version__

__all__ = [
    "__version__",
    "MAX_RUNE",
    "REPLACEMENT_CHAR",
    "new_unit_buffer",
    "units_from_bytes",
    "units_to_bytes",
    "utf8_count",
    "utf8_rune_len",
    "utf8_decode",
    "utf8_decode_to_string",
    "utf16_rune_len",
    "utf16_count_in_string",
    "utf16_count",
    "utf16_encode_rune",
    "utf16_encode_string",
    "utf16_encode",
    "encode_scalars",
    "encode_string",
    "encode_utf8",
    "UtfCoreError",
    "BufferTooSmallError",
    "CodeUnitRangeError",
    "OddByteLengthError",
]
