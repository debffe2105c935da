"""UTF-16 code units to UTF-8."""
from __future__ import annotations

from typing import Sequence

from .sizer import utf8_count
from .surrogates import UnitKind, iter_classified

REPLACEMENT_UTF8 = b"\xef\xbf\xbd"


def utf8_decode(units: Sequence[int]) -> bytes:
    """Convert a sequence of UTF-16 code units into UTF-8 bytes.

    Decoding never fails on malformed input: every lone surrogate becomes
    ``EF BF BD`` (U+FFFD) and consumes exactly one unit. The output length is
    always ``utf8_count(units)``.
    """

    buf = bytearray(utf8_count(units))
    j = 0
    for result in iter_classified(units):
        if result.kind is UnitKind.INVALID:
            encoded = REPLACEMENT_UTF8
        else:
            encoded = chr(result.scalar).encode("utf-8")
        buf[j : j + len(encoded)] = encoded
        j += len(encoded)
    return bytes(buf)


def utf8_decode_to_string(units: Sequence[int]) -> str:
    # the decoded bytes are well-formed by construction
    return utf8_decode(units).decode("utf-8")


__all__ = ["REPLACEMENT_UTF8", "utf8_decode", "utf8_decode_to_string"]
