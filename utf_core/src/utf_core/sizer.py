"""Exact output sizes for conversions, computed without allocating output."""
from __future__ import annotations

from typing import Iterator, Sequence

from .surrogates import MAX_RUNE, SURR1, SURR3, SURR_SELF, UnitKind, iter_classified

# UTF-8 length of U+FFFD
REPLACEMENT_UTF8_LEN = 3


def utf8_rune_len(scalar: int) -> int:
    """Return the UTF-8 length of ``scalar``, or -1 if it is not a valid scalar."""
    if scalar < 0:
        return -1
    if scalar < 0x80:
        return 1
    if scalar < 0x800:
        return 2
    if SURR1 <= scalar < SURR3:
        return -1
    if scalar < SURR_SELF:
        return 3
    if scalar <= MAX_RUNE:
        return 4
    return -1


def utf8_count(units: Sequence[int]) -> int:
    """Number of bytes :func:`utf_core.decoder.utf8_decode` produces for ``units``."""
    total = 0
    for result in iter_classified(units):
        if result.kind is UnitKind.INVALID:
            total += REPLACEMENT_UTF8_LEN
        else:
            total += utf8_rune_len(result.scalar)
    return total


def utf16_rune_len(scalar: int) -> int:
    # out of range scalars are written as a single U+FFFD
    if scalar < SURR_SELF or scalar > MAX_RUNE:
        return 1
    return 2


def iter_utf8_scalars(src: bytes | bytearray | memoryview) -> Iterator[int]:
    """Yield the scalars of a UTF-8 byte sequence, replacing malformed input with U+FFFD."""
    for char in bytes(src).decode("utf-8", errors="replace"):
        yield ord(char)


def utf16_count_in_string(src: str) -> int:
    return sum(utf16_rune_len(ord(char)) for char in src)


def utf16_count(src: bytes | bytearray | memoryview) -> int:
    return sum(utf16_rune_len(scalar) for scalar in iter_utf8_scalars(src))


__all__ = [
    "REPLACEMENT_UTF8_LEN",
    "utf8_rune_len",
    "utf8_count",
    "utf16_rune_len",
    "iter_utf8_scalars",
    "utf16_count_in_string",
    "utf16_count",
]
