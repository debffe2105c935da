"""Unicode scalars (from ``str`` or UTF-8 bytes) to UTF-16 code units."""
from __future__ import annotations

from array import array
from typing import Iterable, MutableSequence

from .buffers import new_unit_buffer
from .errors import BufferTooSmallError
from .sizer import iter_utf8_scalars, utf16_count, utf16_count_in_string, utf16_rune_len
from .surrogates import MAX_RUNE, REPLACEMENT_CHAR, SURR1, SURR3, SURR_SELF, encode_pair


def _check_offset(offset: int) -> None:
    # negative indexes would wrap around to the end of dst
    if offset < 0:
        raise ValueError(f"Offset must not be negative: {offset}")


def utf16_encode_rune(dst: MutableSequence[int], scalar: int, offset: int = 0) -> int:
    """Write ``scalar`` into ``dst`` starting at ``offset``.

    Returns the number of units written: 2 for a supplementary scalar, 1 for
    everything else. Values that are not valid scalars (negative, surrogate or
    above ``0x10FFFF``) are written as U+FFFD.

    Raises :class:`BufferTooSmallError` without touching ``dst`` when the
    remaining capacity cannot hold the units ``scalar`` needs, and
    :class:`ValueError` for a negative ``offset``.
    """

    _check_offset(offset)
    required = utf16_rune_len(scalar)
    available = len(dst) - offset
    if available < required:
        raise BufferTooSmallError(required, max(available, 0))
    if 0 <= scalar < SURR1 or SURR3 <= scalar < SURR_SELF:
        dst[offset] = scalar
        return 1
    if SURR_SELF <= scalar <= MAX_RUNE:
        dst[offset], dst[offset + 1] = encode_pair(scalar)
        return 2
    dst[offset] = REPLACEMENT_CHAR
    return 1


def encode_scalars(dst: MutableSequence[int], scalars: Iterable[int], offset: int = 0) -> int:
    """Encode each scalar of ``scalars`` into ``dst`` and return the units written."""

    _check_offset(offset)
    if offset > len(dst):
        raise BufferTooSmallError(1, 0)
    cursor = offset
    for scalar in scalars:
        cursor += utf16_encode_rune(dst, scalar, cursor)
    return cursor - offset


def _check_capacity(dst: MutableSequence[int], required: int) -> None:
    if len(dst) < required:
        raise BufferTooSmallError(required, len(dst))


def utf16_encode_string(dst: MutableSequence[int], src: str) -> int:
    _check_capacity(dst, utf16_count_in_string(src))
    return encode_scalars(dst, (ord(char) for char in src))


def utf16_encode(dst: MutableSequence[int], src: bytes | bytearray | memoryview) -> int:
    """Encode UTF-8 ``src`` into ``dst``.

    ``dst`` must hold at least ``utf16_count(src)`` units; a shorter buffer is
    rejected before anything is written. Malformed UTF-8 is replaced with
    U+FFFD. Units of ``dst`` past the returned count are left as they were.
    """

    _check_capacity(dst, utf16_count(src))
    return encode_scalars(dst, iter_utf8_scalars(src))


def encode_string(src: str) -> array:
    dst = new_unit_buffer(utf16_count_in_string(src))
    utf16_encode_string(dst, src)
    return dst


def encode_utf8(src: bytes | bytearray | memoryview) -> array:
    dst = new_unit_buffer(utf16_count(src))
    utf16_encode(dst, src)
    return dst


__all__ = [
    "utf16_encode_rune",
    "encode_scalars",
    "utf16_encode_string",
    "utf16_encode",
    "encode_string",
    "encode_utf8",
]
