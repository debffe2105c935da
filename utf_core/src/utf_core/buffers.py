"""Code unit buffers and raw UTF-16 byte streams."""
from __future__ import annotations

import sys
from array import array
from typing import Sequence

from .errors import OddByteLengthError

_BYTE_ORDERS = {"little", "big"}


def new_unit_buffer(size: int) -> array:
    """Return a zero-filled buffer of ``size`` 16-bit code units."""
    if size < 0:
        raise ValueError(f"Buffer size must not be negative: {size}")
    return array("H", bytes(2 * size))


def _check_byteorder(byteorder: str) -> str:
    if byteorder not in _BYTE_ORDERS:
        raise ValueError(f"Unknown byte order '{byteorder}', expected 'little' or 'big'")
    return byteorder


def units_from_bytes(data: bytes | bytearray | memoryview, byteorder: str = "little") -> array:
    _check_byteorder(byteorder)
    raw = bytes(data)
    if len(raw) % 2:
        raise OddByteLengthError(f"UTF-16 data must have an even length, got {len(raw)} bytes")
    units = array("H")
    units.frombytes(raw)
    if byteorder != sys.byteorder:
        units.byteswap()
    return units


def units_to_bytes(units: Sequence[int], byteorder: str = "little") -> bytes:
    _check_byteorder(byteorder)
    packed = units if isinstance(units, array) and units.typecode == "H" else array("H", units)
    if byteorder != sys.byteorder:
        packed = array("H", packed)
        packed.byteswap()
    return packed.tobytes()


__all__ = ["new_unit_buffer", "units_from_bytes", "units_to_bytes"]
