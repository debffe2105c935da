"""Exception hierarchy for utf-core."""
from __future__ import annotations


class UtfCoreError(Exception):
    """Base exception for all utf-core failures"""


class BufferTooSmallError(UtfCoreError, ValueError):
    """Raised when a destination buffer cannot hold the conversion output"""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Destination needs {required} code units but only {available} available")
        self.required = required
        self.available = available


class CodeUnitRangeError(UtfCoreError, ValueError):
    """Raised when a code unit does not fit in 16 bits"""

    def __init__(self, index: int, value: int) -> None:
        super().__init__(f"Code unit {value!r} at index {index} is outside 0..0xFFFF")
        self.index = index
        self.value = value


class OddByteLengthError(UtfCoreError, ValueError):
    """Raised when a raw UTF-16 byte stream has an odd number of bytes"""


__all__ = [
    "UtfCoreError",
    "BufferTooSmallError",
    "CodeUnitRangeError",
    "OddByteLengthError",
]
