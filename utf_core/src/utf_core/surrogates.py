"""Surrogate pair rules shared by the UTF-16 decoder and encoder.

A code unit sequence is read left to right, one unit or one consumed pair at a
time. Every position falls into exactly one :class:`UnitKind`:

``ORDINARY``
    the unit is below ``0xD800`` or at/above ``0xE000`` and stands for itself.
``PAIR``
    a lead surrogate immediately followed by a trail surrogate; both units are
    consumed and yield one scalar in ``0x10000..0x10FFFF``.
``INVALID``
    any other surrogate (lone lead, lone trail, lead at the end). Exactly one
    unit is consumed and the replacement character is produced.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence, Tuple

from .errors import CodeUnitRangeError

REPLACEMENT_CHAR = 0xFFFD
MAX_RUNE = 0x10FFFF

# 0xD800-0xDC00 carries the high 10 bits of a pair, 0xDC00-0xE000 the low 10
# bits. The scalar is those 20 bits plus 0x10000.
SURR1 = 0xD800
SURR2 = 0xDC00
SURR3 = 0xE000
SURR_SELF = 0x10000

MAX_UNIT = 0xFFFF


class UnitKind(str, Enum):
    ORDINARY = "ORDINARY"
    PAIR = "PAIR"
    INVALID = "INVALID"


@dataclass(slots=True, frozen=True)
class Classification:
    kind: UnitKind
    scalar: int
    consumed: int


def is_lead(unit: int) -> bool:
    return SURR1 <= unit < SURR2


def is_trail(unit: int) -> bool:
    return SURR2 <= unit < SURR3


def is_surrogate(unit: int) -> bool:
    return SURR1 <= unit < SURR3


def decode_pair(lead: int, trail: int) -> int:
    """Combine a lead and a trail surrogate into one scalar value.

    Returns :data:`REPLACEMENT_CHAR` when the two units are not a valid pair.
    """

    if is_lead(lead) and is_trail(trail):
        return (((lead - SURR1) << 10) | (trail - SURR2)) + SURR_SELF
    return REPLACEMENT_CHAR


def encode_pair(scalar: int) -> Tuple[int, int]:
    """Split a supplementary scalar into its lead and trail surrogates."""

    if scalar < SURR_SELF or scalar > MAX_RUNE:
        return REPLACEMENT_CHAR, REPLACEMENT_CHAR
    scalar -= SURR_SELF
    return SURR1 + ((scalar >> 10) & 0x3FF), SURR2 + (scalar & 0x3FF)


def _unit_at(units: Sequence[int], index: int) -> int:
    unit = units[index]
    if unit < 0 or unit > MAX_UNIT:
        raise CodeUnitRangeError(index, unit)
    return unit


def classify(units: Sequence[int], index: int) -> Classification:
    """Classify the code unit at ``index``, looking ahead one unit for pairs."""

    unit = _unit_at(units, index)
    if unit < SURR1 or unit >= SURR3:
        return Classification(UnitKind.ORDINARY, unit, 1)
    if is_lead(unit) and index + 1 < len(units):
        following = _unit_at(units, index + 1)
        if is_trail(following):
            return Classification(UnitKind.PAIR, decode_pair(unit, following), 2)
    return Classification(UnitKind.INVALID, REPLACEMENT_CHAR, 1)


def iter_classified(units: Sequence[int]) -> Iterator[Classification]:
    index = 0
    length = len(units)
    while index < length:
        result = classify(units, index)
        yield result
        index += result.consumed


def iter_scalars(units: Sequence[int]) -> Iterator[int]:
    for result in iter_classified(units):
        yield result.scalar


__all__ = [
    "REPLACEMENT_CHAR",
    "MAX_RUNE",
    "SURR1",
    "SURR2",
    "SURR3",
    "SURR_SELF",
    "UnitKind",
    "Classification",
    "is_lead",
    "is_trail",
    "is_surrogate",
    "decode_pair",
    "encode_pair",
    "classify",
    "iter_classified",
    "iter_scalars",
]
