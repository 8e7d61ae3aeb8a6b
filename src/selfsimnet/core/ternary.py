"""Base-3 digit sequences used to address Hanoi graph vertices.

A vertex of the Hanoi graph H_n is addressed by n trits (most significant
first); its vertex ID is the value of that sequence plus one.
"""
from __future__ import annotations

from typing import List, Sequence

Trits = List[int]


def encode_trits(digits: Sequence[int]) -> int:
    """Value of a most-significant-first base-3 digit sequence."""
    value = 0
    for d in digits:
        if d not in (0, 1, 2):
            raise ValueError(f"invalid base-3 digit {d!r}")
        value = 3 * value + d
    return value


def decode_trits(value: int, width: int) -> Trits:
    """Inverse of encode_trits, left-padded with zeros to *width* digits."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if width < 0:
        raise ValueError("width must be non-negative")
    digits = [0] * width
    for i in range(width - 1, -1, -1):
        value, digits[i] = divmod(value, 3)
    if value:
        raise ValueError(f"value does not fit in {width} trits")
    return digits


def address_to_vertex(digits: Sequence[int]) -> int:
    """1-based vertex ID of a ternary address."""
    return encode_trits(digits) + 1


def vertex_to_address(vertex: int, width: int) -> Trits:
    return decode_trits(vertex - 1, width)
