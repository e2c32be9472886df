"""Bit-level access and search on truth tables."""

from __future__ import annotations

from collections.abc import Iterator


def _check_index(tt, index: int) -> None:
    if not 0 <= index < tt.num_bits():
        raise IndexError(f"bit index {index} out of range for {tt.num_bits()} bits")


def _check_same_size(first, second) -> None:
    if first.num_bits() != second.num_bits():
        raise ValueError("truth tables differ in size")


def set_bit(tt, index: int) -> None:
    _check_index(tt, index)
    tt.bits |= 1 << index


def get_bit(tt, index: int) -> int:
    """Return 1 if the bit is set, otherwise 0."""
    _check_index(tt, index)
    return (tt.bits >> index) & 1


def clear_bit(tt, index: int) -> None:
    _check_index(tt, index)
    tt.bits &= ~(1 << index)


def flip_bit(tt, index: int) -> None:
    _check_index(tt, index)
    tt.bits ^= 1 << index


def clear(tt) -> None:
    tt.bits = 0


def count_ones(tt) -> int:
    return tt.bits.bit_count()


def count_zeros(tt) -> int:
    return tt.num_bits() - count_ones(tt)


def iter_one_bits(tt) -> Iterator[int]:
    """Indexes of set bits in ascending order."""
    remaining = tt.bits
    while remaining:
        lowest = remaining & -remaining
        yield lowest.bit_length() - 1
        remaining ^= lowest


def _first_one(value: int) -> int:
    return (value & -value).bit_length() - 1 if value else -1


def find_first_one_bit(tt, start: int = 0) -> int:
    """Index of the least significant set bit at or after ``start``, or -1."""
    if start < 0:
        raise ValueError("start must not be negative")
    rest = tt.bits >> start
    return start + _first_one(rest) if rest else -1


def find_last_one_bit(tt) -> int:
    """Index of the most significant set bit, or -1."""
    return tt.bits.bit_length() - 1


def find_first_bit_difference(first, second) -> int:
    _check_same_size(first, second)
    return _first_one(first.bits ^ second.bits)


def find_last_bit_difference(first, second) -> int:
    _check_same_size(first, second)
    return (first.bits ^ second.bits).bit_length() - 1