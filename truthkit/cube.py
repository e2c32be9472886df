"""Cubes (products of literals) over up to 32 variables."""

from __future__ import annotations

import sys
from functools import total_ordering
from typing import Iterable, TextIO

_MASK32 = 0xFFFFFFFF


def _check_index(index: int) -> None:
    if not 0 <= index < 32:
        raise IndexError(f"cube index {index} out of range")


def _check_count(k: int) -> None:
    if not 0 <= k <= 32:
        raise ValueError(f"literal count {k} out of range")


@total_ordering
class Cube:
    """A cube given by a polarity bitmask ``bits`` and a care bitmask ``mask``.

    The default cube has no literals and represents constant 1.
    """

    __slots__ = ("bits", "mask")

    def __init__(self, bits: int = 0, mask: int = 0) -> None:
        self.bits = bits & _MASK32
        self.mask = mask & _MASK32

    @classmethod
    def from_string(cls, text: str) -> Cube:
        """Build from characters '1' (positive), '0' (negative), other (don't care).

        Only the first 32 characters are considered.
        """
        cube = cls()
        for index, ch in enumerate(text[:32]):
            if ch == "1":
                cube.bits |= 1 << index
                cube.mask |= 1 << index
            elif ch == "0":
                cube.mask |= 1 << index
        return cube

    @classmethod
    def nth_var_cube(cls, var_index: int) -> Cube:
        _check_index(var_index)
        value = 1 << var_index
        return cls(value, value)

    @classmethod
    def pos_cube(cls, k: int) -> Cube:
        _check_count(k)
        value = (1 << k) - 1
        return cls(value, value)

    @classmethod
    def neg_cube(cls, k: int) -> Cube:
        _check_count(k)
        return cls(0, (1 << k) - 1)

    @property
    def value(self) -> int:
        """Bits and mask packed into one 64-bit integer (mask in the high half)."""
        return (self.mask << 32) | self.bits

    def num_literals(self) -> int:
        return self.mask.bit_count()

    def difference(self, other: Cube) -> int:
        return (self.bits ^ other.bits) | (self.mask ^ other.mask)

    def distance(self, other: Cube) -> int:
        return self.difference(other).bit_count()

    def merge(self, other: Cube) -> Cube:
        """Merge with a cube at distance one."""
        d = self.difference(other)
        return Cube(self.bits ^ (~other.bits & d), self.mask ^ (other.mask & d))

    def add_literal(self, var_index: int, polarity: bool = True) -> None:
        self.set_mask(var_index)
        if polarity:
            self.set_bit(var_index)
        else:
            self.clear_bit(var_index)

    def remove_literal(self, var_index: int) -> None:
        self.clear_mask(var_index)
        self.clear_bit(var_index)

    def to_string(self, length: int = 32) -> str:
        return "".join(
            ("1" if (self.bits >> i) & 1 else "0") if (self.mask >> i) & 1 else "-"
            for i in range(length)
        )

    def get_bit(self, index: int) -> bool:
        _check_index(index)
        return bool((self.bits >> index) & 1)

    def get_mask(self, index: int) -> bool:
        _check_index(index)
        return bool((self.mask >> index) & 1)

    def set_bit(self, index: int) -> None:
        _check_index(index)
        self.bits |= 1 << index

    def set_mask(self, index: int) -> None:
        _check_index(index)
        self.mask |= 1 << index

    def clear_bit(self, index: int) -> None:
        _check_index(index)
        self.bits &= ~(1 << index) & _MASK32

    def clear_mask(self, index: int) -> None:
        _check_index(index)
        self.mask &= ~(1 << index) & _MASK32

    def flip_bit(self, index: int) -> None:
        _check_index(index)
        self.bits ^= 1 << index

    def flip_mask(self, index: int) -> None:
        _check_index(index)
        self.mask ^= 1 << index

    def __invert__(self) -> Cube:
        return Cube(~self.bits, self.mask)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Cube(bits={self.bits:#x}, mask={self.mask:#x})"


def print_cubes(cubes: Iterable[Cube], length: int = 32, file: TextIO | None = None) -> None:
    """Write one cube per line."""
    out = file if file is not None else sys.stdout
    for cube in cubes:
        out.write(cube.to_string(length))
        out.write("\n")
    out.flush()