"""Truth tables of Boolean functions, stored as arbitrary-precision integers.

Bit ``i`` of a table holds the function value for the input assignment whose
binary encoding is ``i`` (variable 0 is the least significant input).
"""

from __future__ import annotations

import random
import string
from functools import total_ordering

_HEX_DIGITS = frozenset(string.hexdigits)
_WORD_MASK = (1 << 64) - 1


def _checked_bits(bits: int, num_bits: int) -> int:
    if bits < 0 or bits >> num_bits:
        raise ValueError(f"bits {bits:#x} do not fit into {num_bits} bits")
    return bits


def _var_pattern(num_bits: int, var_index: int) -> int:
    """Bit pattern of the projection function of ``var_index`` over ``num_bits`` bits."""
    shift = 1 << var_index
    period = shift << 1
    unit = ((1 << shift) - 1) << shift
    repeats = num_bits // period
    return unit * (((1 << (period * repeats)) - 1) // ((1 << period) - 1))


@total_ordering
class _BitTable:
    """Operators shared by complete and partial truth tables."""

    bits: int

    def num_bits(self) -> int:
        raise NotImplementedError

    def construct(self):
        raise NotImplementedError

    @property
    def _mask(self) -> int:
        return (1 << self.num_bits()) - 1

    def _shape(self) -> tuple:
        return (type(self), self.num_bits())

    def _with_bits(self, bits: int):
        result = self.construct()
        result.bits = bits & self._mask
        return result

    def _other_bits(self, other) -> int:
        if not isinstance(other, _BitTable):
            raise TypeError(f"expected a truth table, got {type(other).__name__}")
        if other._shape() != self._shape():
            raise ValueError("truth tables differ in size")
        return other.bits

    def __invert__(self):
        return self._with_bits(~self.bits)

    def __and__(self, other):
        return self._with_bits(self.bits & self._other_bits(other))

    def __or__(self, other):
        return self._with_bits(self.bits | self._other_bits(other))

    def __xor__(self, other):
        return self._with_bits(self.bits ^ self._other_bits(other))

    def __lshift__(self, amount: int):
        return self._with_bits(self.bits << amount)

    def __rshift__(self, amount: int):
        return self._with_bits(self.bits >> amount)

    def __eq__(self, other) -> bool:
        if not isinstance(other, _BitTable):
            return NotImplemented
        return self._shape() == other._shape() and self.bits == other.bits

    def __lt__(self, other) -> bool:
        if not isinstance(other, _BitTable):
            return NotImplemented
        return self.bits < self._other_bits(other)

    def __hash__(self) -> int:
        return hash((self._shape(), self.bits))

    def num_blocks(self) -> int:
        return (self.num_bits() + 63) // 64

    def words(self) -> list[int]:
        """The table as 64-bit words, least significant word first."""
        return [(self.bits >> (64 * i)) & _WORD_MASK for i in range(self.num_blocks())]


class TruthTable(_BitTable):
    """Complete truth table over ``num_vars`` variables."""

    def __init__(self, num_vars: int, bits: int = 0) -> None:
        if num_vars < 0:
            raise ValueError("number of variables must not be negative")
        self.num_vars = num_vars
        self.bits = _checked_bits(bits, 1 << num_vars)

    def num_bits(self) -> int:
        return 1 << self.num_vars

    def num_blocks(self) -> int:
        return 1 if self.num_vars <= 6 else 1 << (self.num_vars - 6)

    def construct(self) -> TruthTable:
        """A constant-0 table of the same size."""
        return TruthTable(self.num_vars)

    def copy(self) -> TruthTable:
        return TruthTable(self.num_vars, self.bits)

    def words(self) -> list[int]:
        return super().words()

    def to_hex(self) -> str:
        width = max(1, self.num_bits() // 4)
        return format(self.bits, f"0{width}x")

    def to_binary(self) -> str:
        return format(self.bits, f"0{self.num_bits()}b")

    def __repr__(self) -> str:
        return f"TruthTable({self.num_vars}, 0x{self.to_hex()})"


class PartialTruthTable(_BitTable):
    """Truth table with an arbitrary number of bits."""

    def __init__(self, num_bits: int, bits: int = 0) -> None:
        if num_bits < 0:
            raise ValueError("number of bits must not be negative")
        self._num_bits = num_bits
        self.bits = _checked_bits(bits, num_bits)

    def num_bits(self) -> int:
        return self._num_bits

    def num_blocks(self) -> int:
        return (self._num_bits + 63) // 64

    def construct(self) -> PartialTruthTable:
        return PartialTruthTable(self._num_bits)

    def copy(self) -> PartialTruthTable:
        return PartialTruthTable(self._num_bits, self.bits)

    def words(self) -> list[int]:
        return super().words()

    def __repr__(self) -> str:
        return f"PartialTruthTable({self._num_bits}, {self.bits:#x})"


def is_truth_table(obj) -> bool:
    return isinstance(obj, (TruthTable, PartialTruthTable))


def is_complete_truth_table(obj) -> bool:
    return isinstance(obj, TruthTable)


def _require_complete(tt) -> None:
    if not isinstance(tt, TruthTable):
        raise TypeError("operation requires a complete truth table")


def _require_var(tt: TruthTable, var_index: int) -> None:
    if not 0 <= var_index < tt.num_vars:
        raise ValueError(f"variable index {var_index} out of range for {tt.num_vars} variables")


def from_hex(num_vars: int, text: str) -> TruthTable:
    """Parse a hexadecimal string, most significant digit first."""
    tt = TruthTable(num_vars)
    expected = max(1, tt.num_bits() // 4)
    if len(text) != expected:
        raise ValueError(f"expected {expected} hex digits for {num_vars} variables, got {len(text)}")
    if not all(ch in _HEX_DIGITS for ch in text):
        raise ValueError(f"invalid hex string {text!r}")
    tt.bits = int(text, 16) & tt._mask
    return tt


def nth_var(num_vars: int, var_index: int, complement: bool = False) -> TruthTable:
    """Projection function of a variable, optionally complemented."""
    tt = TruthTable(num_vars)
    _require_var(tt, var_index)
    pattern = _var_pattern(tt.num_bits(), var_index)
    tt.bits = (~pattern & tt._mask) if complement else pattern
    return tt


def random_table(num_vars: int, rng: random.Random | None = None) -> TruthTable:
    generator = rng if rng is not None else random
    tt = TruthTable(num_vars)
    tt.bits = generator.getrandbits(tt.num_bits())
    return tt


def flip(tt: TruthTable, var_index: int) -> TruthTable:
    """Complement input ``var_index``."""
    _require_complete(tt)
    _require_var(tt, var_index)
    pattern = _var_pattern(tt.num_bits(), var_index)
    shift = 1 << var_index
    bits = ((tt.bits & pattern) >> shift) | ((tt.bits & ~pattern) << shift)
    return tt._with_bits(bits)


def swap(tt: TruthTable, var_index1: int, var_index2: int) -> TruthTable:
    """Exchange two inputs."""
    _require_complete(tt)
    _require_var(tt, var_index1)
    _require_var(tt, var_index2)
    if var_index1 == var_index2:
        return tt.copy()
    low, high = sorted((var_index1, var_index2))
    num_bits = tt.num_bits()
    p_low = _var_pattern(num_bits, low)
    p_high = _var_pattern(num_bits, high)
    distance = (1 << high) - (1 << low)
    keep = tt.bits & ~(p_low ^ p_high)
    up = (tt.bits & p_low & ~p_high) << distance
    down = (tt.bits & p_high & ~p_low) >> distance
    return tt._with_bits(keep | up | down)


def swap_adjacent(tt: TruthTable, var_index: int) -> TruthTable:
    """Exchange inputs ``var_index`` and ``var_index + 1``."""
    return swap(tt, var_index, var_index + 1)


def cofactor0(tt: TruthTable, var_index: int) -> TruthTable:
    """Function with input ``var_index`` fixed to 0 (same size)."""
    _require_complete(tt)
    _require_var(tt, var_index)
    low = tt.bits & ~_var_pattern(tt.num_bits(), var_index)
    return tt._with_bits(low | (low << (1 << var_index)))


def cofactor1(tt: TruthTable, var_index: int) -> TruthTable:
    """Function with input ``var_index`` fixed to 1 (same size)."""
    _require_complete(tt)
    _require_var(tt, var_index)
    high = tt.bits & _var_pattern(tt.num_bits(), var_index)
    return tt._with_bits(high | (high >> (1 << var_index)))


def next_table(tt):
    """The table whose integer value is one larger, wrapping to zero."""
    return tt._with_bits(tt.bits + 1)


def is_const0(tt) -> bool:
    return tt.bits == 0