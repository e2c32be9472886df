"""Property checks and measures of Boolean functions given as truth tables."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations, groupby

from .bit_operations import count_ones, count_zeros, get_bit, iter_one_bits
from .truth_table import (
    TruthTable,
    cofactor0,
    cofactor1,
    flip,
    is_complete_truth_table,
    nth_var,
    swap,
)


def _require_complete(tt) -> None:
    if not is_complete_truth_table(tt):
        raise TypeError("operation requires a complete truth table")


def chow_parameters(tt: TruthTable) -> tuple[int, list[int]]:
    """Size of the ON-set and, per variable, how many ON-set assignments set it."""
    _require_complete(tt)
    if tt.num_vars > 32:
        raise ValueError("Chow parameters support at most 32 variables")
    sums = [0] * tt.num_vars
    for minterm in iter_one_bits(tt):
        for i in range(tt.num_vars):
            if (minterm >> i) & 1:
                sums[i] += 1
    return count_ones(tt), sums


def is_canalizing(tt: TruthTable) -> bool:
    """Whether some input value forces the output value."""
    _require_complete(tt)
    full = (1 << tt.num_vars) - 1
    f0and = f1and = full
    f0or = f1or = 0

    for i in range(tt.num_bits()):
        if get_bit(tt, i):
            f1and &= i
            f1or |= i
        else:
            f0and &= i
            f0or |= i
        if f0and == 0 and f1and == 0 and f0or == full and f1or == full:
            return False

    return True


def is_horn(tt) -> bool:
    """Whether the function can be represented by Horn clauses."""
    bits = tt.bits
    return all((bits >> (i & j)) & 1 for i, j in combinations(iter_one_bits(tt), 2))


def is_krom(tt) -> bool:
    """Whether the function can be represented by Krom (2-CNF) clauses."""
    bits = tt.bits
    return all(
        (bits >> ((i & j) | (i & k) | (j & k))) & 1
        for i, j, k in combinations(iter_one_bits(tt), 3)
    )


def is_symmetric_in(tt: TruthTable, var_index1: int, var_index2: int) -> bool:
    """Whether swapping the two inputs leaves the function unchanged."""
    return tt == swap(tt, var_index1, var_index2)


def is_monotone(tt: TruthTable) -> bool:
    """Whether f(x) <= f(y) whenever x is contained in y."""
    _require_complete(tt)
    return all(
        cofactor0(tt, i).bits & ~cofactor1(tt, i).bits == 0 for i in range(tt.num_vars)
    )


def is_selfdual(tt: TruthTable) -> bool:
    """Whether !f(x, ..., z) equals f(!x, ..., !z)."""
    _require_complete(tt)
    flipped = tt
    for i in range(tt.num_vars):
        flipped = flip(flipped, i)
    return flipped == ~tt


def is_normal(tt) -> bool:
    """Whether f(0, ..., 0) = 0."""
    return not get_bit(tt, 0)


def is_trivial(tt: TruthTable) -> bool:
    """Whether the function is a constant, a variable or a complemented variable."""
    _require_complete(tt)
    if tt.bits == 0 or (~tt).bits == 0:
        return True
    for i in range(tt.num_vars):
        var = nth_var(tt.num_vars, i)
        if tt == var or tt == ~var:
            return True
    return False


def iter_runlengths(tt) -> Iterator[tuple[bool, int]]:
    """Pairs ``(value, length)`` of maximal runs of equal bits, from bit 0 upwards."""
    values = (bool(get_bit(tt, i)) for i in range(tt.num_bits()))
    for value, run in groupby(values):
        yield value, sum(1 for _ in run)


def runlength_pattern(tt) -> list[int]:
    """The lengths of the runs of equal bits."""
    return [length for _, length in iter_runlengths(tt)]


def polynomial_degree(tt: TruthTable) -> int:
    """Number of variables in the largest monomial of the function's ANF (PPRM)."""
    _require_complete(tt)
    anf = tt.bits
    for i in range(tt.num_vars):
        low = ~nth_var(tt.num_vars, i).bits & ((1 << tt.num_bits()) - 1)
        anf ^= (anf & low) << (1 << i)
    degrees = (index.bit_count() for index in range(tt.num_bits()) if (anf >> index) & 1)
    return max(degrees, default=0)


def absolute_distinguishing_power(tt) -> int:
    """Number of bit pairs on which the function takes different values."""
    return count_zeros(tt) * count_ones(tt)


def relative_distinguishing_power(tt, target) -> int:
    """Number of bit pairs distinguished by ``target`` that ``tt`` also distinguishes."""
    return count_ones(~tt & ~target) * count_ones(tt & target) + count_ones(
        ~tt & target
    ) * count_ones(tt & ~target)


def is_covered_with_divisors(target, divisors: Sequence) -> bool:
    """Whether every bit pair distinguished by ``target`` is distinguished by a divisor."""
    for divisor in divisors:
        if divisor.num_bits() != target.num_bits():
            raise ValueError("truth tables differ in size")
    seen: dict[tuple[int, ...], int] = {}
    for i in range(target.num_bits()):
        signature = tuple((d.bits >> i) & 1 for d in divisors)
        value = get_bit(target, i)
        if seen.setdefault(signature, value) != value:
            return False
    return True