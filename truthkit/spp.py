"""Sum-of-pseudo-products (SPP) forms derived from ESOP forms."""

from __future__ import annotations

from collections.abc import Sequence

from .cube import Cube
from .truth_table import TruthTable, nth_var


def _mergeable(c: Cube, c2: Cube, var_mask: int) -> bool:
    same_mask = c.mask & c2.mask
    return (
        (c2.mask & var_mask) == c2.mask
        and (c.bits & same_mask) == (c2.bits & same_mask)
        and (c.mask & ~c2.mask).bit_count() == 1
        and (~c.mask & c2.mask).bit_count() == 1
    )


def simple_spp(esop: Sequence[Cube], num_vars: int) -> tuple[list[Cube], list[int]]:
    """Merge pairs of ESOP products into pseudo products.

    Two cubes such as ``abc`` and ``abd`` become ``ab(c+d)``; the sum ``(c+d)``
    is a new literal with index ``num_vars + k`` and ``sums[k]`` holds the
    bitmask of the original inputs it combines.
    """
    next_free = num_vars
    sums: list[int] = []
    cubes = [Cube(c.bits, c.mask) for c in esop]
    end = len(cubes)
    var_mask = (1 << num_vars) - 1

    i = 0
    while i < end:
        c = cubes[i]
        if (c.mask & 0b1111) == c.mask:
            found = next(
                (idx for idx in range(i, end) if _mergeable(c, cubes[idx], var_mask)),
                None,
            )
            if found is not None:
                partner = cubes[found]
                to_delete = c.mask ^ partner.mask
                c.mask &= ~to_delete
                polarity = ((c.bits | partner.bits) & to_delete).bit_count() % 2 == 0
                c.add_literal(next_free, polarity)
                next_free += 1
                c.bits &= ~to_delete
                sums.append(to_delete)
                end -= 1
                cubes[found], cubes[end] = cubes[end], cubes[found]
        i += 1

    return cubes[:end], sums


def create_from_spp(num_vars: int, cubes: Sequence[Cube], sums: Sequence[int]) -> TruthTable:
    """Truth table computed by an SPP form (an ESOP when ``sums`` is empty)."""
    result = TruthTable(num_vars)

    for cube in cubes:
        product = ~TruthTable(num_vars)
        bits = cube.bits
        mask = cube.mask

        for i in range(num_vars):
            if mask & 1:
                product &= nth_var(num_vars, i, complement=not bits & 1)
            bits >>= 1
            mask >>= 1

        for pseudo in sums:
            if mask & 1:
                ssum = TruthTable(num_vars)
                for j in range(num_vars):
                    if (pseudo >> j) & 1:
                        ssum ^= nth_var(num_vars, j)
                if not bits & 1:
                    ssum = ~ssum
                product &= ssum
            bits >>= 1
            mask >>= 1

        result ^= product

    return result