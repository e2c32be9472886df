"""Minterms, j-buddies and prime implicants of Boolean functions."""

from __future__ import annotations

from collections.abc import Sequence

from .bit_operations import iter_one_bits
from .cube import Cube
from .truth_table import is_complete_truth_table


def get_minterms(tt) -> list[int]:
    """Indexes of all set bits of ``tt`` in ascending order."""
    return list(iter_one_bits(tt))


def _jbuddies(values: Sequence[int], begin: int, end: int, j: int) -> list[tuple[int, int]]:
    """Index pairs in ``values[begin:end]`` (sorted) that differ only in bit ``j``."""
    buddies: list[tuple[int, int]] = []
    mask = 1 << j
    k = begin
    kk = begin

    while True:
        while k < end and values[k] & mask:
            k += 1
        if k == end:
            break

        if kk <= k:
            kk = k + 1
        target = values[k] | mask
        while kk < end and values[kk] < target:
            kk += 1
        if kk == end:
            break

        if (values[k] ^ values[kk]) >= (mask << 1):
            k = kk
            continue

        if values[kk] == target:
            buddies.append((k, kk))
        k += 1

    return buddies


def get_jbuddies(minterms: Sequence[int], j: int) -> list[tuple[int, int]]:
    """All index pairs ``(k, k')`` with ``k < k'`` whose minterms differ only in bit ``j``.

    The minterms must be sorted in ascending order.
    """
    return _jbuddies(minterms, 0, len(minterms), j)


def get_prime_implicants_morreale(minterms: Sequence[int], num_vars: int) -> list[Cube]:
    """All prime implicants of the function given by its sorted minterms."""
    cubes: list[Cube] = []
    n = num_vars
    m = len(minterms)

    tags = [0] * (2 * m + n)
    stack = [0] * (2 * m + n)
    mask = (1 << n) - 1
    active = 0

    for j in range(n):
        for k, kk in get_jbuddies(minterms, j):
            tags[k] |= 1 << j
            tags[kk] |= 1 << j

    t = 0
    for s, minterm in enumerate(minterms):
        if tags[s] == 0:
            cubes.append(Cube(minterm, mask))
        else:
            stack[t] = minterm
            tags[t] = tags[s]
            t += 1

    stack.append(0)

    while True:
        j = 0
        if stack[t] == t:
            while j < n and not (active >> j) & 1:
                j += 1

        while j < n and (active >> j) & 1:
            t = stack[t] - 1
            active &= ~(1 << j)
            j += 1

        if j >= n:
            return cubes

        active |= 1 << j

        r = t
        s = stack[t]
        for k, kk in _jbuddies(stack, s, r, j):
            x = tags[k] & tags[kk] & ~(1 << j)
            if x == 0:
                cubes.append(Cube(stack[k], ~active & mask))
            else:
                t += 1
                stack[t] = stack[k]
                tags[t] = x

        t += 1
        stack[t] = r + 1


def prime_implicants(tt) -> list[Cube]:
    """All prime implicants of a complete truth table."""
    if not is_complete_truth_table(tt):
        raise TypeError("prime implicants require a complete truth table")
    return get_prime_implicants_morreale(get_minterms(tt), tt.num_vars)