"""Permuting the bits of truth tables with sequences of delta-swaps."""

from __future__ import annotations

from collections.abc import Sequence

from .truth_table import is_complete_truth_table


def delta_swap(tt, delta: int, omega):
    """Swap every bit pair ``(i, i + delta)`` for which ``omega`` has bit ``i`` set."""
    y = (tt ^ (tt >> delta)) & omega
    return tt ^ y ^ (y << delta)


def _expected_mask_count(num_vars: int) -> int:
    return max(1, 2 * num_vars - 1)


def permute_with_masks(tt, masks: Sequence):
    """Apply delta-swaps with deltas 1, 2, ..., 2^(n-1), ..., 2, 1 and the given masks."""
    n = tt.num_vars
    if len(masks) != _expected_mask_count(n):
        raise ValueError(f"expected {_expected_mask_count(n)} masks, got {len(masks)}")
    result = tt
    for k in range(n):
        result = delta_swap(result, 1 << k, masks[k])
    for i, k in enumerate(range(n - 2, -1, -1), start=n):
        result = delta_swap(result, 1 << k, masks[i])
    return result


def _mask_pair(tt, left: list[int], right: list[int], step: int):
    n = tt.num_vars
    diff = 1 << step
    offset = 1 << (n - 1)
    count = 2 * offset

    positions = [p for p in range(tt.num_bits()) if not p & diff]
    lf = [0] * count
    rf = [0] * count

    where: dict[int, tuple[int, bool]] = {}
    for i, p in enumerate(positions):
        where[right[p]] = (offset + i, True)
        where[right[p + diff]] = (offset + i, False)

    for i, p in enumerate(positions):
        for value, on_a in ((left[p], True), (left[p + diff], False)):
            other, other_on_a = where[value]
            if on_a:
                lf[i] = other
            else:
                rf[i] = other
            if other_on_a:
                lf[other] = i
            else:
                rf[other] = i

    visited = [False] * count
    mask_left = 0
    mask_right = 0

    for start in range(offset):
        if visited[start]:
            continue
        idx = start
        left_side = True
        value = left[positions[start]]
        while True:
            on_left = idx < offset
            values = left if on_left else right
            a = positions[idx if on_left else idx - offset]
            b = a + diff
            match = values[a] == value
            value = values[b] if match else values[a]
            following = rf[idx] if match else lf[idx]
            visited[idx] = True

            if left_side != match:
                values[a], values[b] = values[b], values[a]
                if left_side:
                    mask_left |= 1 << a
                else:
                    mask_right |= 1 << a

            left_side = not left_side
            idx = following
            if idx == start:
                break

    first = tt.construct()
    first.bits = mask_left
    second = tt.construct()
    second.bits = mask_right
    return first, second


def compute_permutation_masks(tt, permutation: Sequence[int]) -> list:
    """Masks for :func:`permute_with_masks` realising ``permutation``.

    After permuting, bit ``i`` of the result holds bit ``permutation[i]`` of the
    input.  ``tt`` only fixes the size and type of the masks.
    """
    if not is_complete_truth_table(tt):
        raise TypeError("permutation masks require a complete truth table")
    num_bits = tt.num_bits()
    if sorted(permutation) != list(range(num_bits)):
        raise ValueError(f"not a permutation of {num_bits} positions")

    masks: list = []
    left = list(range(num_bits))
    right = list(permutation)

    for i in range(tt.num_vars - 1):
        first, second = _mask_pair(tt, left, right, i)
        masks.insert(i, second)
        masks.insert(i, first)

    middle = tt.construct()
    middle.bits = sum(1 << i for i in range(num_bits >> 1) if left[i] != right[i])
    masks.insert(tt.num_vars - 1, middle)
    return masks