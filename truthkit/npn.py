"""NPN and P canonization of complete truth tables.

A configuration is a tuple ``(representative, phase, perm)``.  ``phase``
holds the input negations in bits ``0 .. n-1`` and the output negation in
bit ``n``.  ``perm`` is the input permutation that leads to the
representative.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from .bit_operations import get_bit
from .truth_table import TruthTable, flip, is_complete_truth_table, nth_var, swap

Config = tuple[TruthTable, int, list[int]]
Callback = Callable[[TruthTable], object]

_MAX_EXACT_NPN_VARS = 6
_MAX_EXACT_P_VARS = 7


def _require_complete(tt) -> None:
    if not is_complete_truth_table(tt):
        raise TypeError("canonization requires a complete truth table")


def _not_if(tt: TruthTable, condition: int) -> TruthTable:
    return ~tt if condition else tt.copy()


@lru_cache(maxsize=None)
def _swap_sequence(num_vars: int) -> tuple[int, ...]:
    """Adjacent transpositions visiting every permutation once.

    The arrangement reached at the end differs from the identity only by the
    exchange of positions 0 and 1.
    """
    arrangement = list(range(num_vars))
    direction = [-1] * num_vars
    positions: list[int] = []
    while True:
        mobile, at = -1, -1
        for i, value in enumerate(arrangement):
            j = i + direction[value]
            if 0 <= j < num_vars and arrangement[j] < value and value > mobile:
                mobile, at = value, i
        if mobile < 0:
            return tuple(positions)
        j = at + direction[mobile]
        arrangement[at], arrangement[j] = arrangement[j], arrangement[at]
        positions.append(min(at, j))
        for value in range(mobile + 1, num_vars):
            direction[value] = -direction[value]


@lru_cache(maxsize=None)
def _flip_sequence(num_vars: int) -> tuple[int, ...]:
    """Input negations visiting every phase once (Gray code order)."""
    return tuple((i & -i).bit_length() - 1 for i in range(1, 1 << num_vars))


@lru_cache(maxsize=None)
def _adjacent_swap_masks(num_vars: int) -> tuple[tuple[int, int, int, int], ...]:
    full = (1 << (1 << num_vars)) - 1
    masks = []
    for pos in range(num_vars - 1):
        low = nth_var(num_vars, pos).bits
        high = nth_var(num_vars, pos + 1).bits
        up = low & ~high
        down = high & ~low
        masks.append((full & ~(up | down), up, down, 1 << pos))
    return tuple(masks)


@lru_cache(maxsize=None)
def _flip_masks(num_vars: int) -> tuple[tuple[int, int], ...]:
    return tuple((nth_var(num_vars, i).bits, 1 << i) for i in range(num_vars))


def _swap_bits(bits: int, masks: tuple[int, int, int, int]) -> int:
    keep, up, down, shift = masks
    return (bits & keep) | ((bits & up) << shift) | ((bits & down) >> shift)


def _flip_bits(bits: int, masks: tuple[int, int]) -> int:
    pattern, shift = masks
    return ((bits & pattern) >> shift) | ((bits & ~pattern) << shift)


def _perm_after(num_vars: int, swaps: tuple[int, ...], best_swap: int) -> list[int]:
    perm = list(range(num_vars))
    for pos in swaps[: best_swap + 1]:
        perm[pos], perm[pos + 1] = perm[pos + 1], perm[pos]
    return perm


def exact_p_canonization(tt: TruthTable, callback: Callback | None = None) -> Config:
    """Lexicographically smallest table reachable by input permutation.

    ``callback`` is called with every visited table.
    """
    _require_complete(tt)
    n = tt.num_vars

    if n == 0:
        return tt.copy(), 0, []
    if n == 1:
        return tt.copy(), 0, [0]
    if n > _MAX_EXACT_P_VARS:
        raise ValueError(f"exact P canonization supports at most {_MAX_EXACT_P_VARS} variables")

    def visit(bits: int) -> None:
        if callback is not None:
            callback(TruthTable(n, bits))

    swaps = _swap_sequence(n)
    swap_masks = _adjacent_swap_masks(n)

    t1 = tmin = tt.bits
    visit(t1)
    best_swap = -1

    for i, pos in enumerate(swaps):
        t1 = _swap_bits(t1, swap_masks[pos])
        visit(t1)
        if t1 < tmin:
            best_swap = i
            tmin = t1

    return TruthTable(n, tmin), 0, _perm_after(n, swaps, best_swap)


def exact_npn_canonization(tt: TruthTable, callback: Callback | None = None) -> Config:
    """Lexicographically smallest table in the NPN class of ``tt`` (at most 6 inputs).

    ``callback`` is called with every visited table.
    """
    _require_complete(tt)
    n = tt.num_vars

    if n == 0:
        bit = get_bit(tt, 0)
        return _not_if(tt, bit), bit, []
    if n == 1:
        bit1 = get_bit(tt, 1)
        return _not_if(tt, bit1), bit1 << 1, [0]
    if n > _MAX_EXACT_NPN_VARS:
        raise ValueError(f"exact NPN canonization supports at most {_MAX_EXACT_NPN_VARS} variables")

    def visit(bits: int) -> None:
        if callback is not None:
            callback(TruthTable(n, bits))

    full = (1 << tt.num_bits()) - 1
    swaps = _swap_sequence(n)
    flips = _flip_sequence(n)
    swap_masks = _adjacent_swap_masks(n)
    flip_masks = _flip_masks(n)

    t1 = tt.bits
    t2 = ~t1 & full
    tmin = min(t1, t2)
    invo = tmin == t2
    visit(t1)
    visit(t2)

    best_swap = -1
    best_flip = -1

    def run_swaps(t1: int, t2: int, flip_index: int) -> tuple[int, int]:
        nonlocal tmin, invo, best_swap, best_flip
        for i, pos in enumerate(swaps):
            masks = swap_masks[pos]
            t1 = _swap_bits(t1, masks)
            t2 = _swap_bits(t2, masks)
            visit(t1)
            visit(t2)
            if t1 < tmin or t2 < tmin:
                best_swap = i
                best_flip = flip_index
                tmin = min(t1, t2)
                invo = tmin == t2
        return t1, t2

    t1, t2 = run_swaps(t1, t2, -1)

    for j, pos in enumerate(flips):
        t1 = _flip_bits(_swap_bits(t1, swap_masks[0]), flip_masks[pos])
        t2 = _flip_bits(_swap_bits(t2, swap_masks[0]), flip_masks[pos])
        visit(t1)
        visit(t2)
        if t1 < tmin or t2 < tmin:
            best_swap = -1
            best_flip = j
            tmin = min(t1, t2)
            invo = tmin == t2
        t1, t2 = run_swaps(t1, t2, j)

    phase = int(invo) << n
    for pos in flips[: best_flip + 1]:
        phase ^= 1 << pos

    return TruthTable(n, tmin), phase, _perm_after(n, swaps, best_swap)


def flip_swap_npn_canonization(tt: TruthTable) -> Config:
    """Greedy NPN heuristic: accept every input flip, output flip or swap that lowers the table."""
    _require_complete(tt)
    n = tt.num_vars
    perm = list(range(n))
    phase = 0
    npn = tt.copy()
    improvement = True

    while improvement:
        improvement = False

        for i in range(n):
            flipped = flip(npn, i)
            if flipped < npn:
                npn = flipped
                phase ^= 1 << perm[i]
                improvement = True

        flipped = ~npn
        if flipped < npn:
            npn = flipped
            phase ^= 1 << n
            improvement = True

        for d in range(1, n - 1):
            for i in range(n - d):
                j = i + d
                permuted = swap(npn, i, j)
                if permuted < npn:
                    npn = permuted
                    perm[i], perm[j] = perm[j], perm[i]
                    improvement = True

    return npn, phase, perm


def _sifting_order(n: int, forward: bool) -> range:
    return range(n - 1) if forward else range(n - 2, -1, -1)


def _sifting_npn_loop(npn: TruthTable, phase: int, perm: list[int]) -> tuple[TruthTable, int]:
    n = npn.num_vars
    improvement = True
    forward = True

    while improvement:
        improvement = False
        for i in _sifting_order(n, forward):
            for k in range(1, 8):
                if k % 4 == 0:
                    candidate = swap(npn, i, i + 1)
                    if candidate < npn:
                        npn = candidate
                        perm[i], perm[i + 1] = perm[i + 1], perm[i]
                        improvement = True
                elif k % 2 == 0:
                    candidate = flip(npn, i + 1)
                    if candidate < npn:
                        npn = candidate
                        phase ^= 1 << perm[i + 1]
                        improvement = True
                else:
                    candidate = flip(npn, i)
                    if candidate < npn:
                        npn = candidate
                        phase ^= 1 << perm[i]
                        improvement = True
        forward = not forward

    return npn, phase


def _sifting_p_loop(p: TruthTable, perm: list[int]) -> TruthTable:
    n = p.num_vars
    improvement = True
    forward = True

    while improvement:
        improvement = False
        for i in _sifting_order(n, forward):
            candidate = swap(p, i, i + 1)
            if candidate < p:
                p = candidate
                perm[i], perm[i + 1] = perm[i + 1], perm[i]
                improvement = True
        forward = not forward

    return p


def sifting_npn_canonization(tt: TruthTable) -> Config:
    """Sifting NPN heuristic over adjacent variable pairs, for the function and its complement."""
    _require_complete(tt)
    n = tt.num_vars
    perm = list(range(n))

    if n < 2:
        return tt.copy(), 0, perm

    best_npn, best_phase = _sifting_npn_loop(tt.copy(), 0, perm)
    best_perm = perm

    other_perm = list(range(n))
    npn, phase = _sifting_npn_loop(~tt, 1 << n, other_perm)

    if best_npn < npn:
        return best_npn, best_phase, best_perm
    return npn, phase, other_perm


def sifting_p_canonization(tt: TruthTable) -> Config:
    """Sifting P heuristic: only adjacent input swaps are tried."""
    _require_complete(tt)
    n = tt.num_vars
    perm = list(range(n))

    if n < 2:
        return tt.copy(), 0, perm

    return _sifting_p_loop(tt.copy(), perm), 0, perm


def create_from_npn_config(config: Config) -> TruthTable:
    """Recover the original table from an NPN configuration."""
    representative, phase, perm = config
    _require_complete(representative)
    n = representative.num_vars
    perm = list(perm)
    if sorted(perm) != list(range(n)):
        raise ValueError(f"not a permutation of {n} inputs: {perm}")

    res = ~representative if (phase >> n) & 1 else representative.copy()

    for i in range(n):
        if perm[i] == i:
            continue
        k = perm.index(i, i)
        res = swap(res, i, k)
        perm[i], perm[k] = perm[k], perm[i]

    for i in range(n):
        if (phase >> i) & 1:
            res = flip(res, i)

    return res