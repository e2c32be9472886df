import random

import pytest

from truthkit.cube import Cube
from truthkit.implicant import (
    get_jbuddies,
    get_minterms,
    get_prime_implicants_morreale,
    prime_implicants,
)
from truthkit.truth_table import PartialTruthTable, TruthTable, from_hex, nth_var, random_table


def cube_table(cube, num_vars):
    table = ~TruthTable(num_vars)
    for i in range(num_vars):
        if cube.get_mask(i):
            table &= nth_var(num_vars, i, complement=not cube.get_bit(i))
    return table


def check_primes(tt, primes):
    n = tt.num_vars
    union = TruthTable(n)
    for cube in primes:
        table = cube_table(cube, n)
        assert (table & ~tt).bits == 0
        union |= table
        for i in range(n):
            if cube.get_mask(i):
                larger = Cube(cube.bits, cube.mask)
                larger.remove_literal(i)
                assert (cube_table(larger, n) & ~tt).bits != 0
    assert union == tt
    assert len(set(primes)) == len(primes)


def test_minterms_of_majority():
    assert get_minterms(from_hex(3, "e8")) == [3, 5, 6, 7]


def test_minterms_match_bits():
    tt = random_table(6, random.Random(3))
    minterms = get_minterms(tt)
    assert sorted(minterms) == minterms
    assert sum(1 << m for m in minterms) == tt.bits


def test_jbuddies_majority_bit0():
    assert get_jbuddies([3, 5, 6, 7], 0) == [(2, 3)]


@pytest.mark.parametrize("seed", range(5))
def test_jbuddies_are_all_pairs(seed):
    tt = random_table(6, random.Random(seed))
    minterms = get_minterms(tt)
    position = {m: i for i, m in enumerate(minterms)}
    for j in range(6):
        pairs = get_jbuddies(minterms, j)
        for k, kk in pairs:
            assert k < kk
            assert not minterms[k] & (1 << j)
            assert minterms[kk] == minterms[k] | (1 << j)
        expected = {
            (i, position[m | (1 << j)])
            for i, m in enumerate(minterms)
            if not m & (1 << j) and (m | (1 << j)) in position
        }
        assert set(pairs) == expected


def test_prime_implicants_of_majority():
    primes = prime_implicants(from_hex(3, "e8"))
    assert set(primes) == {
        Cube.from_string("11-"),
        Cube.from_string("1-1"),
        Cube.from_string("-11"),
    }


def test_all_three_variable_functions():
    for bits in range(256):
        tt = TruthTable(3, bits)
        check_primes(tt, prime_implicants(tt))


@pytest.mark.parametrize("seed", range(10))
def test_random_five_variable_functions(seed):
    tt = random_table(5, random.Random(seed))
    primes = get_prime_implicants_morreale(get_minterms(tt), 5)
    check_primes(tt, primes)


def test_partial_table_rejected():
    with pytest.raises(TypeError):
        prime_implicants(PartialTruthTable(5, 3))