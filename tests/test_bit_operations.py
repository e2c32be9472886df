import random

import pytest

from truthkit.bit_operations import (
    clear,
    clear_bit,
    count_ones,
    count_zeros,
    find_first_bit_difference,
    find_first_one_bit,
    find_last_bit_difference,
    find_last_one_bit,
    flip_bit,
    get_bit,
    iter_one_bits,
    set_bit,
)
from truthkit.truth_table import TruthTable, from_hex, nth_var, random_table

PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73,
          79, 83, 89, 97, 101, 103, 107, 109, 113, 127]


@pytest.mark.parametrize("num_vars", [5, 7, 9])
def test_all_initially_zero(num_vars):
    tt = TruthTable(num_vars)
    assert [get_bit(tt, i) for i in range(tt.num_bits())] == [0] * tt.num_bits()


@pytest.mark.parametrize("num_vars", [5, 7, 9])
def test_set_get_clear(num_vars):
    tt = TruthTable(num_vars)
    for i in range(tt.num_bits()):
        set_bit(tt, i)
        assert get_bit(tt, i) == 1
        clear_bit(tt, i)
        assert get_bit(tt, i) == 0
        flip_bit(tt, i)
        assert get_bit(tt, i) == 1
        flip_bit(tt, i)
        assert get_bit(tt, i) == 0


def test_index_out_of_range():
    with pytest.raises(IndexError):
        set_bit(TruthTable(2), 4)
    with pytest.raises(IndexError):
        get_bit(TruthTable(2), -1)


def test_find_first_bit():
    assert find_first_one_bit(from_hex(3, "00")) == -1
    assert find_first_one_bit(~from_hex(3, "00")) == 0
    for v in range(6):
        assert find_first_one_bit(nth_var(6, v)) == 1 << v
    assert find_first_one_bit(nth_var(7, 6)) == 64
    assert find_first_one_bit(nth_var(8, 7)) == 128


@pytest.mark.parametrize("num_vars", range(8))
def test_find_first_bit_consecutive(num_vars):
    tt = TruthTable(num_vars)
    for p in PRIMES:
        if p < tt.num_bits():
            set_bit(tt, p)
    found = []
    start = find_first_one_bit(tt)
    while start != -1:
        found.append(start)
        start = find_first_one_bit(tt, start + 1)
    assert found == [p for p in PRIMES if p < tt.num_bits()]
    assert count_ones(tt) == len(found)


def test_find_last_bit():
    assert find_last_one_bit(from_hex(3, "00")) == -1
    assert find_last_one_bit(~from_hex(3, "00")) == 7
    for v in range(6):
        assert find_last_one_bit(nth_var(6, v)) == 63
    assert find_last_one_bit(nth_var(7, 6)) == 127
    assert find_last_one_bit(nth_var(8, 7)) == 255


def _pairs():
    yield nth_var(6, 0), nth_var(6, 0)
    for v in range(1, 6):
        yield nth_var(6, v), nth_var(6, v - 1)
    yield nth_var(7, 6), nth_var(7, 5)
    yield nth_var(8, 7), nth_var(8, 6)


def test_find_bit_differences():
    for a, b in _pairs():
        assert find_first_bit_difference(a, b) == find_first_one_bit(a ^ b)
        assert find_last_bit_difference(a, b) == find_last_one_bit(a ^ b)
    assert find_first_bit_difference(nth_var(6, 1), nth_var(6, 0)) == 1
    with pytest.raises(ValueError):
        find_first_bit_difference(nth_var(3, 0), nth_var(4, 0))


@pytest.mark.parametrize("num_vars", [5, 9])
def test_count_ones(num_vars):
    rng = random.Random(1234)
    for _ in range(100):
        tt = random_table(num_vars, rng)
        total = sum(get_bit(tt, i) for i in range(tt.num_bits()))
        assert count_ones(tt) == total
        assert count_zeros(tt) == tt.num_bits() - total


def test_iter_one_bits_and_clear():
    tt = from_hex(3, "e8")
    assert list(iter_one_bits(tt)) == [3, 5, 6, 7]
    clear(tt)
    assert list(iter_one_bits(tt)) == []
    assert count_zeros(tt) == 8