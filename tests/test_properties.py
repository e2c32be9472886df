import pytest

from truthkit.properties import (
    absolute_distinguishing_power,
    chow_parameters,
    is_canalizing,
    is_covered_with_divisors,
    is_horn,
    is_krom,
    is_monotone,
    is_normal,
    is_selfdual,
    is_symmetric_in,
    is_trivial,
    iter_runlengths,
    polynomial_degree,
    relative_distinguishing_power,
    runlength_pattern,
)
from truthkit.truth_table import PartialTruthTable, TruthTable, from_hex, nth_var


def _all_tables(num_vars):
    return (TruthTable(num_vars, bits) for bits in range(1 << (1 << num_vars)))


def test_chow_small_example():
    nf, sf = chow_parameters(from_hex(2, "e"))
    assert nf == 3
    assert sf == [2, 2]


def test_chow_requires_complete_table():
    with pytest.raises(TypeError):
        chow_parameters(PartialTruthTable(5, 3))


@pytest.mark.parametrize(
    "predicate, expected",
    [
        (is_canalizing, 3514),
        (is_selfdual, 256),
        (is_trivial, 10),
        (is_normal, 32768),
        (is_monotone, 168),
        (is_horn, 4960),
        (is_krom, 4170),
    ],
)
def test_counts_over_all_four_variable_functions(predicate, expected):
    assert sum(1 for tt in _all_tables(4) if predicate(tt)) == expected


def test_runlength_pattern():
    assert runlength_pattern(from_hex(2, "6")) == [1, 2, 1]
    assert runlength_pattern(from_hex(3, "96")) == [1, 2, 1, 1, 2, 1]
    assert runlength_pattern(from_hex(4, "6996")) == [1, 2, 1, 1, 2, 2, 2, 1, 1, 2, 1]


def test_iter_runlengths_and_function():
    assert list(iter_runlengths(from_hex(2, "8"))) == [(False, 3), (True, 1)]
    assert runlength_pattern(from_hex(2, "7")) == [3, 1]


@pytest.mark.parametrize(
    "hex_text, degree",
    [("80", 3), ("f7", 3), ("e8", 2), ("aa", 1), ("ff", 0), ("00", 0)],
)
def test_polynomial_degree(hex_text, degree):
    assert polynomial_degree(from_hex(3, hex_text)) == degree


def test_is_symmetric_in():
    maj = from_hex(3, "e8")
    assert is_symmetric_in(maj, 0, 2)
    f = from_hex(3, "d8")
    assert not is_symmetric_in(f, 0, 1)


def test_distinguishing_power():
    x0 = nth_var(2, 0)
    assert absolute_distinguishing_power(x0) == 4
    assert relative_distinguishing_power(x0, x0) == absolute_distinguishing_power(x0)
    assert relative_distinguishing_power(x0, nth_var(2, 1)) == 2


def test_is_covered_with_divisors():
    target = from_hex(2, "8")
    assert is_covered_with_divisors(target, [nth_var(2, 0), nth_var(2, 1)])
    assert not is_covered_with_divisors(target, [nth_var(2, 0)])
    assert is_covered_with_divisors(TruthTable(2), [])
    assert not is_covered_with_divisors(target, [])


def test_is_covered_rejects_size_mismatch():
    with pytest.raises(ValueError):
        is_covered_with_divisors(from_hex(2, "8"), [nth_var(3, 0)])


def test_trivial_and_monotone_examples():
    assert is_trivial(~nth_var(3, 2))
    assert not is_trivial(from_hex(3, "e8"))
    assert is_monotone(from_hex(3, "e8"))
    assert not is_monotone(~nth_var(3, 0))
    assert is_selfdual(from_hex(3, "e8"))
    assert not is_normal(from_hex(2, "1"))