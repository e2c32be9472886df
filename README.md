# truthkit

A small library for working with Boolean functions as truth tables. A table
stores its bits in one Python integer. Bit `i` holds the function value for
the input assignment whose binary encoding is `i`, and variable 0 is the least
significant input. Tables support `~`, `&`, `|`, `^`, `<<`, `>>`, equality,
ordering by integer value, and hashing. `words()` returns the bits as 64-bit
words with the least significant word first.

## Modules

- `truthkit.truth_table`: `TruthTable`, a complete table over `num_vars`
  inputs, and `PartialTruthTable`, a table with any number of bits. It has the
  constructors `from_hex`, `nth_var` and `random_table`. It has the variable
  operations `flip`, `swap`, `swap_adjacent`, `cofactor0` and `cofactor1`,
  which return new tables. `next_table` adds one to the table and wraps to zero.
  `is_const0`, `is_truth_table` and `is_complete_truth_table` are checks.
- `truthkit.bit_operations`: bit access (`get_bit`, `set_bit`, `clear_bit`,
  `flip_bit`, `clear`) and counting (`count_ones`, `count_zeros`).
  `iter_one_bits` yields the set bits in ascending order. There are also
  searches: `find_first_one_bit`, `find_last_one_bit`,
  `find_first_bit_difference` and `find_last_bit_difference`. The searches
  return -1 when nothing is found.
- `truthkit.cube`: `Cube`, a product term over up to 32 variables, made of a
  polarity mask and a care mask. `print_cubes` writes a list of cubes, one
  per line.
- `truthkit.implicant`: `get_minterms`, `get_jbuddies`, and
  `get_prime_implicants_morreale`, which finds prime implicants with
  Morreale's algorithm. `prime_implicants` does the same starting from a
  truth table.
- `truthkit.permutation`: `delta_swap`. `compute_permutation_masks` and
  `permute_with_masks` apply an arbitrary permutation of bit positions.
- `truthkit.spp`: `simple_spp` merges ESOP cubes into a
  sum-of-pseudo-products form. `create_from_spp` evaluates an SPP form, or an
  ESOP when `sums` is empty, and returns a truth table.
- `truthkit.npn`: exact canonization (`exact_p_canonization`, and
  `exact_npn_canonization` for up to 6 inputs) and heuristic canonization
  (`flip_swap_npn_canonization`, `sifting_npn_canonization`,
  `sifting_p_canonization`). Each returns a tuple `(representative, phase,
  perm)`. `create_from_npn_config` recovers the original table from that
  tuple.
- `truthkit.properties`: `chow_parameters`, and the checks `is_canalizing`,
  `is_horn`, `is_krom`, `is_symmetric_in`, `is_monotone`, `is_selfdual`,
  `is_normal` and `is_trivial`. Also run lengths (`iter_runlengths`,
  `runlength_pattern`), `polynomial_degree`, the distinguishing powers
  (`absolute_distinguishing_power`, `relative_distinguishing_power`) and
  `is_covered_with_divisors`.

## Example

```python
from truthkit.truth_table import from_hex
from truthkit.npn import exact_npn_canonization, create_from_npn_config
from truthkit.properties import chow_parameters

tt = from_hex(3, "5b")
representative, phase, perm = exact_npn_canonization(tt)
print(representative.to_hex())          # 19
assert create_from_npn_config((representative, phase, perm)) == tt

print(chow_parameters(from_hex(2, "e")))  # (3, [2, 2])
```

```python
from truthkit.cube import Cube, print_cubes

c = Cube.from_string("1-0")
print(c.to_string(3))                    # 1-0
print_cubes([c, ~c], 3)
```

## What it does not do

This is a library only and has no command-line tool. It does not compute ESOP,
ISOP or other two-level forms from a truth table. `simple_spp` expects ESOP
cubes that you supply. There is no affine or spectral canonization, and no
functional decomposition.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```