"""Truth tables for Boolean functions: bit operations, cubes, prime implicants, bit permutations, SPP forms, NPN canonization and properties."""

__version__ = "0.1.0"

__all__ = [
    "truth_table",
    "bit_operations",
    "cube",
    "implicant",
    "permutation",
    "spp",
    "npn",
    "properties",
]