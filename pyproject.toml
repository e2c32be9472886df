[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "truthkit"
version = "0.1.0"
description = "Truth tables for Boolean functions: bit operations, cubes, prime implicants, bit permutations, SPP forms, NPN canonization and function properties"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "boolean",
    "truth table",
    "logic synthesis",
    "npn",
    "prime implicants",
    "cube",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["truthkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
