# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def rows(*lines):
    return [[int(ch) for ch in line] for line in lines]


# Project Euler "Grid 01": singles are enough.
EASY = rows(
    "003020600",
    "900305001",
    "001806400",
    "008102900",
    "700000008",
    "006708200",
    "002609500",
    "800203009",
    "005010300",
)

EASY_SOLUTION = rows(
    "483921657",
    "967345821",
    "251876493",
    "548132976",
    "729564138",
    "136798245",
    "372689514",
    "814253769",
    "695417382",
)

CLASSIC_SOLUTION = rows(
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
)

# Needs guessing; deduction alone stops partway.
HARD = rows(
    "800000000",
    "003600000",
    "070090200",
    "050007000",
    "000045700",
    "000100030",
    "001000068",
    "008500010",
    "090000400",
)


@pytest.fixture
def easy():
    return [row[:] for row in EASY]


@pytest.fixture
def easy_solution():
    return [row[:] for row in EASY_SOLUTION]


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def hard():
    return [row[:] for row in HARD]


@pytest.fixture
def empty_grid():
    return [[0] * 9 for _ in range(9)]
