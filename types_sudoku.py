# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypedDict, Union

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

CandidateMap = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""

Coord = tuple[int, int]
"""(row, col), 0-based, as used by the board engine."""

DIGITS = frozenset(range(1, 10))


@dataclass(frozen=True)
class Resolved:
    """A cell holding its final digit."""

    digit: int


@dataclass
class Candidates:
    """An unresolved cell and the digits it may still take. Only ever shrinks."""

    digits: set[int] = field(default_factory=lambda: set(DIGITS))


Cell = Union[Resolved, Candidates]


@dataclass(frozen=True)
class SolveStep:
    """One committed placement in the order the solve loop made it."""

    row: int  # 0-based
    col: int  # 0-based
    digit: int
    technique: str  # 'naked_single' or 'hidden_single'
    unit: str = ""  # for hidden singles, the group it was found in (e.g., 'b3')

    @property
    def cell(self) -> str:
        return f"r{self.row + 1}c{self.col + 1}"

    def to_dict(self) -> dict[str, Any]:
        out = {"cell": self.cell, "digit": self.digit, "technique": self.technique}
        if self.unit:
            out["unit"] = self.unit
        return out


class Move(TypedDict, total=False):
    """A single solving action as handed to the CLI & API layers."""

    index: int  # 1-based order in the sequence
    technique: str  # 'naked_single' or 'hidden_single'
    type: str  # always 'placement' for moves produced by the solve loop
    digit: int  # the digit being placed
    cell: str  # target cell (e.g., 'r4c7')
    caption: str  # human-friendly explanation
