"""Board: owns the 9x9 cell grid and drives the deduction loop.

A board is built once from a grid of digits (0 = empty). `solve()` repeats
"reduce candidates, then place one forced digit" until no strategy finds a
placement. Puzzles that need guessing simply end with unresolved cells;
`check_valid()` and `check_solved()` report on the outcome.
"""

from __future__ import annotations

import logging
from typing import Optional

from types_sudoku import DIGITS, CandidateMap, Candidates, Cell, Grid, Resolved, SolveStep

from .puzzle_io import format_grid
from .solver_core import Cells, find_placement, iter_units, rc_to_key, reduce_all, trim_candidates

log = logging.getLogger(__name__)


def check_grid_shape(digits: Grid) -> None:
    if len(digits) != 9 or any(len(row) != 9 for row in digits):
        raise ValueError("grid must be 9x9")
    for r, row in enumerate(digits):
        for c, v in enumerate(row):
            if not isinstance(v, int) or not 0 <= v <= 9:
                raise ValueError(f"r{r + 1}c{c + 1}: expected a digit 0..9, got {v!r}")


class Board:
    def __init__(self, digits: Grid):
        check_grid_shape(digits)
        self.cells: Cells = [
            [Resolved(v) if v else Candidates() for v in row] for row in digits
        ]
        self.solve_steps: list[SolveStep] = []

    def __str__(self) -> str:
        return format_grid(self.grid())

    def cell(self, r: int, c: int) -> Cell:
        return self.cells[r][c]

    # ---- read access ----

    def grid(self) -> Grid:
        """Resolved digits, 0 for every cell still carrying candidates."""
        return [
            [cell.digit if isinstance(cell, Resolved) else 0 for cell in row]
            for row in self.cells
        ]

    def candidates(self) -> CandidateMap:
        """Snapshot of the remaining candidates keyed 'r1c1' (unresolved cells only)."""
        return {
            rc_to_key(r + 1, c + 1): sorted(cell.digits)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if isinstance(cell, Candidates)
        }

    def unresolved(self) -> int:
        return sum(isinstance(cell, Candidates) for row in self.cells for cell in row)

    # ---- solving ----

    def reduce(self) -> int:
        return reduce_all(self.cells)

    def next_step(self) -> Optional[SolveStep]:
        """Reduce candidates and return the placement the strategies would make, without making it."""
        # reductions run to their own fixed point before any placement is looked for
        self.reduce()
        return find_placement(self.cells)

    def apply_step(self, step: SolveStep) -> None:
        if isinstance(self.cells[step.row][step.col], Resolved):
            raise ValueError(f"{step.cell} is already resolved")
        self.cells[step.row][step.col] = Resolved(step.digit)
        self.solve_steps.append(step)
        log.debug("placed %d at %s (%s)", step.digit, step.cell, step.technique)

    def step(self) -> Optional[SolveStep]:
        step = self.next_step()
        if step is not None:
            self.apply_step(step)
        return step

    def solve(self) -> bool:
        """Place forced digits until stuck. Returns whether the board ended up fully solved."""
        placed = 0
        while self.step() is not None:
            placed += 1
        solved = self.check_solved()
        if solved:
            log.info("solved after %d placement(s)", placed)
        else:
            log.info("stuck after %d placement(s), %d cell(s) unresolved", placed, self.unresolved())
        return solved

    # ---- checks ----

    def check_valid(self) -> bool:
        """False if a cell has no candidates left, a group repeats a digit, or a group can no
        longer hold some digit at all. Refreshes basic elimination first.
        """
        trim_candidates(self.cells)
        for row in self.cells:
            for cell in row:
                if isinstance(cell, Candidates) and not cell.digits:
                    return False
        for _kind, _index, coords in iter_units():
            placed = set()
            reachable = set()
            for r, c in coords:
                cell = self.cells[r][c]
                if isinstance(cell, Resolved):
                    if cell.digit in placed:
                        return False
                    placed.add(cell.digit)
                    reachable.add(cell.digit)
                else:
                    reachable |= cell.digits
            if reachable != DIGITS:
                return False
        return True

    def check_solved(self) -> bool:
        return all(isinstance(cell, Resolved) for row in self.cells for cell in row)
