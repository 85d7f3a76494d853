"""Core Sudoku engine pieces: index math, constraint groups, candidate reductions and placement strategies."""

# solver_core.py
# Works on a 9x9 list of lists of cells, each either Resolved(digit) or Candidates({digits}).
# - constraint groups (row / column / box) as coordinate lists
# - reductions: basic elimination, pointing (box-line), naked subsets
# - placements: naked single, hidden single
# Coordinates are 0-based (row, col); keys such as 'r1c1' are 1-based.
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterator, Optional

from types_sudoku import DIGITS, Candidates, Cell, Coord, Resolved, SolveStep

log = logging.getLogger(__name__)

Cells = list[list[Cell]]

ROW = "row"
COL = "col"
BOX = "box"
# Hidden singles are searched in this order.
UNIT_KINDS = (BOX, ROW, COL)


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def key_to_rc(key: str) -> Coord:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r, c)


def unit_cells_row(r: int) -> list[Coord]:
    return [(r, c) for c in range(9)]


def unit_cells_col(c: int) -> list[Coord]:
    return [(r, c) for r in range(9)]


def unit_cells_box(b: int) -> list[Coord]:
    r0 = 3 * (b // 3)
    c0 = 3 * (b % 3)
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


_UNIT_CELLS = {ROW: unit_cells_row, COL: unit_cells_col, BOX: unit_cells_box}


def unit_cells(kind: str, index: int) -> list[Coord]:
    return _UNIT_CELLS[kind](index)


def which_box(r: int, c: int) -> int:
    return 3 * (r // 3) + c // 3


def unit_label(kind: str, index: int) -> str:
    """'r1', 'c1' or 'b1' (1-based), as used in payloads and captions."""
    return {ROW: "r", COL: "c", BOX: "b"}[kind] + str(index + 1)


def iter_units() -> Iterator[tuple[str, int, list[Coord]]]:
    """All 27 groups: boxes, then rows, then columns, each in index order."""
    for kind in UNIT_KINDS:
        for index in range(9):
            yield kind, index, unit_cells(kind, index)


def group(cells: Cells, kind: str, index: int) -> list[tuple[Cell, Coord]]:
    """The 9 (cell, coordinate) pairs of one row, column or box."""
    return [(cells[r][c], (r, c)) for r, c in unit_cells(kind, index)]


def peers(r: int, c: int) -> set[Coord]:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = set(unit_cells_row(r)) | set(unit_cells_col(c)) | set(unit_cells_box(which_box(r, c)))
    ps.discard((r, c))
    return ps


def resolved_digits(cells: Cells, coords) -> set[int]:
    return {cells[r][c].digit for r, c in coords if isinstance(cells[r][c], Resolved)}


# ---------------------------------------------------------------------------
# Reductions. Each returns the number of candidate digits it removed.
# ---------------------------------------------------------------------------


def trim_candidates(cells: Cells) -> int:
    """Remove from every unresolved cell the digits already placed in its row, column or box."""
    removed = 0
    for r in range(9):
        for c in range(9):
            cell = cells[r][c]
            if not isinstance(cell, Candidates):
                continue
            used = cell.digits & resolved_digits(cells, peers(r, c))
            if used:
                cell.digits -= used
                removed += len(used)
    return removed


def _eliminate_outside_box(cells: Cells, d: int, line: list[Coord], box: list[Coord]) -> int:
    removed = 0
    for r, c in line:
        if (r, c) in box:
            continue
        cell = cells[r][c]
        if isinstance(cell, Candidates) and d in cell.digits:
            cell.digits.discard(d)
            removed += 1
    return removed


def reduce_pointing(cells: Cells) -> int:
    """If in a box, a digit's candidates lie in a single row (or column), eliminate that digit
    from the rest of that row (or column) outside the box.
    """
    removed = 0
    for b in range(9):
        box = unit_cells_box(b)
        placed = resolved_digits(cells, box)
        for d in DIGITS - placed:
            locs = [
                (r, c)
                for r, c in box
                if isinstance(cells[r][c], Candidates) and d in cells[r][c].digits
            ]
            if not locs:
                continue
            rows = {r for r, _ in locs}
            cols = {c for _, c in locs}
            if len(rows) == 1:
                removed += _eliminate_outside_box(cells, d, unit_cells_row(rows.pop()), box)
            if len(cols) == 1:
                removed += _eliminate_outside_box(cells, d, unit_cells_col(cols.pop()), box)
    return removed


def reduce_subsets(cells: Cells) -> int:
    """Confine cells to the digits that can only go in them.

    Per group, each digit is mapped to the set of positions still holding it as
    a candidate. When k digits share the same k positions, those positions can
    hold nothing else, so every other candidate is dropped from them. Groups are
    processed one after another on the live grid, so a later group only ever
    narrows what an earlier one left.
    """
    removed = 0
    for _kind, _index, coords in iter_units():
        where: dict[int, set[int]] = defaultdict(set)
        for pos, (r, c) in enumerate(coords):
            cell = cells[r][c]
            if isinstance(cell, Candidates):
                for d in cell.digits:
                    where[d].add(pos)
        digits_at: dict[frozenset, set[int]] = defaultdict(set)
        for d, positions in where.items():
            digits_at[frozenset(positions)].add(d)
        for positions, digits in digits_at.items():
            if len(positions) != len(digits):
                continue
            for pos in positions:
                r, c = coords[pos]
                cell = cells[r][c]
                extra = cell.digits - digits
                if extra:
                    cell.digits &= digits
                    removed += len(extra)
    return removed


REDUCTIONS = (trim_candidates, reduce_pointing, reduce_subsets)


def reduce_all(cells: Cells) -> int:
    """Run the reductions in order, repeating the sequence until none of them removes anything."""
    total = 0
    while True:
        removed = 0
        for reduction in REDUCTIONS:
            n = reduction(cells)
            if n:
                log.debug("%s removed %d candidate(s)", reduction.__name__, n)
            removed += n
        if not removed:
            return total
        total += removed


# ---------------------------------------------------------------------------
# Placements. Each returns the first forced placement in its scan order, or None.
# ---------------------------------------------------------------------------


def find_naked_single(cells: Cells) -> Optional[SolveStep]:
    for r in range(9):
        for c in range(9):
            cell = cells[r][c]
            if isinstance(cell, Candidates) and len(cell.digits) == 1:
                (d,) = cell.digits
                return SolveStep(r, c, d, "naked_single")
    return None


def find_hidden_single(cells: Cells) -> Optional[SolveStep]:
    for kind, index, coords in iter_units():
        for d in sorted(DIGITS):
            holders = [
                (r, c)
                for r, c in coords
                if isinstance(cells[r][c], Candidates) and d in cells[r][c].digits
            ]
            if len(holders) == 1:
                r, c = holders[0]
                return SolveStep(r, c, d, "hidden_single", unit_label(kind, index))
    return None


STRATEGIES = (find_naked_single, find_hidden_single)


def find_placement(cells: Cells) -> Optional[SolveStep]:
    for strategy in STRATEGIES:
        step = strategy(cells)
        if step is not None:
            return step
    return None
