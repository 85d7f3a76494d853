"""Reading puzzle files (stacked 9-line blocks) and rendering grids as text."""

from __future__ import annotations

from pathlib import Path

from types_sudoku import CandidateMap, Grid

_DIGIT_CHARS = "0123456789"


def parse_row(line: str) -> list[int]:
    """First 9 characters as digits; anything else (or a short line) counts as empty."""
    row = [0] * 9
    for i, ch in enumerate(line[:9]):
        if ch in _DIGIT_CHARS:
            row[i] = int(ch)
    return row


def parse_boards(text: str) -> list[Grid]:
    """Split text into grids. Every block is a header/separator line followed by 9 rows;
    a trailing block with fewer than 9 rows is dropped.
    """
    boards: list[Grid] = []
    rows: Grid = []
    pos = 9
    for line in text.splitlines():
        if pos == 9:
            pos = 0
            rows = []
            continue
        rows.append(parse_row(line))
        pos += 1
        if pos == 9:
            boards.append(rows)
    return boards


def load_boards(path: str | Path) -> list[Grid]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_boards(f.read())


def format_grid(grid: Grid) -> str:
    lines = []
    for r in range(9):
        parts = []
        for c in range(9):
            v = grid[r][c]
            parts.append(str(v) if v else " ")
            if c % 3 == 2 and c != 8:
                parts.append("|")
        lines.append("".join(parts))
        if r % 3 == 2 and r != 8:
            lines.append("-" * 11)
    return "\n".join(lines)


def format_candidates(grid: Grid, candidates: CandidateMap) -> str:
    """Pencil-mark view: each cell drawn as a 3x3 block of its candidates, resolved cells as
    the digit in the centre.
    """
    out = []
    for r in range(9):
        band = ["", "", ""]
        for c in range(9):
            v = grid[r][c]
            opts = candidates.get(f"r{r + 1}c{c + 1}", [])
            for i in range(3):
                if v:
                    chunk = f" {v} " if i == 1 else "   "
                else:
                    chunk = "".join(str(d) if d in opts else "." for d in range(3 * i + 1, 3 * i + 4))
                band[i] += chunk + (" | " if c % 3 == 2 and c != 8 else " ")
        out.extend(line.rstrip() for line in band)
        if r != 8:
            out.append("-" * 39 if r % 3 == 2 else "")
    return "\n".join(out)
