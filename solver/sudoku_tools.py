"""Tool-friendly wrappers around the board engine: sanity checks, candidates, solving and step-by-step moves. Returns plain dicts for the CLI and the HTTP API."""

from __future__ import annotations

from typing import Dict

from types_sudoku import Grid, Move, SolveStep

from .board import Board, check_grid_shape
from .solver_core import iter_units, key_to_rc, rc_to_key, unit_label


def sanity_check(original: Grid, current: Grid) -> Dict:
    check_grid_shape(original)
    check_grid_shape(current)
    issues = []
    for r in range(1, 10):
        for c in range(1, 10):
            if original[r-1][c-1] != 0 and current[r-1][c-1] not in (0, original[r-1][c-1]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r-1][c-1], "found": current[r-1][c-1]})

    def duplicates_in_unit(vals):
        seen = set(); dups = set()
        for v in vals:
            if v == 0: continue
            if v in seen: dups.add(v)
            seen.add(v)
        return dups

    for kind, index, coords in iter_units():
        vals = [current[r][c] for r, c in coords]
        dups = duplicates_in_unit(vals)
        if dups:
            cells = [rc_to_key(r + 1, c + 1) for (r, c), v in zip(coords, vals) if v in dups]
            issues.append({"type": "duplicate", "unit": unit_label(kind, index),
                           "digits": sorted(dups), "cells": cells})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Candidate digits for each empty cell after all reductions. Returns {'candidates': {'r1c2': [1,2,5], ...}}."""
    board = Board(current)
    board.reduce()
    return {"candidates": board.candidates()}


def solve_tool(current: Grid) -> Dict:
    board = Board(current)
    solved = board.solve()
    return {
        "solved": solved,
        "valid": board.check_valid(),
        "grid": board.grid(),
        "steps": [s.to_dict() for s in board.solve_steps],
    }


def caption_for_step(step: SolveStep) -> str:
    if step.technique == "naked_single":
        return f"Only one candidate fits {step.cell}."
    kind = {"r": "row", "c": "column", "b": "box"}[step.unit[0]]
    return f"Digit {step.digit} appears in only one cell in {kind} {step.unit[1:]}."


def step_to_move(step: SolveStep, index: int) -> Move:
    return Move(
        index=index,
        technique=step.technique,
        type="placement",
        digit=step.digit,
        cell=step.cell,
        caption=caption_for_step(step),
    )


def next_moves(current: Grid, max_moves: int = 5) -> Dict:
    """Up to `max_moves` forced placements in the order the solve loop finds them, each
    applied before looking for the next. Also returns the grid/candidates reached.
    """
    board = Board(current)
    moves: list[Move] = []
    while len(moves) < max_moves:
        step = board.step()
        if step is None:
            break
        moves.append(step_to_move(step, len(moves) + 1))
    board.reduce()
    return {"moves": moves, "snapshot": {"current": board.grid(), "candidates": board.candidates()}}


def apply_move(current: Grid, move: Dict) -> Dict:
    """Placement only; returns the new grid and its candidates. The input grid is left untouched."""
    r, c = key_to_rc(move["cell"])
    if not (1 <= r <= 9 and 1 <= c <= 9 and 1 <= move["digit"] <= 9):
        raise ValueError(f"bad placement {move['cell']}={move['digit']}")
    board = Board(current)
    board.apply_step(SolveStep(r - 1, c - 1, move["digit"], move.get("technique", "manual")))
    board.reduce()
    return {"current": board.grid(), "candidates": board.candidates()}
