"""Batch runner: load every puzzle from a file, solve each by deduction, report valid/solved per board and overall counts."""

# solve_cli.py
# - Reads stacked 9-line puzzle blocks (header line + 9 rows each)
# - Solves every board with the deduction loop (no guessing)
# - Prints each result and a one-line summary, or a JSON report with --json
#
# Usage:
#   python -m apps.cli.solve_cli --input sudoku_boards.txt --show --steps
#   python -m apps.cli.solve_cli --config solve.yaml --json

import argparse
import json
import logging
import sys

from tqdm import tqdm

from solver.board import Board
from solver.config import resolve_config
from solver.puzzle_io import format_candidates, format_grid, load_boards


def solve_one(grid, cfg):
    board = Board(grid)
    if cfg.show:
        print(format_grid(board.grid()))
        print()
    board.solve()
    valid = board.check_valid()
    solved = board.check_solved()
    return board, {
        "valid": valid,
        "solved": solved,
        "unresolved": board.unresolved(),
        "grid": board.grid(),
        "steps": [s.to_dict() for s in board.solve_steps],
    }


def print_result(index, board, result, cfg):
    print(f"[solve] board {index}")
    if cfg.show:
        print(format_grid(result["grid"]))
    if cfg.show_candidates and not result["solved"]:
        print(format_candidates(result["grid"], board.candidates()))
    if cfg.show_steps:
        for n, step in enumerate(result["steps"], 1):
            print(f"  #{n:<3} {step['technique']}: {step['cell']} = {step['digit']}")
    print(f"Valid: {result['valid']}")
    print(f"Solved: {result['solved']}")
    print()


def summarize(results):
    return {
        "boards": len(results),
        "solved": sum(r["solved"] for r in results),
        "invalid": sum(not r["valid"] for r in results),
        "stuck": sum(r["valid"] and not r["solved"] for r in results),
    }


def main(args):
    cfg = resolve_config(
        args.config,
        input=args.input,
        show=args.show or None,
        show_candidates=args.candidates or None,
        show_steps=args.steps or None,
        max_boards=args.max_boards,
        progress=args.progress or None,
        json=args.json or None,
        log_level="DEBUG" if args.verbose else None,
    )
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        grids = load_boards(cfg.input)
    except OSError as e:
        print(f"[solve] cannot read {cfg.input}: {e}", file=sys.stderr)
        return 2
    if cfg.max_boards is not None:
        grids = grids[: cfg.max_boards]

    results = []
    for index, grid in enumerate(tqdm(grids, desc="solve", ncols=88, disable=not cfg.progress), 1):
        board, result = solve_one(grid, cfg)
        results.append(result)
        if not cfg.json:
            print_result(index, board, result, cfg)

    summary = summarize(results)
    if cfg.json:
        print(json.dumps({"summary": summary, "boards": results}, indent=2))
    else:
        print(
            f"[solve] boards={summary['boards']} solved={summary['solved']} "
            f"invalid={summary['invalid']} stuck={summary['stuck']}"
        )
    return 0


def build_parser():
    ap = argparse.ArgumentParser(description="Solve Sudoku boards by constraint propagation.")
    ap.add_argument("--input", default=None, help="puzzle file (default: sudoku_boards.txt)")
    ap.add_argument("--config", default=None, help="YAML config path (optional)")
    ap.add_argument("--show", action="store_true", help="print the grid before and after solving")
    ap.add_argument("--candidates", action="store_true", help="print pencil marks for unsolved boards")
    ap.add_argument("--steps", action="store_true", help="list every placement made")
    ap.add_argument("--max-boards", type=int, default=None)
    ap.add_argument("--json", action="store_true", help="emit one JSON report instead of text")
    ap.add_argument("--progress", action="store_true", help="show a progress bar")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


if __name__ == "__main__":
    sys.exit(main(build_parser().parse_args()))
