# tests/test_board.py
import random

import pytest

from solver.board import Board
from solver.solver_core import peers
from types_sudoku import Candidates, Resolved, SolveStep


def test_construct_from_digits(easy):
    board = Board(easy)
    assert board.cell(0, 2) == Resolved(3)
    assert board.cell(0, 0) == Candidates(set(range(1, 10)))
    assert board.grid() == easy
    assert board.solve_steps == []


@pytest.mark.parametrize(
    "grid",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 9 for _ in range(8)] + [[0] * 8],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [10]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [-1]],
    ],
)
def test_construct_rejects_bad_grids(grid):
    with pytest.raises(ValueError):
        Board(grid)


def test_easy_puzzle_solves(easy, easy_solution):
    board = Board(easy)
    assert board.solve() is True
    assert board.check_solved()
    assert board.check_valid()
    assert board.grid() == easy_solution
    assert len(board.solve_steps) == sum(v == 0 for row in easy for v in row)


def test_forced_nine_placed_first(empty_grid):
    empty_grid[0][1:3] = [1, 2]
    for r, d in zip(range(3, 9), range(3, 9)):
        empty_grid[r][0] = d
    board = Board(empty_grid)
    board.reduce()
    assert board.cell(0, 0) == Candidates({9})
    step = board.step()
    assert step == SolveStep(0, 0, 9, "naked_single")
    assert board.cell(0, 0) == Resolved(9)
    assert board.solve_steps == [step]


def test_duplicate_in_row_is_invalid(empty_grid):
    empty_grid[0][0] = 5
    empty_grid[0][4] = 5
    board = Board(empty_grid)
    assert board.check_valid() is False


def test_empty_candidate_cell_is_invalid(empty_grid):
    empty_grid[0][1:] = [1, 2, 3, 4, 5, 6, 7, 8]
    empty_grid[4][0] = 9
    board = Board(empty_grid)
    assert board.check_valid() is False


def test_unplaceable_digit_is_invalid(empty_grid):
    # no cell of row 1 can take a 9, though every cell still has candidates
    empty_grid[0][6:] = [1, 2, 3]
    empty_grid[1][0] = 9
    empty_grid[2][4] = 9
    board = Board(empty_grid)
    assert board.check_valid() is False
    assert all(cell.digits for row in board.cells for cell in row if isinstance(cell, Candidates))


def test_full_solution_valid_and_solved(classic_solution):
    board = Board(classic_solution)
    assert board.check_valid()
    assert board.check_solved()
    assert board.solve() is True
    assert board.solve_steps == []


def test_fresh_board_with_blank_not_solved(classic_solution):
    classic_solution[8][8] = 0
    board = Board(classic_solution)
    assert not board.check_solved()
    board.solve()
    assert board.check_solved()
    assert board.solve_steps == [SolveStep(8, 8, 9, "naked_single")]


def test_blank_board_gets_stuck(empty_grid):
    board = Board(empty_grid)
    assert board.solve() is False
    assert board.solve_steps == []
    assert board.check_valid()
    assert board.unresolved() == 81


def test_hard_puzzle_stays_valid(hard):
    board = Board(hard)
    solved = board.solve()
    assert solved == (board.unresolved() == 0)
    assert board.check_valid()
    for r in range(9):
        for c in range(9):
            if hard[r][c]:
                assert board.grid()[r][c] == hard[r][c]


def _snapshot(board):
    return {k: set(v) for k, v in board.candidates().items()}


@pytest.mark.parametrize("name", ["easy", "hard"])
def test_candidates_only_shrink(name, request):
    board = Board(request.getfixturevalue(name))
    before = _snapshot(board)
    while True:
        step = board.next_step()
        after = _snapshot(board)
        for key, digits in after.items():
            assert digits <= before[key]
        if step is None:
            break
        board.apply_step(step)
        before = _snapshot(board)


@pytest.mark.parametrize("name", ["easy", "hard"])
def test_reductions_idempotent(name, request):
    board = Board(request.getfixturevalue(name))
    board.reduce()
    first = board.candidates()
    assert board.reduce() == 0
    assert board.candidates() == first


@pytest.mark.parametrize("name", ["easy", "hard"])
def test_placements_never_repeat_a_peer(name, request):
    board = Board(request.getfixturevalue(name))
    while True:
        step = board.next_step()
        if step is None:
            break
        peer_digits = {
            board.cell(r, c).digit
            for r, c in peers(step.row, step.col)
            if isinstance(board.cell(r, c), Resolved)
        }
        assert step.digit not in peer_digits
        board.apply_step(step)
        assert board.check_valid()


@pytest.mark.parametrize("seed", range(8))
def test_solve_terminates_on_arbitrary_input(seed):
    rng = random.Random(seed)
    grid = [[rng.randint(1, 9) if rng.random() < 0.3 else 0 for _ in range(9)] for _ in range(9)]
    board = Board(grid)
    board.solve()
    blanks = sum(v == 0 for row in grid for v in row)
    assert len(board.solve_steps) <= blanks
    assert board.unresolved() == blanks - len(board.solve_steps)


def test_str_renders_grid(easy):
    text = str(Board(easy))
    assert text.splitlines()[0] == "  3| 2 |6  "


def test_apply_step_refuses_resolved_cell(easy):
    board = Board(easy)
    with pytest.raises(ValueError):
        board.apply_step(SolveStep(0, 2, 9, "manual"))
    assert board.cell(0, 2) == Resolved(3)
    assert board.solve_steps == []
