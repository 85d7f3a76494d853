# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List, Dict, Optional

from solver.sudoku_tools import (
    sanity_check, compute_candidates_tool, solve_tool,
    next_moves as _next_moves, apply_move as _apply_move,
)

app = FastAPI(title="Sudoku Constraint Solver API")

Row = List[int]


class GridModel(BaseModel):
    grid: List[Row]


class SanityRequest(BaseModel):
    original: List[Row]
    current: List[Row]


class NextMovesRequest(BaseModel):
    current: List[Row]
    max_moves: int = Field(5, ge=1, le=81)


class MoveModel(BaseModel):
    cell: str = Field(..., pattern=r"^r[1-9]c[1-9]$")
    digit: int = Field(..., ge=1, le=9)
    technique: Optional[str] = None


class ApplyMoveRequest(BaseModel):
    current: List[Row]
    move: MoveModel


def _call(fn, *args):
    try:
        return fn(*args)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest) -> Dict:
    return _call(sanity_check, payload.original, payload.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return _call(compute_candidates_tool, payload.grid)


@app.post("/solve")
def api_solve(payload: GridModel):
    return _call(solve_tool, payload.grid)


@app.post("/next_moves")
def api_moves(req: NextMovesRequest):
    return _call(_next_moves, req.current, req.max_moves)


@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    return _call(_apply_move, req.current, req.move.model_dump(exclude_none=True))
