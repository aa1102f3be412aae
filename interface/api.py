"""FastAPI REST interface for the engine."""

import threading

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from othello.config import CONFIG
from othello.core.board import Board, side_from_flag
from othello.core.moves import NO_MOVE
from othello.core.search import SearchEngine
from othello.core.utils import setup_logging
from othello.main import OthelloEngine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared engine instance (one game session across requests).
engine = OthelloEngine()
_engine_lock = threading.Lock()


class PositionRequest(BaseModel):
    board: List[List[int]]


class MoveRequest(BaseModel):
    column: int
    line: int
    is_white: bool


class SearchRequest(BaseModel):
    depth: Optional[int] = None
    is_white: bool = False


def _moves_as_lists(moves):
    return [[m.row, m.col] for m in moves]


@app.get("/name")
def get_name():
    return {"name": engine.get_name()}


@app.get("/board")
def get_board():
    with _engine_lock:
        return {
            "board": engine.get_board(),
            "white_score": engine.get_white_score(),
            "black_score": engine.get_black_score(),
            "legal_moves": {
                "white": _moves_as_lists(engine.legal_moves(True)),
                "black": _moves_as_lists(engine.legal_moves(False)),
            },
            "is_game_over": engine.is_game_over(),
        }


@app.post("/position")
def set_position(req: PositionRequest):
    with _engine_lock:
        try:
            engine.load_board(req.board, strict=True)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid board: {e}")
        return {"board": engine.get_board()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _engine_lock:
        if not engine.play_move(req.column, req.line, req.is_white):
            raise HTTPException(status_code=400, detail=f"Illegal move: ({req.column}, {req.line})")
        return {
            "board": engine.get_board(),
            "move": [req.column, req.line],
            "white_score": engine.get_white_score(),
            "black_score": engine.get_black_score(),
        }


@app.get("/playable")
def is_playable(column: int, line: int, is_white: bool):
    with _engine_lock:
        return {"playable": engine.is_playable(column, line, is_white)}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _engine_lock:
        depth = CONFIG.search.depth if req.depth is None else req.depth
        if depth < 0:
            raise HTTPException(status_code=400, detail="Depth must be >= 0")
        search_board = engine.board.copy()

    # Private engine per request: the shared one keeps a node counter.
    searcher = SearchEngine(engine.search.evaluator, depth=depth, pruning=engine.search.pruning)
    result = searcher.search_best_move(search_board, side_from_flag(req.is_white))
    return {
        "move": None if result.move == NO_MOVE else [result.move.row, result.move.col],
        "score": result.score,
        "nodes": result.nodes,
    }


@app.get("/evaluate")
def evaluate(is_white: bool = False):
    with _engine_lock:
        board: Board = engine.board.copy()
    evaluator = engine.search.evaluator
    side = side_from_flag(is_white)
    if hasattr(evaluator, "breakdown"):
        return evaluator.breakdown(board, side)
    return {"total": evaluator.evaluate(board, side)}


@app.get("/clock")
def get_clock():
    with _engine_lock:
        return {
            "white": engine.elapsed_white().total_seconds(),
            "black": engine.elapsed_black().total_seconds(),
        }


@app.post("/reset")
def reset_board():
    with _engine_lock:
        engine.reset()
        return {"board": engine.get_board()}


def main():
    setup_logging(CONFIG.log_level)
    uvicorn.run(app, host=CONFIG.ui.api_host, port=CONFIG.ui.api_port, log_level=CONFIG.log_level.lower())


if __name__ == "__main__":
    main()

