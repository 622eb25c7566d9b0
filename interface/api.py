"""FastAPI REST interface for a single local game."""

import threading

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from amazons.config import CONFIG
from amazons.core.board import Board
from amazons.core.evaluator import Evaluator
from amazons.core.move import parse_move
from amazons.core.search import SearchEngine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

engine = SearchEngine(Evaluator())
board = Board()
_board_lock = threading.Lock()


class MoveRequest(BaseModel):
    move: str  # e.g. "d1-d7(g7)" or "d1 d7 g7"


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(None, ge=1)
    play: bool = False


def _state():
    winner = board.winner()
    return {
        "rows": board.rows(),
        "turn": board.turn.label.lower(),
        "num_moves": board.num_moves,
        "num_legal_moves": sum(1 for _ in board.legal_moves()),
        "winner": winner.label.lower() if winner else None,
        "is_game_over": winner is not None,
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _state()


@app.get("/legal_moves")
def get_legal_moves(limit: int = 100):
    with _board_lock:
        moves = []
        for m in board.legal_moves():
            if len(moves) >= limit:
                break
            moves.append(str(m))
        return {"turn": board.turn.label.lower(), "moves": moves}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            move = parse_move(req.move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if not board.is_legal(move):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        board.make_move(move)
        return {"move": str(move), **_state()}


@app.post("/undo")
def undo_move():
    with _board_lock:
        board.undo()
        return _state()


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if board.winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        search_board = Board(board)

    searcher = SearchEngine(engine.evaluator, depth=req.depth) if req.depth else engine
    best, score = searcher.search_best_move(search_board)

    with _board_lock:
        played = False
        # only play if nobody moved while we were searching
        if req.play and best is not None and board == search_board and board.is_legal(best):
            board.make_move(best)
            played = True
        return {
            "best_move": str(best) if best else None,
            "score": score,
            "depth": searcher.last_depth,
            "nodes": searcher.nodes,
            "played": played,
        }


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.init()
        return _state()


def serve():
    uvicorn.run(app, host="127.0.0.1", port=CONFIG.ui.api_port,
                log_level=CONFIG.log_level.lower())
