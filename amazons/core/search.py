import time
import threading
from typing import Optional, Callable, List, Tuple

from amazons.config import CONFIG
from amazons.core.board import Board
from amazons.core.evaluator import Evaluator
from amazons.core.move import Move
from amazons.core.piece import Piece, WHITE, BLACK
from amazons.core.utils import print_info

INF = 1000000


class SearchTimeout(Exception):
    """Raised inside the tree search when the deadline passes or stop() is called."""


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 time_limit_ms: Optional[int] = None):
        self.cfg = CONFIG.search
        self.evaluator = evaluator or Evaluator()
        self.winning_value = self.evaluator.cfg.winning_value
        self.depth = depth if depth is not None else self.cfg.depth
        self.time_limit_ms = time_limit_ms if time_limit_ms is not None else self.cfg.time_limit_ms

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._deadline: Optional[float] = None
        self.nodes = 0
        self.last_depth = 0
        self.last_score: Optional[int] = None

    def max_depth(self, board: Board) -> int:
        """Search depth for BOARD: one extra ply every depth_divisor moves.

        Depth grows as the game goes on, since the branching factor falls
        from about two thousand moves in the opening. A fixed depth, when
        set, replaces the schedule. The result is never below 1.
        """
        if self.depth is not None:
            return max(self.depth, 1)
        d = board.num_moves // self.cfg.depth_divisor + self.cfg.initial_depth
        if self.cfg.max_depth is not None:
            d = min(d, self.cfg.max_depth)
        return max(d, 1)

    def choose_move(self, board: Board, side: Optional[Piece] = None) -> Optional[Move]:
        """Best move for SIDE (default: the side to move), or None if it has none.

        BOARD itself is never modified.
        """
        move, _score = self.search_best_move(board, side)
        return move

    def search_best_move(self, board: Board, side: Optional[Piece] = None) -> Tuple[Optional[Move], int]:
        self._stop_event.clear()
        return self._run(board, side or board.turn, self.max_depth(board))

    def start_search(self, board: Board, side: Optional[Piece] = None, depth: Optional[int] = None,
                     callback: Optional[Callable] = None):
        """Search on a background thread.

        CALLBACK(move, depth, score) is called after each completed depth and
        once more with depth -1 when the search is over.
        """
        if self._thread and self._thread.is_alive(): return
        self._stop_event.clear()
        side = side or board.turn
        target_depth = depth or self.max_depth(board)
        # copy now, so later changes to BOARD cannot leak into the worker
        snapshot = Board(board)

        def worker():
            best, score = self._run(snapshot, side, target_depth, callback)
            if callback: callback(best, -1, score)

        self._thread = threading.Thread(target=worker, daemon=True)
        self._thread.start()

    def stop(self):
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=0.2)

    def _run(self, board: Board, side: Piece, target_depth: int,
             callback: Optional[Callable] = None) -> Tuple[Optional[Move], int]:
        search_board = Board(board)
        search_board.turn = side
        self.nodes = 0
        self.last_depth = 0
        start_time = time.time()
        self._deadline = start_time + self.time_limit_ms / 1000 if self.time_limit_ms else None

        first = next(search_board.legal_moves(side), None)
        if first is None:
            self.last_score = self.evaluator.evaluate(search_board)
            return None, self.last_score

        depths: List[int] = list(range(1, target_depth + 1)) if self.cfg.iterative_deepening else [target_depth]
        best_move, best_score = first, None

        for d in depths:
            try:
                score, move = self._alphabeta(search_board, d, -INF, INF, side is WHITE)
            except SearchTimeout:
                break
            best_move, best_score = move, score
            self.last_depth = d

            if self.cfg.show_info:
                print_info(d, score, self.nodes, time.time() - start_time, move, self.winning_value)
            if callback: callback(move, d, score)

            # a forced result will not change at greater depth
            if abs(score) >= self.winning_value: break

        if best_score is None:
            best_score = self.evaluator.evaluate(search_board)
        self.last_score = best_score
        return best_move, best_score

    def _check_time(self):
        if self._stop_event.is_set():
            raise SearchTimeout()
        if self._deadline is not None and time.time() >= self._deadline:
            raise SearchTimeout()

    def _alphabeta(self, board: Board, depth: int, alpha: int, beta: int,
                   maximizing: bool) -> Tuple[int, Optional[Move]]:
        """Minimax value of BOARD searched DEPTH plies, with the move achieving it.

        White maximises, Black minimises. The first move found wins ties.
        Every make_move is paired with an undo, even when the search is
        abandoned, so BOARD is unchanged on return.
        """
        self.nodes += 1
        self._check_time()

        if depth <= 0:
            return self.evaluator.evaluate(board), None

        side = WHITE if maximizing else BLACK
        moves = list(board.legal_moves(side))
        if not moves:
            return (-self.winning_value if maximizing else self.winning_value), None

        best_move = None
        best_val = -INF if maximizing else INF

        for move in moves:
            board.make_move(move)
            try:
                val, _ = self._alphabeta(board, depth - 1, alpha, beta, not maximizing)
            finally:
                board.undo()

            if maximizing:
                if val > best_val:
                    best_val, best_move = val, move
                    alpha = max(alpha, best_val)
            else:
                if val < best_val:
                    best_val, best_move = val, move
                    beta = min(beta, best_val)

            if beta <= alpha:
                break

        return best_val, best_move

    def minimax(self, board: Board, depth: int, maximizing: Optional[bool] = None) -> Tuple[int, Optional[Move]]:
        """Plain minimax without pruning. Slow; meant for checking _alphabeta."""
        if maximizing is None:
            maximizing = board.turn is WHITE
        if depth <= 0:
            return self.evaluator.evaluate(board), None

        side = WHITE if maximizing else BLACK
        moves = list(board.legal_moves(side))
        if not moves:
            return (-self.winning_value if maximizing else self.winning_value), None

        best_move = None
        best_val = -INF if maximizing else INF
        for move in moves:
            board.make_move(move)
            try:
                val, _ = self.minimax(board, depth - 1, not maximizing)
            finally:
                board.undo()
            if (maximizing and val > best_val) or (not maximizing and val < best_val):
                best_val, best_move = val, move
        return best_val, best_move
