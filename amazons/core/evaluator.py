"""Mobility-based static evaluator."""

from amazons.config import CONFIG
from amazons.core.board import Board
from amazons.core.piece import Piece, WHITE, BLACK


class Evaluator:
    def __init__(self):
        self.cfg = CONFIG.eval

    def evaluate(self, board: Board) -> int:
        """Return the static value of BOARD, positive favours White.

        A finished game scores +/- winning_value. Otherwise the score is
        White's queen mobility minus Black's, where mobility counts the squares
        each queen could move to (spear throws are not considered).
        """
        winner = board.winner()
        if winner is WHITE:
            return self.cfg.winning_value
        if winner is BLACK:
            return -self.cfg.winning_value
        return self.mobility(board, WHITE) - self.mobility(board, BLACK)

    @staticmethod
    def mobility(board: Board, side: Piece) -> int:
        total = 0
        for s in board.squares_of(side):
            for _ in board.reachable_from(s, s):
                total += 1
        return total
