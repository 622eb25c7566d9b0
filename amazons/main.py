from typing import List, Optional, Tuple

from amazons.core.board import Board
from amazons.core.move import parse_move
from amazons.core.piece import Piece
from amazons.core.search import SearchEngine
from amazons.core.evaluator import Evaluator


class Engine:
    """One authoritative game board plus the search engine that plays on it."""

    def __init__(self, depth=None):
        self.board = Board()
        self.search = SearchEngine(Evaluator(), depth=depth)

    def reset(self):
        self.board.init()

    def get_best_move(self) -> Tuple[Optional[str], int]:
        move, value = self.search.search_best_move(self.board)
        return (str(move) if move else None), value

    def play_best_move(self) -> Optional[str]:
        """Search for the side to move and play the result. None if it cannot move."""
        move = self.search.choose_move(self.board)
        if move is None:
            return None
        self.board.make_move(move)
        return str(move)

    def make_move(self, move_str: str) -> bool:
        """Play a move like 'd1-d7(g7)'. Returns True if it was legal."""
        try:
            move = parse_move(move_str)
        except ValueError:
            return False
        if not self.board.is_legal(move):
            return False
        self.board.make_move(move)
        return True

    def undo(self):
        self.board.undo()

    def legal_moves(self) -> List[str]:
        return [str(m) for m in self.board.legal_moves()]

    def winner(self) -> Optional[Piece]:
        return self.board.winner()

    def print_board(self):
        print(self.board, end="")
