"""Amazons board state with make/undo and lazy move enumeration."""

from typing import Iterator, List, Optional

from amazons.core.move import Move
from amazons.core.piece import Piece, EMPTY, WHITE, BLACK, SPEAR
from amazons.core.square import SIZE, Square, sq

# Starting squares by index: d1 g1 a4 j4 / a7 j7 d10 g10.
WHITE_START = (3, 6, 30, 39)
BLACK_START = (60, 69, 93, 96)

_ALL_SQUARES = Square.all()


class Board:
    def __init__(self, model: Optional["Board"] = None):
        """A board in the initial position, or an independent copy of MODEL."""
        self._cells: List[Piece] = []
        self._turn: Piece = WHITE
        self._history: List[Move] = []
        if model is None:
            self.init()
        else:
            self.copy(model)

    def init(self):
        """Reset to the initial position."""
        self._cells = [EMPTY] * (SIZE * SIZE)
        for i in WHITE_START:
            self._cells[i] = WHITE
        for i in BLACK_START:
            self._cells[i] = BLACK
        self._turn = WHITE
        self._history = []

    def copy(self, model: "Board"):
        """Make me an independent copy of MODEL."""
        self._cells = list(model._cells)
        self._turn = model._turn
        self._history = list(model._history)

    @property
    def turn(self) -> Piece:
        return self._turn

    @turn.setter
    def turn(self, side: Piece):
        assert side in (WHITE, BLACK)
        self._turn = side

    @property
    def num_moves(self) -> int:
        """Number of moves played and not undone."""
        return len(self._history)

    @property
    def history(self) -> List[Move]:
        return list(self._history)

    def get(self, *where) -> Piece:
        """Contents of a square, given as a Square, (col, row) or text."""
        s = where[0] if len(where) == 1 and isinstance(where[0], Square) else sq(*where)
        return self._cells[s.index]

    def put(self, piece: Piece, *where):
        """Set a square, given as a Square, (col, row) or text, to PIECE."""
        s = where[0] if len(where) == 1 and isinstance(where[0], Square) else sq(*where)
        self._cells[s.index] = piece

    def squares_of(self, piece: Piece) -> Iterator[Square]:
        """Squares holding PIECE, in index order."""
        cells = self._cells
        for s in _ALL_SQUARES:
            if cells[s.index] is piece:
                yield s

    def is_unblocked_move(self, from_sq: Square, to_sq: Square,
                          as_empty: Optional[Square] = None) -> bool:
        """True iff FROM-TO is a queen move over empty squares.

        TO and every square between FROM and TO must be empty, except that
        AS_EMPTY (if given) counts as empty wherever it is met.
        """
        if not from_sq.is_queen_move(to_sq):
            return False
        cells = self._cells
        for s in from_sq.ray(from_sq.direction(to_sq)):
            if cells[s.index] is not EMPTY and s is not as_empty:
                return False
            if s is to_sq:
                return True
        return False

    def is_legal(self, move: Move, as_empty: Optional[Square] = None) -> bool:
        """True iff MOVE can be played by the side to move."""
        if move is None or self._cells[move.from_sq.index] is not self._turn:
            return False
        return (self.is_unblocked_move(move.from_sq, move.to_sq, as_empty)
                and self.is_unblocked_move(move.to_sq, move.spear, move.from_sq))

    def make_move(self, move: Move):
        """Play MOVE. No validation: callers must check is_legal first."""
        cells = self._cells
        queen = cells[move.from_sq.index]
        cells[move.from_sq.index] = EMPTY
        cells[move.to_sq.index] = queen
        cells[move.spear.index] = SPEAR
        self._history.append(move)
        self._turn = self._turn.opponent()

    def undo(self):
        """Take back the last move. Does nothing at the start of the history."""
        if not self._history:
            return
        move = self._history.pop()
        cells = self._cells
        queen = cells[move.to_sq.index]
        cells[move.spear.index] = EMPTY
        cells[move.to_sq.index] = EMPTY
        cells[move.from_sq.index] = queen
        self._turn = self._turn.opponent()

    def reachable_from(self, from_sq: Square,
                       as_empty: Optional[Square] = None) -> Iterator[Square]:
        """Lazily yield squares reachable from FROM_SQ by an unblocked queen move.

        Direction 0 is exhausted (nearest first) before direction 1, and so on.
        AS_EMPTY, if given, is treated as empty. The contents of FROM_SQ are
        ignored. The generator reads the live board, so it must not be
        advanced after the board has been changed.
        """
        cells = self._cells
        for direction in range(8):
            for s in from_sq.ray(direction):
                if cells[s.index] is not EMPTY and s is not as_empty:
                    break
                yield s

    def legal_moves(self, side: Optional[Piece] = None) -> Iterator[Move]:
        """Lazily yield every legal move for SIDE (default: the side to move)."""
        side = side or self._turn
        for start in self.squares_of(side):
            for to_sq in self.reachable_from(start, start):
                for spear in self.reachable_from(to_sq, start):
                    yield Move(start, to_sq, spear)

    def has_legal_move(self, side: Optional[Piece] = None) -> bool:
        return next(self.legal_moves(side), None) is not None

    def winner(self) -> Optional[Piece]:
        """The winning side, or None while the side to move can still move."""
        if self.has_legal_move(self._turn):
            return None
        return self._turn.opponent()

    def is_game_over(self) -> bool:
        return self.winner() is not None

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._cells == other._cells and self._turn is other._turn
                and self.num_moves == other.num_moves)

    __hash__ = None

    def rows(self) -> List[str]:
        """Rows as piece characters, top row (10) first."""
        return ["".join(str(self._cells[r * SIZE + c]) for c in range(SIZE))
                for r in range(SIZE - 1, -1, -1)]

    def __str__(self):
        lines = []
        for r in range(SIZE - 1, -1, -1):
            lines.append("  " + "".join(" " + str(self._cells[r * SIZE + c])
                                        for c in range(SIZE)))
        return "\n".join(lines) + "\n"
