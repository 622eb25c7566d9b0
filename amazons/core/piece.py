from enum import Enum


class Piece(Enum):
    EMPTY = "-"
    WHITE = "W"
    BLACK = "B"
    SPEAR = "S"

    def opponent(self) -> "Piece":
        """The other side. Only meaningful for WHITE and BLACK."""
        if self is Piece.WHITE:
            return Piece.BLACK
        if self is Piece.BLACK:
            return Piece.WHITE
        return self

    def __str__(self):
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()


EMPTY = Piece.EMPTY
WHITE = Piece.WHITE
BLACK = Piece.BLACK
SPEAR = Piece.SPEAR
