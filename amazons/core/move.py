"""Amazons moves and their text notation."""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from amazons.core.square import Square, sq

_SQ = r"([a-j](?:10|[1-9]))"
_DASHED = re.compile(rf"{_SQ}-{_SQ}\({_SQ}\)")
_SPACED = re.compile(rf"{_SQ}\s+{_SQ}\s+{_SQ}")


@dataclass(frozen=True)
class Move:
    """A queen move FROM-TO followed by a spear thrown from TO onto SPEAR.

    A move says nothing about which side makes it; legality is always
    judged against the piece standing on ``from_sq`` in a given board.
    """

    from_sq: Square
    to_sq: Square
    spear: Square

    def __str__(self):
        return f"{self.from_sq}-{self.to_sq}({self.spear})"


# moves handed out by mv(), keyed by (from, to, spear) index
_MOVES: Dict[Tuple[int, int, int], Move] = {}


def mv(from_sq: Square, to_sq: Square, spear: Square) -> Optional[Move]:
    """Return the move FROM-TO(SPEAR), or None if either leg is not a queen move.

    The same Move object is returned for the same three squares.
    """
    if not (from_sq.is_queen_move(to_sq) and to_sq.is_queen_move(spear)):
        return None
    key = (from_sq.index, to_sq.index, spear.index)
    move = _MOVES.get(key)
    if move is None:
        move = _MOVES[key] = Move(from_sq, to_sq, spear)
    return move


def parse_move(text: str) -> Move:
    """Parse 'a1-b2(c3)' or 'a1 b2 c3' into a Move.

    Raises ValueError if the text is malformed or does not describe two
    consecutive queen moves.
    """
    cleaned = text.strip().lower()
    mat = _DASHED.fullmatch(cleaned) or _SPACED.fullmatch(cleaned)
    if mat is None:
        raise ValueError(f"Invalid move notation: {text!r}")
    move = mv(sq(mat.group(1)), sq(mat.group(2)), sq(mat.group(3)))
    if move is None:
        raise ValueError(f"Not a queen move: {text!r}")
    return move
