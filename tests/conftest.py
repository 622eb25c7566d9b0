import pytest

from amazons.core.board import Board
from amazons.core.piece import EMPTY, WHITE, BLACK, SPEAR
from amazons.core.square import SIZE, Square, sq


def build_board(rows, turn=WHITE):
    """Board from ten strings of W/B/S/- characters, top row (10) first."""
    chars = {"W": WHITE, "B": BLACK, "S": SPEAR, "-": EMPTY, "E": EMPTY}
    b = Board()
    for i, line in enumerate(rows):
        row = SIZE - 1 - i
        for col, ch in enumerate(line):
            b.put(chars[ch], col, row)
    b.turn = turn
    return b


def walled_board(white, black, empty, turn=WHITE):
    """Board full of spears except for the given pieces and empty squares."""
    b = Board()
    for s in Square.all():
        b.put(SPEAR, s)
    for name in white:
        b.put(WHITE, sq(name))
    for name in black:
        b.put(BLACK, sq(name))
    for name in empty:
        b.put(EMPTY, sq(name))
    b.turn = turn
    return b


@pytest.fixture
def nearly_won():
    """White to move with two moves, both of which leave Black stuck."""
    return walled_board(white=["a1", "c1", "e1", "g1"],
                        black=["a10", "c10", "e10", "g10"],
                        empty=["b1"])


@pytest.fixture
def small_arena():
    """A 3x3 open corner with two queens each; the other queens are walled in."""
    return walled_board(white=["a1", "c1", "j1", "j3"],
                        black=["a3", "c3", "j10", "j8"],
                        empty=["b1", "a2", "b2", "c2", "b3"])


@pytest.fixture
def open_arena():
    """A 4x4 open corner, big enough for a short game."""
    return walled_board(white=["a1", "d4", "j1", "j3"],
                        black=["d1", "a4", "j10", "j8"],
                        empty=["b1", "c1", "a2", "b2", "c2", "d2",
                               "a3", "b3", "c3", "d3", "b4", "c4"])
