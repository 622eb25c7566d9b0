"""Board coordinates and queen-move geometry on the 10x10 Amazons board."""

import re
from typing import List, Optional, Tuple

SIZE = 10

# Clockwise from "up" (increasing row): N, NE, E, SE, S, SW, W, NW.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 1), (1, 0), (1, -1),
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
)

_SQUARE_PATTERN = re.compile(r"([a-j])(10|[1-9])")


class Square:
    """A single board square.

    Squares are interned: there is exactly one instance per index, so they can
    be compared with ``is`` as well as ``==``. Use :func:`sq` to obtain one.
    """

    __slots__ = ("index", "col", "row", "_rays")

    def __init__(self, index: int):
        self.index = index
        self.col = index % SIZE
        self.row = index // SIZE
        self._rays: List[List["Square"]] = []

    def __repr__(self):
        return f"Square({self})"

    def __str__(self):
        return f"{chr(ord('a') + self.col)}{self.row + 1}"

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return self.index

    def __lt__(self, other: "Square") -> bool:
        return self.index < other.index

    def __deepcopy__(self, memo):
        return self

    @staticmethod
    def exists(col: int, row: int) -> bool:
        return 0 <= col < SIZE and 0 <= row < SIZE

    @staticmethod
    def all() -> List["Square"]:
        """All squares in index order."""
        return list(_SQUARES)

    def ray(self, direction: int) -> List["Square"]:
        """Squares from here to the edge in DIRECTION, nearest first."""
        return self._rays[direction]

    def queen_move(self, direction: int, steps: int) -> Optional["Square"]:
        """Square STEPS away in DIRECTION, or None if that leaves the board."""
        if not 0 <= direction < 8 or steps < 1:
            return None
        ray = self._rays[direction]
        if steps > len(ray):
            return None
        return ray[steps - 1]

    def is_queen_move(self, other: "Square") -> bool:
        if other is None or other is self:
            return False
        dc = other.col - self.col
        dr = other.row - self.row
        return dc == 0 or dr == 0 or abs(dc) == abs(dr)

    def direction(self, other: "Square") -> int:
        """Direction index of the queen move from here to OTHER."""
        assert self.is_queen_move(other), f"{self}-{other} is not a queen move"
        dc = (other.col > self.col) - (other.col < self.col)
        dr = (other.row > self.row) - (other.row < self.row)
        return DIRECTIONS.index((dc, dr))

    def distance(self, other: "Square") -> int:
        """Number of steps between here and OTHER along their common line."""
        assert self.is_queen_move(other), f"{self}-{other} is not a queen move"
        return max(abs(other.col - self.col), abs(other.row - self.row))


_SQUARES: List[Square] = [Square(i) for i in range(SIZE * SIZE)]

for _s in _SQUARES:
    for _dc, _dr in DIRECTIONS:
        _ray = []
        _c, _r = _s.col + _dc, _s.row + _dr
        while Square.exists(_c, _r):
            _ray.append(_SQUARES[_r * SIZE + _c])
            _c += _dc
            _r += _dr
        _s._rays.append(_ray)


def sq(*args) -> Square:
    """Return the square for an index, a (col, row) pair, or text like "c4".

    Out-of-range numbers are programming errors and fail an assertion;
    malformed text raises ValueError.
    """
    if len(args) == 1 and isinstance(args[0], str):
        mat = _SQUARE_PATTERN.fullmatch(args[0].strip().lower())
        if mat is None:
            raise ValueError(f"Invalid square: {args[0]!r}")
        return _SQUARES[(int(mat.group(2)) - 1) * SIZE + ord(mat.group(1)) - ord("a")]
    if len(args) == 1:
        index = args[0]
        assert 0 <= index < SIZE * SIZE, f"square index out of range: {index}"
        return _SQUARES[index]
    col, row = args
    assert Square.exists(col, row), f"square out of range: ({col}, {row})"
    return _SQUARES[row * SIZE + col]
