"""Core engine components: geometry, moves, board, evaluator and search."""

from .square import Square, sq
from .piece import Piece
from .move import Move, mv, parse_move
from .board import Board
from .evaluator import Evaluator
from .search import SearchEngine
