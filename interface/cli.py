"""Line-oriented command interpreter for playing Amazons in a terminal."""

import re
import sys
from typing import Optional, TextIO

from amazons.config import CONFIG
from amazons.core.board import Board
from amazons.core.move import Move, parse_move
from amazons.core.piece import Piece, WHITE, BLACK
from amazons.core.search import SearchEngine

_SQ = r"[a-j](?:10|[1-9])"
_COMMENT = re.compile(r"#.*")


class Player:
    """Something that produces the next command for one side."""

    def __init__(self, piece: Piece, controller: "Controller"):
        self.piece = piece
        self.controller = controller

    def my_move(self) -> Optional[str]:
        raise NotImplementedError


class TextPlayer(Player):
    def my_move(self) -> Optional[str]:
        return self.controller.read_line()


class AIPlayer(Player):
    def my_move(self) -> Optional[str]:
        move = self.controller.engine.choose_move(self.controller.board, self.piece)
        if move is None:
            return None
        self.controller.report_move(move)
        return str(move)


class Controller:
    def __init__(self, engine: Optional[SearchEngine] = None, stdin: TextIO = None,
                 stdout: TextIO = None, stderr: TextIO = None, prompt: bool = True):
        self.board = Board()
        self.engine = engine or SearchEngine()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = prompt
        self.playing = False
        self.white: Player = self._make_player(WHITE, CONFIG.ui.auto_white)
        self.black: Player = self._make_player(BLACK, CONFIG.ui.auto_black)
        self._commands = [
            (re.compile(r"quit"), self._do_quit),
            (re.compile(r"new"), self._do_new),
            (re.compile(r"dump"), self._do_dump),
            (re.compile(r"undo"), self._do_undo),
            (re.compile(r"auto\s+(white|black)"), self._do_auto),
            (re.compile(r"manual\s+(white|black)"), self._do_manual),
            (re.compile(rf"{_SQ}-{_SQ}\({_SQ}\)"), self._do_move),
            (re.compile(rf"{_SQ}\s+{_SQ}\s+{_SQ}"), self._do_move),
        ]

    def _make_player(self, piece: Piece, auto: bool) -> Player:
        return AIPlayer(piece, self) if auto else TextPlayer(piece, self)

    def play(self):
        """Run commands until 'quit' or end of input."""
        self.playing = True
        while self.playing:
            if self.board.winner() is None:
                player = self.white if self.board.turn is WHITE else self.black
                command = player.my_move()
            else:
                command = self.read_line()
            if command is None:
                command = "quit"
            try:
                self.execute(command)
            except ValueError as e:
                self.report_error(f"Error: {e}")

    def read_line(self) -> Optional[str]:
        """Next trimmed input line, or None at end of input."""
        if self.prompt:
            self.stdout.write("> ")
            self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def report_move(self, move: Move):
        print(f"* {move}", file=self.stdout)

    def report_note(self, msg: str):
        print(msg, file=self.stdout)

    def report_error(self, msg: str):
        print(msg, file=self.stderr)

    def execute(self, command: str):
        """Run one command. Raises ValueError for anything unrecognised."""
        command = _COMMENT.sub("", command).strip().lower()
        if not command:
            return
        for pattern, handler in self._commands:
            mat = pattern.fullmatch(command)
            if mat:
                handler(mat)
                return
        raise ValueError(f"Bad command: {command}")

    def _do_quit(self, _mat):
        self.playing = False

    def _do_new(self, _mat):
        self.board.init()

    def _do_dump(self, _mat):
        print(f"===\n{self.board}===", file=self.stdout)

    def _do_undo(self, _mat):
        self.board.undo()

    def _do_auto(self, mat):
        if mat.group(1) == "white":
            self.white = AIPlayer(WHITE, self)
        else:
            self.black = AIPlayer(BLACK, self)

    def _do_manual(self, mat):
        if mat.group(1) == "white":
            self.white = TextPlayer(WHITE, self)
        else:
            self.black = TextPlayer(BLACK, self)

    def _do_move(self, mat):
        try:
            move = parse_move(mat.group(0))
        except ValueError:
            self.report_error("Illegal move, please try again.")
            return
        board = self.board
        if board.get(move.from_sq) is not board.turn:
            self.report_error("Not your turn.")
        elif not board.is_unblocked_move(move.from_sq, move.to_sq, move.from_sq):
            self.report_error("Blocked move, please try again.")
        elif not board.is_legal(move):
            self.report_error("Illegal move, please try again.")
        else:
            board.make_move(move)
            winner = board.winner()
            if winner is not None:
                self.report_note(f"{winner.label} wins.")


def main():
    Controller().play()


if __name__ == "__main__":
    main()
