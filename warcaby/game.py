"""Console game: the player against the AI."""

from __future__ import annotations

import sys
from collections import deque
from typing import Optional, TextIO

from warcaby.ai import AI, Difficulty
from warcaby.board import Board, Move

_CHOICES = {1: Difficulty.EASY, 2: Difficulty.MEDIUM, 3: Difficulty.HARD}


class Game:
    """A text-mode game reading moves from one stream and writing to another."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.board = Board()
        self.ai = AI()
        self.turn_ai = False
        self.difficulty = Difficulty.MEDIUM
        self._tokens: deque[str] = deque()

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def _next_token(self) -> Optional[str]:
        while not self._tokens:
            line = self.stdin.readline()
            if not line:
                return None
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def run(self) -> None:
        """Play until one side has no pieces or no moves."""
        self.choose_difficulty()
        while not self.check_victory():
            self._say(self.board.render(), end="")
            self.process_turn()
            self.turn_ai = not self.turn_ai
            self.check_promotion()
        self._say("Koniec gry!")

    def choose_difficulty(self) -> Difficulty:
        """Ask for a level; anything but 1, 2 or 3 means medium."""
        self._say("Wybierz poziom trudności:")
        self._say("1 - Łatwy")
        self._say("2 - Średni")
        self._say("3 - Trudny")
        self._say("Wybór: ", end="")
        token = self._next_token()
        try:
            choice = int(token) if token is not None else 0
        except ValueError:
            choice = 0
        self.difficulty = _CHOICES.get(choice, Difficulty.MEDIUM)
        return self.difficulty

    def process_turn(self) -> None:
        """Let the AI move, or read the player's move as four numbers."""
        if self.turn_ai:
            self.board.apply_move(self.ai.best_move(self.board, self.difficulty))
            self._say("AI wykonało ruch")
            return
        self._say("Podaj ruch (srcRow srcCol dstRow dstCol): ", end="")
        numbers = []
        for _ in range(4):
            token = self._next_token()
            if token is None:
                raise EOFError("input ended before a move was given")
            numbers.append(int(token))
        self.board.apply_move(Move(*numbers))

    def check_victory(self) -> bool:
        """Announce and return True when either side has lost."""
        if not self.board.has_valid_moves(False) or self.board.count_pieces(False) == 0:
            self._say("AI wygrało!")
            return True
        if not self.board.has_valid_moves(True) or self.board.count_pieces(True) == 0:
            self._say("Gracz wygrał!")
            return True
        return False

    def check_promotion(self) -> None:
        """Crown men that reached the far row and announce each one."""
        for row, col in self.board.promote_pieces():
            if row == 0:
                self._say(f"Gracz pionek awansował do damki na (0,{col})!")
            else:
                self._say(f"AI pionek awansował do damki na (7,{col})!")