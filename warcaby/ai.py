"""Minimax opponent with alpha-beta pruning."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from warcaby.board import Board, Move

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

LOSS = INT_MIN + 1
WIN = INT_MAX - 1


class Difficulty(IntEnum):
    """Difficulty levels; the value is the search depth."""

    EASY = 2
    MEDIUM = 4
    HARD = 8


class AI:
    """Chooses moves for the AI side by searching the game tree."""

    def best_move(self, board: Board, depth: Union[int, Difficulty] = 5) -> Move:
        """The best AI move at the given depth, or an empty Move when none exists."""
        depth = int(depth)
        best = Move()
        best_value = INT_MIN
        for move in board.valid_moves(True):
            after = board.copy()
            after.apply_move(move)
            value = self.minimax(after, depth - 1, INT_MIN, INT_MAX, False)
            if value > best_value:
                best_value = value
                best = move
        return best

    def minimax(self, board: Board, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        """Score a position by alpha-beta search; a side without moves has lost."""
        if depth == 0:
            return board.evaluate()

        moves = board.valid_moves(maximizing)
        if not moves:
            return LOSS if maximizing else WIN

        if maximizing:
            best = INT_MIN
            for move in moves:
                after = board.copy()
                after.apply_move(move)
                value = self.minimax(after, depth - 1, alpha, beta, False)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return best

        best = INT_MAX
        for move in moves:
            after = board.copy()
            after.apply_move(move)
            value = self.minimax(after, depth - 1, alpha, beta, True)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                break
        return best