"""The checkers board, move generation and position evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from warcaby.piece import Piece

Position = tuple[int, int]

_KING_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_AI_DIRECTIONS = ((1, -1), (1, 1))
_PLAYER_DIRECTIONS = ((-1, -1), (-1, 1))


@dataclass(frozen=True)
class Move:
    """A move from one square to another, with the squares it captures."""

    src_row: int = -1
    src_col: int = -1
    dst_row: int = -1
    dst_col: int = -1
    captured: tuple[Position, ...] = ()


class Board:
    """An 8x8 checkers board; the AI starts at the top, the player at the bottom."""

    SIZE = 8

    def __init__(self) -> None:
        self.cells: list[list[Optional[Piece]]] = []
        self.reset()

    def reset(self) -> None:
        """Place all pieces in their starting positions."""
        size = self.SIZE
        self.cells = [[None] * size for _ in range(size)]
        for row in range(size):
            for col in range(size):
                if (row + col) % 2 != 1:
                    continue
                if row >= 5:
                    self.cells[row][col] = Piece(False)
                elif row < 3:
                    self.cells[row][col] = Piece(True)

    def copy(self) -> "Board":
        """Return a board with the same layout; pieces are shared, not copied."""
        clone = object.__new__(type(self))
        clone.cells = [list(row) for row in self.cells]
        return clone

    def _pieces(self):
        for row, line in enumerate(self.cells):
            for col, piece in enumerate(line):
                if piece is not None:
                    yield row, col, piece

    def valid_moves(self, for_ai: bool) -> list[Move]:
        """All legal moves for one side; captures are compulsory."""
        simple: list[Move] = []
        captures: list[Move] = []
        for row, col, piece in self._pieces():
            if piece.is_ai != for_ai:
                continue
            for move in self._piece_moves(row, col, for_ai):
                (captures if move.captured else simple).append(move)
        return captures or simple

    def _piece_moves(self, row: int, col: int, for_ai: bool) -> list[Move]:
        piece = self.cells[row][col]
        if piece is None or piece.is_ai != for_ai:
            return []
        return self._capture_sequences(row, col, for_ai) or self._simple_moves(row, col, for_ai)

    @staticmethod
    def _directions(piece: Piece, for_ai: bool) -> tuple[tuple[int, int], ...]:
        if piece.is_king:
            return _KING_DIRECTIONS
        return _AI_DIRECTIONS if for_ai else _PLAYER_DIRECTIONS

    def _simple_moves(self, row: int, col: int, for_ai: bool) -> list[Move]:
        piece = self.cells[row][col]
        if piece is None:
            return []
        moves = []
        for dr, dc in self._directions(piece, for_ai):
            if piece.is_king:
                for distance in range(1, self.SIZE):
                    new_row, new_col = row + dr * distance, col + dc * distance
                    if not self.is_valid_position(new_row, new_col):
                        break
                    if self.cells[new_row][new_col] is not None:
                        break
                    moves.append(Move(row, col, new_row, new_col))
            else:
                new_row, new_col = row + dr, col + dc
                if self._is_valid_step(row, col, new_row, new_col, for_ai):
                    moves.append(Move(row, col, new_row, new_col))
        return moves

    def _is_valid_step(self, src_row: int, src_col: int, dst_row: int, dst_col: int, for_ai: bool) -> bool:
        if not (self.is_valid_position(src_row, src_col) and self.is_valid_position(dst_row, dst_col)):
            return False
        piece = self.cells[src_row][src_col]
        if piece is None or piece.is_ai != for_ai:
            return False
        if self.cells[dst_row][dst_col] is not None:
            return False
        if abs(dst_row - src_row) != 1 or abs(dst_col - src_col) != 1:
            return False
        if not piece.is_king:
            if for_ai and dst_row <= src_row:
                return False
            if not for_ai and dst_row >= src_row:
                return False
        return True

    def _can_capture(self, row: int, col: int, dr: int, dc: int, for_ai: bool) -> bool:
        enemy_row, enemy_col = row + dr, col + dc
        jump_row, jump_col = row + 2 * dr, col + 2 * dc
        if not (self.is_valid_position(enemy_row, enemy_col) and self.is_valid_position(jump_row, jump_col)):
            return False
        enemy = self.cells[enemy_row][enemy_col]
        if enemy is None or enemy.is_ai == for_ai:
            return False
        return self.cells[jump_row][jump_col] is None

    def _man_capture(self, row: int, col: int, dr: int, dc: int, for_ai: bool) -> Optional[tuple[Position, Position]]:
        if not self._can_capture(row, col, dr, dc, for_ai):
            return None
        return (row + dr, col + dc), (row + 2 * dr, col + 2 * dc)

    def _king_capture(self, row: int, col: int, dr: int, dc: int, for_ai: bool) -> Optional[tuple[Position, Position]]:
        """A king slides over empty squares and lands right behind the first enemy."""
        step = 1
        while True:
            enemy = (row + step * dr, col + step * dc)
            landing = (row + (step + 1) * dr, col + (step + 1) * dc)
            if not (self.is_valid_position(*enemy) and self.is_valid_position(*landing)):
                return None
            target = self.cells[enemy[0]][enemy[1]]
            if target is None:
                step += 1
                continue
            if target.is_ai != for_ai and self.cells[landing[0]][landing[1]] is None:
                return enemy, landing
            return None

    def _capture_sequences(self, row: int, col: int, for_ai: bool, current: Optional[Move] = None) -> list[Move]:
        piece = self.cells[row][col]
        if piece is None:
            return []
        sequences: list[Move] = []
        found = False
        for dr, dc in self._directions(piece, for_ai):
            finder = self._king_capture if piece.is_king else self._man_capture
            target = finder(row, col, dr, dc, for_ai)
            if target is None:
                continue
            enemy, landing = target
            if current is not None and enemy in current.captured:
                continue
            found = True
            base = current if current is not None else Move(row, col)
            step = Move(base.src_row, base.src_col, landing[0], landing[1], base.captured + (enemy,))

            after = self.copy()
            after.cells[row][col] = None
            after.cells[landing[0]][landing[1]] = piece
            after.cells[enemy[0]][enemy[1]] = None
            sequences.extend(after._capture_sequences(landing[0], landing[1], for_ai, step) or [step])
        if current is not None and not found:
            sequences.append(current)
        return sequences

    def apply_move(self, move: Move) -> None:
        """Play a move; a move off the board or from an empty square does nothing."""
        if not (self.is_valid_position(move.src_row, move.src_col)
                and self.is_valid_position(move.dst_row, move.dst_col)):
            return
        piece = self.cells[move.src_row][move.src_col]
        if piece is None:
            return
        self.cells[move.dst_row][move.dst_col] = piece
        self.cells[move.src_row][move.src_col] = None
        for row, col in move.captured:
            if self.is_valid_position(row, col):
                self.cells[row][col] = None

    def undo_move(self, move: Move, captured_pieces: Sequence[Optional[Piece]]) -> None:
        """Take back a move, putting the given captured pieces back in place."""
        piece = self.cells[move.dst_row][move.dst_col]
        self.cells[move.src_row][move.src_col] = piece
        self.cells[move.dst_row][move.dst_col] = None
        for (row, col), captured in zip(move.captured, captured_pieces):
            self.cells[row][col] = captured

    def evaluate(self) -> int:
        """Score the position: positive favours the AI, negative the player."""
        score = 0
        for row, col, piece in self._pieces():
            value = 50 if piece.is_king else 10
            if not piece.is_king:
                value += row if piece.is_ai else 7 - row
            value += 3 - abs(3 - col)

            lonely = True
            for ncol in (col - 1, col + 1):
                if 0 <= ncol < self.SIZE:
                    neighbour = self.cells[row][ncol]
                    if neighbour is not None and neighbour.is_ai == piece.is_ai:
                        lonely = False
            if lonely:
                value -= 2

            if any(self._can_capture(row, col, dr, dc, piece.is_ai) for dr, dc in _KING_DIRECTIONS):
                value += 5

            score += value if piece.is_ai else -value
        return score

    def render(self) -> str:
        """Text picture of the board with row and column numbers."""
        lines = ["  " + " ".join(str(col) for col in range(self.SIZE))]
        for row, line in enumerate(self.cells):
            cells = []
            for col, piece in enumerate(line):
                if piece is not None:
                    cells.append(piece.symbol())
                else:
                    cells.append("□" if (row + col) % 2 == 0 else "■")
            lines.append(f"{row} " + "".join(f"{cell} " for cell in cells))
        return "\n".join(lines) + "\n"

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        """The piece on a square, or None if empty or off the board."""
        if self.is_valid_position(row, col):
            return self.cells[row][col]
        return None

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def has_valid_moves(self, for_ai: bool) -> bool:
        return bool(self.valid_moves(for_ai))

    def count_pieces(self, for_ai: bool) -> int:
        return sum(1 for _, _, piece in self._pieces() if piece.is_ai == for_ai)

    def promote_pieces(self) -> list[Position]:
        """Crown men on the far row; player's row 0 first, then the AI's row 7."""
        promoted = []
        for row, is_ai in ((0, False), (self.SIZE - 1, True)):
            for col, piece in enumerate(self.cells[row]):
                if piece is not None and piece.is_ai == is_ai and not piece.is_king:
                    piece.promote()
                    promoted.append((row, col))
        return promoted