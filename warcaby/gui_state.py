"""State and rules of the graphical game, independent of any drawing library."""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from warcaby.ai import AI, Difficulty
from warcaby.board import Board, Move, Position

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
BOARD_SIZE = 480
CELL_SIZE = BOARD_SIZE // 8
BOARD_OFFSET_X = 50
BOARD_OFFSET_Y = 50

BUTTON_WIDTH = 80
BUTTON_HEIGHT = 30
BUTTON_SPACING = 10

DIFFICULTY_BUTTONS = (
    ("Łatwy", Difficulty.EASY),
    ("Średni", Difficulty.MEDIUM),
    ("Trudny", Difficulty.HARD),
)

STATUS_YOUR_TURN = "Twoja kolej - wybierz pionek"
STATUS_NEW_GAME = "Nowa gra - Twoja kolej"
STATUS_PICK_TARGET = "Wybierz pole docelowe"
STATUS_CANNOT_MOVE = "Ten pionek nie może się ruszyć!"
STATUS_PICK_OWN = "Wybierz swój pionek!"
STATUS_AI_TURN = "Kolej AI..."
STATUS_BAD_MOVE = "Nieprawidłowy ruch!"
STATUS_WON = "Wygrałeś! Naciśnij R dla nowej gry"
STATUS_WON_AI_STUCK = "Wygrałeś! AI nie ma ruchów. Naciśnij R dla nowej gry"
STATUS_LOST = "Przegrałeś! Naciśnij R dla nowej gry"


class Rect(NamedTuple):
    """An axis-aligned rectangle in window pixels."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, px: int, py: int) -> bool:
        """True if the point lies inside or on the edge."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


def cell_from_mouse(x: int, y: int) -> Position:
    """Board cell under a window point, or (-1, -1) outside the board."""
    if (BOARD_OFFSET_X <= x < BOARD_OFFSET_X + BOARD_SIZE
            and BOARD_OFFSET_Y <= y < BOARD_OFFSET_Y + BOARD_SIZE):
        return (y - BOARD_OFFSET_Y) // CELL_SIZE, (x - BOARD_OFFSET_X) // CELL_SIZE
    return -1, -1


def is_valid_cell(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def button_rect(index: int) -> Rect:
    """Rectangle of a difficulty button: 0 easy, 1 medium, 2 hard."""
    start_x = BOARD_OFFSET_X + BOARD_SIZE + 20
    start_y = BOARD_OFFSET_Y + 200 + index * (BUTTON_HEIGHT + BUTTON_SPACING)
    return Rect(start_x, start_y, BUTTON_WIDTH, BUTTON_HEIGHT)


def wrap_text(text: str, measure: Callable[[str], int], max_width: int) -> list[str]:
    """Break text into lines at spaces so that each line fits max_width when possible."""
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if measure(candidate) > max_width and line:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


class GuiState:
    """Turn order, selection, status text and difficulty of a game played by mouse."""

    def __init__(self, board: Optional[Board] = None, ai: Optional[AI] = None) -> None:
        self.board = board if board is not None else Board()
        self.ai = ai if ai is not None else AI()
        self.difficulty = Difficulty.MEDIUM
        self.running = True
        self.player_turn = True
        self.game_over = False
        self.status = STATUS_YOUR_TURN
        self.selected: Optional[Position] = None
        self.valid_moves: list[Move] = []
        self.move_count = 0

    @property
    def piece_selected(self) -> bool:
        return self.selected is not None

    def click(self, x: int, y: int) -> None:
        """Handle a left click at a window point."""
        self.handle_difficulty_click(x, y)
        if not self.player_turn or self.game_over:
            return
        row, col = cell_from_mouse(x, y)
        if not is_valid_cell(row, col):
            return
        if self.selected is None:
            self.select_piece(row, col)
        else:
            self.make_move(row, col)

    def handle_difficulty_click(self, x: int, y: int) -> Optional[Difficulty]:
        """Switch difficulty if a button was hit; return the chosen level or None."""
        for index, (_, level) in enumerate(DIFFICULTY_BUTTONS):
            if button_rect(index).contains(x, y):
                self.difficulty = level
                return level
        return None

    def select_piece(self, row: int, col: int) -> None:
        """Select one of the player's pieces and collect its legal moves."""
        piece = self.board.piece_at(row, col)
        if piece is None or piece.is_ai:
            self.status = STATUS_PICK_OWN
            return
        self.selected = (row, col)
        self.valid_moves = [
            move for move in self.board.valid_moves(False)
            if (move.src_row, move.src_col) == (row, col)
        ]
        if self.valid_moves:
            self.status = STATUS_PICK_TARGET
        else:
            self.status = STATUS_CANNOT_MOVE
            self.reset_selection()

    def make_move(self, row: int, col: int) -> None:
        """Play the selected piece to a cell, or reselect if another own piece was clicked."""
        chosen = next(
            (move for move in self.valid_moves if (move.dst_row, move.dst_col) == (row, col)),
            None,
        )
        if chosen is not None:
            self.board.apply_move(chosen)
            self.player_turn = False
            self.status = STATUS_AI_TURN
            self.reset_selection()
            self.move_count += 1
            return
        piece = self.board.piece_at(row, col)
        if piece is not None and not piece.is_ai:
            self.select_piece(row, col)
        else:
            self.status = STATUS_BAD_MOVE

    def process_ai_turn(self) -> None:
        """Let the AI move at the current difficulty; it loses if it cannot."""
        if not self.board.has_valid_moves(True):
            self.game_over = True
            self.status = STATUS_WON
            return
        move = self.ai.best_move(self.board, self.difficulty)
        if move.src_row != -1:
            self.board.apply_move(move)
            self.player_turn = True
            self.status = STATUS_YOUR_TURN
            self.move_count += 1
        else:
            self.game_over = True
            self.status = STATUS_WON_AI_STUCK

    def check_game_end(self) -> None:
        """End the game when a side has no moves or no pieces."""
        if self.game_over:
            return
        if not self.board.has_valid_moves(False):
            self.game_over = True
            self.status = STATUS_LOST
        elif not self.board.has_valid_moves(True):
            self.game_over = True
            self.status = STATUS_WON
        elif self.board.count_pieces(False) == 0:
            self.game_over = True
            self.status = STATUS_LOST
        elif self.board.count_pieces(True) == 0:
            self.game_over = True
            self.status = STATUS_WON

    def check_promotion(self) -> list[Position]:
        """Crown men on the far rows, announce them and return their squares."""
        promoted = self.board.promote_pieces()
        for row, col in promoted:
            if row == 0:
                print(f"Gracz pionek awansował do damki na (0,{col})!")
            else:
                print(f"AI pionek awansował do damki na (7,{col})!")
        return promoted

    def reset_selection(self) -> None:
        """Drop the current selection."""
        self.selected = None
        self.valid_moves = []
        if not self.game_over and self.player_turn:
            self.status = STATUS_YOUR_TURN

    def restart(self) -> None:
        """Start a new game with the player to move."""
        self.board.reset()
        self.game_over = False
        self.player_turn = True
        self.reset_selection()
        self.move_count = 0
        self.status = STATUS_NEW_GAME