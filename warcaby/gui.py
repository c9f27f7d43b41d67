"""Graphical front end drawn with pygame."""

from __future__ import annotations

import sys
from typing import Optional

import pygame

from warcaby.ai import AI
from warcaby.board import Board
from warcaby.gui_state import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SIZE,
    CELL_SIZE,
    DIFFICULTY_BUTTONS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GuiState,
    button_rect,
    wrap_text,
)

TITLE = "Warcaby - AI vs Gracz"
FONT_PATH = "font/ARIAL.TTF"
FONT_SIZE = 13
FRAME_DELAY_MS = 16

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
LIGHT_CELL = (240, 217, 181)
DARK_CELL = (181, 136, 99)
AI_PIECE = (139, 69, 19)
KING_MARK = (255, 215, 0)
SELECTED = (0, 255, 0)
MOVE_MARK = (0, 0, 255)
CAPTURE_MARK = (255, 0, 0)
CAPTURED_MARK = (255, 100, 100)
ACTIVE_BUTTON = (100, 200, 100)
IDLE_BUTTON = (200, 200, 200)
LOST_COLOUR = (255, 0, 0)
WON_COLOUR = (0, 200, 0)


def _cell_center(row: int, col: int) -> tuple[int, int]:
    return (
        BOARD_OFFSET_X + col * CELL_SIZE + CELL_SIZE // 2,
        BOARD_OFFSET_Y + row * CELL_SIZE + CELL_SIZE // 2,
    )


def _cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(
        BOARD_OFFSET_X + col * CELL_SIZE, BOARD_OFFSET_Y + row * CELL_SIZE, CELL_SIZE, CELL_SIZE
    )


class GUI:
    """A window in which the player plays against the AI with the mouse."""

    def __init__(self) -> None:
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.state = GuiState(ai=AI())

    def init(self) -> bool:
        """Open the window and load the font; False if the display cannot start."""
        print("Inicjalizacja SDL...")
        try:
            pygame.display.init()
        except pygame.error as exc:
            print(f"Nie można uruchomić SDL: {exc}", file=sys.stderr)
            return False
        print("SDL OK")

        try:
            pygame.display.set_caption(TITLE)
            self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            print(f"Nie można utworzyć okna: {exc}", file=sys.stderr)
            return False
        print("Okno OK")

        try:
            pygame.font.init()
        except pygame.error as exc:
            print(f"Nie można zainicjować czcionek: {exc}", file=sys.stderr)
            return False
        print("SDL_ttf OK")

        try:
            self.font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            self.font = None
            print(f"Nie można załadować czcionki: {exc}", file=sys.stderr)
            print("Gra będzie działać bez tekstu.", file=sys.stderr)
        print("Czcionka OK")
        return True

    def run(self, board: Board) -> None:
        """Play on the given board until the window is closed."""
        state = self.state
        state.board = board
        while state.running:
            self.handle_events()
            if not state.game_over and not state.player_turn:
                state.process_ai_turn()
            state.check_promotion()
            self.render()
            state.check_game_end()
            pygame.time.delay(FRAME_DELAY_MS)

    def handle_events(self) -> None:
        """Process pending window, mouse and keyboard events."""
        state = self.state
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                state.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    state.click(*event.pos)
                elif event.button == 3:
                    state.reset_selection()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r and state.game_over:
                    state.restart()

    def render(self) -> None:
        """Draw the whole frame and show it."""
        if self.screen is None:
            raise RuntimeError("the window is not open; call init() first")
        self.screen.fill(LIGHT_CELL)
        self._draw_board()
        self._draw_pieces()
        if self.state.piece_selected:
            self._draw_selected_cell()
            self._draw_valid_moves()
        self._draw_ui()
        pygame.display.flip()

    def close(self) -> None:
        """Release the font and the window."""
        self.font = None
        self.screen = None
        pygame.font.quit()
        pygame.display.quit()
        pygame.quit()

    def _draw_board(self) -> None:
        for row in range(8):
            for col in range(8):
                rect = _cell_rect(row, col)
                colour = LIGHT_CELL if (row + col) % 2 == 0 else DARK_CELL
                pygame.draw.rect(self.screen, colour, rect)
                pygame.draw.rect(self.screen, BLACK, rect, width=1)

    def _draw_pieces(self) -> None:
        radius = CELL_SIZE // 3
        for row in range(8):
            for col in range(8):
                piece = self.state.board.piece_at(row, col)
                if piece is None:
                    continue
                center = _cell_center(row, col)
                pygame.draw.circle(self.screen, AI_PIECE if piece.is_ai else WHITE, center, radius)
                pygame.draw.circle(self.screen, BLACK, center, radius, width=2)
                if piece.is_king:
                    pygame.draw.circle(self.screen, KING_MARK, center, radius // 2)

    def _draw_selected_cell(self) -> None:
        row, col = self.state.selected
        cell = _cell_rect(row, col)
        for grow in range(3):
            border = pygame.Rect(cell.x - grow, cell.y - grow, cell.w + 2 * grow, cell.h + 2 * grow)
            pygame.draw.rect(self.screen, SELECTED, border, width=1)

    def _draw_valid_moves(self) -> None:
        for move in self.state.valid_moves:
            center = _cell_center(move.dst_row, move.dst_col)
            if move.captured:
                pygame.draw.circle(self.screen, CAPTURE_MARK, center, CELL_SIZE // 4)
                for row, col in move.captured:
                    pygame.draw.circle(
                        self.screen, CAPTURED_MARK, _cell_center(row, col), CELL_SIZE // 8
                    )
            else:
                pygame.draw.circle(self.screen, MOVE_MARK, center, CELL_SIZE // 6)

    def _draw_text(self, text: str, x: int, y: int) -> None:
        if self.font is None:
            return
        surface = self.font.render(text, True, BLACK)
        self.screen.blit(surface, (x, y))

    def _text_size(self, text: str) -> tuple[int, int]:
        return self.font.size(text)

    def _draw_difficulty_buttons(self) -> None:
        for index, (label, level) in enumerate(DIFFICULTY_BUTTONS):
            rect = pygame.Rect(*button_rect(index))
            colour = ACTIVE_BUTTON if self.state.difficulty == level else IDLE_BUTTON
            pygame.draw.rect(self.screen, colour, rect)
            pygame.draw.rect(self.screen, BLACK, rect, width=1)
            self._draw_text(label, rect.x + 5, rect.y + 5)

    def _draw_ui(self) -> None:
        state = self.state
        status_rect = pygame.Rect(BOARD_OFFSET_X + BOARD_SIZE + 20, BOARD_OFFSET_Y, 220, 180)
        pygame.draw.rect(self.screen, WHITE, status_rect)
        pygame.draw.rect(self.screen, BLACK, status_rect, width=1)

        self._draw_difficulty_buttons()

        last_text_y = status_rect.y + 15
        if self.font is not None:
            lines = wrap_text(state.status, lambda text: self._text_size(text)[0], status_rect.w - 20)
            line_height = self._text_size(state.status)[1] if state.status.split() else 0
            y = status_rect.y + 15
            for number, line in enumerate(lines):
                if number:
                    y += line_height + 2
                self._draw_text(line, status_rect.x + 10, y)
            if lines:
                last_text_y = y
            last_text_y += line_height + 5

            self._draw_text(f"Gracz: {state.board.count_pieces(False)}", status_rect.x + 10, status_rect.y + 120)
            self._draw_text(f"AI: {state.board.count_pieces(True)}", status_rect.x + 10, status_rect.y + 140)
            if state.game_over:
                self._draw_text("Nacisnij R - restart", status_rect.x + 10, status_rect.y + 160)

        if state.game_over:
            lost = "Przegrałeś" in state.status
            won = "Wygrałeś" in state.status
            if lost or won:
                end_rect = pygame.Rect(status_rect.x + 10, last_text_y, 180, 30)
                pygame.draw.rect(self.screen, WON_COLOUR if won else LOST_COLOUR, end_rect)
                pygame.draw.rect(self.screen, BLACK, end_rect, width=1)
                if self.font is not None:
                    message = "Przegrałeś!" if lost else "Wygrałeś!"
                    w, h = self._text_size(message)
                    self._draw_text(
                        message, end_rect.x + (end_rect.w - w) // 2, end_rect.y + (end_rect.h - h) // 2
                    )

        indicator_size = 24
        margin = 10
        indicator = pygame.Rect(
            status_rect.right - indicator_size - margin,
            status_rect.bottom - indicator_size - margin,
            indicator_size,
            indicator_size,
        )
        pygame.draw.rect(self.screen, WHITE if state.player_turn else AI_PIECE, indicator)
        pygame.draw.rect(self.screen, BLACK, indicator, width=1)

        if self.font is not None:
            moves_text = str(state.move_count)
            w, h = self._text_size(moves_text)
            text_y = indicator.y + (indicator.h - h) // 2
            self._draw_text(moves_text, indicator.x + (indicator.w - w) // 2, text_y)
            self._draw_text("Ruchy:", indicator.x - 55, text_y)