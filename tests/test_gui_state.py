import pytest

from warcaby.ai import AI, Difficulty
from warcaby.board import Board
from warcaby.gui_state import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BUTTON_HEIGHT,
    BUTTON_SPACING,
    BUTTON_WIDTH,
    CELL_SIZE,
    STATUS_AI_TURN,
    STATUS_BAD_MOVE,
    STATUS_LOST,
    STATUS_NEW_GAME,
    STATUS_PICK_OWN,
    STATUS_PICK_TARGET,
    STATUS_WON,
    STATUS_YOUR_TURN,
    GuiState,
    button_rect,
    cell_from_mouse,
    is_valid_cell,
    wrap_text,
)
from warcaby.piece import Piece


def _empty_board():
    board = Board()
    board.cells = [[None] * 8 for _ in range(8)]
    return board


def _center(row, col):
    return BOARD_OFFSET_X + col * CELL_SIZE + CELL_SIZE // 2, BOARD_OFFSET_Y + row * CELL_SIZE + CELL_SIZE // 2


@pytest.fixture
def state():
    s = GuiState(Board(), AI())
    s.difficulty = Difficulty.EASY
    return s


@pytest.mark.parametrize("row,col", [(0, 0), (7, 7), (3, 5), (5, 0)])
def test_cell_from_mouse_round_trip(row, col):
    assert cell_from_mouse(*_center(row, col)) == (row, col)


def test_cell_from_mouse_corners_and_outside():
    assert cell_from_mouse(BOARD_OFFSET_X, BOARD_OFFSET_Y) == (0, 0)
    assert cell_from_mouse(BOARD_OFFSET_X - 1, BOARD_OFFSET_Y) == (-1, -1)
    assert cell_from_mouse(BOARD_OFFSET_X + 8 * CELL_SIZE, BOARD_OFFSET_Y) == (-1, -1)
    assert cell_from_mouse(BOARD_OFFSET_X + CELL_SIZE, BOARD_OFFSET_Y) == (0, 1)


def test_is_valid_cell():
    assert is_valid_cell(0, 7)
    assert not is_valid_cell(-1, 0)
    assert not is_valid_cell(8, 0)


def test_button_rects_are_stacked():
    first, second, third = button_rect(0), button_rect(1), button_rect(2)
    assert second.y - first.y == BUTTON_HEIGHT + BUTTON_SPACING
    assert third.y - second.y == BUTTON_HEIGHT + BUTTON_SPACING
    assert first.x == second.x == third.x
    assert (first.w, first.h) == (BUTTON_WIDTH, BUTTON_HEIGHT)


def test_button_rect_contains_edges():
    rect = button_rect(0)
    assert rect.contains(rect.x, rect.y)
    assert rect.contains(rect.x + rect.w, rect.y + rect.h)
    assert not rect.contains(rect.x - 1, rect.y)


def test_wrap_text():
    assert wrap_text("aa bb cc", len, 5) == ["aa bb", "cc"]
    assert wrap_text("verylongword x", len, 4) == ["verylongword", "x"]
    assert wrap_text("   ", len, 10) == []


def test_wrap_text_keeps_all_words():
    text = "Wygrałeś! AI nie ma ruchów. Naciśnij R dla nowej gry"
    lines = wrap_text(text, len, 12)
    assert " ".join(lines) == text
    assert all(len(line) <= 12 for line in lines)


def test_difficulty_click(state):
    rect = button_rect(2)
    assert state.handle_difficulty_click(rect.x + 1, rect.y + 1) is Difficulty.HARD
    assert state.difficulty is Difficulty.HARD
    assert state.handle_difficulty_click(0, 0) is None
    assert state.difficulty is Difficulty.HARD


def test_select_own_piece(state):
    state.select_piece(5, 0)
    assert state.selected == (5, 0)
    assert state.status == STATUS_PICK_TARGET
    assert state.valid_moves
    assert all((m.src_row, m.src_col) == (5, 0) for m in state.valid_moves)


def test_select_ai_piece_rejected(state):
    state.select_piece(0, 1)
    assert state.selected is None
    assert state.status == STATUS_PICK_OWN


def test_select_blocked_piece(state):
    state.select_piece(6, 1)
    assert state.selected is None
    assert state.valid_moves == []
    assert state.status == STATUS_YOUR_TURN


def test_make_move(state):
    state.select_piece(5, 0)
    state.make_move(4, 1)
    assert state.board.piece_at(4, 1) is not None
    assert state.board.piece_at(5, 0) is None
    assert state.player_turn is False
    assert state.move_count == 1
    assert state.status == STATUS_AI_TURN
    assert state.selected is None


def test_make_move_invalid_target(state):
    state.select_piece(5, 0)
    state.make_move(3, 3)
    assert state.status == STATUS_BAD_MOVE
    assert state.selected == (5, 0)
    assert state.player_turn is True


def test_make_move_reselects_own_piece(state):
    state.select_piece(5, 0)
    state.make_move(5, 2)
    assert state.selected == (5, 2)


def test_click_flow(state):
    state.click(*_center(5, 2))
    state.click(*_center(4, 3))
    assert state.board.piece_at(4, 3) is not None
    assert state.player_turn is False


def test_click_ignored_when_game_over(state):
    state.game_over = True
    state.click(*_center(5, 2))
    assert state.selected is None


def test_process_ai_turn(state):
    state.select_piece(5, 0)
    state.make_move(4, 1)
    before = state.board.count_pieces(True)
    state.process_ai_turn()
    assert state.player_turn is True
    assert state.move_count == 2
    assert state.status == STATUS_YOUR_TURN
    assert state.board.count_pieces(True) == before


def test_process_ai_turn_without_moves():
    board = _empty_board()
    board.cells[5][0] = Piece(False)
    state = GuiState(board, AI())
    state.player_turn = False
    state.process_ai_turn()
    assert state.game_over is True
    assert state.status == STATUS_WON


def test_check_game_end_player_lost():
    board = _empty_board()
    board.cells[0][1] = Piece(True)
    state = GuiState(board, AI())
    state.check_game_end()
    assert state.game_over is True
    assert state.status == STATUS_LOST


def test_check_game_end_ongoing(state):
    state.check_game_end()
    assert state.game_over is False


def test_check_promotion():
    board = _empty_board()
    board.cells[0][1] = Piece(False)
    board.cells[7][0] = Piece(True)
    state = GuiState(board, AI())
    assert state.check_promotion() == [(0, 1), (7, 0)]
    assert board.cells[0][1].is_king and board.cells[7][0].is_king
    assert state.check_promotion() == []


def test_reset_selection_keeps_status_on_ai_turn(state):
    state.player_turn = False
    state.status = STATUS_AI_TURN
    state.reset_selection()
    assert state.status == STATUS_AI_TURN


def test_restart(state):
    state.select_piece(5, 0)
    state.make_move(4, 1)
    state.game_over = True
    state.restart()
    assert state.game_over is False
    assert state.player_turn is True
    assert state.move_count == 0
    assert state.status == STATUS_NEW_GAME
    assert state.board.piece_at(5, 0) is not None
    assert state.board.piece_at(4, 1) is None