import io

import pytest

from warcaby.ai import AI, INT_MAX, INT_MIN, LOSS, WIN, Difficulty
from warcaby.board import Board
from warcaby.measurement import compare, main, measure_time, minimax_no_pruning
from warcaby.piece import Piece


def empty_board():
    board = Board()
    board.cells = [[None] * Board.SIZE for _ in range(Board.SIZE)]
    return board


def test_measure_time_calls_function():
    calls = []
    elapsed = measure_time(lambda: calls.append(1))
    assert calls == [1]
    assert elapsed >= 0.0


@pytest.mark.parametrize("depth", [1, 2, 3])
@pytest.mark.parametrize("maximizing", [True, False])
def test_pruning_gives_same_value(depth, maximizing):
    board = Board()
    pruned = AI().minimax(board, depth, INT_MIN, INT_MAX, maximizing)
    assert minimax_no_pruning(board, depth, maximizing) == pruned


def test_no_pruning_depth_zero():
    board = Board()
    assert minimax_no_pruning(board, 0, True) == board.evaluate()


def test_no_pruning_without_moves():
    board = empty_board()
    board.cells[7][0] = Piece(False)
    assert minimax_no_pruning(board, 2, True) == LOSS
    board = empty_board()
    board.cells[0][1] = Piece(True)
    assert minimax_no_pruning(board, 2, False) == WIN


def test_compare_writes_report():
    out = io.StringIO()
    results = compare([Difficulty.EASY], 1, out)
    text = out.getvalue()
    assert [level for level, _, _ in results] == [Difficulty.EASY]
    assert all(a >= 0 and b >= 0 for _, a, b in results)
    assert text.startswith("\n=== Testowanie minimax dla poziomu trudności 2 ===\n")
    assert "🔹 Minimax z przycinaniem: " in text
    assert "🔸 Minimax bez przycinania: " in text


def test_main_unwritable_output(tmp_path, capsys):
    target = tmp_path / "missing" / "out.txt"
    assert main(["--output", str(target)]) == 1
    assert "Nie udało się otworzyć" in capsys.readouterr().err