"""Timing of minimax with and without alpha-beta pruning."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Iterable, Optional, Sequence, TextIO

from warcaby.ai import AI, INT_MAX, INT_MIN, LOSS, WIN, Difficulty
from warcaby.board import Board

DEFAULT_OUTPUT = "results/MinimaxComparison.txt"
DEFAULT_TESTS = 50


def measure_time(func: Callable[[], object]) -> float:
    """Seconds taken by one call of func."""
    start = time.perf_counter()
    func()
    return time.perf_counter() - start


def minimax_no_pruning(board: Board, depth: int, maximizing: bool) -> int:
    """Plain minimax over the full tree."""
    if depth == 0:
        return board.evaluate()
    moves = board.valid_moves(maximizing)
    if not moves:
        return LOSS if maximizing else WIN

    best = INT_MIN if maximizing else INT_MAX
    pick = max if maximizing else min
    for move in moves:
        after = board.copy()
        after.apply_move(move)
        best = pick(best, minimax_no_pruning(after, depth - 1, not maximizing))
    return best


def compare(
    levels: Iterable[Difficulty], tests: int, stream: TextIO
) -> list[tuple[Difficulty, float, float]]:
    """Average both searches from the starting position for each level."""
    board = Board()
    ai = AI()
    results = []
    for level in levels:
        depth = int(level)
        stream.write(f"\n=== Testowanie minimax dla poziomu trudności {depth} ===\n")
        pruning = 0.0
        no_pruning = 0.0
        for _ in range(tests):
            pruning += measure_time(lambda: ai.best_move(board, depth))
            no_pruning += measure_time(lambda: minimax_no_pruning(board, depth, True))
        avg_pruning = pruning / tests
        avg_no_pruning = no_pruning / tests
        stream.write(f"🔹 Minimax z przycinaniem: {avg_pruning:g} s\n")
        stream.write(f"🔸 Minimax bez przycinania: {avg_no_pruning:g} s\n")
        results.append((level, avg_pruning, avg_no_pruning))
    return results


class _Tee:
    def __init__(self, *streams: TextIO) -> None:
        self._streams = streams

    def write(self, text: str) -> None:
        for stream in self._streams:
            stream.write(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare minimax with and without pruning.")
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--tests", type=int, default=DEFAULT_TESTS)
    args = parser.parse_args(argv)

    try:
        results_file = open(args.output, "w", encoding="utf-8")
    except OSError:
        print("Nie udało się otworzyć pliku do zapisu wyników.", file=sys.stderr)
        return 1
    with results_file:
        compare(list(Difficulty), args.tests, _Tee(sys.stdout, results_file))
    return 0


if __name__ == "__main__":
    sys.exit(main())