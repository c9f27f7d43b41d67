"""Command entry point: choose between the window and the console game."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from warcaby.board import Board
from warcaby.game import Game


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in 'gui' (default) or 'cli' mode; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    mode = args[0] if args else "gui"

    if mode == "gui":
        from warcaby.gui import GUI

        gui = GUI()
        try:
            if not gui.init():
                print("Błąd inicjalizacji GUI (SDL).", file=sys.stderr)
                sys.stdin.readline()
                return 1
            gui.run(Board())
        finally:
            gui.close()
        return 0

    if mode == "cli":
        try:
            Game().run()
        except EOFError:
            print("Koniec danych wejściowych.", file=sys.stderr)
            return 1
        return 0

    print(f"Nieznany tryb: {mode}. Dostępne tryby: cli, gui.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())