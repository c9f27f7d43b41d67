# warcaby

A game of checkers played against a computer opponent. The opponent picks its
moves with minimax search and alpha-beta pruning. You can play in a pygame
window or in the console. All messages in the game are in Polish.

## Installation

```
pip install .
```

## Playing

Start the graphical game:

```
warcaby
```

or name the mode explicitly:

```
warcaby gui
warcaby cli
```

Any other mode prints an error and exits with status 1.

### In the window

Left-click one of your (white) pieces and then the square to move to. Ordinary
moves are marked in blue. Captures are marked in red, and the pieces they take
are highlighted. Right-click cancels the selection. The buttons beside the
board set the difficulty: *Łatwy* (easy, search depth 2), *Średni* (medium,
depth 4, the default) and *Trudny* (hard, depth 8). The panel also shows the
piece counts and the number of moves played. When a game ends, press `R` to
start again.

Text is drawn with the font `font/ARIAL.TTF`, looked up relative to the
current working directory. If that file cannot be loaded, the game still runs
but shows no text.

### In the console

Choose a difficulty first (1, 2 or 3; anything else means medium). Then give
each move as four numbers: `srcRow srcCol dstRow dstCol`. The board is printed
with `p`/`P` for your pieces and kings and `a`/`A` for the AI's. Rows and
columns are numbered 0 to 7, with the AI at the top.

## Rules

- Pieces move diagonally forward one square. Kings move any distance along a
  diagonal.
- A capture is compulsory. When a capture is available, only captures may be
  played. Multi-jump captures are followed to their end.
- A piece that reaches the far row becomes a king.
- A side that has no legal move, or no pieces, loses.

## Timing the search

```
warcaby-measure
warcaby-measure --tests 10 --output timings.txt
```

This compares the average time of the pruned search with a plain minimax at
every difficulty level, starting from the opening position. `--tests` sets how
many runs are averaged (default 50). The results are printed and also written
to `--output`, by default `results/MinimaxComparison.txt`. The directory must
already exist; if the file cannot be opened, the command exits with status 1.

## Using the library

```python
from warcaby.board import Board
from warcaby.ai import AI, Difficulty

board = Board()
move = AI().best_move(board, Difficulty.MEDIUM)
board.apply_move(move)
print(board.render())
```

- `warcaby.board`: `Board` (move generation with `valid_moves`, `apply_move`,
  `undo_move`, `evaluate`, `promote_pieces`, `render`) and the `Move` record.
- `warcaby.ai`: `AI` with `best_move` and `minimax`, and the `Difficulty` levels.
- `warcaby.game`: `Game`, the console game, reading from and writing to any
  text streams.
- `warcaby.gui_state`: `GuiState`, the rules of the mouse-driven game without
  any drawing, plus layout helpers such as `cell_from_mouse` and `button_rect`.
- `warcaby.gui`: `GUI`, the pygame window.
- `warcaby.measurement`: `measure_time`, `minimax_no_pruning` and `compare`.

## Limitations

- The console game does not check the moves you type. Whatever piece is on the
  source square is moved to the destination, and a jump typed there removes no
  piece. Input that is not a number ends the game with an error.
- There is no saving or loading of games, no undo in either front end, and no
  game between two human players.