# Jewel Jam

A match-3 puzzle game. An 8×8 board is filled with gems in five shapes:
circles, diamonds, pentagons, squares and triangles. Swap two gems to line up
three of the same shape in a row or a column. The matched gems are cleared
and new random gems take their place.

## Installing

```
pip install .
```

The game draws its window with pygame.

## Playing

```
jeweljam
```

The game starts in full screen. To start in a window instead:

```
jeweljam --windowed
```

The main menu offers **Play**, **Instructions**, **Highscore** and
**Quit Game**.

- Click one gem, then a second gem, to swap them.
- A swap that makes a match earns 10 points. A swap that makes no match is
  undone and costs 10 points.
- When the score drops below 0 the game is over. The game-over screen offers
  **Retry**, **Main Menu** and **Quit**.
- The **Pause** button next to the board opens the pause menu, with
  **Resume**, **Restart** and **Quit to Main Menu**.
- In full screen, Escape switches to a window. In a window, Escape quits.

Scores are kept in two files in the current directory:

- **Quit Game** on the main menu writes your name and score to
  `playerProgress.txt`. If your score beats the best one so far, it also
  writes that score to `highscore.txt`.
- **Restart** on the pause menu does the same and then sets the score back
  to 0.
- **Quit** on the game-over screen writes `playerProgress.txt` only.

The **Highscore** screen reads the best score back from `highscore.txt`.
Closing the window or quitting with Escape saves nothing.

## Using the pieces

The game logic works without a window:

```python
import random
from jeweljam.board import GameBoard

board = GameBoard(random.Random(1))
kept = board.swap_gems(0, 0, 0, 1)   # True if the swap made a match
print(kept, board.score)
print(board.find_matches())           # cells that are part of a match
print(board[0, 0].kind)               # e.g. "Square"
```

- `jeweljam.gems` holds the gem shapes (`Circle`, `Diamond`, `Pentagon`,
  `Rectangle`, `Square`, `Triangle`); each gives its vertices with `shape()`
  and `outline()`.
- `jeweljam.player.Player` holds a name and a score;
  `jeweljam.player.Highscore` tracks the best score and saves and loads it
  (`save_high_score`, `load_high_score`, `save_progress`, `save_score`,
  `load_score`).
- `jeweljam.manager.GameManager` moves between the screens in response to
  clicks given in board coordinates, with `handle_click(x, y)` returning an
  `Action`.
- `jeweljam.menu` holds the layout of the menus and helpers such as
  `check_mouse_click` and `button_at`.
- `jeweljam.app.App` draws the current screen with pygame and runs the event
  loop.

## What it does not do

There is no way to enter a player name: progress is saved under the name
`Player`. Cleared gems are replaced in place; gems above them do not fall.

## Running the tests

```
pip install .[test]
pytest
```