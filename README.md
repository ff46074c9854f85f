# multitetris

Classic Tetris shown in several views at once. Every view shows the same
game: one shared model on a 10 × 22 board takes moves from any view and
from a timer that drops the active piece every half second, and every open
view is redrawn with the new state. Rotation follows the Super Rotation
System, wall kicks included.

Two front ends are available:

- **pygame**: a single pygame window holding the requested number of
  600 × 800 views side by side, each with the board on the left and the
  next piece and score on the right;
- **Tk**: one window per view with the same layout.

## Installation

```
pip install .
```

Tk support comes from the `tkinter` module of the Python installation.

## Playing

```
multitetris
```

starts one pygame view and one Tk window. Choose how many of each with:

```
multitetris --SFMLWidget 2 --QWidget 0
```

- `--SFMLWidget N` – number of views in the pygame window (default 1)
- `--QWidget N` – number of Tk windows (default 1)
- `--help` – print the options and exit with status 1

A count of zero leaves that front end out. The program ends once every
view has been closed; closing the pygame window closes all of its views.

If the file `./Resources/arial_bolditalicmt.ttf` exists it is used for the
score in the pygame views, otherwise pygame's default font.

### Keys

| Action        | pygame view | Tk window  |
|---------------|-------------|------------|
| Move left     | Left        | Left, A    |
| Move right    | Right       | Right, D   |
| Rotate        | Up          | Up, W      |
| Soft drop     | Down        | Down, S    |

In the pygame window a key goes to the view under the mouse pointer, or to
the first open view. In Tk the focused window receives the keys; clicking a
window focuses it.

Clearing 1, 2, 3 or 4 lines with one move scores 100, 300, 700 or 1500
points. When a piece settles above the top of the board, the board is
cleared and the score reset on the next move.

## Using the model directly

The game logic runs without any window:

```python
import random
from multitetris.game import GameModel
from multitetris.types import Command

with GameModel(random.Random(1)) as model:
    memento = model.update_model(Command.DOWN)
    print(memento.size, memento.score)
```

`GameModel` runs a worker thread and is a context manager; `close()` stops
the thread and closes every registered widget. `submit()` queues a command
for the worker (the most recently queued command is taken first) and
`add_widget()` registers an `AbstractWidget`, held weakly, that is sent
each new `MementoModel`. `TimeController` and `MoveController` in
`multitetris.controller` feed commands to a model.

The building blocks are usable on their own: `multitetris.board.Board`
(the playing field), `multitetris.shapes` (the seven tetrominoes and
`register_blocks`), `multitetris.factory.BlocksFactory` and
`multitetris.preview.preview_grid`.

## Tests

```
pip install .[test]
pytest
```