# spartysudoku

An action sudoku game built on pygame. You do not type digits into cells.
You steer Sparty around the playing field, eat the digits that lie around,
and put them down on the sudoku grid. The board is checked against the
level's solution on every update. A correct board moves you on to the next
level. A full board that is wrong restarts the level.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

The package ships no level files, images or sounds. Start the game from a
directory that holds `LevelFiles/Level1.xml`, `LevelFiles/level2.xml`,
`LevelFiles/level3.xml` and the `images/` and `audio/` folders those files
refer to. `images/background.png` is drawn behind the level if it exists.

```
spartysudoku                 # starts on LevelFiles/Level1.xml
spartysudoku --level 2       # start on level 1, 2 or 3
spartysudoku path/to/level.xml
```

Each level opens with a prompt that names the level and the keys. It stays
for three seconds, and then the clock starts from 0:00.

| Input        | Action                                                            |
|--------------|-------------------------------------------------------------------|
| Left click   | Walk Sparty towards the clicked point                             |
| Space        | Eat the loose digit under Sparty's target point into the X-ray    |
| 0–9          | Put the digit of that value from the X-ray down at the target point, snapped to a cell when it is on the board |
| B            | Headbutt: release the digits of a container under the target point |
| Mouse move   | Move the spotlight, on levels that have one                       |

Sparty acts only once he has reached the point he is walking to. The X-ray
holds at most seven digits. If you eat while it is full, an "I'm Full!"
message rises up the screen. A digit cannot be put down on top of another
number.

When the board is complete, "Level Complete!" or "Incorrect!" is shown for
three seconds. The game then loads the next level, or the same one again.
Level 3 is always loaded again.

### Commands

The window has no menu bar. Its commands are keyboard shortcuts, and each is
also a `spartysudoku.view.MenuCommand` that `GameView.run_command` carries out:

| Shortcut        | Command       | Effect                                           |
|-----------------|---------------|--------------------------------------------------|
| Ctrl+F          | `OPEN`        | Choose a level file in a file dialog (tkinter)   |
| Ctrl+1/2/3      | `LEVEL_ONE` … | Start level 1, 2 or 3                            |
| Ctrl+O          | `SOLVE`       | Move loose digits onto every empty board cell    |
| F1              | `ABOUT`       | Show the welcome notice                          |
| Alt+X           | `EXIT`        | Close the window                                 |

Notices and level-loading errors are shown at the bottom of the window. The
next key press or click dismisses them. `OPEN` does nothing where tkinter is
not available.

## Level files

A level is an XML document. Its root carries `tilewidth`, `tileheight`,
`width` and `height` attributes, with width and height in tiles. It holds
three sections:

- `<declarations>`: one element per kind of item, each with an `id` and the
  file it uses. The kinds are `given`, `digit`, `background`, `container`,
  `xray`, `sparty`, `spotlight` and `audio`. Most use `image`. `sparty` uses
  `image1` and `image2` plus pivot and target attributes. `container` uses
  `image` and `front`. `audio` uses `file` and `length`. Numbers carry a
  `value`.
- `<items>`: placed items, each naming a declaration `id` and its `col` and
  `row` in tiles. A container lists the digits it holds as child elements.
- `<game col="…" row="…">`: the top-left tile of the sudoku board. Its text
  holds up to 81 solution values, separated by spaces, row by row.

`spartysudoku.loader.read_level` parses such a file into a `LevelFile`. A
file that cannot be read, or that holds bad values, raises
`spartysudoku.loader.LevelError`, a `ValueError`.

## Using the library

The game logic works without a window. Images are loaded through pygame
only when an item's size or picture is first needed.

```python
from spartysudoku.game import Game

game = Game()
game.load("LevelFiles/Level1.xml")
game.update(0.016)
game.key_down(ord(" "))
```

`Game.draw` takes any object with the drawing methods of the
`spartysudoku.item.Graphics` protocol. `spartysudoku.view.PygameGraphics`
provides them for a pygame surface.

`spartysudoku.solution.Solution` reads a board from a `<game>` element.
`Solution.value(row, col)` returns the expected digit.
`spartysudoku.clock.Clock` keeps the time. `minutes_text()` and
`seconds_text()` format it, and `record_score()` stores it as `score`.

## Running the tests

```
pip install ".[test]"
pytest
```