# minesweeper

A desktop Minesweeper game built on pygame. Enter your name on the welcome
screen, then clear the board without uncovering a mine.

## Installing

    pip install .

## Running

    minesweeper [--files DIR]

`--files` names the directory holding the game's files; it defaults to
`files` in the current directory. The directory must contain:

- `config.cfg`: three lines giving the number of columns, the number of rows
  and the number of mines, for example

      25
      16
      50

- `font.ttf`: the font used on the welcome screen.
- `images/`: `tile_hidden.png`, `tile_revealed.png`, `mine.png`, `flag.png`,
  `number_1.png` to `number_8.png`, `digits.png`, `debug.png`, `pause.png`,
  `leaderboard.png`, `face_happy.png`, `face_win.png` and `face_lose.png`.

The command prints the number of rows on start-up. It exits with status 1 if
the configuration cannot be read or an image cannot be loaded, and with
status 10101 if the font cannot be loaded.

## Playing

- On the welcome screen, click the window and type your name. Only ASCII
  letters are accepted, up to ten of them; the first is made upper case and
  the rest lower case. Backspace deletes a letter and Enter starts the game.
- Left-click a tile to reveal it. A tile with no mines around it also reveals
  its neighbours, spreading outward.
- Right-click a tile to put a flag on it or take the flag off.
- The debug button shows or hides every mine. The pause button stops and
  restarts the timer. The clock below the board shows minutes and seconds
  played.
- Reveal every tile that is not a mine to win; the face turns to the winning
  face. Revealing a mine loses the game, shows all the mines and turns the
  face to the losing face. Once the game is over, tiles can no longer be
  revealed and the timer stays stopped.

## What it does not do

- The leaderboard button is drawn but does nothing; no scores are kept.
- The name entered on the welcome screen is not stored or shown in the game.
- Clicking the face does not start a new game; close and run the command
  again.

## Using the pieces in code

The board, timer and game rules work without a window:

    import random
    from minesweeper.config import load_config
    from minesweeper.game import Game

    config = load_config("files/config.cfg")
    game = Game(config, random.Random(1), None)
    game.left_click(0, 0)
    print(game.face(), game.clock_digits())

- `minesweeper.config`: `GameConfig` (columns, rows, mines and
  `window_size()`) and `load_config(path)`.
- `minesweeper.board`: `Board` holds the `Tile`s, places mines with
  `place_mines(count, rng)`, flags with `toggle_flag(x, y)` and clears with
  `reveal(x, y)`.
- `minesweeper.clock`: `GameClock` counts whole seconds with pausing, and
  `clock_digits(seconds)` splits a duration into four MM:SS digits.
- `minesweeper.name_entry`: `NameEntry` handles typing on the welcome screen.
- `minesweeper.game`: `Game` ties these together with `left_click`,
  `right_click`, `toggle_debug`, `toggle_pause`, `face` and `clock_digits`;
  `Layout` gives the pixel positions of the `Button`s and the clock digits.
- `minesweeper.app`: the pygame windows and the `main` entry point.

## Tests

    pip install ".[test]"
    pytest