"""Game state: the board, the button panel, the timer and the win/lose rules."""

from __future__ import annotations

import random
from enum import Enum

from .board import Board
from .clock import GameClock
from .config import TILE_SIZE, GameConfig

BUTTON_SIZE = 64
DIGIT_WIDTH = 21
DIGIT_HEIGHT = 32


class Button(Enum):
    """Buttons in the panel below the board."""

    DEBUG = "debug"
    PAUSE = "pause"
    FACE = "face"
    LEADERBOARD = "leaderboard"


class Face(Enum):
    """The face shown on the face button; values name its image."""

    HAPPY = "face_happy"
    WIN = "face_win"
    LOSE = "face_lose"


class Layout:
    """Pixel positions of the panel buttons and the clock digits."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.button_size = BUTTON_SIZE
        self._top = height * TILE_SIZE + TILE_SIZE // 2
        right = width * TILE_SIZE
        # Debug is checked before pause, as a click on both counts as debug.
        self.buttons: dict[Button, tuple[int, int]] = {
            Button.DEBUG: (right - 304, self._top),
            Button.PAUSE: (right - 240, self._top),
            Button.FACE: ((width // 2) * TILE_SIZE - 32, self._top),
            Button.LEADERBOARD: (right - 176, self._top),
        }

    def button_at(self, x: int, y: int) -> Button | None:
        """The button under pixel (x, y), edges included, or None."""
        size = self.button_size
        for button, (bx, by) in self.buttons.items():
            if bx <= x <= bx + size and by <= y <= by + size:
                return button
        return None

    def clock_positions(self) -> list[tuple[int, int]]:
        """Top-left corners of the four clock digits, left to right."""
        right = self.width * TILE_SIZE
        y = self._top + 16
        return [
            (right - 97, y),
            (right - 97 + DIGIT_WIDTH, y),
            (right - 54, y),
            (right - 54 + DIGIT_WIDTH, y),
        ]

    def tile_at(self, x: int, y: int) -> tuple[int, int] | None:
        """Board coordinates of the tile under pixel (x, y), or None."""
        if x < 0 or y < 0:
            return None
        column, row = x // TILE_SIZE, y // TILE_SIZE
        if column < self.width and row < self.height:
            return column, row
        return None


class Game:
    """One round of minesweeper driven by mouse clicks."""

    def __init__(
        self,
        config: GameConfig,
        rng: random.Random | None = None,
        clock: GameClock | None = None,
    ) -> None:
        self.config = config
        self.board = Board(config.columns, config.rows)
        self.board.place_mines(config.mines, rng if rng is not None else random.Random())
        self.layout = Layout(config.columns, config.rows)
        self.clock = clock if clock is not None else GameClock()
        self.clock.restart()
        self.debug = False
        self.game_over = False
        self.won = False

    def left_click(self, px: int, py: int) -> None:
        """Press a button or uncover the tile under pixel (px, py)."""
        button = self.layout.button_at(px, py)
        if button is Button.DEBUG:
            self.toggle_debug()
            return
        if button is Button.PAUSE:
            self.toggle_pause()
            return
        if self.game_over:
            return
        position = self.layout.tile_at(px, py)
        if position is None:
            return
        if self.board.reveal(*position):
            self._finish(won=False)
            return
        safe_tiles = self.board.width * self.board.height - self.board.mines
        if self.board.revealed_count() == safe_tiles:
            self._finish(won=True)

    def right_click(self, px: int, py: int) -> None:
        """Toggle the flag on the tile under pixel (px, py)."""
        position = self.layout.tile_at(px, py)
        if position is not None:
            self.board.toggle_flag(*position)

    def toggle_debug(self) -> bool:
        """Show or hide all mines; fixed once the game is over."""
        self.debug = not self.debug
        if self.game_over:
            self.debug = not self.won
        return self.debug

    def toggle_pause(self) -> bool:
        """Pause or resume the timer unless the game is over."""
        if not self.game_over:
            self.clock.toggle_pause()
        return self.clock.paused()

    def face(self) -> Face:
        """The face for the current state of play."""
        if not self.game_over:
            return Face.HAPPY
        return Face.WIN if self.won else Face.LOSE

    def clock_digits(self) -> tuple[int, int, int, int]:
        """The four clock digits (MM:SS) for the time played."""
        return self.clock.digits()

    def _finish(self, won: bool) -> None:
        if not self.clock.paused():
            self.clock.toggle_pause()
        self.game_over = True
        self.won = won
        if not won:
            self.debug = True