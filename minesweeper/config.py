"""Reading the game configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

TILE_SIZE = 32
PANEL_HEIGHT = 100


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions in tiles and the number of mines."""

    columns: int
    rows: int
    mines: int

    def window_size(self) -> tuple[int, int]:
        """Pixel size of the game window: the board plus the button panel."""
        return self.columns * TILE_SIZE, self.rows * TILE_SIZE + PANEL_HEIGHT


def load_config(path: str | PathLike[str]) -> GameConfig:
    """Read columns, rows and mine count from the first three lines of *path*."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if len(lines) < 3:
        raise ValueError(f"{path}: expected three lines, found {len(lines)}")
    try:
        columns, rows, mines = (int(line.strip()) for line in lines[:3])
    except ValueError as exc:
        raise ValueError(f"{path}: malformed configuration: {exc}") from exc
    return GameConfig(columns=columns, rows=rows, mines=mines)