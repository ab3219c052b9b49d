"""The minefield: tiles, neighbours, mine placement and flood reveal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol


class _Shuffler(Protocol):
    def shuffle(self, x: list) -> None: ...


@dataclass
class Tile:
    """One square of the board."""

    x: int
    y: int
    mine: bool = False
    flagged: bool = False
    hidden: bool = True
    adjacent_mines: int = 0


_OFFSETS = [(-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1)]


class Board:
    """A width x height grid of tiles."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.mines = 0
        self._rows = [[Tile(x, y) for x in range(width)] for y in range(height)]

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the board")
        return self._rows[y][x]

    def neighbours(self, x: int, y: int) -> list[Tile]:
        """Tiles surrounding (x, y), row by row, excluding the tile itself."""
        self.tile(x, y)
        return [
            self._rows[ny][nx]
            for dx, dy in _OFFSETS
            if 0 <= (nx := x + dx) < self.width and 0 <= (ny := y + dy) < self.height
        ]

    def place_mines(self, count: int, rng: _Shuffler) -> None:
        """Scatter *count* mines using *rng*'s shuffle and recount neighbours."""
        tiles = list(self)
        if not 0 <= count <= len(tiles):
            raise ValueError(f"cannot place {count} mines on {len(tiles)} tiles")
        for tile in tiles:
            tile.mine = False
        rng.shuffle(tiles)
        for tile in tiles[:count]:
            tile.mine = True
        self.mines = count
        for tile in self:
            tile.adjacent_mines = sum(n.mine for n in self.neighbours(tile.x, tile.y))

    def toggle_flag(self, x: int, y: int) -> bool:
        """Flip the flag on a tile and return its new state."""
        tile = self.tile(x, y)
        tile.flagged = not tile.flagged
        return tile.flagged

    def reveal(self, x: int, y: int) -> bool:
        """Uncover a tile, clearing outward from empty tiles.

        Returns True when the tile held a mine.
        """
        start = self.tile(x, y)
        if not start.hidden:
            return False
        start.hidden = False
        if start.mine:
            return True
        pending = [start] if start.adjacent_mines == 0 else []
        while pending:
            current = pending.pop()
            for neighbour in self.neighbours(current.x, current.y):
                if neighbour.hidden and not neighbour.mine:
                    neighbour.hidden = False
                    if neighbour.adjacent_mines == 0:
                        pending.append(neighbour)
        return False

    def revealed_count(self) -> int:
        """Number of uncovered tiles that are not mines."""
        return sum(not t.hidden and not t.mine for t in self)

    def __iter__(self) -> Iterator[Tile]:
        for row in self._rows:
            yield from row