"""The maze: tile kinds, positions and the grid loaded from a map file."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

_DIGITS = frozenset("0123456789")


class Tile(enum.IntEnum):
    """Kinds of map tile, numbered as the digits of a map file."""

    EMPTY = 0
    COIN = 1
    WALL = 2
    PLAYER = 3
    ANTISEPTIC = 4
    VIRUS = 5
    DOORS_OPEN = 6
    FREEDOM = 7
    DOORS_CLOSED = 8
    FREEZE = 9


@dataclass(frozen=True)
class Position:
    """A cell on the board: column ``x`` and row ``y``."""

    x: int
    y: int


class Board:
    """A rectangular grid of tiles, indexed by column and row."""

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        self._rows = [[Tile(value) for value in row] for row in rows]
        width = len(self._rows[0]) if self._rows else 0
        if any(len(row) != width for row in self._rows):
            raise ValueError("all board rows must have the same length")
        self._width = width

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Parse a map: one digit per tile, one newline-terminated line per row.

        The number of rows is the number of newlines and the width is the
        length of the first line; text after the last newline is ignored.
        """
        lines = text.split("\n")
        height = text.count("\n")
        width = len(lines[0])
        rows = []
        for number, line in enumerate(lines[:height]):
            if len(line) < width:
                raise ValueError(
                    f"map row {number} has {len(line)} tiles, expected {width}"
                )
            cells = line[:width]
            bad = next((ch for ch in cells if ch not in _DIGITS), None)
            if bad is not None:
                raise ValueError(f"map row {number} holds a non-digit {bad!r}")
            rows.append([int(ch) for ch in cells])
        board = cls(rows)
        board._width = width
        return board

    @classmethod
    def load(cls, path: str | Path) -> "Board":
        """Read and parse a map file."""
        return cls.from_text(Path(path).read_text(encoding="ascii"))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self._rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < len(self._rows)

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the board")
        return self._rows[y][x]

    def set(self, x: int, y: int, tile: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the board")
        self._rows[y][x] = Tile(tile)

    def positions_of(self, tile: int) -> list[Position]:
        """All cells holding ``tile``, row by row from the top left."""
        return [
            Position(x, y)
            for y, row in enumerate(self._rows)
            for x, value in enumerate(row)
            if value == tile
        ]

    def __str__(self) -> str:
        return "".join(
            "".join(str(int(value)) for value in row) + "\n" for row in self._rows
        )