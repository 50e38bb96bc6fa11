"""Core grid models and fixed configuration constants."""

from __future__ import annotations

from dataclasses import dataclass

COLS = 24
ROWS = 12
CELL_SIZE = 20


@dataclass(frozen=True, slots=True)
class CellIndex:
    """Grid cell coordinate. Row 0 is the bottom row of the plane."""

    col: int
    row: int

    def key(self, cols: int = COLS) -> int:
        """Return packed integer key for this cell."""
        return self.row * cols + self.col

    @classmethod
    def from_key(cls, key: int, cols: int = COLS) -> CellIndex:
        """Build a cell from its packed integer key."""
        row, col = divmod(key, cols)
        return cls(col=col, row=row)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned pixel rectangle in raster space."""

    x: int
    y: int
    w: int
    h: int
