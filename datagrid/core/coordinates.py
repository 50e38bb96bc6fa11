"""Conversions between hit coordinates, cell indices and raster rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass

from datagrid.core.models import CELL_SIZE, COLS, ROWS, CellIndex, Rect


@dataclass(frozen=True, slots=True)
class GridCoordinateSystem:
    """Stateless mapping between plane hits, cells and raster pixels.

    Hit coordinates use the plane's local convention: ``u`` grows left to
    right and ``v`` grows bottom to top, so row 0 is the bottom row. Raster
    space has its origin at the top-left corner, which means rows are
    flipped when placed into the pixel buffer.
    """

    cols: int = COLS
    rows: int = ROWS
    cell_size: int = CELL_SIZE

    @property
    def raster_size(self) -> tuple[int, int]:
        """Return raster ``(width, height)`` in pixels."""
        return self.cols * self.cell_size, self.rows * self.cell_size

    def in_bounds(self, cell: CellIndex) -> bool:
        """Return whether the cell lies inside the grid."""
        return 0 <= cell.col < self.cols and 0 <= cell.row < self.rows

    def cell_from_hit(self, u: float, v: float) -> CellIndex:
        """Convert a normalized hit coordinate into a cell index.

        Values of exactly 1.0 (or slightly beyond, from float error) are
        clamped into the last column/row.
        """
        col = _clamp(math.floor(u * self.cols), 0, self.cols - 1)
        row = _clamp(math.floor(v * self.rows), 0, self.rows - 1)
        return CellIndex(col=col, row=row)

    def rect_for_cell(self, cell: CellIndex) -> Rect:
        """Return the raster rectangle covering a cell.

        The raster y axis points down while ``row`` counts up from the bottom
        of the plane, so the row is inverted here and nowhere else.
        """
        return Rect(
            x=cell.col * self.cell_size,
            y=(self.rows - 1 - cell.row) * self.cell_size,
            w=self.cell_size,
            h=self.cell_size,
        )


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
