"""Selection state for the grid."""

from __future__ import annotations

import logging

import numpy as np

from datagrid.core.errors import OutOfBoundsError
from datagrid.core.models import COLS, ROWS, CellIndex
from datagrid.core.state_codec import decode_cells, encode_cells

logger = logging.getLogger(__name__)


class SelectionStore:
    """Numpy-backed set of selected cells, indexed ``[row, col]``."""

    def __init__(self, cols: int = COLS, rows: int = ROWS) -> None:
        self._cols = cols
        self._rows = rows
        self._mask = np.zeros((rows, cols), dtype=np.bool_)

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def size(self) -> int:
        """Number of selected cells."""
        return int(np.count_nonzero(self._mask))

    def __len__(self) -> int:
        return self.size

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, CellIndex) and self.contains(cell)

    def in_bounds(self, cell: CellIndex) -> bool:
        """Return whether the cell lies inside this store's grid."""
        return 0 <= cell.col < self._cols and 0 <= cell.row < self._rows

    def contains(self, cell: CellIndex) -> bool:
        """Return whether the cell is selected."""
        if not self.in_bounds(cell):
            return False
        return bool(self._mask[cell.row, cell.col])

    def cells(self) -> frozenset[CellIndex]:
        """Return the selected cells."""
        return frozenset(CellIndex.from_key(int(key), self._cols) for key in np.flatnonzero(self._mask))

    def toggle(self, cell: CellIndex) -> bool:
        """Flip membership of a cell and return whether it is now selected."""
        if not self.in_bounds(cell):
            raise OutOfBoundsError(f"Cell {cell} is outside the {self._cols}x{self._rows} grid.", (cell,))
        selected = not self._mask[cell.row, cell.col]
        self._mask[cell.row, cell.col] = selected
        return selected

    def clear(self) -> None:
        """Deselect every cell."""
        self._mask[:, :] = False

    def serialize(self) -> str:
        """Encode current membership."""
        return encode_cells(self.cells(), self._cols)

    def restore(self, serialized: str, *, strict: bool = False) -> list[CellIndex]:
        """Replace membership with the decoded state.

        Out-of-bounds cells are dropped and returned, or raise
        ``OutOfBoundsError`` when ``strict`` is set. The store is left
        unchanged on any error.
        """
        decoded = decode_cells(serialized)
        dropped = sorted(
            (cell for cell in decoded if not self.in_bounds(cell)),
            key=lambda cell: (cell.row, cell.col),
        )
        if dropped and strict:
            raise OutOfBoundsError(
                f"{len(dropped)} restored cell(s) fall outside the {self._cols}x{self._rows} grid.",
                tuple(dropped),
            )
        mask = np.zeros_like(self._mask)
        for cell in decoded:
            if self.in_bounds(cell):
                mask[cell.row, cell.col] = True
        self._mask = mask
        if dropped:
            logger.warning(
                "selection_restore_dropped count=%d cells=%s",
                len(dropped),
                ",".join(f"{cell.col}-{cell.row}" for cell in dropped),
            )
        return dropped
