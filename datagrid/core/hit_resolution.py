"""Pointer hit resolution onto the selection grid."""

from __future__ import annotations

import math

from datagrid.core.coordinates import GridCoordinateSystem
from datagrid.core.errors import OutOfRangeHitError
from datagrid.core.models import CellIndex
from datagrid.core.selection import SelectionStore


class HitResolver:
    """Resolve normalized plane hits to cells and apply toggles."""

    def __init__(self, coordinates: GridCoordinateSystem | None = None) -> None:
        self._coordinates = coordinates or GridCoordinateSystem()

    @property
    def coordinates(self) -> GridCoordinateSystem:
        return self._coordinates

    def resolve_click(self, u: float, v: float) -> CellIndex:
        """Return the cell under a normalized hit coordinate."""
        if not (_in_unit_range(u) and _in_unit_range(v)):
            raise OutOfRangeHitError(u, v)
        return self._coordinates.cell_from_hit(u, v)

    def handle_click(self, u: float, v: float, store: SelectionStore) -> CellIndex:
        """Resolve a hit and toggle the resulting cell in ``store``."""
        cell = self.resolve_click(u, v)
        store.toggle(cell)
        return cell


def _in_unit_range(value: float) -> bool:
    return math.isfinite(value) and 0.0 <= value < 1.0
