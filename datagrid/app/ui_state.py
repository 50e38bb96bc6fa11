"""Typed UI state exposed by the controller."""

from __future__ import annotations

from dataclasses import dataclass

from datagrid.core.models import CellIndex


@dataclass(frozen=True, slots=True)
class GridUIState:
    """View-ready state snapshot."""

    selection_count: int
    status: str
    last_cell: CellIndex | None
    needs_render: bool
