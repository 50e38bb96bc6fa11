"""Application controller for grid interaction and persistence."""

from __future__ import annotations

import logging

from datagrid.app.ui_state import GridUIState
from datagrid.core.errors import GridError, OutOfRangeHitError
from datagrid.core.hit_resolution import HitResolver
from datagrid.core.models import CellIndex
from datagrid.core.selection import SelectionStore
from datagrid.persistence.service import GridStateService, LoadStatus
from datagrid.render.raster import GridRasterizer, RasterBuffer

logger = logging.getLogger(__name__)

_LOAD_MESSAGES: dict[LoadStatus, str] = {
    LoadStatus.LOADED: "Loaded saved selection.",
    LoadStatus.MISSING: "No saved selection.",
    LoadStatus.CORRUPT: "Saved selection is corrupt; keeping current selection.",
}


class GridController:
    """Handles grid events and owns the selection state."""

    def __init__(
        self,
        store: SelectionStore,
        resolver: HitResolver,
        rasterizer: GridRasterizer,
        state_service: GridStateService | None = None,
        *,
        autosave: bool = False,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._rasterizer = rasterizer
        self._state_service = state_service
        self._autosave = autosave and state_service is not None
        self._status = "Click a cell to toggle it."
        self._last_cell: CellIndex | None = None
        self._needs_render = True

    @property
    def store(self) -> SelectionStore:
        return self._store

    @property
    def needs_render(self) -> bool:
        return self._needs_render

    def ui_state(self) -> GridUIState:
        """Return a snapshot of view-facing state."""
        return GridUIState(
            selection_count=self._store.size,
            status=self._status,
            last_cell=self._last_cell,
            needs_render=self._needs_render,
        )

    def handle_click(self, u: float, v: float) -> bool:
        """Toggle the cell under a normalized hit. Return whether state changed."""
        try:
            cell = self._resolver.handle_click(u, v, self._store)
        except OutOfRangeHitError:
            logger.debug("grid_click_ignored u=%r v=%r", u, v)
            self._status = "Click ignored: outside the grid."
            return False
        selected = self._store.contains(cell)
        self._last_cell = cell
        self._needs_render = True
        self._status = f"Cell ({cell.col}, {cell.row}) {'selected' if selected else 'cleared'}."
        logger.debug("grid_cell_toggled col=%d row=%d selected=%s", cell.col, cell.row, selected)
        self._autosave_if_enabled()
        return True

    def clear(self) -> bool:
        """Deselect all cells. Return whether anything was selected."""
        if self._store.size == 0:
            self._status = "Nothing to clear."
            return False
        self._store.clear()
        self._last_cell = None
        self._needs_render = True
        self._status = "Selection cleared."
        self._autosave_if_enabled()
        return True

    def save(self) -> bool:
        """Persist the current selection."""
        if self._state_service is None:
            self._status = "Saving is not configured."
            return False
        try:
            self._state_service.save(self._store)
        except (OSError, GridError):
            logger.exception("grid_state_save_failed")
            self._status = "Saving failed; storage is unreadable or unwritable."
            return False
        self._status = f"Saved {self._store.size} cell(s)."
        return True

    def load(self) -> LoadStatus:
        """Restore the saved selection, reporting missing and corrupt state."""
        if self._state_service is None:
            self._status = _LOAD_MESSAGES[LoadStatus.MISSING]
            return LoadStatus.MISSING
        status = self._state_service.load(self._store)
        if status is LoadStatus.LOADED:
            self._last_cell = None
            self._needs_render = True
        self._status = _LOAD_MESSAGES[status]
        return status

    def render(self) -> RasterBuffer:
        """Render a fresh texture buffer for the current selection."""
        buffer = self._rasterizer.render(self._store.cells())
        self._needs_render = False
        return buffer

    def _autosave_if_enabled(self) -> None:
        if not self._autosave or self._state_service is None:
            return
        try:
            self._state_service.save(self._store)
        except (OSError, GridError):
            logger.exception("grid_state_autosave_failed")
            self._status = f"{self._status} Autosave failed."
