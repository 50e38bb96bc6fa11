"""Application entry point."""

from __future__ import annotations

import logging

from datagrid.app.controller import GridController
from datagrid.core.coordinates import GridCoordinateSystem
from datagrid.core.hit_resolution import HitResolver
from datagrid.core.selection import SelectionStore
from datagrid.infra.app_data import ensure_app_data_dirs, resolve_storage_path
from datagrid.infra.config import ViewerSettings, load_default_env_files
from datagrid.infra.logging import setup_logging, shutdown_logging
from datagrid.persistence.repository import StateRepository
from datagrid.persistence.service import GridStateService
from datagrid.render.raster import GridRasterizer

logger = logging.getLogger(__name__)


def build_controller(settings: ViewerSettings) -> GridController:
    """Compose the grid controller from settings."""
    coordinates = GridCoordinateSystem()
    store = SelectionStore(coordinates.cols, coordinates.rows)
    state_service = GridStateService(StateRepository(resolve_storage_path()), key=settings.storage_key)
    controller = GridController(
        store,
        HitResolver(coordinates),
        GridRasterizer(coordinates),
        state_service,
        autosave=settings.autosave,
    )
    controller.load()
    return controller


def main() -> None:
    """Run the data grid viewer."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.info("app_data_paths root=%s logs=%s storage=%s", paths["root"], paths["logs"], paths["storage"])
    settings = ViewerSettings.from_env()
    controller = build_controller(settings)

    from datagrid.ui.viewer import GridViewer

    try:
        GridViewer(controller, settings).run()
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
