from __future__ import annotations

import pytest

from datagrid.app.controller import GridController
from datagrid.core.coordinates import GridCoordinateSystem
from datagrid.core.hit_resolution import HitResolver
from datagrid.core.models import CellIndex
from datagrid.core.selection import SelectionStore
from datagrid.persistence.repository import StateRepository
from datagrid.persistence.service import GridStateService
from datagrid.render.raster import GridRasterizer


def make_sample_cells() -> list[CellIndex]:
    return [
        CellIndex(0, 0),
        CellIndex(3, 10),
        CellIndex(23, 11),
        CellIndex(12, 5),
        CellIndex(7, 0),
    ]


@pytest.fixture
def coords() -> GridCoordinateSystem:
    return GridCoordinateSystem()


@pytest.fixture
def store() -> SelectionStore:
    return SelectionStore()


@pytest.fixture
def sample_cells() -> list[CellIndex]:
    return make_sample_cells()


@pytest.fixture
def rasterizer(coords: GridCoordinateSystem) -> GridRasterizer:
    return GridRasterizer(coords)


@pytest.fixture
def repository(tmp_path) -> StateRepository:
    return StateRepository(tmp_path / "storage" / "local_storage.json")


@pytest.fixture
def state_service(repository: StateRepository) -> GridStateService:
    return GridStateService(repository)


@pytest.fixture
def controller_factory(coords: GridCoordinateSystem, state_service: GridStateService):
    def _make(autosave: bool = False, with_storage: bool = True) -> GridController:
        return GridController(
            SelectionStore(coords.cols, coords.rows),
            HitResolver(coords),
            GridRasterizer(coords),
            state_service if with_storage else None,
            autosave=autosave,
        )

    return _make
