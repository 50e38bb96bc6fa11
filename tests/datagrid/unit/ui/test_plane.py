import numpy as np
import pytest

from datagrid.core.coordinates import GridCoordinateSystem
from datagrid.core.models import CellIndex
from datagrid.ui.plane import build_plane_geometry, hit_from_pick

WIDTH = 6.0
HEIGHT = 3.0


@pytest.fixture
def plane():
    return build_plane_geometry(WIDTH, HEIGHT)


def _pick_at(positions, indices, x: float, y: float) -> dict[str, object]:
    """Build pick info with barycentric weights for a local point."""
    for face_index, tri in enumerate(indices):
        a, b, c = (positions[i][:2].astype(np.float64) for i in tri)
        matrix = np.array([[a[0], b[0], c[0]], [a[1], b[1], c[1]], [1.0, 1.0, 1.0]])
        weights = np.linalg.solve(matrix, np.array([x, y, 1.0]))
        if np.all(weights >= -1e-9):
            return {"face_index": face_index, "face_coord": tuple(weights)}
    raise AssertionError("point outside plane")


def test_plane_geometry_shapes(plane) -> None:
    positions, indices, texcoords = plane
    assert positions.shape == (4, 3)
    assert indices.shape == (2, 3)
    assert texcoords.shape == (4, 2)
    top = positions[:, 1] > 0
    assert np.all(texcoords[top, 1] == 0.0)
    assert np.all(texcoords[~top, 1] == 1.0)


@pytest.mark.parametrize(
    ("x", "y", "expected"),
    [
        (-2.9, -1.4, (0.1 / 6, 0.1 / 3)),
        (2.9, 1.4, (5.9 / 6, 2.9 / 3)),
        (0.0, 0.0, (0.5, 0.5)),
    ],
)
def test_hit_from_pick_maps_local_point(plane, x, y, expected) -> None:
    positions, indices, _ = plane
    u, v = hit_from_pick(_pick_at(positions, indices, x, y), positions, indices, WIDTH, HEIGHT)
    assert u == pytest.approx(expected[0])
    assert v == pytest.approx(expected[1])


def test_pick_near_top_of_plane_resolves_top_row(plane) -> None:
    positions, indices, _ = plane
    hit = hit_from_pick(_pick_at(positions, indices, -2.2, 1.3), positions, indices, WIDTH, HEIGHT)
    assert GridCoordinateSystem().cell_from_hit(*hit) == CellIndex(3, 11)


def test_hit_from_pick_without_face_returns_none(plane) -> None:
    positions, indices, _ = plane
    assert hit_from_pick({}, positions, indices, WIDTH, HEIGHT) is None
    assert hit_from_pick({"face_index": 5, "face_coord": (1, 0, 0)}, positions, indices, WIDTH, HEIGHT) is None
    assert hit_from_pick({"face_index": 0, "face_coord": (0, 0, 0)}, positions, indices, WIDTH, HEIGHT) is None
