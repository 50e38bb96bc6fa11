import pytest

from datagrid.core.coordinates import GridCoordinateSystem
from datagrid.core.models import CellIndex, Rect


def test_raster_size_matches_grid(coords) -> None:
    assert coords.raster_size == (480, 240)


@pytest.mark.parametrize(
    ("u", "v", "expected"),
    [
        (0.0, 0.0, CellIndex(0, 0)),
        (0.999999, 0.999999, CellIndex(23, 11)),
        (3.5 / 24, 10.5 / 12, CellIndex(3, 10)),
        (0.5, 0.5, CellIndex(12, 6)),
    ],
)
def test_cell_from_hit_floors_scaled_coordinates(coords, u, v, expected) -> None:
    assert coords.cell_from_hit(u, v) == expected


def test_cell_from_hit_clamps_exact_upper_edge(coords) -> None:
    assert coords.cell_from_hit(1.0, 1.0) == CellIndex(23, 11)
    assert coords.cell_from_hit(-0.0, 1.0) == CellIndex(0, 11)


def test_cell_from_hit_stays_in_bounds_across_unit_square(coords) -> None:
    steps = 97
    for i in range(steps):
        for j in range(steps):
            cell = coords.cell_from_hit(i / steps, j / steps)
            assert coords.in_bounds(cell)


def test_rect_for_cell_inverts_rows(coords) -> None:
    assert coords.rect_for_cell(CellIndex(3, 10)) == Rect(60, 20, 20, 20)
    assert coords.rect_for_cell(CellIndex(0, 0)) == Rect(0, 220, 20, 20)
    assert coords.rect_for_cell(CellIndex(23, 11)) == Rect(460, 0, 20, 20)


def test_top_of_plane_maps_to_top_of_raster(coords) -> None:
    near_top = coords.cell_from_hit(0.1, 0.95)
    near_bottom = coords.cell_from_hit(0.1, 0.05)
    assert coords.rect_for_cell(near_top).y < coords.rect_for_cell(near_bottom).y
    assert coords.rect_for_cell(near_top).y == 0


def test_cell_centers_resolve_to_their_cell(coords) -> None:
    for cell in (CellIndex(0, 0), CellIndex(3, 10), CellIndex(23, 11)):
        u = (cell.col + 0.5) / coords.cols
        v = (cell.row + 0.5) / coords.rows
        assert coords.cell_from_hit(u, v) == cell


def test_custom_grid_dimensions() -> None:
    small = GridCoordinateSystem(cols=4, rows=2, cell_size=10)
    assert small.raster_size == (40, 20)
    assert small.rect_for_cell(CellIndex(1, 1)) == Rect(10, 0, 10, 10)
    assert not small.in_bounds(CellIndex(4, 0))
