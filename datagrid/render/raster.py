"""Grid texture rasterization into RGBA pixel buffers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from datagrid.core.coordinates import GridCoordinateSystem
from datagrid.core.models import CellIndex

RGBA = tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class GridTheme:
    """Grid texture colors."""

    background: str = "#374151"
    selected: str = "#ef4444"
    grid_line: str = "#4b5563"
    grid_line_width: int = 2


DEFAULT_THEME = GridTheme()


def parse_hex_color(value: str) -> RGBA:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` into an RGBA tuple."""
    text = value.strip().lstrip("#")
    if len(text) not in (6, 8):
        raise ValueError(f"Unsupported color literal: {value!r}")
    try:
        channels = [int(text[i : i + 2], 16) for i in range(0, len(text), 2)]
    except ValueError as exc:
        raise ValueError(f"Unsupported color literal: {value!r}") from exc
    if len(channels) == 3:
        channels.append(255)
    return channels[0], channels[1], channels[2], channels[3]


@dataclass(slots=True)
class RasterBuffer:
    """RGBA pixel buffer. Row 0 is the top of the texture."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel_at(self, x: int, y: int) -> RGBA:
        """Return the RGBA value at raster pixel ``(x, y)``."""
        r, g, b, a = (int(channel) for channel in self.pixels[y, x])
        return r, g, b, a

    def count_color(self, color: str | RGBA) -> int:
        """Count pixels matching ``color`` on the RGB channels."""
        rgba = parse_hex_color(color) if isinstance(color, str) else color
        matches = np.all(self.pixels[:, :, :3] == np.array(rgba[:3], dtype=np.uint8), axis=2)
        return int(np.count_nonzero(matches))


class GridRasterizer:
    """Render the grid texture from a selection."""

    def __init__(
        self,
        coordinates: GridCoordinateSystem | None = None,
        theme: GridTheme = DEFAULT_THEME,
    ) -> None:
        self._coordinates = coordinates or GridCoordinateSystem()
        self._theme = theme
        self._background = np.array(parse_hex_color(theme.background), dtype=np.uint8)
        self._selected = np.array(parse_hex_color(theme.selected), dtype=np.uint8)
        self._grid_line = np.array(parse_hex_color(theme.grid_line), dtype=np.uint8)

    @property
    def coordinates(self) -> GridCoordinateSystem:
        return self._coordinates

    @property
    def theme(self) -> GridTheme:
        return self._theme

    def render(self, selection: Iterable[CellIndex]) -> RasterBuffer:
        """Rebuild the full buffer: background, selected fills, then grid lines."""
        coords = self._coordinates
        width, height = coords.raster_size
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = self._background

        for cell in selection:
            if not coords.in_bounds(cell):
                continue
            rect = coords.rect_for_cell(cell)
            pixels[rect.y : rect.y + rect.h, rect.x : rect.x + rect.w] = self._selected

        half = self._theme.grid_line_width / 2
        for col in range(coords.cols + 1):
            x0, x1 = _stroke_span(col * coords.cell_size, half, width)
            pixels[:, x0:x1] = self._grid_line
        for row in range(coords.rows + 1):
            y0, y1 = _stroke_span(row * coords.cell_size, half, height)
            pixels[y0:y1, :] = self._grid_line
        return RasterBuffer(pixels)


def _stroke_span(center: int, half: float, limit: int) -> tuple[int, int]:
    """Pixel span covered by a stroke centered on a boundary, clipped to the buffer."""
    start = max(0, int(np.floor(center - half)))
    stop = min(limit, int(np.ceil(center + half)))
    return start, stop
