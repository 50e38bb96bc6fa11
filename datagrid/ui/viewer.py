"""pygfx viewer for the data grid plane."""

from __future__ import annotations

import logging
from typing import Any

from datagrid.app.controller import GridController
from datagrid.infra.config import ViewerSettings
from datagrid.render.raster import RasterBuffer
from datagrid.ui.plane import build_plane_geometry, hit_from_pick

try:
    import pygfx as gfx
except Exception as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None

try:
    import rendercanvas.auto as rc_auto
except Exception as exc:  # pragma: no cover - missing GUI backend
    rc_auto = None
    _canvas_import_error = exc
else:
    _canvas_import_error = None

logger = logging.getLogger(__name__)

_PLANE_UNITS_PER_CELL = 0.25
_BACKGROUND = "#111827"


class GridViewer:
    """Window showing the grid as a textured plane in 3D."""

    def __init__(self, controller: GridController, settings: ViewerSettings) -> None:
        if gfx is None:
            raise RuntimeError(
                f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'wgpu'."
            )
        if rc_auto is None:
            raise RuntimeError(
                "Render canvas backend unavailable. Install a desktop backend such as 'glfw'. "
                f"Original error: {_canvas_import_error!r}"
            )
        self._controller = controller
        self._settings = settings
        self._draw_failed = False
        self._is_closed = False

        store = controller.store
        self._plane_width = store.cols * _PLANE_UNITS_PER_CELL
        self._plane_height = store.rows * _PLANE_UNITS_PER_CELL
        self._positions, self._indices, texcoords = build_plane_geometry(
            self._plane_width, self._plane_height
        )

        self.canvas = rc_auto.RenderCanvas(
            size=(settings.window_width, settings.window_height), title=settings.title
        )
        self.renderer = gfx.WgpuRenderer(self.canvas)
        self.scene = gfx.Scene()
        self.scene.add(gfx.Background(None, gfx.BackgroundMaterial(_BACKGROUND)))

        geometry = gfx.Geometry(positions=self._positions, indices=self._indices, texcoords=texcoords)
        material = gfx.MeshBasicMaterial(map=self._texture(controller.render()), pick_write=True)
        self.plane = gfx.Mesh(geometry, material)
        self.scene.add(self.plane)

        self.camera = gfx.PerspectiveCamera(60, settings.window_width / settings.window_height)
        self.camera.show_object(self.plane, view_dir=(0, 0, -1), up=(0, 1, 0))
        self.controls = gfx.OrbitController(self.camera, register_events=self.renderer)

        self.plane.add_event_handler(self._on_plane_pointer_down, "pointer_down")
        self.renderer.add_event_handler(self._on_key_down, "key_down")
        self._update_title()

    def run(self) -> None:
        """Start draw loop."""
        self.canvas.request_draw(self._draw_frame)
        loop = getattr(rc_auto, "loop", None)
        if loop is not None and hasattr(loop, "run"):
            loop.run()
            return
        raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")

    def invalidate(self) -> None:
        """Schedule one redraw."""
        if not self._is_closed:
            self.canvas.request_draw()

    def close(self) -> None:
        """Close canvas."""
        if self._is_closed:
            return
        self._is_closed = True
        self.canvas.close()

    def _draw_frame(self) -> None:
        if self._draw_failed or self._is_closed:
            return
        try:
            if self._controller.needs_render:
                self.plane.material.map = self._texture(self._controller.render())
                self._update_title()
            self.renderer.render(self.scene, self.camera)
        except Exception:
            self._draw_failed = True
            logger.exception("grid_viewer_draw_failed")

    def _on_plane_pointer_down(self, event: Any) -> None:
        if getattr(event, "button", 1) != 1:
            return
        pick_info = getattr(event, "pick_info", None) or {}
        hit = hit_from_pick(pick_info, self._positions, self._indices, self._plane_width, self._plane_height)
        if hit is None:
            return
        if self._controller.handle_click(*hit):
            self.invalidate()

    def _on_key_down(self, event: Any) -> None:
        key = str(getattr(event, "key", "")).lower()
        changed = False
        if key == "c":
            changed = self._controller.clear()
        elif key == "s":
            self._controller.save()
        elif key == "l":
            self._controller.load()
            changed = self._controller.needs_render
        elif key == "escape":
            self.close()
            return
        logger.info("grid_viewer_status %s", self._controller.ui_state().status)
        if changed:
            self.invalidate()
        else:
            self._update_title()

    def _update_title(self) -> None:
        ui = self._controller.ui_state()
        set_title = getattr(self.canvas, "set_title", None)
        if callable(set_title):
            set_title(f"{self._settings.title} - {ui.selection_count} selected")

    @staticmethod
    def _texture(buffer: RasterBuffer) -> Any:
        return gfx.Texture(buffer.pixels, dim=2)
