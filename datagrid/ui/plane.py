"""Plane geometry and pick-to-hit conversion for the grid surface."""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np


def build_plane_geometry(width: float, height: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(positions, indices, texcoords)`` for a plane centered on the origin.

    The plane lies in local XY with +y up. Texture row 0 is mapped to the top
    edge so the raster buffer appears upright.
    """
    hw = width / 2.0
    hh = height / 2.0
    positions = np.array(
        [
            [-hw, -hh, 0.0],
            [hw, -hh, 0.0],
            [hw, hh, 0.0],
            [-hw, hh, 0.0],
        ],
        dtype=np.float32,
    )
    texcoords = np.array(
        [
            [0.0, 1.0],
            [1.0, 1.0],
            [1.0, 0.0],
            [0.0, 0.0],
        ],
        dtype=np.float32,
    )
    indices = np.array([[0, 1, 2], [0, 2, 3]], dtype=np.uint32)
    return positions, indices, texcoords


def hit_from_pick(
    pick_info: Mapping[str, object],
    positions: np.ndarray,
    indices: np.ndarray,
    width: float,
    height: float,
) -> tuple[float, float] | None:
    """Convert a mesh pick into normalized plane coordinates.

    ``u`` grows left to right and ``v`` grows bottom to top. Returns ``None``
    when the pick carries no face information.
    """
    face_index = pick_info.get("face_index")
    face_coord = pick_info.get("face_coord")
    if face_index is None or face_coord is None:
        return None
    index = int(face_index)  # type: ignore[call-overload]
    if not 0 <= index < len(indices):
        return None
    weights = np.asarray(face_coord, dtype=np.float64)[:3]
    total = float(weights.sum())
    if weights.shape != (3,) or total <= 0.0:
        return None
    corners = np.asarray(positions, dtype=np.float64)[np.asarray(indices)[index]]
    point = (weights / total) @ corners
    return float(point[0] / width + 0.5), float(point[1] / height + 0.5)
