"""Grid error kinds."""

from __future__ import annotations


class GridError(ValueError):
    """Base class for recoverable grid errors."""


class MalformedStateError(GridError):
    """Persisted selection state cannot be parsed into cell pairs."""


class OutOfBoundsError(GridError):
    """A cell lies outside the grid bounds."""

    def __init__(self, message: str, cells: tuple[object, ...] = ()) -> None:
        super().__init__(message)
        self.cells = cells


class OutOfRangeHitError(GridError):
    """A normalized hit coordinate lies outside [0, 1)."""

    def __init__(self, u: float, v: float) -> None:
        super().__init__(f"Hit ({u!r}, {v!r}) is outside the grid surface.")
        self.u = u
        self.v = v
