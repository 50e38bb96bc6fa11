"""Serialized selection format: a JSON array of ``"col-row"`` tokens."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable

from datagrid.core.errors import MalformedStateError
from datagrid.core.models import COLS, CellIndex

_TOKEN_RE = re.compile(r"^(-?\d+)-(-?\d+)$")


def cell_to_token(cell: CellIndex) -> str:
    """Format a cell as a ``col-row`` token."""
    return f"{cell.col}-{cell.row}"


def token_to_cell(token: object) -> CellIndex:
    """Parse a ``col-row`` token."""
    if not isinstance(token, str):
        raise MalformedStateError(f"Cell token must be a string, got {type(token).__name__}.")
    match = _TOKEN_RE.match(token.strip())
    if match is None:
        raise MalformedStateError(f"Malformed cell token {token[:32]!r}.")
    try:
        return CellIndex(col=int(match.group(1)), row=int(match.group(2)))
    except ValueError as exc:
        raise MalformedStateError(f"Cell token {token[:32]!r} has out-of-range numbers.") from exc


def encode_cells(cells: Iterable[CellIndex], cols: int = COLS) -> str:
    """Encode cells as a deterministic JSON string."""
    ordered = sorted(set(cells), key=lambda cell: (cell.key(cols), cell.col))
    return json.dumps([cell_to_token(cell) for cell in ordered], separators=(",", ":"))


def decode_cells(serialized: str) -> set[CellIndex]:
    """Decode a JSON token list into a set of cells.

    Bounds are not checked here; callers decide what to do with cells outside
    their grid.
    """
    if not isinstance(serialized, str):
        raise MalformedStateError("Serialized state must be a string.")
    try:
        payload = json.loads(serialized)
    except (ValueError, RecursionError) as exc:
        raise MalformedStateError("Serialized state is not valid JSON.") from exc
    if not isinstance(payload, list):
        raise MalformedStateError("Serialized state must be a JSON array.")
    return {token_to_cell(item) for item in payload}
