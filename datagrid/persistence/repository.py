"""Key-value persistence backed by a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from datagrid.core.errors import MalformedStateError


class StateRepository:
    """JSON file key-value store for string values."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` when absent."""
        value = self._read_all().get(_validate_key(key))
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedStateError(f"Stored value for '{key}' is not a string.")
        return value

    def set(self, key: str, value: str) -> None:
        """Store a value under ``key``."""
        data = self._read_all()
        data[_validate_key(key)] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        """Delete ``key`` if it exists."""
        data = self._read_all()
        if data.pop(_validate_key(key), None) is not None:
            self._write_all(data)

    def _read_all(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (ValueError, RecursionError) as exc:
            raise MalformedStateError(f"Storage file {self._path} is not valid JSON.") from exc
        if not isinstance(payload, dict):
            raise MalformedStateError(f"Storage file {self._path} must contain a JSON object.")
        return payload

    def _write_all(self, data: dict[str, object]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2, sort_keys=True)
        tmp_path.replace(self._path)


def _validate_key(key: str) -> str:
    cleaned = key.strip()
    if not cleaned:
        raise ValueError("Storage key cannot be empty.")
    return cleaned
