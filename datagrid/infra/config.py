"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STORAGE_KEY = "datagrid.selectedCells"


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files overwrite values from earlier ones. Default order:
    1) appdata/config/.env
    2) appdata/config/.env.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


@dataclass(frozen=True, slots=True)
class ViewerSettings:
    """Viewer window and persistence settings."""

    window_width: int = 1100
    window_height: int = 700
    title: str = "Data Grid"
    storage_key: str = DEFAULT_STORAGE_KEY
    autosave: bool = True

    @classmethod
    def from_env(cls) -> ViewerSettings:
        """Read settings from ``DATAGRID_*`` environment variables."""
        defaults = cls()
        title = os.getenv("DATAGRID_WINDOW_TITLE", "").strip() or defaults.title
        storage_key = os.getenv("DATAGRID_STORAGE_KEY", "").strip() or defaults.storage_key
        return cls(
            window_width=_env_int("DATAGRID_WINDOW_WIDTH", defaults.window_width),
            window_height=_env_int("DATAGRID_WINDOW_HEIGHT", defaults.window_height),
            title=title,
            storage_key=storage_key,
            autosave=os.getenv("DATAGRID_AUTOSAVE", "1").strip() != "0",
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
