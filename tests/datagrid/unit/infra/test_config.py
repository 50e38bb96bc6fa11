from __future__ import annotations

import os

from datagrid.infra.config import ViewerSettings, load_default_env_files, load_env_file


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    base_env = tmp_path / ".env"
    local_env = tmp_path / ".env.local"
    base_env.write_text("A=base\nB=base\n", encoding="utf-8")
    local_env.write_text("B=local\n", encoding="utf-8")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)

    load_default_env_files(paths=(str(base_env), str(local_env)))
    assert os.environ.get("A") == "base"
    assert os.environ.get("B") == "local"


def test_viewer_settings_defaults(monkeypatch) -> None:
    for name in (
        "DATAGRID_WINDOW_WIDTH",
        "DATAGRID_WINDOW_HEIGHT",
        "DATAGRID_WINDOW_TITLE",
        "DATAGRID_STORAGE_KEY",
        "DATAGRID_AUTOSAVE",
    ):
        monkeypatch.delenv(name, raising=False)
    assert ViewerSettings.from_env() == ViewerSettings()


def test_viewer_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DATAGRID_WINDOW_WIDTH", "800")
    monkeypatch.setenv("DATAGRID_WINDOW_HEIGHT", "not-a-number")
    monkeypatch.setenv("DATAGRID_WINDOW_TITLE", "Grid")
    monkeypatch.setenv("DATAGRID_STORAGE_KEY", "grid.alt")
    monkeypatch.setenv("DATAGRID_AUTOSAVE", "0")
    settings = ViewerSettings.from_env()
    assert settings.window_width == 800
    assert settings.window_height == ViewerSettings().window_height
    assert settings.title == "Grid"
    assert settings.storage_key == "grid.alt"
    assert settings.autosave is False
