"""Shared fixtures for the deskparse tests."""

from __future__ import annotations

import pytest

from deskparse.core.icon_resolver import clear_icon_cache

MINIMAL = "[Desktop Entry]\nType=Application\nName=X\nExec=Y\n"


@pytest.fixture
def minimal_text() -> str:
    return MINIMAL


@pytest.fixture
def isolated_xdg(tmp_path, monkeypatch):
    """Point every XDG and home directory into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "usr" / "share"))
    return tmp_path


@pytest.fixture(autouse=True)
def _fresh_icon_cache():
    clear_icon_cache()
    yield
    clear_icon_cache()
