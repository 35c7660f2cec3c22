"""Tests for configuration defaults, XDG locations and settings persistence."""

import json
from pathlib import Path

from deskparse.core import config as config_mod
from deskparse.core.config import DEFAULTS, Config


def test_xdg_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_DIRS", raising=False)
    assert config_mod.applications_dirs() == [
        tmp_path / ".local" / "share" / "applications",
        Path("/usr/local/share/applications"),
        Path("/usr/share/applications"),
    ]


def test_xdg_overrides(isolated_xdg) -> None:
    dirs = config_mod.icon_base_dirs()
    assert dirs[0] == isolated_xdg / "home" / ".icons"
    assert dirs[-1] == isolated_xdg / "usr" / "share" / "icons"
    assert config_mod.settings_file() == isolated_xdg / "home" / ".config" / "deskparse" / "settings.json"


def test_defaults_without_file(tmp_path) -> None:
    config = Config(tmp_path / "settings.json")
    assert config.get("icon_size") == DEFAULTS["icon_size"]
    assert config.get("unknown", "fallback") == "fallback"


def test_set_persists(tmp_path) -> None:
    path = tmp_path / "deskparse" / "settings.json"
    Config(path).set("icon_theme", "Papirus")
    assert json.loads(path.read_text())["icon_theme"] == "Papirus"
    assert Config(path).get("icon_theme") == "Papirus"


def test_malformed_file_ignored(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert Config(path).get("icon_scale") == 1


def test_non_object_file_ignored(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]")
    assert Config(path).get("icon_theme") == "hicolor"


def test_reset(tmp_path) -> None:
    config = Config(tmp_path / "settings.json")
    config.set("icon_size", 16)
    config.reset()
    assert config.get("icon_size") == 48


def test_default_location(isolated_xdg) -> None:
    config = Config()
    config.save()
    assert config_mod.settings_file().is_file()
