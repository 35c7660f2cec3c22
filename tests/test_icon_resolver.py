"""Tests for icon resolution against a synthetic icon theme tree."""

from pathlib import Path

import pytest

from deskparse.core.config import Config
from deskparse.core.icon_resolver import ThemeDirectory, load_theme_index, resolve_icon
from deskparse.core.models import IconSpec

HICOLOR_INDEX = """\
[Icon Theme]
Name=Hicolor
Directories=16x16/apps,48x48/apps,48x48@2/apps,scalable/apps

[16x16/apps]
Size=16
Type=Fixed

[48x48/apps]
Size=48
Type=Fixed

[48x48@2/apps]
Size=48
Scale=2
Type=Fixed

[scalable/apps]
Size=128
MinSize=8
MaxSize=512
Type=Scaled
"""

CHILD_INDEX = """\
[Icon Theme]
Name=Child
Inherits=hicolor
Directories=32/apps

[32/apps]
Size=32
"""


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.fixture
def icons(isolated_xdg) -> Path:
    base = isolated_xdg / "usr" / "share" / "icons"
    (base / "hicolor").mkdir(parents=True)
    (base / "hicolor" / "index.theme").write_text(HICOLOR_INDEX)
    (base / "child").mkdir()
    (base / "child" / "index.theme").write_text(CHILD_INDEX)
    return base


class TestThemeDirectory:
    def test_threshold_match(self) -> None:
        d = ThemeDirectory("32/apps", size=32)
        assert d.matches(30, 1)
        assert d.matches(34, 1)
        assert not d.matches(35, 1)
        assert not d.matches(32, 2)

    def test_scaled_distance(self) -> None:
        d = ThemeDirectory("scalable", size=128, type="Scaled", min_size=8, max_size=512)
        assert d.distance(48, 1) == 0
        assert d.distance(1024, 1) == 512

    def test_fixed_distance(self) -> None:
        assert ThemeDirectory("16", size=16, type="Fixed").distance(48, 1) == 32


class TestResolveIcon:
    def test_existing_file_path(self, tmp_path) -> None:
        icon = _touch(tmp_path / "custom.png")
        assert resolve_icon(IconSpec(str(icon))) == icon

    def test_missing_absolute_path(self, icons) -> None:
        assert resolve_icon("/nonexistent/icon.png") is None

    def test_empty_reference(self) -> None:
        assert resolve_icon("") is None

    def test_exact_size_in_hicolor(self, icons) -> None:
        _touch(icons / "hicolor" / "16x16" / "apps" / "app.png")
        wanted = _touch(icons / "hicolor" / "48x48" / "apps" / "app.png")
        assert resolve_icon("app", size=48) == wanted

    def test_scale_selects_directory(self, icons) -> None:
        _touch(icons / "hicolor" / "48x48" / "apps" / "app.png")
        wanted = _touch(icons / "hicolor" / "48x48@2" / "apps" / "app.png")
        assert resolve_icon("app", size=48, scale=2) == wanted

    def test_closest_size_when_no_exact_match(self, icons) -> None:
        wanted = _touch(icons / "hicolor" / "16x16" / "apps" / "app.png")
        assert resolve_icon("app", size=24) == wanted

    def test_inherited_theme(self, icons) -> None:
        wanted = _touch(icons / "hicolor" / "scalable" / "apps" / "app.svg")
        assert resolve_icon("app", size=48, theme="child") == wanted

    def test_child_theme_wins(self, icons) -> None:
        _touch(icons / "hicolor" / "48x48" / "apps" / "app.png")
        wanted = _touch(icons / "child" / "32" / "apps" / "app.png")
        assert resolve_icon("app", size=32, theme="child") == wanted

    def test_name_with_extension(self, icons) -> None:
        wanted = _touch(icons / "hicolor" / "48x48" / "apps" / "app.png")
        assert resolve_icon("app.png", size=48) == wanted

    def test_pixmaps_fallback(self, icons, isolated_xdg) -> None:
        wanted = _touch(isolated_xdg / "usr" / "share" / "pixmaps" / "legacy.xpm")
        assert resolve_icon("legacy") == wanted

    def test_not_found(self, icons) -> None:
        assert resolve_icon("nothing-here") is None

    def test_config_supplies_defaults(self, icons, tmp_path) -> None:
        wanted = _touch(icons / "hicolor" / "16x16" / "apps" / "app.png")
        _touch(icons / "hicolor" / "48x48" / "apps" / "app.png")
        config = Config(tmp_path / "settings.json")
        config.set("icon_size", 16)
        assert resolve_icon("app", config=config) == wanted

    def test_icon_spec_resolve(self, icons) -> None:
        wanted = _touch(icons / "hicolor" / "48x48" / "apps" / "app.png")
        assert IconSpec("app").resolve() == wanted


class TestThemeIndex:
    def test_parses_directories_and_inherits(self, icons) -> None:
        index = load_theme_index("child", (icons,))
        assert index.inherits == ("hicolor",)
        assert index.directories == (ThemeDirectory("32/apps", size=32, min_size=32, max_size=32),)

    def test_missing_theme(self, icons) -> None:
        assert load_theme_index("missing", (icons,)) is None

    def test_index_without_icon_theme_group(self, icons) -> None:
        (icons / "broken").mkdir()
        (icons / "broken" / "index.theme").write_text("[Something]\nName=x\n")
        assert load_theme_index("broken", (icons,)) is None
