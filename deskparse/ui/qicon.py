"""QIcon loading for desktop entry icons (PyQt6)."""

from __future__ import annotations

from PyQt6.QtGui import QIcon, QPixmap

from deskparse.core.config import DEFAULT_ICON_SCALE, DEFAULT_ICON_SIZE
from deskparse.core.icon_resolver import resolve_icon
from deskparse.core.logger import get_logger
from deskparse.core.models import IconSpec

_log = get_logger("ui.qicon")

FALLBACK_ICON_NAME = "application-x-executable"

_FALLBACK_PIXMAP: QPixmap | None = None


def _get_fallback_pixmap() -> QPixmap:
    global _FALLBACK_PIXMAP
    if _FALLBACK_PIXMAP is None:
        _FALLBACK_PIXMAP = QPixmap(DEFAULT_ICON_SIZE, DEFAULT_ICON_SIZE)
        _FALLBACK_PIXMAP.fill()
    return _FALLBACK_PIXMAP


def load_qicon(
    icon: IconSpec | str | None,
    size: int = DEFAULT_ICON_SIZE,
    scale: int = DEFAULT_ICON_SCALE,
    fallback_name: str = FALLBACK_ICON_NAME,
) -> QIcon:
    """Load an icon through the resolution chain. Needs a QGuiApplication.

    Order: resolve_icon(), Qt's own theme lookup, then ``fallback_name``
    from the theme or a blank pixmap.
    """
    content = icon.content if isinstance(icon, IconSpec) else icon
    if content:
        # 1) Path or theme icon found on disk
        path = resolve_icon(content, size=size, scale=scale)
        if path is not None:
            return QIcon(str(path))

        # 2) Qt theme lookup
        qicon = QIcon.fromTheme(content)
        if not qicon.isNull():
            return qicon
        _log.debug("No icon found for %r, using fallback", content)

    # 3) Fallback
    return QIcon.fromTheme(fallback_name, QIcon(_get_fallback_pixmap()))
