"""deskparse - a strict parser for freedesktop.org .desktop files."""

__app_name__ = "deskparse"
__version__ = "1.0.0"

from deskparse.core.errors import (  # noqa: E402
    EntryFormatError,
    EntrySyntaxError,
    ErrorKind,
    InternalParseError,
    ParseError,
    RepetitiveEntryError,
    RepetitiveKeyError,
    RequiredKeyError,
    UnacceptableCharacterError,
)
from deskparse.core.models import (  # noqa: E402
    Application,
    DesktopAction,
    DesktopEntry,
    DesktopFile,
    Directory,
    EntryType,
    IconSpec,
    Link,
    LocaleString,
    LocaleStringList,
    Unknown,
)
from deskparse.core.parser import parse  # noqa: E402

__all__ = [
    "Application",
    "DesktopAction",
    "DesktopEntry",
    "DesktopFile",
    "Directory",
    "EntryFormatError",
    "EntrySyntaxError",
    "EntryType",
    "ErrorKind",
    "IconSpec",
    "InternalParseError",
    "Link",
    "LocaleString",
    "LocaleStringList",
    "ParseError",
    "RepetitiveEntryError",
    "RepetitiveKeyError",
    "RequiredKeyError",
    "UnacceptableCharacterError",
    "Unknown",
    "parse",
]
