"""Desktop file parser — assembles the classified lines into a DesktopFile.

The scan is a small state machine. It starts in SCANNING_PRIMARY with the
cursor on the primary entry; each ``[Desktop Action ...]`` header appends an
action builder and moves the cursor to it. Groups with any other name are
accepted without changing the state, so their keys go to whichever
builder the cursor is on.
"""

from __future__ import annotations

from enum import Enum

from deskparse.core.builders import ActionBuilder, EntryBuilder
from deskparse.core.coercers import ACTION_KEYS, ENTRY_KEYS, apply_record
from deskparse.core.errors import (
    EntryFormatError,
    InternalParseError,
    RepetitiveEntryError,
)
from deskparse.core.header import Header, HeaderKind, parse_header
from deskparse.core.lines import LineType, RawLine, split_lines
from deskparse.core.logger import get_logger
from deskparse.core.models import DesktopFile
from deskparse.core.tokenizer import tokenize
from deskparse.core.validator import validate

_log = get_logger("parser")


class ScanState(Enum):
    SCANNING_PRIMARY = "scanning_primary"
    SCANNING_ACTION = "scanning_action"


class _Assembler:
    """Owns the builders for one parse. Not reusable."""

    def __init__(self) -> None:
        self.entry = EntryBuilder()
        self.actions: list[ActionBuilder] = []
        self.state = ScanState.SCANNING_PRIMARY
        self.cursor = -1
        self.seen_group = False
        self.seen_primary = False

    # ── Headers ──

    def on_header(self, line: RawLine) -> None:
        header = parse_header(line)
        first_group = not self.seen_group
        self.seen_group = True

        if header.kind is HeaderKind.OTHER:
            _log.debug("line %d: ignoring group [%s]", line.number, header.name)
            return

        if header.kind is HeaderKind.PRIMARY:
            self._open_primary(line, first_group)
        else:
            self._open_action(line, header, first_group)

    def _open_primary(self, line: RawLine, first_group: bool) -> None:
        if self.state is ScanState.SCANNING_ACTION or self.seen_primary:
            raise RepetitiveEntryError("only one [Desktop Entry] group is allowed", line.number, 0)
        if not first_group:
            raise RepetitiveEntryError("[Desktop Entry] must be the first group", line.number, 0)
        self.seen_primary = True

    def _open_action(self, line: RawLine, header: Header, first_group: bool) -> None:
        if self.state is ScanState.SCANNING_PRIMARY:
            if first_group:
                raise EntryFormatError("the first group must be [Desktop Entry]", line.number, 0)
            if not self.seen_primary:
                raise EntryFormatError(
                    "an action group cannot appear before [Desktop Entry]", line.number, 0
                )
        if any(action.ref_name == header.name for action in self.actions):
            raise RepetitiveEntryError(f"duplicate action group {header.name!r}", line.number, 0)

        self.actions.append(ActionBuilder(ref_name=header.name))
        self.state = ScanState.SCANNING_ACTION
        self.cursor = len(self.actions) - 1
        _log.debug("line %d: opened action %r", line.number, header.name)

    # ── Key/value lines ──

    def on_key_value(self, line: RawLine) -> None:
        record = tokenize(line)
        if self.state is ScanState.SCANNING_PRIMARY:
            known = apply_record(self.entry, record, ENTRY_KEYS)
        else:
            if not 0 <= self.cursor < len(self.actions):
                raise InternalParseError("action cursor out of range", line.number, 0)
            known = apply_record(self.actions[self.cursor], record, ACTION_KEYS)
        if not known:
            _log.debug("line %d: ignoring unknown key %r", line.number, record.key)

    def feed(self, line: RawLine) -> None:
        if line.line_type is LineType.HEADER:
            self.on_header(line)
        else:
            self.on_key_value(line)

    def finish(self) -> DesktopFile:
        validate(self.entry, self.actions)
        try:
            entry = self.entry.freeze()
            actions = {action.ref_name: action.freeze() for action in self.actions}
        except ValueError as e:
            raise InternalParseError(f"validated entry could not be built: {e}") from e
        return DesktopFile(entry=entry, actions=actions)


def parse(text: str) -> DesktopFile:
    """Parse the full text of a desktop file.

    Raises a ParseError subclass on the first problem found; nothing is
    returned for a partially valid file.
    """
    assembler = _Assembler()
    for line in split_lines(text):
        assembler.feed(line)
    result = assembler.finish()
    _log.debug(
        "parsed %s entry %r with %d action(s)",
        result.entry.entry_type.type_name,
        result.entry.name.default,
        len(result.actions),
    )
    return result
