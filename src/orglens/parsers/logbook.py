#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/parsers/logbook.py
"""Logbook drawer extraction.

A logbook drawer records clocked work intervals and TODO state changes::

    :LOGBOOK:
    CLOCK: [2024-01-15 Mon 10:00]--[2024-01-15 Mon 12:00] =>  2:00
    - State "DONE"       from "TODO"       [2024-01-15 Mon 12:05] \\\\
      Finished the draft
    :END:

Scanning is driven by a small finite-state machine. Every line is first
classified into a :class:`LineKind` without looking at the scanner state,
then :func:`transition` looks up the ``(state, kind)`` pair in
:data:`TRANSITIONS` and returns the :class:`Action` to perform together with
the next :class:`LogbookState`. Pairs missing from the table leave the state
unchanged and do nothing.

Entries are emitted when the next entry starts, when the drawer closes, or at
end of input for a drawer that was never closed. Lines that are not entries
are attached to the pending entry as note text. A timestamp that cannot be
parsed drops only the line it appears on; the scan continues and the pending
entry keeps collecting notes.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from orglens.constants import (
    CLOCK_LINE_PATTERN,
    CLOCK_PREFIX,
    DRAWER_END,
    NOTE_BULLET,
    STATE_CHANGE_LINE_PATTERN,
    LogbookEntryKind,
)
from orglens.exceptions import DateParseError
from orglens.options.org import LogbookParserOptions
from orglens.parsers.base import TextInput, load_text_content
from orglens.utils.dates import calculate_duration, parse_org_date

logger = logging.getLogger(__name__)


class LogbookState(Enum):
    """Scanner position relative to the logbook drawer."""

    OUTSIDE = "outside"
    INSIDE_NO_PENDING = "inside-no-pending"
    INSIDE_PENDING = "inside-pending"


class LineKind(Enum):
    """Lexical classification of a trimmed input line."""

    DRAWER_OPEN = "drawer-open"
    DRAWER_CLOSE = "drawer-close"
    CLOCK = "clock"
    STATE_CHANGE = "state-change"
    CLOCK_UNMATCHED = "clock-unmatched"
    NOTE = "note"
    BLANK = "blank"
    END_OF_INPUT = "end-of-input"


class Action(Enum):
    """Side effect performed by the scanner on a transition."""

    IGNORE = "ignore"
    OPEN_ENTRY = "open-entry"
    REPLACE_ENTRY = "replace-entry"
    APPEND_NOTE = "append-note"
    FLUSH = "flush"


#: Transition table of the logbook scanner. Pairs not listed map to
#: ``(Action.IGNORE, <same state>)``.
TRANSITIONS: dict[tuple[LogbookState, LineKind], tuple[Action, LogbookState]] = {
    (LogbookState.OUTSIDE, LineKind.DRAWER_OPEN): (Action.IGNORE, LogbookState.INSIDE_NO_PENDING),
    (LogbookState.INSIDE_NO_PENDING, LineKind.CLOCK): (Action.OPEN_ENTRY, LogbookState.INSIDE_PENDING),
    (LogbookState.INSIDE_NO_PENDING, LineKind.STATE_CHANGE): (Action.OPEN_ENTRY, LogbookState.INSIDE_PENDING),
    (LogbookState.INSIDE_NO_PENDING, LineKind.DRAWER_CLOSE): (Action.IGNORE, LogbookState.OUTSIDE),
    (LogbookState.INSIDE_NO_PENDING, LineKind.END_OF_INPUT): (Action.IGNORE, LogbookState.OUTSIDE),
    (LogbookState.INSIDE_PENDING, LineKind.CLOCK): (Action.REPLACE_ENTRY, LogbookState.INSIDE_PENDING),
    (LogbookState.INSIDE_PENDING, LineKind.STATE_CHANGE): (Action.REPLACE_ENTRY, LogbookState.INSIDE_PENDING),
    (LogbookState.INSIDE_PENDING, LineKind.NOTE): (Action.APPEND_NOTE, LogbookState.INSIDE_PENDING),
    (LogbookState.INSIDE_PENDING, LineKind.DRAWER_CLOSE): (Action.FLUSH, LogbookState.OUTSIDE),
    (LogbookState.INSIDE_PENDING, LineKind.END_OF_INPUT): (Action.FLUSH, LogbookState.OUTSIDE),
}


def transition(state: LogbookState, kind: LineKind) -> tuple[Action, LogbookState]:
    """Return the action and next state for a line of ``kind`` seen in ``state``."""
    return TRANSITIONS.get((state, kind), (Action.IGNORE, state))


def classify_line(trimmed: str, open_marker: str = ":LOGBOOK:") -> tuple[LineKind, Optional[re.Match[str]]]:
    """Classify a trimmed line.

    Parameters
    ----------
    trimmed : str
        Line with surrounding whitespace removed
    open_marker : str, default ":LOGBOOK:"
        Line that opens the drawer

    Returns
    -------
    tuple of (LineKind, re.Match or None)
        The line kind and, for CLOCK and STATE_CHANGE lines, the pattern match

    """
    if trimmed == open_marker:
        return LineKind.DRAWER_OPEN, None
    if trimmed == DRAWER_END:
        return LineKind.DRAWER_CLOSE, None
    if not trimmed:
        return LineKind.BLANK, None

    clock = CLOCK_LINE_PATTERN.match(trimmed)
    if clock:
        return LineKind.CLOCK, clock

    state_change = STATE_CHANGE_LINE_PATTERN.match(trimmed)
    if state_change:
        return LineKind.STATE_CHANGE, state_change

    if trimmed.startswith(CLOCK_PREFIX):
        return LineKind.CLOCK_UNMATCHED, None
    return LineKind.NOTE, None


class LogbookEntry(ABC):
    """Base class for entries extracted from a logbook drawer."""

    kind: ClassVar[LogbookEntryKind]
    note: Optional[str]
    original_text: str

    @property
    @abstractmethod
    def timestamp(self) -> datetime:
        """When the entry happened (clock start or state-change date)."""
        pass

    def with_note(self, text: str) -> LogbookEntry:
        """Return a copy with ``text`` appended to the note, space-separated."""
        note = f"{self.note} {text}" if self.note else text
        return replace(self, note=note)  # type: ignore[type-var]

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a JSON-friendly dictionary."""
        pass


@dataclass(frozen=True)
class ClockEntry(LogbookEntry):
    """A clocked work interval.

    Parameters
    ----------
    start : datetime
        When the clock started
    end : datetime or None
        When the clock stopped; None while the clock is still running
    note : str or None
        Duration annotation and any note lines that followed the entry
    original_text : str
        The CLOCK line as it appeared in the drawer

    """

    kind: ClassVar[LogbookEntryKind] = "clock"

    start: datetime
    end: Optional[datetime] = None
    note: Optional[str] = None
    original_text: str = ""

    @property
    def timestamp(self) -> datetime:
        return self.start

    @property
    def is_running(self) -> bool:
        return self.end is None

    def duration(self, now: Optional[datetime] = None) -> str:
        """Elapsed time of the interval, measured up to ``now`` while running."""
        return calculate_duration(self.start, self.end, now=now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "start": self.start.isoformat(),
            "end": self.end.isoformat() if self.end else None,
            "note": self.note,
            "original_text": self.original_text,
        }


@dataclass(frozen=True)
class StateChangeEntry(LogbookEntry):
    """A TODO state transition.

    Parameters
    ----------
    to_state : str
        State the item moved to
    date : datetime
        When the change happened
    from_state : str or None
        Previous state; None when the item had no state before
    note : str or None
        Note lines that followed the entry
    original_text : str
        The State line as it appeared in the drawer

    """

    kind: ClassVar[LogbookEntryKind] = "state-change"

    to_state: str
    date: datetime
    from_state: Optional[str] = None
    note: Optional[str] = None
    original_text: str = ""

    @property
    def timestamp(self) -> datetime:
        return self.date

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "to_state": self.to_state,
            "from_state": self.from_state,
            "date": self.date.isoformat(),
            "note": self.note,
            "original_text": self.original_text,
        }


AnyLogbookEntry = Union[ClockEntry, StateChangeEntry]


def _build_entry(kind: LineKind, match: re.Match[str], trimmed: str) -> AnyLogbookEntry:
    """Create the entry for a CLOCK or STATE_CHANGE line.

    Raises
    ------
    DateParseError
        If a timestamp on the line cannot be parsed

    """
    if kind is LineKind.CLOCK:
        end_text = match.group("end")
        duration = match.group("duration")
        return ClockEntry(
            start=parse_org_date(match.group("start")),
            end=parse_org_date(end_text) if end_text else None,
            note=f"Duration: {duration.strip()}" if duration else None,
            original_text=trimmed,
        )

    date_text = match.group("bracketed") or match.group("bare")
    return StateChangeEntry(
        to_state=match.group("to"),
        date=parse_org_date(date_text),
        from_state=match.group("from") or None,
        original_text=trimmed,
    )


def _note_text(trimmed: str) -> str:
    return trimmed[len(NOTE_BULLET) :] if trimmed.startswith(NOTE_BULLET) else trimmed


class LogbookParser:
    """Extract clock and state-change entries from logbook drawers.

    Parameters
    ----------
    options : LogbookParserOptions or None, default = None
        Drawer name and result ordering

    Examples
    --------
        >>> text = ':LOGBOOK:\\nCLOCK: [2024-01-15 Mon 10:00]--[2024-01-15 Mon 11:30] =>  1:30\\n:END:'
        >>> [entry.note for entry in LogbookParser().parse(text)]
        ['Duration: 1:30']

    """

    def __init__(self, options: LogbookParserOptions | None = None):
        """Initialize the logbook parser."""
        self.options = options or LogbookParserOptions()

    def parse(self, raw: TextInput) -> list[AnyLogbookEntry]:
        """Scan the text for logbook drawers and return their entries.

        Every drawer in the text contributes entries; text outside drawers
        is ignored.

        Parameters
        ----------
        raw : str or bytes
            Note text, with or without a logbook drawer

        Returns
        -------
        list of ClockEntry or StateChangeEntry
            Entries, most recent first unless ``most_recent_first`` is False.
            Empty when the text has no drawer or the drawer has no entries.

        """
        text = load_text_content(raw)
        open_marker = self.options.open_marker

        entries: list[AnyLogbookEntry] = []
        pending: Optional[AnyLogbookEntry] = None
        state = LogbookState.OUTSIDE

        for line in text.split("\n"):
            trimmed = line.strip()
            kind, match = classify_line(trimmed, open_marker)
            action, next_state = transition(state, kind)

            if action in (Action.OPEN_ENTRY, Action.REPLACE_ENTRY):
                assert match is not None
                try:
                    entry = _build_entry(kind, match, trimmed)
                except DateParseError as e:
                    logger.warning("Skipping logbook line with unparseable date %r: %s", trimmed, e)
                    continue
                if pending is not None:
                    entries.append(pending)
                pending = entry
            elif action is Action.APPEND_NOTE:
                assert pending is not None
                pending = pending.with_note(_note_text(trimmed))  # type: ignore[assignment]
            elif action is Action.FLUSH:
                assert pending is not None
                entries.append(pending)
                pending = None

            state = next_state

        action, state = transition(state, LineKind.END_OF_INPUT)
        if action is Action.FLUSH and pending is not None:
            logger.debug("Logbook drawer was not closed, keeping its last entry")
            entries.append(pending)

        if self.options.most_recent_first:
            entries.reverse()
        return entries


def parse_logbook(raw: TextInput, options: LogbookParserOptions | None = None) -> list[AnyLogbookEntry]:
    """Extract logbook entries from a note.

    Malformed drawers and unparseable timestamps never raise; the affected
    lines are skipped.

    Parameters
    ----------
    raw : str or bytes
        Note text
    options : LogbookParserOptions, optional
        Drawer name and result ordering

    Returns
    -------
    list of ClockEntry or StateChangeEntry
        Logbook entries, most recent first by default

    """
    return LogbookParser(options).parse(raw)
