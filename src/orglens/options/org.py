#  Copyright (c) 2025 Tom Villani, Ph.D.

# orglens/options/org.py
"""Configuration options for Org note and logbook parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from orglens.constants import (
    DEFAULT_EXTRACT_PLANNING,
    DEFAULT_LOGBOOK_DRAWER,
    DEFAULT_LOGBOOK_MOST_RECENT_FIRST,
    DEFAULT_MAX_HEADING_LEVEL,
    MAX_HEADING_LEVEL,
)
from orglens.options.base import BaseParserOptions, CloneFrozenMixin


@dataclass(frozen=True)
class OrgParserOptions(BaseParserOptions):
    """Configuration options for Org-to-AST parsing.

    Parameters
    ----------
    max_heading_level : int, default 6
        Deepest heading level produced; lines with more leading ``*`` are
        clamped to this level. Must be between 1 and 6.
    extract_planning : bool, default True
        Whether ``SCHEDULED:`` / ``DEADLINE:`` timestamps are copied into
        the document metadata. The planning lines stay in the body.

    Examples
    --------
        >>> options = OrgParserOptions(max_heading_level=3)
        >>> parser = OrgParser(options)

    """

    max_heading_level: int = field(
        default=DEFAULT_MAX_HEADING_LEVEL,
        metadata={"help": "Deepest heading level produced (1-6)", "type": int, "importance": "advanced"},
    )
    extract_planning: bool = field(
        default=DEFAULT_EXTRACT_PLANNING,
        metadata={
            "help": "Copy SCHEDULED/DEADLINE timestamps into metadata",
            "cli_name": "no-extract-planning",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate the heading level range.

        Raises
        ------
        ValueError
            If ``max_heading_level`` is outside 1-6.

        """
        if not 1 <= self.max_heading_level <= MAX_HEADING_LEVEL:
            raise ValueError(f"max_heading_level must be 1-{MAX_HEADING_LEVEL}, got {self.max_heading_level}")


@dataclass(frozen=True)
class LogbookParserOptions(CloneFrozenMixin):
    """Configuration options for logbook drawer extraction.

    Parameters
    ----------
    drawer_name : str, default "LOGBOOK"
        Name of the drawer to scan, without colons
    most_recent_first : bool, default True
        Return entries newest-first (the reverse of their order in the drawer)

    """

    drawer_name: str = field(
        default=DEFAULT_LOGBOOK_DRAWER,
        metadata={"help": "Drawer to scan for CLOCK and State lines", "importance": "advanced"},
    )
    most_recent_first: bool = field(
        default=DEFAULT_LOGBOOK_MOST_RECENT_FIRST,
        metadata={
            "help": "Return entries newest-first",
            "cli_name": "oldest-first",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate the drawer name.

        Raises
        ------
        ValueError
            If ``drawer_name`` is empty or contains colons or whitespace.

        """
        name = self.drawer_name
        if not name or ":" in name or any(ch.isspace() for ch in name):
            raise ValueError(f"drawer_name must be a bare drawer name like 'LOGBOOK', got {name!r}")

    @property
    def open_marker(self) -> str:
        """Line that opens the drawer, e.g. ``:LOGBOOK:``."""
        return f":{self.drawer_name}:"
