#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/parsers/metadata.py
"""Document-level metadata extraction for Org notes.

Org notes carry their metadata in ``#+key: value`` directives and in a
``:PROPERTIES:`` drawer near the top of the file. :func:`extract_metadata`
collects those values in a single pass and returns the body with the
metadata lines removed, ready for block parsing.

Notes written by some tools repeat the title or the properties drawer (for
example after a merge). Repeats are dropped silently: the first ``#+title:``
and the first ``:PROPERTIES:`` drawer win, while ``#+category:``,
``#+author:``, ``#+date:`` and ``#+tags:`` keep their last value.

"""

from __future__ import annotations

import logging
from typing import Any

from orglens.constants import (
    AUTHOR_DIRECTIVE,
    CATEGORY_DIRECTIVE,
    CODE_BLOCK_BEGIN,
    CODE_BLOCK_END,
    DATE_DIRECTIVE,
    DEADLINE_PATTERN,
    DIRECTIVE_PREFIX,
    DRAWER_END,
    ID_PROPERTY,
    PROPERTIES_DRAWER_START,
    SCHEDULED_PATTERN,
    TAGS_DIRECTIVE,
    TITLE_DIRECTIVE,
)
from orglens.utils.metadata import DocumentMetadata

logger = logging.getLogger(__name__)

# Directives whose value simply overwrites any earlier occurrence.
_LAST_WINS_DIRECTIVES: tuple[tuple[str, str], ...] = (
    (CATEGORY_DIRECTIVE, "category"),
    (AUTHOR_DIRECTIVE, "author"),
    (DATE_DIRECTIVE, "date"),
)


def _directive_value(trimmed: str, directive: str) -> str:
    return trimmed[len(directive) :].strip()


class MetadataExtractor:
    """Single-pass scanner separating note metadata from the note body.

    Parameters
    ----------
    extract_planning : bool, default True
        Copy ``SCHEDULED:`` / ``DEADLINE:`` timestamps into the metadata

    """

    def __init__(self, extract_planning: bool = True):
        """Initialize the extractor."""
        self.extract_planning = extract_planning

    def extract(self, raw: str) -> tuple[DocumentMetadata, str]:
        """Extract metadata and return the cleaned body.

        Parameters
        ----------
        raw : str
            Full note text

        Returns
        -------
        tuple of (DocumentMetadata, str)
            The collected metadata and the body without metadata lines. Blank
            lines and the order of the remaining lines are preserved.

        """
        values: dict[str, Any] = {}
        cleaned_lines: list[str] = []

        seen_properties = False
        seen_title = False
        in_properties = False

        for line in raw.split("\n"):
            trimmed = line.strip()

            if trimmed == PROPERTIES_DRAWER_START:
                if not seen_properties:
                    seen_properties = True
                    in_properties = True
                continue
            if in_properties:
                if trimmed == DRAWER_END:
                    in_properties = False
                elif trimmed.startswith(ID_PROPERTY):
                    values["id"] = _directive_value(trimmed, ID_PROPERTY)
                continue

            if trimmed.startswith(TITLE_DIRECTIVE):
                if not seen_title:
                    values["title"] = _directive_value(trimmed, TITLE_DIRECTIVE)
                    seen_title = True
                continue

            if trimmed.startswith(TAGS_DIRECTIVE):
                values["tags"] = tuple(_directive_value(trimmed, TAGS_DIRECTIVE).split())
                continue

            matched_directive = False
            for directive, key in _LAST_WINS_DIRECTIVES:
                if trimmed.startswith(directive):
                    values[key] = _directive_value(trimmed, directive)
                    matched_directive = True
                    break
            if matched_directive:
                continue

            if self.extract_planning:
                self._capture_planning(trimmed, values)

            if (
                trimmed.startswith(DIRECTIVE_PREFIX)
                and not trimmed.startswith(CODE_BLOCK_BEGIN)
                and not trimmed.startswith(CODE_BLOCK_END)
            ):
                logger.debug("Dropping unhandled directive line: %s", trimmed)
                continue

            # Leftovers of a repeated properties drawer
            if seen_properties and (trimmed.startswith(ID_PROPERTY) or trimmed == DRAWER_END):
                continue

            cleaned_lines.append(line)

        return DocumentMetadata(**values), "\n".join(cleaned_lines)

    @staticmethod
    def _capture_planning(trimmed: str, values: dict[str, Any]) -> None:
        scheduled = SCHEDULED_PATTERN.search(trimmed)
        if scheduled:
            values["scheduled"] = scheduled.group(1)
        deadline = DEADLINE_PATTERN.search(trimmed)
        if deadline:
            values["deadline"] = deadline.group(1)


def extract_metadata(raw: str, extract_planning: bool = True) -> tuple[DocumentMetadata, str]:
    """Split a note into its metadata and its body.

    Parameters
    ----------
    raw : str
        Full note text
    extract_planning : bool, default True
        Copy ``SCHEDULED:`` / ``DEADLINE:`` timestamps into the metadata

    Returns
    -------
    tuple of (DocumentMetadata, str)
        Metadata and cleaned body

    Examples
    --------
        >>> metadata, body = extract_metadata("#+title: Notes\\n* Intro")
        >>> metadata.title, body
        ('Notes', '* Intro')

    """
    return MetadataExtractor(extract_planning=extract_planning).extract(raw)
