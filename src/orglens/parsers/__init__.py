#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/orglens/parsers/__init__.py
"""Parsers for Org notes and their logbook drawers.

- OrgParser: note text to AST Document (metadata, blocks, inline markup)
- LogbookParser: logbook drawer to clock and state-change entries

The two parsers are independent and may run on the same text.

"""

from orglens.parsers.base import BaseParser
from orglens.parsers.inline import parse_inline
from orglens.parsers.logbook import (
    ClockEntry,
    LogbookEntry,
    LogbookParser,
    StateChangeEntry,
    parse_logbook,
)
from orglens.parsers.metadata import MetadataExtractor, extract_metadata
from orglens.parsers.org import BlockParser, OrgParser, parse_document, safe_parse_document

__all__ = [
    "BaseParser",
    "BlockParser",
    "ClockEntry",
    "LogbookEntry",
    "LogbookParser",
    "MetadataExtractor",
    "OrgParser",
    "StateChangeEntry",
    "extract_metadata",
    "parse_document",
    "parse_inline",
    "parse_logbook",
    "safe_parse_document",
]
