#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/parsers/org.py
"""Org note to AST converter.

This module turns the text of an Org note into the orglens AST. Parsing runs
in two stages:

1. :class:`~orglens.parsers.metadata.MetadataExtractor` removes ``#+``
   directives and the properties drawer and collects their values.
2. :class:`BlockParser` walks the remaining body line by line and emits
   headings, paragraphs, lists, source blocks and horizontal rules, handing
   the text of each line to :func:`~orglens.parsers.inline.parse_inline`.

Only the subset of Org that notes in practice use is recognized; anything
else becomes a paragraph. Every non-blank line outside a list or source block
is its own paragraph, lines are never merged.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from orglens.ast import (
    CodeBlock,
    Document,
    ErrorBlock,
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    SourceLocation,
    ThematicBreak,
)
from orglens.constants import (
    CODE_BLOCK_BEGIN,
    CODE_BLOCK_END,
    HEADING_MARKER_PATTERN,
    HEADING_PREFIX_PATTERN,
    HORIZONTAL_RULE_PATTERN,
    LIST_ITEM_PATTERN,
    LIST_MARKER_PATTERN,
    MAX_HEADING_LEVEL,
    ORDERED_LIST_PATTERN,
)
from orglens.exceptions import OrgLensError, ParsingError
from orglens.options.org import OrgParserOptions
from orglens.parsers.base import BaseParser, TextInput, load_text_content
from orglens.parsers.inline import parse_inline
from orglens.parsers.metadata import MetadataExtractor
from orglens.utils.metadata import DocumentMetadata

logger = logging.getLogger(__name__)


@dataclass
class _BlockScan:
    """Mutable state of one BlockParser pass."""

    blocks: list[Node] = field(default_factory=list)
    list_items: list[ListItem] = field(default_factory=list)
    list_ordered: bool = False
    list_line: Optional[int] = None
    # Not None while inside a source block
    code_lines: Optional[list[str]] = None
    code_language: Optional[str] = None
    code_line: Optional[int] = None

    @property
    def in_code_block(self) -> bool:
        return self.code_lines is not None

    def add_list_item(self, item: ListItem, ordered: bool, line_number: int) -> None:
        if not self.list_items:
            self.list_ordered = ordered
            self.list_line = line_number
        self.list_items.append(item)

    def flush_list(self) -> None:
        if not self.list_items:
            return
        self.blocks.append(
            List(
                items=tuple(self.list_items),
                ordered=self.list_ordered,
                source_location=SourceLocation(line=self.list_line),
            )
        )
        self.list_items = []
        self.list_ordered = False
        self.list_line = None

    def open_code_block(self, language: Optional[str], line_number: int) -> None:
        self.code_lines = []
        self.code_language = language
        self.code_line = line_number

    def flush_code_block(self) -> None:
        if self.code_lines is None:
            return
        self.blocks.append(
            CodeBlock(
                content="\n".join(self.code_lines),
                language=self.code_language,
                source_location=SourceLocation(line=self.code_line),
            )
        )
        self.code_lines = None
        self.code_language = None
        self.code_line = None


def _code_block_language(trimmed: str) -> Optional[str]:
    """Return the language tag of a ``#+BEGIN_SRC`` line (header arguments are ignored)."""
    rest = trimmed[len(CODE_BLOCK_BEGIN) :].split()
    return rest[0] if rest else None


def _is_code_block_begin(trimmed: str) -> bool:
    return trimmed == CODE_BLOCK_BEGIN or (
        trimmed.startswith(CODE_BLOCK_BEGIN) and trimmed[len(CODE_BLOCK_BEGIN)].isspace()
    )


class BlockParser:
    """Line-oriented parser producing block nodes from a metadata-free body.

    Each line is checked in a fixed order: source block handling, heading,
    list item, horizontal rule, blank line, and finally paragraph.

    Parameters
    ----------
    max_heading_level : int, default 6
        Deepest heading level produced

    """

    def __init__(self, max_heading_level: int = MAX_HEADING_LEVEL):
        """Initialize the block parser."""
        self.max_heading_level = max_heading_level

    def parse(self, body: str) -> list[Node]:
        """Parse the body into block nodes.

        Parameters
        ----------
        body : str
            Note text with metadata lines already removed

        Returns
        -------
        list of Node
            Block nodes in document order

        """
        scan = _BlockScan()
        for line_number, line in enumerate(body.split("\n"), start=1):
            self._process_line(scan, line, line_number)

        scan.flush_list()
        if scan.in_code_block:
            logger.debug("Source block opened on line %s was never closed", scan.code_line)
        scan.flush_code_block()
        return scan.blocks

    def _process_line(self, scan: _BlockScan, line: str, line_number: int) -> None:
        trimmed = line.strip()

        if scan.in_code_block:
            if trimmed == CODE_BLOCK_END:
                scan.flush_code_block()
            else:
                assert scan.code_lines is not None
                scan.code_lines.append(line)
            return

        if _is_code_block_begin(trimmed):
            scan.flush_list()
            scan.open_code_block(_code_block_language(trimmed), line_number)
            return

        location = SourceLocation(line=line_number)

        marker = HEADING_MARKER_PATTERN.match(line)
        if marker:
            scan.flush_list()
            level = min(len(marker.group(0)), self.max_heading_level)
            text = HEADING_PREFIX_PATTERN.sub("", line, count=1).rstrip()
            scan.blocks.append(Heading(level=level, content=parse_inline(text), source_location=location))
            return

        if LIST_ITEM_PATTERN.match(trimmed):
            text = LIST_MARKER_PATTERN.sub("", trimmed, count=1)
            scan.add_list_item(
                ListItem(content=parse_inline(text), source_location=location),
                ordered=bool(ORDERED_LIST_PATTERN.match(trimmed)),
                line_number=line_number,
            )
            return

        if HORIZONTAL_RULE_PATTERN.match(trimmed):
            scan.flush_list()
            scan.blocks.append(ThematicBreak(source_location=location))
            return

        scan.flush_list()
        if trimmed:
            scan.blocks.append(Paragraph(content=parse_inline(trimmed), source_location=location))


class OrgParser(BaseParser):
    r"""Convert an Org note to an AST Document.

    Parameters
    ----------
    options : OrgParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = OrgParser()
        >>> doc = parser.parse("#+title: Notes\n* Heading\nThis is *bold*.")
        >>> doc.metadata.title
        'Notes'
        >>> [type(block).__name__ for block in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: OrgParserOptions | None = None):
        """Initialize the Org parser with options."""
        BaseParser._validate_options_type(options, OrgParserOptions, "org")
        options = options or OrgParserOptions()
        super().__init__(options)
        self.options: OrgParserOptions = options

    def parse(self, input_data: TextInput) -> Document:
        """Parse an Org note into an AST Document.

        Parameters
        ----------
        input_data : str or bytes
            Note text

        Returns
        -------
        Document
            Document holding the block nodes and the note metadata

        Raises
        ------
        ValidationError
            If the input is neither str nor bytes
        ParsingError
            If an unexpected error occurs while parsing

        """
        text = load_text_content(input_data)

        stage = "metadata"
        try:
            extractor = MetadataExtractor(extract_planning=self.options.extract_planning)
            metadata, body = extractor.extract(text)
            if not self.options.extract_metadata:
                metadata = DocumentMetadata()

            stage = "blocks"
            blocks = BlockParser(max_heading_level=self.options.max_heading_level).parse(body)
        except Exception as e:
            raise ParsingError(f"Failed to parse Org note: {e}", parsing_stage=stage, original_error=e) from e

        return Document(children=tuple(blocks), metadata=metadata)


def parse_document(raw: TextInput, options: OrgParserOptions | None = None) -> Document:
    """Parse an Org note into a Document.

    Parameters
    ----------
    raw : str or bytes
        Note text
    options : OrgParserOptions, optional
        Parser configuration

    Returns
    -------
    Document
        Parsed document

    Raises
    ------
    ParsingError
        If parsing fails unexpectedly

    """
    return OrgParser(options).parse(raw)


def safe_parse_document(raw: TextInput, options: OrgParserOptions | None = None) -> Document:
    """Parse an Org note for display, never raising.

    This is the boundary used by rendering code. On success it returns the
    same Document as :func:`parse_document`. On any orglens error it returns
    a Document with empty metadata whose only child is an :class:`ErrorBlock`
    carrying the error message, so callers never see partial output mixed
    with an error.

    Parameters
    ----------
    raw : str or bytes
        Note text
    options : OrgParserOptions, optional
        Parser configuration

    Returns
    -------
    Document
        Parsed document, or a single-ErrorBlock document on failure

    """
    try:
        return parse_document(raw, options)
    except OrgLensError as e:
        logger.warning("Could not parse note, rendering error block instead: %s", e)
        return Document(children=(ErrorBlock(message=str(e)),))
