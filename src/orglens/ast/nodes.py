#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/ast/nodes.py
"""AST node classes for parsed Org notes.

This module defines the node hierarchy produced by the Org parser. Each node
represents a structural or inline element of a note. All nodes are frozen
dataclasses holding tuples of children.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock
    - List, ListItem, ThematicBreak
    - ErrorBlock (the single node of a document that failed to parse)

Inline nodes represent text formatting:
    - Text, Strong, Emphasis, Code, Link

Inline nodes never nest: Strong and Emphasis always wrap exactly one Text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from orglens.constants import MAX_HEADING_LEVEL
from orglens.utils.metadata import DocumentMetadata


@dataclass(frozen=True)
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format, always ``"org"`` for nodes built by this package
    line : int or None, default = None
        1-based line number in the metadata-free body the node started on

    """

    format: str = "org"
    line: Optional[int] = None


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root node of a parsed note.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block-level nodes in document order
    metadata : DocumentMetadata
        Metadata collected from directives and the properties drawer

    """

    children: tuple[Node, ...] = ()
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)

    @property
    def blocks(self) -> tuple[Node, ...]:
        """Block-level nodes of the document (alias of ``children``)."""
        return self.children

    @property
    def error(self) -> Optional[str]:
        """Error message when this document is a parse-failure artifact, else None."""
        if len(self.children) == 1 and isinstance(self.children[0], ErrorBlock):
            return self.children[0].message
        return None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6), the number of leading ``*`` capped at 6
    content : tuple of Node, default = ()
        Inline nodes representing heading text
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: tuple[Node, ...] = ()
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-{MAX_HEADING_LEVEL}, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node holding the inline content of one physical line.

    Parameters
    ----------
    content : tuple of Node, default = ()
        Inline nodes representing paragraph content
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: tuple[Node, ...] = ()
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Source block captured verbatim between ``#+BEGIN_SRC`` and ``#+END_SRC``.

    Parameters
    ----------
    content : str
        Raw code, lines joined with ``\\n``
    language : str or None, default = None
        Language tag following ``#+BEGIN_SRC``
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class ListItem(Node):
    """A single list item with its marker removed.

    Parameters
    ----------
    content : tuple of Node, default = ()
        Inline nodes of the item text
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: tuple[Node, ...] = ()
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class List(Node):
    """A run of contiguous ``- `` or ``N. `` lines.

    Parameters
    ----------
    items : tuple of ListItem, default = ()
        Items in source order
    ordered : bool, default = False
        True when the first item used a numeric marker
    source_location : SourceLocation or None, default = None
        Location of the first item

    """

    items: tuple[ListItem, ...] = ()
    ordered: bool = False
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Horizontal rule written as three or more hyphens."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this horizontal rule."""
        return visitor.visit_thematic_break(self)


@dataclass(frozen=True)
class ErrorBlock(Node):
    """Stand-in block for a document that could not be parsed.

    Parameters
    ----------
    message : str
        Message of the underlying failure

    """

    message: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this error block."""
        return visitor.visit_error_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Literal text."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Strong(Node):
    """Bold span written as ``*text*``."""

    content: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong span."""
        return visitor.visit_strong(self)


@dataclass(frozen=True)
class Emphasis(Node):
    """Italic span written as ``/text/``."""

    content: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis span."""
        return visitor.visit_emphasis(self)


@dataclass(frozen=True)
class Code(Node):
    """Inline code written as ``=text=``."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self)


@dataclass(frozen=True)
class Link(Node):
    """Link written as ``[[url][label]]`` or ``[[url]]``.

    Parameters
    ----------
    url : str
        Link target
    content : tuple of Node, default = ()
        Label text; the URL itself when no label was given
    external : bool, default = False
        True when the target starts with ``http`` and should open in a new context

    """

    url: str
    content: tuple[Node, ...] = ()
    external: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


def get_text_content(nodes: tuple[Node, ...] | list[Node]) -> str:
    """Concatenate the literal text of a sequence of inline nodes.

    Parameters
    ----------
    nodes : sequence of Node
        Inline nodes

    Returns
    -------
    str
        Plain text with markup removed

    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (Text, Code)):
            parts.append(node.content)
        elif isinstance(node, (Strong, Emphasis, Link)):
            parts.append(get_text_content(node.content))
    return "".join(parts)
