#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers and other consumers of the parsed note subclass :class:`NodeVisitor`
and implement one ``visit_*`` method per node type. Nodes dispatch to the
matching method through ``Node.accept``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from orglens.ast.nodes import (
    Code,
    CodeBlock,
    Document,
    Emphasis,
    ErrorBlock,
    Heading,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    Collect every heading title:

        >>> class HeadingCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.titles = []
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_heading(self, node):
        ...         self.titles.append(get_text_content(node.content))
        ...     # remaining visit_* methods return None

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_error_block(self, node: ErrorBlock) -> Any:
        """Visit an ErrorBlock node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass
