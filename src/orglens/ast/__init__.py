#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed Org notes.

The parsers in :mod:`orglens.parsers` produce the nodes defined here, and the
renderers in :mod:`orglens.renderers` consume them through the visitor
pattern. The module consists of:

- nodes: immutable AST node classes
- visitors: the :class:`NodeVisitor` base class
- serialization: conversion of nodes to dictionaries and JSON

Examples
--------
    >>> from orglens.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=(
    ...     Heading(level=1, content=(Text(content="Title"),)),
    ...     Paragraph(content=(Text(content="Hello world"),)),
    ... ))
    >>> doc.children[0].level
    1

"""

from __future__ import annotations

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
    Node,
    Paragraph,
    SourceLocation,
    Strong,
    Text,
    ThematicBreak,
    get_text_content,
)
from orglens.ast.visitors import NodeVisitor

__all__ = [
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "ErrorBlock",
    "Heading",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strong",
    "Text",
    "ThematicBreak",
    "get_text_content",
]
