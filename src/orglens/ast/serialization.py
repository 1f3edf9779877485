#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/ast/serialization.py
"""JSON serialization for AST nodes and logbook entries.

Every node becomes a dictionary with a ``node_type`` key naming its class,
followed by the node's own fields. Documents carry their metadata under
``metadata`` and block nodes carry their ``source_location`` when known.

Examples
--------
    >>> from orglens.ast import Document, Heading, Text
    >>> doc = Document(children=(Heading(level=1, content=(Text(content="Title"),)),))
    >>> ast_to_dict(doc.children[0])["level"]
    1

"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable

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
)

SCHEMA_VERSION = 1


def _add_source(result: dict[str, Any], node: Node) -> None:
    location = getattr(node, "source_location", None)
    if location is not None:
        result["source_location"] = ast_to_dict(location)


def _serialize_source_location(node: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "SourceLocation", "format": node.format}
    if node.line is not None:
        result["line"] = node.line
    return result


def _serialize_nodes(nodes: Iterable[Node]) -> list[dict[str, Any]]:
    return [ast_to_dict(child) for child in nodes]


def _serialize_document(node: Document) -> dict[str, Any]:
    """Serialize a Document, including its metadata."""
    return {
        "node_type": "Document",
        "metadata": node.metadata.to_dict(),
        "children": _serialize_nodes(node.children),
    }


def _serialize_inline_content_node(node: Node, node_type: str) -> dict[str, Any]:
    """Serialize nodes whose ``content`` is a tuple of inline nodes.

    Parameters
    ----------
    node : Node
        Node with an inline ``content`` tuple
    node_type : str
        Type name for the node

    Returns
    -------
    dict
        Serialized node

    """
    result: dict[str, Any] = {
        "node_type": node_type,
        "content": _serialize_nodes(node.content),  # type: ignore[attr-defined]
    }
    _add_source(result, node)
    return result


def _serialize_heading(node: Heading) -> dict[str, Any]:
    result = _serialize_inline_content_node(node, "Heading")
    result["level"] = node.level
    return result


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "CodeBlock", "content": node.content, "language": node.language}
    _add_source(result, node)
    return result


def _serialize_list(node: List) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "List",
        "ordered": node.ordered,
        "items": _serialize_nodes(node.items),
    }
    _add_source(result, node)
    return result


def _serialize_thematic_break(node: ThematicBreak) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "ThematicBreak"}
    _add_source(result, node)
    return result


def _serialize_link(node: Link) -> dict[str, Any]:
    return {
        "node_type": "Link",
        "url": node.url,
        "external": node.external,
        "content": _serialize_nodes(node.content),
    }


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    SourceLocation: _serialize_source_location,
    Document: _serialize_document,
    Heading: _serialize_heading,
    Paragraph: lambda n: _serialize_inline_content_node(n, "Paragraph"),
    CodeBlock: _serialize_code_block,
    List: _serialize_list,
    ListItem: lambda n: _serialize_inline_content_node(n, "ListItem"),
    ThematicBreak: _serialize_thematic_break,
    ErrorBlock: lambda n: {"node_type": "ErrorBlock", "message": n.message},
    Text: lambda n: {"node_type": "Text", "content": n.content},
    Strong: lambda n: {"node_type": "Strong", "content": _serialize_nodes(n.content)},
    Emphasis: lambda n: {"node_type": "Emphasis", "content": _serialize_nodes(n.content)},
    Code: lambda n: {"node_type": "Code", "content": n.content},
    Link: _serialize_link,
}


def ast_to_dict(node: Node | SourceLocation) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node or SourceLocation
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type is not known

    Examples
    --------
    >>> from orglens.ast import Text
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def logbook_to_dicts(entries: Iterable[Any]) -> list[dict[str, Any]]:
    """Convert logbook entries to dictionaries, keeping their order."""
    return [entry.to_dict() for entry in entries]


def logbook_to_json(entries: Iterable[Any], indent: int | None = None) -> str:
    """Serialize logbook entries to a JSON document.

    Parameters
    ----------
    entries : iterable of ClockEntry or StateChangeEntry
        Entries as returned by :func:`orglens.parsers.logbook.parse_logbook`
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "entries": [...]}``

    """
    payload = {"schema_version": SCHEMA_VERSION, "entries": logbook_to_dicts(entries)}
    return json.dumps(payload, indent=indent, ensure_ascii=False)


__all__ = [
    "SCHEMA_VERSION",
    "ast_to_dict",
    "ast_to_json",
    "logbook_to_dicts",
    "logbook_to_json",
]
