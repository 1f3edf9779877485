#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/renderers/html.py
"""HTML rendering from the orglens AST.

This module provides the HtmlRenderer class which converts a parsed note
into an HTML fragment. It only decides markup: every block and inline node
maps to one semantic element, and the ``css_class_map`` option attaches extra
classes per node type so that styling stays with the host application.

"""

from __future__ import annotations

from html import escape as _html_escape
from typing import Iterable

from orglens.ast import (
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
    NodeVisitor,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from orglens.exceptions import RenderingError
from orglens.options.html import HtmlRendererOptions
from orglens.renderers.base import BaseRenderer
from orglens.utils.security import sanitize_url


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from orglens.ast import Document, Heading, Text
        >>> doc = Document(children=(Heading(level=1, content=(Text(content="Title"),)),))
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML text

        Raises
        ------
        RenderingError
            If a node cannot be rendered

        """
        self._output = []
        try:
            doc.accept(self)
        except Exception as e:
            raise RenderingError(f"Failed to render HTML: {e!r}", rendering_stage="rendering", original_error=e) from e
        return "".join(self._output)

    def _escape(self, text: str) -> str:
        if not self.options.escape_html:
            return text
        return _html_escape(text)

    def _get_custom_css_class(self, node_type: str, *extra: str) -> str:
        """Build a class attribute from ``extra`` classes and the css_class_map entry for ``node_type``.

        Returns
        -------
        str
            Class attribute string (e.g. ``' class="note-heading"'``) or empty string

        """
        classes = [c for c in extra if c]
        custom = self.options.css_class_map.get(node_type) if self.options.css_class_map else None
        if custom:
            classes.append(custom)
        if not classes:
            return ""
        return f' class="{self._escape(" ".join(classes))}"'

    def _render_inline_content(self, nodes: Iterable[Node]) -> str:
        saved_output = self._output
        self._output = []
        for node in nodes:
            node.accept(self)
        content = "".join(self._output)
        self._output = saved_output
        return content

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Parameters
        ----------
        node : Document
            Document to render

        """
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        content = self._render_inline_content(node.content)
        css_class = self._get_custom_css_class("Heading")
        self._output.append(f"<h{node.level}{css_class}>{content}</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        content = self._render_inline_content(node.content)
        css_class = self._get_custom_css_class("Paragraph")
        self._output.append(f"<p{css_class}>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The block content is emitted verbatim apart from HTML escaping.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        language_class = f"{self.options.language_class_prefix}{node.language}" if node.language else ""
        code_class = self._get_custom_css_class("CodeBlock", language_class)
        pre_class = self._get_custom_css_class("CodeBlock_pre")
        self._output.append(f"<pre{pre_class}><code{code_class}>{self._escape(node.content)}</code></pre>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        tag = "ol" if node.ordered else "ul"
        css_class = self._get_custom_css_class("List")
        self._output.append(f"<{tag}{css_class}>\n")
        for item in node.items:
            item.accept(self)
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Parameters
        ----------
        node : ListItem
            List item to render

        """
        content = self._render_inline_content(node.content)
        css_class = self._get_custom_css_class("ListItem")
        self._output.append(f"<li{css_class}>{content}</li>\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as ``<hr>``."""
        css_class = self._get_custom_css_class("ThematicBreak")
        self._output.append(f"<hr{css_class}>\n")

    def visit_error_block(self, node: ErrorBlock) -> None:
        """Render an ErrorBlock node as a ``<div>`` carrying the error class.

        Parameters
        ----------
        node : ErrorBlock
            Error block to render

        """
        css_class = self._get_custom_css_class("ErrorBlock", self.options.error_css_class)
        self._output.append(f"<div{css_class}>{self._escape(node.message)}</div>\n")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape(node.content))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<strong>{content}</strong>")

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<em>{content}</em>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        css_class = self._get_custom_css_class("Code")
        self._output.append(f"<code{css_class}>{self._escape(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        External links get the configured ``target`` and ``rel`` attributes.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        attrs = [f'href="{self._escape(sanitize_url(node.url))}"']
        if node.external:
            if self.options.external_link_target:
                attrs.append(f'target="{self._escape(self.options.external_link_target)}"')
            if self.options.external_link_rel:
                attrs.append(f'rel="{self._escape(self.options.external_link_rel)}"')
        css_class = self._get_custom_css_class("Link")
        self._output.append(f"<a {' '.join(attrs)}{css_class}>{content}</a>")


def render_html(doc: Document, options: HtmlRendererOptions | None = None) -> str:
    """Render a document to an HTML fragment.

    Parameters
    ----------
    doc : Document
        Parsed document
    options : HtmlRendererOptions, optional
        Rendering options

    Returns
    -------
    str
        HTML fragment

    """
    return HtmlRenderer(options).render_to_string(doc)
