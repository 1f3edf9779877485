#  Copyright (c) 2025 Tom Villani, Ph.D.

# orglens/options/html.py
"""Configuration options for HTML rendering of parsed notes."""

from __future__ import annotations

from dataclasses import dataclass, field

from orglens.constants import (
    DEFAULT_ERROR_CSS_CLASS,
    DEFAULT_EXTERNAL_LINK_REL,
    DEFAULT_EXTERNAL_LINK_TARGET,
    DEFAULT_HTML_ESCAPE,
    DEFAULT_HTML_LANGUAGE_CLASS_PREFIX,
)
from orglens.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-HTML rendering.

    Parameters
    ----------
    escape_html : bool, default True
        Escape text, code and attribute values
    language_class_prefix : str, default "language-"
        Prefix for the class attribute added to ``<code>`` inside code blocks
    external_link_target : str or None, default "_blank"
        ``target`` attribute for links flagged as external; None omits it
    external_link_rel : str or None, default "noopener noreferrer"
        ``rel`` attribute for links flagged as external; None omits it
    error_css_class : str, default "org-error"
        Class of the ``<div>`` rendered for an ErrorBlock

    """

    escape_html: bool = field(
        default=DEFAULT_HTML_ESCAPE,
        metadata={"help": "Escape text and attribute values", "cli_name": "no-escape-html", "importance": "security"},
    )
    language_class_prefix: str = field(
        default=DEFAULT_HTML_LANGUAGE_CLASS_PREFIX,
        metadata={"help": "Class prefix for code block languages", "importance": "advanced"},
    )
    external_link_target: str | None = field(
        default=DEFAULT_EXTERNAL_LINK_TARGET,
        metadata={"help": "target attribute for external links", "importance": "core"},
    )
    external_link_rel: str | None = field(
        default=DEFAULT_EXTERNAL_LINK_REL,
        metadata={"help": "rel attribute for external links", "importance": "security"},
    )
    error_css_class: str = field(
        default=DEFAULT_ERROR_CSS_CLASS,
        metadata={"help": "CSS class of the parse error block", "importance": "advanced"},
    )
