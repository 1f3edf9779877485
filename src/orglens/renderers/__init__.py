#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/orglens/renderers/__init__.py
"""AST renderers for parsed Org notes.

Available renderers:
- HtmlRenderer: Render to an HTML fragment

Examples
--------
    >>> from orglens import parse_document
    >>> from orglens.renderers import HtmlRenderer
    >>> HtmlRenderer().render_to_string(parse_document("Some /italic/ text"))
    '<p>Some <em>italic</em> text</p>\\n'

"""

from orglens.renderers.base import BaseRenderer
from orglens.renderers.html import HtmlRenderer, render_html

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "render_html",
]
