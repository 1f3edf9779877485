"""orglens - parse Org-mode notes into a renderable document tree.

orglens reads the subset of Org markup that personal notes use and turns it
into an immutable AST: document metadata from ``#+`` directives and the
``:PROPERTIES:`` drawer, block structure (headings, paragraphs, lists, source
blocks, rules) and inline markup (bold, italic, code, links). A separate
parser extracts clock intervals and TODO state changes from ``:LOGBOOK:``
drawers.

Examples
--------
Parse a note and render it:

    >>> from orglens import parse_document
    >>> from orglens.renderers import HtmlRenderer
    >>> doc = parse_document("#+title: Ideas\\n* Next steps\\n- write /more/ tests")
    >>> doc.metadata.title
    'Ideas'
    >>> html = HtmlRenderer().render_to_string(doc)

Read the logbook of the same note:

    >>> from orglens import parse_logbook
    >>> entries = parse_logbook(note_text)

"""

from __future__ import annotations

from orglens.ast import Document
from orglens.exceptions import (
    DateParseError,
    InvalidOptionsError,
    OrgLensError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from orglens.options import HtmlRendererOptions, LogbookParserOptions, OrgParserOptions
from orglens.parsers import (
    ClockEntry,
    LogbookParser,
    OrgParser,
    StateChangeEntry,
    parse_document,
    parse_logbook,
    safe_parse_document,
)
from orglens.renderers import HtmlRenderer, render_html
from orglens.utils.dates import format_logbook_date, parse_org_date
from orglens.utils.metadata import DocumentMetadata

__version__ = "0.1.0"

__all__ = [
    "ClockEntry",
    "DateParseError",
    "Document",
    "DocumentMetadata",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "LogbookParser",
    "LogbookParserOptions",
    "OrgLensError",
    "OrgParser",
    "OrgParserOptions",
    "ParsingError",
    "RenderingError",
    "StateChangeEntry",
    "ValidationError",
    "format_logbook_date",
    "parse_document",
    "parse_logbook",
    "parse_org_date",
    "render_html",
    "safe_parse_document",
    "__version__",
]
