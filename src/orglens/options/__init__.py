"""Option dataclasses for orglens parsers and renderers."""

from orglens.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from orglens.options.html import HtmlRendererOptions
from orglens.options.org import LogbookParserOptions, OrgParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "LogbookParserOptions",
    "OrgParserOptions",
]
