#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/parsers/inline.py
"""Inline markup parsing for a single line of Org text.

Parsing happens in two small steps:

1. :func:`tokenize_inline` scans the line once, left to right. At every
   position it tries the span matchers in :data:`INLINE_MATCHERS` order
   (strong, emphasis, code, link); the first one that matches there claims
   the span and scanning resumes after it. Characters no matcher claims are
   collected into literal text tokens.
2. :func:`build_inline` turns the flat token stream into AST nodes.

The inside of a claimed span is never scanned again, so markup does not nest:
``*a /b/ c*`` is one Strong whose text is ``a /b/ c``. Delimiters without a
partner (a lone ``*``) never match and stay in the literal text.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from orglens.ast.nodes import Code, Emphasis, Link, Node, Strong, Text
from orglens.constants import (
    EMPHASIS_PATTERN,
    EXTERNAL_LINK_PREFIX,
    INLINE_CODE_PATTERN,
    LINK_PATTERN,
    STRONG_PATTERN,
    InlineTokenKind,
)
from orglens.utils.security import sanitize_url

#: Span matchers in precedence order. When two constructs could start at the
#: same position, the earlier entry wins.
INLINE_MATCHERS: tuple[tuple[InlineTokenKind, re.Pattern[str]], ...] = (
    ("strong", STRONG_PATTERN),
    ("emphasis", EMPHASIS_PATTERN),
    ("code", INLINE_CODE_PATTERN),
    ("link", LINK_PATTERN),
)

# Characters that can open a span; positions holding anything else are
# literal text and skip the matcher loop.
_SPAN_OPENERS = frozenset("*/=[")


@dataclass(frozen=True)
class InlineToken:
    """One entry of the flat token stream produced by :func:`tokenize_inline`.

    Parameters
    ----------
    kind : {"text", "strong", "emphasis", "code", "link"}
        Token type
    text : str
        Literal text, span content, or link label (the URL when unlabeled)
    url : str or None
        Link target, only set for ``link`` tokens
    start : int
        Offset of the token in the source line

    """

    kind: InlineTokenKind
    text: str
    url: Optional[str] = None
    start: int = 0


def _match_span(line: str, pos: int) -> Optional[tuple[InlineTokenKind, re.Match[str]]]:
    for kind, pattern in INLINE_MATCHERS:
        match = pattern.match(line, pos)
        if match:
            return kind, match
    return None


def tokenize_inline(line: str) -> list[InlineToken]:
    """Split a line into literal text and markup span tokens.

    Parameters
    ----------
    line : str
        One line of text

    Returns
    -------
    list of InlineToken
        Tokens in source order; adjacent literal characters form one token

    """
    tokens: list[InlineToken] = []
    literal_start = 0
    pos = 0
    length = len(line)

    while pos < length:
        found = _match_span(line, pos) if line[pos] in _SPAN_OPENERS else None
        if found is None:
            pos += 1
            continue

        kind, match = found
        if literal_start < pos:
            tokens.append(InlineToken("text", line[literal_start:pos], start=literal_start))

        if kind == "link":
            url, label = match.group(1), match.group(2)
            tokens.append(InlineToken("link", label or url, url=url, start=pos))
        else:
            tokens.append(InlineToken(kind, match.group(1), start=pos))

        pos = match.end()
        literal_start = pos

    if literal_start < length:
        tokens.append(InlineToken("text", line[literal_start:], start=literal_start))

    return tokens


def _token_to_node(token: InlineToken) -> Node:
    if token.kind == "strong":
        return Strong(content=(Text(token.text),))
    if token.kind == "emphasis":
        return Emphasis(content=(Text(token.text),))
    if token.kind == "code":
        return Code(token.text)
    if token.kind == "link":
        url = sanitize_url(token.url or "")
        return Link(url=url, content=(Text(token.text),), external=url.startswith(EXTERNAL_LINK_PREFIX))
    return Text(token.text)


def build_inline(tokens: list[InlineToken]) -> tuple[Node, ...]:
    """Convert a token stream into inline AST nodes.

    Parameters
    ----------
    tokens : list of InlineToken
        Output of :func:`tokenize_inline`

    Returns
    -------
    tuple of Node
        Inline nodes in source order

    """
    return tuple(_token_to_node(token) for token in tokens)


def parse_inline(line: str) -> tuple[Node, ...]:
    """Parse the inline markup of one line.

    Parameters
    ----------
    line : str
        One line of text

    Returns
    -------
    tuple of Node
        Inline nodes. A line without markup yields a single Text node holding
        the line unchanged; an empty line yields an empty tuple.

    Examples
    --------
        >>> parse_inline("see *this*")
        (Text(content='see '), Strong(content=(Text(content='this'),)))

    """
    return build_inline(tokenize_inline(line))
