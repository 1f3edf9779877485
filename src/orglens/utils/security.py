#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/utils/security.py
"""URL checks applied to links before they reach rendered output.

Org links can carry any URL, including ``javascript:`` and ``data:`` URLs
that execute when a viewer clicks them. The inline parser passes every link
URL through :func:`sanitize_url`, and the HTML renderer does the same for
hand-built AST nodes.

"""

from __future__ import annotations

import logging

from orglens.constants import DANGEROUS_SCHEMES

logger = logging.getLogger(__name__)


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a scheme that can run script.

    Browsers ignore ASCII whitespace and control characters inside a scheme,
    so ``"java\\tscript:"`` is treated the same as ``"javascript:"``.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if the URL starts with a dangerous scheme

    Examples
    --------
    >>> is_url_scheme_dangerous("javascript:alert(1)")
    True
    >>> is_url_scheme_dangerous(" JavaScript:alert(1)")
    True
    >>> is_url_scheme_dangerous("file:notes.org")
    False

    """
    if not url:
        return False
    compact = "".join(ch for ch in url if ord(ch) > 0x20 and ch != "\x7f").lower()
    return compact.startswith(DANGEROUS_SCHEMES)


def sanitize_url(url: str) -> str:
    """Return ``url`` unchanged, or an empty string if its scheme is dangerous.

    Examples
    --------
    >>> sanitize_url("https://orgmode.org")
    'https://orgmode.org'
    >>> sanitize_url("vbscript:msgbox(1)")
    ''

    """
    if is_url_scheme_dangerous(url):
        logger.warning("Dropping link URL with unsafe scheme: %r", url[:40])
        return ""
    return url
