#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/utils/__init__.py
"""Utility modules for the orglens package.

This package contains timestamp parsing and formatting helpers and the
document metadata container, and the link URL guard.
"""

from orglens.utils.dates import calculate_duration, clean_timestamp, format_logbook_date, parse_org_date
from orglens.utils.metadata import DocumentMetadata, format_yaml_frontmatter
from orglens.utils.security import is_url_scheme_dangerous, sanitize_url

__all__ = [
    "DocumentMetadata",
    "calculate_duration",
    "clean_timestamp",
    "format_logbook_date",
    "format_yaml_frontmatter",
    "is_url_scheme_dangerous",
    "parse_org_date",
    "sanitize_url",
]
