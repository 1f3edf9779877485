#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the orglens library.

This module centralizes the grammar recognized at the parser boundary and the
default configuration values used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Document Grammar - block, directive and drawer markers
3. Inline Grammar - span patterns for inline markup
4. Logbook Grammar - CLOCK and state-change line patterns
5. Date Handling - timestamp formats and weekday tokens
6. Defaults - option defaults for parsers, renderers and the CLI
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogbookEntryKind = Literal["clock", "state-change"]
InlineTokenKind = Literal["text", "strong", "emphasis", "code", "link"]
RenderFormat = Literal["html", "json"]
LogbookOutputFormat = Literal["table", "json"]

# =============================================================================
# Document Grammar
# =============================================================================

MAX_HEADING_LEVEL = 6

HEADING_MARKER_PATTERN = re.compile(r"^\*+")
HEADING_PREFIX_PATTERN = re.compile(r"^\*+\s*")
LIST_ITEM_PATTERN = re.compile(r"^(?:- |\d+\.\s)")
LIST_MARKER_PATTERN = re.compile(r"^(?:-|\d+\.)\s*")
ORDERED_LIST_PATTERN = re.compile(r"^\d+\.\s")
HORIZONTAL_RULE_PATTERN = re.compile(r"^-{3,}$")

CODE_BLOCK_BEGIN = "#+BEGIN_SRC"
CODE_BLOCK_END = "#+END_SRC"

DIRECTIVE_PREFIX = "#+"
TITLE_DIRECTIVE = "#+title:"
CATEGORY_DIRECTIVE = "#+category:"
TAGS_DIRECTIVE = "#+tags:"
AUTHOR_DIRECTIVE = "#+author:"
DATE_DIRECTIVE = "#+date:"

PROPERTIES_DRAWER_START = ":PROPERTIES:"
DRAWER_END = ":END:"
ID_PROPERTY = ":ID:"

SCHEDULED_PATTERN = re.compile(r"SCHEDULED:\s*([^>\]]+[>\]])")
DEADLINE_PATTERN = re.compile(r"DEADLINE:\s*([^>\]]+[>\]])")

# =============================================================================
# Inline Grammar
# =============================================================================

STRONG_PATTERN = re.compile(r"\*([^*\s][^*]*[^*\s]|\w)\*")
EMPHASIS_PATTERN = re.compile(r"/([^/\s][^/]*[^/\s]|\w)/")
INLINE_CODE_PATTERN = re.compile(r"(?<![\"'\w])=([^=\s][^=]*[^=\s]|\w)=(?![\"'\w])")
LINK_PATTERN = re.compile(r"\[\[([^\]]+)\](?:\[([^\]]+)\])?\]")

EXTERNAL_LINK_PREFIX = "http"

# Link schemes that can run script in a browser; matched against the lowercased,
# whitespace-free start of the URL
DANGEROUS_SCHEMES = ("javascript:", "vbscript:", "data:")

# =============================================================================
# Logbook Grammar
# =============================================================================

DEFAULT_LOGBOOK_DRAWER = "LOGBOOK"
CLOCK_PREFIX = "CLOCK:"
NOTE_BULLET = "- "

CLOCK_LINE_PATTERN = re.compile(
    r"^(?:-\s*)?CLOCK:\s*\[(?P<start>[^\]]+)\](?:--\[(?P<end>[^\]]+)\])?(?:\s*=>\s*(?P<duration>.+))?"
)
STATE_CHANGE_LINE_PATTERN = re.compile(
    r"^(?:-\s*)?State\s+\"(?P<to>[^\"]+)\"\s+from\s+(?:\"(?P<from>[^\"]*)\"\s*)?"
    r"(?:\[(?P<bracketed>[^\]]+)\]|(?P<bare>[^\s\"].*?))(?:\s*\\\\)?$"
)

# =============================================================================
# Date Handling
# =============================================================================

WEEKDAY_TOKEN_PATTERN = re.compile(r"\s+(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)\b\.?")
TIMESTAMP_BRACKETS = "[]<>"

DATE_TIME_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})\s+(\d{1,2}):(\d{2})$")
DATE_TIME_SECONDS_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})\s+(\d{1,2}):(\d{2}):(\d{2})$")
DATE_ONLY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

LOGBOOK_DATE_FORMAT = "%Y-%m-%d %H:%M"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_EXTRACT_METADATA = True
DEFAULT_EXTRACT_PLANNING = True
DEFAULT_MAX_HEADING_LEVEL = MAX_HEADING_LEVEL
DEFAULT_LOGBOOK_MOST_RECENT_FIRST = True
DEFAULT_HTML_ESCAPE = True
DEFAULT_HTML_LANGUAGE_CLASS_PREFIX = "language-"
DEFAULT_EXTERNAL_LINK_TARGET = "_blank"
DEFAULT_EXTERNAL_LINK_REL = "noopener noreferrer"
DEFAULT_ERROR_CSS_CLASS = "org-error"

CONFIG_FILENAMES = [".orglens.toml", ".orglens.yaml", ".orglens.yml", ".orglens.json", "pyproject.toml"]
CONFIG_ENV_VAR = "ORGLENS_CONFIG"
