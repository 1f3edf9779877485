#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/utils/dates.py
"""Timestamp parsing and formatting for Org logbook entries.

Org writes timestamps such as ``[2024-01-15 Mon 10:30]`` or
``<2024-01-15 Mon>``. :func:`parse_org_date` accepts the inner text (brackets
are tolerated) and converts it to a naive :class:`datetime.datetime`. The
recognized fixed layouts are tried first; anything else goes through the
standard library's ISO-8601 and RFC 2822 parsers before giving up with a
:class:`~orglens.exceptions.DateParseError`.

"""

from __future__ import annotations

from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Optional

from orglens.constants import (
    DATE_ONLY_PATTERN,
    DATE_TIME_PATTERN,
    DATE_TIME_SECONDS_PATTERN,
    LOGBOOK_DATE_FORMAT,
    TIMESTAMP_BRACKETS,
    WEEKDAY_TOKEN_PATTERN,
)
from orglens.exceptions import DateParseError

# Order matters: the first layout that matches wins.
_TIMESTAMP_PATTERNS = (DATE_TIME_PATTERN, DATE_TIME_SECONDS_PATTERN, DATE_ONLY_PATTERN)


def clean_timestamp(date_string: str) -> str:
    """Strip brackets, the weekday token and redundant whitespace from a timestamp.

    Parameters
    ----------
    date_string : str
        Raw timestamp text, e.g. ``"[2024-01-15 Mon 10:30]"``

    Returns
    -------
    str
        Normalized text, e.g. ``"2024-01-15 10:30"``

    """
    cleaned = date_string.strip().strip(TIMESTAMP_BRACKETS).strip()
    cleaned = WEEKDAY_TOKEN_PATTERN.sub("", cleaned)
    return " ".join(cleaned.split())


def _parse_free_form(cleaned: str, original: str) -> datetime:
    # Offsets are dropped so every result compares with the naive fixed layouts
    try:
        return datetime.fromisoformat(cleaned).replace(tzinfo=None)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(cleaned).replace(tzinfo=None)
    except (TypeError, ValueError, IndexError) as e:
        raise DateParseError(original, original_error=e) from e


def parse_org_date(date_string: str) -> datetime:
    """Parse an Org timestamp into a datetime.

    Parameters
    ----------
    date_string : str
        Timestamp such as ``"2024-01-01 Mon 10:00"``, ``"2024-01-01 10:00:30"``
        or ``"2024-01-01"``. Surrounding ``[]``/``<>`` brackets are allowed.

    Returns
    -------
    datetime
        Parsed naive datetime. Offsets on ISO or RFC 2822 input are dropped,
        keeping the wall-clock time as written.

    Raises
    ------
    DateParseError
        If no layout matches and the free-form fallbacks fail, or if a matched
        layout carries out-of-range fields (e.g. month 13).

    Examples
    --------
        >>> parse_org_date("2024-01-15 Mon 10:30")
        datetime.datetime(2024, 1, 15, 10, 30)

    """
    cleaned = clean_timestamp(date_string)

    for pattern in _TIMESTAMP_PATTERNS:
        match = pattern.match(cleaned)
        if match is None:
            continue
        fields = [int(group) for group in match.groups()]
        try:
            return datetime(*fields)
        except ValueError as e:
            raise DateParseError(date_string, original_error=e) from e

    return _parse_free_form(cleaned, date_string)


def format_logbook_date(value: datetime) -> str:
    """Format a datetime the way logbook entries are displayed (``YYYY-MM-DD HH:MM``)."""
    return value.strftime(LOGBOOK_DATE_FORMAT)


def calculate_duration(start: datetime, end: Optional[datetime] = None, now: Optional[datetime] = None) -> str:
    """Describe the time elapsed between two timestamps.

    Parameters
    ----------
    start : datetime
        Start of the interval
    end : datetime, optional
        End of the interval. Open intervals are measured up to ``now``.
    now : datetime, optional
        Reference time for open intervals; defaults to the current time.

    Returns
    -------
    str
        ``"H:MM"`` when the interval spans at least one hour, otherwise ``"Mm"``.
        Negative intervals are reported as ``"0m"``.

    """
    if end is None:
        end = now if now is not None else datetime.now(tz=start.tzinfo)

    total_minutes = max(0, int((end - start).total_seconds() // 60))
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}"
    return f"{minutes}m"
