#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/utils/metadata.py

"""Document-level metadata for parsed Org notes.

:class:`DocumentMetadata` holds the values collected from ``#+`` directives and
the first ``:PROPERTIES:`` drawer of a note. Instances are created once per
parse and never mutated; :func:`format_yaml_frontmatter` serializes them with
PyYAML for hosts that want the metadata as front matter.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

import yaml

METADATA_FIELD_ORDER: tuple[str, ...] = (
    "title",
    "category",
    "author",
    "date",
    "id",
    "tags",
    "scheduled",
    "deadline",
)


@dataclass(frozen=True)
class DocumentMetadata:
    """Metadata extracted from an Org note.

    Parameters
    ----------
    title : str | None
        Value of the first ``#+title:`` directive
    category : str | None
        Value of the last ``#+category:`` directive
    author : str | None
        Value of the last ``#+author:`` directive
    date : str | None
        Free-text value of the last ``#+date:`` directive (not parsed)
    id : str | None
        ``:ID:`` property from the first ``:PROPERTIES:`` drawer
    tags : tuple of str
        Whitespace-separated tokens of the last ``#+tags:`` directive
    scheduled : str | None
        Raw timestamp following the last ``SCHEDULED:`` keyword
    deadline : str | None
        Raw timestamp following the last ``DEADLINE:`` keyword

    """

    title: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    id: Optional[str] = None
    tags: Tuple[str, ...] = ()
    scheduled: Optional[str] = None
    deadline: Optional[str] = None

    def is_empty(self) -> bool:
        """Return True when no metadata field carries a value."""
        return not any(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to a dictionary, excluding unset values.

        Returns
        -------
        dict
            Fields in display order; ``tags`` is emitted as a list

        """
        result: Dict[str, Any] = {}
        for name in METADATA_FIELD_ORDER:
            value = getattr(self, name)
            if not value:
                continue
            result[name] = list(value) if name == "tags" else value
        return result


def format_yaml_frontmatter(metadata: DocumentMetadata) -> str:
    """Format metadata as YAML front matter.

    Parameters
    ----------
    metadata : DocumentMetadata
        Metadata to serialize

    Returns
    -------
    str
        YAML front matter with ``---`` delimiters, or an empty string when the
        metadata is empty

    Examples
    --------
    >>> print(format_yaml_frontmatter(DocumentMetadata(title="Notes", tags=("org", "emacs"))))
    ---
    title: Notes
    tags:
    - org
    - emacs
    ---
    <BLANKLINE>

    """
    data = metadata.to_dict()
    if not data:
        return ""

    yaml_content = yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )

    if not yaml_content.endswith("\n"):
        yaml_content += "\n"

    return f"---\n{yaml_content}---\n"
