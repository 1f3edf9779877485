#  Copyright (c) 2025 Tom Villani, Ph.D.

# orglens/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the frozen option dataclasses
used by the orglens parsers and renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from orglens.constants import DEFAULT_EXTRACT_METADATA


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a configuration mapping, ignoring unknown keys.

        Keys may use hyphens instead of underscores, as they appear in
        configuration files (``most-recent-first`` for ``most_recent_first``).

        Parameters
        ----------
        values : Mapping[str, Any]
            Configuration values, typically one section of a config file

        Returns
        -------
        Self
            Options instance with the recognized values applied

        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = str(key).replace("-", "_")
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    extract_metadata : bool
        Whether to populate document metadata. Directive lines are removed
        from the body either way.

    """

    extract_metadata: bool = field(
        default=DEFAULT_EXTRACT_METADATA,
        metadata={"help": "Populate document metadata from #+ directives and :PROPERTIES:", "importance": "core"},
    )


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    css_class_map : dict[str, str]
        Extra CSS class per node type name (e.g. ``{"Heading": "note-heading"}``)

    """

    css_class_map: dict[str, str] = field(
        default_factory=dict,
        metadata={"help": "Extra CSS class per node type name", "importance": "advanced"},
    )
