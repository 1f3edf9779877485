#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/renderers/base.py
"""Base renderer class for converting the orglens AST to output formats.

This module defines the abstract base class that all AST renderers must inherit from.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from orglens.ast import Document
from orglens.exceptions import InvalidOptionsError
from orglens.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Subclasses implement :meth:`render_to_string`; :meth:`render` writes that
    text to a path or stream.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If rendering fails

        """
        raise NotImplementedError

    def render(self, doc: Document, output: Union[str, Path, IO[str]]) -> None:
        """Render the AST and write the result.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or IO[str]
            File path or text stream

        """
        text = self.render_to_string(doc)
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        else:
            output.write(text)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
