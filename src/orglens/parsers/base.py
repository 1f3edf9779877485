#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orglens/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn raw note
text into the orglens AST, plus the input normalization they share.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from orglens.ast import Document
from orglens.exceptions import InvalidOptionsError, ValidationError
from orglens.options.base import BaseParserOptions

TextInput = Union[str, bytes]


def load_text_content(input_data: TextInput) -> str:
    """Normalize parser input to text.

    Parameters
    ----------
    input_data : str or bytes
        Raw note text. Bytes are decoded as UTF-8 (a leading BOM is dropped)
        and undecodable sequences are replaced.

    Returns
    -------
    str
        The note text

    Raises
    ------
    ValidationError
        If the input is neither str nor bytes

    """
    if isinstance(input_data, str):
        return input_data
    if isinstance(input_data, (bytes, bytearray)):
        return bytes(input_data).decode("utf-8-sig", errors="replace")
    raise ValidationError(
        f"Expected str or bytes input, got {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=type(input_data),
    )


class BaseParser(ABC):
    """Abstract base class for note parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: object | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : object or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: TextInput) -> Document:
        """Parse the input note into an AST.

        Parameters
        ----------
        input_data : str or bytes
            The note text to parse

        Returns
        -------
        Document
            AST Document node representing the note

        Raises
        ------
        ParsingError
            If parsing fails unexpectedly
        ValidationError
            If input data is not text

        """
        raise NotImplementedError
