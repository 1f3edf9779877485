#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exception types raised by orglens.

Hierarchy
---------
- OrgLensError
  - ValidationError: bad input type or option value
    - InvalidOptionsError: a parser or renderer got the wrong options class
  - ParsingError: a note could not be turned into a Document
    - DateParseError: a timestamp matched none of the known layouts
  - RenderingError: a Document could not be turned into output

The logbook parser catches DateParseError per line and never lets it escape.
``safe_parse_document`` catches every OrgLensError and returns an ErrorBlock
document instead.

"""

from typing import Any


class OrgLensError(Exception):
    """Root of all orglens errors.

    Parameters
    ----------
    message : str
        What went wrong
    original_error : Exception, optional
        Lower-level exception this error wraps

    Attributes
    ----------
    message : str
        Same as ``str(error)``
    original_error : Exception or None
        Wrapped exception

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(OrgLensError):
    """Raised when an argument or option value is not acceptable.

    Parameters
    ----------
    message : str
        What was wrong with the value
    parameter_name : str, optional
        Argument or option the value was given for
    parameter_value : any, optional
        Offending value, or its type when the value itself is large
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Raised when a parser or renderer is constructed with another component's options.

    Parameters
    ----------
    component_name : str
        Component that rejected the options, e.g. ``"org"`` or ``"html"``
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Replaces the generated message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(OrgLensError):
    """Raised when a note cannot be parsed.

    Parameters
    ----------
    message : str
        What failed
    parsing_stage : str, optional
        ``"metadata"``, ``"blocks"`` or ``"date"``
    original_error : Exception, optional
        Exception raised inside the stage

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DateParseError(ParsingError):
    """Raised by :func:`orglens.utils.dates.parse_org_date` for an unreadable timestamp.

    Attributes
    ----------
    date_string : str
        The timestamp exactly as it was passed in, brackets and weekday included

    """

    def __init__(self, date_string: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Unable to parse date: {date_string}"
        super().__init__(message, parsing_stage="date", original_error=original_error)
        self.date_string = date_string


class RenderingError(OrgLensError):
    """Raised when a renderer fails on a Document.

    Parameters
    ----------
    message : str
        What failed
    rendering_stage : str, optional
        Where it failed; the HTML renderer reports ``"rendering"``
    original_error : Exception, optional
        Exception raised by the node visitor

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
