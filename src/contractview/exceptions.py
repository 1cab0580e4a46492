#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the contractview library.

Rendering a node tree never raises for node-shape anomalies: malformed nodes,
unknown element types and incomplete mentions are absorbed by the renderer.
The exceptions below cover the surfaces around it (options, input decoding,
output writing).

Exception Hierarchy
-------------------
- ContractViewError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (input document could not be decoded into nodes)

  - RenderingError (output generation failures)

"""

from typing import Any


class ContractViewError(Exception):
    """Base exception class for all contractview-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ContractViewError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"Renderer '{renderer_name}' expected options of type '{expected_type.__name__}', "
                f"but received '{received_type.__name__}'."
            )

        super().__init__(
            message=message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(ContractViewError):
    """Exception raised when an input document cannot be decoded into nodes.

    Parameters
    ----------
    message : str
        Description of the parsing error
    source : str, optional
        Where the input came from (file path, "<stdin>", ...)
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, source: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with its input source."""
        super().__init__(message, original_error=original_error)
        self.source = source


class RenderingError(ContractViewError):
    """Exception raised when rendered output cannot be produced or written.

    Parameters
    ----------
    message : str
        Description of the rendering error
    output_path : str, optional
        Destination that could not be written
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with the failing destination."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path
