#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdstream library.

Writers never raise while they are driven correctly: unknown element kinds
and missing attributes degrade to plain output instead of failing. The
exceptions below cover configuration mistakes and misuse of the writer
protocol.

Exception Hierarchy
-------------------
- MdStreamError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a writer)

  - RenderingError (output generation failures)
    - UnbalancedElementError (close without a matching open)

"""

from typing import Any


class MdStreamError(Exception):
    """Base exception class for all mdstream-specific errors.

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


class ValidationError(MdStreamError):
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
    """Exception raised when a writer receives the wrong options class.

    Parameters
    ----------
    writer_name : str
        Name of the writer that received invalid options
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
        writer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{writer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.writer_name = writer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(MdStreamError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The writer operation during which the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnbalancedElementError(RenderingError):
    """Exception raised when ``close()`` is called with no element open."""

    def __init__(self, message: str | None = None):
        """Initialize the unbalanced element error."""
        super().__init__(message or "close() called without a matching open()", rendering_stage="close")


__all__ = [
    "MdStreamError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "UnbalancedElementError",
]
