# src/example_function/exceptions.py

"""
Shared custom exceptions for the example function handlers.

The handlers themselves never raise these: missing event fields produce
fallback or malformed text, and context access failures propagate as-is.
These errors belong to the surrounding plumbing (configuration and handler
lookup).

Exception Hierarchy:
- ExampleFunctionError (base)
  - ConfigurationError
  - HandlerNotFoundError
"""

from typing import Any, Dict, Optional


class ExampleFunctionError(Exception):
    """Base exception for all example function errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(ExampleFunctionError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


class HandlerNotFoundError(ExampleFunctionError):
    """Raised when a handler name does not match any registered handler."""

    def __init__(self, handler_name: str, **kwargs):
        message = f"No handler registered as '{handler_name}'"
        context = {"handler_name": handler_name}
        super().__init__(message, error_code="HANDLER_NOT_FOUND", context=context, **kwargs)


def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, ExampleFunctionError):
        return error.to_dict()
    return {
        "error_type": error.__class__.__name__,
        "message": str(error),
    }
