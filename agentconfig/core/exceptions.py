"""Agent Config Core Exceptions - Exception classes for error handling.

This module contains the exception hierarchy for the agent config manager.
Every error that can end a command invocation is one of these types, so the
CLI can report it with a single handler and exit non-zero.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union


class AgentConfigError(Exception):
    """Base exception for all agent-config-specific errors.

    This is the root exception class that all other agent config exceptions
    inherit from. It provides common functionality for error handling and
    context tracking.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize agent config error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., file paths, keys)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ConfigNotFoundError(AgentConfigError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: Union[str, Path], context: Optional[Dict[str, Any]] = None):
        """Initialize not-found error.

        Args:
            path: Location where the config file was expected
            context: Optional additional context
        """
        message = f"Config not found at {path}. Run 'acm init' to create it"
        super().__init__(message, context)
        self.path = Path(path)


class MalformedConfigError(AgentConfigError):
    """Raised when the configuration file exists but cannot be parsed.

    Covers both invalid JSON and JSON whose shape does not match the
    configuration schema.
    """

    def __init__(
        self,
        path: Union[str, Path],
        reason: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize malformed config error.

        Args:
            path: Path of the config file that failed to parse
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying parse or validation error
        """
        message = f"Invalid config at {path}: {reason}"
        super().__init__(message, context, cause)
        self.path = Path(path)
        self.reason = reason


class ConfigWriteError(AgentConfigError):
    """Raised when writing the config or an export file fails."""

    def __init__(
        self,
        path: Union[str, Path],
        reason: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize write error.

        Args:
            path: File or directory that could not be written
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying OS error
        """
        message = f"Failed to write {path}: {reason}"
        super().__init__(message, context, cause)
        self.path = Path(path)
        self.reason = reason


class UnknownKeyError(AgentConfigError):
    """Raised when get/set is given a key outside the supported set."""

    def __init__(
        self,
        key: str,
        operation: str,
        supported: Optional[Iterable[str]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize unknown key error.

        Args:
            key: The dotted key that was requested
            operation: Accessor operation, "get" or "set"
            supported: Keys the operation does accept
            context: Optional additional context
        """
        message = f"Unknown key: {key}"
        self.supported = sorted(supported) if supported else []
        if self.supported:
            message = f"{message} (supported for {operation}: {', '.join(self.supported)})"
        super().__init__(message, context)
        self.key = key
        self.operation = operation


class BadValueError(AgentConfigError):
    """Raised when a value given to set cannot be parsed for its field."""

    def __init__(
        self,
        key: str,
        value: str,
        expected: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize bad value error.

        Args:
            key: The dotted key being set
            value: The raw value that failed to parse
            expected: Name of the expected type (e.g., "float", "integer")
            context: Optional additional context
        """
        message = f"Invalid value for '{key}': {value!r} is not a valid {expected}"
        super().__init__(message, context)
        self.key = key
        self.value = value
        self.expected = expected
