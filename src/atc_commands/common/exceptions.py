"""
Common exception classes for the ATC command scheme engine.

Only configuration problems are raised as exceptions. Problems with a typed
command line are returned by the parser as ParseError values instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class CommandSchemeError(Exception):
    """Base exception class for all command scheme engine errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
            }
        }


class ConfigurationError(CommandSchemeError):
    """Raised when the catalog, a scheme or the engine configuration is invalid."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)


class UnknownCommandTypeError(ConfigurationError):
    """Raised when the metadata catalog has no entry for a command type."""

    def __init__(self, command_type: Any, details: dict[str, Any] | None = None):
        det = details.copy() if details else {}
        det.setdefault("command_type", str(command_type))
        super().__init__(
            f"No metadata registered for command type '{command_type}'", det
        )
        self.command_type = command_type


class CatalogConsistencyError(ConfigurationError):
    """Raised when the metadata catalog fails its startup self-check."""

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__(
            "Command metadata catalog is inconsistent: " + "; ".join(self.problems),
            {"problems": self.problems},
        )


class SchemeValidationError(ConfigurationError):
    """Raised when a scheme is incomplete or ambiguous."""

    def __init__(self, scheme_name: str, issues: Iterable[Any]):
        self.scheme_name = scheme_name
        self.issues = list(issues)
        summary = "; ".join(str(issue) for issue in self.issues)
        super().__init__(
            f"Command scheme '{scheme_name}' is invalid: {summary}",
            {
                "scheme": scheme_name,
                "issues": [str(issue) for issue in self.issues],
            },
        )


class UnknownSchemeError(CommandSchemeError):
    """Raised when a scheme name is not registered."""

    def __init__(self, scheme_name: str, available: Iterable[str] = ()):
        self.scheme_name = scheme_name
        self.available = sorted(available)
        super().__init__(
            f"Unknown command scheme '{scheme_name}'. "
            f"Available schemes: {', '.join(self.available) or 'none'}",
            {"scheme": scheme_name, "available": self.available},
        )
