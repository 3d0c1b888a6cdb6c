"""Custom exceptions for versrange."""

from typing import Optional


class VersRangeError(Exception):
    """Base exception for all versrange operations."""


class ConfigurationError(VersRangeError):
    """Raised when configuration validation fails."""


class MalformedInputError(VersRangeError, ValueError):
    """Raised when an upstream range description cannot be interpreted.

    Attributes:
        fragment: The offending piece of input (token, event key, range type)
        position: 0-based position of the fragment in its sequence, if any
    """

    def __init__(self, message: str, fragment: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.fragment = fragment
        self.position = position


class InvalidVersionError(VersRangeError, ValueError):
    """Raised when a version is not valid under the versioning scheme of its range."""

    def __init__(self, version: str, scheme: str, reason: Optional[str] = None):
        message = f"Invalid version '{version}' for scheme '{scheme}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.version = version
        self.scheme = scheme


class InvalidRangeError(VersRangeError, ValueError):
    """Raised when an assembled range violates its well-formedness rules."""
