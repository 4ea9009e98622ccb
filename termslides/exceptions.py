"""Custom exception hierarchy for termslides.

All termslides-specific exceptions inherit from TermslidesError, enabling
callers to catch every failure of a presentation with a single except clause.
"""

from __future__ import annotations


class TermslidesError(Exception):
    """Base exception for all termslides errors."""


class TerminalIOError(TermslidesError):
    """Raised when the terminal fails to write, flush, toggle raw mode or read input.

    The underlying OS error, when there is one, is chained as ``__cause__``.
    """

    def __init__(self, operation: str, reason: str = "unknown") -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Terminal {operation} failed: {reason}")


class ConfigurationError(TermslidesError):
    """Raised for invalid configuration or missing required settings."""
