"""Exception hierarchy for resulty.

These are raised for misuse of the library itself. Domain failures captured
inside a ``FailureResult`` are never converted into these types.
"""

from __future__ import annotations


class ResultyError(Exception):
    """Base exception for all resulty errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class OptionError(ResultyError, TypeError):
    """An interchange record could not be read as an ``Option``.

    Subclasses ``TypeError`` so callers that only guard against malformed
    input types keep working.
    """


class ConfigurationError(ResultyError):
    """Configuration validation or resolution failed."""


class RemoteError(ResultyError):
    """A failure that arrived as a bare message instead of an exception.

    Only produced by lenient option parsing (``strict_options=False``).
    """
