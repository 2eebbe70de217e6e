"""Custom exception hierarchy for inlineSQL.

All public errors inherit from InlineSQLError so callers can catch the base
class for any inlineSQL-specific failure.  The two usage errors also derive
from the matching builtin (``ValueError`` / ``TypeError``) so generic
argument-checking code keeps working.
"""
from __future__ import annotations


class InlineSQLError(Exception):
    """Base exception for all inlineSQL errors."""


class BindingMismatchError(InlineSQLError, ValueError):
    """Raised when placeholder markers and supplied arguments disagree.

    Args:
        supplied: Number of arguments passed to ``escape``.
        expected: Number of ``?`` markers counted in the template.
    """

    def __init__(self, supplied: int, expected: int) -> None:
        super().__init__(f"Binding mismatch: {supplied} for {expected}")
        self.supplied = supplied
        self.expected = expected


class UnsupportedValueError(InlineSQLError, TypeError):
    """Raised when no quoting rule matches a value.

    Args:
        kind: The value's type.
        rendering: ``repr`` of the offending value, for diagnostics.
    """

    def __init__(self, kind: type, rendering: str) -> None:
        super().__init__(
            f"No quoting rule for {kind.__qualname__} values ({rendering})"
        )
        self.kind = kind
        self.rendering = rendering


class ProfileConfigError(InlineSQLError):
    """Raised when a QuotingProfile names a quoter that is not registered.

    Args:
        message: Human-readable description.
        target: The unknown quoter name.
        registered: Names currently registered with ``QuoterFactory``.
    """

    def __init__(
        self,
        message: str,
        target: str | None = None,
        registered: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.target = target
        self.registered = registered or []
