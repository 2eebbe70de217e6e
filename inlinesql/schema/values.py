"""Value types understood by the quoter beyond Python builtins.

``SQLLiteral`` is the extension point: any object with a ``to_sql()`` method
returning SQL text is inlined verbatim, after every built-in rule has been
tried.  The quoter performs no escaping on that text::

    from inlinesql import RawSQL, escape

    escape("UPDATE jobs SET started_at = ? WHERE id = ?", [RawSQL("NOW()"), 7])
    # => "UPDATE jobs SET started_at = NOW() WHERE id = 7"
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SQLLiteral(Protocol):
    """Capability for values that render their own SQL literal."""

    def to_sql(self) -> str:
        """Return complete, already-safe SQL text for this value."""
        ...


@dataclass(frozen=True)
class RawSQL:
    """Trusted SQL fragment inlined as-is.

    Attributes:
        text: SQL text, e.g. ``'NOW()'`` or ``'DEFAULT'``.
    """

    text: str

    def to_sql(self) -> str:
        return self.text


@dataclass(frozen=True)
class Between:
    """An inclusive pair of bounds rendered as ``<first> AND <last>``.

    Used for ``BETWEEN ?`` ranges whose bounds are not integers (dates,
    timestamps, strings), which ``range`` cannot express.

    Attributes:
        first: Lower bound, quoted like any other value.
        last: Upper bound, quoted like any other value.
    """

    first: Any
    last: Any
