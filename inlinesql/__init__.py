"""inlineSQL – value-to-SQL-literal quoting for adapters without bind parameters.

Public API
----------
``escape``
    Replace every positional ``?`` in a SQL template with the quoted literal
    of the matching argument.

``quote``
    Render a single Python value as a SQL literal.

``quoter_for``
    Build the dialect quoter selected by a ``QuotingProfile``.

Re-exported types
-----------------
``ValueQuoter`` and the dialect quoters, ``SQLTemplate``, ``QuotingProfile``,
``SQLLiteral``, ``RawSQL``, ``Between``, and all error classes.

Extensibility
-------------
Values of any type can take part by implementing ``to_sql()``::

    class Point:
        def __init__(self, x, y):
            self.x, self.y = x, y

        def to_sql(self) -> str:
            return f"POINT({float(self.x)}, {float(self.y)})"

    inlinesql.escape("INSERT INTO pins (at) VALUES (?)", [Point(1, 2)])
    # => "INSERT INTO pins (at) VALUES (POINT(1.0, 2.0))"

New dialect quoters can be registered via::

    from inlinesql.quote.registry import QuoterFactory

    @QuoterFactory.register("oracle")
    class OracleQuoter(ValueQuoter):
        ...

After registration, ``quoter_for`` picks it up for any ``QuotingProfile``
with ``target="oracle"``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from inlinesql.errors import (
    BindingMismatchError,
    InlineSQLError,
    ProfileConfigError,
    UnsupportedValueError,
)
from inlinesql.quote.base import ValueQuoter
from inlinesql.quote.mysql import MySQLQuoter
from inlinesql.quote.postgres import PostgresQuoter
from inlinesql.quote.registry import QuoterFactory
from inlinesql.quote.sqlite import SQLiteQuoter
from inlinesql.quote.substitution import SQLTemplate, count_placeholders, escape_sql
from inlinesql.schema.profile import QuotingProfile
from inlinesql.schema.values import Between, RawSQL, SQLLiteral

# ---------------------------------------------------------------------------
# Register built-in quoters with QuoterFactory
# ---------------------------------------------------------------------------

QuoterFactory.register_class("generic", ValueQuoter)
QuoterFactory.register_class("postgres", PostgresQuoter)
QuoterFactory.register_class("sqlite", SQLiteQuoter)
QuoterFactory.register_class("mysql", MySQLQuoter)

_DEFAULT_QUOTER = ValueQuoter()

__all__ = [
    # Core
    "escape",
    "quote",
    "quoter_for",
    "count_placeholders",
    # Quoters
    "ValueQuoter",
    "MySQLQuoter",
    "PostgresQuoter",
    "SQLiteQuoter",
    "QuoterFactory",
    "SQLTemplate",
    # Configuration and value types
    "QuotingProfile",
    "SQLLiteral",
    "RawSQL",
    "Between",
    # Errors
    "InlineSQLError",
    "BindingMismatchError",
    "UnsupportedValueError",
    "ProfileConfigError",
]


def escape(
    template: str,
    arguments: Sequence[Any] = (),
    quoter: ValueQuoter | None = None,
) -> str:
    """Inline ``arguments`` into ``template`` at its ``?`` placeholders.

    Meant for adapters that cannot use bind parameters::

        inlinesql.escape(
            "SELECT * FROM zoos WHERE name = ? AND acreage > ?",
            ["Dallas", 40],
        )
        # => "SELECT * FROM zoos WHERE name = 'Dallas' AND acreage > 40"

    Args:
        template: SQL text with positional ``?`` markers.
        arguments: One value per marker, consumed in order.
        quoter: Dialect quoter; the generic quoter when omitted.

    Returns:
        The fully substituted SQL string.

    Raises:
        BindingMismatchError: If the number of markers and arguments differ.
        UnsupportedValueError: If any argument has no quoting rule.
    """
    return escape_sql(template, arguments, quoter or _DEFAULT_QUOTER)


def quote(value: Any, quoter: ValueQuoter | None = None) -> str:
    """Return the SQL literal for ``value``.

    Raises:
        UnsupportedValueError: If no quoting rule matches ``value``.
    """
    return (quoter or _DEFAULT_QUOTER).quote(value)


def quoter_for(profile: QuotingProfile | None = None) -> ValueQuoter:
    """Build the quoter registered for ``profile.target``.

    Raises:
        ProfileConfigError: If the target is not registered.
    """
    if profile is None:
        profile = QuotingProfile()
    return QuoterFactory.create(profile.target, profile)
