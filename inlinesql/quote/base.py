"""The ValueQuoter: one Python value in, one SQL literal out.

The Template Method pattern is used:
- ``ValueQuoter.quote`` fixes the dispatch order over value kinds.
- Each kind has its own ``quote_*`` step.  Dialect quoters
  (``PostgresQuoter``, ``SQLiteQuoter``, ``MySQLQuoter``) override only the
  steps their backend renders differently, typically binary data.

Dispatch order matters where Python types overlap: ``bool`` is an ``int``
subclass and ``datetime`` is a ``date`` subclass, so the narrower kind is
checked first.  Objects implementing
:class:`~inlinesql.schema.values.SQLLiteral` are consulted last, after every
built-in rule.
"""
from __future__ import annotations

import enum
import math
import numbers
import re
from collections import UserString
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from inlinesql.errors import UnsupportedValueError
from inlinesql.quote.timestamps import format_timestamp
from inlinesql.schema.profile import QuotingProfile
from inlinesql.schema.values import Between, SQLLiteral

_BINARY_TYPES = (bytes, bytearray, memoryview)


class ValueQuoter:
    """Renders host values as standard SQL literals.

    Strings are quoted with every ``'`` doubled and nothing else escaped.
    Instances hold only their profile and are safe to share between threads.

    Args:
        profile: Quoting configuration; defaults to ``QuotingProfile()``.
    """

    def __init__(self, profile: QuotingProfile | None = None) -> None:
        self.profile = profile if profile is not None else QuotingProfile()

    @property
    def dialect_name(self) -> str:
        """Return the canonical dialect name of this quoter."""
        return "generic"

    def quote(self, value: Any) -> str:
        """Return the SQL literal for ``value``.

        Raises:
            UnsupportedValueError: If no rule matches ``value`` (or any
                element / bound nested inside it), or its ``to_sql()`` does
                not return a string.
        """
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return self.quote_boolean(value)
        if isinstance(value, (numbers.Real, Decimal)):
            return self.quote_numeric(value)
        if isinstance(value, str):
            return self.quote_string(value)
        if isinstance(value, UserString):
            return self.quote_string(str(value))
        if isinstance(value, datetime):
            if value.utcoffset() is None:
                return self.quote_naive_datetime(value)
            return self.quote_timestamp(value)
        if isinstance(value, date):
            return self.quote_date(value)
        if isinstance(value, range):
            return self.quote_interval(value.start, value.stop)
        if isinstance(value, Between):
            return self.quote_interval(value.first, value.last)
        if isinstance(value, _BINARY_TYPES):
            return self.quote_bytes(bytes(value))
        if isinstance(value, re.Pattern):
            return self.quote_pattern(value)
        if isinstance(value, type):
            return self.quote_class(value)
        if isinstance(value, enum.Enum):
            return self.quote_symbol(value)
        if isinstance(value, Sequence):
            return self.quote_sequence(value)
        if isinstance(value, SQLLiteral):
            sql = value.to_sql()
            if not isinstance(sql, str):
                raise UnsupportedValueError(type(value), repr(value))
            return sql
        raise UnsupportedValueError(type(value), repr(value))

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def quote_string(self, value: str) -> str:
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def quote_numeric(self, value: numbers.Real | Decimal) -> str:
        """Render a number with its own ``str()`` text, unquoted.

        Only values whose text is a SQL numeric literal are accepted.
        Non-integral rationals (``Fraction(1, 3)`` renders ``1/3``, an
        integer division in most databases) and non-finite values (``nan``,
        ``inf``, which would read as identifiers) are rejected.
        """
        if isinstance(value, numbers.Integral):
            return str(value)
        if isinstance(value, Decimal):
            representable = value.is_finite()
        elif isinstance(value, numbers.Rational):
            representable = False
        else:
            representable = math.isfinite(value)
        if not representable:
            raise UnsupportedValueError(type(value), repr(value))
        return str(value)

    def quote_boolean(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def quote_symbol(self, value: enum.Enum) -> str:
        return self.quote_string(value.name)

    def quote_class(self, value: type) -> str:
        """Quote a class by its fully-qualified name.

        Builtins are rendered by bare name (``int``, not ``builtins.int``).
        """
        if value.__module__ == "builtins":
            return self.quote_string(value.__qualname__)
        return self.quote_string(f"{value.__module__}.{value.__qualname__}")

    def quote_pattern(self, value: re.Pattern) -> str:
        source = value.pattern
        if isinstance(source, bytes):
            source = source.decode(self.profile.binary_encoding)
        return self.quote_string(source)

    def quote_bytes(self, value: bytes) -> str:
        """Quote binary data as text decoded with ``binary_encoding``.

        Not binary-safe for every backend; dialect quoters override this
        with a hex literal form.
        """
        return self.quote_string(value.decode(self.profile.binary_encoding))

    # ------------------------------------------------------------------
    # Dates and times
    # ------------------------------------------------------------------

    def quote_timestamp(self, value: datetime) -> str:
        return f"'{format_timestamp(value)}'"

    def quote_naive_datetime(self, value: datetime) -> str:
        return f"'{value}'"

    def quote_date(self, value: date) -> str:
        return f"'{value.isoformat()}'"

    # ------------------------------------------------------------------
    # Composites
    # ------------------------------------------------------------------

    def quote_interval(self, first: Any, last: Any) -> str:
        """Render ``<first> AND <last>`` for use after ``BETWEEN``."""
        return f"{self.quote(first)} AND {self.quote(last)}"

    def quote_sequence(self, value: Sequence[Any]) -> str:
        """Render ``(<e1>, <e2>, ...)``.

        Text-like sequences whose items are themselves (e.g. one-character
        strings of a custom string type) and self-containing lists have no
        finite literal and raise ``UnsupportedValueError``.
        """
        parts = []
        for entry in value:
            if entry is value or (type(entry) is type(value) and entry == value):
                raise UnsupportedValueError(type(value), repr(value))
            parts.append(self.quote(entry))
        return "(" + ", ".join(parts) + ")"
