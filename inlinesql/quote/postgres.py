"""PostgreSQL dialect quoter."""

from __future__ import annotations

from inlinesql.quote.base import ValueQuoter


class PostgresQuoter(ValueQuoter):
    """Renders literals for PostgreSQL.

    Binary data uses the hex ``bytea`` input format.  The literal relies on
    ``standard_conforming_strings = on`` (the default since PostgreSQL 9.1),
    under which the backslash inside ``'\\x...'`` is not an escape character.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def quote_bytes(self, value: bytes) -> str:
        return f"'\\x{value.hex()}'::bytea"
