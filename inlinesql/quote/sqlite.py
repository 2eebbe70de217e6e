"""SQLite dialect quoter."""
from __future__ import annotations

from inlinesql.quote.base import ValueQuoter


class SQLiteQuoter(ValueQuoter):
    """Renders literals for SQLite.

    Note: SQLite stores booleans as integers and only accepts the ``TRUE`` /
    ``FALSE`` keywords from 3.23 onwards, so they are rendered as ``1`` / ``0``.
    Binary data becomes a BLOB literal (``X'...'``).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def quote_boolean(self, value: bool) -> str:
        return "1" if value else "0"

    def quote_bytes(self, value: bytes) -> str:
        return f"X'{value.hex()}'"
