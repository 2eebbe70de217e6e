"""MySQL dialect quoter."""

from __future__ import annotations

from inlinesql.quote.base import ValueQuoter


class MySQLQuoter(ValueQuoter):
    """Renders literals for MySQL / MariaDB.

    Note: unless the server runs with ``NO_BACKSLASH_ESCAPES``, MySQL treats
    ``\\`` inside string literals as an escape character.  Backslashes are
    therefore doubled before single quotes are, so a trailing backslash can
    never swallow the closing quote.

    Binary data becomes a hexadecimal literal (``X'...'``).
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def quote_string(self, value: str) -> str:
        escaped = value.replace("\\", "\\\\").replace("'", "''")
        return f"'{escaped}'"

    def quote_bytes(self, value: bytes) -> str:
        return f"X'{value.hex()}'"
