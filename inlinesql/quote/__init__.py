"""inlineSQL quoting layer: Python values → SQL literals."""
from inlinesql.quote.base import ValueQuoter
from inlinesql.quote.mysql import MySQLQuoter
from inlinesql.quote.postgres import PostgresQuoter
from inlinesql.quote.sqlite import SQLiteQuoter
from inlinesql.quote.substitution import SQLTemplate, count_placeholders, escape_sql

__all__ = [
    "ValueQuoter",
    "MySQLQuoter",
    "PostgresQuoter",
    "SQLiteQuoter",
    "SQLTemplate",
    "count_placeholders",
    "escape_sql",
]
