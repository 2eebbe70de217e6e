"""inlineSQL schema layer: configuration and library-owned value types."""
from inlinesql.schema.profile import QuotingProfile
from inlinesql.schema.values import Between, RawSQL, SQLLiteral

__all__ = [
    "QuotingProfile",
    "Between",
    "RawSQL",
    "SQLLiteral",
]
