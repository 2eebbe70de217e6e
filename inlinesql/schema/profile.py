"""Pydantic model for the QuotingProfile that selects and configures a quoter.

A profile names the quoter target registered with
:class:`~inlinesql.quote.registry.QuoterFactory` and the codec used to turn
binary payloads into text::

    from inlinesql import QuotingProfile, quoter_for

    quoter = quoter_for(QuotingProfile(target="postgres"))
    quoter.quote(b"\\x00\\x01")  # => "'\\x0001'::bytea"
"""
from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, field_validator


class QuotingProfile(BaseModel):
    """Configuration for building a value quoter.

    Attributes:
        target: Registered quoter name (``'generic'``, ``'postgres'``,
            ``'sqlite'``, ``'mysql'`` or a custom registration).
        binary_encoding: Codec used when binary data (``bytes``, bytes
            regex patterns) is inlined as text.  ``latin-1`` maps every byte
            to exactly one character.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = "generic"
    binary_encoding: str = "latin-1"

    @field_validator("binary_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown codec: '{value}'") from exc
        return value
