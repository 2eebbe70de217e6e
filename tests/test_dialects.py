"""Unit tests for dialect quoters, QuoterFactory and QuotingProfile."""

from __future__ import annotations

from datetime import date

import pydantic
import pytest

from inlinesql import (
    MySQLQuoter,
    PostgresQuoter,
    ProfileConfigError,
    QuoterFactory,
    QuotingProfile,
    SQLiteQuoter,
    ValueQuoter,
    quoter_for,
)

CAD_DRAWING = b"CAD \x01 \x00 DRAWING"


# ---------------------------------------------------------------------------
# Dialect quoters
# ---------------------------------------------------------------------------


def test_postgres_bytea_hex(postgres):
    assert postgres.quote(b"\xde\xad\xbe\xef") == "'\\xdeadbeef'::bytea"
    assert postgres.quote(b"") == "'\\x'::bytea"


def test_postgres_keeps_standard_rules(postgres):
    assert postgres.quote(True) == "TRUE"
    assert postgres.quote("it's") == "'it''s'"


def test_sqlite_blob_and_booleans(sqlite):
    assert sqlite.quote(CAD_DRAWING) == "X'434144200120002044524157494e47'"
    assert sqlite.quote(True) == "1"
    assert sqlite.quote(False) == "0"
    assert sqlite.quote([True, None]) == "(1, NULL)"


def test_mysql_doubles_backslashes(mysql):
    assert mysql.quote("C:\\temp\\") == "'C:\\\\temp\\\\'"
    assert mysql.quote("\\'") == "'\\\\'''"


def test_mysql_hex_literal(mysql):
    assert mysql.quote(bytearray(b"\x00\xff")) == "X'00ff'"


def test_dialect_string_rule_reaches_nested_values(mysql):
    assert mysql.quote(["a\\b", date(2024, 1, 2)]) == "('a\\\\b', '2024-01-02')"


def test_dialect_names():
    assert ValueQuoter().dialect_name == "generic"
    assert PostgresQuoter().dialect_name == "postgres"
    assert SQLiteQuoter().dialect_name == "sqlite"
    assert MySQLQuoter().dialect_name == "mysql"


# ---------------------------------------------------------------------------
# QuoterFactory
# ---------------------------------------------------------------------------


def test_builtin_targets_registered():
    assert {"generic", "postgres", "sqlite", "mysql"} <= set(QuoterFactory.registered_targets())


def test_quoter_for_selects_class():
    assert type(quoter_for()) is ValueQuoter
    assert isinstance(quoter_for(QuotingProfile(target="postgres")), PostgresQuoter)
    assert isinstance(quoter_for(QuotingProfile(target="sqlite")), SQLiteQuoter)
    assert isinstance(quoter_for(QuotingProfile(target="mysql")), MySQLQuoter)


def test_unknown_target_raises():
    with pytest.raises(ProfileConfigError) as exc_info:
        quoter_for(QuotingProfile(target="oracle-test-missing"))
    assert exc_info.value.target == "oracle-test-missing"
    assert "generic" in exc_info.value.registered


def test_register_custom_quoter():
    @QuoterFactory.register("shouting-test")
    class ShoutingQuoter(ValueQuoter):
        @property
        def dialect_name(self) -> str:
            return "shouting-test"

        def quote_string(self, value: str) -> str:
            return super().quote_string(value.upper())

    quoter = quoter_for(QuotingProfile(target="shouting-test"))
    assert isinstance(quoter, ShoutingQuoter)
    assert quoter.quote(["hi", 1]) == "('HI', 1)"


# ---------------------------------------------------------------------------
# QuotingProfile
# ---------------------------------------------------------------------------


def test_profile_defaults():
    profile = QuotingProfile()
    assert profile.target == "generic"
    assert profile.binary_encoding == "latin-1"


def test_profile_rejects_unknown_codec():
    with pytest.raises(pydantic.ValidationError):
        QuotingProfile(binary_encoding="not-a-codec")


def test_profile_rejects_unknown_fields():
    with pytest.raises(pydantic.ValidationError):
        QuotingProfile(placeholder=":")


def test_profile_encoding_used_for_bytes():
    quoter = quoter_for(QuotingProfile(binary_encoding="utf-8"))
    assert quoter.quote("é".encode("utf-8")) == "'é'"


def test_profile_is_frozen():
    profile = QuotingProfile()
    with pytest.raises(pydantic.ValidationError):
        profile.target = "mysql"
