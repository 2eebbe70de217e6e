"""Shared pytest fixtures for inlineSQL unit tests."""
from __future__ import annotations

from datetime import timedelta, timezone

import pytest

from inlinesql import QuotingProfile, ValueQuoter, quoter_for


@pytest.fixture(scope="session")
def generic() -> ValueQuoter:
    """Standard-SQL quoter shared across tests (quoters are stateless)."""
    return quoter_for(QuotingProfile())


@pytest.fixture(scope="session")
def postgres() -> ValueQuoter:
    return quoter_for(QuotingProfile(target="postgres"))


@pytest.fixture(scope="session")
def sqlite() -> ValueQuoter:
    return quoter_for(QuotingProfile(target="sqlite"))


@pytest.fixture(scope="session")
def mysql() -> ValueQuoter:
    return quoter_for(QuotingProfile(target="mysql"))


@pytest.fixture(scope="session")
def ist() -> timezone:
    """India Standard Time, a +05:30 offset."""
    return timezone(timedelta(hours=5, minutes=30))


@pytest.fixture(scope="session")
def pst() -> timezone:
    """Pacific Standard Time, a -08:00 offset."""
    return timezone(timedelta(hours=-8))
