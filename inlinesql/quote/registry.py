"""Lookup of dialect quoters by ``QuotingProfile.target``.

The package registers ``generic``, ``postgres``, ``sqlite`` and ``mysql`` on
import.  Adapters for other backends subclass
:class:`~inlinesql.quote.base.ValueQuoter`, override the ``quote_*`` steps
their database renders differently, and register the subclass under the
target name their profiles use::

    from inlinesql.quote.registry import QuoterFactory

    @QuoterFactory.register("oracle")
    class OracleQuoter(ValueQuoter):
        def quote_boolean(self, value: bool) -> str:
            return "1" if value else "0"

    quoter_for(QuotingProfile(target="oracle")).quote(True)  # => "1"
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from inlinesql.errors import ProfileConfigError
from inlinesql.quote.base import ValueQuoter
from inlinesql.schema.profile import QuotingProfile

logger = logging.getLogger(__name__)


class QuoterFactory:
    """Process-wide table of quoter classes keyed by profile target.

    Registering a name that already exists replaces the earlier class, so an
    adapter can swap in its own ``postgres`` quoter.  Registration is meant
    to happen at import time; lookups are read-only.
    """

    _quoters: ClassVar[dict[str, type[ValueQuoter]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[ValueQuoter]], type[ValueQuoter]]:
        """Class decorator form of :meth:`register_class`.

        The decorated quoter class is returned unchanged.
        """

        def decorator(quoter_cls: type[ValueQuoter]) -> type[ValueQuoter]:
            cls.register_class(name, quoter_cls)
            return quoter_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, quoter_cls: type[ValueQuoter]) -> None:
        """Make ``quoter_cls`` the quoter for profiles with ``target=name``."""
        logger.debug("Registering quoter %s for target %r", quoter_cls.__name__, name)
        cls._quoters[name] = quoter_cls

    @classmethod
    def create(cls, name: str, profile: QuotingProfile | None = None) -> ValueQuoter:
        """Build the quoter for target ``name``, configured by ``profile``.

        Args:
            name: Target name, normally ``profile.target``.
            profile: Settings passed to the quoter (binary codec); the
                defaults when omitted.

        Returns:
            A new quoter instance.  Quoters are stateless, so callers may
            keep and share it.

        Raises:
            ProfileConfigError: If nothing is registered under ``name``.
                The error lists the targets that are.
        """
        quoter_cls = cls._quoters.get(name)
        if quoter_cls is None:
            registered = sorted(cls._quoters)
            raise ProfileConfigError(
                f"Unsupported quoter target: '{name}'. Registered targets: {registered}.",
                target=name,
                registered=registered,
            )
        return quoter_cls(profile)

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Target names a ``QuotingProfile`` can currently select, sorted."""
        return sorted(cls._quoters)
