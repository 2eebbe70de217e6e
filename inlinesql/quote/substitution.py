"""Positional ``?`` substitution over a SQL template.

Meant for adapters whose transport has no bind-parameter support.  Every
``?`` in the template is a placeholder, including one that sits inside a
string literal already written into the template; callers must not put
literal question marks in template text.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from inlinesql.errors import BindingMismatchError
from inlinesql.quote.base import ValueQuoter

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"

_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER))


def count_placeholders(template: str) -> int:
    """Return the number of placeholder markers in ``template``."""
    return template.count(PLACEHOLDER)


def escape_sql(template: str, arguments: Sequence[Any], quoter: ValueQuoter) -> str:
    """Replace each ``?`` in ``template`` with the next quoted argument.

    Examples::

        escape_sql("SELECT * FROM zoos", [], quoter)
        # => "SELECT * FROM zoos"

        escape_sql("SELECT * FROM zoos WHERE name = ? AND acreage > ?", ["Dallas", 40], quoter)
        # => "SELECT * FROM zoos WHERE name = 'Dallas' AND acreage > 40"

    Args:
        template: SQL text with positional ``?`` markers.
        arguments: One value per marker, in order.  Not modified.
        quoter: Quoter used to render each value.

    Returns:
        The template with every marker replaced by a literal.

    Raises:
        BindingMismatchError: If the marker count and argument count differ.
        UnsupportedValueError: If an argument cannot be quoted.
    """
    values = list(arguments)
    pending = iter(values)
    supplied = len(values)
    replacements = 0
    mismatch = False

    def _substitute(match: re.Match) -> str:
        nonlocal replacements, mismatch
        replacements += 1
        if replacements > supplied:
            mismatch = True
            return match.group(0)
        return quoter.quote(next(pending))

    sql = _PLACEHOLDER_RE.sub(_substitute, template)

    if replacements < supplied or mismatch:
        raise BindingMismatchError(supplied, replacements)

    logger.debug(
        "Inlined %d value(s) into SQL template using %s quoter",
        replacements,
        quoter.dialect_name,
    )
    return sql


@dataclass(frozen=True)
class SQLTemplate:
    """Command text built once and rendered per execution.

    Attributes:
        text: SQL with positional ``?`` markers.
        quoter: Quoter used by :meth:`escape`; the generic quoter by default.
    """

    text: str
    quoter: ValueQuoter = field(default_factory=ValueQuoter)

    @property
    def placeholder_count(self) -> int:
        return count_placeholders(self.text)

    def escape(self, *args: Any) -> str:
        """Return :attr:`text` with ``args`` inlined in order."""
        return escape_sql(self.text, args, self.quoter)
