"""Logical -> physical location rewriting."""

from __future__ import annotations

import logging

from fileswitch.rules.models import RuleSet

logger = logging.getLogger(__name__)


class LocationRewriter:
    """Applies the first matching rule of a RuleSet to a location.

    Rules are tried in declaration order and never chained. A location that
    matches no rule is returned as the same object.

    Args:
        rules: Rules to apply. Held for the rewriter's lifetime.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: RuleSet) -> None:
        self._rules = rules

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def rewrite(self, location: str) -> str:
        """Map a logical location to its physical location.

        Raises:
            RewriteError: If the matching rule's replacement is unusable.
        """
        for rule in self._rules:
            rewritten = rule.apply(location)
            if rewritten is not None:
                logger.debug("Rewrote %r to %r via %r", location, rewritten, rule.pattern)
                return rewritten
        return location
