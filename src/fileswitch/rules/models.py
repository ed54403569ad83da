"""Rewrite rule models.

Usage:
    rules = RuleSet.from_properties({"protocol.mapping.^s3://": "mem://"})
    rules.rules[0].apply("s3://bucket/key")  # "mem://bucket/key"
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from fileswitch.errors import ConfigurationError
from fileswitch.rules.template import TemplatePart, expand_template, parse_template

MAPPING_PREFIX = "protocol.mapping."
"""Configuration keys starting with this declare a rule; the rest of the key is the pattern."""


@dataclass(frozen=True, slots=True)
class Rule:
    """A single pattern -> replacement rewrite.

    Build with Rule.compile(); the regex and parsed template are derived from
    pattern and replacement.
    """

    pattern: str
    replacement: str
    regex: re.Pattern[str] = field(repr=False, compare=False)
    template: tuple[TemplatePart, ...] = field(repr=False, compare=False)

    @classmethod
    def compile(cls, pattern: str, replacement: str) -> Rule:
        """Compile a rule from configuration text.

        Raises:
            ConfigurationError: If the pattern is not a valid regex or the
                replacement is malformed.
        """
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f"Invalid mapping pattern {pattern!r}: {e}") from e
        template = parse_template(replacement, regex.groups)
        return cls(pattern=pattern, replacement=replacement, regex=regex, template=template)

    def apply(self, location: str) -> str | None:
        """Rewrite the first match in location.

        Returns:
            The rewritten location, or None if the pattern does not match.

        Raises:
            RewriteError: If the replacement references a missing group.
        """
        match = self.regex.search(location)
        if match is None:
            return None
        replacement = expand_template(self.template, match)
        return location[: match.start()] + replacement + location[match.end() :]


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered rules. Earlier rules take precedence over later ones."""

    rules: tuple[Rule, ...] = ()

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> RuleSet:
        """Collect every `protocol.mapping.<pattern>` entry, in mapping order."""
        return cls(
            tuple(
                Rule.compile(key[len(MAPPING_PREFIX) :], value)
                for key, value in properties.items()
                if key.startswith(MAPPING_PREFIX)
            )
        )

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
