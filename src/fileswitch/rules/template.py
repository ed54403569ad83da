"""Replacement template parsing and expansion.

Templates use the `$n` / `${name}` group reference syntax found in the
catalog property files this adapter reads:

    "protocol.mapping.^s3a?://([^/]+)/" = "abfss://$1@account.dfs.core.windows.net/"

A backslash makes the next character literal (`\\$` is a dollar sign).
Multi-digit references grow only while the number stays within the pattern's
group count, so `$10` against a one-group pattern is group 1 followed by "0".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from fileswitch.errors import ConfigurationError, RewriteError

_GROUP_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class GroupRef:
    """Reference to a capture group by number or name."""

    key: int | str


type TemplatePart = str | GroupRef
"""Literal text or a group reference."""


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_template(template: str, group_count: int) -> tuple[TemplatePart, ...]:
    """Split a replacement template into literal text and group references.

    Args:
        template: Replacement text from configuration.
        group_count: Number of capture groups in the rule's pattern.

    Returns:
        Parts in template order, adjacent literals merged.

    Raises:
        ConfigurationError: On a dangling escape, a bare `$`, or a bad `${...}`.
    """
    parts: list[TemplatePart] = []
    literal: list[str] = []
    i = 0
    end = len(template)

    while i < end:
        ch = template[i]
        if ch == "\\":
            i += 1
            if i == end:
                raise ConfigurationError(f"Replacement {template!r} ends with a dangling escape")
            literal.append(template[i])
            i += 1
            continue
        if ch != "$":
            literal.append(ch)
            i += 1
            continue

        i += 1
        if i == end:
            raise ConfigurationError(f"Replacement {template!r} ends with a bare '$'")

        ref: int | str
        if template[i] == "{":
            close = template.find("}", i)
            if close == -1:
                raise ConfigurationError(f"Replacement {template!r} has an unterminated '${{'")
            name = template[i + 1 : close]
            if not _GROUP_NAME.fullmatch(name):
                raise ConfigurationError(
                    f"Replacement {template!r} has invalid group name {name!r}"
                )
            ref = name
            i = close + 1
        elif _is_ascii_digit(template[i]):
            ref = int(template[i])
            i += 1
            while i < end and _is_ascii_digit(template[i]):
                candidate = ref * 10 + int(template[i])
                if candidate > group_count:
                    break
                ref = candidate
                i += 1
        else:
            raise ConfigurationError(
                f"Replacement {template!r} has illegal group reference at '${template[i]}'"
            )

        if literal:
            parts.append("".join(literal))
            literal = []
        parts.append(GroupRef(ref))

    if literal:
        parts.append("".join(literal))
    return tuple(parts)


def expand_template(parts: tuple[TemplatePart, ...], match: re.Match[str]) -> str:
    """Render parsed template parts against a match.

    Groups that did not participate in the match expand to "".

    Raises:
        RewriteError: If a part references a group the pattern does not define.
    """
    out: list[str] = []
    for part in parts:
        if isinstance(part, str):
            out.append(part)
            continue
        try:
            value = match.group(part.key)
        except IndexError:
            raise RewriteError(
                f"Pattern {match.re.pattern!r} has no group {part.key!r}"
            ) from None
        if value is not None:
            out.append(value)
    return "".join(out)
