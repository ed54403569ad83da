"""Derived configuration entries.

Some backends want the same setting under several related keys. A derivation
rule synthesizes the extra keys from the ones the caller supplied; explicit
entries always win over derived ones.

Usage:
    deriver = ConfigDeriver()
    deriver.derive({"adls.sas-token.acct": "sv=..."})
    # {"adls.sas-token.acct": "sv=...",
    #  "adls.sas-token.acct.blob.core.windows.net": "sv=..."}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SuffixPropagation:
    """Copy prefixed keys to their canonical suffixed form.

    A key is a source when it starts with `prefix` and ends with none of
    `known_suffixes`. Its derived key is `key + canonical_suffix`.
    """

    prefix: str
    known_suffixes: tuple[str, ...]
    canonical_suffix: str

    def candidates(self, properties: Mapping[str, str]) -> Iterator[tuple[str, str]]:
        """Yield (derived_key, value) for every source key in properties."""
        for key, value in properties.items():
            if key.startswith(self.prefix) and not key.endswith(self.known_suffixes):
                yield key + self.canonical_suffix, value


SAS_TOKEN_ENDPOINTS = SuffixPropagation(
    prefix="adls.sas-token",
    known_suffixes=(".blob.core.windows.net", ".dfs.core.windows.net"),
    canonical_suffix=".blob.core.windows.net",
)
"""ADLS SAS tokens given per account are also published for the blob endpoint."""


class ConfigDeriver:
    """Expands a configuration map with entries implied by existing ones.

    Args:
        rules: Derivation rules, applied in order. Defaults to SAS token
            endpoint propagation.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[SuffixPropagation, ...] = (SAS_TOKEN_ENDPOINTS,)) -> None:
        self._rules = rules

    def derive(self, properties: Mapping[str, str]) -> dict[str, str]:
        """Return a new dict of properties plus derived entries.

        The input is not modified. A derived key is skipped when the key is
        already present, whether set by the caller or by an earlier rule.
        """
        derived = dict(properties)
        for rule in self._rules:
            for key, value in rule.candidates(properties):
                if key in derived:
                    continue
                derived[key] = value
                # Values are credentials; log the key only.
                logger.info("Added derived property %s", key)
        return derived
