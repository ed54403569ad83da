"""Storage value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ManifestRef:
    """Path and byte length of a manifest, as recorded by the table that lists it.

    Satisfies the ManifestFile protocol.
    """

    path: str
    length: int
