"""SwitchingFileIO: location-rewriting FileIO decorator.

Callers use logical locations; the delegate backend receives physical
locations produced by ordered `protocol.mapping.<regex>` rules. Every handle
handed back reports the logical location.

Usage:
    io = SwitchingFileIO()
    io.initialize({
        "io-impl-delegate": "memory",
        "protocol.mapping.^s3a?://": "mem://",
    })
    out = io.new_output("s3://bucket/key")  # backend sees mem://bucket/key
    out.location  # "s3://bucket/key"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from fileswitch.binding.binder import BackendBinder
from fileswitch.config.keys import DELEGATE_KEY
from fileswitch.errors import AdapterStateError
from fileswitch.rules.models import RuleSet
from fileswitch.rules.rewriter import LocationRewriter
from fileswitch.storage.protocol import FileIO, ManifestFile
from fileswitch.switching.handles import SwitchedInputFile, SwitchedOutputFile

if TYPE_CHECKING:
    from fileswitch.config.settings import SwitchingSettings

logger = logging.getLogger(__name__)


class SwitchingFileIO:
    """FileIO that rewrites locations before delegating to another FileIO.

    initialize() must be called exactly once before any other operation.
    After it, all state is read-only and the instance is safe to share
    between threads.

    Args:
        binder: Resolves and initializes the delegate backend.
    """

    def __init__(self, binder: BackendBinder | None = None) -> None:
        self._binder = binder or BackendBinder()
        self._backend: FileIO | None = None
        self._rewriter: LocationRewriter | None = None
        self._properties: Mapping[str, str] = MappingProxyType({})

    @classmethod
    def from_settings(
        cls, settings: SwitchingSettings, binder: BackendBinder | None = None
    ) -> SwitchingFileIO:
        """Create and initialize an instance from SwitchingSettings."""
        io = cls(binder)
        io.initialize(settings.to_properties())
        return io

    def initialize(self, properties: Mapping[str, str]) -> None:
        """Parse rewrite rules and bind the delegate backend.

        Nothing is committed unless every step succeeds.

        Raises:
            AdapterStateError: If already initialized.
            ConfigurationError: On a missing/unknown backend or a bad rule.
            BackendConstructionError: If the backend fails to construct or initialize.
        """
        if self._backend is not None:
            raise AdapterStateError("SwitchingFileIO is already initialized")

        snapshot = dict(properties)
        rules = RuleSet.from_properties(snapshot)
        backend = self._binder.bind(snapshot)

        self._rewriter = LocationRewriter(rules)
        self._properties = MappingProxyType(snapshot)
        self._backend = backend
        logger.info(
            "Initialized SwitchingFileIO: delegate=%r, %d protocol mapping(s)",
            snapshot.get(DELEGATE_KEY),
            len(rules),
        )
        logger.debug("Protocol mappings: %s", [rule.pattern for rule in rules])

    @property
    def initialized(self) -> bool:
        return self._backend is not None

    @property
    def properties(self) -> Mapping[str, str]:
        """Configuration given to initialize(), read-only."""
        return self._properties

    @property
    def backend(self) -> FileIO:
        """The delegate backend.

        Raises:
            AdapterStateError: If not initialized.
        """
        backend, _ = self._require_initialized()
        return backend

    @property
    def rules(self) -> RuleSet:
        _, rewriter = self._require_initialized()
        return rewriter.rules

    def resolve(self, location: str) -> str:
        """Physical location the backend would receive for a logical location."""
        _, rewriter = self._require_initialized()
        return rewriter.rewrite(location)

    def new_input(
        self, location: str | ManifestFile, length: int | None = None
    ) -> SwitchedInputFile:
        """Readable handle for a logical location or a manifest reference.

        For a manifest, its path is the logical location and its length is
        passed to the backend.

        Raises:
            TypeError: If both a manifest and a length are given.
        """
        if not isinstance(location, str):
            if length is not None:
                raise TypeError("length cannot be given together with a manifest")
            location, length = location.path, location.length
        backend, rewriter = self._require_initialized()
        logger.debug("Creating input file for %s", location)
        physical = rewriter.rewrite(location)
        return SwitchedInputFile(backend.new_input(physical, length), location)

    def new_output(self, location: str) -> SwitchedOutputFile:
        """Writable handle for a logical location."""
        backend, rewriter = self._require_initialized()
        logger.debug("Creating output file for %s", location)
        return SwitchedOutputFile(backend.new_output(rewriter.rewrite(location)), location)

    def delete(self, location: str) -> None:
        """Delete the object at a logical location. Backend errors propagate unchanged."""
        backend, rewriter = self._require_initialized()
        logger.debug("Deleting %s", location)
        backend.delete(rewriter.rewrite(location))

    def _require_initialized(self) -> tuple[FileIO, LocationRewriter]:
        if self._backend is None or self._rewriter is None:
            raise AdapterStateError("SwitchingFileIO.initialize() has not been called")
        return self._backend, self._rewriter
