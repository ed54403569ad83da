"""Backend resolution and construction.

BackendBinder is the only place a backend name is turned into a live object.
Everything after it sees the FileIO protocol only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from fileswitch.binding.registry import BackendFactory, BackendRegistry, default_registry
from fileswitch.config.derive import ConfigDeriver
from fileswitch.config.keys import DELEGATE_KEY
from fileswitch.errors import BackendConstructionError, ConfigurationError
from fileswitch.storage.protocol import FileIO

logger = logging.getLogger(__name__)


class BackendBinder:
    """Builds and initializes the delegate backend named in configuration.

    Args:
        registry: Where backend names are looked up (default: default_registry).
        deriver: Expands configuration before it reaches the backend.
    """

    def __init__(
        self,
        registry: BackendRegistry | None = None,
        deriver: ConfigDeriver | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        self._deriver = deriver or ConfigDeriver()

    def resolve(self, properties: Mapping[str, str]) -> tuple[str, BackendFactory]:
        """Find the factory for the configured backend name.

        Raises:
            ConfigurationError: If the name is missing, empty or unregistered,
                or names a class that does not implement FileIO.
        """
        name = (properties.get(DELEGATE_KEY) or "").strip()
        if not name:
            raise ConfigurationError(
                f"Delegate FileIO name must be specified in property '{DELEGATE_KEY}'"
            )

        factory = self._registry.get(name)
        if factory is None:
            known = ", ".join(self._registry.names()) or "none"
            raise ConfigurationError(f"Unknown FileIO backend {name!r}. Registered: {known}")

        if isinstance(factory, type) and not issubclass(factory, FileIO):
            raise ConfigurationError(
                f"Backend {name!r} ({factory.__qualname__}) does not implement FileIO"
            )

        return name, factory

    def bind(self, properties: Mapping[str, str]) -> FileIO:
        """Construct the backend and initialize it with derived configuration.

        Returns:
            The initialized backend.

        Raises:
            ConfigurationError: See resolve(); also if the factory returns an
                object that does not implement FileIO. Such an object is
                closed first if it has a close() method.
            BackendConstructionError: If the factory or the backend's
                initialize() raises.
        """
        name, factory = self.resolve(properties)

        try:
            backend = factory()
        except Exception as e:
            raise BackendConstructionError(f"Failed to construct FileIO backend {name!r}") from e

        if not isinstance(backend, FileIO):
            close = getattr(backend, "close", None)
            if callable(close):
                close()
            raise ConfigurationError(
                f"Backend {name!r} produced {type(backend).__qualname__}, "
                "which does not implement FileIO"
            )

        derived = self._deriver.derive(properties)
        try:
            backend.initialize(derived)
        except Exception as e:
            raise BackendConstructionError(f"Failed to initialize FileIO backend {name!r}") from e

        logger.info("Bound FileIO backend %r (%s)", name, type(backend).__qualname__)
        return backend
