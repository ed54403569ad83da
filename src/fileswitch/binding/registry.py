"""Backend registry: names -> factories.

Backends are made available by name at startup instead of being imported
from a class path at configuration time.

Usage:
    from fileswitch.binding import default_registry

    @default_registry.backend("s3")
    class S3FileIO:
        ...

    default_registry.register("adls", lambda: AdlsFileIO(pool_size=8))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

from fileswitch.storage.memory import MemoryFileIO
from fileswitch.storage.protocol import FileIO

type BackendFactory = Callable[[], FileIO]
"""Zero-argument callable producing an uninitialized backend. Usually the class itself."""


class BackendRegistry:
    """Maps backend names to factories.

    Args:
        backends: Initial name -> factory entries.
    """

    def __init__(self, backends: Mapping[str, BackendFactory] | None = None) -> None:
        self._factories: dict[str, BackendFactory] = dict(backends or {})

    def register(self, name: str, factory: BackendFactory, *, replace: bool = False) -> None:
        """Register factory under name.

        Raises:
            ValueError: If name is empty, or taken and replace is False.
        """
        if not name:
            raise ValueError("Backend name must not be empty")
        if name in self._factories and not replace:
            raise ValueError(f"Backend {name!r} is already registered")
        self._factories[name] = factory

    def backend[F: BackendFactory](self, name: str, *, replace: bool = False) -> Callable[[F], F]:
        """Decorator form of register()."""

        def decorator(factory: F) -> F:
            self.register(name, factory, replace=replace)
            return factory

        return decorator

    def unregister(self, name: str) -> None:
        """Remove name. Unknown names are ignored."""
        self._factories.pop(name, None)

    def get(self, name: str) -> BackendFactory | None:
        return self._factories.get(name)

    def names(self) -> list[str]:
        """Registered names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)


default_registry = BackendRegistry({"memory": MemoryFileIO, "MemoryBackend": MemoryFileIO})
"""Process-wide registry consulted when no registry is passed explicitly."""
