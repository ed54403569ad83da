"""Backend binding: name registry and construction."""

from fileswitch.binding.binder import BackendBinder
from fileswitch.binding.registry import BackendFactory, BackendRegistry, default_registry

__all__ = [
    "BackendBinder",
    "BackendFactory",
    "BackendRegistry",
    "default_registry",
]
