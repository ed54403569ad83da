"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from fileswitch import BackendBinder, BackendRegistry, MemoryFileIO, SwitchingFileIO


@pytest.fixture
def memory_backend():
    """MemoryFileIO instance handed out by the registry in `registry`."""
    return MemoryFileIO()


@pytest.fixture
def registry(memory_backend):
    """Registry whose "MemoryBackend" always yields the same `memory_backend`."""
    return BackendRegistry({"MemoryBackend": lambda: memory_backend, "memory": MemoryFileIO})


@pytest.fixture
def binder(registry):
    return BackendBinder(registry=registry)


@pytest.fixture
def make_io(binder):
    """Build an initialized SwitchingFileIO over `memory_backend`."""

    def _make(mappings=None, extra=None):
        properties = {"io-impl-delegate": "MemoryBackend"}
        for pattern, replacement in (mappings or {}).items():
            properties[f"protocol.mapping.{pattern}"] = replacement
        properties.update(extra or {})
        io = SwitchingFileIO(binder)
        io.initialize(properties)
        return io

    return _make
