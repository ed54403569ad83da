"""Storage protocol for swappable file backends.

The storage layer abstracts object access by location, enabling:
- In-memory (tests, examples)
- Object stores (S3, ADLS, GCS) behind third-party implementations
- Location-rewriting decorators such as SwitchingFileIO

Usage:
    io = MemoryFileIO()
    io.initialize({})
    with io.new_output("mem://bucket/key").create() as stream:
        stream.write(b"payload")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class InputFile(Protocol):
    """Readable handle to an object at a location."""

    @property
    def location(self) -> str:
        """Location this handle reports."""
        ...

    def get_length(self) -> int:
        """Total length of the object in bytes."""
        ...

    def exists(self) -> bool:
        """Check if the object exists."""
        ...

    def new_stream(self) -> BinaryIO:
        """Open a seekable byte stream over the object."""
        ...


@runtime_checkable
class OutputFile(Protocol):
    """Writable handle to an object at a location."""

    @property
    def location(self) -> str:
        """Location this handle reports."""
        ...

    def create(self) -> BinaryIO:
        """Open a byte sink for a new object.

        Raises:
            FileExistsError: If an object already exists at the location.
        """
        ...

    def create_or_overwrite(self) -> BinaryIO:
        """Open a byte sink, replacing any existing object."""
        ...

    def to_input_file(self) -> InputFile:
        """Readable handle to the same location."""
        ...


@runtime_checkable
class ManifestFile(Protocol):
    """Reference to a file whose path and byte length are already known."""

    @property
    def path(self) -> str: ...

    @property
    def length(self) -> int: ...


@runtime_checkable
class FileIO(Protocol):
    """Abstract file access interface. Implementations handle actual I/O."""

    def initialize(self, properties: Mapping[str, str]) -> None:
        """Configure the implementation. Called once, before any other method."""
        ...

    def new_input(self, location: str, length: int | None = None) -> InputFile:
        """Readable handle for location. A known length spares a metadata lookup."""
        ...

    def new_output(self, location: str) -> OutputFile:
        """Writable handle for location."""
        ...

    def delete(self, location: str) -> None:
        """Delete the object at location."""
        ...
