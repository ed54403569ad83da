"""In-memory FileIO implementation.

Dict-based object store suitable for single-process use and testing.
Objects become visible when the stream that wrote them is closed.

Usage:
    io = MemoryFileIO()
    io.initialize({})
    with io.new_output("mem://bucket/key").create() as stream:
        stream.write(b"hello")
    assert io.new_input("mem://bucket/key").get_length() == 5
"""

from __future__ import annotations

import io
from collections.abc import Callable, Mapping
from types import MappingProxyType


class _CommitOnClose(io.BytesIO):
    """Byte sink that hands its buffer to a callback when closed.

    Leaving a `with` block through an exception, or dropping the stream
    without closing it, discards the buffer.
    """

    def __init__(self, commit: Callable[[bytes], None]) -> None:
        super().__init__()
        self._commit = commit
        self._aborted = False

    def abort(self) -> None:
        """Close without committing."""
        self._aborted = True
        self.close()

    def close(self) -> None:
        if not self.closed and not self._aborted:
            self._commit(self.getvalue())
        super().close()

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.abort()
        else:
            self.close()

    def __del__(self) -> None:
        self._aborted = True


class MemoryInputFile:
    """Readable handle over MemoryFileIO's object table.

    Args:
        objects: Shared object table of the owning MemoryFileIO.
        location: Location of the object.
        length: Known length, reported without consulting the table.
    """

    __slots__ = ("_objects", "_location", "_length")

    def __init__(self, objects: dict[str, bytes], location: str, length: int | None = None):
        self._objects = objects
        self._location = location
        self._length = length

    @property
    def location(self) -> str:
        return self._location

    def get_length(self) -> int:
        """Length in bytes.

        Raises:
            FileNotFoundError: If no length was supplied and the object is missing.
        """
        if self._length is not None:
            return self._length
        return len(self._read())

    def exists(self) -> bool:
        return self._location in self._objects

    def new_stream(self) -> io.BytesIO:
        return io.BytesIO(self._read())

    def _read(self) -> bytes:
        try:
            return self._objects[self._location]
        except KeyError:
            raise FileNotFoundError(f"No object at {self._location}") from None


class MemoryOutputFile:
    """Writable handle over MemoryFileIO's object table."""

    __slots__ = ("_objects", "_location")

    def __init__(self, objects: dict[str, bytes], location: str):
        self._objects = objects
        self._location = location

    @property
    def location(self) -> str:
        return self._location

    def create(self) -> io.BytesIO:
        """Open a sink for a new object.

        Raises:
            FileExistsError: If an object already exists at the location.
        """
        if self._location in self._objects:
            raise FileExistsError(f"Object already exists at {self._location}")
        return self.create_or_overwrite()

    def create_or_overwrite(self) -> io.BytesIO:
        return _CommitOnClose(self._store)

    def to_input_file(self) -> MemoryInputFile:
        return MemoryInputFile(self._objects, self._location)

    def _store(self, data: bytes) -> None:
        self._objects[self._location] = data


class MemoryFileIO:
    """Simple in-memory FileIO using a dict keyed by location.

    Structure:
        _objects[location] = object bytes

    Every location handed to new_input/new_output/delete is appended to
    `requested`, so callers can observe exactly what the backend was asked for.
    The list is never trimmed on its own; long-lived instances should call
    clear_requested().
    """

    def __init__(self) -> None:
        self._objects: dict[str, bytes] = {}
        self._properties: Mapping[str, str] = MappingProxyType({})
        self.requested: list[str] = []

    @property
    def properties(self) -> Mapping[str, str]:
        """Configuration received by initialize()."""
        return self._properties

    def initialize(self, properties: Mapping[str, str]) -> None:
        self._properties = MappingProxyType(dict(properties))

    def new_input(self, location: str, length: int | None = None) -> MemoryInputFile:
        self.requested.append(location)
        return MemoryInputFile(self._objects, location, length)

    def new_output(self, location: str) -> MemoryOutputFile:
        self.requested.append(location)
        return MemoryOutputFile(self._objects, location)

    def delete(self, location: str) -> None:
        """Delete the object at location.

        Raises:
            FileNotFoundError: If nothing is stored at location.
        """
        self.requested.append(location)
        try:
            del self._objects[location]
        except KeyError:
            raise FileNotFoundError(f"No object at {location}") from None

    def clear_requested(self) -> None:
        self.requested.clear()

    def locations(self) -> list[str]:
        """Locations of all stored objects, in write order."""
        return list(self._objects)
