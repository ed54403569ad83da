"""Handle decorators that report the caller's logical location.

A backend handle knows only the physical location it was opened with. These
wrappers forward every operation to it and answer `location` with the
logical location the caller asked for.
"""

from __future__ import annotations

from typing import Any, BinaryIO

from fileswitch.storage.protocol import InputFile, OutputFile


class LocationOverride[H]:
    """Base for handle wrappers that replace the reported location."""

    __slots__ = ("_delegate", "_location")

    def __init__(self, delegate: H, location: str) -> None:
        self._delegate = delegate
        self._location = location

    @property
    def location(self) -> str:
        """Logical location, never the backend's physical one."""
        return self._location

    def unwrap(self) -> H:
        """Return the backend handle."""
        return self._delegate

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not defined here: backend extras.
        if name in LocationOverride.__slots__:
            raise AttributeError(name)
        return getattr(self._delegate, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._location!r} -> {self._delegate!r})"


class SwitchedInputFile(LocationOverride[InputFile]):
    """Readable handle reporting a logical location."""

    __slots__ = ()

    def get_length(self) -> int:
        return self._delegate.get_length()

    def exists(self) -> bool:
        return self._delegate.exists()

    def new_stream(self) -> BinaryIO:
        return self._delegate.new_stream()


class SwitchedOutputFile(LocationOverride[OutputFile]):
    """Writable handle reporting a logical location."""

    __slots__ = ()

    def create(self) -> BinaryIO:
        return self._delegate.create()

    def create_or_overwrite(self) -> BinaryIO:
        return self._delegate.create_or_overwrite()

    def to_input_file(self) -> SwitchedInputFile:
        """Readable handle for the same object, still reporting the logical location."""
        return SwitchedInputFile(self._delegate.to_input_file(), self._location)
