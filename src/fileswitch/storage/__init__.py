"""File access protocols and the in-memory backend."""

from fileswitch.storage.memory import MemoryFileIO, MemoryInputFile, MemoryOutputFile
from fileswitch.storage.models import ManifestRef
from fileswitch.storage.protocol import FileIO, InputFile, ManifestFile, OutputFile

__all__ = [
    # Protocols
    "FileIO",
    "InputFile",
    "OutputFile",
    "ManifestFile",
    # Types
    "ManifestRef",
    # Backends
    "MemoryFileIO",
    "MemoryInputFile",
    "MemoryOutputFile",
]
