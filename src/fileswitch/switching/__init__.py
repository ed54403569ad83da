"""Location switching: the FileIO facade and its handle wrappers."""

from fileswitch.switching.adapter import SwitchingFileIO
from fileswitch.switching.handles import LocationOverride, SwitchedInputFile, SwitchedOutputFile

__all__ = [
    "SwitchingFileIO",
    "LocationOverride",
    "SwitchedInputFile",
    "SwitchedOutputFile",
]
