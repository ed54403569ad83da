"""fileswitch: location-rewriting FileIO adapter.

Callers address objects by logical location; a delegate backend receives
physical locations rewritten by ordered regex rules, and every returned
handle still reports the logical location.

Usage:
    from fileswitch import SwitchingFileIO

    io = SwitchingFileIO()
    io.initialize({
        "io-impl-delegate": "memory",
        "protocol.mapping.^s3://": "mem://",
    })
    with io.new_output("s3://bucket/key").create() as stream:
        stream.write(b"data")
    io.new_input("s3://bucket/key").location  # "s3://bucket/key"
"""

__version__ = "0.1.0"

# Binding
from fileswitch.binding import BackendBinder, BackendRegistry, default_registry

# Configuration
from fileswitch.config import DELEGATE_KEY, ConfigDeriver, SwitchingSettings

# Errors
from fileswitch.errors import (
    AdapterStateError,
    BackendConstructionError,
    ConfigurationError,
    RewriteError,
)

# Rules
from fileswitch.rules import MAPPING_PREFIX, LocationRewriter, Rule, RuleSet

# Storage
from fileswitch.storage import (
    FileIO,
    InputFile,
    ManifestFile,
    ManifestRef,
    MemoryFileIO,
    OutputFile,
)

# Switching
from fileswitch.switching import SwitchedInputFile, SwitchedOutputFile, SwitchingFileIO

__all__ = [
    # Version
    "__version__",
    # Switching
    "SwitchingFileIO",
    "SwitchedInputFile",
    "SwitchedOutputFile",
    # Rules
    "MAPPING_PREFIX",
    "Rule",
    "RuleSet",
    "LocationRewriter",
    # Configuration
    "DELEGATE_KEY",
    "ConfigDeriver",
    "SwitchingSettings",
    # Binding
    "BackendBinder",
    "BackendRegistry",
    "default_registry",
    # Storage
    "FileIO",
    "InputFile",
    "OutputFile",
    "ManifestFile",
    "ManifestRef",
    "MemoryFileIO",
    # Errors
    "ConfigurationError",
    "RewriteError",
    "BackendConstructionError",
    "AdapterStateError",
]
