"""Configuration: derived entries and environment-backed settings.

Usage:
    from fileswitch.config import ConfigDeriver, SwitchingSettings

    expanded = ConfigDeriver().derive(properties)
    settings = SwitchingSettings(io_impl_delegate="memory")
"""

from fileswitch.config.derive import SAS_TOKEN_ENDPOINTS, ConfigDeriver, SuffixPropagation
from fileswitch.config.keys import DELEGATE_KEY
from fileswitch.config.settings import SwitchingSettings

__all__ = [
    "ConfigDeriver",
    "SuffixPropagation",
    "SAS_TOKEN_ENDPOINTS",
    "SwitchingSettings",
    "DELEGATE_KEY",
]
