"""Configuration settings using Pydantic Settings.

Provides typed construction of the flat property map that SwitchingFileIO
consumes, with environment variable support.

Usage:
    from fileswitch.config import SwitchingSettings

    # Load from environment variables (FILESWITCH_*)
    settings = SwitchingSettings()

    # Or override with explicit values
    settings = SwitchingSettings(
        io_impl_delegate="memory",
        protocol_mappings={"^s3://": "mem://"},
    )
    io = SwitchingFileIO.from_settings(settings)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fileswitch.config.keys import DELEGATE_KEY
from fileswitch.rules.models import MAPPING_PREFIX


class SwitchingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a SwitchingFileIO.

    Attributes:
        io_impl_delegate: Registered name of the backend to delegate to.
        protocol_mappings: Ordered pattern -> replacement rules.
        properties: Extra properties passed through to the backend.

    Environment Variables:
        FILESWITCH_IO_IMPL_DELEGATE
        FILESWITCH_PROTOCOL_MAPPINGS (JSON object, order preserved)
        FILESWITCH_PROPERTIES (JSON object)
    """

    model_config = SettingsConfigDict(
        env_prefix="FILESWITCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    io_impl_delegate: str | None = None
    protocol_mappings: dict[str, str] = Field(default_factory=dict)
    properties: dict[str, str] = Field(default_factory=dict)

    def to_properties(self) -> dict[str, str]:
        """Render into the flat property map understood by SwitchingFileIO.

        Extra properties come first, then mapping rules in declaration order.
        io_impl_delegate, when set, replaces any delegate given in properties.
        """
        rendered = dict(self.properties)
        for pattern, replacement in self.protocol_mappings.items():
            rendered[MAPPING_PREFIX + pattern] = replacement
        if self.io_impl_delegate is not None:
            rendered[DELEGATE_KEY] = self.io_impl_delegate
        return rendered
