"""Scan configuration.

ScanConfig is a frozen dataclass, immutable after creation and passed
explicitly to whatever needs it. There is no module-level mutable state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Configuration shared by the declaration decoder, the adapter and the CLI.

    All fields have sensible defaults. Override what you need::

        config = ScanConfig(metadata_key="semver", separator=";")
    """

    # Dataclass field metadata key holding a declaration
    metadata_key: str = "version"

    # Separator between the elements of a declaration ("0,number,.1")
    separator: str = ","

    # Level applied to the "verscan" logger by the CLI
    log_level: str = "warning"


DEFAULT_CONFIG = ScanConfig()
