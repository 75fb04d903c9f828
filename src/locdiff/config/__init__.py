"""Configuration loading, schema, and defaults."""

from locdiff.config.loader import ConfigError, load_config
from locdiff.config.schema import LocDiffConfig

__all__ = [
    "ConfigError",
    "LocDiffConfig",
    "load_config",
]
