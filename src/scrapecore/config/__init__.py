"""Configuration models and the lazily loaded global settings."""

from .config import (
    AlternateReadabilityConfig,
    Config,
    FetcherConfig,
    MonitoringConfig,
    ReadabilityConfig,
    RulesConfig,
    find_config_file,
    settings,
)

__all__ = [
    "AlternateReadabilityConfig",
    "Config",
    "FetcherConfig",
    "MonitoringConfig",
    "ReadabilityConfig",
    "RulesConfig",
    "find_config_file",
    "settings",
]
