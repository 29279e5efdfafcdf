"""Configuration loading."""

from tdeetrack.config.settings import (
    AnalysisConfig,
    DataConfig,
    DefaultsConfig,
    Settings,
    default_config_path,
    get_settings,
    reload_settings,
)

__all__ = [
    "AnalysisConfig",
    "DataConfig",
    "DefaultsConfig",
    "Settings",
    "default_config_path",
    "get_settings",
    "reload_settings",
]
