"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".tdeetrack"


def _default_entries_path() -> Path:
    return _default_config_dir() / "entries.csv"


def _default_goal_path() -> Path:
    return _default_config_dir() / "goal.yaml"


@dataclass
class AnalysisConfig:
    """Tuning constants for the estimators."""

    adaptive_window_days: int = 21
    rolling_window_days: int = 14
    min_entries: int = 7
    setup_phase_days: int = 14
    ema_smoothing: float = 0.1
    tdee_min: float = 800.0
    tdee_max: float = 6000.0
    fallback_multiplier: float = 14.0
    on_track_tolerance: float = 1.5

    @property
    def tdee_bounds(self) -> tuple[float, float]:
        return (self.tdee_min, self.tdee_max)


@dataclass
class DataConfig:
    """Where the CLI looks for input files."""

    entries_path: Path = field(default_factory=_default_entries_path)
    goal_path: Path = field(default_factory=_default_goal_path)


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table" or "json"


# Keys under 'analysis' and how to coerce them
_ANALYSIS_FIELDS = {
    "adaptive_window_days": int,
    "rolling_window_days": int,
    "min_entries": int,
    "setup_phase_days": int,
    "ema_smoothing": float,
    "tdee_min": float,
    "tdee_max": float,
    "fallback_multiplier": float,
    "on_track_tolerance": float,
}


@dataclass
class Settings:
    """Main application settings."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    data: DataConfig = field(default_factory=DataConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.tdeetrack/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse analysis config
        if "analysis" in data:
            analysis_data = data["analysis"] or {}
            for key, cast in _ANALYSIS_FIELDS.items():
                if key in analysis_data:
                    setattr(settings.analysis, key, cast(analysis_data[key]))

        # Parse data file locations
        if "data" in data:
            file_data = data["data"] or {}
            if file_data.get("entries_path"):
                settings.data.entries_path = Path(file_data["entries_path"]).expanduser()
            if file_data.get("goal_path"):
                settings.data.goal_path = Path(file_data["goal_path"]).expanduser()

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.tdeetrack/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        return {
            "analysis": {key: getattr(self.analysis, key) for key in _ANALYSIS_FIELDS},
            "data": {
                "entries_path": str(self.data.entries_path),
                "goal_path": str(self.data.goal_path),
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }


def default_config_path() -> Path:
    return _default_config_dir() / "config.yaml"


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
