# waygrid/config.py
"""Centralized configuration for the waypoint grid layout toolkit.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Final, Mapping, Optional

from waygrid.utils.io import load_mapping

# ============================================================================
# ENVIRONMENT HELPERS
# ============================================================================


def _env_path(key: str, default: Optional[Path]) -> Optional[Path]:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_int(key: str, default: Optional[int]) -> Optional[int]:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(key)
    return int(value) if value is not None else default


def _env_float(key: str, default: float) -> float:
    """Resolve float from environment variable with fallback."""
    value = os.getenv(key)
    return float(value) if value is not None else default


# ============================================================================
# GRID LAYOUT CONSTANTS
# ============================================================================

GRID_POINTS_PER_ROW_DEFAULT: Final[int] = 1
GRID_ROW_SPACING_Y_DEFAULT: Final[float] = 0.0
GRID_JITTER_AMOUNT_DEFAULT: Final[float] = 0.25

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

LOG_LEVEL_DEFAULT: Final[str] = "INFO"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class GridConfig:
    """Grid layout parameters edited through the host inspector.

    Attributes:
        points_per_row: Waypoints per row, at least 1 for a valid layout
        row_spacing_y: Signed y offset applied for every new row
        jitter_amount: Half-width of the uniform random offset range
    """

    points_per_row: int = GRID_POINTS_PER_ROW_DEFAULT
    row_spacing_y: float = GRID_ROW_SPACING_Y_DEFAULT
    jitter_amount: float = GRID_JITTER_AMOUNT_DEFAULT

    def __post_init__(self) -> None:
        """Validate jitter range."""
        if self.jitter_amount < 0:
            raise ValueError(f"jitter_amount must be >= 0, got {self.jitter_amount}")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging sinks configuration."""

    level: str = LOG_LEVEL_DEFAULT
    log_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate level name."""
        LogLevel(self.level.upper())


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    grid: GridConfig = field(default_factory=GridConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # None leaves the jitter generator unseeded
    seed: Optional[int] = None


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        WAYGRID_POINTS_PER_ROW: Waypoints per grid row
        WAYGRID_ROW_SPACING_Y: Y offset between rows
        WAYGRID_JITTER_AMOUNT: Randomize range
        WAYGRID_SEED: Seed for the jitter generator
        WAYGRID_LOG_LEVEL: Logging level
        WAYGRID_LOG_DIR: Directory for the log file sink
    """
    grid = GridConfig(
        points_per_row=_env_int("WAYGRID_POINTS_PER_ROW", GRID_POINTS_PER_ROW_DEFAULT),
        row_spacing_y=_env_float("WAYGRID_ROW_SPACING_Y", GRID_ROW_SPACING_Y_DEFAULT),
        jitter_amount=_env_float("WAYGRID_JITTER_AMOUNT", GRID_JITTER_AMOUNT_DEFAULT),
    )
    logging = LoggingConfig(
        level=_env_str("WAYGRID_LOG_LEVEL", LOG_LEVEL_DEFAULT),
        log_dir=_env_path("WAYGRID_LOG_DIR", None),
    )
    return Settings(grid=grid, logging=logging, seed=_env_int("WAYGRID_SEED", None))


def settings_from_mapping(data: Mapping[str, Any]) -> Settings:
    """Build Settings from a parsed mapping with optional ``grid``/``logging``/``seed``."""
    unknown = set(data) - {"grid", "logging", "seed"}
    if unknown:
        raise ValueError(f"unknown settings sections: {sorted(unknown)}")

    grid_data = dict(data.get("grid") or {})
    logging_data = dict(data.get("logging") or {})
    if "log_dir" in logging_data and logging_data["log_dir"] is not None:
        logging_data["log_dir"] = Path(logging_data["log_dir"]).expanduser()

    try:
        grid = GridConfig(**grid_data)
        logging = LoggingConfig(**logging_data)
    except TypeError as exc:
        raise ValueError(f"invalid settings field: {exc}") from exc

    seed = data.get("seed")
    return Settings(grid=grid, logging=logging, seed=int(seed) if seed is not None else None)


def load_settings(path: Path | str) -> Settings:
    """Load Settings from a YAML or JSON file."""
    target = Path(path).expanduser().resolve()
    if not target.exists():
        raise FileNotFoundError(f"settings file not found: {target}")
    return settings_from_mapping(load_mapping(target))


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    "load_settings",
    "settings_from_mapping",
    # Main config
    "Settings",
    # Config sections
    "GridConfig",
    "LoggingConfig",
    # Enums
    "LogLevel",
    # Constants
    "GRID_POINTS_PER_ROW_DEFAULT",
    "GRID_ROW_SPACING_Y_DEFAULT",
    "GRID_JITTER_AMOUNT_DEFAULT",
    "LOG_LEVEL_DEFAULT",
]
