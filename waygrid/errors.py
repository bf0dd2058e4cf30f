# waygrid/errors.py
"""Issue taxonomy for grid layout operations."""

from __future__ import annotations

from enum import Enum


class LayoutIssue(str, Enum):
    """Kinds of problems the engine reports instead of raising."""

    INVALID_CONFIG = "invalid_config"
    CONFIG_CLAMP = "config_clamp"
    STATE_INCONSISTENCY = "state_inconsistency"
    HANDLE_FAILURE = "handle_failure"


class InvalidGridConfig(ValueError):
    """Grid parameters that cannot produce a layout, e.g. ``points_per_row <= 0``."""


__all__ = ["LayoutIssue", "InvalidGridConfig"]
