# waygrid/__init__.py
"""Editor-time waypoint grid layout toolkit."""

from __future__ import annotations

from waygrid.config import GridConfig, Settings, get_settings, load_settings
from waygrid.engine import EngineSnapshot, GridLayoutEngine, TickReport
from waygrid.handles import SceneNode, make_nodes
from waygrid.protocols import Positionable
from waygrid.shell import EditorShell
from waygrid.state import Command, DerivedState, ModeFlags

__all__ = [
    "Command",
    "DerivedState",
    "EditorShell",
    "EngineSnapshot",
    "GridConfig",
    "GridLayoutEngine",
    "ModeFlags",
    "Positionable",
    "SceneNode",
    "Settings",
    "TickReport",
    "get_settings",
    "load_settings",
    "make_nodes",
]
