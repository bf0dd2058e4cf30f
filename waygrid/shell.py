# waygrid/shell.py
"""Headless editor shell that drives the layout engine tick by tick."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Optional, Sequence

from waygrid.utils.logger import configure, get_logger
from waygrid.utils.progress import track

from .config import Settings, get_settings
from .engine import GridLayoutEngine, TickReport
from .protocols import Positionable
from .state import ModeFlags

_log = get_logger()


class EditorShell:
    """Stand-in for the host editor: edits inspector fields and polls the engine."""

    def __init__(
        self,
        engine: Optional[GridLayoutEngine] = None,
        *,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.engine = engine or GridLayoutEngine(settings=self.settings)
        self.reports: List[TickReport] = []

    @classmethod
    def from_settings(cls, settings: Settings, *, configure_logging: bool = True) -> "EditorShell":
        if configure_logging:
            configure(level=settings.logging.level, log_dir=settings.logging.log_dir)
        return cls(settings=settings)

    def assign(
        self,
        slots: Sequence[Optional[Positionable]],
        reference: Optional[Positionable],
    ) -> None:
        self.engine.slots = list(slots)
        self.engine.reference = reference
        _log.tag("SHELL", f"assigned {len(self.engine.slots)} slots")

    def toggle(self, **flags: bool) -> None:
        """Set inspector toggles by name, e.g. ``toggle(want_generate=True)``."""
        known = ModeFlags.names()
        for name, value in flags.items():
            if name not in known:
                raise KeyError(f"unknown flag {name!r}; expected one of {known}")
            setattr(self.engine.flags, name, bool(value))

    def edit_grid(self, **changes: Any) -> None:
        """Change grid fields the way an inspector edit would."""
        self.engine.config = replace(self.engine.config, **changes)
        _log.tag("SHELL", f"grid config {self.engine.config}")

    def step(self) -> TickReport:
        report = self.engine.tick()
        self.reports.append(report)
        return report

    def run(self, ticks: int = 1, *, show_progress: bool = False) -> List[TickReport]:
        """Run ``ticks`` editor frames and return their reports."""
        if ticks < 0:
            raise ValueError(f"ticks must be >= 0, got {ticks}")
        return [
            self.step()
            for _ in track(
                range(ticks), description="ticks", total=ticks, enabled=show_progress
            )
        ]


__all__ = ["EditorShell"]
