# waygrid/engine.py
"""Grid layout engine driven once per editor tick by mode flags."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

import numpy as np

from waygrid.utils.error_tracker import ErrorTracker, error_scope
from waygrid.utils.format import format_positions
from waygrid.utils.logger import get_logger

from .config import GridConfig, Settings, get_settings
from .errors import InvalidGridConfig, LayoutIssue
from .grid import (
    Positions,
    build_grid_positions,
    clamp_points_per_row,
    empty_positions,
    jitter_offsets,
)
from .protocols import Positionable, Vec2, read_xy
from .state import (
    Command,
    DerivedState,
    ModeFlags,
    StateFix,
    primary_command,
    reconcile,
    wants_hard_reset,
    wants_randomize,
)

_log = get_logger()


@dataclass(frozen=True)
class EngineSnapshot:
    """Copy of the engine state for display in the host inspector."""

    config: GridConfig
    flags: ModeFlags
    derived: DerivedState
    slot_count: int
    positions: Positions


@dataclass(frozen=True)
class TickReport:
    """Outcome of one engine tick."""

    tick: int
    commands: Tuple[Command, ...]
    fixes: Tuple[StateFix, ...]
    warnings: Tuple[str, ...]
    snapshot: EngineSnapshot
    failed: bool = False


class GridLayoutEngine:
    """Arrange slot handles on a staggered grid anchored at a reference point.

    The host assigns ``slots`` and ``reference``, writes ``flags`` and calls
    :meth:`tick` once per frame. Operations can also be called directly.
    """

    def __init__(
        self,
        slots: Optional[Sequence[Optional[Positionable]]] = None,
        reference: Optional[Positionable] = None,
        config: Optional[GridConfig] = None,
        *,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        settings = settings or get_settings()
        self.slots: List[Optional[Positionable]] = list(slots or [])
        self.reference = reference
        self.config = config or settings.grid
        self.flags = ModeFlags()
        self.derived = DerivedState()
        self.rng = rng or np.random.default_rng(settings.seed)
        self.issues = ErrorTracker(context="GridLayoutEngine")
        self._positions: Positions = empty_positions()
        self._tick = 0
        self._warnings: List[str] = []
        self._ticking = False

    # ────────────── read-only views ──────────────
    @property
    def positions(self) -> Positions:
        return self._positions.copy()

    @property
    def warnings(self) -> Tuple[str, ...]:
        """Warnings from the last tick or direct operation."""
        return tuple(self._warnings)

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            config=self.config,
            flags=replace(self.flags),
            derived=replace(self.derived),
            slot_count=len(self.slots),
            positions=self._positions.copy(),
        )

    # ────────────── helpers ──────────────
    def _begin(self) -> None:
        # warnings cover one tick, or one direct call outside a tick
        if not self._ticking:
            self._warnings = []

    def _warn(self, issue: LayoutIssue, message: str, label: str = "GRID") -> None:
        # a warning repeated every frame is stored and logged once
        stored = self.issues.add(issue.value, message)
        _log.tag(label, message, level="warning" if stored else "debug")
        self._warnings.append(message)

    @staticmethod
    def _place(handle: Optional[Positionable], xy: Vec2) -> bool:
        # None entries and objects without a position are skipped
        if handle is None or not isinstance(handle, Positionable):
            return False
        handle.set_position((float(xy[0]), float(xy[1])))
        return True

    def _move_all_to_reference(self) -> int:
        if self.reference is None:
            return 0
        target = read_xy(self.reference)
        return sum(self._place(handle, target) for handle in self.slots)

    # ────────────── operations ──────────────
    def generate(self) -> bool:
        """Compute grid positions from the reference point and apply them."""
        self._begin()
        try:
            per_row, clamped = clamp_points_per_row(
                self.config.points_per_row, len(self.slots)
            )
        except InvalidGridConfig as exc:
            self._warn(LayoutIssue.INVALID_CONFIG, str(exc))
            return False

        if not self.slots:
            self._warn(LayoutIssue.INVALID_CONFIG, "no slots to lay out")
            self.flags.want_generate = False
            return False
        if self.reference is None:
            self._warn(LayoutIssue.INVALID_CONFIG, "reference point is not assigned")
            return False

        if clamped:
            self._warn(
                LayoutIssue.CONFIG_CLAMP,
                "cant have more points per row than slots, amount: "
                f"{self.config.points_per_row}; changing to slot count: {per_row}",
            )
            self.config = replace(self.config, points_per_row=per_row)

        self._positions = build_grid_positions(
            read_xy(self.reference),
            len(self.slots),
            per_row,
            self.config.row_spacing_y,
        )
        self.derived.positions_calculated = int(self._positions.shape[0])
        self.derived.positions_exist = True
        self.flags.want_generate = False
        _log.tag(
            "GRID",
            f"rows of {per_row} for {len(self.slots)} slots: "
            f"{format_positions(self._positions)}",
            level="debug",
        )
        self.apply_positions()
        return True

    def apply_positions(self) -> int:
        """Write the computed positions onto their slots; returns slots moved."""
        placed = sum(
            self._place(handle, xy) for handle, xy in zip(self.slots, self._positions)
        )
        self.derived.slots_positioned = True
        _log.tag("GRID", f"placed {placed}/{len(self.slots)} slots")
        return placed

    def randomize(self) -> bool:
        """Jitter each slot around its computed grid position."""
        self._begin()
        if self._positions.shape[0] == 0 or not self.derived.slots_positioned:
            self.flags.want_randomize = False
            return False

        amount = float(self.config.jitter_amount)
        jittered = self._positions + jitter_offsets(
            self._positions.shape[0], amount, self.rng
        )
        placed = sum(self._place(handle, xy) for handle, xy in zip(self.slots, jittered))
        self.flags.want_randomize = False
        _log.tag("JITTER", f"jittered {placed} slots by +-{amount}")
        return True

    def clear(self) -> bool:
        """Drop computed positions and move every slot back to the reference."""
        self._begin()
        self._positions = empty_positions()
        if self.reference is None:
            self._warn(
                LayoutIssue.INVALID_CONFIG,
                "reference point is not assigned; slots left in place",
                label="CLEAR",
            )
            moved = 0
        else:
            moved = self._move_all_to_reference()
        self.derived.clear()
        self.flags.want_reset = False
        _log.tag("CLEAR", f"moved {moved} slots to reference")
        return True

    def hard_reset(self) -> bool:
        """Return all engine state to its initial values.

        Only runs while both ``force_reset`` and ``confirm_force_reset`` are set.
        Slots are moved to the reference when ``keep_slots_on_force_reset`` is
        set, otherwise the slot list is discarded.
        """
        self._begin()
        if not wants_hard_reset(self.flags):
            _log.tag("RESET", "hard reset needs force_reset and confirm_force_reset", level="debug")
            return False

        if self.flags.keep_slots_on_force_reset:
            if self.reference is None:
                self._warn(
                    LayoutIssue.INVALID_CONFIG,
                    "reference point is not assigned; slots left in place",
                    label="RESET",
                )
            moved = self._move_all_to_reference()
            _log.tag("RESET", f"kept {len(self.slots)} slots, moved {moved} to reference")
        else:
            _log.tag("RESET", f"discarded {len(self.slots)} slots")
            self.slots = []

        self._positions = empty_positions()
        self.flags.clear()
        self.derived.clear()
        return True

    # ────────────── tick ──────────────
    def tick(self) -> TickReport:
        """Run one guard-and-dispatch pass; never raises past this call."""
        self._tick += 1
        self._warnings = []
        self._ticking = True
        commands: List[Command] = []
        fixes: List[StateFix] = []
        failures = self.issues.hit_count(LayoutIssue.HANDLE_FAILURE.value)

        try:
            self._dispatch(commands, fixes)
        finally:
            self._ticking = False

        if commands:
            _log.tag("TICK", f"#{self._tick} ran {[c.value for c in commands]}", level="debug")
        return TickReport(
            tick=self._tick,
            commands=tuple(commands),
            fixes=tuple(fixes),
            warnings=tuple(self._warnings),
            failed=self.issues.hit_count(LayoutIssue.HANDLE_FAILURE.value) > failures,
            snapshot=self.snapshot(),
        )

    def _dispatch(self, commands: List[Command], fixes: List[StateFix]) -> None:
        with error_scope(LayoutIssue.HANDLE_FAILURE.value, tracker=self.issues):
            fixes.extend(
                reconcile(
                    self.flags, self.derived, len(self.slots), int(self._positions.shape[0])
                )
            )
            if StateFix.POSITIONS_MISALIGNED in fixes:
                self._positions = empty_positions()
            for fix in fixes:
                self.issues.add(LayoutIssue.STATE_INCONSISTENCY.value, fix.value)
                _log.tag("GUARD", f"healed {fix.value}", level="debug")

            if wants_hard_reset(self.flags):
                if self.hard_reset():
                    commands.append(Command.HARD_RESET)
            else:
                command = primary_command(self.flags, len(self.slots))
                if command is Command.GENERATE and self.generate():
                    commands.append(command)
                elif command is Command.CLEAR and self.clear():
                    commands.append(command)

                if wants_randomize(self.flags, self.derived) and self.randomize():
                    commands.append(Command.RANDOMIZE)


__all__ = ["EngineSnapshot", "GridLayoutEngine", "TickReport"]
