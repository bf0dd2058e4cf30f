# waygrid/state.py
"""Mode flags, derived diagnostics and the per-tick dispatch rules."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Optional


class Command(str, Enum):
    """Operations the tick dispatcher can run."""

    HARD_RESET = "hard_reset"
    GENERATE = "generate"
    CLEAR = "clear"
    RANDOMIZE = "randomize"


class StateFix(str, Enum):
    """Inconsistencies healed by the tick guard."""

    RESET_WITHOUT_SLOTS = "reset_without_slots"
    STALE_POSITIONS_FLAG = "stale_positions_flag"
    RANDOMIZE_UNPLACED = "randomize_unplaced"
    POSITIONS_MISALIGNED = "positions_misaligned"


@dataclass(slots=True)
class ModeFlags:
    """Transient inspector toggles, each consumed by the operation it triggers."""

    want_generate: bool = False
    want_randomize: bool = False
    want_reset: bool = False
    force_reset: bool = False
    keep_slots_on_force_reset: bool = False
    confirm_force_reset: bool = False

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def clear(self) -> None:
        for name in self.names():
            setattr(self, name, False)


@dataclass(slots=True)
class DerivedState:
    """Read-only mirrors shown to the user; never authoritative."""

    positions_exist: bool = False
    slots_positioned: bool = False
    positions_calculated: int = 0

    def clear(self) -> None:
        self.positions_exist = False
        self.slots_positioned = False
        self.positions_calculated = 0


def reconcile(
    flags: ModeFlags,
    derived: DerivedState,
    slot_count: int,
    position_count: int,
) -> List[StateFix]:
    """Correct flags that contradict the current data, in place.

    Explicit user errors (like an invalid row size) are left alone; only
    data-inconsistency cases are healed. Returns the fixes applied.
    """
    fixes: List[StateFix] = []

    if position_count and position_count != slot_count:
        derived.clear()
        fixes.append(StateFix.POSITIONS_MISALIGNED)
        position_count = 0

    if flags.want_reset and slot_count == 0:
        flags.want_reset = False
        fixes.append(StateFix.RESET_WITHOUT_SLOTS)
    if position_count == 0 and derived.positions_exist:
        derived.positions_exist = False
        fixes.append(StateFix.STALE_POSITIONS_FLAG)
    if flags.want_randomize and not derived.slots_positioned:
        flags.want_randomize = False
        fixes.append(StateFix.RANDOMIZE_UNPLACED)

    derived.positions_calculated = position_count
    return fixes


def wants_hard_reset(flags: ModeFlags) -> bool:
    # both interlock flags must be set together
    return flags.force_reset and flags.confirm_force_reset


def primary_command(flags: ModeFlags, slot_count: int) -> Optional[Command]:
    if flags.want_generate:
        return Command.GENERATE
    if flags.want_reset and slot_count > 0:
        return Command.CLEAR
    return None


def wants_randomize(flags: ModeFlags, derived: DerivedState) -> bool:
    return derived.positions_exist and flags.want_randomize and derived.slots_positioned


__all__ = [
    "Command",
    "DerivedState",
    "ModeFlags",
    "StateFix",
    "primary_command",
    "reconcile",
    "wants_hard_reset",
    "wants_randomize",
]
