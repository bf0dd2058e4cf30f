# waygrid/protocols.py
"""Protocol interfaces for the host editor's scene objects.

The engine never depends on a concrete transform type; anything that can
report and accept a 2D position can be laid out.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple, runtime_checkable

Vec2 = Tuple[float, float]


@runtime_checkable
class Positionable(Protocol):
    """Capability interface for a scene object with a 2D position."""

    def get_position(self) -> Sequence[float]:
        """Return the current position; only the first two components are used."""
        ...

    def set_position(self, position: Vec2) -> None:
        """Move the object to ``(x, y)``."""
        ...


def read_xy(handle: Positionable) -> Vec2:
    """Return the ``(x, y)`` part of a handle's position as floats."""
    pos = handle.get_position()
    return float(pos[0]), float(pos[1])


__all__ = ["Positionable", "Vec2", "read_xy"]
