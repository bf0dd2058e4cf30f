# waygrid/handles.py
"""In-memory scene handles for headless shells and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from waygrid.protocols import Vec2


@dataclass(slots=True, eq=False)
class SceneNode:
    """Named scene object holding an ``(x, y, z)`` position.

    ``set_position`` only writes x and y; z is kept as the host left it.
    """

    name: str
    position: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))

    def __post_init__(self) -> None:
        arr = np.zeros(3, dtype=np.float64)
        src = np.asarray(self.position, dtype=np.float64).ravel()
        if src.size not in (2, 3):
            raise ValueError(f"position must have 2 or 3 components, got {src.size}")
        arr[: src.size] = src
        self.position = arr

    def get_position(self) -> np.ndarray:
        return self.position.copy()

    def set_position(self, position: Vec2) -> None:
        self.position[0] = float(position[0])
        self.position[1] = float(position[1])

    @property
    def xy(self) -> Vec2:
        return float(self.position[0]), float(self.position[1])


def make_nodes(count: int, prefix: str = "waypoint", origin: Sequence[float] = (0.0, 0.0)) -> List[SceneNode]:
    """Create ``count`` nodes named ``prefix_0 .. prefix_{count-1}`` at ``origin``."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [SceneNode(f"{prefix}_{index}", np.array(origin, dtype=np.float64)) for index in range(count)]


__all__ = ["SceneNode", "make_nodes"]
