# waygrid/grid.py
"""Staggered 2D grid generation utilities."""

from __future__ import annotations

from typing import Tuple

import numpy as np
import numpy.typing as npt

from .errors import InvalidGridConfig
from .protocols import Vec2

Positions = npt.NDArray[np.float64]


def empty_positions() -> Positions:
    return np.zeros((0, 2), dtype=np.float64)


def clamp_points_per_row(points_per_row: int, slot_count: int) -> Tuple[int, bool]:
    """Return ``(points_per_row, clamped)`` limited to ``slot_count``.

    Raises InvalidGridConfig when ``points_per_row`` is below 1. With no slots
    there is nothing to clamp against and the value is returned unchanged.
    """
    if points_per_row <= 0:
        raise InvalidGridConfig(
            f"cant have less than 1 point per row, got {points_per_row}"
        )
    if 0 < slot_count < points_per_row:
        return int(slot_count), True
    return int(points_per_row), False


def row_spacing(reference_x: float, points_per_row: int) -> Tuple[float, float]:
    """Return ``(spacing, variation)`` along x for a row of ``points_per_row``.

    The reference x is taken as half the usable horizontal span, so the span
    is ``2 * |reference_x|``. ``variation`` is the indent of every second row.
    """
    h_length = abs(float(reference_x)) * 2.0
    spacing = h_length / (points_per_row + 1)
    return spacing, spacing / 2.0


def build_grid_positions(
    reference: Vec2,
    count: int,
    points_per_row: int,
    row_spacing_y: float,
) -> Positions:
    """Return an ``(count, 2)`` array of staggered grid positions.

    Rows hold ``points_per_row`` points and start at the reference y, moving by
    ``row_spacing_y`` per row. Odd rows are shifted right by half a spacing::

          .   .   .   .
        .   .   .   .
          .   .   .   .
    """
    if points_per_row <= 0:
        raise InvalidGridConfig(
            f"cant have less than 1 point per row, got {points_per_row}"
        )
    if count <= 0:
        return empty_positions()

    ref_x, ref_y = float(reference[0]), float(reference[1])
    spacing, variation = row_spacing(ref_x, points_per_row)
    x_start = ref_x - variation / 2.0

    rows, cols = np.divmod(np.arange(count), points_per_row)
    indent = np.where(rows % 2 == 1, variation, 0.0)
    xs = x_start + indent + spacing * (cols + 1)
    ys = ref_y + rows * float(row_spacing_y)
    return np.column_stack([xs, ys]).astype(np.float64)


def jitter_offsets(count: int, amount: float, rng: np.random.Generator) -> Positions:
    """Independent uniform offsets in ``[-amount, amount]`` for both axes."""
    if amount < 0:
        raise InvalidGridConfig(f"jitter amount must be >= 0, got {amount}")
    return rng.uniform(-amount, amount, size=(count, 2))


__all__ = [
    "Positions",
    "build_grid_positions",
    "clamp_points_per_row",
    "empty_positions",
    "jitter_offsets",
    "row_spacing",
]
