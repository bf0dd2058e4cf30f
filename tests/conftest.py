# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List

import pytest

if TYPE_CHECKING:
    from waygrid.engine import GridLayoutEngine
    from waygrid.handles import SceneNode


@pytest.fixture
def reference() -> SceneNode:
    """Reference point at (8, 0), half of a 16-unit span."""
    from waygrid.handles import SceneNode

    return SceneNode("reference", position=(8.0, 0.0, 0.0))


@pytest.fixture
def nodes() -> List[SceneNode]:
    """Twelve waypoints at the origin."""
    from waygrid.handles import make_nodes

    return make_nodes(12)


@pytest.fixture
def engine(nodes: List[SceneNode], reference: SceneNode) -> GridLayoutEngine:
    """Engine with 4 points per row, unit row spacing and a fixed seed."""
    from waygrid.config import GridConfig, Settings
    from waygrid.engine import GridLayoutEngine

    return GridLayoutEngine(
        nodes,
        reference,
        GridConfig(points_per_row=4, row_spacing_y=1.0, jitter_amount=0.5),
        settings=Settings(seed=7),
    )


@pytest.fixture
def log_records() -> Iterator[List[dict[str, Any]]]:
    """Capture loguru records emitted during the test."""
    from loguru import logger

    records: List[dict[str, Any]] = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def warnings_of(log_records: List[dict[str, Any]]):
    """Return warning messages captured so far."""

    def _collect() -> List[str]:
        return [r["message"] for r in log_records if r["level"].name == "WARNING"]

    return _collect
