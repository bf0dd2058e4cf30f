# tests/test_shell.py
"""Tests for the headless editor shell."""

from __future__ import annotations

from typing import List

import numpy as np
import pytest

from waygrid.config import GridConfig, Settings
from waygrid.handles import SceneNode, make_nodes
from waygrid.shell import EditorShell
from waygrid.state import Command


@pytest.fixture
def shell(nodes: List[SceneNode], reference: SceneNode) -> EditorShell:
    """Shell with twelve assigned waypoints."""
    settings = Settings(grid=GridConfig(points_per_row=4, row_spacing_y=1.0), seed=5)
    shell = EditorShell(settings=settings)
    shell.assign(nodes, reference)
    return shell


def test_toggle_sets_flags(shell: EditorShell) -> None:
    """Test flags are set by field name."""
    shell.toggle(want_generate=True, want_randomize=True)

    assert shell.engine.flags.want_generate
    assert shell.engine.flags.want_randomize


def test_toggle_unknown_flag(shell: EditorShell) -> None:
    """Test unknown flag names raise KeyError."""
    with pytest.raises(KeyError, match="unknown flag"):
        shell.toggle(are_you_sure=True)


def test_edit_grid(shell: EditorShell) -> None:
    """Test inspector edits replace the engine config."""
    shell.edit_grid(points_per_row=2, jitter_amount=0.1)

    assert shell.engine.config == GridConfig(points_per_row=2, row_spacing_y=1.0, jitter_amount=0.1)


def test_run_collects_reports(shell: EditorShell) -> None:
    """Test run returns one report per tick and keeps history."""
    shell.toggle(want_generate=True)
    reports = shell.run(3)

    assert [r.tick for r in reports] == [1, 2, 3]
    assert reports[0].commands == (Command.GENERATE,)
    assert reports[1].commands == ()
    assert shell.reports == reports


def test_run_with_progress(shell: EditorShell) -> None:
    """Test the progress bar path runs the same ticks."""
    assert len(shell.run(2, show_progress=True)) == 2


def test_run_rejects_negative(shell: EditorShell) -> None:
    """Test negative tick counts are rejected."""
    with pytest.raises(ValueError):
        shell.run(-1)


def test_editor_session(shell: EditorShell, nodes: List[SceneNode], reference: SceneNode) -> None:
    """Test a generate, randomize, reset and hard reset session."""
    shell.toggle(want_generate=True)
    shell.step()
    base = shell.engine.positions

    shell.toggle(want_randomize=True)
    assert shell.step().commands == (Command.RANDOMIZE,)
    assert np.all(np.abs(np.array([n.xy for n in nodes]) - base) <= shell.engine.config.jitter_amount)

    shell.toggle(want_reset=True)
    assert shell.step().commands == (Command.CLEAR,)
    assert all(n.xy == reference.xy for n in nodes)

    shell.toggle(force_reset=True, confirm_force_reset=True, keep_slots_on_force_reset=True)
    report = shell.step()
    assert report.commands == (Command.HARD_RESET,)
    assert report.snapshot.slot_count == 12


def test_from_settings_configures_file_log(tmp_path, reference: SceneNode) -> None:
    """Test from_settings wires the file sink from logging settings."""
    from waygrid.config import LoggingConfig
    from waygrid.utils.logger import configure, current_log_file

    settings = Settings(logging=LoggingConfig(level="DEBUG", log_dir=tmp_path))
    try:
        shell = EditorShell.from_settings(settings)
        shell.assign(make_nodes(2), reference)
        log_file = current_log_file()
        assert log_file is not None and log_file.parent == tmp_path
        assert "assigned 2 slots" in log_file.read_text(encoding="utf-8")
    finally:
        configure()
