# waygrid/utils/__init__.py
"""Utility package re-exporting shared helpers for waygrid."""

from waygrid.utils.error_tracker import ErrorTracker, error_scope
from waygrid.utils.format import format_positions, numpy_print_options
from waygrid.utils.io import load_json, load_mapping, load_yaml
from waygrid.utils.logger import configure, get_logger
from waygrid.utils.progress import track

__all__ = [
    "ErrorTracker",
    "configure",
    "error_scope",
    "format_positions",
    "get_logger",
    "load_json",
    "load_mapping",
    "load_yaml",
    "numpy_print_options",
    "track",
]
