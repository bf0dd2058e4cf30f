# waygrid/utils/io.py
"""File IO helpers for settings files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from waygrid.utils.logger import get_logger

LOGGER = get_logger(__name__)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_mapping(path: Path) -> dict[str, Any]:
    """Load a settings mapping from a ``.json``, ``.yaml`` or ``.yml`` file."""
    ext = path.suffix.lower()
    if ext == ".json":
        data = load_json(path)
    elif ext in (".yaml", ".yml"):
        data = load_yaml(path)
    else:
        raise ValueError(f"unsupported settings file type: {path.name}")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"settings root must be a mapping, got {type(data).__name__}")
    LOGGER.debug("Loaded settings mapping from {}", path)
    return data


__all__ = ["load_json", "load_yaml", "load_mapping"]
