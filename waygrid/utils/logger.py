# waygrid/utils/logger.py
"""Single-source Loguru setup: console sink, optional file sink, tagged messages."""

from __future__ import annotations

import inspect
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

_LEVEL_DEFAULT = os.environ.get("WAYGRID_LOG_LEVEL", "INFO")

_CONFIGURED = False
_LOGGER: Optional[LoguruLogger] = None
_LOG_FILE: Optional[Path] = None


def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record per line
    sys.stderr.write(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}\n"
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, log_dir: Path | None = None) -> None:
    global _CONFIGURED, _LOGGER, _LOG_FILE

    _root_logger.remove()

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))

    logger = _root_logger.patch(_inject_extras)
    use_level = level or _LEVEL_DEFAULT
    logger.add(_console_sink, level=use_level, catch=True)

    env_dir = os.environ.get("WAYGRID_LOG_DIR")
    target_dir = log_dir or (Path(env_dir).expanduser() if env_dir else None)
    if target_dir is not None:
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        _LOG_FILE = target_dir / f"waygrid_{timestamp}.log"
        fh = _LOG_FILE.open("a", encoding="utf-8")
        logger.add(_make_file_sink(fh), level=use_level, catch=True)

    _LOGGER = logger
    _CONFIGURED = True


def get_logger(name: str | None = None) -> LoguruLogger:
    if not _CONFIGURED:
        _configure_logger()

    frame = inspect.currentframe()
    module_name = name
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    bound = _LOGGER.bind(module=module_name or "unknown")

    def _tag(label: str, msg: str | None = None, *args, level: str = "info") -> None:
        text = f"[{label}] " + (msg or "")
        method = getattr(bound, level, bound.info)
        if args:
            text = text.format(*args)
        method(text)

    setattr(bound, "tag", _tag)
    return bound


def configure(level: str | None = None, log_dir: Path | None = None) -> None:
    _configure_logger(level=level, log_dir=log_dir)


def current_log_file() -> Optional[Path]:
    return _LOG_FILE


__all__ = ["get_logger", "configure", "current_log_file"]
