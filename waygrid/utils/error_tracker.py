# waygrid/utils/error_tracker.py
"""Centralised issue tracking for the layout engine and its host shell."""

from __future__ import annotations

import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from waygrid.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect warnings and failures keyed by issue kind."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)
    # every add per key, repeats included
    hits: dict[str, int] = field(default_factory=dict)
    max_per_key: int = 256

    # ────────────── collection API ──────────────
    def record(self, key: str, message: str, *, level: str = "error") -> None:
        logger = get_logger(self.context)
        getattr(logger, level, logger.error)(f"{key}: {message}")
        self.add(key, message)

    def add(self, key: str, message: str) -> bool:
        """Store ``message`` unless it repeats the last one for ``key``.

        Returns True when the message was stored.
        """
        self.hits[key] = self.hits.get(key, 0) + 1
        messages = self.errors.setdefault(key, [])
        if messages and messages[-1] == message:
            return False
        messages.append(message)
        if len(messages) > self.max_per_key:
            del messages[: len(messages) - self.max_per_key]
        return True

    def hit_count(self, key: str) -> int:
        return self.hits.get(key, 0)

    def count(self, key: str | None = None) -> int:
        if key is None:
            return sum(len(messages) for messages in self.errors.values())
        return len(self.errors.get(key, ()))

    def clear(self) -> None:
        self.errors.clear()
        self.hits.clear()

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.info("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning(f"Encountered {len(messages)} issues for {key}")
        return dict(self.errors)


# ────────────── context manager API ──────────────


@contextmanager
def error_scope(
    name: str = "scope", tracker: ErrorTracker | None = None
) -> Iterator[None]:
    """Log exceptions raised inside the block and keep going."""
    logger = get_logger("ErrorScope")
    try:
        yield
    except Exception as exc:
        logger.error(f"{name} failed. Traceback:\n{traceback.format_exc()}")
        if tracker is not None:
            tracker.add(name, f"{type(exc).__name__}: {exc}")


__all__ = ["ErrorTracker", "error_scope"]
