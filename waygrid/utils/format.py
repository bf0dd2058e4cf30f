# waygrid/utils/format.py
"""Formatting helpers for NumPy position arrays."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np
import numpy.typing as npt


@contextmanager
def numpy_print_options(*, precision: int = 4, suppress: bool = True) -> Iterator[None]:
    original = np.get_printoptions()
    np.set_printoptions(precision=precision, suppress=suppress)
    try:
        yield
    finally:
        np.set_printoptions(**original)


def format_positions(arr: npt.NDArray[np.float64], precision: int = 3) -> str:
    """Format an ``(N, 2)`` position array as a single log-friendly line.

    Args:
        arr: Position array to format
        precision: Number of decimal places

    Returns:
        Array rendered on one line
    """
    if arr.size == 0:
        return "[]"
    with numpy_print_options(precision=precision, suppress=True):
        return np.array2string(np.asarray(arr), separator=", ").replace("\n", "")


__all__ = ["numpy_print_options", "format_positions"]
