from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from numspace.grid.product import GridProduct
from numspace.space.arange import arange
from numspace.space.linspace import linspace
from numspace.space.logspace import logspace

logger = logging.getLogger(__name__)


def _bounds(start: Sequence[Any], end: Sequence[Any]) -> tuple[tuple, tuple]:
    start, end = tuple(start), tuple(end)
    if len(start) != len(end):
        raise ValueError(
            f"start has {len(start)} axes but end has {len(end)}"
        )
    if not start:
        raise ValueError("a grid needs at least one axis")
    return start, end


def _per_axis(value: Any, ndim: int, name: str) -> tuple:
    """Broadcast a scalar to every axis, or check one value per axis."""
    if isinstance(value, np.ndarray):
        value = value.tolist() if value.ndim else value.item()
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != ndim:
            raise ValueError(f"{name} has {len(value)} entries for {ndim} axes")
        return tuple(value)
    return (value,) * ndim


def grid_space(start: Sequence[Any], end: Sequence[Any],
               steps: int | Sequence[int], *, inclusive: bool = False,
               dtype: Any = None) -> GridProduct:
    """Linearly spaced grid over the box from ``start`` to ``end``.

    ``steps`` is a single count for every axis or one count per axis.

    >>> list(grid_space((0.0, 0.0), (1.0, 2.0), (2, 4)))[:3]
    [(0.0, 0.0), (0.0, 0.5), (0.0, 1.0)]
    """
    start, end = _bounds(start, end)
    counts = _per_axis(steps, len(start), "steps")
    logger.debug("grid_space start=%s end=%s steps=%s inclusive=%s",
                 start, end, counts, inclusive)
    return GridProduct(*(
        linspace(a, b, n, inclusive=inclusive, dtype=dtype)
        for a, b, n in zip(start, end, counts)
    ))


def grid_log_space(start: Sequence[Any], end: Sequence[Any],
                   steps: int | Sequence[int], *, inclusive: bool = False,
                   dtype: Any = None) -> GridProduct:
    """Logarithmically spaced grid; every bound must be strictly positive."""
    start, end = _bounds(start, end)
    counts = _per_axis(steps, len(start), "steps")
    logger.debug("grid_log_space start=%s end=%s steps=%s inclusive=%s",
                 start, end, counts, inclusive)
    return GridProduct(*(
        logspace(a, b, n, inclusive=inclusive, dtype=dtype)
        for a, b, n in zip(start, end, counts)
    ))


def arange_grid(start: Sequence[Any], end: Sequence[Any],
                step: Any | Sequence[Any], *, dtype: Any = None) -> GridProduct:
    """Fixed-step grid; ``step`` is one size for every axis or one per axis."""
    start, end = _bounds(start, end)
    sizes = _per_axis(step, len(start), "step")
    logger.debug("arange_grid start=%s end=%s step=%s", start, end, sizes)
    return GridProduct(*(
        arange(a, b, s, dtype=dtype)
        for a, b, s in zip(start, end, sizes)
    ))
