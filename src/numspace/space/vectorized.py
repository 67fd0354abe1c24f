"""Vectorized (numpy) counterparts of the lazy builders."""

from __future__ import annotations

from typing import Any

import numpy as np

from numspace.core.numeric import array_dtype, as_steps, resolve_dtype


def linspace(start: Any, end: Any, steps: int, *, inclusive: bool = False,
             dtype: Any = None) -> np.ndarray:
    n = as_steps(steps)
    return np.linspace(start, end, n, endpoint=inclusive,
                       dtype=array_dtype(resolve_dtype(dtype)))


def logspace(start: Any, end: Any, steps: int, *, inclusive: bool = False,
             dtype: Any = None) -> np.ndarray:
    """``steps`` values between positive ``start`` and ``end`` on a log scale."""
    n = as_steps(steps)
    with np.errstate(invalid="ignore", divide="ignore"):
        return np.geomspace(start, end, n, endpoint=inclusive,
                            dtype=array_dtype(resolve_dtype(dtype)))


def arange(start: Any, end: Any, step: Any = 1, *, dtype: Any = None) -> np.ndarray:
    if step == 0:
        raise ValueError("step must be non-zero for an eager arange")
    if dtype is None and all(isinstance(v, int) for v in (start, end, step)):
        return np.arange(start, end, step)
    return np.arange(start, end, step, dtype=array_dtype(resolve_dtype(dtype)))


def grid(*axes: np.ndarray) -> np.ndarray:
    """Cartesian product of 1-D ``axes`` as an ``(N, d)`` table, last axis fastest."""
    if not axes:
        raise ValueError("No axes provided.")
    meshes = np.meshgrid(*axes, indexing="ij")
    return np.stack([m.reshape(-1) for m in meshes], axis=-1)
