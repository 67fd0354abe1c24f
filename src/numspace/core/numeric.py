"""Numeric type handling shared by the interpolation primitives and iterators.

Every builder takes an optional ``dtype``. ``None`` means plain Python
``float``; a string or numpy floating type selects the matching numpy scalar
type, so arithmetic stays in that precision (``float32`` values are computed
in ``float32``).
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from typing import Any

import numpy as np

Cast = Callable[[Any], Any]

_DTYPES: dict[str, Cast] = {
    "float": float,
    "float16": np.float16,
    "float32": np.float32,
    "float64": np.float64,
    "double": np.float64,
    "longdouble": np.longdouble,
}


def resolve_dtype(dtype: str | type | np.dtype | None) -> Cast:
    """Return the scalar constructor used to cast values to ``dtype``."""
    if dtype is None or dtype is float:
        return float
    if isinstance(dtype, str):
        try:
            return _DTYPES[dtype.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown dtype {dtype!r}; expected one of {sorted(_DTYPES)}"
            ) from None
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Unsupported dtype {dtype!r}") from e
    if resolved.kind != "f":
        raise ValueError(f"dtype must be a floating type, got {resolved}")
    return resolved.type


def array_dtype(cast: Cast) -> np.dtype:
    """numpy dtype matching a cast returned by :func:`resolve_dtype`."""
    if cast is float:
        return np.dtype(np.float64)
    return np.dtype(cast)


def as_steps(steps: int) -> int:
    """Validate a step count: a non-negative integer."""
    n = operator.index(steps)
    if n < 0:
        raise ValueError(f"steps must be non-negative, got {n}")
    return n


def ceil_count(value: Any) -> int:
    """Round a floating step estimate up to an integer count.

    Infinite estimates raise ``OverflowError`` and NaN raises ``ValueError``;
    a count that cannot be represented makes the iterator meaningless.
    """
    try:
        return max(0, math.ceil(float(value)))
    except OverflowError as e:
        raise OverflowError(f"step count {value!r} is not representable") from e
    except ValueError as e:
        raise ValueError(f"step count {value!r} is undefined") from e
