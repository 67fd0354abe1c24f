from __future__ import annotations

import logging
from typing import Any

from numspace.core.numeric import array_dtype, as_steps, resolve_dtype
from numspace.interpolation.linear import LinearInterpolation
from numspace.space.base import Space

logger = logging.getLogger(__name__)


def linspace(start: Any, end: Any, steps: int, *, inclusive: bool = False,
             dtype: Any = None) -> Space:
    """Lazily iterate ``steps`` evenly spaced values from ``start`` to ``end``.

    The interval is half-open by default: ``end`` would be the value after the
    last one. With ``inclusive=True`` the last value is ``end``.

    >>> list(linspace(0.0, 1.0, 4))
    [0.0, 0.25, 0.5, 0.75]
    >>> list(linspace(0.0, 1.0, 5, inclusive=True))
    [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    n = as_steps(steps)
    cast = resolve_dtype(dtype)
    if inclusive:
        interpolation = LinearInterpolation.closed(start, end, n, cast)
    else:
        interpolation = LinearInterpolation.half_open(start, end, n, cast)
    logger.debug("linspace start=%s end=%s steps=%d inclusive=%s",
                 start, end, n, inclusive)
    return Space(interpolation, n, dtype=array_dtype(cast))
