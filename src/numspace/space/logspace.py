from __future__ import annotations

import logging
from typing import Any

from numspace.core.numeric import array_dtype, as_steps, resolve_dtype
from numspace.interpolation.logarithmic import LogInterpolation
from numspace.space.base import Space

logger = logging.getLogger(__name__)


def logspace(start: Any, end: Any, steps: int, *, inclusive: bool = False,
             dtype: Any = None) -> Space:
    """Lazily iterate ``steps`` logarithmically spaced values.

    ``start`` and ``end`` must both be strictly positive; otherwise the values
    are NaN. Half-open by default, like :func:`numspace.space.linspace`.
    """
    n = as_steps(steps)
    cast = resolve_dtype(dtype)
    if inclusive:
        interpolation = LogInterpolation.closed(start, end, n, cast)
    else:
        interpolation = LogInterpolation.half_open(start, end, n, cast)
    logger.debug("logspace start=%s end=%s steps=%d inclusive=%s ratio=%s",
                 start, end, n, inclusive, interpolation.ratio)
    return Space(interpolation, n, dtype=array_dtype(cast))
