from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from numspace.core.numeric import Cast
from numspace.interpolation.base import Interpolation


def _ratio(start: Any, end: Any, intervals: int, cast: Cast) -> Any:
    # Extended precision is kept when requested; everything else uses float64
    work = np.longdouble if cast is np.longdouble else np.float64
    # Non-positive endpoints give NaN, not an exception
    with np.errstate(invalid="ignore", divide="ignore"):
        base = work(end) / work(start)
        return cast(np.power(base, work(1) / work(intervals)))


@dataclass(frozen=True, slots=True)
class LogInterpolation(Interpolation):
    """``start * ratio ** index``.

    Each value is a fresh power of ``ratio`` so rounding error does not
    compound along the sequence.
    """

    start: Any
    ratio: Any

    def __call__(self, index: Any) -> Any:
        return self.start * self.ratio ** index

    @classmethod
    def half_open(cls, start: Any, end: Any, steps: int,
                  cast: Cast = float) -> LogInterpolation:
        """``end`` is reached after ``steps`` multiplications by ``ratio``."""
        if steps == 0:
            return cls(start=cast(start), ratio=cast(1))
        return cls(start=cast(start), ratio=_ratio(start, end, steps, cast))

    @classmethod
    def closed(cls, start: Any, end: Any, steps: int,
               cast: Cast = float) -> LogInterpolation:
        """``end`` is reached after ``steps - 1`` multiplications by ``ratio``."""
        if steps <= 1:
            return cls(start=cast(start), ratio=cast(1))
        return cls(start=cast(start), ratio=_ratio(start, end, steps - 1, cast))
