from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numspace.core.numeric import Cast
from numspace.interpolation.base import Interpolation


@dataclass(frozen=True, slots=True)
class LinearInterpolation(Interpolation):
    """``start + step * index``."""

    start: Any
    step: Any

    def __call__(self, index: Any) -> Any:
        return self.start + self.step * index

    @classmethod
    def half_open(cls, start: Any, end: Any, steps: int,
                  cast: Cast = float) -> LinearInterpolation:
        """Parameters for ``steps`` values over ``[start, end)``."""
        start, end = cast(start), cast(end)
        if steps == 0:
            return cls(start=start, step=cast(0))
        return cls(start=start, step=(end - start) / cast(steps))

    @classmethod
    def closed(cls, start: Any, end: Any, steps: int,
               cast: Cast = float) -> LinearInterpolation:
        """Parameters for ``steps`` values over ``[start, end]``.

        A single step yields only ``start``.
        """
        start, end = cast(start), cast(end)
        if steps <= 1:
            return cls(start=start, step=cast(0))
        return cls(start=start, step=(end - start) / cast(steps - 1))
