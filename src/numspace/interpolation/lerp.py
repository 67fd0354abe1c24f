from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True, slots=True)
class Lerp:
    """Linear map taking ``[x0, x1]`` onto ``[y0, y1]``.

    A degenerate source range (``x0 == x1``) gives ``inf`` or NaN rather
    than raising.

    >>> float(Lerp.between((0.0, 10.0), (100.0, 200.0))(2.5))
    125.0
    """

    x0: Any
    x1: Any
    y0: Any
    y1: Any

    @classmethod
    def between(cls, source: tuple[Any, Any], target: tuple[Any, Any]) -> Lerp:
        (x0, x1), (y0, y1) = source, target
        return cls(x0=x0, x1=x1, y0=y0, y1=y1)

    def __call__(self, x: Any) -> Any:
        x0, x1, y0, y1 = self.x0, self.x1, self.y0, self.y1
        with np.errstate(invalid="ignore", divide="ignore"):
            return np.divide(y0 * (x1 - x) + y1 * (x - x0), x1 - x0)
