from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import numpy as np

from numspace.interpolation.base import Interpolation


class Space(Iterator):
    """Double-ended, exact-size iterator over ``interpolation(i)`` for
    ``i`` in ``[cursor, steps)``.

    ``next()`` consumes from the front and :meth:`next_back` from the back.
    The back end is tracked by shrinking ``steps``, so the two ends meet and
    never cross; ``len()`` is always the number of values still obtainable.
    """

    __slots__ = ("_interpolation", "_cursor", "_steps", "_dtype")

    def __init__(self, interpolation: Interpolation, steps: int,
                 cursor: int = 0, dtype: np.dtype | None = None) -> None:
        if not 0 <= cursor <= steps:
            raise ValueError(f"cursor {cursor} outside [0, {steps}]")
        self._interpolation = interpolation
        self._cursor = cursor
        self._steps = steps
        self._dtype = dtype

    @property
    def interpolation(self) -> Interpolation:
        return self._interpolation

    def __next__(self) -> Any:
        if self._cursor < self._steps:
            index = self._cursor
            self._cursor += 1
            return self._interpolation(index)
        raise StopIteration

    def next_back(self) -> Any:
        """Take the last remaining value. Raises ``StopIteration`` when empty."""
        if self._cursor < self._steps:
            self._steps -= 1
            return self._interpolation(self._steps)
        raise StopIteration

    def __reversed__(self) -> Iterator[Any]:
        # Shares state with self: values taken here are gone from the front too
        while self._cursor < self._steps:
            yield self.next_back()

    def __len__(self) -> int:
        return self._steps - self._cursor

    def __length_hint__(self) -> int:
        return self._steps - self._cursor

    def size_hint(self) -> tuple[int, int | None]:
        n = len(self)
        return n, n

    def __copy__(self) -> Space:
        return Space(self._interpolation, self._steps, self._cursor, self._dtype)

    copy = __copy__

    def to_array(self) -> np.ndarray:
        """Remaining values as a numpy array. Does not advance the iterator."""
        dtype = self._dtype if self._dtype is not None else np.float64
        # Indices in the value dtype keep the arithmetic in that precision
        indices = np.arange(self._cursor, self._steps, dtype=dtype)
        values = np.asarray(self._interpolation(indices))
        return values.astype(dtype, copy=False)

    def __repr__(self) -> str:
        return (f"Space({self._interpolation!r}, cursor={self._cursor}, "
                f"steps={self._steps})")
