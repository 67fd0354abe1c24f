from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from numspace.core.numeric import Cast, ceil_count, resolve_dtype

logger = logging.getLogger(__name__)


class Arange(Iterator):
    """Iterator over ``start + step * k`` for ``k = 0, 1, 2, ...``.

    Iteration stops the first time the candidate value is no longer strictly
    before ``end`` in the direction of ``step``. The comparison is made on
    the live value, so with floating point steps the last value near ``end``
    may be included or not depending on rounding, and :meth:`size_hint` can
    disagree with the values actually produced. Use
    :func:`numspace.space.linspace` when the count must be exact.

    A zero step never moves: with ``start < end`` the iterator is infinite
    and :meth:`count` refuses to run, otherwise it is empty.
    """

    __slots__ = ("start", "end", "step", "_count", "_total", "_done")

    def __init__(self, start: Any, end: Any, step: Any) -> None:
        self.start = start
        self.end = end
        self.step = step
        self._count = 0
        self._done = False
        if step == 0:
            # None marks an unbounded iterator
            self._total = None if start < end else 0
        else:
            self._total = ceil_count((end - start) / step)

    def _before_end(self, value: Any) -> bool:
        if self.step < 0:
            return value > self.end
        return value < self.end

    def __next__(self) -> Any:
        if self._done:
            raise StopIteration
        value = self.start + self.step * self._count
        if not self._before_end(value):
            self._done = True
            raise StopIteration
        self._count += 1
        return value

    @property
    def is_infinite(self) -> bool:
        return self._total is None

    def size_hint(self) -> tuple[int, int | None]:
        """Estimated remaining values as ``(lower, upper)``.

        The estimate is ``ceil((end - start) / step)`` minus the values already
        produced; floating drift can make it off by one. An infinite iterator
        reports ``(0, None)``.
        """
        if self._total is None:
            return 0, None
        if self._done:
            return 0, 0
        remaining = max(0, self._total - self._count)
        return remaining, remaining

    def __length_hint__(self) -> int:
        lower, upper = self.size_hint()
        if upper is None:
            return NotImplemented
        return lower

    def count(self) -> int:
        """Consume the iterator and return how many values it produced."""
        if self._total is None:
            raise ValueError(
                f"cannot count an infinite arange (start={self.start!r}, "
                f"end={self.end!r}, step=0)"
            )
        n = 0
        for _ in self:
            n += 1
        return n

    def __copy__(self) -> Arange:
        clone = Arange.__new__(Arange)
        clone.start = self.start
        clone.end = self.end
        clone.step = self.step
        clone._count = self._count
        clone._total = self._total
        clone._done = self._done
        return clone

    copy = __copy__

    def __repr__(self) -> str:
        return (f"Arange(start={self.start!r}, end={self.end!r}, "
                f"step={self.step!r}, count={self._count})")


def _resolve_cast(dtype: Any, *values: Any) -> Cast:
    if dtype is None and all(isinstance(v, int) and not isinstance(v, bool)
                             for v in values):
        return int
    return resolve_dtype(dtype)


def arange(start: Any, end: Any, step: Any = 1, *, dtype: Any = None) -> Arange:
    """Lazily iterate from ``start`` towards ``end`` (exclusive) by ``step``.

    All-integer arguments without a ``dtype`` produce Python ints, like
    :class:`range`; anything else produces floats of the requested dtype.

    >>> list(arange(0.0, 2.0, 0.5))
    [0.0, 0.5, 1.0, 1.5]
    """
    cast = _resolve_cast(dtype, start, end, step)
    it = Arange(cast(start), cast(end), cast(step))
    logger.debug("arange start=%s end=%s step=%s estimate=%s",
                 it.start, it.end, it.step, it.size_hint()[1])
    return it
