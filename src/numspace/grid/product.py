from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from typing import Any


def _size_hint(axis: Any) -> tuple[int, int | None]:
    if hasattr(axis, "size_hint"):
        return axis.size_hint()
    n = len(axis)
    return n, n


class GridProduct(Iterator):
    """Lazy Cartesian product of per-axis iterators, yielding flat tuples.

    Combinations come out in row-major order: the first axis varies slowest
    and the last fastest. Inner axes are restarted from a copy of their
    initial state each time an outer axis advances, so every axis must
    support ``copy.copy`` cheaply (``Space``, ``Arange`` and ``GridProduct``
    do).

    An axis that is itself a ``GridProduct`` contributes all of its
    coordinates to the output tuple, so ``GridProduct(GridProduct(x, y), z)``
    yields ``(vx, vy, vz)`` exactly like ``GridProduct(x, y, z)``.
    """

    __slots__ = ("_templates", "_axes", "_values", "_spliced", "_started", "_done")

    def __init__(self, *axes: Any) -> None:
        if not axes:
            raise ValueError("GridProduct needs at least one axis")
        self._templates = tuple(copy.copy(axis) for axis in axes)
        self._axes = [copy.copy(axis) for axis in axes]
        self._spliced = tuple(isinstance(axis, GridProduct) for axis in axes)
        self._values: list[Any] = [None] * len(axes)
        self._started = False
        self._done = False

    @property
    def ndim(self) -> int:
        """Length of each produced tuple."""
        return sum(t.ndim if spliced else 1
                   for t, spliced in zip(self._templates, self._spliced))

    def _emit(self) -> tuple:
        if not any(self._spliced):
            return tuple(self._values)
        out: list[Any] = []
        for value, spliced in zip(self._values, self._spliced):
            if spliced:
                out.extend(value)
            else:
                out.append(value)
        return tuple(out)

    def _start(self) -> tuple:
        self._started = True
        for i, axis in enumerate(self._axes):
            try:
                self._values[i] = next(axis)
            except StopIteration:
                self._done = True
                raise
        return self._emit()

    def __next__(self) -> tuple:
        if self._done:
            raise StopIteration
        if not self._started:
            return self._start()

        # Advance the innermost axis that still has values, restart the rest
        for i in reversed(range(len(self._axes))):
            try:
                self._values[i] = next(self._axes[i])
            except StopIteration:
                continue
            for j in range(i + 1, len(self._axes)):
                self._axes[j] = copy.copy(self._templates[j])
                self._values[j] = next(self._axes[j])
            return self._emit()

        self._done = True
        raise StopIteration

    def _remaining(self, measure: Callable[[Any], int | None]) -> int | None:
        if self._done:
            return 0
        if not self._started:
            total = 1
            for axis in self._axes:
                n = measure(axis)
                if n is None:
                    return None
                total *= n
            return total

        # Each axis contributes its remaining values times the full size of
        # every axis inside it
        remaining = 0
        inner = 1
        for axis, template in zip(reversed(self._axes), reversed(self._templates)):
            left = measure(axis)
            if left is None:
                return None
            remaining += left * inner
            full = measure(template)
            if full is None:
                return None
            inner *= full
        return remaining

    def __len__(self) -> int:
        # Raises TypeError when an axis has no exact length (e.g. Arange)
        return self._remaining(len)  # type: ignore[return-value]

    def size_hint(self) -> tuple[int, int | None]:
        lower = self._remaining(lambda axis: _size_hint(axis)[0])
        upper = self._remaining(lambda axis: _size_hint(axis)[1])
        return lower or 0, upper

    def __length_hint__(self) -> int:
        lower, upper = self.size_hint()
        if upper is None:
            return NotImplemented
        return lower

    def __copy__(self) -> GridProduct:
        clone = GridProduct.__new__(GridProduct)
        clone._templates = self._templates
        clone._axes = [copy.copy(axis) for axis in self._axes]
        clone._spliced = self._spliced
        clone._values = list(self._values)
        clone._started = self._started
        clone._done = self._done
        return clone

    copy = __copy__

    def __repr__(self) -> str:
        axes = ", ".join(repr(t) for t in self._templates)
        return f"GridProduct({axes})"
