"""Materialize lazy sequences into pandas DataFrames."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

import pandas as pd

from numspace.grid.product import GridProduct


def to_frame(source: Any, columns: Sequence[str] | None = None) -> pd.DataFrame:
    """Remaining values of a ``Space``, ``Arange`` or ``GridProduct`` as a table.

    The source is copied first and is not advanced. Grids get one column per
    coordinate, named ``x0, x1, ...`` unless ``columns`` is given.
    """
    if source.size_hint()[1] is None:
        raise ValueError(f"cannot materialize an unbounded sequence: {source!r}")

    ndim = source.ndim if isinstance(source, GridProduct) else 1
    if columns is None:
        columns = [f"x{i}" for i in range(ndim)]
    columns = list(columns)
    if len(columns) != ndim:
        raise ValueError(f"expected {ndim} column names, got {len(columns)}")

    values = list(copy.copy(source))
    if ndim == 1 and not isinstance(source, GridProduct):
        return pd.DataFrame({columns[0]: values})
    return pd.DataFrame.from_records(values, columns=columns)
