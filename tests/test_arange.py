"""Tests for the fixed-step (arange) iterator."""

from __future__ import annotations

import copy
import itertools
import math
import operator

import numpy as np
import pytest

from numspace.space.arange import Arange, arange


class TestArange:
    def test_basic(self):
        assert list(arange(0.0, 2.0, 0.5)) == [0.0, 0.5, 1.0, 1.5]

    def test_estimate_matches_when_step_divides_range(self):
        it = arange(0.0, 2.0, 0.5)
        assert it.size_hint() == (4, 4)
        assert len(list(it)) == 4
        assert it.size_hint() == (0, 0)

    def test_estimate_tracks_progress(self):
        it = arange(0.0, 2.0, 0.5)
        next(it)
        next(it)
        assert it.size_hint() == (2, 2)
        assert operator.length_hint(it) == 2

    def test_integers_like_range(self):
        values = list(arange(1, 5))
        assert values == [1, 2, 3, 4]
        assert all(type(v) is int for v in values)

    def test_integer_step(self):
        assert list(arange(0, 10, 3)) == list(range(0, 10, 3))

    def test_integer_bounds_with_float_dtype(self):
        values = list(arange(0, 2, 1, dtype="float64"))
        assert values == [0.0, 1.0]
        assert all(isinstance(v, float) for v in values)

    def test_float32(self):
        values = list(arange(0.0, 1.0, 0.25, dtype=np.float32))
        assert all(isinstance(v, np.float32) for v in values)
        assert values == pytest.approx([0.0, 0.25, 0.5, 0.75])

    def test_negative_step(self):
        it = arange(5, 0, -2)
        assert it.size_hint() == (3, 3)
        assert list(it) == [5, 3, 1]

    def test_empty_when_step_points_away(self):
        it = arange(2.0, 0.0, 0.5)
        assert it.size_hint() == (0, 0)
        assert list(it) == []

    def test_end_excluded(self):
        assert list(arange(0.0, 1.0, 0.5)) == [0.0, 0.5]

    def test_no_accumulated_drift(self):
        # Values are start + step * k, not repeated addition
        values = list(arange(0.0, 1.0, 0.1))
        assert values[7] == 0.1 * 7

    def test_estimate_may_disagree_near_boundary(self):
        # (1.3 - 1.0) / 0.1 rounds above 3, but 1.0 + 0.1 * 3 == 1.3 exactly
        it = arange(1.0, 1.3, 0.1)
        assert it.size_hint() == (4, 4)
        assert len(list(it)) == 3

    def test_fused(self):
        it = arange(0.0, 1.0, 0.5)
        assert list(it) == [0.0, 0.5]
        for _ in range(3):
            with pytest.raises(StopIteration):
                next(it)
        assert it.size_hint() == (0, 0)


class TestArangeCount:
    def test_count_consumes(self):
        it = arange(0.0, 1.0, 0.25)
        assert it.count() == 4
        assert list(it) == []

    def test_count_remaining(self):
        it = arange(0, 10)
        next(it)
        next(it)
        assert it.count() == 8

    def test_count_is_exact_when_estimate_is_not(self):
        assert arange(1.0, 1.3, 0.1).count() == 3


class TestArangeZeroStep:
    def test_infinite(self):
        it = arange(1.0, 2.0, 0.0)
        assert it.is_infinite
        assert it.size_hint() == (0, None)
        assert list(itertools.islice(it, 5)) == [1.0] * 5
        assert it.size_hint() == (0, None)

    def test_count_fails(self):
        it = arange(1.0, 2.0, 0.0)
        with pytest.raises(ValueError, match="infinite"):
            it.count()

    def test_length_hint_falls_back_to_default(self):
        assert operator.length_hint(arange(1.0, 2.0, 0.0), 7) == 7

    def test_start_past_end_is_empty(self):
        it = arange(2.0, 1.0, 0.0)
        assert not it.is_infinite
        assert it.size_hint() == (0, 0)
        assert list(itertools.islice(it, 3)) == []
        assert it.count() == 0

    def test_zero_width_is_empty(self):
        it = arange(1.0, 1.0, 0.0)
        assert not it.is_infinite
        assert it.size_hint() == (0, 0)
        assert it.count() == 0


class TestArangeConstruction:
    def test_infinite_end_overflows(self):
        with pytest.raises(OverflowError):
            arange(0.0, math.inf, 1.0)

    def test_nan_bound_rejected(self):
        with pytest.raises(ValueError):
            arange(0.0, math.nan, 1.0)

    def test_unknown_dtype_rejected(self):
        with pytest.raises(ValueError):
            arange(0.0, 1.0, 0.5, dtype="complex")

    def test_direct_construction(self):
        it = Arange(0.0, 1.0, 0.5)
        assert list(it) == [0.0, 0.5]


class TestArangeCopy:
    def test_copy_is_independent(self):
        it = arange(0.0, 2.0, 0.5)
        next(it)
        clone = copy.copy(it)
        assert list(it) == [0.5, 1.0, 1.5]
        assert list(clone) == [0.5, 1.0, 1.5]

    def test_copy_keeps_estimate(self):
        it = arange(0.0, 2.0, 0.5)
        next(it)
        assert it.copy().size_hint() == (3, 3)
