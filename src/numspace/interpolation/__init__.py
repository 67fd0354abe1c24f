"""Interpolation primitives — index-to-value mappings for space iterators."""

from numspace.interpolation.base import Interpolation
from numspace.interpolation.lerp import Lerp
from numspace.interpolation.linear import LinearInterpolation
from numspace.interpolation.logarithmic import LogInterpolation

__all__ = ["Interpolation", "LinearInterpolation", "LogInterpolation", "Lerp"]
