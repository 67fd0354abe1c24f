"""One-dimensional lazy sequences — linear, logarithmic and fixed-step."""

from numspace.space.arange import Arange, arange
from numspace.space.base import Space
from numspace.space.linspace import linspace
from numspace.space.logspace import logspace

__all__ = ["Space", "Arange", "linspace", "logspace", "arange"]
