from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Interpolation(ABC):
    """Base class for index-to-value mappings driven by a space iterator."""

    @abstractmethod
    def __call__(self, index: Any) -> Any:
        """Value at ``index``. Integer arrays evaluate elementwise."""
        ...
