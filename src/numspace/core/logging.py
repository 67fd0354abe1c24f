from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure stdlib logging for numspace."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)

    root = logging.getLogger("numspace")
    root.setLevel(numeric_level)
    # Repeated setup (e.g. from several scripts) must not duplicate output
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
