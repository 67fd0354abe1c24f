"""Configuration management for numspace using TOML files + kwargs overrides."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class NumericConfig:
    dtype: str = "float64"  # "float", "float16", "float32", "float64", "longdouble"


@dataclass
class SpaceConfig:
    steps: int = 50
    inclusive: bool = False


@dataclass
class OutputConfig:
    precision: int = 6


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class NumspaceConfig:
    numeric: NumericConfig = field(default_factory=NumericConfig)
    space: SpaceConfig = field(default_factory=SpaceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def defaults() -> NumspaceConfig:
        return NumspaceConfig()

    @staticmethod
    def load(path: str | Path) -> NumspaceConfig:
        """Load config from a TOML file. Missing file returns defaults."""
        cfg = NumspaceConfig()
        p = Path(path)
        if not p.exists():
            return cfg

        with open(p, "rb") as f:
            data = tomllib.load(f)

        _apply_toml(cfg, data)
        return cfg

    @staticmethod
    def load_with_overrides(path: str | Path, **kwargs: object) -> NumspaceConfig:
        """Load from TOML, then apply keyword overrides.

        Override keys use dot notation mapped to flat names:
          numeric.dtype=float32
          space.steps=100
          logging.level=DEBUG
        """
        cfg = NumspaceConfig.load(path)
        _apply_overrides(cfg, kwargs)
        return cfg


def _apply_toml(cfg: NumspaceConfig, data: dict) -> None:
    if "numeric" in data:
        n = data["numeric"]
        if "dtype" in n:
            cfg.numeric.dtype = str(n["dtype"])

    if "space" in data:
        s = data["space"]
        if "steps" in s:
            cfg.space.steps = int(s["steps"])
        if "inclusive" in s:
            cfg.space.inclusive = bool(s["inclusive"])

    if "output" in data:
        o = data["output"]
        if "precision" in o:
            cfg.output.precision = int(o["precision"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            cfg.logging.level = str(lg["level"])


def _coerce_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _apply_overrides(cfg: NumspaceConfig, overrides: dict[str, object]) -> None:
    mapping: dict[str, tuple[object, str]] = {
        "numeric.dtype": (cfg.numeric, "dtype"),
        "space.steps": (cfg.space, "steps"),
        "space.inclusive": (cfg.space, "inclusive"),
        "output.precision": (cfg.output, "precision"),
        "logging.level": (cfg.logging, "level"),
    }

    for key, value in overrides.items():
        if key in mapping:
            obj, attr = mapping[key]
            # Coerce to the same type as the default; bool before int
            current = getattr(obj, attr)
            if isinstance(current, bool):
                value = _coerce_bool(value)
            elif isinstance(current, float):
                value = float(value)  # type: ignore[arg-type]
            elif isinstance(current, int):
                value = int(value)  # type: ignore[arg-type]
            else:
                value = str(value)
            setattr(obj, attr, value)
