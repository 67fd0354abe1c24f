"""Tests for numspace config loading."""

import tempfile
from pathlib import Path

from numspace.core.config import NumspaceConfig


def test_defaults():
    cfg = NumspaceConfig.defaults()
    assert cfg.numeric.dtype == "float64"
    assert cfg.space.steps == 50
    assert cfg.space.inclusive is False
    assert cfg.output.precision == 6
    assert cfg.logging.level == "INFO"


def test_load_from_file():
    toml_content = b"""
[numeric]
dtype = "float32"

[space]
steps = 11
inclusive = true

[output]
precision = 3

[logging]
level = "DEBUG"
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        path = f.name

    cfg = NumspaceConfig.load(path)
    assert cfg.numeric.dtype == "float32"
    assert cfg.space.steps == 11
    assert cfg.space.inclusive is True
    assert cfg.output.precision == 3
    assert cfg.logging.level == "DEBUG"

    Path(path).unlink()


def test_missing_file_returns_defaults():
    cfg = NumspaceConfig.load("/nonexistent/path.toml")
    assert cfg.numeric.dtype == "float64"
    assert cfg.space.steps == 50


def test_load_with_overrides():
    toml_content = b"""
[space]
steps = 20
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        path = f.name

    cfg = NumspaceConfig.load_with_overrides(
        path,
        **{
            "space.steps": "30",
            "space.inclusive": "true",
            "numeric.dtype": "float32",
            "logging.level": "WARNING",
            "unknown.key": 1,
        },
    )
    assert cfg.space.steps == 30
    assert cfg.space.inclusive is True
    assert cfg.numeric.dtype == "float32"
    assert cfg.logging.level == "WARNING"

    Path(path).unlink()


def test_partial_toml():
    toml_content = b"""
[output]
precision = 9
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        path = f.name

    cfg = NumspaceConfig.load(path)
    assert cfg.output.precision == 9
    # Other sections use defaults
    assert cfg.numeric.dtype == "float64"
    assert cfg.space.inclusive is False

    Path(path).unlink()


def test_shipped_default_config():
    root = Path(__file__).resolve().parents[1]
    cfg = NumspaceConfig.load(root / "config" / "default.toml")
    assert cfg == NumspaceConfig.defaults()
