#!/usr/bin/env python3
"""Print or export a lazily generated space or grid as a table."""

import argparse
import logging

import pandas as pd

from numspace.core.config import NumspaceConfig
from numspace.core.logging import setup_logging
from numspace.grid.builders import arange_grid, grid_log_space, grid_space
from numspace.grid.frame import to_frame
from numspace.space.arange import arange
from numspace.space.linspace import linspace
from numspace.space.logspace import logspace

logger = logging.getLogger("numspace.sweep")


def _parse_list(text: str, kind=float) -> list:
    return [kind(part) for part in text.split(",") if part.strip()]


def _scalar_or_tuple(values: list):
    return values[0] if len(values) == 1 else tuple(values)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate numeric spaces and grids")
    parser.add_argument("kind", choices=["linspace", "logspace", "arange"])
    parser.add_argument("--config", default="config/default.toml", help="Path to TOML config file")
    parser.add_argument("--start", required=True, help="Start value, comma separated for a grid")
    parser.add_argument("--end", required=True, help="End value, comma separated for a grid")
    parser.add_argument("--steps", help="Step count(s) for linspace/logspace")
    parser.add_argument("--step", help="Step size(s) for arange")
    parser.add_argument("--inclusive", action="store_true", default=None, help="Include the end value")
    parser.add_argument("--numeric.dtype", dest="numeric_dtype")
    parser.add_argument("--output.precision", type=int, dest="output_precision")
    parser.add_argument("--logging.level", dest="logging_level")
    parser.add_argument("--output", help="Write CSV here instead of printing")
    args = parser.parse_args()

    # Build overrides from CLI args
    overrides: dict[str, object] = {}
    if args.numeric_dtype is not None:
        overrides["numeric.dtype"] = args.numeric_dtype
    if args.output_precision is not None:
        overrides["output.precision"] = args.output_precision
    if args.logging_level is not None:
        overrides["logging.level"] = args.logging_level
    if args.inclusive is not None:
        overrides["space.inclusive"] = args.inclusive

    cfg = NumspaceConfig.load_with_overrides(args.config, **overrides)
    setup_logging(cfg.logging.level)

    start = _parse_list(args.start)
    end = _parse_list(args.end)
    if len(start) != len(end):
        parser.error("--start and --end need the same number of values")
    is_grid = len(start) > 1
    dtype = cfg.numeric.dtype

    if args.kind == "arange":
        if args.step is None:
            parser.error("arange needs --step")
        step = _scalar_or_tuple(_parse_list(args.step))
        if is_grid:
            source = arange_grid(start, end, step, dtype=dtype)
        else:
            source = arange(start[0], end[0], step, dtype=dtype)
    else:
        steps = (_scalar_or_tuple(_parse_list(args.steps, int))
                 if args.steps is not None else cfg.space.steps)
        inclusive = cfg.space.inclusive
        if is_grid:
            build = grid_space if args.kind == "linspace" else grid_log_space
            source = build(start, end, steps, inclusive=inclusive, dtype=dtype)
        else:
            build = linspace if args.kind == "linspace" else logspace
            source = build(start[0], end[0], steps, inclusive=inclusive, dtype=dtype)

    logger.info("Generating %s: %s", args.kind, source)
    frame = to_frame(source)

    if args.output:
        frame.to_csv(args.output, index=False, float_format=f"%.{cfg.output.precision}g")
        logger.info("Wrote %d rows to %s", len(frame), args.output)
        return

    with pd.option_context("display.precision", cfg.output.precision,
                           "display.max_rows", None):
        print(frame.to_string(index=False))


if __name__ == "__main__":
    main()
