# =============================================================================
# config.py — Generator configuration and validation
# =============================================================================
#
# A SampleConfig is built once from the command line and never mutated.
# validate() is the only gate between raw input and the sample computer:
# every config that reaches generate_samples() has passed through it.
#
# Checks run in this order and the first failure wins:
#   depth == 0          → InvalidDepth        (exit 1)
#   depth > MAX_DEPTH   → DepthTooLarge       (exit 2)
#   cols == 0           → InvalidColumnCount  (exit 3)
# =============================================================================

from __future__ import annotations
from typing import NamedTuple

from SGEN.SMM.constants import MAX_DEPTH, DEFAULT_COLS
from SGEN.SMM.errors import InvalidDepth, DepthTooLarge, InvalidColumnCount


class SampleConfig(NamedTuple):
    depth:   int                  # bit depth, 1..MAX_DEPTH once validated
    samples: int                  # points generated over one period
    cols:    int = DEFAULT_COLS   # samples per printed row
    hex:     bool = False         # zero-padded hex output
    verbose: bool = False         # echo config and max value first


def validate(config: SampleConfig) -> SampleConfig:
    """Return ``config`` unchanged, or raise the first SampleGenError it breaks."""
    if config.depth == 0:
        raise InvalidDepth()
    if config.depth > MAX_DEPTH:
        raise DepthTooLarge(config.depth)
    if config.cols == 0:
        raise InvalidColumnCount()
    return config


def describe(config: SampleConfig) -> str:
    """Pretty-print a config as an aligned ``key : value`` block."""
    width = max(len(name) for name in config._fields)
    lines = [type(config).__name__]
    for name, value in zip(config._fields, config):
        lines.append(f"  {name:<{width}} : {value}")
    return "\n".join(lines)
