# =============================================================================
# sample_generator.py — Quantized sine table
# =============================================================================
#
# Computes one full period of a sine wave and maps it onto the unsigned range
# [0, 2^depth - 1]:
#
#   x      = i / n                 phase fraction, i in [0, n)
#   angle  = x * 2 * pi
#   sample = round(((sin(angle) + 1) / 2) * max)
#
# ROUNDING:
#   np.round() is round-half-to-even. The reference behaviour is
#   round-half-away-from-zero, which for the non-negative values produced
#   here is floor(v + 0.5). Boundary samples shift by one unit otherwise.
#
# The whole table is built eagerly in one vectorized pass; memory is O(n).
# n == 0 yields an empty table (np.arange(0) is empty, nothing is divided).
# =============================================================================

from __future__ import annotations

import numpy as np

from SGEN.SGM.config import SampleConfig

SAMPLE_DTYPE = np.uint64   # holds 2^32 - 1 with room to spare


def max_value(depth: int) -> int:
    """Largest sample representable at ``depth`` bits: 2^depth - 1."""
    return (1 << depth) - 1


def quantize(values: np.ndarray, depth: int) -> np.ndarray:
    """
    Map values in [-1, 1] linearly onto [0, max_value(depth)].

    Args:
        values: float array of sine outputs.
        depth:  validated bit depth.

    Returns:
        uint64 array, same shape as ``values``.
    """
    peak = float(max_value(depth))
    scaled = ((values + 1.0) / 2.0) * peak
    return np.floor(scaled + 0.5).astype(SAMPLE_DTYPE)


def generate_samples(config: SampleConfig) -> np.ndarray:
    """
    Build the quantized table for a validated config.

    Returns:
        uint64 array of ``config.samples`` values, index 0 first.
    """
    n = config.samples
    index = np.arange(n, dtype=np.float64)
    if n:
        index /= n
    angle = index * 2.0 * np.pi
    return quantize(np.sin(angle), config.depth)
