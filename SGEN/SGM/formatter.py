# =============================================================================
# formatter.py — Sample table text output
# =============================================================================
#
# Every sample is written followed by SEPARATOR. A newline ends each row of
# ``cols`` samples, and one extra newline always closes the table:
#
#   cols=4, 10 samples:
#     a, b, c, d, \n
#     e, f, g, h, \n
#     i, j, \n
#
# Hex fields are zero-padded to the fewest digits that hold max_value(depth),
# so every field in one table has the same width.
# =============================================================================

from __future__ import annotations
import sys
from typing import Iterable, TextIO

from SGEN.SMM.constants import SEPARATOR, HEX_PREFIX, HEX_DIGIT_BITS
from SGEN.SGM.config import SampleConfig


def hex_width(depth: int) -> int:
    """Hex digits needed for a ``depth``-bit sample: ceil(depth / 4)."""
    return -(-depth // HEX_DIGIT_BITS)


def format_sample(sample: int, depth: int, hex_output: bool = False) -> str:
    if hex_output:
        return f"{HEX_PREFIX}{int(sample):0{hex_width(depth)}X}"
    return str(int(sample))


def iter_table(samples: Iterable[int], config: SampleConfig) -> Iterable[str]:
    """Yield the output text piece by piece, newlines included."""
    for i, sample in enumerate(samples):
        yield format_sample(sample, config.depth, config.hex) + SEPARATOR
        if (i + 1) % config.cols == 0:
            yield "\n"
    yield "\n"


def format_table(samples: Iterable[int], config: SampleConfig) -> str:
    return "".join(iter_table(samples, config))


def write_table(
    samples: Iterable[int],
    config: SampleConfig,
    out: TextIO | None = None,
) -> None:
    """Write the table to ``out`` (stdout by default). Write errors propagate."""
    out = sys.stdout if out is None else out
    for piece in iter_table(samples, config):
        out.write(piece)
    out.flush()
