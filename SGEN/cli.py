#!/usr/bin/env python3
# =============================================================================
# cli.py — samplegen command-line entry point
# =============================================================================
#
# Generate one period of a quantized sine wave and print it.
#
# Usage:
#   samplegen -d 8 -s 16
#   samplegen -d 12 -s 64 -c 8 --hex
#   python -m SGEN -d 8 -s 16 --verbose
#
# Exit codes:
#   0  success
#   1  bit depth is zero
#   2  bit depth exceeds 32
#   3  column count is zero
#
# All output, including validation failures, goes to stdout. argparse still
# reports malformed command lines on stderr with its own status.
# =============================================================================

from __future__ import annotations
import sys
import argparse
from typing import Sequence, TextIO

from SGEN.SMM.constants import U8_MAX, U32_MAX, DEFAULT_COLS, EXIT_OK
from SGEN.SMM.errors import SampleGenError
from SGEN.SGM.config import SampleConfig, validate, describe
from SGEN.SGM.sample_generator import max_value, generate_samples
from SGEN.SGM.formatter import write_table


def _bounded_int(upper: int):
    """argparse type: an integer in [0, upper]."""
    def parse(text: str) -> int:
        try:
            value = int(text, 10)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
        if not 0 <= value <= upper:
            raise argparse.ArgumentTypeError(f"{value} is outside 0..{upper}")
        return value
    parse.__name__ = f"uint<={upper}"
    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="samplegen",
        description="Generate samples from periodic functions",
    )
    parser.add_argument(
        "-d", "--depth", type=_bounded_int(U8_MAX), required=True,
        help="Bit depth (1-32)",
    )
    parser.add_argument(
        "-s", "--samples", type=_bounded_int(U32_MAX), required=True,
        help="Number of samples to generate",
    )
    parser.add_argument(
        "-c", "--cols", type=_bounded_int(U8_MAX), default=DEFAULT_COLS,
        help="Samples per output row, default %(default)s",
    )
    parser.add_argument(
        "-x", "--hex", action="store_true",
        help="Enables hexadecimal output",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Verbose mode",
    )
    return parser


def run(config: SampleConfig, out: TextIO | None = None) -> int:
    """
    Validate, compute and print one table.
    Returns the process exit code; never calls sys.exit().
    """
    out = sys.stdout if out is None else out

    if config.verbose:
        print(describe(config), file=out)

    try:
        validate(config)
    except SampleGenError as e:
        print(f"[!!] {e}", file=out)
        return e.exit_code

    if config.verbose:
        print(f"Max sample value: {max_value(config.depth)}", file=out)

    write_table(generate_samples(config), config, out)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = SampleConfig(
        depth=args.depth,
        samples=args.samples,
        cols=args.cols,
        hex=args.hex,
        verbose=args.verbose,
    )
    sys.exit(run(config))


if __name__ == "__main__":
    main()
