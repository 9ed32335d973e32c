#!/usr/bin/env python3
# =============================================================================
# table_check.py — Sample table reader and checker
# =============================================================================
#
# Inverse of the formatter. Reads printed table text back into integers and
# checks the result against what a correct sine table must satisfy:
#
#   - exactly n samples, each in [0, 2^depth - 1]
#   - sample 0 sits at phase 0: sin(0) = 0 → round(max / 2)
#   - half-period symmetry: sin(x + pi) = -sin(x), so for even n
#       sample[i] + sample[i + n/2] ≈ max
#     Rounding each side independently allows a deviation of at most 1.
#
# Usage:
#   samplegen -d 8 -s 64 | python -m SGEN.SVM.table_check --depth 8
# =============================================================================

from __future__ import annotations
import sys
import argparse
from typing import NamedTuple, Sequence

from SGEN.SMM.constants import SEPARATOR, HEX_PREFIX
from SGEN.SGM.sample_generator import max_value

SYMMETRY_TOLERANCE = 1


class TableReport(NamedTuple):
    count:          int
    max_value:      int
    in_range:       bool        # every sample in [0, max_value]
    phase_zero_ok:  bool        # True for an empty table
    symmetry_error: int | None  # None when n is odd or zero

    @property
    def ok(self) -> bool:
        return (
            self.in_range
            and self.phase_zero_ok
            and (self.symmetry_error is None
                 or self.symmetry_error <= SYMMETRY_TOLERANCE)
        )


def _parse_token(token: str) -> int:
    if token.lower().startswith(HEX_PREFIX):
        return int(token[len(HEX_PREFIX):], 16)
    return int(token, 10)


def read_row(line: str) -> list[int]:
    """Parse one printed row; an empty line holds no samples."""
    tokens = [t.strip() for t in line.split(SEPARATOR.strip())]
    return [_parse_token(t) for t in tokens if t]


def row_lengths(text: str) -> list[int]:
    """Samples on each row, trailing blank line excluded."""
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return [len(read_row(r)) for r in rows]


def read_table(text: str) -> list[int]:
    """Parse formatter output (decimal or hex) back into sample values."""
    samples: list[int] = []
    for line in text.splitlines():
        samples.extend(read_row(line))
    return samples


def check_table(samples: Sequence[int], depth: int) -> TableReport:
    top = max_value(depth)
    values = [int(s) for s in samples]
    n = len(values)

    in_range = all(0 <= v <= top for v in values)
    # round-half-away-from-zero of top / 2
    phase_zero_ok = n == 0 or values[0] == (top + 1) // 2

    symmetry_error = None
    if n and n % 2 == 0:
        half = n // 2
        symmetry_error = max(
            abs(values[i] + values[i + half] - top) for i in range(half)
        )

    return TableReport(
        count=n,
        max_value=top,
        in_range=in_range,
        phase_zero_ok=phase_zero_ok,
        symmetry_error=symmetry_error,
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Check a samplegen table read from stdin",
    )
    parser.add_argument("--depth", type=int, required=True,
                        help="Bit depth the table was generated with")
    parser.add_argument("--samples", type=int, default=None,
                        help="Expected sample count (optional)")
    args = parser.parse_args(argv)

    samples = read_table(sys.stdin.read())
    report = check_table(samples, args.depth)

    print(f"  Samples  : {report.count}")
    print(f"  Max      : {report.max_value}")
    print(f"  Range    : {'OK' if report.in_range else 'ERR'}")
    print(f"  Phase 0  : {'OK' if report.phase_zero_ok else 'ERR'}")
    print(f"  Symmetry : {report.symmetry_error if report.symmetry_error is not None else 'n/a'}")

    ok = report.ok
    if args.samples is not None and report.count != args.samples:
        print(f"  [FAIL] expected {args.samples} samples, got {report.count}")
        ok = False
    print(f"  VERDICT: {'PASS' if ok else 'FAIL'}")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
