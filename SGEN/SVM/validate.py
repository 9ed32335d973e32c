#!/usr/bin/env python3
# =============================================================================
# validate.py — SGEN Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m SGEN.SVM.validate
#             or python SGEN/SVM/validate.py (from project root)
#
# Tests:
#   1. Constants & validation — limits, exit codes, error ordering
#   2. Sample computer        — max value, count, range, phase 0, symmetry
#   3. Formatter              — hex widths, separators, row wrapping
#   4. CLI round trip         — run() output read back by table_check
# =============================================================================

import io
import os
import sys

# Allow running from project root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from SGEN.SMM.constants import (
    MIN_DEPTH, MAX_DEPTH,
    EXIT_OK, EXIT_INVALID_DEPTH, EXIT_DEPTH_TOO_LARGE, EXIT_INVALID_COLUMN_COUNT,
)
from SGEN.SMM.errors import InvalidDepth, DepthTooLarge, InvalidColumnCount
from SGEN.SGM.config import SampleConfig, validate
from SGEN.SGM.sample_generator import max_value, generate_samples
from SGEN.SGM.formatter import hex_width, format_sample, format_table
from SGEN.SVM.table_check import read_table, row_lengths, check_table
from SGEN.cli import run

PASS = "[PASS]"
FAIL = "[FAIL]"
INFO = "[INFO]"

failures = 0

def check(label: str, condition: bool, detail: str = "") -> bool:
    global failures
    if condition:
        print(f"  {PASS} {label}")
    else:
        print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}")
        failures += 1
    return condition


def raises(exc_type, fn, *args) -> bool:
    try:
        fn(*args)
    except exc_type:
        return True
    return False


# =============================================================================
# TEST 1 — Constants & Validation
# =============================================================================
print("\n" + "="*60)
print("TEST 1 — Constants & Validation")
print("="*60)

check("MIN_DEPTH = 1",  MIN_DEPTH == 1)
check("MAX_DEPTH = 32", MAX_DEPTH == 32)
check("Exit codes are 0/1/2/3",
      (EXIT_OK, EXIT_INVALID_DEPTH, EXIT_DEPTH_TOO_LARGE, EXIT_INVALID_COLUMN_COUNT)
      == (0, 1, 2, 3))

check("depth=0 → InvalidDepth",
      raises(InvalidDepth, validate, SampleConfig(depth=0, samples=4)))
check("depth=33 → DepthTooLarge",
      raises(DepthTooLarge, validate, SampleConfig(depth=33, samples=4)))
check("cols=0 → InvalidColumnCount",
      raises(InvalidColumnCount, validate, SampleConfig(depth=8, samples=4, cols=0)))
check("depth checked before cols",
      raises(InvalidDepth, validate, SampleConfig(depth=0, samples=4, cols=0)))
check("depth=1..32 accepted",
      all(validate(SampleConfig(depth=d, samples=1)) for d in range(1, 33)))

msg = str(DepthTooLarge(33))
check("DepthTooLarge message names 33 and 32", "33" in msg and "32" in msg, msg)


# =============================================================================
# TEST 2 — Sample Computer
# =============================================================================
print("\n" + "="*60)
print("TEST 2 — Sample Computer")
print("="*60)

check("max_value(d) = 2^d - 1 for d in 1..32",
      all(max_value(d) == 2**d - 1 for d in range(1, 33)))

for depth, n in [(1, 2), (8, 16), (12, 100), (16, 1000), (32, 64), (8, 7)]:
    table = generate_samples(SampleConfig(depth=depth, samples=n))
    report = check_table(table, depth)
    check(f"depth={depth:2d} n={n:4d}: count",    report.count == n,
          f"got {report.count}")
    check(f"depth={depth:2d} n={n:4d}: range",    report.in_range)
    check(f"depth={depth:2d} n={n:4d}: phase 0",  report.phase_zero_ok,
          f"sample[0] = {int(table[0])}")
    if report.symmetry_error is not None:
        check(f"depth={depth:2d} n={n:4d}: half-period symmetry",
              report.symmetry_error <= 1, f"error = {report.symmetry_error}")

check("n=0 → empty table",
      len(generate_samples(SampleConfig(depth=8, samples=0))) == 0)

a = generate_samples(SampleConfig(depth=10, samples=257))
b = generate_samples(SampleConfig(depth=10, samples=257))
check("Deterministic: identical configs give identical tables",
      a.tolist() == b.tolist())

quarter = generate_samples(SampleConfig(depth=8, samples=4)).tolist()
print(f"  {INFO} depth=8 n=4 → {quarter}")
check("depth=8 n=4 → [128, 255, 128, 0]", quarter == [128, 255, 128, 0])


# =============================================================================
# TEST 3 — Formatter
# =============================================================================
print("\n" + "="*60)
print("TEST 3 — Formatter")
print("="*60)

expected_widths = {1: 1, 4: 1, 5: 2, 8: 2, 9: 3, 12: 3, 13: 4, 16: 4,
                   17: 5, 20: 5, 21: 6, 24: 6, 25: 7, 28: 7, 29: 8, 32: 8}
check("hex_width matches nibble table",
      all(hex_width(d) == w for d, w in expected_widths.items()))
check("hex_width is monotonic over 1..32",
      all(hex_width(d) <= hex_width(d + 1) for d in range(1, 32)))
check("depth=8: 255 → 0xFF",  format_sample(255, 8, True) == "0xFF")
check("depth=9: 256 → 0x100", format_sample(256, 9, True) == "0x100")
check("depth=16: 10 → 0x000A", format_sample(10, 16, True) == "0x000A")
check("decimal: 4294967295",
      format_sample(4294967295, 32) == "4294967295")

text = format_table(range(10), SampleConfig(depth=8, samples=10, cols=4))
check("cols=4, 10 samples: row lengths [4, 4, 2]",
      row_lengths(text) == [4, 4, 2], repr(text))
check("cols=4, 10 samples: exactly 3 newlines", text.count("\n") == 3)
check("table always ends with a newline", text.endswith(", \n"))

text = format_table(range(8), SampleConfig(depth=8, samples=8, cols=4))
check("aligned rows still get the trailing newline",
      text.endswith(", \n\n"), repr(text))
check("empty table is a single newline",
      format_table([], SampleConfig(depth=8, samples=0)) == "\n")


# =============================================================================
# TEST 4 — CLI round trip
# =============================================================================
print("\n" + "="*60)
print("TEST 4 — CLI round trip")
print("="*60)

for hex_output in (False, True):
    config = SampleConfig(depth=12, samples=96, cols=8, hex=hex_output)
    buf = io.StringIO()
    code = run(config, buf)
    samples = read_table(buf.getvalue())
    label = "hex" if hex_output else "dec"
    check(f"{label}: exit 0", code == EXIT_OK, f"got {code}")
    check(f"{label}: output reads back to the generated table",
          samples == generate_samples(config).tolist())
    check(f"{label}: table passes checker", check_table(samples, 12).ok)

for config, expected in [
    (SampleConfig(depth=0,  samples=4),         EXIT_INVALID_DEPTH),
    (SampleConfig(depth=33, samples=4),         EXIT_DEPTH_TOO_LARGE),
    (SampleConfig(depth=8,  samples=4, cols=0), EXIT_INVALID_COLUMN_COUNT),
]:
    buf = io.StringIO()
    code = run(config, buf)
    check(f"depth={config.depth} cols={config.cols}: exit {expected}",
          code == expected, f"got {code}")
    output = buf.getvalue()
    check(f"depth={config.depth} cols={config.cols}: only the error line printed",
          output.startswith("[!!]") and output.count("\n") == 1, repr(output))


# =============================================================================
# Summary
# =============================================================================
print("\n" + "="*60)
if failures == 0:
    print(f"  ALL TESTS PASSED")
else:
    print(f"  {failures} TEST(S) FAILED")
print("="*60 + "\n")
sys.exit(0 if failures == 0 else 1)
