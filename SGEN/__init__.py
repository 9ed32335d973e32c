# =============================================================================
# Sine sample GENerator (SGEN)
# =============================================================================
#
# Prints one period of a sine wave quantized to 1..32 bits, as decimal or
# zero-padded hex, wrapped into rows. Typical use is pasting a lookup table
# into firmware or HDL sources.
#
# ── PIPELINE ──────────────────────────────────────────────────────────────────
#   argv → SampleConfig → validate() → generate_samples() → write_table()
#
#   One synchronous pass. The whole table is computed before the first
#   character is printed; memory grows with the sample count.
#
# ── EXIT CODES ────────────────────────────────────────────────────────────────
#   0  success
#   1  bit depth is zero
#   2  bit depth exceeds 32
#   3  column count is zero
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/  — limits, output literals, exit codes, error kinds
#   SGM/  — configuration, sample computer, formatter
#   SVM/  — table reader/checker and the self-validation suite
#   cli.py — argparse front end (`samplegen`, `python -m SGEN`)
# =============================================================================
