# =============================================================================
# constants.py — SMM Sample Limits and Output Constants
# =============================================================================
#
# Every limit the generator enforces and every literal the formatter emits
# lives here. Other SGEN sub-modules import from this file only.

# -----------------------------------------------------------------------------
# BIT DEPTH
# -----------------------------------------------------------------------------

MIN_DEPTH = 1     # depth 0 has no representable range
MAX_DEPTH = 32    # samples must fit an unsigned 32-bit word

# -----------------------------------------------------------------------------
# COMMAND-LINE RANGES
# -----------------------------------------------------------------------------
# Depth and column count are read as unsigned bytes, sample count as an
# unsigned 32-bit word. Values outside these ranges never reach validation.

U8_MAX  = 0xFF
U32_MAX = 0xFFFF_FFFF

DEFAULT_COLS = 1

# -----------------------------------------------------------------------------
# OUTPUT FORMAT
# -----------------------------------------------------------------------------

SEPARATOR      = ", "   # follows EVERY sample, including the last
HEX_PREFIX     = "0x"
HEX_DIGIT_BITS = 4      # one hex digit per nibble

# -----------------------------------------------------------------------------
# EXIT CODES
# -----------------------------------------------------------------------------

EXIT_OK                   = 0
EXIT_INVALID_DEPTH        = 1
EXIT_DEPTH_TOO_LARGE      = 2
EXIT_INVALID_COLUMN_COUNT = 3
