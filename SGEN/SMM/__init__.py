# =============================================================================
# SGEN/SMM/__init__.py — Sample Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the generator's limits: valid bit
# depths, command-line ranges, output literals and process exit codes, plus
# the error kinds raised when a configuration breaks those limits.
#
# Sub-modules:
#   constants.py  — limits, output literals, exit codes
#   errors.py     — InvalidDepth / DepthTooLarge / InvalidColumnCount
# =============================================================================
