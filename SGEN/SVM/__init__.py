# =============================================================================
# SGEN/SVM/__init__.py — Sample Verification Module
# =============================================================================
#
# Tools for verifying that a generated table is a correct quantized sine
# period before it is pasted anywhere.
#
# Sub-modules:
#   table_check.py  — reads printed tables back and checks range/phase/symmetry
#   validate.py     — self-validation suite for the entire SGEN stack
# =============================================================================
