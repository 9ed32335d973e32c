# =============================================================================
# SGM — Sample Generation Module
# Subfolder of SGEN (Sine sample GENerator)
# =============================================================================
#
# Turns a validated configuration into a quantized sine table and prints it.
#
# Modules:
#   config.py            — SampleConfig, validate(), verbose describe()
#   sample_generator.py  — max_value(), quantize(), generate_samples()
#   formatter.py         — hex_width(), decimal/hex fields, row wrapping
#
# Limits live in SGEN/SMM/constants.py
# Verification tools live in SGEN/SVM/
# =============================================================================
