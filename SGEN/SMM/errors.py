# =============================================================================
# errors.py — Configuration error kinds
# =============================================================================
#
# Each error carries the process exit code it maps to. Nothing below the CLI
# exits the process; SGEN.cli.run() turns these into exit codes.

from SGEN.SMM.constants import (
    MAX_DEPTH,
    EXIT_INVALID_DEPTH, EXIT_DEPTH_TOO_LARGE, EXIT_INVALID_COLUMN_COUNT,
)


class SampleGenError(Exception):
    """Base class for configuration errors. ``exit_code`` is never 0."""

    exit_code = 1


class InvalidDepth(SampleGenError):
    exit_code = EXIT_INVALID_DEPTH

    def __init__(self) -> None:
        super().__init__("Specified bit depth cannot be zero")


class DepthTooLarge(SampleGenError):
    exit_code = EXIT_DEPTH_TOO_LARGE

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(
            f"Specified bit depth of {depth} exceeds supported maximum of {MAX_DEPTH}"
        )


class InvalidColumnCount(SampleGenError):
    exit_code = EXIT_INVALID_COLUMN_COUNT

    def __init__(self) -> None:
        super().__init__("Specified column count cannot be zero")
