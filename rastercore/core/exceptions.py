"""
Exception hierarchy for rastercore.

Contract violations are programming errors: the operation refuses to run
instead of producing silently wrong output. Out-of-range pixel
coordinates are not errors and never raise.
"""


class RasterError(Exception):
    """Base class for all rastercore errors."""


class ContractViolationError(RasterError):
    """
    Raised when an operation's precondition does not hold.

    Examples: wrong channel count for an RGB-only operation, mismatched
    width/height between pipeline source and target, or a buffer whose
    length is not ``w * h * c``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


def require_channels(operation: str, channels: int, expected: int) -> None:
    """Fail fast unless an image has exactly ``expected`` channels."""
    if channels != expected:
        raise ContractViolationError(
            operation, f"expected {expected} channels, got {channels}"
        )
