"""
Enumerations shared across the package.
"""

from enum import Enum


class InterpolationMethod(str, Enum):
    """Interpolation strategies available to the resampler."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"
