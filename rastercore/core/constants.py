"""
Constants for the rastercore package.
Centralizes the magic numbers used by the processing operations.
"""

import numpy as np


class ImageConstants:
    """Constants related to image storage."""

    # Sample type of every image buffer
    SAMPLE_DTYPE = np.float32

    # Channel count of RGB / HSV images
    COLOR_CHANNELS = 3
    GRAY_CHANNELS = 1


class ColorConstants:
    """Constants related to color operations."""

    # ITU-R BT.601 luma weights
    LUMA_R = 0.299
    LUMA_G = 0.587
    LUMA_B = 0.114

    # Default range for value clamping (closed interval)
    CLAMP_LOW = 0.0
    CLAMP_HIGH = 1.0

    # Number of hue sectors in the HSV hexcone
    HUE_SECTORS = 6.0

    # Scale between 8-bit and normalized samples
    UINT8_MAX = 255.0


class ResampleConstants:
    """Constants related to geometric resampling."""

    # Output pixel centers land on source pixel centers: coord = x * a + (a * 0.5 - 0.5)
    HALF_PIXEL = 0.5
