"""
Image processing operations.

- channels: grayscale, channel shift/scale, range clamp
- colorspace: RGB <-> HSV
- resize: nearest-neighbor and bilinear resampling
"""

from rastercore.processing.channels import (
    ChannelScale,
    ChannelShift,
    Grayscale,
    RangeClamp,
    clamp_image,
    rgb_to_grayscale,
    scale_image,
    shift_image,
)
from rastercore.processing.colorspace import HsvToRgb, RgbToHsv, hsv_to_rgb, rgb_to_hsv
from rastercore.processing.resize import (
    Bilinear,
    Interpolator,
    NearestNeighbor,
    bilinear_resize,
    get_interpolator,
    nn_resize,
    resize,
)

__all__ = [
    "ChannelScale",
    "ChannelShift",
    "Grayscale",
    "RangeClamp",
    "clamp_image",
    "rgb_to_grayscale",
    "scale_image",
    "shift_image",
    "HsvToRgb",
    "RgbToHsv",
    "hsv_to_rgb",
    "rgb_to_hsv",
    "Bilinear",
    "Interpolator",
    "NearestNeighbor",
    "bilinear_resize",
    "get_interpolator",
    "nn_resize",
    "resize",
]
