"""
rastercore - image processing on planar float raster buffers.

Pixel addressing with edge clamping, a per-pixel transform pipeline,
channel operations, RGB <-> HSV conversion and nearest-neighbor /
bilinear resampling.
"""

from rastercore.config import Settings, get_settings
from rastercore.core import (
    ContractViolationError,
    Image,
    InterpolationMethod,
    PixelTransform,
    RasterError,
    apply_pixel_transform,
    clamp_float,
    clamp_int,
    copy_image,
    get_pixel,
    make_image,
    pixel_index,
    set_pixel,
)
from rastercore.image import ImageConverters
from rastercore.logging_config import configure_logging
from rastercore.processing import (
    Bilinear,
    ChannelScale,
    ChannelShift,
    Grayscale,
    HsvToRgb,
    Interpolator,
    NearestNeighbor,
    RangeClamp,
    RgbToHsv,
    bilinear_resize,
    clamp_image,
    hsv_to_rgb,
    nn_resize,
    resize,
    rgb_to_grayscale,
    rgb_to_hsv,
    scale_image,
    shift_image,
)

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "ContractViolationError",
    "RasterError",
    "Image",
    "InterpolationMethod",
    "PixelTransform",
    "apply_pixel_transform",
    "clamp_float",
    "clamp_int",
    "copy_image",
    "get_pixel",
    "make_image",
    "pixel_index",
    "set_pixel",
    "ImageConverters",
    "Bilinear",
    "ChannelScale",
    "ChannelShift",
    "Grayscale",
    "HsvToRgb",
    "Interpolator",
    "NearestNeighbor",
    "RangeClamp",
    "RgbToHsv",
    "bilinear_resize",
    "clamp_image",
    "hsv_to_rgb",
    "nn_resize",
    "resize",
    "rgb_to_grayscale",
    "rgb_to_hsv",
    "scale_image",
    "shift_image",
]
