"""
Core modules for rastercore: image model, addressing and the pixel pipeline.
"""

from .addressing import clamp_float, clamp_int, pixel_index, round_half_away
from .enums import InterpolationMethod
from .exceptions import ContractViolationError, RasterError
from .image import Image, copy_image, get_pixel, make_image, set_pixel
from .pipeline import PixelTransform, apply_pixel_transform

__all__ = [
    "clamp_float",
    "clamp_int",
    "pixel_index",
    "round_half_away",
    "InterpolationMethod",
    "ContractViolationError",
    "RasterError",
    "Image",
    "copy_image",
    "get_pixel",
    "make_image",
    "set_pixel",
    "PixelTransform",
    "apply_pixel_transform",
]
