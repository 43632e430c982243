"""
Geometric resampling.

Resizes an image by mapping every output pixel center back onto the
source grid and asking an interpolation strategy for the sample there.
Boundary pixels need no special handling: reads outside the source are
edge-clamped by get_pixel().
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Type, Union

import numpy as np
from pydantic import BaseModel, ConfigDict

from rastercore.config import get_settings
from rastercore.core.addressing import round_half_away
from rastercore.core.constants import ResampleConstants
from rastercore.core.enums import InterpolationMethod
from rastercore.core.exceptions import ContractViolationError
from rastercore.core.image import Image, get_pixel, make_image, set_pixel

logger = logging.getLogger(__name__)


class Interpolator(BaseModel, ABC):
    """Strategy returning the sample of one channel at a fractional source coordinate."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def __call__(self, image: Image, x: float, y: float, c: int) -> float:
        """Sample channel ``c`` of ``image`` at (x, y)."""


class NearestNeighbor(Interpolator):
    """Read the pixel whose center is closest, halves rounding away from zero."""

    def __call__(self, image: Image, x: float, y: float, c: int) -> float:
        return get_pixel(image, round_half_away(x), round_half_away(y), c)


def lerp(first: float, second: float, ratio: float) -> float:
    return first * (1 - ratio) + second * ratio


class Bilinear(Interpolator):
    """
    Separable linear interpolation between the four surrounding pixels.

    Integral coordinates give floor == ceil and a zero ratio, so the
    formula collapses to the exact sample without special cases.
    """

    def __call__(self, image: Image, x: float, y: float, c: int) -> float:
        x0, x1 = math.floor(x), math.ceil(x)
        y0, y1 = math.floor(y), math.ceil(y)
        tx = x - x0
        ty = y - y0

        top = lerp(get_pixel(image, x0, y0, c), get_pixel(image, x1, y0, c), tx)
        bottom = lerp(get_pixel(image, x0, y1, c), get_pixel(image, x1, y1, c), tx)
        return lerp(top, bottom, ty)


INTERPOLATORS: Dict[InterpolationMethod, Type[Interpolator]] = {
    InterpolationMethod.NEAREST: NearestNeighbor,
    InterpolationMethod.BILINEAR: Bilinear,
}

InterpolatorLike = Union[Interpolator, InterpolationMethod, str, None]


def get_interpolator(interpolator: InterpolatorLike = None) -> Interpolator:
    """
    Resolve an interpolation strategy.

    Args:
        interpolator: Strategy instance, InterpolationMethod, method name
            (case-insensitive), or None for the configured default

    Returns:
        Interpolator instance

    Raises:
        ValueError: If the method name is unknown
    """
    if isinstance(interpolator, Interpolator):
        return interpolator

    if interpolator is None:
        method = get_settings().processing.default_interpolation
    elif isinstance(interpolator, InterpolationMethod):
        method = interpolator
    else:
        try:
            method = InterpolationMethod(str(interpolator).lower())
        except ValueError:
            valid = ", ".join(m.value for m in InterpolationMethod)
            raise ValueError(
                f"Unknown interpolation method '{interpolator}' (expected one of: {valid})"
            ) from None

    return INTERPOLATORS[method]()


def _axis_mapping(source_dim: int, target_dim: int) -> Tuple[np.float32, np.float32]:
    """Scale and offset mapping target coordinates onto source pixel centers (float32)."""
    scale = np.float32(source_dim) / np.float32(target_dim)
    offset = scale * np.float32(ResampleConstants.HALF_PIXEL) - np.float32(ResampleConstants.HALF_PIXEL)
    return scale, offset


def resize(image: Image, w: int, h: int, interpolator: InterpolatorLike = None) -> Image:
    """
    Resize an image.

    Output pixel (x, y) samples the source at
    ``x * a + (a * 0.5 - 0.5)`` with ``a = source_dim / target_dim`` per
    axis, so output pixel centers land on source pixel centers.

    Args:
        image: Source image, left unchanged
        w: Target width (>= 0)
        h: Target height (>= 0)
        interpolator: Interpolation strategy (see get_interpolator)

    Returns:
        New image of size ``w`` x ``h`` with the source's channel count

    Raises:
        ContractViolationError: If a target dimension is negative or not an
            integer, or the source is empty
    """
    if int(w) != w or int(h) != h or w < 0 or h < 0:
        raise ContractViolationError(
            "resize", f"target size must be non-negative integers, got {w}x{h}"
        )
    if image.w == 0 or image.h == 0:
        raise ContractViolationError("resize", f"cannot resample an empty {image.w}x{image.h} image")

    w, h = int(w), int(h)
    if w == 0 or h == 0:
        return make_image(w, h, image.c)

    interp = get_interpolator(interpolator)
    logger.debug(
        f"resize ({type(interp).__name__}): {image.w}x{image.h} -> {w}x{h}, {image.c} channels"
    )

    out = make_image(w, h, image.c)
    scale_x, offset_x = _axis_mapping(image.w, w)
    scale_y, offset_y = _axis_mapping(image.h, h)

    for y in range(h):
        y_coord = float(np.float32(y) * scale_y + offset_y)
        for x in range(w):
            x_coord = float(np.float32(x) * scale_x + offset_x)
            for c in range(image.c):
                set_pixel(out, x, y, c, interp(image, x_coord, y_coord, c))

    return out


def nn_resize(image: Image, w: int, h: int) -> Image:
    """Resize with nearest-neighbor interpolation."""
    return resize(image, w, h, NearestNeighbor())


def bilinear_resize(image: Image, w: int, h: int) -> Image:
    """Resize with bilinear interpolation."""
    return resize(image, w, h, Bilinear())
