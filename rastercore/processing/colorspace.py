"""
RGB <-> HSV color space conversion.

Both directions run in place over 3-channel images. Hue is normalized to
[0, 1) rather than degrees, so H, S and V share the [0, 1] range of the
RGB samples.
"""

from typing import List

from rastercore.core.addressing import three_way_max, three_way_min
from rastercore.core.constants import ColorConstants
from rastercore.core.image import Image
from rastercore.core.pipeline import PixelTransform


class RgbToHsv(PixelTransform):
    """Map an (R, G, B) pixel to (H, S, V)."""

    def __call__(self, pixel: List[float]) -> List[float]:
        r, g, b = pixel[0], pixel[1], pixel[2]

        value = three_way_max(r, g, b)
        chroma = value - three_way_min(r, g, b)
        saturation = 0.0 if value == 0.0 else chroma / value

        if chroma == 0.0:
            hue = 0.0
        elif value == r:
            hue = (g - b) / chroma
        elif value == g:
            hue = (b - r) / chroma + 2.0
        else:
            hue = (r - g) / chroma + 4.0

        hue /= ColorConstants.HUE_SECTORS
        if hue < 0.0:
            hue += 1.0

        return [hue, saturation, value]


class HsvToRgb(PixelTransform):
    """Map an (H, S, V) pixel back to (R, G, B)."""

    def __call__(self, pixel: List[float]) -> List[float]:
        hue, saturation, value = pixel[0], pixel[1], pixel[2]

        # Achromatic
        if saturation == 0.0:
            return [value, value, value]

        chroma = value * saturation
        max_rgb = value
        min_rgb = value - chroma
        h6 = hue * ColorConstants.HUE_SECTORS

        if 0.0 <= h6 < 1.0:
            return [max_rgb, h6 * chroma + min_rgb, min_rgb]
        if 1.0 <= h6 < 2.0:
            return [-(h6 - 2.0) * chroma + min_rgb, max_rgb, min_rgb]
        if 2.0 <= h6 < 3.0:
            return [min_rgb, max_rgb, (h6 - 2.0) * chroma + min_rgb]
        if 3.0 <= h6 < 4.0:
            return [min_rgb, -(h6 - 4.0) * chroma + min_rgb, max_rgb]
        if 4.0 <= h6 < 5.0:
            return [(h6 - 4.0) * chroma + min_rgb, min_rgb, max_rgb]
        # Sector 5, and any hue outside [0, 1)
        return [max_rgb, min_rgb, -(h6 - 6.0) * chroma + min_rgb]


def rgb_to_hsv(image: Image) -> None:
    """Convert a 3-channel RGB image to HSV in place."""
    RgbToHsv().apply_in_place(image)


def hsv_to_rgb(image: Image) -> None:
    """Convert a 3-channel HSV image to RGB in place."""
    HsvToRgb().apply_in_place(image)
