"""
Channel operations expressed as per-pixel transforms.

- Grayscale: RGB to single-channel luma (new image)
- ChannelShift / ChannelScale: add to or multiply one channel (in place)
- RangeClamp: confine every sample to a closed range (in place)
"""

from typing import List, Optional

from pydantic import Field, model_validator

from rastercore.core.addressing import clamp_float
from rastercore.core.constants import ColorConstants, ImageConstants
from rastercore.core.image import Image
from rastercore.core.pipeline import PixelTransform


class Grayscale(PixelTransform):
    """BT.601 luma of an RGB pixel."""

    def output_channels(self, input_channels: int) -> int:
        return ImageConstants.GRAY_CHANNELS

    def __call__(self, pixel: List[float]) -> List[float]:
        return [
            pixel[0] * ColorConstants.LUMA_R
            + pixel[1] * ColorConstants.LUMA_G
            + pixel[2] * ColorConstants.LUMA_B
        ]


class ChannelShift(PixelTransform):
    """Add ``delta`` to one channel, copying the others unchanged."""

    channel: int = Field(..., ge=0, lt=ImageConstants.COLOR_CHANNELS, description="Channel to shift")
    delta: float = Field(..., description="Value added to the channel")

    def __call__(self, pixel: List[float]) -> List[float]:
        output = pixel[: ImageConstants.COLOR_CHANNELS]
        output[self.channel] += self.delta
        return output


class ChannelScale(PixelTransform):
    """Multiply one channel by ``factor``, copying the others unchanged."""

    channel: int = Field(..., ge=0, lt=ImageConstants.COLOR_CHANNELS, description="Channel to scale")
    factor: float = Field(..., description="Multiplier applied to the channel")

    def __call__(self, pixel: List[float]) -> List[float]:
        output = pixel[: ImageConstants.COLOR_CHANNELS]
        output[self.channel] *= self.factor
        return output


class RangeClamp(PixelTransform):
    """Clamp every channel to the closed interval ``[low, high]``."""

    low: float = Field(default=ColorConstants.CLAMP_LOW, description="Lower bound")
    high: float = Field(default=ColorConstants.CLAMP_HIGH, description="Upper bound")

    @model_validator(mode="after")
    def validate_range(self) -> "RangeClamp":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    def __call__(self, pixel: List[float]) -> List[float]:
        return [
            clamp_float(value, self.low, self.high)
            for value in pixel[: ImageConstants.COLOR_CHANNELS]
        ]


def rgb_to_grayscale(image: Image) -> Image:
    """
    Convert an RGB image to grayscale.

    Args:
        image: 3-channel image, left unchanged

    Returns:
        New 1-channel image of the same size
    """
    return Grayscale().apply(image)


def shift_image(image: Image, channel: int, delta: float) -> None:
    """Add ``delta`` to ``channel`` of a 3-channel image, in place."""
    ChannelShift(channel=channel, delta=delta).apply_in_place(image)


def scale_image(image: Image, channel: int, factor: float) -> None:
    """Multiply ``channel`` of a 3-channel image by ``factor``, in place."""
    ChannelScale(channel=channel, factor=factor).apply_in_place(image)


def clamp_image(image: Image, low: Optional[float] = None, high: Optional[float] = None) -> None:
    """
    Clamp every sample of a 3-channel image, in place.

    Args:
        image: 3-channel image
        low: Lower bound, 0.0 when omitted
        high: Upper bound, 1.0 when omitted
    """
    RangeClamp(
        low=ColorConstants.CLAMP_LOW if low is None else low,
        high=ColorConstants.CLAMP_HIGH if high is None else high,
    ).apply_in_place(image)
