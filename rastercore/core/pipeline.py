"""
Per-pixel transformation pipeline.

Drives a per-pixel function over a source image and writes the results
into a target image of the same width and height. Channel counts of
source and target may differ.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from rastercore.core.exceptions import ContractViolationError, require_channels
from rastercore.core.image import Image, get_pixel, make_image, set_pixel

logger = logging.getLogger(__name__)

PixelFunction = Callable[[List[float]], Sequence[float]]


def apply_pixel_transform(source: Image, target: Image, transform: PixelFunction) -> Image:
    """
    Apply ``transform`` to every pixel of ``source``, writing into ``target``.

    Each pixel's full channel vector is gathered before any of its
    channels are written, and pixels never read each other, so
    ``source`` and ``target`` may be the same image.

    Args:
        source: Input image
        target: Output image, same width and height as ``source``
        transform: Maps a list of ``source.c`` samples to ``target.c`` samples

    Returns:
        The target image

    Raises:
        ContractViolationError: If the dimensions differ, or the transform
            returns the wrong number of samples
    """
    if source.w != target.w or source.h != target.h:
        raise ContractViolationError(
            "apply_pixel_transform",
            f"source is {source.w}x{source.h}, target is {target.w}x{target.h}",
        )

    # Nothing is written until every result has been checked
    results = []
    for y in range(source.h):
        for x in range(source.w):
            pixel = [get_pixel(source, x, y, c) for c in range(source.c)]
            result = transform(pixel)
            if len(result) != target.c:
                raise ContractViolationError(
                    "apply_pixel_transform",
                    f"transform produced {len(result)} samples at ({x}, {y}), "
                    f"target has {target.c} channels",
                )
            results.append((x, y, result))

    for x, y, result in results:
        for c in range(target.c):
            set_pixel(target, x, y, c, result[c])

    return target


class PixelTransform(BaseModel, ABC):
    """
    Base class for per-pixel transforms.

    Subclasses declare their configuration as pydantic fields, so a
    transform is a validated, immutable value that can be applied to any
    number of images.
    """

    model_config = ConfigDict(frozen=True)

    # Required source channel count, None accepts any
    input_channels: ClassVar[Optional[int]] = 3

    def output_channels(self, input_channels: int) -> int:
        """Channel count produced for a source with ``input_channels``."""
        return input_channels

    @abstractmethod
    def __call__(self, pixel: List[float]) -> List[float]:
        """Map one pixel's channel vector to the output vector."""

    def check_source(self, image: Image) -> None:
        if self.input_channels is not None:
            require_channels(type(self).__name__, image.c, self.input_channels)

    def apply(self, source: Image, target: Optional[Image] = None) -> Image:
        """
        Run the transform over ``source``.

        Args:
            source: Input image
            target: Output image; a new one is allocated when omitted.
                Pass ``source`` itself to transform in place.

        Returns:
            The image holding the result
        """
        self.check_source(source)
        expected = self.output_channels(source.c)
        if target is None:
            target = make_image(source.w, source.h, expected)
        elif target.c != expected:
            raise ContractViolationError(
                type(self).__name__,
                f"target has {target.c} channels, expected {expected}",
            )

        logger.debug(
            f"{type(self).__name__}: {source.w}x{source.h}x{source.c} -> {target.c} channels"
        )
        return apply_pixel_transform(source, target, self)

    def apply_in_place(self, image: Image) -> Image:
        return self.apply(image, image)
