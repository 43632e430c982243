"""
Image data model.

An Image owns a single contiguous, channel-planar float buffer: all
samples of channel 0 in row-major order, then channel 1, and so on.
Its shape never changes after construction.
"""

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from rastercore.core.addressing import in_bounds, pixel_index
from rastercore.core.constants import ImageConstants
from rastercore.core.exceptions import ContractViolationError

BufferLike = Union[np.ndarray, Sequence[float]]


class Image:
    """Planar float raster of ``w`` x ``h`` pixels with ``c`` channels."""

    __slots__ = ("_w", "_h", "_c", "_data")

    def __init__(self, w: int, h: int, c: int, data: Optional[BufferLike] = None):
        """
        Create an image, copying ``data`` into a freshly allocated buffer.

        Args:
            w: Width in pixels
            h: Height in pixels
            c: Channel count
            data: Planar samples (``w * h * c`` of them), zeros if omitted

        Raises:
            ContractViolationError: If a dimension is negative or the buffer
                length does not match ``w * h * c``
        """
        for name, value in (("w", w), ("h", h), ("c", c)):
            if int(value) != value or value < 0:
                raise ContractViolationError(
                    "Image", f"{name} must be a non-negative integer, got {value!r}"
                )

        self._w = int(w)
        self._h = int(h)
        self._c = int(c)

        size = self._w * self._h * self._c
        if data is None:
            self._data = np.zeros(size, dtype=ImageConstants.SAMPLE_DTYPE)
        else:
            self._data = np.array(data, dtype=ImageConstants.SAMPLE_DTYPE).reshape(-1)
            if self._data.size != size:
                raise ContractViolationError(
                    "Image",
                    f"buffer holds {self._data.size} samples, expected {size} "
                    f"for {self._w}x{self._h}x{self._c}",
                )

    @property
    def w(self) -> int:
        return self._w

    @property
    def h(self) -> int:
        return self._h

    @property
    def c(self) -> int:
        return self._c

    @property
    def data(self) -> np.ndarray:
        """Flat planar sample buffer (length ``w * h * c``)."""
        return self._data

    @property
    def shape(self) -> Tuple[int, int, int]:
        """(width, height, channels)"""
        return (self._w, self._h, self._c)

    def plane(self, c: int) -> np.ndarray:
        """Return a read-only ``(h, w)`` view of channel ``c``."""
        if not 0 <= c < self._c:
            raise ContractViolationError(
                "Image.plane", f"channel {c} out of range for {self._c} channels"
            )
        size = self._w * self._h
        view = self._data[c * size : (c + 1) * size].reshape(self._h, self._w)
        view.flags.writeable = False
        return view

    def copy(self) -> "Image":
        return copy_image(self)

    def __repr__(self) -> str:
        return f"Image(w={self._w}, h={self._h}, c={self._c})"


def make_image(w: int, h: int, c: int) -> Image:
    """Allocate a zero-filled image."""
    return Image(w, h, c)


def copy_image(image: Image) -> Image:
    """Deep copy: same shape and samples, no shared buffer."""
    return Image(image.w, image.h, image.c, image.data)


def get_pixel(image: Image, x: int, y: int, c: int) -> float:
    """
    Read one sample with clamp-to-edge addressing.

    Coordinates outside the image read the nearest edge pixel. ``c`` is
    not clamped.
    """
    return float(image.data[pixel_index(x, y, c, image.w, image.h)])


def set_pixel(image: Image, x: int, y: int, c: int, v: float) -> None:
    """
    Write one sample.

    Writes outside the image are dropped. The value itself is stored
    as given.
    """
    if not in_bounds(x, y, image.w, image.h):
        return
    image.data[pixel_index(x, y, c, image.w, image.h)] = v
