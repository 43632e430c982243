"""
Image format conversion utilities.

Handles in-memory conversions between the planar float Image and:
- NumPy arrays (interleaved, height x width x channels)
- PIL Images (L / RGB)
- OpenCV arrays (BGR channel order)
"""

import logging
from typing import Optional

import cv2
import numpy as np
from PIL import Image as PILImage

from rastercore.core.constants import ColorConstants, ImageConstants
from rastercore.core.exceptions import ContractViolationError
from rastercore.core.image import Image

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between Image and other in-memory formats."""

    @staticmethod
    def from_numpy(array: np.ndarray, normalize: Optional[bool] = None) -> Image:
        """
        Convert an interleaved NumPy array to a planar Image.

        Args:
            array: ``(h, w)`` or ``(h, w, c)`` array
            normalize: Divide samples by 255. Defaults to True for integer
                arrays and False for float arrays.

        Returns:
            Planar float Image
        """
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        elif array.ndim != 3:
            raise ContractViolationError(
                "from_numpy", f"expected a 2D or 3D array, got shape {array.shape}"
            )

        if normalize is None:
            normalize = np.issubdtype(array.dtype, np.integer)

        samples = array.astype(ImageConstants.SAMPLE_DTYPE)
        if normalize:
            samples /= ColorConstants.UINT8_MAX

        h, w, c = samples.shape
        planar = np.ascontiguousarray(np.transpose(samples, (2, 0, 1)))
        return Image(w, h, c, planar.reshape(-1))

    @staticmethod
    def to_numpy(image: Image) -> np.ndarray:
        """
        Convert a planar Image to an interleaved float array.

        Returns:
            ``(h, w, c)`` array, or ``(h, w)`` for single-channel images
        """
        planar = image.data.reshape(image.c, image.h, image.w)
        array = np.ascontiguousarray(np.transpose(planar, (1, 2, 0)))
        if image.c == ImageConstants.GRAY_CHANNELS:
            return array[:, :, 0]
        return array

    @staticmethod
    def to_uint8(image: Image) -> np.ndarray:
        """Interleaved 8-bit array, samples clipped to [0, 1] before scaling."""
        array = np.clip(ImageConverters.to_numpy(image), 0.0, 1.0)
        return np.round(array * ColorConstants.UINT8_MAX).astype(np.uint8)

    @staticmethod
    def from_pil(image: PILImage.Image) -> Image:
        """
        Convert PIL Image to a planar Image.

        Modes other than L and RGB are converted to RGB first.
        """
        try:
            if image.mode not in ("L", "RGB"):
                image = image.convert("RGB")
            return ImageConverters.from_numpy(np.array(image), normalize=True)

        except Exception as e:
            logger.error(f"Failed to convert PIL image: {e}")
            raise

    @staticmethod
    def to_pil(image: Image) -> PILImage.Image:
        """
        Convert a 1- or 3-channel Image to a PIL Image (L or RGB).

        Raises:
            ContractViolationError: For other channel counts
        """
        if image.c not in (ImageConstants.GRAY_CHANNELS, ImageConstants.COLOR_CHANNELS):
            raise ContractViolationError(
                "to_pil", f"expected 1 or 3 channels, got {image.c}"
            )
        return PILImage.fromarray(ImageConverters.to_uint8(image))

    @staticmethod
    def from_bgr(array: np.ndarray) -> Image:
        """
        Convert an OpenCV array (BGR or grayscale) to a planar RGB Image.

        Args:
            array: ``(h, w, 3)`` BGR or ``(h, w)`` grayscale array

        Returns:
            Planar float Image in RGB channel order
        """
        try:
            if array.ndim == 3 and array.shape[2] == ImageConstants.COLOR_CHANNELS:
                array = cv2.cvtColor(array, cv2.COLOR_BGR2RGB)
            return ImageConverters.from_numpy(array)

        except Exception as e:
            logger.error(f"Failed to convert BGR array: {e}")
            raise

    @staticmethod
    def to_bgr(image: Image) -> np.ndarray:
        """
        Convert a planar RGB Image to an 8-bit OpenCV array.

        Returns:
            ``(h, w, 3)`` BGR array, or ``(h, w)`` for grayscale images
        """
        array = ImageConverters.to_uint8(image)
        if image.c == ImageConstants.COLOR_CHANNELS:
            return cv2.cvtColor(array, cv2.COLOR_RGB2BGR)
        return array
