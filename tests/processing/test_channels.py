"""
Tests for channel operations
"""

import numpy as np
import pytest
from pydantic import ValidationError

from rastercore.config import get_settings
from rastercore.core.exceptions import ContractViolationError
from rastercore.core.image import Image, get_pixel, make_image
from rastercore.processing.channels import (
    ChannelScale,
    ChannelShift,
    RangeClamp,
    clamp_image,
    rgb_to_grayscale,
    scale_image,
    shift_image,
)


def rgb_pixel(r, g, b):
    return Image(1, 1, 3, [r, g, b])


class TestGrayscale:
    """Test RGB to grayscale reduction"""

    @pytest.mark.parametrize(
        "rgb,expected",
        [((1, 0, 0), 0.299), ((0, 1, 0), 0.587), ((0, 0, 1), 0.114), ((1, 1, 1), 1.0)],
    )
    def test_luma_weights(self, rgb, expected):
        gray = rgb_to_grayscale(rgb_pixel(*rgb))
        assert gray.shape == (1, 1, 1)
        assert get_pixel(gray, 0, 0, 0) == pytest.approx(expected, abs=1e-6)

    def test_original_unchanged(self, rgb_image):
        before = rgb_image.data.copy()
        gray = rgb_to_grayscale(rgb_image)
        assert gray.shape == (rgb_image.w, rgb_image.h, 1)
        np.testing.assert_array_equal(rgb_image.data, before)

    def test_requires_three_channels(self):
        with pytest.raises(ContractViolationError):
            rgb_to_grayscale(make_image(2, 2, 1))


class TestShiftAndScale:
    """Test in-place per-channel shift and scale"""

    def test_shift_one_channel(self, rgb_image):
        before = rgb_image.copy()
        shift_image(rgb_image, 1, 0.25)

        np.testing.assert_allclose(rgb_image.plane(1), before.plane(1) + 0.25, atol=1e-6)
        np.testing.assert_array_equal(rgb_image.plane(0), before.plane(0))
        np.testing.assert_array_equal(rgb_image.plane(2), before.plane(2))

    def test_shift_then_unshift_restores(self, rgb_image):
        before = rgb_image.copy()
        shift_image(rgb_image, 0, 0.5)
        shift_image(rgb_image, 0, -0.5)
        np.testing.assert_allclose(rgb_image.data, before.data, atol=1e-6)

    def test_shift_is_not_clamped(self):
        image = rgb_pixel(0.9, 0.0, 0.0)
        shift_image(image, 0, 0.5)
        assert get_pixel(image, 0, 0, 0) == pytest.approx(1.4)

    def test_scale_one_channel(self, rgb_image):
        before = rgb_image.copy()
        scale_image(rgb_image, 2, 2.0)

        np.testing.assert_allclose(rgb_image.plane(2), before.plane(2) * 2.0, atol=1e-6)
        np.testing.assert_array_equal(rgb_image.plane(0), before.plane(0))
        np.testing.assert_array_equal(rgb_image.plane(1), before.plane(1))

    @pytest.mark.parametrize("operation", [shift_image, scale_image])
    def test_requires_three_channels(self, operation):
        image = make_image(2, 2, 4)
        with pytest.raises(ContractViolationError):
            operation(image, 0, 1.0)

    @pytest.mark.parametrize("transform", [ChannelShift, ChannelScale])
    @pytest.mark.parametrize("channel", [-1, 3])
    def test_invalid_channel_rejected(self, transform, channel):
        field = "delta" if transform is ChannelShift else "factor"
        with pytest.raises(ValidationError):
            transform(channel=channel, **{field: 1.0})


class TestClamp:
    """Test range clamping"""

    def test_clamps_into_unit_range(self):
        image = Image(2, 1, 3, [-0.5, 0.5, 1.5, 1.0, 0.0, 2.0])
        clamp_image(image)
        np.testing.assert_array_equal(image.data, [0.0, 0.5, 1.0, 1.0, 0.0, 1.0])

    def test_idempotent(self):
        rng = np.random.default_rng(7)
        image = Image(5, 4, 3, rng.uniform(-2.0, 3.0, 60))
        clamp_image(image)
        assert image.data.min() >= 0.0
        assert image.data.max() <= 1.0

        once = image.data.copy()
        clamp_image(image)
        np.testing.assert_array_equal(image.data, once)

    def test_explicit_bounds(self):
        image = rgb_pixel(0.1, 0.5, 0.9)
        clamp_image(image, low=0.2, high=0.8)
        np.testing.assert_allclose(image.data, [0.2, 0.5, 0.8], atol=1e-6)

    def test_default_bounds_ignore_environment(self, monkeypatch):
        """Without explicit bounds the range is always [0, 1]"""
        monkeypatch.setenv("RASTERCORE_CLAMP_LOW", "-3")
        monkeypatch.setenv("RASTERCORE_CLAMP_HIGH", "5")
        get_settings.cache_clear()

        image = rgb_pixel(1.5, 2.0, -1.0)
        clamp_image(image)
        np.testing.assert_array_equal(image.data, [1.0, 1.0, 0.0])

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            RangeClamp(low=1.0, high=0.0)

    def test_requires_three_channels(self):
        with pytest.raises(ContractViolationError):
            clamp_image(make_image(1, 1, 1))
