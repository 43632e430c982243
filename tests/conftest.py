"""
Pytest configuration and fixtures for rastercore tests
"""

import numpy as np
import pytest

from rastercore.config import get_settings
from rastercore.core.image import Image


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from RASTERCORE_* variables and the settings cache"""
    for name in (
        "RASTERCORE_LOG_LEVEL",
        "RASTERCORE_INTERPOLATION",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rgb_image():
    """3x2 RGB image with distinct samples in [0, 1]"""
    red = [0.9, 0.1, 0.3, 0.5, 0.7, 0.2]
    green = [0.2, 0.8, 0.4, 0.6, 0.1, 0.25]
    blue = [0.4, 0.3, 0.95, 0.05, 0.35, 0.6]
    return Image(3, 2, 3, red + green + blue)


@pytest.fixture
def random_rgb_image():
    """8x6 RGB image of random samples in [0, 1]"""
    rng = np.random.default_rng(1234)
    return Image(8, 6, 3, rng.random(8 * 6 * 3))


@pytest.fixture
def gray_2x2():
    """2x2 single-channel image with samples 0..3 (row-major)"""
    return Image(2, 2, 1, [0.0, 1.0, 2.0, 3.0])
