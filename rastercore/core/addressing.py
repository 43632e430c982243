"""
Pixel addressing for channel-planar buffers.

Converts (x, y, channel) coordinates into flat buffer offsets. Reads use
clamp-to-edge addressing: coordinates outside the image are redirected
to the nearest edge pixel instead of failing.
"""

import math


def clamp_int(val: int, lo: int, hi: int) -> int:
    """
    Restrict ``val`` to the half-open interval ``[lo, hi)``.

    Used for coordinate clamping only: values below ``lo`` map to ``lo``,
    values at or above ``hi`` map to ``hi - 1``.
    """
    low_clamped = lo if val < lo else val
    return hi - 1 if low_clamped >= hi else low_clamped


def clamp_float(val: float, lo: float, hi: float) -> float:
    """Restrict ``val`` to the closed interval ``[lo, hi]``."""
    low_clamped = lo if val < lo else val
    return hi if low_clamped > hi else low_clamped


def pixel_index(x: int, y: int, c: int, w: int, h: int) -> int:
    """
    Compute the flat offset of a sample in a channel-planar buffer.

    Args:
        x: Column, clamped to ``[0, w)``
        y: Row, clamped to ``[0, h)``
        c: Channel (not clamped, caller must pass a valid channel)
        w: Image width
        h: Image height

    Returns:
        Offset into a buffer of ``w * h * channels`` samples
    """
    return clamp_int(x, 0, w) + clamp_int(y, 0, h) * w + c * w * h


def in_bounds(x: int, y: int, w: int, h: int) -> bool:
    """Check whether (x, y) addresses a pixel inside a ``w`` x ``h`` image."""
    return 0 <= x < w and 0 <= y < h


def round_half_away(val: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    ``round()`` rounds halves to even, which would move nearest-neighbor
    samples at exact half-pixel coordinates.
    """
    if val < 0:
        return -int(math.floor(-val + 0.5))
    return int(math.floor(val + 0.5))


def three_way_max(a: float, b: float, c: float) -> float:
    """Largest of three values."""
    return (a if a > c else c) if a > b else (b if b > c else c)


def three_way_min(a: float, b: float, c: float) -> float:
    """Smallest of three values."""
    return (a if a < c else c) if a < b else (b if b < c else c)
