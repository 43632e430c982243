"""
Interop between rastercore images and other in-memory image formats.
"""

from rastercore.image.converters import ImageConverters

__all__ = ["ImageConverters"]
