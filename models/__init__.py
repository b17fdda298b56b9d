"""Data models for images, parameters and results."""

from .errors import CompressionError, InvalidDimensions, BufferSizeMismatch
from .raster_image import RasterImage
from .compression_params import CompressionParams, QuantScaling, BlockPadding, clamp_factor
from .compression_result import CompressionResult

__all__ = [
    'CompressionError',
    'InvalidDimensions',
    'BufferSizeMismatch',
    'RasterImage',
    'CompressionParams',
    'QuantScaling',
    'BlockPadding',
    'clamp_factor',
    'CompressionResult',
]
