"""Compression result with metrics."""

from dataclasses import dataclass

from models.raster_image import RasterImage


@dataclass
class CompressionResult:
    """Output image plus quality metrics for one pipeline run."""

    original_image: RasterImage
    reconstructed_image: RasterImage
    factor: float

    # Quality metrics
    psnr_y: float
    ssim_y: float
    psnr_rgb: float
    ssim_rgb: float

    # Runtime
    encode_time_ms: float
    decode_time_ms: float
