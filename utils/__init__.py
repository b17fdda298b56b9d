"""Shared utilities."""

from .constants import JPEG_LUMA_Q50, BLOCK_SIZE
from .metrics import compute_psnr_ssim, Timer
from .test_images import (
    generate_flat,
    generate_pixel_checkerboard,
    generate_colored_checkerboard,
    generate_gradient,
    generate_chroma_stripes,
    generate_demo_image,
)
from .image_io import load_image, save_image

__all__ = [
    'JPEG_LUMA_Q50',
    'BLOCK_SIZE',
    'compute_psnr_ssim',
    'Timer',
    'generate_flat',
    'generate_pixel_checkerboard',
    'generate_colored_checkerboard',
    'generate_gradient',
    'generate_chroma_stripes',
    'generate_demo_image',
    'load_image',
    'save_image',
]
