"""Main compression/reconstruction pipeline."""

import asyncio
import dataclasses
import logging
from typing import Optional

import numpy as np

from models.compression_params import CompressionParams
from models.compression_result import CompressionResult
from models.raster_image import RasterImage
from engines.color_space import rgb_to_ycbcr, ycbcr_to_rgb, subsample_chroma, upsample_chroma
from engines.block_processor import process_plane
from engines.quantizer import build_quant_table
from utils.metrics import compute_psnr_ssim, Timer

logger = logging.getLogger(__name__)


def _resolve_params(factor: float, params: Optional[CompressionParams]) -> CompressionParams:
    # The call's factor always wins over the one carried by params
    if params is None:
        return CompressionParams(factor=factor)
    return dataclasses.replace(params, factor=factor)

def encode_planes(rgba: np.ndarray, params: CompressionParams):
    """Colour transform, chroma subsampling and block coding. Returns (Y, Cb_sub, Cr_sub)."""
    ycbcr = rgb_to_ycbcr(rgba[:, :, :3].astype(np.float64))
    Y, Cb, Cr = ycbcr[:, :, 0], ycbcr[:, :, 1], ycbcr[:, :, 2]

    Cb_sub, Cr_sub = subsample_chroma(Cb, Cr, params.subsampling_mode, params.use_prefilter)

    # One table for all three planes
    Q_matrix = build_quant_table(params.factor, params.scaling)

    Y_coded = process_plane(Y, Q_matrix, params.padding, params.level_shift)
    Cb_coded = process_plane(Cb_sub, Q_matrix, params.padding, params.level_shift)
    Cr_coded = process_plane(Cr_sub, Q_matrix, params.padding, params.level_shift)
    return Y_coded, Cb_coded, Cr_coded


def decode_planes(Y: np.ndarray, Cb_sub: np.ndarray, Cr_sub: np.ndarray, params: CompressionParams) -> np.ndarray:
    """Upsample chroma and convert back to an (H, W, 4) uint8 array with opaque alpha."""
    h, w = Y.shape
    Cb_up, Cr_up = upsample_chroma(Cb_sub, Cr_sub, (h, w), params.subsampling_mode)

    rgba = np.empty((h, w, 4), dtype=np.uint8)
    rgba[:, :, :3] = ycbcr_to_rgb(np.stack([Y, Cb_up, Cr_up], axis=-1))
    rgba[:, :, 3] = 255
    return rgba


def compress(
    image: RasterImage,
    factor: float,
    params: Optional[CompressionParams] = None
) -> RasterImage:
    """Simulate JPEG artifacts on an RGBA image.

    Raises InvalidDimensions / BufferSizeMismatch before any work is done.
    A factor of 0 (after clamping, NaN counts as 0) returns the input image itself.
    params supplies the remaining settings; its own factor is replaced by factor.
    """
    image.validate()
    params = _resolve_params(factor, params)

    if params.factor == 0.0:
        logger.debug("factor 0, passthrough")
        return image

    logger.debug(
        "compress %dx%d factor=%.3f mode=%s",
        image.width, image.height, params.factor, params.subsampling_mode
    )
    rgba = image.to_array()
    Y, Cb_sub, Cr_sub = encode_planes(rgba, params)
    out = decode_planes(Y, Cb_sub, Cr_sub, params)
    return RasterImage(width=image.width, height=image.height, pixels=out.tobytes())


async def compress_async(
    image: RasterImage,
    factor: float,
    params: Optional[CompressionParams] = None
) -> RasterImage:
    """Run compress in a worker thread so an event loop is not blocked."""
    return await asyncio.to_thread(compress, image, factor, params)


def compress_reconstruct(image: RasterImage, params: CompressionParams) -> CompressionResult:
    """Run the pipeline and measure reconstruction quality and runtime."""
    image.validate()
    timer = Timer()
    rgba = image.to_array()

    if params.factor == 0.0:
        reconstructed = image
    else:
        Y, Cb_sub, Cr_sub = timer.measure_encode(encode_planes, rgba, params)
        out = timer.measure_decode(decode_planes, Y, Cb_sub, Cr_sub, params)
        reconstructed = RasterImage(width=image.width, height=image.height, pixels=out.tobytes())

    metrics = compute_psnr_ssim(rgba[:, :, :3], reconstructed.to_array()[:, :, :3])

    return CompressionResult(
        original_image=image,
        reconstructed_image=reconstructed,
        factor=params.factor,
        psnr_y=metrics['psnr_y'],
        ssim_y=metrics['ssim_y'],
        psnr_rgb=metrics['psnr_rgb'],
        ssim_rgb=metrics['ssim_rgb'],
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms,
    )
