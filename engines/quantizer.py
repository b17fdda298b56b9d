"""Quantization table construction and coefficient quantization."""

import logging

import numpy as np

from models.compression_params import QuantScaling, clamp_factor
from utils.constants import JPEG_LUMA_Q50

logger = logging.getLogger(__name__)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to nearest integer, halves away from zero (np.round rounds halves to even)."""
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def linear_scale(factor: float) -> float:
    """Table multiplier for a distortion factor: 1 at factor 0, 21 at factor 1."""
    return 1.0 + 20.0 * clamp_factor(factor)


def quality_to_scale(quality: float) -> float:
    """IJG quality curve (1-100) as a multiplier, 1.0 at quality 50."""
    quality = float(np.clip(quality, 1, 100))
    if quality < 50:
        scale = 5000.0 / quality
    else:
        scale = 200.0 - 2.0 * quality
    return scale / 100.0


def factor_to_quality(factor: float) -> float:
    """Map a distortion factor onto the 0-100 quality axis (0 = worst)."""
    return 100.0 * (1.0 - clamp_factor(factor))


def scale_quant_matrix(base_matrix: np.ndarray, scale: float) -> np.ndarray:
    """Multiply a base table by scale, flooring entries and keeping them >= 1."""
    Q = np.floor(base_matrix * scale)
    Q = np.maximum(Q, 1.0)
    return Q.astype(np.float64)


def build_quant_table(
    factor: float,
    scaling: QuantScaling = QuantScaling.LINEAR,
    base_matrix: np.ndarray = JPEG_LUMA_Q50
) -> np.ndarray:
    """Derive the 8x8 table shared by every block and plane of one run."""
    if scaling is QuantScaling.LINEAR:
        scale = linear_scale(factor)
    elif scaling is QuantScaling.QUALITY:
        scale = quality_to_scale(factor_to_quality(factor))
    else:
        raise ValueError(f"Unknown quantization scaling: {scaling}")
    table = scale_quant_matrix(base_matrix, scale)
    logger.debug("quant table: scaling=%s scale=%.3f dc=%d", scaling.value, scale, table[0, 0])
    return table


def quantize(dct_coeffs: np.ndarray, Q_matrix: np.ndarray) -> np.ndarray:
    """Quantize DCT coefficients to integer multiples of the table."""
    return round_half_away(dct_coeffs / Q_matrix)


def dequantize(quantized: np.ndarray, Q_matrix: np.ndarray) -> np.ndarray:
    """Dequantize coefficients."""
    return quantized.astype(np.float64) * Q_matrix
