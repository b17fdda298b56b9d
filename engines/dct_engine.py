"""DCT/IDCT operations with level shift."""

import numpy as np
from scipy.fft import dctn, idctn

from engines.quantizer import quantize, dequantize

LEVEL_SHIFT = 128.0


def dct2(block: np.ndarray) -> np.ndarray:
    """2D DCT-II with orthonormal normalization.

    For an 8x8 block this is D[u,v] = 1/4 Cu Cv sum B[x,y] cos((2x+1)u pi/16) cos((2y+1)v pi/16)
    with Cu = 1/sqrt(2) for u = 0, else 1.
    """
    return dctn(block, type=2, norm='ortho')


def idct2(coeffs: np.ndarray) -> np.ndarray:
    """2D inverse DCT (Type-III), exact inverse of dct2."""
    return idctn(coeffs, type=2, norm='ortho')


def encode_block(block: np.ndarray, level_shift: bool = True) -> np.ndarray:
    """Level shift (-128) then DCT."""
    shifted = block.astype(np.float64)
    if level_shift:
        shifted = shifted - LEVEL_SHIFT
    return dct2(shifted)


def decode_block(coeffs: np.ndarray, level_shift: bool = True) -> np.ndarray:
    """IDCT then reverse level shift (+128). Samples stay real-valued."""
    spatial = idct2(coeffs)
    if level_shift:
        spatial = spatial + LEVEL_SHIFT
    return spatial


def code_block(block: np.ndarray, Q_matrix: np.ndarray, level_shift: bool = True) -> np.ndarray:
    """Forward DCT, quantize/dequantize, inverse DCT on one block.

    With level_shift the DCT sees block - 128, not the raw samples, and 128 is
    added back after the inverse. Mid-grey then has zero DC, so flat 128
    content is reproduced exactly at any table. level_shift=False transforms
    the raw samples.
    """
    coeffs = encode_block(block, level_shift)
    dequantized = dequantize(quantize(coeffs, Q_matrix), Q_matrix)
    return decode_block(dequantized, level_shift)
