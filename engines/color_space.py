"""Color space conversion and chroma subsampling."""

import numpy as np
import cv2
from typing import Literal, Tuple

from engines.quantizer import round_half_away

SubsamplingMode = Literal['4:4:4', '4:2:2', '4:2:0']

# (row step, column step) per mode
CHROMA_STEPS = {
    '4:4:4': (1, 1),
    '4:2:2': (1, 2),
    '4:2:0': (2, 2),
}


def rgb_to_ycbcr(rgb: np.ndarray) -> np.ndarray:
    """RGB to YCbCr using ITU-R BT.601 (full range, chroma offset 128)."""
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    Y = 0.299 * R + 0.587 * G + 0.114 * B
    Cb = -0.168736 * R - 0.331264 * G + 0.5 * B + 128.0
    Cr = 0.5 * R - 0.418688 * G - 0.081312 * B + 128.0
    return np.stack([Y, Cb, Cr], axis=-1)


def ycbcr_to_rgb(ycbcr: np.ndarray) -> np.ndarray:
    """YCbCr to RGB using ITU-R BT.601, rounded and clamped to uint8."""
    Y = ycbcr[:, :, 0]
    Cb = ycbcr[:, :, 1] - 128.0
    Cr = ycbcr[:, :, 2] - 128.0
    R = Y + 1.402 * Cr
    G = Y - 0.344136 * Cb - 0.714136 * Cr
    B = Y + 1.772 * Cb
    rgb = np.stack([R, G, B], axis=-1)
    return np.clip(round_half_away(rgb), 0, 255).astype(np.uint8)


def downsample_plane(plane: np.ndarray, step_y: int, step_x: int) -> np.ndarray:
    """Nearest-neighbour decimation keeping every step-th sample from the origin.

    Output is ceil(h/step_y) x ceil(w/step_x); the last sample of an odd
    dimension is the last source row/column.
    """
    return plane[::step_y, ::step_x].copy()


def upsample_plane(
    plane: np.ndarray,
    target_shape: Tuple[int, int],
    step_y: int,
    step_x: int
) -> np.ndarray:
    """Replicate each sample over its step_y x step_x footprint, cropped to target_shape."""
    h, w = target_shape
    sub_h, sub_w = plane.shape
    rows = np.minimum(np.arange(h) // step_y, sub_h - 1)
    cols = np.minimum(np.arange(w) // step_x, sub_w - 1)
    return plane[np.ix_(rows, cols)]


def subsample_chroma(
    cb: np.ndarray,
    cr: np.ndarray,
    mode: SubsamplingMode = '4:2:0',
    use_prefilter: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    """Subsample chroma channels according to mode."""
    if mode not in CHROMA_STEPS:
        raise ValueError(f"Unknown subsampling mode: {mode}")
    if mode == '4:4:4':
        return cb.copy(), cr.copy()

    # Anti-alias blur before decimation
    if use_prefilter:
        cb = cv2.GaussianBlur(np.ascontiguousarray(cb), (3, 3), sigmaX=0.75)
        cr = cv2.GaussianBlur(np.ascontiguousarray(cr), (3, 3), sigmaX=0.75)

    step_y, step_x = CHROMA_STEPS[mode]
    return downsample_plane(cb, step_y, step_x), downsample_plane(cr, step_y, step_x)


def upsample_chroma(
    cb_sub: np.ndarray,
    cr_sub: np.ndarray,
    target_shape: Tuple[int, int],
    mode: SubsamplingMode = '4:2:0'
) -> Tuple[np.ndarray, np.ndarray]:
    """Upsample chroma channels back to target resolution (nearest neighbour)."""
    if mode not in CHROMA_STEPS:
        raise ValueError(f"Unknown subsampling mode: {mode}")
    step_y, step_x = CHROMA_STEPS[mode]
    cb_up = upsample_plane(cb_sub, target_shape, step_y, step_x)
    cr_up = upsample_plane(cr_sub, target_shape, step_y, step_x)
    return cb_up, cr_up
