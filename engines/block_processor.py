"""Block processing: padding, splitting, merging, per-plane coding."""

import logging

import numpy as np
from typing import List, Tuple

from models.compression_params import BlockPadding
from engines.dct_engine import code_block
from utils.constants import BLOCK_SIZE

logger = logging.getLogger(__name__)

_PAD_MODES = {
    BlockPadding.EDGE: 'edge',
    BlockPadding.ZERO: 'constant',
}


def pad_to_multiple(
    channel: np.ndarray,
    block_size: int = BLOCK_SIZE,
    padding: BlockPadding = BlockPadding.EDGE
) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Pad channel on the bottom/right to a multiple of block_size.

    EDGE repeats the last row/column, ZERO fills with 0.
    """
    h, w = channel.shape
    pad_h = (block_size - h % block_size) % block_size
    pad_w = (block_size - w % block_size) % block_size
    if pad_h > 0 or pad_w > 0:
        padded = np.pad(channel, ((0, pad_h), (0, pad_w)), mode=_PAD_MODES[padding])
    else:
        padded = channel.copy()
    return padded, (h, w)


def split_into_blocks(channel: np.ndarray, block_size: int = BLOCK_SIZE) -> List[Tuple[int, int, np.ndarray]]:
    """Split a padded 2D channel into BxB blocks tagged with their origin."""
    h, w = channel.shape
    if h % block_size or w % block_size:
        raise ValueError(f"Channel {h}x{w} is not a multiple of block size {block_size}")
    blocks = []
    for i in range(0, h, block_size):
        for j in range(0, w, block_size):
            blocks.append((i, j, channel[i:i+block_size, j:j+block_size].copy()))
    return blocks


def merge_blocks(
    blocks: List[Tuple[int, int, np.ndarray]],
    shape: Tuple[int, int],
    block_size: int = BLOCK_SIZE
) -> np.ndarray:
    """Merge blocks into a 2D channel of shape, dropping samples past the edge."""
    h, w = shape
    result = np.zeros((h, w), dtype=np.float64)
    for (i, j, block) in blocks:
        end_i = min(i + block_size, h)
        end_j = min(j + block_size, w)
        result[i:end_i, j:end_j] = block[:end_i - i, :end_j - j]
    return result


def process_plane(
    plane: np.ndarray,
    Q_matrix: np.ndarray,
    padding: BlockPadding = BlockPadding.EDGE,
    level_shift: bool = True
) -> np.ndarray:
    """Run the DCT/quantize/IDCT round trip over every block of a plane."""
    padded, orig_shape = pad_to_multiple(plane, BLOCK_SIZE, padding)
    blocks = split_into_blocks(padded, BLOCK_SIZE)
    logger.debug("plane %dx%d -> %d blocks", orig_shape[1], orig_shape[0], len(blocks))

    coded = [(i, j, code_block(block, Q_matrix, level_shift)) for (i, j, block) in blocks]
    return merge_blocks(coded, orig_shape, BLOCK_SIZE)
