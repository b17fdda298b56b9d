"""DSP engines - pure computation, no I/O."""

from .color_space import (
    rgb_to_ycbcr, ycbcr_to_rgb, subsample_chroma, upsample_chroma, downsample_plane, upsample_plane
)
from .block_processor import pad_to_multiple, split_into_blocks, merge_blocks, process_plane
from .dct_engine import dct2, idct2, encode_block, decode_block, code_block
from .quantizer import (
    build_quant_table, scale_quant_matrix, quality_to_scale, linear_scale, quantize, dequantize
)
from utils.constants import JPEG_LUMA_Q50
from .pipeline import compress, compress_async, compress_reconstruct

__all__ = [
    'rgb_to_ycbcr',
    'ycbcr_to_rgb',
    'subsample_chroma',
    'upsample_chroma',
    'downsample_plane',
    'upsample_plane',
    'pad_to_multiple',
    'split_into_blocks',
    'merge_blocks',
    'process_plane',
    'dct2',
    'idct2',
    'encode_block',
    'decode_block',
    'code_block',
    'build_quant_table',
    'scale_quant_matrix',
    'quality_to_scale',
    'linear_scale',
    'quantize',
    'dequantize',
    'JPEG_LUMA_Q50',
    'compress',
    'compress_async',
    'compress_reconstruct',
]
