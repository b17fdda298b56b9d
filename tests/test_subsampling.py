"""Tests for chroma subsampling."""

import numpy as np
import pytest
from models.compression_params import CompressionParams, QuantScaling
from engines.color_space import (
    rgb_to_ycbcr, subsample_chroma, upsample_chroma, downsample_plane, upsample_plane
)
from engines.block_processor import process_plane
from engines.pipeline import compress, encode_planes, decode_planes
from utils.test_images import generate_chroma_stripes


def test_downsample_shape_uses_ceiling():
    plane = np.arange(35, dtype=np.float64).reshape(5, 7)
    sub = downsample_plane(plane, 2, 2)
    assert sub.shape == (3, 4)


def test_downsample_takes_even_samples():
    plane = np.arange(35, dtype=np.float64).reshape(5, 7)
    sub = downsample_plane(plane, 2, 2)
    for y in range(3):
        for x in range(4):
            assert sub[y, x] == plane[min(2 * y, 4), min(2 * x, 6)]


def test_upsample_replicates_and_clamps():
    sub = np.array([[1.0, 2.0], [3.0, 4.0]])
    up = upsample_plane(sub, (3, 3), 2, 2)
    assert np.array_equal(up, [[1, 1, 2], [1, 1, 2], [3, 3, 4]])


def test_round_trip_picks_quadrant_sample():
    """2x2 plane with distinct values: every output is a sample of its own quadrant."""
    cb = np.array([[10.0, 20.0], [30.0, 40.0]])
    cr = np.array([[50.0, 60.0], [70.0, 80.0]])
    cb_sub, cr_sub = subsample_chroma(cb, cr, '4:2:0')
    assert cb_sub.shape == (1, 1)
    cb_up, cr_up = upsample_chroma(cb_sub, cr_sub, (2, 2), '4:2:0')
    assert np.all(np.isin(cb_up, cb))
    assert np.all(np.isin(cr_up, cr))
    assert np.all(cb_up == 10.0)
    assert np.all(cr_up == 50.0)


def test_round_trip_through_unit_table_stays_near_quadrant_sample():
    """With a table of ones the block coder moves chroma by well under half a level."""
    cb = np.array([[10.0, 20.0], [30.0, 40.0]])
    cr = np.array([[50.0, 60.0], [70.0, 80.0]])
    cb_sub, cr_sub = subsample_chroma(cb, cr, '4:2:0')
    ones = np.ones((8, 8))
    cb_up, cr_up = upsample_chroma(process_plane(cb_sub, ones), process_plane(cr_sub, ones), (2, 2), '4:2:0')
    for up, src in ((cb_up, cb), (cr_up, cr)):
        nearest = np.min(np.abs(up[:, :, None] - src.ravel()[None, None, :]), axis=-1)
        assert np.all(nearest <= 0.5)


def test_pipeline_chroma_round_trip_on_2x2_image():
    """encode/decode planes on a 2x2 image keep each chroma value near a source sample."""
    rgba = np.array([
        [[200, 30, 30, 255], [30, 200, 30, 255]],
        [[30, 30, 200, 255], [220, 220, 20, 255]],
    ], dtype=np.uint8)
    ycbcr = rgb_to_ycbcr(rgba[:, :, :3].astype(np.float64))
    # quality curve at factor 0 gives an all-ones table
    params = CompressionParams(factor=0.0, scaling=QuantScaling.QUALITY)
    Y, Cb_sub, Cr_sub = encode_planes(rgba, params)
    assert Cb_sub.shape == (1, 1)
    cb_up, cr_up = upsample_chroma(Cb_sub, Cr_sub, (2, 2), '4:2:0')
    for up, src in ((cb_up, ycbcr[:, :, 1]), (cr_up, ycbcr[:, :, 2])):
        nearest = np.min(np.abs(up[:, :, None] - src.ravel()[None, None, :]), axis=-1)
        assert np.all(nearest <= 0.5)
    assert decode_planes(Y, Cb_sub, Cr_sub, params).shape == (2, 2, 4)


def test_422_halves_width_only():
    cb = np.random.rand(6, 9)
    cb_sub, _ = subsample_chroma(cb, cb.copy(), '4:2:2')
    assert cb_sub.shape == (6, 5)
    cb_up, _ = upsample_chroma(cb_sub, cb_sub, (6, 9), '4:2:2')
    assert cb_up.shape == (6, 9)
    assert np.array_equal(cb_up[:, 0], cb_up[:, 1])


def test_444_is_copy():
    cb = np.random.rand(4, 4)
    cb_sub, _ = subsample_chroma(cb, cb, '4:4:4')
    assert np.array_equal(cb_sub, cb)
    assert cb_sub is not cb


def test_prefilter_keeps_subsampled_shape():
    cb = np.random.rand(9, 9) * 255
    plain, _ = subsample_chroma(cb, cb, '4:2:0', use_prefilter=False)
    blurred, _ = subsample_chroma(cb, cb, '4:2:0', use_prefilter=True)
    assert plain.shape == blurred.shape == (5, 5)


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        subsample_chroma(np.zeros((2, 2)), np.zeros((2, 2)), '4:1:1')
    with pytest.raises(ValueError):
        CompressionParams(subsampling_mode='4:1:1')


def test_subsampling_modes():
    """All subsampling modes run end to end and keep the image size."""
    image = generate_chroma_stripes(40)
    for mode in ['4:4:4', '4:2:2', '4:2:0']:
        params = CompressionParams(subsampling_mode=mode)
        result = compress(image, 0.5, params)
        assert (result.width, result.height) == (image.width, image.height)
        assert len(result.pixels) == len(image.pixels)
