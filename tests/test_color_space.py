"""Tests for RGB <-> YCbCr conversion."""

import numpy as np
from engines.color_space import rgb_to_ycbcr, ycbcr_to_rgb


def test_grey_has_neutral_chroma():
    rgb = np.full((2, 2, 3), 77.0)
    ycbcr = rgb_to_ycbcr(rgb)
    assert np.allclose(ycbcr[:, :, 0], 77.0)
    assert np.allclose(ycbcr[:, :, 1:], 128.0)


def test_primary_colours():
    rgb = np.array([[[255, 0, 0], [0, 0, 255]]], dtype=np.float64)
    ycbcr = rgb_to_ycbcr(rgb)
    assert np.allclose(ycbcr[0, 0], [76.245, 84.97232, 255.5], atol=1e-6)
    assert np.allclose(ycbcr[0, 1], [29.07, 255.5, 107.26544], atol=1e-6)


def test_round_trip_within_one_level():
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 256, (16, 16, 3)).astype(np.uint8)
    recovered = ycbcr_to_rgb(rgb_to_ycbcr(rgb.astype(np.float64)))
    assert recovered.dtype == np.uint8
    assert np.max(np.abs(recovered.astype(int) - rgb.astype(int))) <= 1


def test_inverse_clamps_to_byte_range():
    ycbcr = np.array([[[300.0, 128.0, 128.0], [-20.0, 128.0, 128.0]]])
    rgb = ycbcr_to_rgb(ycbcr)
    assert np.array_equal(rgb[0, 0], [255, 255, 255])
    assert np.array_equal(rgb[0, 1], [0, 0, 0])


def test_inverse_rounds_to_nearest():
    ycbcr = np.array([[[100.5, 128.0, 128.0], [100.4, 128.0, 128.0]]])
    rgb = ycbcr_to_rgb(ycbcr)
    assert np.array_equal(rgb[0, 0], [101, 101, 101])
    assert np.array_equal(rgb[0, 1], [100, 100, 100])
