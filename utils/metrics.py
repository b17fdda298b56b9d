"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def _ssim_window(shape) -> int:
    """Largest odd window <= 7 that fits the image, 0 if none does."""
    win = min(7, shape[0], shape[1])
    if win % 2 == 0:
        win -= 1
    return win if win >= 3 else 0


def compute_psnr_ssim(original_rgb: np.ndarray, reconstructed_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB and Y channel.

    SSIM is NaN for images smaller than 3x3. PSNR is inf for identical images.
    """
    win = _ssim_window(original_rgb.shape)

    with np.errstate(divide='ignore'):
        psnr_rgb = peak_signal_noise_ratio(original_rgb, reconstructed_rgb, data_range=255)

    # Y channel (luminance) - BT.601
    original_f = original_rgb.astype(np.float64)
    recon_f = reconstructed_rgb.astype(np.float64)
    original_y = 0.299 * original_f[:, :, 0] + 0.587 * original_f[:, :, 1] + 0.114 * original_f[:, :, 2]
    recon_y = 0.299 * recon_f[:, :, 0] + 0.587 * recon_f[:, :, 1] + 0.114 * recon_f[:, :, 2]

    with np.errstate(divide='ignore'):
        psnr_y = peak_signal_noise_ratio(original_y, recon_y, data_range=255)

    if win:
        ssim_rgb = structural_similarity(
            original_rgb, reconstructed_rgb, channel_axis=2, data_range=255, win_size=win
        )
        ssim_y = structural_similarity(original_y, recon_y, data_range=255, win_size=win)
    else:
        ssim_rgb = ssim_y = float('nan')

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'psnr_y': float(psnr_y),
        'ssim_y': float(ssim_y)
    }


class Timer:
    """Wall-clock milliseconds spent building coded planes and turning them back into RGBA."""

    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0

    @staticmethod
    def _timed(func, args, kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        return result, (time.perf_counter() - start) * 1000.0

    def measure_encode(self, func, *args, **kwargs):
        """Call func (colour transform, subsampling, block coding) and record its runtime."""
        result, self.encode_time_ms = self._timed(func, args, kwargs)
        return result

    def measure_decode(self, func, *args, **kwargs):
        """Call func (upsampling, inverse colour transform) and record its runtime."""
        result, self.decode_time_ms = self._timed(func, args, kwargs)
        return result
