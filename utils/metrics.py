"""Metrics: PSNR, linear-light brightness error, timing."""

import time
import numpy as np
from skimage.metrics import mean_squared_error, peak_signal_noise_ratio
from typing import Dict


def compute_dither_metrics(
    source_8bit: np.ndarray,
    dithered: np.ndarray,
    gamma: float
) -> Dict[str, float]:
    """Compare the dithered image with the truncated 8-bit source."""
    if mean_squared_error(source_8bit, dithered) == 0:
        psnr = float('inf')
    else:
        psnr = float(peak_signal_noise_ratio(source_8bit, dithered, data_range=255))

    # Perceived brightness: per-channel mean in linear light.
    channels = source_8bit.shape[2] if source_8bit.ndim == 3 else 1
    if channels == 4:
        # Alpha is already linear; only colour channels are compared.
        source_8bit = source_8bit[..., :3]
        dithered = dithered[..., :3]
        channels = 3
    src_linear = np.power(source_8bit / 255.0, gamma).reshape(-1, channels).mean(axis=0)
    out_linear = np.power(dithered / 255.0, gamma).reshape(-1, channels).mean(axis=0)
    brightness_error = float(np.max(np.abs(src_linear - out_linear)))

    return {
        'psnr': psnr,
        'linear_brightness_error': brightness_error,
        'distinct_levels': int(np.unique(dithered).size),
    }


class Timer:
    """Simple timer for decode/dither runtime."""

    def __init__(self):
        self.decode_time_ms = 0.0
        self.dither_time_ms = 0.0

    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result

    def measure_dither(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.dither_time_ms = (time.perf_counter() - start) * 1000.0
        return result
