"""Dither result with metrics."""

from dataclasses import dataclass
import numpy as np

from models.gamma_result import GammaStatus


@dataclass
class DitherResult:
    """Results from the decode/extract/dither pipeline."""

    source_image: np.ndarray
    dithered_image: np.ndarray

    # Settings actually applied
    gamma: float
    gamma_status: GammaStatus
    lossiness: int

    # Quality metrics
    psnr: float
    linear_brightness_error: float
    distinct_levels: int

    # Runtime
    decode_time_ms: float
    dither_time_ms: float

    gamma_overridden: bool = False
