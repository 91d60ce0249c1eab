"""Gamma-aware ordered dithering.

Quantizes colors while avoiding large sections of flat color, comparing each
sample's position within its quantization bracket in linear light so the
input and output images have the same perceived brightness. Gamma 1.0 gives
naive (encoded-space) dithering.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from engines.noise import tile_noise
from engines.quantizer import clamp_lossiness, find_bracket, reduce_to_8bit
from engines.transfer import normalize_gamma, to_linear

logger = logging.getLogger(__name__)

MAX_CHANNELS = 4


class DitherError(ValueError):
    """Caller passed something dither() cannot work with."""


class NilSourceImageError(DitherError):
    def __init__(self):
        super().__init__("Source image is None")


class UnsupportedSourceImageError(DitherError):
    """Source lacks 16-bit random-access channel reads."""


def as_high_precision(src) -> np.ndarray:
    """View src as a uint16 (H, W, C) array. uint8 input is widened by 257."""
    if src is None:
        raise NilSourceImageError()
    if not isinstance(src, np.ndarray):
        raise UnsupportedSourceImageError(
            f"Expected a numpy array, got {type(src).__name__}"
        )

    # Any byte order counts; big-endian is what PNG stores.
    if src.dtype.kind == 'u' and src.dtype.itemsize == 2:
        image = src.astype(np.uint16, copy=False)
    elif src.dtype.kind == 'u' and src.dtype.itemsize == 1:
        image = src.astype(np.uint16) * 257
    else:
        raise UnsupportedSourceImageError(
            f"Expected uint8 or uint16 samples, got {src.dtype}"
        )

    if image.ndim == 2:
        image = image[:, :, np.newaxis]
    if image.ndim != 3 or not 1 <= image.shape[2] <= MAX_CHANNELS:
        raise UnsupportedSourceImageError(
            f"Expected (H, W) or (H, W, 1..{MAX_CHANNELS}) image, got shape {src.shape}"
        )
    return image


def dither_samples(
    samples: np.ndarray,
    noise: np.ndarray,
    lossiness: int,
    gamma: float
) -> np.ndarray:
    """Dither 8-bit samples against broadcastable noise thresholds in [0, 1)."""
    lossiness = clamp_lossiness(lossiness)
    samples = np.asarray(samples, dtype=np.int32)
    lower, upper = find_bracket(samples, lossiness)

    p = to_linear(samples, gamma)
    lo = to_linear(lower, gamma)
    hi = to_linear(upper, gamma)
    # position = (p - lo) / (hi - lo), compared against noise without dividing
    round_up = (p - lo) > (noise * (hi - lo))

    out = np.where(round_up, upper, lower)
    # The maximum value is left unchanged.
    out = np.where(samples >= 255, 255, out)
    return out.astype(np.uint8)


def dither(
    src: np.ndarray,
    lossiness: int,
    gamma: Optional[float] = None,
    origin: Tuple[int, int] = (0, 0)
) -> np.ndarray:
    """Dither a high-precision image down to 8 bits per channel.

    Args:
        src: uint16 (or uint8) array, (H, W) or (H, W, C) with C <= 4
        lossiness: 0 (lossless for 8-bit sources) to 7 (very lossy); clamped
        gamma: source gamma; None or non-positive means 2.2
        origin: (x, y) of src's top-left pixel within the full image, so
            tiles dithered separately line up with the noise pattern

    Returns:
        uint8 array with the same shape as src
    """
    image = as_high_precision(src)
    level = clamp_lossiness(lossiness)
    if level != lossiness:
        logger.debug("Clamped lossiness %s to %d", lossiness, level)
    gamma = normalize_gamma(gamma)

    h, w, c = image.shape
    logger.debug("Dithering %dx%dx%d image, lossiness=%d, gamma=%.4g", w, h, c, level, gamma)

    samples = reduce_to_8bit(image)
    noise = tile_noise(h, w, origin)[:, :, np.newaxis]
    out = dither_samples(samples, noise, level, gamma)
    return out.reshape(src.shape)
