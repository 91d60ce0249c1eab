"""Decode, extract gamma, dither, measure."""

import logging
from typing import Optional

import numpy as np

from models.dither_params import DitherParams
from models.dither_result import DitherResult
from models.gamma_result import GammaResult, GammaStatus
from engines.ditherer import as_high_precision, dither
from engines.gamma_extractor import extract_gamma, resolve_gamma
from engines.quantizer import reduce_to_8bit
from utils.constants import DEFAULT_GAMMA
from utils.image_io import decode_image
from utils.metrics import compute_dither_metrics, Timer

logger = logging.getLogger(__name__)


def dither_encoded(encoded: bytes, params: DitherParams) -> DitherResult:
    """Dither an encoded (PNG or other OpenCV-readable) image.

    Gamma comes from the PNG's own chunks unless params.gamma overrides it.
    """
    timer = Timer()
    image = timer.measure_decode(decode_image, encoded)
    gamma_result = extract_gamma(encoded)
    logger.info("Extracted gamma %.4g (%s)", gamma_result.gamma, gamma_result.status.value)
    if not gamma_result.is_explicit and params.gamma is None:
        logger.info("No explicit gamma in source, assuming %.4g", gamma_result.gamma)
    return dither_image(image, params, gamma_result, timer)


def dither_image(
    image: np.ndarray,
    params: DitherParams,
    gamma_result: Optional[GammaResult] = None,
    timer: Optional[Timer] = None
) -> DitherResult:
    """Dither an already decoded uint8/uint16 image."""
    timer = timer or Timer()
    if gamma_result is None:
        gamma_result = GammaResult(DEFAULT_GAMMA, GammaStatus.NO_EXPLICIT_GAMMA)
    gamma = resolve_gamma(gamma_result, params.gamma)

    dithered = timer.measure_dither(dither, image, params.lossiness, gamma)

    source_8bit = reduce_to_8bit(as_high_precision(image)).reshape(image.shape)
    metrics = compute_dither_metrics(source_8bit, dithered, gamma)

    return DitherResult(
        source_image=source_8bit,
        dithered_image=dithered,
        gamma=gamma,
        gamma_status=gamma_result.status,
        lossiness=params.lossiness,
        psnr=metrics['psnr'],
        linear_brightness_error=metrics['linear_brightness_error'],
        distinct_levels=metrics['distinct_levels'],
        decode_time_ms=timer.decode_time_ms,
        dither_time_ms=timer.dither_time_ms,
        gamma_overridden=params.gamma is not None,
    )
