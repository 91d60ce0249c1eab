"""Gamma extraction from PNG gAMA / sRGB chunks.

PNG images may state their gamma explicitly, but need not. The scan stops at
the first IDAT chunk, since ancillary colour chunks must precede image data.
An sRGB chunk wins over a gAMA chunk regardless of order. An iCCP profile
would in theory trump both, but it is not parsed: the PNG specification asks
encoders writing iCCP to also write an approximating gAMA.
"""

import logging
import struct
from typing import Optional

from engines.chunks import iter_chunks
from models.gamma_result import GammaResult, GammaStatus
from utils.constants import DEFAULT_GAMMA

logger = logging.getLogger(__name__)

TAG_GAMA = b'gAMA'
TAG_SRGB = b'sRGB'
TAG_ICCP = b'iCCP'
TAG_IDAT = b'IDAT'

# Common inverse gammas, mapped to exact values instead of e.g. 2.199978...
_EXACT_INVERSE_GAMMAS = {
    45455: 2.2,
    55556: 1.8,
}


def gamma_from_inverse(inverse_gamma: int) -> Optional[float]:
    """gAMA payload (gamma * 100000, inverted) to gamma. None for zero."""
    if inverse_gamma in _EXACT_INVERSE_GAMMAS:
        return _EXACT_INVERSE_GAMMAS[inverse_gamma]
    if inverse_gamma == 0:
        return None
    return 100000 / inverse_gamma


def extract_gamma(data: bytes) -> GammaResult:
    """Extract the gamma correction value from PNG-encoded bytes.

    Returns:
        (gamma, EXPLICIT) for a PNG stating its gamma,
        (2.2, NO_EXPLICIT_GAMMA) for a PNG that does not,
        (2.2, NOT_A_CONTAINER) for anything that is not a PNG.

    Validity is not checked comprehensively (no CRC or zlib checks), so
    false positives are possible. Never raises for bytes input.
    """
    gama_gamma = None
    srgb_gamma = None

    try:
        for chunk in iter_chunks(data):
            if chunk.tag == TAG_IDAT:
                if srgb_gamma is not None:
                    return _found(srgb_gamma, 'sRGB')
                if gama_gamma is not None:
                    return _found(gama_gamma, 'gAMA')
                logger.debug("No gAMA or sRGB chunk before IDAT")
                return GammaResult(DEFAULT_GAMMA, GammaStatus.NO_EXPLICIT_GAMMA)

            if chunk.tag == TAG_GAMA:
                if chunk.length != 4:
                    logger.debug("Skipping gAMA chunk with %d-byte payload", chunk.length)
                    continue
                (inverse_gamma,) = struct.unpack('>I', chunk.payload)
                value = gamma_from_inverse(inverse_gamma)
                if value is not None:
                    gama_gamma = value
            elif chunk.tag == TAG_SRGB:
                srgb_gamma = DEFAULT_GAMMA
            elif chunk.tag == TAG_ICCP:
                logger.debug("iCCP chunk present; ICC profiles are not parsed")
    except ValueError as e:
        logger.debug("Not a PNG stream: %s", e)
        return GammaResult(DEFAULT_GAMMA, GammaStatus.NOT_A_CONTAINER)

    logger.debug("Stream ended before any IDAT chunk")
    return GammaResult(DEFAULT_GAMMA, GammaStatus.NOT_A_CONTAINER)


def resolve_gamma(result: GammaResult, override: Optional[float] = None) -> float:
    """Caller override if positive, otherwise the extracted gamma."""
    if override is not None and override > 0:
        return float(override)
    return result.gamma


def _found(gamma: float, source: str) -> GammaResult:
    logger.debug("Gamma %.6g from %s chunk", gamma, source)
    return GammaResult(gamma, GammaStatus.EXPLICIT)
