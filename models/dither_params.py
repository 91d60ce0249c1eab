"""Dithering parameters."""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class DitherParams:
    """Gamma-aware dither parameters.

    Out-of-range values are tuning mistakes, not errors: lossiness is clamped
    into [0, 7] and a non-positive gamma override is dropped so the extracted
    (or default) gamma applies.
    """

    lossiness: int = 4
    gamma: Optional[float] = None

    def __post_init__(self):
        from engines.quantizer import clamp_lossiness

        clamped = clamp_lossiness(self.lossiness)
        if clamped != self.lossiness:
            logger.debug("Clamping lossiness %s to %d", self.lossiness, clamped)
        self.lossiness = clamped
        if self.gamma is not None and not self.gamma > 0:
            logger.debug("Ignoring non-positive gamma override %s", self.gamma)
            self.gamma = None
