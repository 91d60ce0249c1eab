"""Power-law transfer between gamma-encoded samples and linear light."""

from typing import Optional

import numpy as np

from utils.constants import DEFAULT_GAMMA


def normalize_gamma(gamma: Optional[float]) -> float:
    """Non-positive or missing gamma falls back to the 2.2 default."""
    if gamma is None or not gamma > 0:
        return DEFAULT_GAMMA
    return float(gamma)


def to_linear(values: np.ndarray, gamma: float) -> np.ndarray:
    """8-bit encoded values to linear light in [0, 1]: (v / 255) ** gamma."""
    return np.power(np.asarray(values, dtype=np.float64) / 255.0, gamma)

