"""Gamma extraction result."""

from dataclasses import dataclass
from enum import Enum


class GammaStatus(Enum):
    """How confident an extracted gamma is."""

    EXPLICIT = "explicit"
    NO_EXPLICIT_GAMMA = "no_explicit_gamma"
    NOT_A_CONTAINER = "not_a_container"


@dataclass(frozen=True)
class GammaResult:
    """Gamma value paired with its status. The gamma is always positive."""

    gamma: float
    status: GammaStatus

    def __post_init__(self):
        if not self.gamma > 0:
            raise ValueError(f"Gamma must be positive, got {self.gamma}")

    def __iter__(self):
        yield self.gamma
        yield self.status

    @property
    def is_explicit(self) -> bool:
        return self.status is GammaStatus.EXPLICIT
