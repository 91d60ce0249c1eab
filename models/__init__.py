"""Data models for dither parameters, gamma extraction and results."""

from .chunk_record import ChunkRecord
from .gamma_result import GammaResult, GammaStatus
from .dither_params import DitherParams
from .dither_result import DitherResult

__all__ = ['ChunkRecord', 'GammaResult', 'GammaStatus', 'DitherParams', 'DitherResult']
