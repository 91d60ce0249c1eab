"""Dithering and gamma extraction engines - pure computation, no I/O."""

from .transfer import normalize_gamma, to_linear
from .quantizer import clamp_lossiness, quantization_levels, reduce_to_8bit, find_bracket
from .noise import noise_at, tile_noise
from .ditherer import (
    DitherError,
    NilSourceImageError,
    UnsupportedSourceImageError,
    as_high_precision,
    dither_samples,
    dither,
)
from .chunks import TruncatedChunkError, has_png_signature, iter_chunks, pack_chunk
from .gamma_extractor import extract_gamma, gamma_from_inverse, resolve_gamma
from .pipeline import dither_encoded, dither_image

__all__ = [
    'normalize_gamma',
    'to_linear',
    'clamp_lossiness',
    'quantization_levels',
    'reduce_to_8bit',
    'find_bracket',
    'noise_at',
    'tile_noise',
    'DitherError',
    'NilSourceImageError',
    'UnsupportedSourceImageError',
    'as_high_precision',
    'dither_samples',
    'dither',
    'TruncatedChunkError',
    'has_png_signature',
    'iter_chunks',
    'pack_chunk',
    'extract_gamma',
    'gamma_from_inverse',
    'resolve_gamma',
    'dither_encoded',
    'dither_image',
]
