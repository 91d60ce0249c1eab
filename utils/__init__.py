"""Shared utilities."""

from .constants import DEFAULT_GAMMA, EXPANSION_TABLES, NOISE_TILE, PNG_SIGNATURE
from .metrics import compute_dither_metrics, Timer
from .test_images import generate_gradient16, generate_flat16, generate_sky16
from .image_io import decode_image, encode_png, read_bytes, save_image

__all__ = [
    'DEFAULT_GAMMA',
    'EXPANSION_TABLES',
    'NOISE_TILE',
    'PNG_SIGNATURE',
    'compute_dither_metrics',
    'Timer',
    'generate_gradient16',
    'generate_flat16',
    'generate_sky16',
    'decode_image',
    'encode_png',
    'read_bytes',
    'save_image',
]
