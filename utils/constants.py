"""Fixed lookup tables: PNG framing, blue noise tile, expansion tables."""

import numpy as np

DEFAULT_GAMMA = 2.2
MAX_LOSSINESS = 7

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# 16x16 blue noise texture, "LDR_LLL1_42.png" from
# http://momentsingraphics.de/BlueNoise.html (CC0, Christoph Peters).
_NOISE_BYTES = [
    [0xAE, 0xE7, 0x89, 0xF2, 0x26, 0x1A, 0x8C, 0xF7, 0xC1, 0x69, 0xA4, 0x30, 0x91, 0xCC, 0x64, 0x52],
    [0x71, 0x1C, 0x5E, 0x7B, 0xA9, 0xD5, 0x62, 0x08, 0xCE, 0x49, 0x0E, 0x55, 0x7A, 0x18, 0xA6, 0x05],
    [0xD8, 0xBF, 0x99, 0x01, 0x56, 0xE4, 0x72, 0xB2, 0x36, 0x97, 0xD9, 0xED, 0xBC, 0x25, 0xF8, 0x96],
    [0x2B, 0x3B, 0xFE, 0xB6, 0x41, 0x2F, 0x9F, 0xE9, 0x1D, 0x85, 0xAC, 0x6D, 0x3E, 0xD1, 0x47, 0x80],
    [0x66, 0x4F, 0x13, 0xD2, 0x83, 0xC2, 0x0F, 0x51, 0xFB, 0x60, 0x2A, 0x00, 0x9D, 0x5B, 0xB5, 0xE2],
    [0xC8, 0xAA, 0x90, 0xEB, 0x6B, 0x23, 0x94, 0x79, 0x40, 0xCA, 0xDE, 0x76, 0xF5, 0x16, 0x8B, 0x0B],
    [0xF3, 0x20, 0x77, 0x33, 0x5C, 0xCB, 0xE1, 0xA8, 0xBB, 0x14, 0x8E, 0xB0, 0x4D, 0xC3, 0x34, 0x70],
    [0x58, 0x45, 0xDB, 0xA5, 0x0D, 0x4A, 0xF4, 0x04, 0x68, 0x57, 0x31, 0xE5, 0x1E, 0x82, 0xE8, 0xA2],
    [0x95, 0x03, 0xBD, 0xFA, 0x8A, 0xB3, 0x28, 0x3A, 0x86, 0xA1, 0xD3, 0x43, 0x9A, 0x63, 0xCD, 0x27],
    [0xD7, 0x65, 0x81, 0x1B, 0x54, 0x6E, 0x98, 0xDA, 0xC5, 0xEE, 0x0C, 0x6F, 0xFF, 0x06, 0x3D, 0xB9],
    [0xF1, 0xAD, 0x2E, 0x3F, 0xCF, 0xEC, 0x7C, 0x19, 0x5F, 0x22, 0x7F, 0xAF, 0xBE, 0x53, 0x7D, 0x17],
    [0x48, 0x73, 0xE6, 0xC4, 0xA0, 0x07, 0x46, 0xB7, 0xF9, 0x4E, 0x37, 0x92, 0x2C, 0xDC, 0xA7, 0x8D],
    [0x5A, 0x09, 0x93, 0x24, 0x61, 0xD6, 0x32, 0x8F, 0x6C, 0xA3, 0xD0, 0xEA, 0x15, 0x67, 0xF6, 0x35],
    [0xD4, 0xB4, 0xFC, 0x50, 0x84, 0xAB, 0x11, 0xC6, 0xE3, 0x02, 0x42, 0x75, 0xC7, 0x9E, 0x21, 0xC0],
    [0x10, 0x9B, 0x6A, 0x12, 0xDF, 0x74, 0xF0, 0x59, 0x29, 0xB1, 0x88, 0x5D, 0x0A, 0x4C, 0x87, 0x78],
    [0x2D, 0x44, 0xC9, 0x38, 0xBA, 0x4B, 0x9C, 0x3C, 0x7E, 0x1F, 0xE0, 0xFD, 0xB8, 0x39, 0xEF, 0xDD],
]

NOISE_TILE = np.array(_NOISE_BYTES, dtype=np.float64) / 256.0
NOISE_TILE.setflags(write=False)
NOISE_TILE_SIZE = NOISE_TILE.shape[0]

# One period of each expansion table. Level L maps the low (8 - L) bits of an
# index onto 0x00..0xFF; the full 256-entry table repeats the period 2**L times.
_EXPANSION_PERIODS = [
    list(range(256)),
    [
        0x00, 0x02, 0x04, 0x06, 0x08, 0x0A, 0x0C, 0x0E, 0x10, 0x12, 0x14, 0x16, 0x18, 0x1A, 0x1C, 0x1E,
        0x20, 0x22, 0x24, 0x26, 0x28, 0x2A, 0x2C, 0x2E, 0x30, 0x32, 0x34, 0x36, 0x38, 0x3A, 0x3C, 0x3E,
        0x40, 0x42, 0x44, 0x46, 0x48, 0x4A, 0x4C, 0x4E, 0x50, 0x52, 0x54, 0x56, 0x58, 0x5A, 0x5C, 0x5E,
        0x60, 0x62, 0x64, 0x66, 0x68, 0x6A, 0x6C, 0x6E, 0x70, 0x72, 0x74, 0x76, 0x78, 0x7A, 0x7C, 0x7E,
        0x81, 0x83, 0x85, 0x87, 0x89, 0x8B, 0x8D, 0x8F, 0x91, 0x93, 0x95, 0x97, 0x99, 0x9B, 0x9D, 0x9F,
        0xA1, 0xA3, 0xA5, 0xA7, 0xA9, 0xAB, 0xAD, 0xAF, 0xB1, 0xB3, 0xB5, 0xB7, 0xB9, 0xBB, 0xBD, 0xBF,
        0xC1, 0xC3, 0xC5, 0xC7, 0xC9, 0xCB, 0xCD, 0xCF, 0xD1, 0xD3, 0xD5, 0xD7, 0xD9, 0xDB, 0xDD, 0xDF,
        0xE1, 0xE3, 0xE5, 0xE7, 0xE9, 0xEB, 0xED, 0xEF, 0xF1, 0xF3, 0xF5, 0xF7, 0xF9, 0xFB, 0xFD, 0xFF,
    ],
    [
        0x00, 0x04, 0x08, 0x0C, 0x10, 0x14, 0x18, 0x1C, 0x20, 0x24, 0x28, 0x2C, 0x30, 0x34, 0x38, 0x3C,
        0x41, 0x45, 0x49, 0x4D, 0x51, 0x55, 0x59, 0x5D, 0x61, 0x65, 0x69, 0x6D, 0x71, 0x75, 0x79, 0x7D,
        0x82, 0x86, 0x8A, 0x8E, 0x92, 0x96, 0x9A, 0x9E, 0xA2, 0xA6, 0xAA, 0xAE, 0xB2, 0xB6, 0xBA, 0xBE,
        0xC3, 0xC7, 0xCB, 0xCF, 0xD3, 0xD7, 0xDB, 0xDF, 0xE3, 0xE7, 0xEB, 0xEF, 0xF3, 0xF7, 0xFB, 0xFF,
    ],
    [
        0x00, 0x08, 0x10, 0x18, 0x21, 0x29, 0x31, 0x39, 0x42, 0x4A, 0x52, 0x5A, 0x63, 0x6B, 0x73, 0x7B,
        0x84, 0x8C, 0x94, 0x9C, 0xA5, 0xAD, 0xB5, 0xBD, 0xC6, 0xCE, 0xD6, 0xDE, 0xE7, 0xEF, 0xF7, 0xFF,
    ],
    [0x00, 0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77, 0x88, 0x99, 0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF],
    [0x00, 0x24, 0x49, 0x6D, 0x92, 0xB6, 0xDB, 0xFF],
    [0x00, 0x55, 0xAA, 0xFF],
    [0x00, 0xFF],
]

EXPANSION_TABLES = np.stack([
    np.tile(np.array(period, dtype=np.uint8), 256 // len(period))
    for period in _EXPANSION_PERIODS
])
EXPANSION_TABLES.setflags(write=False)
