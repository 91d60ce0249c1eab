"""Tests for PNG chunk scanning and gamma extraction."""

import struct

import pytest
from engines.chunks import TruncatedChunkError, iter_chunks, pack_chunk
from engines.gamma_extractor import extract_gamma, gamma_from_inverse, resolve_gamma
from models.gamma_result import GammaResult, GammaStatus
from utils.constants import PNG_SIGNATURE

IHDR = pack_chunk(b'IHDR', struct.pack('>IIBBBBB', 4, 4, 8, 6, 0, 0, 0))
IDAT = pack_chunk(b'IDAT', b'\x78\x9c\x03\x00\x00\x00\x00\x01')
IEND = pack_chunk(b'IEND')
SRGB = pack_chunk(b'sRGB', b'\x00')


def gama(inverse_gamma: int) -> bytes:
    return pack_chunk(b'gAMA', struct.pack('>I', inverse_gamma))


def png(*chunks: bytes) -> bytes:
    return PNG_SIGNATURE + b''.join(chunks)


def test_gama_45455_is_exactly_2_2():
    result = extract_gamma(png(IHDR, gama(45455), IDAT, IEND))
    assert result.gamma == 2.2
    assert result.status is GammaStatus.EXPLICIT


def test_gama_55556_is_exactly_1_8():
    gamma, status = extract_gamma(png(IHDR, gama(55556), IDAT, IEND))
    assert gamma == 1.8
    assert status is GammaStatus.EXPLICIT


def test_gama_other_values_are_inverted():
    assert extract_gamma(png(gama(100000), IDAT)).gamma == pytest.approx(1.0)
    assert extract_gamma(png(gama(40000), IDAT)).gamma == pytest.approx(2.5)


def test_gama_zero_is_ignored():
    result = extract_gamma(png(IHDR, gama(0), IDAT))
    assert result == GammaResult(2.2, GammaStatus.NO_EXPLICIT_GAMMA)


def test_gama_with_wrong_payload_length_is_ignored():
    odd = pack_chunk(b'gAMA', struct.pack('>IB', 100000, 0))
    result = extract_gamma(png(IHDR, odd, IDAT))
    assert result.status is GammaStatus.NO_EXPLICIT_GAMMA


def test_later_gama_overwrites_earlier():
    result = extract_gamma(png(gama(100000), gama(55556), IDAT))
    assert result.gamma == 1.8


def test_srgb_wins_over_gama_in_either_order():
    """sRGB takes precedence over gAMA regardless of stream order."""
    before = extract_gamma(png(IHDR, SRGB, gama(100000), IDAT))
    after = extract_gamma(png(IHDR, gama(100000), SRGB, IDAT))
    assert tuple(before) == (2.2, GammaStatus.EXPLICIT)
    assert tuple(after) == (2.2, GammaStatus.EXPLICIT)


def test_srgb_alone_is_explicit():
    assert tuple(extract_gamma(png(IHDR, SRGB, IDAT))) == (2.2, GammaStatus.EXPLICIT)


def test_no_gamma_chunks():
    assert tuple(extract_gamma(png(IDAT))) == (2.2, GammaStatus.NO_EXPLICIT_GAMMA)


def test_chunks_after_idat_are_not_read():
    result = extract_gamma(png(IHDR, IDAT, gama(55556), IEND))
    assert result.status is GammaStatus.NO_EXPLICIT_GAMMA


def test_unknown_chunks_are_skipped():
    text = pack_chunk(b'tEXt', b'Comment\x00hello')
    iccp = pack_chunk(b'iCCP', b'profile\x00\x00\x78\x9c')
    result = extract_gamma(png(IHDR, text, iccp, gama(55556), IDAT))
    assert tuple(result) == (1.8, GammaStatus.EXPLICIT)


def test_bad_signature():
    data = b'\x89PNX\r\n\x1a\n' + gama(45455) + IDAT
    assert tuple(extract_gamma(data)) == (2.2, GammaStatus.NOT_A_CONTAINER)


def test_short_input():
    for data in (b'', PNG_SIGNATURE[:7], b'GIF89a'):
        assert tuple(extract_gamma(data)) == (2.2, GammaStatus.NOT_A_CONTAINER)


def test_chunk_length_overrunning_buffer():
    overrun = struct.pack('>I', 1000) + b'tEXt' + b'short' + b'\x00\x00\x00\x00'
    result = extract_gamma(png(IHDR, overrun, IDAT))
    assert tuple(result) == (2.2, GammaStatus.NOT_A_CONTAINER)


def test_overrun_after_idat_is_never_reached():
    overrun = struct.pack('>I', 0xFFFFFFFF) + b'tEXt' + b'\x00' * 4
    result = extract_gamma(png(gama(55556), IDAT, overrun))
    assert tuple(result) == (1.8, GammaStatus.EXPLICIT)


def test_stream_without_idat():
    assert extract_gamma(png(IHDR, gama(45455), IEND)).status is GammaStatus.NOT_A_CONTAINER
    # Trailing fragment too short to hold a chunk header.
    assert extract_gamma(png(IHDR, b'\x00\x00\x00')).status is GammaStatus.NOT_A_CONTAINER


def test_gamma_is_always_positive():
    cases = [b'', png(IDAT), png(gama(1), IDAT), png(gama(0xFFFFFFFF), IDAT), b'\x00' * 64]
    for data in cases:
        assert extract_gamma(data).gamma > 0


def test_gamma_result_rejects_non_positive():
    with pytest.raises(ValueError):
        GammaResult(0.0, GammaStatus.EXPLICIT)


def test_gamma_from_inverse():
    assert gamma_from_inverse(45455) == 2.2
    assert gamma_from_inverse(55556) == 1.8
    assert gamma_from_inverse(0) is None
    assert gamma_from_inverse(50000) == pytest.approx(2.0)


def test_resolve_gamma_override():
    extracted = GammaResult(1.8, GammaStatus.EXPLICIT)
    assert resolve_gamma(extracted) == 1.8
    assert resolve_gamma(extracted, 1.0) == 1.0
    assert resolve_gamma(extracted, 0.0) == 1.8
    assert resolve_gamma(extracted, -2.0) == 1.8


def test_iter_chunks_records():
    data = png(IHDR, gama(45455), IDAT, IEND)
    chunks = list(iter_chunks(data))
    assert [c.tag for c in chunks] == [b'IHDR', b'gAMA', b'IDAT', b'IEND']
    assert chunks[0].offset == 8
    assert chunks[1].offset == 8 + len(IHDR)
    assert chunks[1].length == 4
    assert chunks[1].payload == struct.pack('>I', 45455)
    assert chunks[3].name == 'IEND'
    # Known CRC of an empty IEND chunk.
    assert chunks[3].crc == 0xAE426082


def test_iter_chunks_errors():
    with pytest.raises(ValueError):
        list(iter_chunks(b'not a png at all'))
    truncated = png(IHDR, struct.pack('>I', 64) + b'IDAT' + b'\x00' * 8)
    with pytest.raises(TruncatedChunkError):
        list(iter_chunks(truncated))


def test_pack_chunk_rejects_bad_tag():
    with pytest.raises(ValueError):
        pack_chunk(b'gAM', b'')


def test_gama_crc_is_not_validated():
    bad_crc = struct.pack('>I', 4) + b'gAMA' + struct.pack('>I', 55556) + b'\xde\xad\xbe\xef'
    assert tuple(extract_gamma(png(IHDR, bad_crc, IDAT, IEND))) == (1.8, GammaStatus.EXPLICIT)


def test_is_explicit_only_for_explicit_status():
    assert GammaResult(1.8, GammaStatus.EXPLICIT).is_explicit
    assert not GammaResult(2.2, GammaStatus.NO_EXPLICIT_GAMMA).is_explicit
    assert not GammaResult(2.2, GammaStatus.NOT_A_CONTAINER).is_explicit
    assert extract_gamma(png(IHDR, SRGB, IDAT)).is_explicit
    assert not extract_gamma(png(IHDR, IDAT)).is_explicit
