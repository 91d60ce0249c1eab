"""PNG chunk framing: signature check, record iteration, record packing."""

import struct
import zlib
from typing import Iterator

from models.chunk_record import ChunkRecord
from utils.constants import PNG_SIGNATURE

# length (4) + tag (4) + checksum (4)
CHUNK_OVERHEAD = 12


class TruncatedChunkError(ValueError):
    """A chunk declares more payload than the stream holds."""


def has_png_signature(data: bytes) -> bool:
    return len(data) >= len(PNG_SIGNATURE) and data[:len(PNG_SIGNATURE)] == PNG_SIGNATURE


def iter_chunks(data: bytes) -> Iterator[ChunkRecord]:
    """Yield chunk records in stream order, starting after the signature.

    Stops quietly when fewer than 12 bytes remain. Raises ValueError for a
    missing signature and TruncatedChunkError when a declared length would
    overrun the remaining bytes.
    """
    if not has_png_signature(data):
        raise ValueError("Missing PNG signature")

    view = memoryview(data)
    pos = len(PNG_SIGNATURE)
    while len(data) - pos >= CHUNK_OVERHEAD:
        length, tag = struct.unpack_from('>I4s', view, pos)
        if len(data) - pos < CHUNK_OVERHEAD + length:
            raise TruncatedChunkError(
                f"Chunk {tag!r} at offset {pos} declares {length} bytes, "
                f"only {len(data) - pos - CHUNK_OVERHEAD} remain"
            )
        payload_start = pos + 8
        payload = bytes(view[payload_start:payload_start + length])
        (crc,) = struct.unpack_from('>I', view, payload_start + length)
        yield ChunkRecord(tag=tag, payload=payload, crc=crc, offset=pos)
        pos = payload_start + length + 4


def pack_chunk(tag: bytes, payload: bytes = b"") -> bytes:
    """Encode one chunk record with a CRC-32 over tag and payload."""
    if len(tag) != 4:
        raise ValueError(f"Chunk tag must be 4 bytes, got {tag!r}")
    crc = zlib.crc32(tag + payload) & 0xFFFFFFFF
    return struct.pack('>I', len(payload)) + tag + payload + struct.pack('>I', crc)
