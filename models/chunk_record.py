"""A single length-tag-payload-checksum record from a PNG stream."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkRecord:
    """One chunk. The checksum is carried as read and never validated."""

    tag: bytes
    payload: bytes
    crc: int
    offset: int = 0

    @property
    def length(self) -> int:
        return len(self.payload)

    @property
    def name(self) -> str:
        return self.tag.decode('latin-1')
