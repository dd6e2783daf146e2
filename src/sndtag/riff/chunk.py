"""Chunk header reader and payload bounding."""

import logging
import struct
from typing import NamedTuple, Optional

from ..constants import CHUNK_HEADER_SIZE
from ..exceptions import TruncatedChunkError
from .cursor import ByteCursor, fourcc_to_str

_HEADER = struct.Struct("<4sI")


class ChunkHeader(NamedTuple):
    id: bytes
    length: int
    offset: int

    @property
    def name(self) -> str:
        return fourcc_to_str(self.id)

    @property
    def payload_offset(self) -> int:
        return self.offset + CHUNK_HEADER_SIZE

    @property
    def end(self) -> int:
        """Position right after the payload, pad byte not included."""
        return self.payload_offset + self.length


def read_chunk_header(cursor: ByteCursor) -> Optional[ChunkHeader]:
    """Read the next chunk header from ``cursor``.

    Returns None on a clean end of data, that is when not a single byte of a
    new header could be read.

    Raises:
        TruncatedChunkError: If the data ends part way through the header
    """
    offset = cursor.position
    raw = cursor.read(CHUNK_HEADER_SIZE)
    if not raw:
        return None
    if len(raw) < CHUNK_HEADER_SIZE:
        raise TruncatedChunkError(offset, raw)
    chunk_id, length = _HEADER.unpack(raw)
    return ChunkHeader(chunk_id, length, offset)


class Chunk:
    """A chunk header together with a cursor bounded to its payload."""

    def __init__(self, header: ChunkHeader, parent: ByteCursor):
        self.header = header
        self.parent = parent
        self.payload = parent.child(header.length)

    @property
    def id(self) -> bytes:
        return self.header.id

    @property
    def length(self) -> int:
        return self.header.length

    def finish(self, pad_odd: bool = True) -> None:
        """Leave the parent cursor positioned at the next chunk header.

        Payload bytes a handler did not read are discarded. For odd-length
        payloads the pad byte is consumed too when ``pad_odd`` is set; a pad
        byte missing at the very end of the data is not an error.
        """
        leftover = self.payload.skip_rest()
        if leftover:
            logging.debug(f"Discarded {leftover} unread bytes of {self.header.name!r} chunk")
        if pad_odd and self.header.length % 2:
            if not self.parent.read(1):
                logging.debug(f"Pad byte missing after {self.header.name!r} chunk at end of data")

    def __repr__(self):
        return f"Chunk({self.header.name!r}, length={self.header.length}, offset={self.header.offset})"
