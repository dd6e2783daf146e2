"""Text subchunks of a ``LIST``/``INFO`` chunk."""

import logging

from ..constants import ENCODING, FALLBACK_ENCODING, MAX_INFO_TEXT_SIZE
from .cursor import ByteCursor


def decode_text(raw: bytes) -> str:
    """Decode a NUL terminated INFO string.

    Try UTF-8 first, then fall back to Latin-1, which can decode any byte
    sequence written by older tagging tools.
    """
    raw = raw.partition(b"\x00")[0]
    try:
        return str(raw, ENCODING)
    except UnicodeDecodeError:
        return str(raw, FALLBACK_ENCODING)


def read_text(payload: ByteCursor, limit: int = MAX_INFO_TEXT_SIZE) -> str:
    """Read a bounded INFO payload as text.

    At most ``limit`` bytes are held in memory. Anything past that is left
    unread, to be discarded when the chunk is finished.
    """
    size = payload.remaining
    if size > limit:
        logging.debug(f"INFO string of {size} bytes cut to {limit}")
        size = limit
    return decode_text(payload.read_exact(size))
