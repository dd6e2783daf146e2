"""Legacy (ID3v1) tag block reader.

An ID3v1 block is 128 bytes: the ``TAG`` marker followed by fixed width
title, artist, album, year and comment fields and a genre byte (ID3v1.1 also
stores a track number in the last two comment bytes). The sniffer has
already consumed the marker when this reader is called, so only the
remaining 125 bytes are read. Field decoding is left to mutagen.
"""

import logging

from mutagen.id3 import ParseID3v1

from .constants import ID3V1_BODY_SIZE, ID3V1_FIELDS, LEGACY_MAGIC
from .exceptions import LegacyTagError
from .metadata import MetadataStore
from .riff.cursor import ByteCursor


def frame_value(frame) -> str:
    """Render a mutagen text frame as a single string."""
    genres = getattr(frame, "genres", None)
    if genres:
        return ", ".join(genres)
    return ", ".join(str(text) for text in frame.text)


def read_legacy_tags(stream) -> MetadataStore:
    """Read an ID3v1 block whose ``TAG`` marker was already consumed.

    Args:
        stream: ByteCursor or readable binary stream positioned after ``TAG``

    Returns:
        Frozen MetadataStore with whichever of Title, Artist, Album, Year,
        Comment, TrackNumber and Genre are present

    Raises:
        ShortReadError: If fewer than 125 bytes follow the marker
        LegacyTagError: If mutagen rejects the block. ``ParseID3v1`` only
            does so for data without a ``TAG`` marker or outside 124-128
            bytes, which the fixed size read here rules out, so this is a
            guard against changes in mutagen rather than a data error
    """
    cursor = stream if isinstance(stream, ByteCursor) else ByteCursor(stream)
    block = LEGACY_MAGIC + cursor.read_exact(ID3V1_BODY_SIZE)

    frames = ParseID3v1(block)
    if frames is None:
        raise LegacyTagError("invalid ID3v1 tag block")

    metadata = MetadataStore()
    for frame_id, key in ID3V1_FIELDS.items():
        frame = frames.get(frame_id)
        if frame is not None:
            metadata[key] = frame_value(frame)

    logging.debug(f"ID3v1 block with {len(metadata)} fields")
    return metadata.freeze()
