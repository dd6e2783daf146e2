"""Decoder for the WAVE ``fmt `` chunk.

Only the 16 byte PCM layout is implemented::

    offset  size  field
         0     2  audio format (1 = PCM)
         2     2  number of channels
         4     4  sample rate
         8     4  byte rate
        12     2  block align
        14     2  bits per sample
"""

from dataclasses import astuple, dataclass
from typing import Dict

from ..constants import FMT_CHUNK_LENGTH, FORMAT_KEYS, WAVE_FORMAT_PCM
from ..exceptions import UnsupportedEncodingError, UnsupportedFormatLengthError
from .chunk import ChunkHeader
from .cursor import ByteCursor


@dataclass(frozen=True)
class FormatDescriptor:
    audio_format: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int

    def to_fields(self) -> Dict[str, str]:
        """Return the descriptor as metadata fields (decimal strings)."""
        return {key: str(value) for key, value in zip(FORMAT_KEYS, astuple(self))}


def decode_format(header: ChunkHeader, payload: ByteCursor) -> FormatDescriptor:
    """Decode a ``fmt `` chunk payload.

    Args:
        header: The chunk header; its declared length is validated
        payload: Cursor bounded to the chunk payload

    Returns:
        The decoded FormatDescriptor. Byte rate and block align are returned
        as stored; they are not checked against the other fields.

    Raises:
        UnsupportedFormatLengthError: If the declared length is not 16
        UnsupportedEncodingError: If the audio format is not PCM
        ShortReadError: If the payload ends early
    """
    if header.length != FMT_CHUNK_LENGTH:
        raise UnsupportedFormatLengthError(FMT_CHUNK_LENGTH, header.length)

    audio_format = payload.read_u16()
    if audio_format != WAVE_FORMAT_PCM:
        raise UnsupportedEncodingError(WAVE_FORMAT_PCM, audio_format)

    return FormatDescriptor(
        audio_format=audio_format,
        channels=payload.read_u16(),
        sample_rate=payload.read_u32(),
        byte_rate=payload.read_u32(),
        block_align=payload.read_u16(),
        bits_per_sample=payload.read_u16(),
    )
