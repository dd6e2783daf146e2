"""
RIFF subpackage - chunked container parsing.

- cursor.py: forward-only ByteCursor and FourCC helpers
- chunk.py: chunk header reader and bounded payloads
- fmt.py: fmt chunk decoder
- info.py: LIST/INFO text decoding
- walker.py: ContainerWalker and the chunk dispatch tables
"""

from .chunk import Chunk, ChunkHeader, read_chunk_header
from .cursor import ByteCursor, fourcc_to_str
from .fmt import FormatDescriptor, decode_format
from .walker import ContainerWalker, parse

__all__ = [
    'ByteCursor',
    'Chunk',
    'ChunkHeader',
    'ContainerWalker',
    'FormatDescriptor',
    'decode_format',
    'fourcc_to_str',
    'parse',
    'read_chunk_header',
]
