"""RIFF/WAVE container walker.

The walker is entered after the ``RIFF`` magic has been consumed. It reads
the declared container length and the ``WAVE`` form type, then reads chunks
until the data runs out, dispatching each one through a table keyed by its
FourCC. ``LIST`` chunks of type ``INFO`` are walked with the same loop using
a second table, on a cursor bounded to the list's declared length.

See http://soundfile.sapp.org/doc/WaveFormat/ for the layout.
"""

import logging
from typing import Callable, Dict, Optional

from ..constants import (
    DATA_CHUNK,
    FMT_CHUNK,
    INFO_FIELDS,
    INFO_LIST,
    LIST_CHUNK,
    WAVE_FORM,
)
from ..exceptions import UnrecognizedChunkError
from ..metadata import MetadataStore
from ..options import ParserOptions
from .chunk import Chunk, read_chunk_header
from .cursor import ByteCursor, fourcc_to_str
from .fmt import decode_format
from .info import read_text

Handler = Callable[["ContainerWalker", Chunk], None]


class ContainerWalker:
    """Walks one RIFF container and collects its metadata.

    A walker is single use: it owns its cursor and its MetadataStore, and the
    store is only handed out, frozen, when the whole container was read.
    """

    def __init__(self, cursor: ByteCursor, options: Optional[ParserOptions] = None):
        self.cursor = cursor
        self.options = options if options is not None else ParserOptions()
        self.metadata = MetadataStore()
        self.declared_length: Optional[int] = None
        self.form_type: Optional[bytes] = None

    def parse(self) -> MetadataStore:
        """Read the container header and every chunk after it.

        Raises:
            ShortReadError: If the container header is incomplete
            UnexpectedFormatError: If the form type is not WAVE
            TruncatedChunkError: If a chunk header is cut short
            UnrecognizedChunkError: If a chunk is outside the allow-list and
                the policy is strict
            UnsupportedFormatLengthError: From the fmt decoder
            UnsupportedEncodingError: From the fmt decoder
        """
        # Informational only: the loop below runs until the data ends.
        self.declared_length = self.cursor.read_u32()
        self.form_type = self.cursor.expect_fourcc(WAVE_FORM)
        logging.debug(f"RIFF container, declared length {self.declared_length}")

        self.walk(self.cursor, TOP_LEVEL_HANDLERS)
        return self.metadata.freeze()

    def walk(self, cursor: ByteCursor, handlers: Dict[bytes, Handler],
             list_type: Optional[bytes] = None) -> None:
        """Dispatch chunks read from ``cursor`` until it is exhausted."""
        while True:
            header = read_chunk_header(cursor)
            if header is None:
                return

            logging.debug(
                f"Chunk {header.name!r} at offset {header.offset}, length {header.length}"
            )
            chunk = Chunk(header, cursor)
            handler = handlers.get(header.id)
            if handler is None:
                self.unknown(chunk, list_type)
            else:
                handler(self, chunk)
            chunk.finish(self.options.pad_odd_chunks)

    def unknown(self, chunk: Chunk, list_type: Optional[bytes] = None) -> None:
        """Apply the unknown chunk policy to ``chunk``."""
        if self.options.strict:
            raise UnrecognizedChunkError(chunk.id, chunk.header.offset, list_type)
        logging.debug(
            f"Skipping unrecognized chunk {chunk.header.name!r} ({chunk.length} bytes)"
        )
        chunk.payload.skip_rest()

    # ------------------------------------------------------------------
    # Chunk handlers
    # ------------------------------------------------------------------

    def read_format(self, chunk: Chunk) -> None:
        descriptor = decode_format(chunk.header, chunk.payload)
        self.metadata.update(descriptor.to_fields())

    def discard(self, chunk: Chunk) -> None:
        skipped = chunk.payload.skip_rest()
        logging.debug(f"Discarded {skipped} bytes of {chunk.header.name!r} data")

    def read_list(self, chunk: Chunk) -> None:
        list_type = chunk.payload.read_fourcc()
        handlers = LIST_HANDLERS.get(list_type)
        if handlers is None:
            if self.options.strict:
                raise UnrecognizedChunkError(chunk.id, chunk.header.offset, list_type)
            logging.debug(f"Skipping LIST of type {fourcc_to_str(list_type)!r}")
            chunk.payload.skip_rest()
            return
        self.walk(chunk.payload, handlers, list_type)


def text_handler(key: str) -> Handler:
    """Build a handler storing an INFO string under ``key``."""

    def handler(walker, chunk):
        walker.metadata[key] = read_text(chunk.payload)

    handler.__name__ = "text_handler(" + key + ")"
    return handler


TOP_LEVEL_HANDLERS: Dict[bytes, Handler] = {
    FMT_CHUNK: ContainerWalker.read_format,
    DATA_CHUNK: ContainerWalker.discard,
    LIST_CHUNK: ContainerWalker.read_list,
}

INFO_HANDLERS: Dict[bytes, Handler] = {
    chunk_id: text_handler(key) for chunk_id, key in INFO_FIELDS.items()
}

# LIST types that are walked, and the table used inside them
LIST_HANDLERS: Dict[bytes, Dict[bytes, Handler]] = {
    INFO_LIST: INFO_HANDLERS,
}


def parse(stream, options: Optional[ParserOptions] = None) -> MetadataStore:
    """Parse a RIFF/WAVE stream whose ``RIFF`` magic was already consumed."""
    if options is None:
        options = ParserOptions()
    if isinstance(stream, ByteCursor):
        cursor = stream
    else:
        cursor = ByteCursor(stream, block_size=options.skip_block_size)
    return ContainerWalker(cursor, options).parse()
