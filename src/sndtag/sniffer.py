"""Container detection and the top level read functions."""

import logging
from pathlib import Path
from typing import Callable, Dict, NamedTuple, Optional, Union

from .constants import (
    LEGACY_MAGIC,
    RIFF_MAGIC_LAST_BYTE,
    RIFF_MAGIC_PREFIX,
    SNIFF_LENGTH,
)
from .exceptions import SndTagError, UnrecognizedHeaderError
from .legacy import read_legacy_tags
from .metadata import MetadataStore
from .options import ParserOptions
from .riff.cursor import ByteCursor
from .riff.walker import ContainerWalker


def _parse_riff(cursor: ByteCursor, options: ParserOptions) -> MetadataStore:
    return ContainerWalker(cursor, options).parse()


def _parse_legacy(cursor: ByteCursor, options: ParserOptions) -> MetadataStore:
    return read_legacy_tags(cursor)


class ParserHandle(NamedTuple):
    """A recognised container family, ready to parse the rest of the stream."""

    family: str
    cursor: ByteCursor
    options: ParserOptions
    parser: Callable[[ByteCursor, ParserOptions], MetadataStore]

    def parse(self) -> MetadataStore:
        return self.parser(self.cursor, self.options)


def _check_riff(cursor: ByteCursor, prefix: bytes) -> None:
    last = cursor.read_exact(1)
    if last != RIFF_MAGIC_LAST_BYTE:
        raise UnrecognizedHeaderError(prefix + last)


# magic prefix -> (family, extra check, parser)
MAGIC_MAPPING: Dict[bytes, tuple] = {
    LEGACY_MAGIC: ("ID3v1", None, _parse_legacy),
    RIFF_MAGIC_PREFIX: ("RIFF", _check_riff, _parse_riff),
}


def sniff(stream, options: Optional[ParserOptions] = None) -> ParserHandle:
    """Identify the container family from the first bytes of ``stream``.

    Reads 3 bytes, plus a 4th for the RIFF family. The stream cannot be
    rewound, so a failed sniff leaves it unusable.

    Raises:
        ShortReadError: If fewer than 3 (or 4) bytes are available
        UnrecognizedHeaderError: If the prefix matches no known family
    """
    if options is None:
        options = ParserOptions()
    if isinstance(stream, ByteCursor):
        cursor = stream
    else:
        cursor = ByteCursor(stream, block_size=options.skip_block_size)

    prefix = cursor.read_exact(SNIFF_LENGTH)
    try:
        family, check, parser = MAGIC_MAPPING[prefix]
    except KeyError:
        raise UnrecognizedHeaderError(prefix) from None

    if check is not None:
        check(cursor, prefix)

    logging.debug(f"Detected {family} stream")
    return ParserHandle(family, cursor, options, parser)


def read(stream, options: Optional[ParserOptions] = None) -> MetadataStore:
    """Read tags from a binary stream.

    Args:
        stream: Object with a ``read(n)`` method; seeking is never used
        options: Parser options (defaults to strict, padded parsing)

    Returns:
        Frozen MetadataStore of field name -> string value
    """
    return sniff(stream, options).parse()


def read_file(filename: Union[str, Path], options: Optional[ParserOptions] = None) -> MetadataStore:
    """Read tags from a file on disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        PermissionError: If the file cannot be read
        SndTagError: If the file cannot be parsed; the message names the file
    """
    with open(filename, "rb") as f:
        try:
            return read(f, options)
        except SndTagError as e:
            e.filename = str(filename)
            e.args = (f"Error reading {filename}: {e}",)
            raise
