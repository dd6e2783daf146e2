"""sndtag.

Read tags and format metadata from audio files without seeking: RIFF/WAVE
containers are walked chunk by chunk, and ID3v1 blocks are handed to
mutagen's parser.

Main modules:
    sniffer: Container detection and the read()/read_file() entry points
    riff: Chunk cursor, fmt and INFO decoders, container walker
    legacy: ID3v1 tag block reader
    cli: Command-line interface (sndtag command)

Core modules:
    config: Configuration management
    constants: Magic values, chunk ids and field names
    exceptions: Error hierarchy
    metadata: MetadataStore result mapping
    options: ParserOptions
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("sndtag")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .exceptions import (
    LegacyTagError,
    ShortReadError,
    SndTagError,
    TruncatedChunkError,
    UnexpectedFormatError,
    UnrecognizedChunkError,
    UnrecognizedHeaderError,
    UnsupportedEncodingError,
    UnsupportedFormatLengthError,
)
from .legacy import read_legacy_tags
from .metadata import MetadataStore
from .options import ParserOptions, UnknownChunkPolicy
from .sniffer import ParserHandle, read, read_file, sniff

__all__ = [
    "__version__",
    "read",
    "read_file",
    "sniff",
    "read_legacy_tags",
    "ParserHandle",
    "ParserOptions",
    "UnknownChunkPolicy",
    "MetadataStore",
    "SndTagError",
    "ShortReadError",
    "UnrecognizedHeaderError",
    "UnexpectedFormatError",
    "TruncatedChunkError",
    "UnrecognizedChunkError",
    "UnsupportedFormatLengthError",
    "UnsupportedEncodingError",
    "LegacyTagError",
]
