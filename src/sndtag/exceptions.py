"""Exception classes for sndtag.

Every parse failure is reported as a subclass of :class:`SndTagError`. The
classes also derive from the builtin exception that best describes them
(``EOFError`` for data that ends too early, ``ValueError`` for data that is
present but not understood), so callers that already catch those keep
working. ``OSError`` raised by the underlying stream is never wrapped.
"""

from typing import Optional


def _show(raw: bytes) -> str:
    return raw.decode("latin-1")


class SndTagError(Exception):
    """Base exception for all sndtag errors."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class ShortReadError(SndTagError, EOFError):
    """Fewer bytes were available than a fixed-width read required."""

    def __init__(self, expected: int, got: int, offset: Optional[int] = None):
        self.expected = expected
        self.got = got
        self.offset = offset
        message = f"expected to read {expected} bytes, actually read {got}"
        if offset is not None:
            message += f" (at offset {offset})"
        super().__init__(message)


class UnrecognizedHeaderError(SndTagError, ValueError):
    """The magic prefix matches no known container family."""

    def __init__(self, header: bytes):
        self.header = header
        super().__init__(f"unrecognized header: {_show(header)!r}")


class UnexpectedFormatError(SndTagError, ValueError):
    """The RIFF form type is not the one this reader understands."""

    def __init__(self, expected: bytes, got: bytes):
        self.expected = expected
        self.got = got
        super().__init__(
            f"expected form type {_show(expected)!r}, got {_show(got)!r}"
        )


class TruncatedChunkError(SndTagError, EOFError):
    """A chunk header started but the stream ended before it was complete."""

    def __init__(self, offset: int, partial: bytes):
        self.offset = offset
        self.partial = partial
        super().__init__(
            f"truncated chunk header at offset {offset}: "
            f"got {len(partial)} of 8 bytes"
        )


class UnrecognizedChunkError(SndTagError, ValueError):
    """A chunk id outside the allow-list was found."""

    def __init__(self, chunk_id: bytes, offset: int, list_type: Optional[bytes] = None):
        self.chunk_id = chunk_id
        self.offset = offset
        self.list_type = list_type
        if list_type is None:
            message = f"unrecognized chunk ID: {_show(chunk_id)!r} at offset {offset}"
        else:
            message = (
                f"unsupported {_show(chunk_id)} type: {_show(list_type)!r} "
                f"at offset {offset}"
            )
        super().__init__(message)


class UnsupportedFormatLengthError(SndTagError, ValueError):
    """The fmt chunk declares a layout the decoder does not implement."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"expected fmt chunk length {expected}, got {got}")


class UnsupportedEncodingError(SndTagError, ValueError):
    """The fmt chunk declares an encoding other than PCM."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"expected pcm audio format {expected}, got {got}")


class LegacyTagError(SndTagError, ValueError):
    """The legacy tag block could not be parsed."""
