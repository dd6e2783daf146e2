"""Forward-only byte cursor and FourCC primitives.

Everything the parser reads goes through :class:`ByteCursor`. Only the
``read(n)`` method of the wrapped source is called, so the source does not
need to be seekable: a file opened in binary mode, an ``io.BytesIO``, a
socket file or an HTTP response body all work.
"""

import struct
from typing import Optional

from ..constants import FOURCC_SIZE, SKIP_BLOCK_SIZE
from ..exceptions import ShortReadError, UnexpectedFormatError

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


def fourcc_to_str(fourcc: bytes) -> str:
    """Printable form of a FourCC (latin-1 maps every byte)."""
    return fourcc.decode("latin-1")


class ByteCursor:
    """Reads a byte source strictly forwards, optionally bounded.

    Args:
        source: Object with a ``read(n)`` method returning bytes
        limit: Maximum number of bytes this cursor may consume, or None
        offset: Position of the cursor's first byte within the outermost
            stream; only used for error messages
        block_size: Largest block read at once by :meth:`skip`
    """

    def __init__(self, source, limit: Optional[int] = None, offset: int = 0,
                 block_size: int = SKIP_BLOCK_SIZE):
        self.source = source
        self.limit = limit
        self.offset = offset
        self.block_size = block_size
        self.consumed = 0

    @property
    def position(self) -> int:
        return self.offset + self.consumed

    @property
    def remaining(self) -> Optional[int]:
        if self.limit is None:
            return None
        return self.limit - self.consumed

    def read(self, n: int) -> bytes:
        """Read up to ``n`` bytes; fewer are returned only at end of data."""
        if self.limit is not None:
            n = min(n, self.limit - self.consumed)
        if n <= 0:
            return b""

        parts = []
        wanted = n
        while wanted > 0:
            data = self.source.read(wanted)
            if not data:
                break
            parts.append(data)
            wanted -= len(data)

        data = b"".join(parts)
        self.consumed += len(data)
        return data

    def read_exact(self, n: int) -> bytes:
        """Read exactly ``n`` bytes.

        Raises:
            ShortReadError: If the data ends before ``n`` bytes were read
        """
        start = self.position
        data = self.read(n)
        if len(data) != n:
            raise ShortReadError(n, len(data), start)
        return data

    def read_u16(self) -> int:
        return _U16.unpack(self.read_exact(_U16.size))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_exact(_U32.size))[0]

    def read_fourcc(self) -> bytes:
        return self.read_exact(FOURCC_SIZE)

    def expect_fourcc(self, expected: bytes) -> bytes:
        """Read a FourCC and check it against an expected value.

        Raises:
            UnexpectedFormatError: If the FourCC differs from ``expected``
        """
        fourcc = self.read_fourcc()
        if fourcc != expected:
            raise UnexpectedFormatError(expected, fourcc)
        return fourcc

    def skip(self, n: int) -> int:
        """Discard exactly ``n`` bytes without holding more than one block.

        Raises:
            ShortReadError: If the data ends before ``n`` bytes were skipped
        """
        start = self.position
        left = n
        while left > 0:
            data = self.read(min(left, self.block_size))
            if not data:
                raise ShortReadError(n, n - left, start)
            left -= len(data)
        return n

    def skip_rest(self) -> int:
        """Discard whatever is left of a bounded cursor."""
        if self.limit is None:
            raise ValueError("skip_rest() requires a bounded cursor")
        left = self.remaining
        if left:
            self.skip(left)
        return left

    def child(self, length: int) -> "ByteCursor":
        """Return a cursor bounded to the next ``length`` bytes of this one.

        The child reads through this cursor, so the parent's own bound still
        applies: a child can never read past the end of its parent.
        """
        return ByteCursor(self, limit=length, offset=self.position,
                          block_size=self.block_size)

    def __repr__(self):
        return (
            f"ByteCursor(position={self.position}, consumed={self.consumed}, "
            f"limit={self.limit})"
        )
