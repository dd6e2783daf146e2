"""Pytest configuration and fixtures."""

import io
import struct

import pytest


def chunk(chunk_id: bytes, payload: bytes, length=None, pad=True) -> bytes:
    """Build a RIFF chunk; odd payloads get a pad byte unless pad=False."""
    if length is None:
        length = len(payload)
    data = chunk_id + struct.pack('<I', length) + payload
    if pad and len(payload) % 2:
        data += b'\x00'
    return data


def fmt_payload(audio_format=1, channels=2, sample_rate=44100, byte_rate=176400,
                block_align=4, bits_per_sample=16) -> bytes:
    return struct.pack('<HHIIHH', audio_format, channels, sample_rate,
                       byte_rate, block_align, bits_per_sample)


def fmt_chunk(**kwargs) -> bytes:
    return chunk(b'fmt ', fmt_payload(**kwargs))


def riff(*chunks: bytes, form=b'WAVE', length=None) -> bytes:
    """Build a RIFF stream, magic included."""
    body = b''.join(chunks)
    if length is None:
        length = len(form) + len(body)
    return b'RIFF' + struct.pack('<I', length) + form + body


def info_list(*subchunks: bytes, list_type=b'INFO') -> bytes:
    return chunk(b'LIST', list_type + b''.join(subchunks))


def id3v1_block(title=b'', artist=b'', album=b'', year=b'', comment=b'',
                track=0, genre=255) -> bytes:
    """Build a 128 byte ID3v1.1 block."""
    comment_field = comment.ljust(28, b'\x00') + b'\x00' + bytes([track])
    return (b'TAG' + title.ljust(30, b'\x00') + artist.ljust(30, b'\x00')
            + album.ljust(30, b'\x00') + year.ljust(4, b'\x00')
            + comment_field + bytes([genre]))


class NonSeekableReader:
    """Wraps bytes so that only read() is available and reads are recorded."""

    def __init__(self, data: bytes, max_read=None):
        self._buffer = io.BytesIO(data)
        self.max_read = max_read
        self.reads = []

    def read(self, n=-1):
        if self.max_read is not None and (n < 0 or n > self.max_read):
            n = self.max_read
        data = self._buffer.read(n)
        self.reads.append(n)
        return data

    @property
    def consumed(self):
        return self._buffer.tell()


EXPECTED_FORMAT = {
    'AudioFormat': '1',
    'NumChannels': '2',
    'SampleRate': '44100',
    'ByteRate': '176400',
    'BlockAlign': '4',
    'BitRate': '16',
}


@pytest.fixture
def minimal_wav():
    """RIFF + length + WAVE + one fmt chunk."""
    return riff(fmt_chunk())


@pytest.fixture
def expected_format():
    return dict(EXPECTED_FORMAT)


@pytest.fixture
def reader_factory():
    """Create non-seekable readers over byte strings."""
    return NonSeekableReader


@pytest.fixture
def wav_file(tmp_path, minimal_wav):
    """A minimal WAV file on disk."""
    path = tmp_path / 'minimal.wav'
    path.write_bytes(minimal_wav)
    return path
