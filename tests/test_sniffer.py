"""Tests for container detection and the read entry points."""

import io

import pytest

from conftest import chunk, fmt_chunk, id3v1_block, info_list, riff
from sndtag import (
    ParserOptions,
    ShortReadError,
    SndTagError,
    UnexpectedFormatError,
    UnknownChunkPolicy,
    UnrecognizedHeaderError,
    read,
    read_file,
    sniff,
)


class TestSniff:
    """Test the magic prefix detection."""

    def test_riff_detected(self, minimal_wav):
        handle = sniff(io.BytesIO(minimal_wav))
        assert handle.family == "RIFF"
        assert handle.cursor.position == 4

    def test_legacy_detected(self):
        handle = sniff(io.BytesIO(id3v1_block(title=b'x')))
        assert handle.family == "ID3v1"
        assert handle.cursor.position == 3

    @pytest.mark.parametrize("data", [
        b'ID3\x04\x00\x00\x00\x00',
        b'fLaC\x00\x00\x00\x22',
        b'OggS\x00\x02',
        b'riff\x00\x00\x00\x00',
        b'\x00\x00\x00\x00\x00\x00',
    ])
    def test_unrecognized_header(self, data, reader_factory):
        reader = reader_factory(data)
        with pytest.raises(UnrecognizedHeaderError) as excinfo:
            sniff(reader)
        assert excinfo.value.header == data[:3]
        assert reader.consumed <= 4

    @pytest.mark.parametrize("fourth", [b'X', b'f', b'\x00'])
    def test_rif_without_f(self, fourth, reader_factory):
        reader = reader_factory(b'RIF' + fourth + b'\x00' * 8)
        with pytest.raises(UnrecognizedHeaderError) as excinfo:
            sniff(reader)
        assert excinfo.value.header == b'RIF' + fourth
        assert reader.consumed == 4

    @pytest.mark.parametrize("data", [b'', b'R', b'RI'])
    def test_short_prefix(self, data):
        with pytest.raises(ShortReadError):
            sniff(io.BytesIO(data))

    def test_rif_at_end_of_stream(self):
        with pytest.raises(ShortReadError):
            sniff(io.BytesIO(b'RIF'))

    def test_unrecognized_is_sndtag_and_value_error(self):
        with pytest.raises(SndTagError):
            sniff(io.BytesIO(b'XYZW'))
        with pytest.raises(ValueError):
            sniff(io.BytesIO(b'XYZW'))


class TestRead:
    """Test read() and read_file()."""

    def test_concrete_scenario(self, reader_factory):
        """RIFF + length + WAVE + fmt (2ch, 44100 Hz, 16 bit)."""
        data = riff(chunk(b'fmt ', bytes.fromhex(
            '0100' '0200' '44ac0000' '10b10200' '0400' '1000')))
        metadata = read(reader_factory(data))
        assert metadata == {
            'AudioFormat': '1',
            'NumChannels': '2',
            'SampleRate': '44100',
            'ByteRate': '176400',
            'BlockAlign': '4',
            'BitRate': '16',
        }

    def test_full_wav(self, reader_factory, expected_format):
        data = riff(
            fmt_chunk(),
            info_list(chunk(b'INAM', b'Track One\x00'), chunk(b'ISFT', b'Lavf58\x00')),
            chunk(b'data', b'\x01\x02' * 5000),
        )
        metadata = read(reader_factory(data))
        assert metadata == dict(expected_format, Title='Track One', Software='Lavf58')

    def test_read_with_options(self, expected_format):
        data = riff(fmt_chunk(), chunk(b'cue ', b'\x00' * 4))
        options = ParserOptions(unknown_chunks=UnknownChunkPolicy.SKIP)
        assert read(io.BytesIO(data), options) == expected_format

    def test_read_legacy(self):
        metadata = read(io.BytesIO(id3v1_block(title=b'Title', artist=b'Artist')))
        assert metadata['Title'] == 'Title'
        assert metadata['Artist'] == 'Artist'

    def test_two_cursors_equal(self, minimal_wav):
        assert read(io.BytesIO(minimal_wav)) == read(io.BytesIO(minimal_wav))

    def test_read_file(self, wav_file, expected_format):
        assert read_file(wav_file) == expected_format
        assert read_file(str(wav_file)) == expected_format

    def test_read_file_error_names_file(self, tmp_path):
        path = tmp_path / 'video.avi'
        path.write_bytes(riff(fmt_chunk(), form=b'AVI '))
        with pytest.raises(UnexpectedFormatError) as excinfo:
            read_file(path)
        assert str(path) in str(excinfo.value)
        assert excinfo.value.filename == str(path)

    def test_read_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / 'missing.wav')
