# Magic prefixes recognised by the sniffer. The RIFF family is identified
# from the first three bytes and confirmed with a fourth.
SNIFF_LENGTH = 3
LEGACY_MAGIC = b"TAG"
RIFF_MAGIC_PREFIX = b"RIF"
RIFF_MAGIC_LAST_BYTE = b"F"

# RIFF layout
FOURCC_SIZE = 4
CHUNK_HEADER_SIZE = 8  # FourCC + uint32 length
WAVE_FORM = b"WAVE"

FMT_CHUNK = b"fmt "
DATA_CHUNK = b"data"
LIST_CHUNK = b"LIST"
INFO_LIST = b"INFO"

# The only fmt layout the decoder implements is the 16 byte PCM one.
FMT_CHUNK_LENGTH = 16
WAVE_FORMAT_PCM = 1

# Keys written by the fmt decoder, in stream order. "BitRate" carries the
# bits-per-sample value; the name is kept for existing consumers.
AUDIO_FORMAT = "AudioFormat"
NUM_CHANNELS = "NumChannels"
SAMPLE_RATE = "SampleRate"
BYTE_RATE = "ByteRate"
BLOCK_ALIGN = "BlockAlign"
BIT_RATE = "BitRate"

FORMAT_KEYS = [
    AUDIO_FORMAT,
    NUM_CHANNELS,
    SAMPLE_RATE,
    BYTE_RATE,
    BLOCK_ALIGN,
    BIT_RATE,
]

# LIST/INFO subchunk ids and the keys they are stored under
INFO_FIELDS = {
    b"INAM": "Title",
    b"IART": "Artist",
    b"IPRD": "Album",
    b"ICMT": "Comment",
    b"ICRD": "Date",
    b"IGNR": "Genre",
    b"ITRK": "TrackNumber",
    b"IPRT": "TrackNumber",
    b"ICOP": "Copyright",
    b"ISFT": "Software",
    b"IENG": "Engineer",
    b"ITCH": "Technician",
    b"ISBJ": "Subject",
    b"IKEY": "Keywords",
    b"ILNG": "Language",
    b"IMUS": "Composer",
}

# ID3v1 block: "TAG" + 125 bytes of fixed width fields
ID3V1_SIZE = 128
ID3V1_BODY_SIZE = ID3V1_SIZE - len(LEGACY_MAGIC)

# ID3v2 frame ids produced by the ID3v1 parser -> our keys
ID3V1_FIELDS = {
    "TIT2": "Title",
    "TPE1": "Artist",
    "TALB": "Album",
    "TDRC": "Year",
    "COMM": "Comment",
    "TRCK": "TrackNumber",
    "TCON": "Genre",
}

# Bulk payloads are discarded in blocks of this size
SKIP_BLOCK_SIZE = 64 * 1024

# INFO strings longer than this are cut; the rest of the payload is discarded
MAX_INFO_TEXT_SIZE = 64 * 1024

ENCODING = "utf-8"
FALLBACK_ENCODING = "latin-1"
