import logging
import struct

from .bitops import pack_bits_to_bytes
from .embed import LENGTH_PREFIX_FMT
from .errors import InvalidDataError, NotAnMp3FileError
from .frames import iter_frames
from .header import private_bit
from .mp3stream import MP3Stream
from .sync import find_first_frame

logger = logging.getLogger(__name__)

TERMINATOR = b"\x00"


def extract_private_data(data, first: int = None) -> bytes:
    """Private bits of the whole frame chain packed MSB first, plus a 0x00 terminator.

    A trailing group of fewer than 8 bits is dropped.
    """
    if first is None:
        first = find_first_frame(data)
        if first is None:
            raise NotAnMp3FileError()
    raw = pack_bits_to_bytes(private_bit(data, p) for p in iter_frames(data, first))
    logger.debug("read %d bytes of private data", len(raw))
    return raw + TERMINATOR


def hidden_text(raw: bytes) -> bytes:
    """Bytes before the first zero byte.

    This is how the hidden data reads as a string: a payload with an
    embedded zero byte comes back truncated. Use length-prefixed framing to
    carry arbitrary bytes.
    """
    end = raw.find(TERMINATOR)
    return bytes(raw if end < 0 else raw[:end])


def extract_payload(data, length_prefixed: bool = False, first: int = None) -> bytes:
    raw = extract_private_data(data, first=first)
    if not length_prefixed:
        return hidden_text(raw)
    body = raw[:-len(TERMINATOR)]
    prefix_len = struct.calcsize(LENGTH_PREFIX_FMT)
    if len(body) < prefix_len:
        raise InvalidDataError("Not enough private bits to hold a length prefix")
    (n,) = struct.unpack_from(LENGTH_PREFIX_FMT, body, 0)
    if prefix_len + n > len(body):
        raise InvalidDataError(f"Declared payload of {n} bytes exceeds the {len(body) - prefix_len} available")
    return body[prefix_len:prefix_len + n]


def extract_file(path: str, length_prefixed: bool = False) -> bytes:
    return MP3Stream.load(path).payload(length_prefixed=length_prefixed)
