import logging
import struct

from .bitops import iter_bits
from .errors import InsufficientRoomError, InvalidDataError, NotAnMp3FileError
from .frames import count_frames, iter_frames
from .header import set_private_bit
from .mp3stream import MP3Stream
from .sync import find_first_frame

logger = logging.getLogger(__name__)

LENGTH_PREFIX_FMT = ">I"


def frame_payload(payload: bytes, length_prefixed: bool) -> bytes:
    if length_prefixed:
        return struct.pack(LENGTH_PREFIX_FMT, len(payload)) + bytes(payload)
    return bytes(payload)


def embed_private_data(data: bytearray, payload: bytes, first: int = None, capacity: int = None) -> None:
    """Write ``payload`` into the private bits of consecutive frames, in place.

    One bit per frame, MSB first. Private bits of frames left over after the
    payload are cleared. Nothing is written if the payload does not fit.
    """
    if first is None:
        first = find_first_frame(data)
        if first is None:
            raise NotAnMp3FileError()
    if capacity is None:
        capacity = count_frames(data, first)
    required = len(payload) * 8
    if required > capacity:
        raise InsufficientRoomError(required_bits=required, capacity_bits=capacity)

    frames = iter_frames(data, first)
    written = 0
    for bit in iter_bits(payload):
        p = next(frames, None)
        if p is None:
            raise InvalidDataError(f"Frame chain ended after {written} of {required} bits")
        set_private_bit(data, p, bit)
        written += 1
    cleared = 0
    for p in frames:
        set_private_bit(data, p, 0)
        cleared += 1
    logger.debug("embedded %d bits, cleared %d trailing private bits", written, cleared)


def embed_bytes(cover_mp3: bytes, payload: bytes, length_prefixed: bool = False) -> bytes:
    out = bytearray(cover_mp3)
    embed_private_data(out, frame_payload(payload, length_prefixed))
    return bytes(out)


def embed_file(cover_path: str, out_path: str, payload: bytes, length_prefixed: bool = False) -> MP3Stream:
    stream = MP3Stream.load(cover_path)
    stream.embed(payload, length_prefixed=length_prefixed)
    stream.export(out_path)
    return stream
