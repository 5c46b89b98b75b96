import logging
from typing import Iterator, Optional

from .header import (FrameHeader, parse_header, HEADER_LEN,
                     LAYER_I, LAYER_II, LAYER_III, VERSION_2, VERSION_25)
from .rates import header_bitrate, header_sample_rate

logger = logging.getLogger(__name__)


def frame_length(h: FrameHeader) -> Optional[int]:
    """Frame size in bytes, or None when the header does not define one.

    Free-format (bitrate index 0) frames are rejected along with invalid
    rates, since their length cannot be derived from the header.
    """
    rate = header_bitrate(h)
    freq = header_sample_rate(h)
    if rate <= 0 or freq <= 0:
        return None
    if h.layer == LAYER_I:
        length = (12 * rate // freq + h.padding) * 4
    elif h.layer == LAYER_III and h.version in (VERSION_2, VERSION_25):
        length = 72 * rate // freq + h.padding
    elif h.layer in (LAYER_II, LAYER_III):
        length = 144 * rate // freq + h.padding
    else:
        return None
    return length if length > 0 else None


def next_frame(data, offset: int) -> Optional[int]:
    """Offset of the frame following the one at ``offset``, or None.

    The returned offset always leaves room for a complete header inside
    ``data``.
    """
    h = parse_header(data, offset)
    if h is None or h.is_reserved:
        return None
    length = frame_length(h)
    if length is None:
        return None
    nxt = offset + length
    if nxt + HEADER_LEN > len(data):
        return None
    return nxt


def iter_frames(data, first: Optional[int]) -> Iterator[int]:
    """Yield every frame offset of the chain that starts at ``first``."""
    p = first
    while p is not None and p + HEADER_LEN <= len(data):
        if parse_header(data, p) is None:
            break
        yield p
        p = next_frame(data, p)


def count_frames(data, first: Optional[int]) -> int:
    n = sum(1 for _ in iter_frames(data, first))
    logger.debug("frame chain from %s: %d frames", first, n)
    return n
