import logging
from typing import Optional

from .header import parse_header, HEADER_LEN
from .frames import next_frame

logger = logging.getLogger(__name__)

ID3V1_LEN = 128
ID3V1_EXT_LEN = 227
ID3V2_HEADER_LEN = 10


def synchsafe(b) -> int:
    return ((b[0] & 0x7F) << 21) | ((b[1] & 0x7F) << 14) | ((b[2] & 0x7F) << 7) | (b[3] & 0x7F)


def skip_tags(data) -> int:
    """Offset just past any metadata tag at the start of ``data``."""
    n = len(data)
    if n > ID3V1_LEN and data[:3] == b"TAG":
        if (n > ID3V1_LEN + ID3V1_EXT_LEN and data[3] == ord("+")
                and data[ID3V1_EXT_LEN:ID3V1_EXT_LEN + 3] == b"TAG"):
            logger.debug("skipping extended ID3v1 tag")
            return ID3V1_LEN + ID3V1_EXT_LEN
        logger.debug("skipping ID3v1 tag")
        return ID3V1_LEN
    if n > 13 and data[:3] == b"ID3" and all(b < 128 for b in data[6:10]):
        size = synchsafe(data[6:10])
        logger.debug("skipping ID3v2 tag of %d bytes", size)
        return ID3V2_HEADER_LEN + size
    return 0


def find_first_frame(data) -> Optional[int]:
    """First offset holding a frame header that the frame walker can step past.

    A sync match only counts once next_frame() also accepts the header.
    """
    p = skip_tags(data)
    end = len(data) - HEADER_LEN
    while p < end:
        if parse_header(data, p) is not None and next_frame(data, p) is not None:
            logger.debug("first frame at offset %d", p)
            return p
        p += 1
    logger.debug("no frame sync found")
    return None
