from dataclasses import dataclass
from typing import Optional

# 2-bit codes as they appear in the header
VERSION_25 = 0
VERSION_NONE = 1
VERSION_2 = 2
VERSION_1 = 3

LAYER_NONE = 0
LAYER_III = 1
LAYER_II = 2
LAYER_I = 3

MODE_STEREO = 0
MODE_JOINT_STEREO = 1
MODE_DUAL_CHANNEL = 2
MODE_MONO = 3

EMPHASIS_NONE = 0
EMPHASIS_50_15 = 1
EMPHASIS_RESERVED = 2
EMPHASIS_CCIT_J17 = 3

SAMPLE_RATE_RESERVED = 3

HEADER_LEN = 4
CRC_LEN = 2

VERSION_NAMES = {VERSION_25: "2.5", VERSION_NONE: "reserved", VERSION_2: "2", VERSION_1: "1"}
LAYER_NAMES = {LAYER_NONE: "reserved", LAYER_III: "III", LAYER_II: "II", LAYER_I: "I"}
MODE_NAMES = {MODE_STEREO: "stereo", MODE_JOINT_STEREO: "joint stereo",
              MODE_DUAL_CHANNEL: "dual channel", MODE_MONO: "mono"}
EMPHASIS_NAMES = {EMPHASIS_NONE: "none", EMPHASIS_50_15: "50/15 ms",
                  EMPHASIS_RESERVED: "reserved", EMPHASIS_CCIT_J17: "CCIT J.17"}


@dataclass(frozen=True)
class FrameHeader:
    version: int
    layer: int
    protection: int  # 0 = protected by CRC
    bitrate_index: int
    sample_rate_index: int
    padding: int
    private: int
    mode: int
    mode_extension: int
    copyright: int
    original: int
    emphasis: int
    crc: Optional[int] = None

    @property
    def is_protected(self) -> bool:
        return self.protection == 0

    @property
    def is_reserved(self) -> bool:
        return (self.version == VERSION_NONE or self.layer == LAYER_NONE
                or self.sample_rate_index == SAMPLE_RATE_RESERVED
                or self.emphasis == EMPHASIS_RESERVED)

    @property
    def version_name(self) -> str:
        return VERSION_NAMES[self.version]

    @property
    def layer_name(self) -> str:
        return LAYER_NAMES[self.layer]

    @property
    def mode_name(self) -> str:
        return MODE_NAMES[self.mode]

    @property
    def emphasis_name(self) -> str:
        return EMPHASIS_NAMES[self.emphasis]


def has_sync(data, offset: int = 0) -> bool:
    return (0 <= offset and offset + 1 < len(data)
            and data[offset] == 0xFF and (data[offset + 1] & 0xE0) == 0xE0)


def parse_header(data, offset: int = 0) -> Optional[FrameHeader]:
    """Unpack the 4-byte frame header at ``offset``.

    Returns None when fewer than 4 bytes remain or the frame sync bits are
    missing. Reserved field values are returned as-is; rejecting them is the
    frame walker's job.
    """
    if offset < 0 or offset + HEADER_LEN > len(data) or not has_sync(data, offset):
        return None
    b1, b2, b3 = data[offset + 1], data[offset + 2], data[offset + 3]
    protection = b1 & 0x01
    crc = None
    if protection == 0 and offset + HEADER_LEN + CRC_LEN <= len(data):
        crc = (data[offset + 4] << 8) | data[offset + 5]
    return FrameHeader(
        version=(b1 >> 3) & 0x03,
        layer=(b1 >> 1) & 0x03,
        protection=protection,
        bitrate_index=b2 >> 4,
        sample_rate_index=(b2 >> 2) & 0x03,
        padding=(b2 >> 1) & 0x01,
        private=b2 & 0x01,
        mode=b3 >> 6,
        mode_extension=(b3 >> 4) & 0x03,
        copyright=(b3 >> 3) & 0x01,
        original=(b3 >> 2) & 0x01,
        emphasis=b3 & 0x03,
        crc=crc,
    )


def private_bit(data, offset: int) -> int:
    return data[offset + 2] & 0x01


def set_private_bit(data: bytearray, offset: int, bit: int) -> None:
    if offset < 0 or offset + HEADER_LEN > len(data):
        raise IndexError(f"header at {offset} outside buffer of {len(data)} bytes")
    data[offset + 2] = (data[offset + 2] & 0xFE) | (bit & 1)
