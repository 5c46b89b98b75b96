"""Synthetic MPEG audio frames for tests."""

VERSION_1, VERSION_2, VERSION_25 = 3, 2, 0
LAYER_III, LAYER_II, LAYER_I = 1, 2, 3


def make_header(version=VERSION_1, layer=LAYER_III, protection=1, bitrate_index=9,
                sample_rate_index=0, padding=0, private=0, mode=0, mode_extension=0,
                copyright=0, original=0, emphasis=0) -> bytes:
    b1 = 0xE0 | (version << 3) | (layer << 1) | protection
    b2 = (bitrate_index << 4) | (sample_rate_index << 2) | (padding << 1) | private
    b3 = (mode << 6) | (mode_extension << 4) | (copyright << 3) | (original << 2) | emphasis
    return bytes([0xFF, b1, b2, b3])


def make_frame(length=417, **kw) -> bytes:
    """One frame: header followed by zero bytes up to ``length``.

    The default header is MPEG-1 Layer III, 128 kbps, 44100 Hz, which is
    417 bytes long without padding.
    """
    return make_header(**kw) + bytes(length - 4)


def make_stream(n=50, length=417, **kw) -> bytes:
    return make_frame(length, **kw) * n


def private_bits(data, first=0, n=50, length=417):
    return [data[first + i * length + 2] & 1 for i in range(n)]
