from .header import (FrameHeader, VERSION_1, VERSION_2, VERSION_25,
                     LAYER_I, LAYER_II, LAYER_III)

FREE = 0
INVALID = -1

# [bitrate index][v1, v2/2.5][layer I, II, III], bits per second
BITRATES = [
    [[0, 0, 0], [0, 0, 0]],
    [[32000, 32000, 32000], [32000, 8000, 8000]],
    [[64000, 48000, 40000], [48000, 16000, 16000]],
    [[96000, 56000, 48000], [56000, 24000, 24000]],
    [[128000, 64000, 56000], [64000, 32000, 32000]],
    [[160000, 80000, 64000], [80000, 40000, 40000]],
    [[192000, 96000, 80000], [96000, 48000, 48000]],
    [[224000, 112000, 96000], [112000, 56000, 56000]],
    [[256000, 128000, 112000], [128000, 64000, 64000]],
    [[288000, 160000, 128000], [144000, 80000, 80000]],
    [[320000, 192000, 160000], [160000, 96000, 96000]],
    [[352000, 224000, 192000], [176000, 112000, 112000]],
    [[384000, 256000, 224000], [192000, 128000, 128000]],
    [[416000, 320000, 256000], [224000, 144000, 144000]],
    [[448000, 384000, 320000], [256000, 160000, 160000]],
    [[-1, -1, -1], [-1, -1, -1]],
]

# [sample rate index][v1, v2, v2.5], Hz; 2.5 is looked up in the v2 column
SAMPLE_RATES = [
    [44100, 22050, 11025],
    [48000, 24000, 12000],
    [32000, 16000, 8000],
    [-1, -1, -1],
]


def _version_class(version: int) -> int:
    if version == VERSION_25:
        version = VERSION_2
    if version == VERSION_1:
        return 0
    if version == VERSION_2:
        return 1
    return INVALID


def bitrate(version: int, layer: int, index: int) -> int:
    """Bits per second; FREE (0) for the free-format index, INVALID (-1) otherwise unusable."""
    vc = _version_class(version)
    if not 0 <= index <= 15 or vc == INVALID or layer not in (LAYER_I, LAYER_II, LAYER_III):
        return INVALID
    return BITRATES[index][vc][LAYER_I - layer]


def sample_rate(version: int, index: int) -> int:
    vc = _version_class(version)
    if not 0 <= index <= 3 or vc == INVALID:
        return INVALID
    return SAMPLE_RATES[index][vc]


def header_bitrate(h: FrameHeader) -> int:
    return bitrate(h.version, h.layer, h.bitrate_index)


def header_sample_rate(h: FrameHeader) -> int:
    return sample_rate(h.version, h.sample_rate_index)
