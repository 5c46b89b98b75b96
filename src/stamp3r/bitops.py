import numpy as np


def iter_bits(data: bytes):
    """Bits of ``data``, most significant bit of each byte first."""
    for bit in np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8)):
        yield int(bit)


def pack_bits_to_bytes(bits) -> bytes:
    """Pack MSB-first bits into whole bytes; a trailing partial byte is dropped."""
    arr = np.fromiter((b & 1 for b in bits), dtype=np.uint8)
    full = len(arr) - len(arr) % 8
    return np.packbits(arr[:full]).tobytes()
