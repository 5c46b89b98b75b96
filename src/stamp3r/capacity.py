from .embed import frame_payload
from .frames import count_frames
from .mp3stream import read_mp3_bytes
from .sync import find_first_frame


def compute_capacity_bits(mp3_bytes: bytes) -> int:
    first = find_first_frame(mp3_bytes)
    if first is None:
        return 0
    return count_frames(mp3_bytes, first)


def compute_capacity_bits_for_file(path: str) -> int:
    """Raises FileReadError or Mp3MemoryError when the file can't be read."""
    return compute_capacity_bits(read_mp3_bytes(path))


def check_embed_feasibility(mp3_bytes: bytes, payload: bytes, length_prefixed: bool = False) -> dict:
    cap = compute_capacity_bits(mp3_bytes)
    need = len(frame_payload(payload, length_prefixed)) * 8
    return {"capacity_bits": cap, "required_bits": need, "margin_bits": cap - need, "fits": need <= cap}
