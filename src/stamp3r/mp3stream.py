import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator, List

from .errors import FileReadError, FileWriteError, Mp3MemoryError, NotAnMp3FileError
from .frames import count_frames, iter_frames
from .header import FrameHeader, parse_header
from .sync import find_first_frame

logger = logging.getLogger(__name__)


def read_mp3_bytes(path) -> bytes:
    try:
        data = Path(path).read_bytes()
    except MemoryError as e:
        raise Mp3MemoryError() from e
    except OSError as e:
        raise FileReadError(f"Can't read MP3 file: {path}") from e
    logger.debug("loaded %s (%d bytes)", path, len(data))
    return data


class MP3Stream:
    """An MP3 file held in memory, synchronized on its first frame.

    ``data`` is the only copy of the header bytes; embedding rewrites it in
    place and ``export`` persists it.
    """

    def __init__(self, data: bytes, name: str = None):
        self.data = bytearray(data)
        self.name = name
        self.first_frame = find_first_frame(self.data)
        if self.first_frame is None:
            raise NotAnMp3FileError()
        self.private_bits = count_frames(self.data, self.first_frame)

    @classmethod
    def load(cls, path) -> "MP3Stream":
        return cls(read_mp3_bytes(path), name=Path(path).name)

    def export(self, path) -> None:
        """Write the buffer to ``path``; the target is either fully replaced or left alone."""
        target = Path(path)
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(dir=target.parent, prefix=f".{target.name}.",
                                             delete=False) as tmp:
                tmp_name = tmp.name
                tmp.write(self.data)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise FileWriteError(f"Can't write to MP3 file: {path}") from e
        logger.debug("exported %d bytes to %s", len(self.data), path)

    @property
    def capacity_bytes(self) -> int:
        return self.private_bits // 8

    def frames(self) -> Iterator[int]:
        return iter_frames(self.data, self.first_frame)

    def headers(self) -> List[FrameHeader]:
        return [parse_header(self.data, p) for p in self.frames()]

    def embed(self, payload: bytes, length_prefixed: bool = False) -> None:
        from .embed import embed_private_data, frame_payload
        embed_private_data(self.data, frame_payload(payload, length_prefixed),
                           first=self.first_frame, capacity=self.private_bits)

    def extract(self) -> bytes:
        from .extract import extract_private_data
        return extract_private_data(self.data, first=self.first_frame)

    def payload(self, length_prefixed: bool = False) -> bytes:
        from .extract import extract_payload
        return extract_payload(self.data, length_prefixed=length_prefixed, first=self.first_frame)

    def to_bytes(self) -> bytes:
        return bytes(self.data)
