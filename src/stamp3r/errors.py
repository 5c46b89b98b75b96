"""
Error kinds for MP3 private-bit operations.

Every exception carries the numeric code the command-line tool exits with.
"""
from enum import IntEnum


class Mp3ErrorCode(IntEnum):
    SUCCESS = 0
    FILE_READ_ERROR = 1
    FILE_WRITE_ERROR = 2
    MEMORY_ERROR = 3
    NOT_AN_MP3_FILE = 4
    NOT_ENOUGH_ROOM = 5
    INVALID_DATA = 6
    NO_INPUT_FILE = 7
    CONFIG_ERROR = 8
    ENCODING_ERROR = 9


ERROR_MESSAGES = {
    Mp3ErrorCode.SUCCESS: "No error",
    Mp3ErrorCode.FILE_READ_ERROR: "Can't read MP3 file",
    Mp3ErrorCode.FILE_WRITE_ERROR: "Can't write to MP3 file",
    Mp3ErrorCode.MEMORY_ERROR: "Out of memory",
    Mp3ErrorCode.NOT_AN_MP3_FILE: "Not an MP3 file",
    Mp3ErrorCode.NOT_ENOUGH_ROOM: "Insufficient space in file",
    Mp3ErrorCode.INVALID_DATA: "Invalid data in MP3 file",
    Mp3ErrorCode.NO_INPUT_FILE: "No input file specified",
    Mp3ErrorCode.CONFIG_ERROR: "Invalid configuration",
    Mp3ErrorCode.ENCODING_ERROR: "Can't encode the stego string",
}


class Mp3Error(Exception):
    """Base exception for all private-bit errors."""
    code = Mp3ErrorCode.SUCCESS

    def __init__(self, message: str = None):
        super().__init__(message or ERROR_MESSAGES[self.code])


class FileReadError(Mp3Error):
    code = Mp3ErrorCode.FILE_READ_ERROR


class FileWriteError(Mp3Error):
    code = Mp3ErrorCode.FILE_WRITE_ERROR


class Mp3MemoryError(Mp3Error):
    code = Mp3ErrorCode.MEMORY_ERROR


class NotAnMp3FileError(Mp3Error):
    code = Mp3ErrorCode.NOT_AN_MP3_FILE


class InsufficientRoomError(Mp3Error):
    """Raised before any write when the payload needs more bits than there are frames."""
    code = Mp3ErrorCode.NOT_ENOUGH_ROOM

    def __init__(self, message: str = None, required_bits: int = None, capacity_bits: int = None):
        if message is None and required_bits is not None:
            message = (f"{ERROR_MESSAGES[self.code]} "
                       f"(need {required_bits} bits, have {capacity_bits})")
        super().__init__(message)
        self.required_bits = required_bits
        self.capacity_bits = capacity_bits


CapacityError = InsufficientRoomError


class InvalidDataError(Mp3Error):
    code = Mp3ErrorCode.INVALID_DATA


class NoInputFileError(Mp3Error):
    code = Mp3ErrorCode.NO_INPUT_FILE


class ConfigError(Mp3Error, ValueError):
    code = Mp3ErrorCode.CONFIG_ERROR


class StringEncodingError(Mp3Error):
    code = Mp3ErrorCode.ENCODING_ERROR
