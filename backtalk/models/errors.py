"""Error types raised while decoding audio."""

from enum import Enum
from typing import Optional


class DecodeFailure(Enum):
    """Why a blob could not be turned into a SampleBuffer."""
    EMPTY = "empty"
    UNSUPPORTED = "unsupported"
    CORRUPT = "corrupt"


class DecodeError(Exception):
    """Base class for decode failures."""

    reason: DecodeFailure = DecodeFailure.CORRUPT

    def __init__(self, message: str, mime_type: Optional[str] = None):
        super().__init__(message)
        self.mime_type = mime_type


class EmptyAudioError(DecodeError):
    """Decoding succeeded but produced zero frames."""
    reason = DecodeFailure.EMPTY


class UnsupportedFormatError(DecodeError):
    """No decoder backend accepts the container/codec."""
    reason = DecodeFailure.UNSUPPORTED


class CorruptAudioError(DecodeError):
    """The decoder backend failed on the data."""
    reason = DecodeFailure.CORRUPT
