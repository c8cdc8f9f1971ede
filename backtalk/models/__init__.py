"""Data models for the Backtalk package."""

from .audio import SampleBuffer, EncodedAudioBlob
from .scoring import SimilarityBreakdown, ScoreGrade
from .errors import (
    DecodeFailure,
    DecodeError,
    EmptyAudioError,
    UnsupportedFormatError,
    CorruptAudioError,
)

__all__ = [
    "SampleBuffer",
    "EncodedAudioBlob",
    "SimilarityBreakdown",
    "ScoreGrade",
    # Decode errors
    "DecodeFailure",
    "DecodeError",
    "EmptyAudioError",
    "UnsupportedFormatError",
    "CorruptAudioError",
]
