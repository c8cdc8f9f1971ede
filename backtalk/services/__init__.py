"""Services for the Backtalk application."""

from .audio_service import AudioService

__all__ = [
    "AudioService",
]
