"""Audio-related data models."""

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True, eq=False)
class SampleBuffer:
    """Decoded multi-channel float audio.

    Samples are stored per channel (not interleaved) as a read-only float32
    array of shape ``(channel_count, frame_count)``.
    """
    channels: np.ndarray
    sample_rate: int

    def __post_init__(self):
        data = np.array(self.channels, dtype=np.float32, copy=True)
        if data.ndim != 2:
            raise ValueError(f"channels must be 2-D (channel, frame), got {data.ndim}-D")
        if data.shape[0] < 1:
            raise ValueError("SampleBuffer needs at least one channel")
        if int(self.sample_rate) <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        data.flags.writeable = False
        object.__setattr__(self, "channels", data)
        object.__setattr__(self, "sample_rate", int(self.sample_rate))

    @classmethod
    def from_channels(cls, channels: Iterable[Sequence[float]], sample_rate: int) -> "SampleBuffer":
        """Build a buffer from one sequence of samples per channel."""
        rows = [np.asarray(channel, dtype=np.float32) for channel in channels]
        if not rows:
            raise ValueError("SampleBuffer needs at least one channel")
        lengths = {len(row) for row in rows}
        if len(lengths) != 1:
            raise ValueError(f"All channels must have the same length, got {sorted(lengths)}")
        return cls(np.stack(rows), sample_rate)

    @classmethod
    def empty(cls, sample_rate: int = 44100, channel_count: int = 1) -> "SampleBuffer":
        return cls(np.zeros((channel_count, 0), dtype=np.float32), sample_rate)

    @property
    def channel_count(self) -> int:
        return self.channels.shape[0]

    @property
    def frame_count(self) -> int:
        return self.channels.shape[1]

    @property
    def duration_seconds(self) -> float:
        return self.frame_count / self.sample_rate

    def channel(self, index: int) -> np.ndarray:
        """Read-only view of one channel's samples."""
        return self.channels[index]

    def __eq__(self, other):
        if not isinstance(other, SampleBuffer):
            return NotImplemented
        return (self.sample_rate == other.sample_rate
                and self.channels.shape == other.channels.shape
                and self.channels.tobytes() == other.channels.tobytes())

    __hash__ = None

    def __repr__(self) -> str:
        return (f"SampleBuffer(channel_count={self.channel_count}, "
                f"sample_rate={self.sample_rate}, frame_count={self.frame_count})")


@dataclass(frozen=True)
class EncodedAudioBlob:
    """Opaque encoded audio bytes tagged with a MIME type."""
    data: bytes
    mime_type: str = "audio/wav"

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def base_mime_type(self) -> str:
        """MIME type without parameters, e.g. ``audio/webm`` for ``audio/webm;codecs=opus``."""
        return self.mime_type.split(";", 1)[0].strip().lower()
