"""Decoding of encoded audio blobs into normalized sample buffers."""

import io
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np
from scipy.io import wavfile

from ..models.audio import EncodedAudioBlob, SampleBuffer
from ..models.errors import (
    DecodeError,
    EmptyAudioError,
    UnsupportedFormatError,
    CorruptAudioError,
)

logger = logging.getLogger(__name__)


class DecoderBackend(ABC):
    """Abstract base class for container/codec decoders."""

    @abstractmethod
    def supports(self, mime_type: str) -> bool:
        """Return True if this backend can decode the given base MIME type."""
        pass

    @abstractmethod
    def decode(self, data: bytes) -> SampleBuffer:
        """Decode raw container bytes.

        Args:
            data: Encoded audio bytes

        Returns:
            SampleBuffer with float samples in [-1.0, 1.0]
        """
        pass


class WavDecoderBackend(DecoderBackend):
    """RIFF/WAVE decoder built on scipy.io.wavfile."""

    MIME_TYPES = frozenset({"audio/wav", "audio/wave", "audio/x-wav", "audio/vnd.wave"})

    # scipy ValueError messages for well-formed files in an unreadable codec
    UNSUPPORTED_CODEC_MESSAGES = ("Unknown wave file format", "Unsupported bit depth")

    def supports(self, mime_type: str) -> bool:
        return mime_type in self.MIME_TYPES

    def decode(self, data: bytes) -> SampleBuffer:
        try:
            sample_rate, samples = wavfile.read(io.BytesIO(data))
        except ValueError as e:
            if str(e).startswith(self.UNSUPPORTED_CODEC_MESSAGES):
                raise UnsupportedFormatError(f"Unsupported WAV codec: {e}") from e
            raise
        samples = self._to_float(samples)

        # scipy returns (frames,) for mono and (frames, channels) otherwise
        if samples.ndim == 1:
            samples = samples[np.newaxis, :]
        else:
            samples = samples.T

        return SampleBuffer(samples, sample_rate)

    @staticmethod
    def _to_float(samples: np.ndarray) -> np.ndarray:
        """Scale integer PCM to float32 in [-1.0, 1.0]."""
        if samples.dtype == np.uint8:
            return (samples.astype(np.float32) - 128.0) / 128.0
        if np.issubdtype(samples.dtype, np.signedinteger):
            full_scale = float(np.iinfo(samples.dtype).max) + 1.0
            return (samples.astype(np.float64) / full_scale).astype(np.float32)
        return samples.astype(np.float32)


class AudioDecoder:
    """Validates decoded audio, delegating container parsing to backends."""

    def __init__(self, backends: Optional[Sequence[DecoderBackend]] = None):
        """Initialize decoder.

        Args:
            backends: Backends to try in order. Defaults to WAV only.
        """
        self.backends: List[DecoderBackend] = list(backends) if backends is not None else [WavDecoderBackend()]

    def _backend_for(self, mime_type: str) -> Optional[DecoderBackend]:
        for backend in self.backends:
            if backend.supports(mime_type):
                return backend
        return None

    def decode(self, blob: EncodedAudioBlob) -> SampleBuffer:
        """Decode a blob into a SampleBuffer.

        Raises:
            UnsupportedFormatError: No backend accepts the blob's MIME type or codec
            CorruptAudioError: The backend failed on the data
            EmptyAudioError: The decoded audio has no frames
        """
        mime_type = blob.base_mime_type
        logger.debug(f"Decoding blob: {blob.size} bytes, type {blob.mime_type}")

        backend = self._backend_for(mime_type)
        if backend is None:
            raise UnsupportedFormatError(f"No decoder available for {blob.mime_type!r}", mime_type=blob.mime_type)

        try:
            buffer = backend.decode(blob.data)
        except DecodeError as e:
            if e.mime_type is None:
                e.mime_type = blob.mime_type
            raise
        except Exception as e:
            raise CorruptAudioError(f"Failed to decode {blob.mime_type} audio: {e}",
                                    mime_type=blob.mime_type) from e

        if buffer.frame_count == 0:
            raise EmptyAudioError("Decoded audio contains no frames", mime_type=blob.mime_type)

        logger.debug(f"Decoded {buffer.channel_count} channel(s), {buffer.frame_count} frames "
                     f"at {buffer.sample_rate}Hz ({buffer.duration_seconds:.3f}s)")
        return buffer


_default_decoder = AudioDecoder()


def decode(blob: EncodedAudioBlob) -> SampleBuffer:
    """Decode a blob with the default (WAV) decoder."""
    return _default_decoder.decode(blob)
