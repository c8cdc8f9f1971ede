"""Canonical 16-bit PCM WAV encoding of sample buffers."""

import io
import logging
import wave

import numpy as np

from ..models.audio import EncodedAudioBlob, SampleBuffer

logger = logging.getLogger(__name__)

BYTES_PER_SAMPLE = 2  # 16-bit PCM
WAV_MIME_TYPE = "audio/wav"


def quantize(channels: np.ndarray) -> np.ndarray:
    """Convert float samples to int16 with asymmetric scaling.

    NaN becomes 0 and everything is clamped to [-1.0, 1.0] first. Negative
    samples scale by 32768 and the rest by 32767 so both ends of the int16
    range are reachable.
    """
    samples = np.nan_to_num(np.asarray(channels, dtype=np.float64), nan=0.0)
    samples = np.clip(samples, -1.0, 1.0)
    scaled = np.where(samples < 0, samples * 32768.0, samples * 32767.0)
    # Round half up
    return np.floor(scaled + 0.5).astype(np.int16)


def encode(buffer: SampleBuffer) -> bytes:
    """Serialize a buffer as a 44-byte-header PCM WAV file.

    Args:
        buffer: Audio to encode

    Returns:
        WAV bytes, always ``44 + frame_count * channel_count * 2`` long
    """
    # (channel, frame) -> (frame, channel) gives frame-major interleaving
    interleaved = np.ascontiguousarray(quantize(buffer.channels).T)

    output = io.BytesIO()
    with wave.open(output, 'wb') as wf:
        wf.setnchannels(buffer.channel_count)
        wf.setsampwidth(BYTES_PER_SAMPLE)
        wf.setframerate(buffer.sample_rate)
        wf.writeframes(interleaved.tobytes())

    wav_bytes = output.getvalue()
    logger.debug(f"WAV encoded: {buffer.channel_count} channel(s), {buffer.sample_rate}Hz, "
                 f"{buffer.frame_count} frames, {len(wav_bytes)} bytes")
    return wav_bytes


def encode_blob(buffer: SampleBuffer) -> EncodedAudioBlob:
    """Encode a buffer and tag the result as audio/wav."""
    return EncodedAudioBlob(data=encode(buffer), mime_type=WAV_MIME_TYPE)
