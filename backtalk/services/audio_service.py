"""Service that wires decoding, reversal, encoding and scoring together."""

import logging
from typing import Optional

from ..audio.decoder import AudioDecoder
from ..audio.normalizer import normalize_peak
from ..audio.reverser import reverse
from ..audio.wav_encoder import encode_blob
from ..config import BacktalkConfig
from ..models.audio import EncodedAudioBlob, SampleBuffer
from ..models.errors import DecodeError
from ..models.scoring import SimilarityBreakdown
from ..scoring.grading import is_passing
from ..scoring.similarity import similarity_breakdown

logger = logging.getLogger(__name__)


class AudioService:
    """Reverses recordings and scores imitations of them."""

    def __init__(self, config: Optional[BacktalkConfig] = None, decoder: Optional[AudioDecoder] = None):
        """Initialize audio service.

        Args:
            config: Application configuration (defaults if None)
            decoder: Decoder to use (WAV-only default if None)
        """
        self.config = config or BacktalkConfig()
        self.decoder = decoder or AudioDecoder()

        self.normalize = bool(self.config.get('processing.normalize', False))
        self.target_peak = self.config.get_target_peak()
        self.pass_threshold = self.config.get_pass_threshold()

        logger.info(f"AudioService initialized: normalize={self.normalize}, "
                    f"target_peak={self.target_peak}, pass_threshold={self.pass_threshold}")

    def _decode(self, blob: EncodedAudioBlob, label: str) -> SampleBuffer:
        logger.info(f"Decoding {label}: {blob.size} bytes, type {blob.mime_type}")
        buffer = self.decoder.decode(blob)
        logger.info(f"{label.capitalize()} decoded: {buffer.channel_count} channel(s), "
                    f"{buffer.frame_count} frames, {buffer.sample_rate}Hz, "
                    f"{buffer.duration_seconds:.2f}s")
        return buffer

    def reverse_blob(self, blob: EncodedAudioBlob) -> EncodedAudioBlob:
        """Decode a recording and return it reversed as a WAV blob.

        Raises:
            DecodeError: If the recording cannot be decoded
        """
        buffer = self._decode(blob, "recording")

        if self.normalize:
            buffer = normalize_peak(buffer, self.target_peak)

        reversed_blob = encode_blob(reverse(buffer))
        logger.info(f"Reversed recording encoded: {reversed_blob.size} bytes")
        return reversed_blob

    def compare(self, original: EncodedAudioBlob, imitation: EncodedAudioBlob) -> SimilarityBreakdown:
        """Decode both recordings and score the imitation against the original.

        Raises:
            DecodeError: If either recording cannot be decoded
        """
        original_buffer = self._decode(original, "original")
        imitation_buffer = self._decode(imitation, "imitation")

        breakdown = similarity_breakdown(original_buffer, imitation_buffer)
        logger.info(f"Similarity score: {breakdown.score} "
                    f"(duration={breakdown.duration:.3f}, amplitude={breakdown.amplitude:.3f}, "
                    f"pattern={breakdown.pattern:.3f})")
        return breakdown

    def score_blobs(self, original: EncodedAudioBlob, imitation: EncodedAudioBlob) -> int:
        """Like compare() but returns 0 instead of raising when decoding fails."""
        try:
            return self.compare(original, imitation).score
        except DecodeError as e:
            logger.error(f"Error calculating similarity ({e.reason.value}): {e}")
            return 0

    def is_level_complete(self, score: int) -> bool:
        return is_passing(score, self.pass_threshold)
