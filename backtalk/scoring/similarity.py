"""Similarity scoring between an original clip and an imitation.

The score is an engineered heuristic, not a psychoacoustic model. It
compares the first channel of each buffer using three sub-metrics:

* duration: ratio of the shorter length to the longer one
* amplitude: ratio of the RMS levels over the overlapping samples
* pattern: Pearson correlation of per-segment RMS energy over the overlap

and combines them as ``0.3 * duration + 0.4 * amplitude + 0.3 * pattern``.
"""

import logging
import math
from typing import List

import numpy as np

from ..models.audio import SampleBuffer
from ..models.scoring import SimilarityBreakdown

logger = logging.getLogger(__name__)

DURATION_WEIGHT = 0.3
AMPLITUDE_WEIGHT = 0.4
PATTERN_WEIGHT = 0.3

MIN_SEGMENT_SIZE = 1024
TARGET_SEGMENTS = 20


def _signal(buffer: SampleBuffer) -> np.ndarray:
    """Channel 0 as float64, with non-finite samples treated as silence."""
    samples = buffer.channel(0).astype(np.float64)
    samples[~np.isfinite(samples)] = 0.0
    return samples


def rms(signal: np.ndarray) -> float:
    """Root-mean-square level of a signal; 0.0 for an empty one."""
    if len(signal) == 0:
        return 0.0
    return math.sqrt(float(np.dot(signal, signal)) / len(signal))


def duration_similarity(original: np.ndarray, imitation: np.ndarray) -> float:
    original_length = len(original)
    imitation_length = len(imitation)
    if original_length == 0 or imitation_length == 0:
        return 0.0
    return min(original_length, imitation_length) / max(original_length, imitation_length)


def amplitude_similarity(original: np.ndarray, imitation: np.ndarray) -> float:
    min_length = min(len(original), len(imitation))
    if min_length == 0:
        return 0.0

    original_rms = rms(original[:min_length])
    imitation_rms = rms(imitation[:min_length])

    if original_rms == 0 and imitation_rms == 0:
        return 1.0
    if original_rms == 0 or imitation_rms == 0:
        return 0.0
    return min(original_rms, imitation_rms) / max(original_rms, imitation_rms)


def segment_size(min_length: int) -> int:
    """At least TARGET_SEGMENTS segments, none shorter than MIN_SEGMENT_SIZE (except the last)."""
    return max(MIN_SEGMENT_SIZE, min_length // TARGET_SEGMENTS)


def segment_energies(signal: np.ndarray, size: int) -> List[float]:
    """RMS of consecutive segments; the last one may be shorter."""
    return [rms(signal[start:start + size]) for start in range(0, len(signal), size)]


def correlation(a: List[float], b: List[float]) -> float:
    """Pearson correlation coefficient; 0.0 when either sequence is constant."""
    length = min(len(a), len(b))
    if length == 0:
        return 0.0

    x = np.asarray(a[:length], dtype=np.float64)
    y = np.asarray(b[:length], dtype=np.float64)
    dx = x - x.mean()
    dy = y - y.mean()

    sum_sq_x = float(np.dot(dx, dx))
    sum_sq_y = float(np.dot(dy, dy))
    if sum_sq_x == 0 or sum_sq_y == 0:
        return 0.0
    return float(np.dot(dx, dy)) / math.sqrt(sum_sq_x * sum_sq_y)


def pattern_similarity(original: np.ndarray, imitation: np.ndarray) -> float:
    min_length = min(len(original), len(imitation))
    if min_length == 0:
        return 0.0

    size = segment_size(min_length)
    original_energies = segment_energies(original[:min_length], size)
    imitation_energies = segment_energies(imitation[:min_length], size)
    return correlation(original_energies, imitation_energies)


def similarity_breakdown(original: SampleBuffer, imitation: SampleBuffer) -> SimilarityBreakdown:
    """Compute all sub-scores and the final 0-100 score."""
    original_signal = _signal(original)
    imitation_signal = _signal(imitation)

    duration = duration_similarity(original_signal, imitation_signal)
    if duration == 0:
        logger.debug("Empty signal, similarity is 0")
        return SimilarityBreakdown(duration=0.0, amplitude=0.0, pattern=0.0, score=0)

    amplitude = amplitude_similarity(original_signal, imitation_signal)
    pattern = pattern_similarity(original_signal, imitation_signal)

    overall = (duration * DURATION_WEIGHT
               + amplitude * AMPLITUDE_WEIGHT
               + pattern * PATTERN_WEIGHT)
    # Round half up
    final_score = max(0, min(100, math.floor(overall * 100 + 0.5)))

    logger.debug(f"Similarity: duration={duration:.4f} amplitude={amplitude:.4f} "
                 f"pattern={pattern:.4f} -> {final_score}")
    return SimilarityBreakdown(duration=duration, amplitude=amplitude, pattern=pattern, score=final_score)


def score(original: SampleBuffer, imitation: SampleBuffer) -> int:
    """Similarity of imitation to original as an integer from 0 to 100."""
    return similarity_breakdown(original, imitation).score
