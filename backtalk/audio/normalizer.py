"""Peak normalization of sample buffers."""

import logging

import numpy as np

from ..models.audio import SampleBuffer

logger = logging.getLogger(__name__)

DEFAULT_TARGET_PEAK = 0.95


def normalize_peak(buffer: SampleBuffer, target_peak: float = DEFAULT_TARGET_PEAK) -> SampleBuffer:
    """Scale every channel so the loudest sample reaches target_peak.

    Silent and empty buffers are returned unchanged.
    """
    if buffer.frame_count == 0:
        return buffer

    peak = float(np.max(np.abs(buffer.channels)))
    if peak == 0.0 or not np.isfinite(peak):
        logger.debug(f"Skipping normalization, peak={peak}")
        return buffer

    factor = target_peak / peak
    logger.debug(f"Normalizing: peak {peak:.4f} -> {target_peak} (x{factor:.4f})")
    return SampleBuffer(buffer.channels.astype(np.float64) * factor, buffer.sample_rate)
