"""Time reversal of sample buffers."""

import logging

from ..models.audio import SampleBuffer

logger = logging.getLogger(__name__)


def reverse(buffer: SampleBuffer) -> SampleBuffer:
    """Return a new buffer with every channel played backwards."""
    logger.debug(f"Reversing {buffer.channel_count} channel(s), {buffer.frame_count} frames")
    return SampleBuffer(buffer.channels[:, ::-1], buffer.sample_rate)
