"""Unit tests for audio reversal and peak normalization."""

import pytest
import numpy as np

from backtalk.audio.normalizer import normalize_peak
from backtalk.audio.reverser import reverse
from backtalk.models.audio import SampleBuffer


@pytest.mark.unit
class TestReverse:
    """Test cases for reverse()."""

    def test_reverses_each_channel(self):
        """Test sample order is flipped per channel."""
        buffer = SampleBuffer.from_channels([[0.1, 0.2, 0.3, 0.4], [1.0, 0.0, -1.0, -0.5]], 16000)

        result = reverse(buffer)

        np.testing.assert_array_equal(result.channel(0), np.float32([0.4, 0.3, 0.2, 0.1]))
        np.testing.assert_array_equal(result.channel(1), np.float32([-0.5, -1.0, 0.0, 1.0]))

    def test_preserves_shape(self, audio_test_data):
        """Test channel count, rate and length are unchanged."""
        buffer = audio_test_data("noise", duration_seconds=0.25, sample_rate=22050, channels=2)

        result = reverse(buffer)

        assert result.channel_count == buffer.channel_count
        assert result.sample_rate == buffer.sample_rate
        assert result.frame_count == buffer.frame_count

    def test_involution(self, audio_test_data):
        """Test reversing twice gives back the exact input."""
        buffer = audio_test_data("noise", duration_seconds=0.1, channels=3)

        assert reverse(reverse(buffer)) == buffer

    def test_involution_with_nan_and_out_of_range(self):
        """Test odd sample values survive a double reverse bit for bit."""
        buffer = SampleBuffer.from_channels([[np.nan, 3.5, -np.inf, 0.25]], 8000)

        assert reverse(reverse(buffer)) == buffer

    def test_empty_buffer(self):
        """Test zero-length buffers reverse to zero-length buffers."""
        buffer = SampleBuffer.empty(sample_rate=48000, channel_count=2)

        result = reverse(buffer)

        assert result.frame_count == 0
        assert result.channel_count == 2
        assert result.sample_rate == 48000

    def test_returns_new_buffer(self):
        """Test the input buffer is left untouched."""
        buffer = SampleBuffer.from_channels([[0.1, 0.2, 0.3]], 8000)

        result = reverse(buffer)

        assert result is not buffer
        np.testing.assert_array_equal(buffer.channel(0), np.float32([0.1, 0.2, 0.3]))


@pytest.mark.unit
class TestNormalizePeak:
    """Test cases for normalize_peak()."""

    def test_scales_to_target(self):
        """Test the loudest sample across channels reaches the target."""
        buffer = SampleBuffer.from_channels([[0.1, -0.2], [0.4, 0.0]], 44100)

        result = normalize_peak(buffer)

        assert np.max(np.abs(result.channels)) == pytest.approx(0.95, abs=1e-6)
        assert result.channels[0, 1] == pytest.approx(-0.475, abs=1e-6)

    def test_custom_target(self):
        buffer = SampleBuffer.from_channels([[0.5, -0.25]], 44100)

        result = normalize_peak(buffer, target_peak=1.0)

        np.testing.assert_allclose(result.channel(0), [1.0, -0.5], atol=1e-6)

    def test_silence_unchanged(self, audio_test_data):
        """Test silent audio is returned as is."""
        buffer = audio_test_data("silence", duration_seconds=0.1)

        assert normalize_peak(buffer) is buffer

    def test_empty_unchanged(self):
        buffer = SampleBuffer.empty()

        assert normalize_peak(buffer) is buffer
