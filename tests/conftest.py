"""Pytest configuration and fixtures for Backtalk tests."""

import pytest
import tempfile
import logging
import wave
from pathlib import Path

import numpy as np

from backtalk.models.audio import SampleBuffer


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def sine_buffer():
    """One second of a 440 Hz sine at 44.1 kHz, mono."""
    sample_rate = 44100
    t = np.arange(sample_rate) / sample_rate
    wave_data = np.sin(2 * np.pi * 440 * t)
    return SampleBuffer.from_channels([wave_data], sample_rate)


@pytest.fixture
def audio_test_data():
    """Generate SampleBuffers with various audio patterns."""
    def generate_buffer(pattern="sine", duration_seconds=1.0, sample_rate=44100, channels=1):
        """Generate a buffer for testing.

        Args:
            pattern: Type of audio pattern ('sine', 'swell', 'noise', 'silence')
            duration_seconds: Duration of audio
            sample_rate: Sample rate in Hz
            channels: Number of identical channels

        Returns:
            SampleBuffer
        """
        samples = int(duration_seconds * sample_rate)
        t = np.linspace(0, duration_seconds, samples, False)

        if pattern == "sine":
            wave_data = np.sin(2 * np.pi * 440 * t)
        elif pattern == "swell":
            # Sine with a rising envelope, so segment energy varies over time
            wave_data = np.linspace(0.05, 1.0, samples) * np.sin(2 * np.pi * 440 * t)
        elif pattern == "noise":
            wave_data = np.random.default_rng(1234).uniform(-1, 1, samples)
        elif pattern == "silence":
            wave_data = np.zeros(samples)
        else:
            raise ValueError(f"Unknown pattern: {pattern}")

        return SampleBuffer.from_channels([wave_data] * channels, sample_rate)

    return generate_buffer


@pytest.fixture
def sample_wav_file(temp_data_dir):
    """Create a 16-bit mono WAV file for testing."""
    file_path = Path(temp_data_dir) / "test_audio.wav"

    t = np.linspace(0, 0.5, 8000, False)
    audio_data = (np.sin(2 * np.pi * 440 * t) * 16384).astype(np.int16)

    with wave.open(str(file_path), 'wb') as wf:
        wf.setnchannels(1)  # Mono
        wf.setsampwidth(2)  # 16-bit
        wf.setframerate(16000)
        wf.writeframes(audio_data.tobytes())

    return str(file_path)
