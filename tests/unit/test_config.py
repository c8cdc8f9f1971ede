"""Unit tests for BacktalkConfig."""

import pytest
from pathlib import Path

from backtalk.config import BacktalkConfig


def _write(temp_data_dir, text: str) -> str:
    path = Path(temp_data_dir) / "backtalk.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.mark.unit
class TestBacktalkConfig:
    """Test cases for BacktalkConfig."""

    def test_defaults_without_file(self):
        """Test built-in defaults when no path is given."""
        config = BacktalkConfig()

        assert config.get('processing.normalize') is False
        assert config.get_target_peak() == 0.95
        assert config.get_pass_threshold() == 60
        assert config.get('logging.file_path') is None

    def test_file_overrides_defaults(self, temp_data_dir):
        """Test YAML values are merged over the defaults."""
        path = _write(temp_data_dir, "processing:\n  normalize: true\nscoring:\n  pass_threshold: 75\n")

        config = BacktalkConfig(path)

        assert config.get('processing.normalize') is True
        assert config.get('processing.target_peak') == 0.95
        assert config.get_pass_threshold() == 75

    def test_relative_log_path_resolved(self, temp_data_dir):
        """Test log paths are resolved against the config file directory."""
        path = _write(temp_data_dir, "logging:\n  file_path: logs/backtalk.log\n")

        config = BacktalkConfig(path)

        assert config.get('logging.file_path') == str(Path(temp_data_dir) / "logs/backtalk.log")

    def test_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            BacktalkConfig(str(Path(temp_data_dir) / "missing.yaml"))

    def test_empty_file(self, temp_data_dir):
        with pytest.raises(ValueError, match="empty"):
            BacktalkConfig(_write(temp_data_dir, ""))

    def test_invalid_yaml(self, temp_data_dir):
        with pytest.raises(ValueError, match="Invalid YAML"):
            BacktalkConfig(_write(temp_data_dir, "processing: [unclosed\n"))

    def test_non_mapping(self, temp_data_dir):
        with pytest.raises(ValueError, match="mapping"):
            BacktalkConfig(_write(temp_data_dir, "- just\n- a list\n"))

    def test_get_default_for_missing_key(self):
        config = BacktalkConfig()

        assert config.get('nope.not.here', 'fallback') == 'fallback'

    def test_set(self):
        """Test dot-notation set creates intermediate sections."""
        config = BacktalkConfig()

        config.set('scoring.pass_threshold', 90)
        config.set('extra.section.value', 1)

        assert config.get_pass_threshold() == 90
        assert config.get('extra.section.value') == 1

    def test_defaults_not_shared(self):
        """Test changing one config does not leak into another."""
        first = BacktalkConfig()
        first.set('processing.target_peak', 0.5)

        assert BacktalkConfig().get_target_peak() == 0.95

    def test_invalid_target_peak(self):
        config = BacktalkConfig()
        config.set('processing.target_peak', 1.5)

        with pytest.raises(ValueError):
            config.get_target_peak()

    def test_invalid_pass_threshold(self):
        config = BacktalkConfig()
        config.set('scoring.pass_threshold', 101)

        with pytest.raises(ValueError):
            config.get_pass_threshold()
