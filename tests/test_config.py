"""Tests for configuration module"""
import os
from pathlib import Path
from unittest.mock import patch
import pytest
from pydantic import ValidationError

from config import Config


class TestConfig:
    """Test configuration validation and parsing"""

    def test_default_config(self):
        """Test default configuration values"""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.disable_platform_cache is False
        assert config.memoize_currency_probe is False
        assert config.modern_theme_identifier == "Theme4"
        assert config.local_partition_namespace == "local"

    def test_environment_override(self):
        """Test configuration override from environment variables"""
        env_vars = {
            "LOG_LEVEL": "debug",
            "DISABLE_PLATFORM_CACHE": "true",
            "MEMOIZE_CURRENCY_PROBE": "1",
            "MODERN_THEME_IDENTIFIER": "Theme5",
            "LOCAL_PARTITION_NAMESPACE": "default",
        }

        with patch.dict(os.environ, env_vars):
            config = Config()

            assert config.log_level == "DEBUG"
            assert config.disable_platform_cache is True
            assert config.memoize_currency_probe is True
            assert config.modern_theme_identifier == "Theme5"
            assert config.local_partition_namespace == "default"

    def test_validation_log_level(self):
        """Test validation of log level"""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValidationError):
                Config()

    def test_validation_theme_identifier(self):
        """Test the modern theme identifier cannot be blank"""
        with patch.dict(os.environ, {"MODERN_THEME_IDENTIFIER": "  "}):
            with pytest.raises(ValidationError):
                Config()

    def test_validation_partition_namespace(self):
        """Test the local partition namespace cannot be empty"""
        with pytest.raises(ValidationError):
            Config(local_partition_namespace="")

    def test_directory_creation(self, tmp_path):
        """Test that parent directories are created for the log file"""
        log_file = tmp_path / "subdir" / "probes.log"

        with patch.dict(os.environ, {"LOG_FILE": str(log_file)}):
            config = Config()

            assert config.log_file == Path(log_file)
            assert config.log_file.parent.exists()
