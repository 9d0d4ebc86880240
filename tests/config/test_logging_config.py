"""Tests for logging configuration."""

from realbrand_commons.config.logging_config import (
    LoggingConfig,
    get_log_level_from_verbosity,
)


class TestLoggingConfig:
    """dictConfig construction, without applying it."""

    def test_verbosity_overrides_level(self):
        config = LoggingConfig.build_config(log_level="DEBUG", log_verbosity="quiet")

        assert config["root"]["level"] == "ERROR"

    def test_unknown_verbosity_falls_back_to_warning(self):
        assert get_log_level_from_verbosity("chatty") == "WARNING"

    def test_cache_logging_quiet_by_default(self):
        config = LoggingConfig.build_config(log_level="INFO")

        assert config["loggers"]["realbrand_commons.platform.cache"]["level"] == "WARNING"

    def test_cache_logging_enabled(self):
        config = LoggingConfig.build_config(log_level="INFO", enable_cache_logging=True)

        assert "realbrand_commons.platform.cache" not in config["loggers"]

    def test_unknown_format_falls_back_to_simple(self):
        config = LoggingConfig.build_config(log_format="xml")

        assert config["formatters"]["default"]["format"] == "%(asctime)s - %(levelname)s - %(message)s"

    def test_noisy_modules_limited_to_errors(self):
        config = LoggingConfig.build_config()

        assert config["loggers"]["httpx"]["level"] == "ERROR"
