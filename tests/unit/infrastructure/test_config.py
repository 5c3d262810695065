"""Unit tests for configuration and logging setup."""

import pytest
import structlog

from nutricalc.domain.energy_profile.core.value_objects import UnitSystem
from nutricalc.infrastructure.config import (
    get_default_unit_system,
    get_log_format,
    get_log_level,
    load_environment,
)
from nutricalc.infrastructure.logging_config import configure_logging


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "NUTRICALC_DEFAULT_UNIT_SYSTEM",
        "NUTRICALC_LOG_LEVEL",
        "NUTRICALC_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    """Test environment-driven settings."""

    def test_defaults(self, clean_env) -> None:
        assert get_default_unit_system() is UnitSystem.METRIC
        assert get_log_level() == "INFO"
        assert get_log_format() == "console"

    def test_overrides(self, clean_env) -> None:
        clean_env.setenv("NUTRICALC_DEFAULT_UNIT_SYSTEM", "Imperial")
        clean_env.setenv("NUTRICALC_LOG_LEVEL", "debug")
        clean_env.setenv("NUTRICALC_LOG_FORMAT", "JSON")

        assert get_default_unit_system() is UnitSystem.IMPERIAL
        assert get_log_level() == "DEBUG"
        assert get_log_format() == "json"

    def test_unknown_values_fall_back(self, clean_env) -> None:
        clean_env.setenv("NUTRICALC_DEFAULT_UNIT_SYSTEM", "furlongs")
        clean_env.setenv("NUTRICALC_LOG_FORMAT", "xml")

        assert get_default_unit_system() is UnitSystem.METRIC
        assert get_log_format() == "console"

    def test_load_environment(self, clean_env, tmp_path) -> None:
        # Register the variable with monkeypatch so teardown removes
        # what load_dotenv writes to os.environ
        clean_env.setenv("NUTRICALC_DEFAULT_UNIT_SYSTEM", "")
        clean_env.delenv("NUTRICALC_DEFAULT_UNIT_SYSTEM")
        env_file = tmp_path / ".env"
        env_file.write_text("NUTRICALC_DEFAULT_UNIT_SYSTEM=imperial\n")

        assert load_environment(env_file) is True
        assert get_default_unit_system() is UnitSystem.IMPERIAL

    def test_load_environment_missing_file(self, tmp_path) -> None:
        assert load_environment(tmp_path / "missing.env") is False


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_renderer(self, clean_env) -> None:
        configure_logging(level="DEBUG", fmt="json")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_from_env(self, clean_env) -> None:
        clean_env.setenv("NUTRICALC_LOG_FORMAT", "console")

        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
