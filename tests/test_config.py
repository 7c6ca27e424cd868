"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from core.config import HOME_ENV_VAR, AppConfig, SchedulerConfig, _resolve_env_vars, load_config


class TestModels:
    """Tests for config model defaults and validation."""

    def test_defaults(self):
        config = AppConfig()
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8321
        assert config.scheduler.timezone == "local"
        assert config.scheduler.default_count == 10
        assert config.scheduler.horizon_minutes == 525600
        assert config.logging.level == "INFO"

    def test_custom_horizon(self):
        assert SchedulerConfig(horizon="30d").horizon_minutes == 30 * 24 * 60

    def test_invalid_horizon(self):
        with pytest.raises(ValidationError):
            SchedulerConfig(horizon="forever")


class TestEnvResolution:
    """Tests for ${ENV_VAR} substitution."""

    def test_resolves_nested(self, monkeypatch):
        monkeypatch.setenv("CRONSCOPE_TEST_ZONE", "UTC")
        raw = {"scheduler": {"timezone": "${CRONSCOPE_TEST_ZONE}"}, "list": ["${CRONSCOPE_TEST_ZONE}", 1]}
        assert _resolve_env_vars(raw) == {"scheduler": {"timezone": "UTC"}, "list": ["UTC", 1]}

    def test_missing_var_left_unresolved(self, monkeypatch):
        monkeypatch.delenv("CRONSCOPE_TEST_MISSING", raising=False)
        assert _resolve_env_vars("${CRONSCOPE_TEST_MISSING}") == "${CRONSCOPE_TEST_MISSING}"


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_files_use_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))
        config = load_config()
        assert config.home_path == tmp_path
        assert config.scheduler.horizon == "365d"

    def test_yaml_and_env_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))
        # Registers the variable with monkeypatch so teardown removes what .env sets
        monkeypatch.setenv("CRONSCOPE_TEST_PORT", "placeholder")
        monkeypatch.delenv("CRONSCOPE_TEST_PORT")

        (tmp_path / ".env").write_text("CRONSCOPE_TEST_PORT=9100\n")
        (tmp_path / "config.yaml").write_text(
            "server:\n"
            "  port: ${CRONSCOPE_TEST_PORT}\n"
            "scheduler:\n"
            "  timezone: Europe/Berlin\n"
            "  default_count: 5\n"
            "  horizon: 2w\n"
        )

        config = load_config()
        assert config.server.port == 9100
        assert config.scheduler.timezone == "Europe/Berlin"
        assert config.scheduler.default_count == 5
        assert config.scheduler.horizon_minutes == 20160

    def test_explicit_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path / "home"))
        path = tmp_path / "custom.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        assert load_config(config_path=path).logging.level == "DEBUG"
