"""
Tests for configuration loading.
"""

import logging

import pytest

from phoenix_logic.config import DEFAULT_CONFIG, configure_logging, load_config
from phoenix_logic.errors import ConfigError

ENV_KEYS = (
    "PHOENIX_CONFIG",
    "PHOENIX_LOG_LEVEL",
    "PHOENIX_FREEZE_ON_COMPLETION",
    "PHOENIX_COMMANDER_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return str(path)

    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "absent.yaml")) == DEFAULT_CONFIG

    def test_empty_file_gives_defaults(self, write_config):
        assert load_config(write_config("")) == DEFAULT_CONFIG

    def test_reads_sections(self, write_config):
        path = write_config(
            "rules:\n"
            "  oxygen_decay_interval: 3\n"
            "  xp_per_level: 100\n"
            "session:\n"
            "  freeze_on_completion: false\n"
            "  commander_name: Mara Voss\n"
            "logging:\n"
            "  level: debug\n"
        )

        config = load_config(path)

        assert config.oxygen_decay_interval == 3
        assert config.xp_per_level == 100
        assert config.oxygen_decay_amount == 2
        assert config.freeze_on_completion is False
        assert config.commander_name == "Mara Voss"
        assert config.log_level == "DEBUG"

    def test_repository_config_matches_defaults(self):
        """The shipped config.yaml restates the defaults."""
        assert load_config() == DEFAULT_CONFIG

    def test_path_from_environment(self, write_config, monkeypatch):
        monkeypatch.setenv("PHOENIX_CONFIG", write_config("rules:\n  win_xp_bonus: 900\n"))

        assert load_config().win_xp_bonus == 900

    def test_environment_overrides(self, write_config, monkeypatch):
        path = write_config("session:\n  freeze_on_completion: true\n")
        monkeypatch.setenv("PHOENIX_FREEZE_ON_COMPLETION", "no")
        monkeypatch.setenv("PHOENIX_LOG_LEVEL", "warning")
        monkeypatch.setenv("PHOENIX_COMMANDER_NAME", "Ilse Ray")

        config = load_config(path)

        assert config.freeze_on_completion is False
        assert config.log_level == "WARNING"
        assert config.commander_name == "Ilse Ray"

    def test_unknown_keys_ignored(self, write_config):
        assert load_config(write_config("rules:\n  warp_factor: 9\nextra: 1\n")) == DEFAULT_CONFIG


class TestInvalidConfig:
    @pytest.mark.parametrize(
        "text",
        [
            "rules:\n  xp_per_level: -1\n",
            "rules:\n  oxygen_decay_amount: two\n",
            "rules:\n  oxygen_decay_interval: 0\n",
            "rules:\n  xp_per_level: 0\n",
            "session:\n  freeze_on_completion: maybe\n",
            "- just\n- a list\n",
            "rules: [unclosed\n",
        ],
    )
    def test_rejected(self, write_config, text):
        with pytest.raises(ConfigError):
            load_config(write_config(text))

    def test_bad_environment_boolean(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PHOENIX_FREEZE_ON_COMPLETION", "sometimes")

        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "absent.yaml"))


class TestConfigureLogging:
    def test_sets_root_level(self):
        configure_logging("debug")

        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")

    def test_unknown_level(self):
        with pytest.raises(ConfigError):
            configure_logging("chatty")
