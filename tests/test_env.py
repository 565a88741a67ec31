"""Tests for nearbee.core.env."""

from pathlib import Path

import pytest

from nearbee.core.env import Settings, get_settings, load_env
from nearbee.errors import ConfigurationError

NAMES = ["NEARBEE_WORDLIST_DIR", "NEARBEE_PUZZLE_DIR", "NEARBEE_STORE_PATH",
         "NEARBEE_MAX_OBSCURITY", "NEARBEE_MESSAGE_DELAY"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestGetSettings:
    def test_defaults(self):
        assert get_settings() == Settings()
        assert Settings().today_path == Path("word-lists/today.json")

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("NEARBEE_WORDLIST_DIR", "/data/scowl")
        monkeypatch.setenv("NEARBEE_MAX_OBSCURITY", "60")
        monkeypatch.setenv("NEARBEE_MESSAGE_DELAY", "0.25")
        settings = get_settings()
        assert settings.wordlist_dir == Path("/data/scowl")
        assert settings.max_obscurity == 60
        assert settings.message_delay == 0.25

    def test_bad_number(self, monkeypatch):
        monkeypatch.setenv("NEARBEE_MAX_OBSCURITY", "lots")
        with pytest.raises(ConfigurationError):
            get_settings()


class TestLoadEnv:
    def test_reads_dotenv_without_overriding(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("NEARBEE_STORE_PATH=/tmp/bee.json\nNEARBEE_MAX_OBSCURITY=55\n")
        monkeypatch.setenv("NEARBEE_MAX_OBSCURITY", "35")
        found = load_env(str(env_file))
        assert found["NEARBEE_STORE_PATH"] == "/tmp/bee.json"
        assert found["NEARBEE_MAX_OBSCURITY"] == "35"
