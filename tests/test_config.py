import logging

import pytest

from palettica.config import ENV_ICON_DIR, ENV_LOG_LEVEL, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.log_level == logging.WARNING
    assert settings.icon_dir is None


def test_reads_environment():
    settings = Settings.from_env({ENV_LOG_LEVEL: "debug", ENV_ICON_DIR: "/tmp/swatches"})
    assert settings.log_level == logging.DEBUG
    assert settings.icon_dir == "/tmp/swatches"


def test_blank_icon_dir_is_unset():
    assert Settings.from_env({ENV_ICON_DIR: "  "}).icon_dir is None


def test_unknown_level():
    with pytest.raises(ValueError):
        Settings.from_env({ENV_LOG_LEVEL: "chatty"})


def test_uses_os_environ(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
    monkeypatch.delenv(ENV_ICON_DIR, raising=False)
    assert Settings.from_env() == Settings(log_level=logging.ERROR, icon_dir=None)
