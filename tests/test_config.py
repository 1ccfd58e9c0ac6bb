from __future__ import annotations

import pytest

from marketplace.core.config import get_config
from marketplace.core.exceptions import ConfigurationError


def test_config_defaults(monkeypatch):
    for key in ("ENV", "LOG_LEVEL", "LOG_FILE", "LOG_JSON", "STATUS_EXPORT_PATH", "APP_NAME"):
        monkeypatch.delenv(key, raising=False)

    config = get_config()
    assert config.APP_NAME == "lesson-marketplace"
    assert config.ENV == "development"
    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_JSON is True
    assert config.STATUS_EXPORT_PATH is None
    assert config.is_production is False


def test_env_argument_selects_production():
    config = get_config("production")
    assert config.is_production is True
    assert config.ENV == "production"


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert get_config().LOG_LEVEL == "WARNING"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("LOG_LEVEL", "verbose"),
        ("ENV", "qa"),
        ("APP_NAME", "   "),
        ("STATUS_EXPORT_PATH", "status-machines.yaml"),
    ],
)
def test_invalid_settings_raise_configuration_error(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigurationError):
        get_config()
