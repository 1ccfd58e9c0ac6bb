"""Configuration module for the lesson marketplace."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from marketplace.core.exceptions import ConfigurationError

load_dotenv()

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_ENVS = {"development", "test", "staging", "production"}


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    LOG_LEVEL: str
    LOG_FILE: str | None
    LOG_JSON: bool
    STATUS_EXPORT_PATH: str | None

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    config = Config(
        APP_NAME=os.getenv("APP_NAME", "lesson-marketplace"),
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE") or None,
        LOG_JSON=_as_bool(os.getenv("LOG_JSON"), default=True),
        STATUS_EXPORT_PATH=os.getenv("STATUS_EXPORT_PATH") or None,
    )
    _validate_config(config)
    return config


def _validate_config(config: Config) -> None:
    if config.ENV not in VALID_ENVS:
        raise ConfigurationError(f"ENV must be one of {', '.join(sorted(VALID_ENVS))}.")
    if config.LOG_LEVEL not in VALID_LOG_LEVELS:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if not config.APP_NAME.strip():
        raise ConfigurationError("APP_NAME must not be empty.")
    if config.STATUS_EXPORT_PATH is not None and not config.STATUS_EXPORT_PATH.endswith(".json"):
        raise ConfigurationError("STATUS_EXPORT_PATH must point to a .json file.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
