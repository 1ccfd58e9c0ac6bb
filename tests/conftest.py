from __future__ import annotations

import itertools

import pytest

from marketplace.core.config import get_config


@pytest.fixture(autouse=True)
def _reset_config_cache():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"status-{next(counter)}"
