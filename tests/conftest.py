"""Global test configuration for Pushbullet Types."""

import os

import pytest

from pushbullet_types.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Keep PUSHBULLET_* env vars from leaking into or between tests.

    Clears the lru_cache on get_settings before and after each test so a
    test that sets env vars sees them, and the next test does not.
    """
    saved = {key: value for key, value in os.environ.items() if key.startswith("PUSHBULLET_")}
    for key in saved:
        del os.environ[key]
    get_settings.cache_clear()

    yield

    for key in [k for k in os.environ if k.startswith("PUSHBULLET_")]:
        del os.environ[key]
    os.environ.update(saved)
    get_settings.cache_clear()
