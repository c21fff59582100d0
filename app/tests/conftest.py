from pathlib import Path

import pytest

from infrastructure.services.providers import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_locales_dir() -> Path:
    """Directory shipped with the tests holding only an "en" dictionary ({"hi": "Hello"})."""
    return FIXTURES_DIR / "locales"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop the cache around each test so
    environment overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
