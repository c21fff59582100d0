"""Feature-level fixtures for i18n system tests.

Provides locale directories and translators for loading, merging and
translation scenarios.
"""

import pytest

from tests.factories.i18n import make_translator, write_locale_file


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a temporary directory with sample dictionary files.

    Returns a directory structure like:
    - en.json   {"hi": "Hello", "bye": "Goodbye"}
    - fr.yml    {"hi": "Bonjour", "nav": {"home": "Accueil"}}
    """
    locales_dir = tmp_path / "locales"
    write_locale_file(locales_dir, "en", {"hi": "Hello", "bye": "Goodbye"})
    write_locale_file(
        locales_dir, "fr", {"hi": "Bonjour", "nav": {"home": "Accueil"}}, fmt="yml"
    )
    return locales_dir


@pytest.fixture
def en_only_locales_dir(tmp_path):
    """Create a directory holding only an "en" dictionary with key ``hi``."""
    locales_dir = tmp_path / "en_only"
    write_locale_file(locales_dir, "en", {"hi": "Hello"})
    return locales_dir


@pytest.fixture
def translator():
    """Translator with "en" (default) holding ``world`` and "it" holding ``hi``."""
    return make_translator()
