"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n_options,
    make_translator,
    write_locale_file,
)

__all__ = [
    "make_i18n_options",
    "make_translator",
    "write_locale_file",
]
