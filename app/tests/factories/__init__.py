"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import make_dictionary, make_options, write_locales

__all__ = [
    "make_dictionary",
    "make_options",
    "write_locales",
]
