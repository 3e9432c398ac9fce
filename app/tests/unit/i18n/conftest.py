"""Feature-level fixtures for translation engine tests."""

from typing import Dict, List

import pytest

from glossa.i18n import ContentLoader, Translator
from tests.factories.i18n import make_dictionary, write_locales


class InMemoryContentLoader(ContentLoader):
    """ContentLoader serving entries from a dict, counting reads."""

    def __init__(self, entries: Dict[str, str]):
        self.entries = entries
        self.list_calls: List[str] = []
        self.read_calls: List[str] = []

    def list_entries(self, source: str) -> List[str]:
        self.list_calls.append(source)
        return list(self.entries)

    def read_entry(self, source: str, entry: str) -> str:
        self.read_calls.append(entry)
        return self.entries[entry]


@pytest.fixture
def locales_dir(tmp_path):
    """Create a directory with en.json, ru.json and de.json."""
    return write_locales(tmp_path / "locales")


@pytest.fixture
def sample_dictionary():
    return make_dictionary("en")


@pytest.fixture
def translator(locales_dir):
    """Translator with en current and default locale, not yet loaded."""
    return Translator(
        locales_path=str(locales_dir),
        current_locale="en",
        default_locale="en",
    )


@pytest.fixture
def in_memory_loader():
    """InMemoryContentLoader with two JSON locales and one stray entry."""
    return InMemoryContentLoader(
        {
            "en.json": '{"hello": "Hello"}',
            "ru.json": '{"hello": "Привет"}',
            "README.md": "not a dictionary",
        }
    )
