"""Content loading interface, file system implementation and decoders.

A content loader lists the entries of a locales source and reads each one as
text. Decoders turn that text into a dictionary tree. Errors raised by either
(missing directories, unreadable files, malformed JSON or YAML) propagate
unmodified.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

import yaml

from glossa.core.logging import get_module_logger

logger = get_module_logger()

Decoder = Callable[[str], Any]


class ContentLoader(ABC):
    """Abstract base for locale content loaders.

    Implementations define how entries are discovered and read for a given
    source location.
    """

    @abstractmethod
    def list_entries(self, source: str) -> List[str]:
        """List entry names available at a source location.

        Args:
            source: Source location (e.g. a directory path).

        Returns:
            Entry names in scan order.
        """
        pass

    @abstractmethod
    def read_entry(self, source: str, entry: str) -> str:
        """Read an entry as text.

        Args:
            source: Source location the entry belongs to.
            entry: Entry name as returned by ``list_entries``.

        Returns:
            Raw textual content.
        """
        pass


class FileSystemContentLoader(ContentLoader):
    """Loader for locale files stored in a directory.

    Entries are the file names directly inside the directory, sorted so the
    language scan order is stable across platforms.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def list_entries(self, source: str) -> List[str]:
        directory = Path(source)
        if not directory.is_dir():
            logger.error("locales_directory_not_found", locales_path=str(directory))
            raise FileNotFoundError(f"Locales directory not found: {directory}")

        return sorted(path.name for path in directory.iterdir() if path.is_file())

    def read_entry(self, source: str, entry: str) -> str:
        with open(Path(source) / entry, "r", encoding=self.encoding) as f:
            return f.read()


def json_decoder(content: str) -> Any:
    """Decode JSON dictionary content."""
    return json.loads(content)


def yaml_decoder(content: str) -> Any:
    """Decode YAML dictionary content.

    Empty documents decode to an empty dictionary.
    """
    data = yaml.safe_load(content)
    return data if data is not None else {}


DECODERS: Dict[str, Decoder] = {
    "json": json_decoder,
    "yaml": yaml_decoder,
}


def locale_from_entry(entry: str) -> str:
    """Derive the locale identifier from an entry name.

    >>> locale_from_entry("en.json")
    'en'
    >>> locale_from_entry("en.extra.json")
    'en'
    """
    return entry.split(".", 1)[0]


def entry_allowed(entry: str, extensions: Sequence[str]) -> bool:
    """Check an entry name against the extension allow-list.

    An empty allow-list accepts every entry.
    """
    if not extensions:
        return True
    return any(entry.endswith(extension) for extension in extensions)
