"""Dictionary store: loaded locale dictionaries and the dictionary in effect.

The set of known languages only ever grows. A locale file removed from the
locales path between reloads stays listed by ``languages``.
"""

from collections.abc import Mapping
from typing import Dict, List, Optional, Set

from glossa.core.logging import get_module_logger
from glossa.i18n.errors import (
    EmptyResultError,
    InvalidDictionaryError,
    LocaleNotFoundError,
    MissingConfigError,
    NoCurrentLocaleError,
)
from glossa.i18n.loader import (
    ContentLoader,
    FileSystemContentLoader,
    entry_allowed,
    locale_from_entry,
)
from glossa.i18n.models import Dictionary, I18nOptions

logger = get_module_logger()


class DictionaryStore:
    """Owns locale dictionaries and derives the current one.

    Loading is lazy: nothing is read until ``ensure_ready()`` or ``load_all()``
    is called.

    Attributes:
        options: Active configuration.
        loader: ContentLoader used to list and read entries.
        dictionaries: Loaded dictionaries by locale, None until loaded.
        current: Dictionary in effect, None until resolved.
    """

    def __init__(
        self,
        options: I18nOptions,
        loader: Optional[ContentLoader] = None,
    ):
        self.options = options
        self.loader = loader or FileSystemContentLoader()
        self.dictionaries: Optional[Dict[str, Dictionary]] = None
        self.current: Optional[Dictionary] = None
        self._languages: List[str] = []
        self._known: Set[str] = set()

    @property
    def languages(self) -> List[str]:
        """Known locale identifiers in scan order."""
        return list(self._languages)

    @property
    def is_loaded(self) -> bool:
        return self.dictionaries is not None

    def _read_dictionaries(self, options: I18nOptions) -> Dict[str, Dictionary]:
        locales_path = options.locales_path
        if locales_path is None:
            raise MissingConfigError("`locales_path` is not defined")

        entries = [
            entry
            for entry in self.loader.list_entries(locales_path)
            if entry_allowed(entry, options.extensions)
        ]

        dictionaries: Dict[str, Dictionary] = {}
        for entry in entries:
            dictionary = options.decoder(self.loader.read_entry(locales_path, entry))
            if not isinstance(dictionary, Mapping):
                logger.error(
                    "invalid_dictionary_root",
                    entry=entry,
                    root_type=type(dictionary).__name__,
                )
                raise InvalidDictionaryError(
                    f"'{entry}' does not decode to a mapping of keys"
                )
            dictionaries[locale_from_entry(entry)] = dictionary

        if not dictionaries:
            logger.error(
                "no_dictionaries_found",
                locales_path=locales_path,
                extensions=list(options.extensions),
            )
            raise EmptyResultError(f"zero dictionaries found in {locales_path}")

        return dictionaries

    def _commit_dictionaries(self, dictionaries: Dict[str, Dictionary]) -> None:
        for locale in dictionaries:
            if locale not in self._known:
                self._known.add(locale)
                self._languages.append(locale)

        self.dictionaries = dictionaries
        self.current = None
        logger.info(
            "loaded_dictionaries",
            locales_path=self.options.locales_path,
            locale_count=len(dictionaries),
        )

    def load_all(self) -> None:
        """Load every dictionary from the locales path.

        Nothing changes when loading fails.

        Raises:
            MissingConfigError: If no locales path is configured.
            EmptyResultError: If no entry survives filtering and decoding.
            InvalidDictionaryError: If an entry does not decode to a mapping.
        """
        self._commit_dictionaries(self._read_dictionaries(self.options))

    def _select_current(
        self, dictionaries: Dict[str, Dictionary], options: I18nOptions
    ) -> Dictionary:
        locale = options.current_locale
        default_locale = options.default_locale

        dictionary = dictionaries.get(locale) if locale is not None else None
        if dictionary is None and default_locale is not None:
            dictionary = dictionaries.get(default_locale)
            if dictionary is not None:
                logger.info(
                    "used_fallback_locale",
                    requested_locale=locale,
                    fallback_locale=default_locale,
                )

        if dictionary is None:
            logger.error(
                "locale_not_found",
                locale=locale,
                fallback_locale=default_locale,
            )
            raise LocaleNotFoundError(locale, default_locale)

        return dictionary

    def resolve_current(self) -> None:
        """Derive the current dictionary from the current or default locale.

        Raises:
            LocaleNotFoundError: If neither locale has a loaded dictionary.
        """
        self.current = self._select_current(self.dictionaries or {}, self.options)

    def ensure_ready(self, require_active_locale: bool = True) -> None:
        """Load and resolve whatever has not been loaded or resolved yet.

        Args:
            require_active_locale: Whether the caller needs a current locale.

        Raises:
            NoCurrentLocaleError: If a current locale is required but unset.
        """
        if self.dictionaries is None:
            self.load_all()

        if self.current is None and require_active_locale:
            self.resolve_current()

        if require_active_locale and self.options.current_locale is None:
            raise NoCurrentLocaleError("`current_locale` is not defined")

    def reconfigure(self, options: I18nOptions) -> None:
        """Switch to new options and recompute dependent state.

        A new locales path reloads every dictionary. A new current or default
        locale re-derives the current dictionary when dictionaries are already
        loaded. Other changes apply on the next load. If reloading or
        re-deriving raises, the previous options and dictionaries stay in effect.
        """
        previous = self.options

        if options.locales_path != previous.locales_path:
            dictionaries = self._read_dictionaries(options)
            self.options = options
            self._commit_dictionaries(dictionaries)
            return

        locale_changed = (
            options.current_locale != previous.current_locale
            or options.default_locale != previous.default_locale
        )
        if locale_changed and self.dictionaries is not None:
            current = self._select_current(self.dictionaries, options)
            self.options = options
            self.current = current
            return

        self.options = options

    def dictionary_for(self, locale: str) -> Optional[Dictionary]:
        """Get the loaded dictionary of one locale, if any."""
        return (self.dictionaries or {}).get(locale)
