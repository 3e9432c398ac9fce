"""Translation engine: raw lookup, templated and plural translation, listing.

Misses never raise by default: the key is echoed back (or an empty list is
returned) so that a missing translation cannot crash a caller. With
``throw_on_failure`` enabled each operation raises its own miss error instead.
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Type, Union

from glossa.core.logging import get_module_logger
from glossa.i18n.errors import (
    ListMissError,
    NonStringResultError,
    PluralMissError,
    RawMissError,
    TranslateMissError,
    TranslationMissError,
)
from glossa.i18n.loader import ContentLoader, Decoder
from glossa.i18n.lookup import Found, lookup
from glossa.i18n.models import Dictionary, I18nOptions
from glossa.i18n.plurals import select_plural_template
from glossa.i18n.renderer import TemplateRenderer
from glossa.i18n.store import DictionaryStore

logger = get_module_logger()

Scope = Optional[Mapping]


class Translator:
    """Resolves keys against locale dictionaries and renders templates.

    Dictionaries are loaded on first use. Configuration is an immutable
    I18nOptions; property setters and ``reconfigure()`` swap it and recompute
    the current dictionary and the renderer.

    Attributes:
        store: DictionaryStore holding loaded dictionaries.
        render: TemplateRenderer built from the configured delimiters.

    Example:
        translator = Translator(locales_path="locales", current_locale="en")
        translator.translate("greeting", {"name": "Ada"})
        translator.plural(3, "apples", {"count": 3})
    """

    def __init__(
        self,
        options: Optional[I18nOptions] = None,
        loader: Optional[ContentLoader] = None,
        **overrides: Any,
    ):
        """Initialize Translator.

        Args:
            options: Base configuration (default: I18nOptions()).
            loader: ContentLoader for locale entries (default: file system).
            **overrides: I18nOptions fields applied on top of ``options``.

        Raises:
            InvalidDelimitersError: If the delimiters are malformed.
        """
        options = options or I18nOptions()
        if overrides:
            options = options.replace(**overrides)

        self.store = DictionaryStore(options, loader)
        self.render = TemplateRenderer(options.delimiters, options.strict_variables)
        logger.info(
            "initialized_translator",
            locales_path=options.locales_path,
            current_locale=options.current_locale,
            default_locale=options.default_locale,
        )

    @property
    def options(self) -> I18nOptions:
        return self.store.options

    def reconfigure(self, **changes: Any) -> I18nOptions:
        """Apply configuration changes and recompute dependent state.

        Args:
            **changes: I18nOptions fields to change.

        Returns:
            The new options.

        Raises:
            InvalidDelimitersError: If new delimiters are malformed.
            LocaleNotFoundError: If loaded dictionaries have neither locale.

        Nothing changes when an error is raised.
        """
        previous = self.options
        options = previous.replace(**changes)

        render = self.render
        if (
            options.delimiters != previous.delimiters
            or options.strict_variables != previous.strict_variables
        ):
            render = TemplateRenderer(options.delimiters, options.strict_variables)

        # The store keeps its previous state when this raises
        self.store.reconfigure(options)
        self.render = render
        logger.info("reconfigured_translator", changed=sorted(changes))
        return options

    @property
    def locale(self) -> Optional[str]:
        """Current locale."""
        return self.options.current_locale

    @locale.setter
    def locale(self, locale: Optional[str]) -> None:
        self.reconfigure(current_locale=locale)

    @property
    def default_locale(self) -> Optional[str]:
        """Locale used when the current locale has no dictionary."""
        return self.options.default_locale

    @default_locale.setter
    def default_locale(self, locale: Optional[str]) -> None:
        self.reconfigure(default_locale=locale)

    @property
    def locales_path(self) -> Optional[str]:
        """Source location of the locale dictionaries."""
        return self.options.locales_path

    @locales_path.setter
    def locales_path(self, path: Optional[str]) -> None:
        # Assigning a path always reloads, even when it is unchanged
        if path is not None:
            path = str(path)
        if path is not None and path == self.locales_path:
            self.reload()
        else:
            self.reconfigure(locales_path=path)

    @property
    def delimiters(self) -> Sequence[str]:
        return self.options.delimiters

    @delimiters.setter
    def delimiters(self, delimiters: Sequence[str]) -> None:
        self.reconfigure(delimiters=delimiters)

    @property
    def throw_on_failure(self) -> bool:
        return self.options.throw_on_failure

    @throw_on_failure.setter
    def throw_on_failure(self, value: bool) -> None:
        self.reconfigure(throw_on_failure=value)

    @property
    def decoder(self) -> Decoder:
        return self.options.decoder

    @decoder.setter
    def decoder(self, decoder: Decoder) -> None:
        self.reconfigure(decoder=decoder)

    @property
    def extensions(self) -> Sequence[str]:
        return self.options.extensions

    @extensions.setter
    def extensions(self, extensions: Iterable[str]) -> None:
        self.reconfigure(extensions=tuple(extensions))

    def load(self) -> None:
        """Load all dictionaries now instead of on first use."""
        self.store.load_all()

    def reload(self) -> None:
        """Reload all dictionaries from the locales path."""
        self.store.load_all()
        logger.info("reloaded_dictionaries", locales_path=self.locales_path)

    def get_languages(self) -> List[str]:
        """Get every locale seen since the first load, in scan order.

        Loads the dictionaries if they have not been loaded yet.
        """
        self.store.ensure_ready(require_active_locale=False)
        return self.store.languages

    def _miss(self, error: Type[TranslationMissError], key: str) -> str:
        logger.warning(
            "translation_not_found",
            key=key,
            operation=error.operation,
            locale=self.locale,
            fallback_locale=self.default_locale,
        )
        if self.throw_on_failure:
            raise error(key)
        return key

    def _current(self) -> Dictionary:
        self.store.ensure_ready()
        return self.store.current

    def raw(self, key: str) -> Any:
        """Return the raw dictionary value at ``key``.

        The value is returned as stored, whatever its shape; callers must not
        mutate it.

        Args:
            key: Dotted key.

        Returns:
            The stored value, or ``key`` when absent.

        Raises:
            RawMissError: If absent and ``throw_on_failure`` is enabled.
        """
        result = lookup(self._current(), key, strict=False)
        if isinstance(result, Found):
            return result.value
        return self._miss(RawMissError, key)

    def translate(
        self,
        key: Union[str, Sequence[str]],
        scope: Scope = None,
        default: Optional[str] = None,
    ) -> str:
        """Render the template at ``key``.

        With a list of keys, the first one that resolves is rendered.

        Args:
            key: Dotted key, or candidate keys in order of preference.
            scope: Variables for interpolation.
            default: Returned as-is when no candidate resolves.

        Returns:
            Rendered template, ``default``, or the last candidate key.

        Raises:
            NonStringResultError: If a candidate resolves to a non-string.
            TranslateMissError: If nothing resolves, no default is given and
                ``throw_on_failure`` is enabled.
        """
        candidates = [key] if isinstance(key, str) else list(key)
        if not candidates:
            raise ValueError("translate() needs at least one key")

        dictionary = self._current()
        for candidate in candidates:
            result = lookup(dictionary, candidate, strict=True)
            if isinstance(result, Found):
                return self.render(result.value, scope)

        if default is not None:
            return default

        return self._miss(TranslateMissError, candidates[-1])

    def plural(
        self,
        count: Union[int, float],
        key: str,
        scope: Scope = None,
    ) -> str:
        """Render the plural form of ``key`` matching ``count``.

        Args:
            count: Amount being described.
            key: Dotted key of a plural object.
            scope: Variables for interpolation.

        Returns:
            Rendered form, or ``key`` when no form applies.

        Raises:
            NonStringResultError: If the selected form is not a string.
            PluralMissError: If no form applies and ``throw_on_failure`` is enabled.
        """
        result = lookup(self._current(), key, strict=False)
        if not isinstance(result, Found) or not isinstance(result.value, Mapping):
            return self._miss(PluralMissError, key)

        template = select_plural_template(result.value, count)
        if not isinstance(template, Found):
            return self._miss(PluralMissError, key)

        if not isinstance(template.value, str):
            raise NonStringResultError(key)

        return self.render(template.value, scope)

    def list(self, key: str, scope: Scope = None) -> List[str]:
        """Render ``key`` in every known locale that has it.

        Does not need a current locale. Locales missing the key are skipped.

        Args:
            key: Dotted key.
            scope: Variables for interpolation.

        Returns:
            Rendered templates in language scan order.

        Raises:
            NonStringResultError: If the key resolves to a non-string somewhere.
            ListMissError: If no locale has the key and ``throw_on_failure``
                is enabled.
        """
        self.store.ensure_ready(require_active_locale=False)

        templates: List[str] = []
        for language in self.store.languages:
            dictionary = self.store.dictionary_for(language)
            if dictionary is None:
                continue

            result = lookup(dictionary, key, strict=True)
            if isinstance(result, Found):
                templates.append(self.render(result.value, scope))

        if not templates:
            logger.warning("translation_not_found_in_any_locale", key=key)
            if self.throw_on_failure:
                raise ListMissError(key)

        return templates

    r = raw
    t = translate
    p = plural
