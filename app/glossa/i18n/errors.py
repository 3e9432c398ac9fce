"""Custom exceptions for the translation engine.

Configuration and data mistakes raise immediately. Misses only raise when the
translator runs with ``throw_on_failure`` enabled; otherwise the key is echoed.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            translator.translate("greeting")
        except I18nError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class MissingConfigError(I18nError):
    """Raised when dictionaries are loaded without a locales path.

    Example:
        >>> Translator().load()
        Traceback (most recent call last):
        ...
        MissingConfigError: `locales_path` is not defined
    """

    pass


class EmptyResultError(I18nError):
    """Raised when filtering and decoding the locales path yields no dictionary."""

    pass


class InvalidDictionaryError(I18nError):
    """Raised when a locale entry does not decode to a mapping of keys."""

    pass


class LocaleNotFoundError(I18nError):
    """Raised when neither the current nor the default locale has a dictionary.

    Attributes:
        locale: Locale that was attempted.
        default_locale: Fallback locale that was attempted.
    """

    def __init__(self, locale: Optional[str], default_locale: Optional[str]):
        self.locale = locale
        self.default_locale = default_locale
        super().__init__(
            f"could not find '{locale}' dictionary "
            f"(default: {default_locale if default_locale is not None else '[not set]'})"
        )


class NoCurrentLocaleError(I18nError):
    """Raised when an operation needs a current locale and none is configured."""

    pass


class NonStringResultError(I18nError):
    """Raised when a strict lookup resolves to something other than a string.

    Distinguishes a value of the wrong shape from a missing one.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"failed to lookup for '{path}': the result is not a string")


class InvalidDelimitersError(I18nError):
    """Raised when the interpolation delimiters are not two distinct markers."""

    pass


class MissingVariableError(I18nError):
    """Raised by a strict renderer when a template variable is not in scope."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Missing interpolation variable: {variable}")


class TranslationMissError(I18nError):
    """Base for misses reported in ``throw_on_failure`` mode.

    Attributes:
        key: Key (or last candidate key) that could not be resolved.
    """

    operation = "lookup"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{self.operation} failed: '{key}' was not found")


class RawMissError(TranslationMissError):
    """Raised by ``raw()`` when the key is absent."""

    operation = "raw lookup"


class TranslateMissError(TranslationMissError):
    """Raised by ``translate()`` when no candidate key resolves."""

    operation = "translation"


class PluralMissError(TranslationMissError):
    """Raised by ``plural()`` when no plural form can be selected."""

    operation = "plural translation"


class ListMissError(TranslationMissError):
    """Raised by ``list()`` when the key is absent from every locale."""

    operation = "listing"
