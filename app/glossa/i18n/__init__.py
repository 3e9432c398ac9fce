"""i18n engine - locale dictionaries, key lookup, interpolation and plurals.

Main components:
- models: I18nOptions
- loader: ContentLoader, FileSystemContentLoader and decoders
- lookup: dotted key path resolution
- plurals: CLDR plural category selection
- renderer: TemplateRenderer with configurable delimiters
- store: DictionaryStore
- translator: Translator engine
"""

from glossa.i18n.errors import (
    EmptyResultError,
    I18nError,
    InvalidDelimitersError,
    InvalidDictionaryError,
    ListMissError,
    LocaleNotFoundError,
    MissingConfigError,
    MissingVariableError,
    NoCurrentLocaleError,
    NonStringResultError,
    PluralMissError,
    RawMissError,
    TranslateMissError,
    TranslationMissError,
)
from glossa.i18n.loader import (
    ContentLoader,
    FileSystemContentLoader,
    json_decoder,
    yaml_decoder,
)
from glossa.i18n.lookup import NOT_FOUND, Found, lookup, resolve_path
from glossa.i18n.models import I18nOptions
from glossa.i18n.plurals import PluralCategory, resolve_plural_category
from glossa.i18n.renderer import TemplateRenderer
from glossa.i18n.store import DictionaryStore
from glossa.i18n.translator import Translator

__all__ = [
    "I18nOptions",
    "ContentLoader",
    "FileSystemContentLoader",
    "json_decoder",
    "yaml_decoder",
    "Found",
    "NOT_FOUND",
    "lookup",
    "resolve_path",
    "PluralCategory",
    "resolve_plural_category",
    "TemplateRenderer",
    "DictionaryStore",
    "Translator",
    "I18nError",
    "MissingConfigError",
    "EmptyResultError",
    "LocaleNotFoundError",
    "NoCurrentLocaleError",
    "NonStringResultError",
    "InvalidDelimitersError",
    "InvalidDictionaryError",
    "MissingVariableError",
    "TranslationMissError",
    "RawMissError",
    "TranslateMissError",
    "PluralMissError",
    "ListMissError",
]
