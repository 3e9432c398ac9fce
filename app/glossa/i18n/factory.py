"""Factory functions for creating translators from settings.

Usage:
    # Settings from the environment (I18N_* variables), lazy loading
    translator = create_translator()

    # Custom locales directory, loaded immediately
    translator = create_translator(locales_path="/srv/locales", preload=True)
"""

from typing import Any, Optional

from glossa.core.config import I18nSettings, settings as default_settings
from glossa.core.logging import get_module_logger
from glossa.i18n.loader import DECODERS, ContentLoader
from glossa.i18n.models import I18nOptions
from glossa.i18n.translator import Translator

logger = get_module_logger()


def options_from_settings(i18n_settings: I18nSettings) -> I18nOptions:
    """Build I18nOptions from I18nSettings.

    Raises:
        InvalidDelimitersError: If the configured delimiters are malformed.
    """
    return I18nOptions(
        locales_path=i18n_settings.locales_path,
        default_locale=i18n_settings.default_locale,
        current_locale=i18n_settings.current_locale,
        delimiters=tuple(i18n_settings.delimiters),
        throw_on_failure=i18n_settings.throw_on_failure,
        decoder=DECODERS[i18n_settings.decoder],
        extensions=tuple(i18n_settings.extensions),
        strict_variables=i18n_settings.strict_variables,
    )


def create_translator(
    locales_path: Optional[str] = None,
    i18n_settings: Optional[I18nSettings] = None,
    loader: Optional[ContentLoader] = None,
    preload: bool = False,
    **overrides: Any,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        locales_path: Overrides the configured locales path.
        i18n_settings: Settings to build from (default: global settings.i18n).
        loader: ContentLoader for locale entries (default: file system).
        preload: Whether to load all dictionaries immediately.
        **overrides: I18nOptions fields applied on top of the settings.

    Returns:
        Translator: Configured translator instance
    """
    options = options_from_settings(i18n_settings or default_settings.i18n)
    if locales_path is not None:
        overrides["locales_path"] = str(locales_path)
    if overrides:
        options = options.replace(**overrides)

    translator = Translator(options, loader=loader)

    if preload:
        translator.load()
        logger.info(
            "translator_created_with_preload",
            locales_path=options.locales_path,
            locale_count=len(translator.get_languages()),
        )
    else:
        logger.info("translator_created_lazy", locales_path=options.locales_path)

    return translator
