"""Test data factories for the translation engine.

Provides deterministic builders for:
- locale dictionaries
- I18nOptions
- locale directories on disk
"""

import json
from pathlib import Path
from typing import Dict, Optional

import yaml

from glossa.i18n import I18nOptions


def make_dictionary(locale: str = "en") -> dict:
    """Create a locale dictionary with flat, nested, list and plural entries.

    Args:
        locale: "en", "ru" or "de".

    Returns:
        Dictionary tree for the locale.
    """
    if locale == "ru":
        return {
            "hello": "Привет",
            "greeting": "Привет, {{name}}!",
            "apples": {
                "one": "{{count}} яблоко",
                "few": "{{count}} яблока",
                "many": "{{count}} яблок",
            },
            "menu": {"title": "Меню"},
        }
    if locale == "de":
        return {
            "hello": "Hallo",
            "only_de": "Nur auf Deutsch",
        }
    return {
        "hello": "Hello",
        "greeting": "Hello, {{name}}!",
        "apples": {
            "one": "{{count}} apple",
            "other": "{{count}} apples",
        },
        "menu": {
            "title": "Menu",
            "items": [{"label": "Open"}, {"label": "Close"}],
        },
        "only_en": "English only",
    }


def write_locales(
    directory: Path,
    dictionaries: Optional[Dict[str, dict]] = None,
    fmt: str = "json",
) -> Path:
    """Write one file per locale into ``directory``.

    Args:
        directory: Target directory (created if needed).
        dictionaries: Locale -> dictionary (default: en, ru, de).
        fmt: "json" or "yaml".

    Returns:
        The directory.
    """
    directory.mkdir(parents=True, exist_ok=True)
    if dictionaries is None:
        dictionaries = {locale: make_dictionary(locale) for locale in ("en", "ru", "de")}

    for locale, dictionary in dictionaries.items():
        if fmt == "yaml":
            with open(directory / f"{locale}.yml", "w", encoding="utf-8") as f:
                yaml.safe_dump(dictionary, f, allow_unicode=True)
        else:
            with open(directory / f"{locale}.json", "w", encoding="utf-8") as f:
                json.dump(dictionary, f, ensure_ascii=False)

    return directory


def make_options(locales_path: Optional[Path] = None, **overrides) -> I18nOptions:
    """Create I18nOptions with en as current and default locale."""
    values = {
        "locales_path": str(locales_path) if locales_path is not None else None,
        "current_locale": "en",
        "default_locale": "en",
    }
    values.update(overrides)
    return I18nOptions(**values)
