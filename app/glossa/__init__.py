"""glossa - translation key resolution and rendering."""

from glossa.i18n import Translator
from glossa.i18n.factory import create_translator
from glossa.i18n.service import TranslationService

__all__ = ["Translator", "create_translator", "TranslationService"]
