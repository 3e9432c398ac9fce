"""Translation service for dependency injection.

Provides a class-based interface to the engine for easier DI and testing.
"""

from typing import Any, List, Optional, Sequence, Union

from glossa.i18n.factory import create_translator
from glossa.i18n.translator import Scope, Translator


class TranslationService:
    """Class-based translation service.

    A thin facade: all work is delegated to the underlying Translator created
    by the factory.

    Usage:
        service = TranslationService()
        service.translate("common.welcome", {"name": "Ada"})
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: Union[str, Sequence[str]],
        scope: Scope = None,
        default: Optional[str] = None,
    ) -> str:
        return self._translator.translate(key, scope, default)

    def plural(self, count: Union[int, float], key: str, scope: Scope = None) -> str:
        return self._translator.plural(count, key, scope)

    def raw(self, key: str) -> Any:
        return self._translator.raw(key)

    def list_translations(self, key: str, scope: Scope = None) -> List[str]:
        """Render ``key`` in every locale that has it."""
        return self._translator.list(key, scope)

    def get_languages(self) -> List[str]:
        return self._translator.get_languages()

    def set_locale(self, locale: str) -> None:
        """Switch the current locale of the underlying translator."""
        self._translator.locale = locale

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator
