"""Tests for glossa.i18n.factory and glossa.i18n.service modules."""

import pytest

from glossa import TranslationService, create_translator
from glossa.core.config import I18nSettings, Settings
from glossa.i18n import InvalidDelimitersError, yaml_decoder
from glossa.i18n.factory import options_from_settings
from tests.factories.i18n import write_locales


class TestI18nSettings:
    """Tests for I18nSettings."""

    def test_defaults(self, monkeypatch):
        for name in ("I18N_LOCALES_PATH", "I18N_DELIMITERS", "I18N_DECODER"):
            monkeypatch.delenv(name, raising=False)
        i18n_settings = I18nSettings()
        assert i18n_settings.locales_path is None
        assert i18n_settings.delimiters == ["{{", "}}"]
        assert i18n_settings.decoder == "json"
        assert i18n_settings.extensions == [".json"]

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("I18N_LOCALES_PATH", str(tmp_path))
        monkeypatch.setenv("I18N_CURRENT_LOCALE", "ru")
        monkeypatch.setenv("I18N_DELIMITERS", '["<%", "%>"]')
        monkeypatch.setenv("I18N_THROW_ON_FAILURE", "true")
        monkeypatch.setenv("I18N_DECODER", "yaml")
        i18n_settings = I18nSettings()
        assert i18n_settings.locales_path == str(tmp_path)
        assert i18n_settings.current_locale == "ru"
        assert i18n_settings.delimiters == ["<%", "%>"]
        assert i18n_settings.throw_on_failure is True
        assert i18n_settings.decoder == "yaml"

    def test_settings_aggregates_i18n(self):
        settings = Settings(PREFIX="dev-")
        assert isinstance(settings.i18n, I18nSettings)
        assert settings.is_production is False


class TestOptionsFromSettings:
    """Tests for options_from_settings()."""

    def test_maps_fields(self):
        options = options_from_settings(
            I18nSettings(
                locales_path="/srv/locales",
                current_locale="en",
                decoder="yaml",
                extensions=[".yml"],
            )
        )
        assert options.locales_path == "/srv/locales"
        assert options.current_locale == "en"
        assert options.decoder is yaml_decoder
        assert options.extensions == (".yml",)

    def test_invalid_delimiters(self):
        with pytest.raises(InvalidDelimitersError):
            options_from_settings(I18nSettings(delimiters=["%", "%"]))


class TestCreateTranslator:
    """Tests for create_translator()."""

    def test_lazy_by_default(self, locales_dir):
        translator = create_translator(
            locales_path=locales_dir,
            i18n_settings=I18nSettings(current_locale="en"),
        )
        assert not translator.store.is_loaded
        assert translator.translate("hello") == "Hello"

    def test_preload(self, locales_dir):
        translator = create_translator(
            locales_path=locales_dir,
            i18n_settings=I18nSettings(),
            preload=True,
        )
        assert translator.store.is_loaded
        assert translator.get_languages() == ["de", "en", "ru"]

    def test_overrides(self, tmp_path):
        write_locales(tmp_path, {"en": {"hello": "Hello"}}, fmt="yaml")
        translator = create_translator(
            i18n_settings=I18nSettings(
                locales_path=str(tmp_path), decoder="yaml", extensions=[".yml"]
            ),
            current_locale="en",
        )
        assert translator.translate("hello") == "Hello"


class TestTranslationService:
    """Tests for TranslationService facade."""

    @pytest.fixture
    def service(self, translator):
        return TranslationService(translator)

    def test_translate(self, service):
        assert service.translate("greeting", {"name": "Ada"}) == "Hello, Ada!"

    def test_plural(self, service):
        assert service.plural(2, "apples", {"count": 2}) == "2 apples"

    def test_raw(self, service):
        assert service.raw("menu.title") == "Menu"

    def test_list_translations(self, service):
        assert service.list_translations("only_en") == ["English only"]

    def test_set_locale(self, service):
        service.set_locale("ru")
        assert service.translate("hello") == "Привет"
        assert service.translator.locale == "ru"

    def test_get_languages(self, service):
        assert service.get_languages() == ["de", "en", "ru"]
