"""glossa configuration settings."""

from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translation engine configuration.

    Supplies the defaults a Translator is built with when created through
    ``glossa.i18n.factory.create_translator``.

    Environment Variables:
        I18N_LOCALES_PATH: Directory holding one dictionary file per locale
        I18N_DEFAULT_LOCALE: Fallback locale consulted when the active one is missing
        I18N_CURRENT_LOCALE: Active locale
        I18N_DELIMITERS: JSON list with the opening and closing placeholder markers
        I18N_THROW_ON_FAILURE: Raise on missing translations instead of echoing the key
        I18N_DECODER: Dictionary file format, 'json' or 'yaml'
        I18N_EXTENSIONS: JSON list of accepted file extensions (empty = accept all)
        I18N_STRICT_VARIABLES: Raise when a template references an unknown variable

    Example:
        ```python
        from glossa.core.config import settings

        if settings.i18n.throw_on_failure:
            ...
        ```
    """

    locales_path: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_PATH",
        description="Directory containing the locale dictionary files",
    )
    default_locale: Optional[str] = Field(
        default=None,
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when the current locale has no dictionary",
    )
    current_locale: Optional[str] = Field(
        default=None,
        alias="I18N_CURRENT_LOCALE",
        description="Locale used for lookups",
    )
    delimiters: List[str] = Field(
        default_factory=lambda: ["{{", "}}"],
        alias="I18N_DELIMITERS",
        description="Opening and closing interpolation markers",
    )
    throw_on_failure: bool = Field(
        default=False,
        alias="I18N_THROW_ON_FAILURE",
        description="Raise miss errors instead of returning the key",
    )
    decoder: Literal["json", "yaml"] = Field(
        default="json",
        alias="I18N_DECODER",
        description="Format of the dictionary files",
    )
    extensions: List[str] = Field(
        default_factory=lambda: [".json"],
        alias="I18N_EXTENSIONS",
        description="Accepted dictionary file extensions, empty to accept all",
    )
    strict_variables: bool = Field(
        default=False,
        alias="I18N_STRICT_VARIABLES",
        description="Raise when a template variable is missing from the scope",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """glossa settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library runs in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
