"""Data models for the i18n plugin.

Defines the locale table type and the options accepted at registration.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from infrastructure.i18n.merge import flatten_phrases

DEFAULT_LOCALE = "en"

# {locale_code: {translation_key: phrase}}
LocaleTable = Mapping[str, Mapping[str, str]]


class I18nOptions(BaseModel):
    """Options used to build a translator.

    Field names accept both snake_case and the camelCase aliases
    (``defaultLocale``, ``localesPath``), so a plain mapping written either
    way validates.

    Attributes:
        default_locale: Locale used when none is requested and as the
            fallback for missing keys. Must have a dictionary once merged.
        locales_path: Directory with one dictionary file per locale. A
            missing directory counts as zero on-disk locales.
        locales: In-memory dictionaries, ``{locale: {key: phrase}}``. These
            override on-disk phrases key by key. Nested phrase mappings are
            flattened into dotted keys.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    default_locale: str = Field(
        default=DEFAULT_LOCALE, alias="defaultLocale", min_length=1
    )
    locales_path: Optional[Path] = Field(default=None, alias="localesPath")
    locales: Optional[Dict[str, Dict[str, str]]] = None

    @field_validator("locales", mode="before")
    @classmethod
    def flatten_locales(cls, v: Any) -> Any:
        """Flatten nested phrase mappings of each supplied locale."""
        if v is None:
            return None
        if not isinstance(v, Mapping):
            raise ValueError("locales must be a mapping of locale -> dictionary")

        flattened = {}
        for locale, phrases in v.items():
            if not isinstance(locale, str):
                raise ValueError(f"Locale code {locale!r} must be a string")
            if not isinstance(phrases, Mapping):
                raise ValueError(f"Dictionary for locale '{locale}' must be a mapping")
            flattened[locale] = flatten_phrases(phrases)
        return flattened

    @classmethod
    def from_settings(cls, settings: Any) -> "I18nOptions":
        """Build options from the application settings (``settings.i18n``).

        Args:
            settings: Application ``Settings`` instance.

        Returns:
            I18nOptions with default locale and locales path from the environment.
        """
        return cls(
            default_locale=settings.i18n.DEFAULT_LOCALE,
            locales_path=settings.i18n.LOCALES_PATH,
        )
