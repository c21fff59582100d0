"""Translation service for looking up and interpolating translated phrases.

A ``Translator`` owns a frozen locale table and resolves keys with the
fallback order: requested locale, then default locale, then the key itself.
"""

import re
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.merge import freeze_locale_table
from infrastructure.i18n.models import DEFAULT_LOCALE, LocaleTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# %{name} (Polyglot style) and {{name}}
_PLACEHOLDER_PATTERN = re.compile(r"%\{(\w+)\}|\{\{\s*(\w+)\s*\}\}")


class Translator:
    """Read-only translation lookup over a merged locale table.

    Instances are built by ``infrastructure.i18n.initialize`` once the table
    has been validated. The table is copied and frozen on construction, so a
    translator can be shared freely between threads and tasks.

    Attributes:
        locales: Read-only mapping ``{locale: {key: phrase}}``.
        default_locale: Locale used when none is requested and as fallback.
    """

    def __init__(self, locales: LocaleTable, default_locale: str = DEFAULT_LOCALE):
        self._locales = freeze_locale_table(locales)
        self._default_locale = default_locale

    @property
    def locales(self) -> LocaleTable:
        return self._locales

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def available_locales(self) -> List[str]:
        """Sorted list of locale codes with a dictionary."""
        return sorted(self._locales)

    def translate(
        self,
        key: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        locale: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate ``key`` into the requested locale.

        Resolution order:
        1. The requested locale (``locale`` or ``options["locale"]``), or the
           default locale when none is requested
        2. The default locale
        3. ``key`` itself

        Placeholders ``%{name}`` and ``{{name}}`` in the phrase are replaced
        with values from ``variables`` and from the remaining entries of
        ``options``. Unknown placeholders are left as they are.

        Args:
            key: Translation key.
            options: Optional mapping holding ``locale`` and/or interpolation
                values, e.g. ``{"locale": "it", "name": "Ada"}``.
            locale: Requested locale; takes precedence over ``options``.
            variables: Interpolation values; take precedence over ``options``.

        Returns:
            The translated phrase, or ``key`` when no dictionary has it.
        """
        values: Dict[str, Any] = dict(options or {})
        requested = locale or values.pop("locale", None) or self._default_locale
        values.pop("locale", None)
        if variables:
            values.update(variables)

        phrase = self._lookup(key, requested)
        if phrase is None:
            return key

        if values:
            phrase = self._interpolate(phrase, values)
        return phrase

    t = translate

    def has(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether ``key`` resolves without falling back to the key itself.

        Args:
            key: Translation key.
            locale: Requested locale (default: the default locale).

        Returns:
            True if the requested or the default locale holds the key.
        """
        return self._lookup(key, locale or self._default_locale) is not None

    def _lookup(self, key: str, locale: str) -> Optional[str]:
        phrases = self._locales.get(locale)
        if phrases is not None and key in phrases:
            return phrases[key]

        if locale != self._default_locale:
            default_phrases = self._locales.get(self._default_locale, {})
            if key in default_phrases:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=locale,
                    fallback_locale=self._default_locale,
                )
                return default_phrases[key]

        logger.debug("translation_not_found", key=key, locale=locale)
        return None

    @staticmethod
    def _interpolate(phrase: str, values: Mapping[str, Any]) -> str:
        """Replace known placeholders in ``phrase`` with ``values``."""

        def replace(match: "re.Match[str]") -> str:
            name = match.group(1) or match.group(2)
            if name in values:
                return str(values[name])
            return match.group(0)

        return _PLACEHOLDER_PATTERN.sub(replace, phrase)

    def __repr__(self) -> str:
        return (
            f"Translator(default_locale={self._default_locale!r}, "
            f"locales={self.available_locales!r})"
        )
