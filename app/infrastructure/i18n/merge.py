"""Helpers for combining locale tables.

A locale table is a two-level mapping ``{locale: {key: phrase}}``. These
helpers never mutate their inputs.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n.errors import LocaleParseError


def flatten_phrases(
    data: Mapping[Any, Any],
    prefix: str = "",
    source: Optional[Path] = None,
) -> Dict[str, str]:
    """Flatten nested phrase mappings into dot-separated keys.

    ``{"nav": {"home": "Home"}}`` becomes ``{"nav.home": "Home"}``. Keys must
    be strings: YAML reads unquoted ``no``, ``yes``, ``on``, ``off`` and numbers
    as other types, and those keys have to be quoted.

    Args:
        data: Mapping of keys to phrases or nested mappings.
        prefix: Key prefix for the current nesting level.
        source: File the data came from, for error reporting.

    Returns:
        Flat dictionary of key -> phrase.

    Raises:
        LocaleParseError: If a key or a leaf value is not a string.
    """
    where = f" in {source}" if source else ""
    phrases: Dict[str, str] = {}
    for raw_key, value in data.items():
        if not isinstance(raw_key, str):
            raise LocaleParseError(
                f"Key {prefix}{raw_key!r}{where} must be a string, "
                f"got {type(raw_key).__name__}; quote it",
                path=source,
            )
        key = f"{prefix}{raw_key}"
        if isinstance(value, Mapping):
            phrases.update(flatten_phrases(value, prefix=f"{key}.", source=source))
        elif isinstance(value, str):
            phrases[key] = value
        else:
            raise LocaleParseError(
                f"Phrase for key '{key}'{where} must be a string, "
                f"got {type(value).__name__}",
                path=source,
            )
    return phrases


def merge_locale_tables(
    base: Mapping[str, Mapping[str, str]],
    override: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> Dict[str, Dict[str, str]]:
    """Merge two locale tables, ``override`` winning key by key.

    Locales present in only one table pass through unchanged; for locales in
    both, the dictionaries are unioned and conflicting keys take the value
    from ``override``.

    Args:
        base: Lower-precedence table (e.g. loaded from disk).
        override: Higher-precedence table (e.g. supplied by the caller).

    Returns:
        A new table; neither input is modified.
    """
    merged: Dict[str, Dict[str, str]] = {
        locale: dict(phrases) for locale, phrases in base.items()
    }
    for locale, phrases in (override or {}).items():
        merged.setdefault(locale, {}).update(phrases)
    return merged


def freeze_locale_table(
    table: Mapping[str, Mapping[str, str]],
) -> Mapping[str, Mapping[str, str]]:
    """Return a read-only view of a copy of ``table``, inner dictionaries included."""
    return MappingProxyType(
        {locale: MappingProxyType(dict(phrases)) for locale, phrases in table.items()}
    )
