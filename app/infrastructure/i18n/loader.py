"""Locale loading interface and implementations.

Defines the contract for loading locale dictionaries and provides a
directory-based loader where each file holds one locale.
"""

import json
from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from infrastructure.i18n.errors import LocaleParseError
from infrastructure.i18n.merge import flatten_phrases
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleLoader(ABC):
    """Abstract base for locale loaders.

    Implementations must define how to discover and parse dictionaries for
    the locales they provide.
    """

    @abstractmethod
    def load(self, locale: str) -> Dict[str, str]:
        """Load the dictionary for a specific locale.

        Args:
            locale: Locale code to load.

        Returns:
            Flat dictionary of key -> phrase.

        Raises:
            FileNotFoundError: If no dictionary exists for the locale.
            LocaleParseError: If the dictionary is malformed.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, str]]:
        """Load dictionaries for every locale the loader can find.

        Returns:
            Dict mapping locale code to its dictionary.
        """
        pass


class YAMLLocaleLoader(LocaleLoader):
    """Loader for a directory of per-locale dictionary files.

    Each file is named ``<locale>.<ext>``; the name without extension is the
    locale code. ``.json`` files are read with the json module, everything
    else with ``yaml.safe_load``. Hidden files and subdirectories are skipped.

    A missing directory is not an error: it simply provides no locales.

    Attributes:
        locales_path: Directory containing the dictionary files, or None.
    """

    def __init__(self, locales_path: Optional[Path] = None):
        """Initialize the loader.

        Args:
            locales_path: Directory with dictionary files. ``None`` or a path
                that does not exist yields no locales.
        """
        self.locales_path = Path(locales_path) if locales_path is not None else None

    @property
    def exists(self) -> bool:
        return self.locales_path is not None and self.locales_path.exists()

    def load(self, locale: str) -> Dict[str, str]:
        """Load the dictionary for one locale.

        Files sharing the same stem are merged in filename order, later files
        overriding earlier ones.

        Raises:
            FileNotFoundError: If no file exists for the locale.
            LocaleParseError: If a file cannot be parsed.
        """
        files = self._discover().get(locale)
        if not files:
            raise FileNotFoundError(
                f"No dictionary file found for locale {locale} in {self.locales_path}"
            )
        return self._load_files(locale, files)

    def load_all(self) -> Dict[str, Dict[str, str]]:
        """Load every dictionary in the directory.

        Returns:
            Dict mapping locale code to dictionary; empty when the directory
            is not configured or does not exist.

        Raises:
            LocaleParseError: If any file cannot be parsed.
            OSError: If the directory exists but cannot be listed.
        """
        if not self.exists:
            logger.info(
                "locales_directory_missing",
                locales_path=str(self.locales_path) if self.locales_path else None,
            )
            return {}

        result = {
            locale: self._load_files(locale, files)
            for locale, files in sorted(self._discover().items())
        }

        logger.info(
            "locales_loaded",
            locales_path=str(self.locales_path),
            locales=sorted(result),
        )
        return result

    def _discover(self) -> Dict[str, List[Path]]:
        """Group dictionary files in the directory by locale code."""
        if not self.exists:
            return {}

        files: Dict[str, List[Path]] = defaultdict(list)
        for path in sorted(self.locales_path.iterdir()):
            if path.name.startswith(".") or not path.is_file():
                continue
            files[path.stem].append(path)
        return dict(files)

    def _load_files(self, locale: str, files: List[Path]) -> Dict[str, str]:
        if len(files) > 1:
            logger.warning(
                "duplicate_locale_files",
                locale=locale,
                files=[str(f) for f in files],
            )

        phrases: Dict[str, str] = {}
        for path in files:
            phrases.update(self._read_file(path))
        return phrases

    def _read_file(self, path: Path) -> Dict[str, str]:
        """Parse one dictionary file.

        Raises:
            LocaleParseError: On syntax errors, undecodable content, a
                document that is not a mapping, or a non-string phrase.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    content = f.read()
                    data = json.loads(content) if content.strip() else None
                else:
                    data = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("locale_parse_error", file=str(path), error=str(e))
            raise LocaleParseError(f"Failed to parse {path}: {e}", path=path) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            logger.error(
                "invalid_locale_format",
                file=str(path),
                expected="dict",
                got=type(data).__name__,
            )
            raise LocaleParseError(
                f"Dictionary file {path} must contain a mapping, "
                f"got {type(data).__name__}",
                path=path,
            )

        try:
            return flatten_phrases(data, source=path)
        except LocaleParseError as e:
            logger.error("invalid_locale_phrase", file=str(path), error=str(e))
            raise


def load_locales(locales_path: Optional[Path] = None) -> Dict[str, Dict[str, str]]:
    """Load every locale dictionary found in ``locales_path``.

    Args:
        locales_path: Directory with one file per locale, or None.

    Returns:
        Dict mapping locale code to dictionary; empty when the directory is
        absent.
    """
    return YAMLLocaleLoader(locales_path).load_all()
