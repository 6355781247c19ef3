"""Translation catalog: loaded bundles per locale plus the default locale.

The catalog is an explicitly constructed object owned by the host. It is not
thread-safe; hosts sharing one across threads must serialize access.
"""

import json
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from infrastructure.i18n.exceptions import BundleParseError, BundleReadError
from infrastructure.i18n.flattener import flatten
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    Bundle,
    LocaleLike,
    Variables,
    locale_tag,
)
from infrastructure.i18n.resolver import (
    resolve,
    resolve_default,
    resolve_localizations,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Shared by every catalog that is not given its own source
_shared_random = random.Random()


class Catalog:
    """Locale -> bundle store with single-hop fallback lookups.

    Attributes:
        default_locale: Locale tag used when a lookup misses.
        translations: Locale tag -> Bundle. Bundles are shared mutable
            state; prefer upsert() for changes.
        loaded_sources: File path -> Bundle, so a file backing several
            locales is read and parsed once.
        rng: Random source for variant selection.
    """

    def __init__(
        self,
        default_locale: LocaleLike = DEFAULT_LOCALE,
        rng: Optional[random.Random] = None,
    ):
        """Initialize an empty catalog.

        Args:
            default_locale: Fallback locale (default: en-US).
            rng: Optional random source, mainly for tests.
        """
        self.default_locale: str = locale_tag(default_locale)
        self.translations: Dict[str, Bundle] = {}
        self.loaded_sources: Dict[str, Bundle] = {}
        self.rng = rng or _shared_random

    def set_default(self, locale: LocaleLike) -> None:
        """Set the fallback locale. The locale need not be loaded."""
        self.default_locale = locale_tag(locale)
        logger.info("default_locale_set", locale=self.default_locale)

    def load_bundle(self, locale: LocaleLike, path: Union[str, Path]) -> None:
        """Load a JSON bundle file for a locale.

        A path already parsed for any locale is reused without touching the
        file again. Loading a locale twice replaces its bundle.

        Args:
            locale: Locale the bundle serves.
            path: Path to a UTF-8 JSON file whose top level is an object.

        Raises:
            BundleReadError: If the file cannot be read.
            BundleParseError: If the content is not a JSON object.
        """
        tag = locale_tag(locale)
        source = str(Path(path))

        cached = self.loaded_sources.get(source)
        if cached is not None:
            self.translations[tag] = cached
            logger.info("bundle_loaded", locale=tag, path=source, cached=True)
            return

        bundle = flatten(self._read_source(source))
        self.loaded_sources[source] = bundle
        self.translations[tag] = bundle
        logger.info(
            "bundle_loaded",
            locale=tag,
            path=source,
            cached=False,
            key_count=len(bundle),
        )

    @staticmethod
    def _read_source(source: str) -> Dict[str, Any]:
        try:
            with open(source, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            logger.error("bundle_read_failed", path=source, error=str(e))
            raise BundleReadError(f"Failed to read bundle '{source}': {e}") from e
        except UnicodeDecodeError as e:
            logger.error("bundle_parse_failed", path=source, error=str(e))
            raise BundleParseError(f"Failed to parse bundle '{source}': {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("bundle_parse_failed", path=source, error=str(e))
            raise BundleParseError(f"Failed to parse bundle '{source}': {e}") from e

        if not isinstance(data, dict):
            logger.error(
                "bundle_parse_failed",
                path=source,
                expected="object",
                found=type(data).__name__,
            )
            raise BundleParseError(
                f"Failed to parse bundle '{source}': top level must be an object"
            )

        return data

    def upsert(
        self, locale: LocaleLike, key: str, variants: Union[str, List[str]]
    ) -> None:
        """Insert or replace the variants of one key.

        Creates the locale's bundle when it is not loaded. The bundle may be
        shared with other locales loaded from the same file, and they see
        the change too.

        Raises:
            ValueError: If no variants are given.
        """
        if isinstance(variants, str):
            variants = [variants]
        if not variants:
            raise ValueError(f"At least one variant is required for key {key}")

        tag = locale_tag(locale)
        self.translations.setdefault(tag, {})[key] = list(variants)

    def has_key(self, locale: LocaleLike, key: str) -> bool:
        """Check if a locale has variants for key, without fallback."""
        bundle = self.translations.get(locale_tag(locale))
        return bool(bundle and bundle.get(key))

    def get_bundle(self, locale: LocaleLike) -> Optional[Bundle]:
        """Get the bundle loaded for a locale, or None."""
        return self.translations.get(locale_tag(locale))

    def available_locales(self) -> List[str]:
        """Get the tags of all loaded locales."""
        return list(self.translations.keys())

    def get(
        self, locale: LocaleLike, key: str, variables: Optional[Variables] = None
    ) -> str:
        """Translate key for locale. Never raises."""
        return resolve(self, locale, key, variables)

    def get_default(self, key: str, variables: Optional[Variables] = None) -> str:
        """Translate key in the default locale. Never raises."""
        return resolve_default(self, key, variables)

    def get_localizations(
        self, key: str, variables: Optional[Variables] = None
    ) -> Dict[str, str]:
        """Translate key in every loaded locale."""
        return resolve_localizations(self, key, variables)
