"""Factory functions for creating i18n components.

Provides convenience functions for initializing catalogs with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Dict, Optional

from infrastructure.configuration import I18nSettings
from infrastructure.configuration import settings as app_settings
from infrastructure.i18n.catalog import Catalog
from infrastructure.i18n.models import LocaleLike, locale_tag
from infrastructure.logging import get_module_logger

logger = get_module_logger()

BUNDLE_SUFFIX = ".json"


def default_locales_dir() -> Path:
    """Locate the locales directory shipped inside this package.

    The JSON bundles are installed as package data next to this module,
    so the directory exists both in a source checkout and in an installed
    distribution.
    """
    return Path(__file__).resolve().parent / "locales"


def create_catalog(
    locales_dir: Optional[Path] = None,
    default_locale: Optional[LocaleLike] = None,
    aliases: Optional[Dict[str, str]] = None,
    settings: Optional[I18nSettings] = None,
) -> Catalog:
    """Create a Catalog loaded with every bundle in a directory.

    Each <locale>.json file is loaded under <locale>. Aliases load the
    source locale's file under another tag, so one file backs several
    locales while being parsed once.

    Args:
        locales_dir: Directory of JSON bundles (default: settings, then bundled locales)
        default_locale: Fallback locale (default: settings.default_locale)
        aliases: Alias locale -> source locale (default: settings.locale_aliases)
        settings: I18nSettings to read defaults from (default: app settings)

    Returns:
        Catalog: Loaded catalog

    Raises:
        ValueError: If locales_dir does not exist
        BundleReadError: If an alias points at a locale with no file
        BundleParseError: If a bundle is not a JSON object

    Usage:
        # Use defaults (bundled locales, en-US fallback)
        catalog = create_catalog()

        # Share the en-US file with en-GB
        catalog = create_catalog(aliases={"en-GB": "en-US"})
    """
    settings = settings or app_settings.i18n

    if locales_dir is None:
        locales_dir = settings.locales_dir or default_locales_dir()
    locales_dir = Path(locales_dir)
    if not locales_dir.is_dir():
        raise ValueError(f"Locales directory not found: {locales_dir}")

    if default_locale is None:
        default_locale = settings.default_locale
    if aliases is None:
        aliases = settings.locale_aliases

    catalog = Catalog(default_locale=default_locale)

    for bundle_file in sorted(locales_dir.glob(f"*{BUNDLE_SUFFIX}")):
        catalog.load_bundle(bundle_file.stem, bundle_file)

    for alias, source in aliases.items():
        source_file = locales_dir / f"{locale_tag(source)}{BUNDLE_SUFFIX}"
        catalog.load_bundle(alias, source_file)

    logger.info(
        "catalog_created",
        locales_dir=str(locales_dir),
        default_locale=catalog.default_locale,
        locale_count=len(catalog.translations),
        source_count=len(catalog.loaded_sources),
    )

    return catalog
