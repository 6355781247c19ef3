"""i18n system - locale-aware text resolution.

Loads JSON bundles per locale, flattens nested keys, picks a random variant
per lookup and renders {{ }} templates, falling back to the default locale
and then to the key itself.

Main components:
- models: Locale, Bundle, tagged JSON nodes
- flattener: flatten() for nested bundle structures
- catalog: Catalog holding bundles and the default locale
- resolver: fallback and template-aware lookups
- factory: create_catalog() from a locales directory
"""

from infrastructure.i18n.catalog import Catalog
from infrastructure.i18n.exceptions import (
    BundleParseError,
    BundleReadError,
    I18nError,
    TemplateError,
)
from infrastructure.i18n.factory import create_catalog
from infrastructure.i18n.flattener import flatten
from infrastructure.i18n.models import Bundle, Locale, Variables, locale_tag

__all__ = [
    "Catalog",
    "Locale",
    "Bundle",
    "Variables",
    "locale_tag",
    "flatten",
    "create_catalog",
    "I18nError",
    "BundleReadError",
    "BundleParseError",
    "TemplateError",
]
