"""Resolution of (locale, key, variables) into display text.

Lookups never raise. Misses degrade to the default locale, then to the
literal key; template failures degrade to the raw variant text.
"""

import random
from typing import TYPE_CHECKING, Dict, List, Optional

from infrastructure.i18n.exceptions import TemplateError
from infrastructure.i18n.models import LocaleLike, Variables, locale_tag
from infrastructure.i18n.templating import has_placeholders, render
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.i18n.catalog import Catalog

logger = get_module_logger()


def choose_variant(variants: List[str], rng: random.Random) -> str:
    """Pick one variant uniformly at random."""
    return rng.choice(variants)


def resolve(
    catalog: "Catalog",
    locale: LocaleLike,
    key: str,
    variables: Optional[Variables] = None,
) -> str:
    """Resolve a key for a locale.

    Falls back once to the catalog's default locale when the locale is not
    loaded or has no variants for the key; the default locale itself falls
    back to returning the key.

    Args:
        catalog: Catalog holding the loaded bundles.
        locale: Requested locale.
        key: Dotted translation key.
        variables: Template variables. When None, variants are returned
            without rendering.

    Returns:
        Rendered text, raw variant text if rendering fails, or the key.
    """
    tag = locale_tag(locale)
    log = logger.bind(locale=tag, key=key)

    bundle = catalog.translations.get(tag)
    if bundle is None:
        if tag != catalog.default_locale:
            log.info("bundle_not_loaded", fallback_locale=catalog.default_locale)
            return resolve_default(catalog, key, variables)
        log.warning("bundle_not_loaded", result="key")
        return key

    variants = bundle.get(key)
    if not variants:
        if tag != catalog.default_locale:
            log.info("translation_not_found", fallback_locale=catalog.default_locale)
            return resolve_default(catalog, key, variables)
        log.warning("translation_not_found", result="key")
        return key

    raw = choose_variant(variants, catalog.rng)

    if variables is None or not has_placeholders(raw):
        return raw

    try:
        return render(raw, variables)
    except TemplateError as e:
        log.warning(
            "template_render_failed",
            error=str(e),
            available_variables=list(variables.keys()),
        )
        return raw


def resolve_default(
    catalog: "Catalog",
    key: str,
    variables: Optional[Variables] = None,
) -> str:
    """Resolve a key in the catalog's default locale."""
    return resolve(catalog, catalog.default_locale, key, variables)


def resolve_localizations(
    catalog: "Catalog",
    key: str,
    variables: Optional[Variables] = None,
) -> Dict[str, str]:
    """Resolve a key in every loaded locale.

    Returns:
        Dict mapping each loaded locale tag to its resolved text.
    """
    return {
        tag: resolve(catalog, tag, key, variables)
        for tag in list(catalog.translations)
    }
