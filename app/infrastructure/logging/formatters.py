"""Structlog processors that stamp deployment context onto log entries.

Usage:
    from infrastructure.logging.formatters import add_catalog_context

Dependencies:
    - structlog processors
"""

from typing import Any


def add_catalog_context(environment: str, default_locale: str):
    """Create a processor that adds deployment and locale info to log entries.

    Values already bound on the entry are left untouched, so a catalog
    logging its own default locale is not overwritten by the configured one.

    Args:
        environment: Environment name (e.g., "production", "staging").
        default_locale: Configured default locale tag.

    Returns:
        A structlog processor function.

    Example:
        add_catalog_context(settings.environment, settings.i18n.default_locale)
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("environment", environment)
        event_dict.setdefault("default_locale", default_locale)
        return event_dict

    return processor
