"""Translation catalog infrastructure settings."""

from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation catalog configuration.

    Controls where JSON bundles are discovered and which locale is used
    as the single fallback hop when a lookup misses.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used for fallback (default: en-US)
        I18N_LOCALES_DIR: Directory containing <locale>.json bundles
            (default: the locales bundled with infrastructure.i18n)
        I18N_LOCALE_ALIASES: JSON object mapping an alias locale to the
            locale whose file backs it, e.g. {"en-GB": "en-US"}

    Example:
        ```python
        from infrastructure.configuration import settings

        default_locale = settings.i18n.default_locale
        aliases = settings.i18n.locale_aliases
        ```
    """

    default_locale: str = Field(
        default="en-US",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when a lookup misses in the requested locale",
    )
    locales_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory containing <locale>.json translation bundles",
    )
    locale_aliases: Dict[str, str] = Field(
        default_factory=dict,
        alias="I18N_LOCALE_ALIASES",
        description="Alias locale -> source locale whose bundle file is shared",
    )

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject blank default locales."""
        v = v.strip()
        if not v:
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return v
