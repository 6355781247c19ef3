"""Fixtures for infrastructure.logging tests."""

import pytest

from infrastructure.configuration import I18nSettings, Settings


@pytest.fixture
def staging_settings(tmp_path):
    """Non-production Settings with a French default locale."""
    return Settings(
        PREFIX="staging-",
        LOG_LEVEL="DEBUG",
        i18n=I18nSettings(
            I18N_DEFAULT_LOCALE="fr",
            I18N_LOCALES_DIR=str(tmp_path),
            I18N_LOCALE_ALIASES={},
        ),
    )
