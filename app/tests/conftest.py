"""Shared pytest fixtures.

The application package root (app/) is put on sys.path by the pytest
configuration in pyproject.toml.
"""

import pytest

from infrastructure.configuration import I18nSettings


@pytest.fixture
def i18n_settings(tmp_path):
    """I18nSettings pointing at an empty temporary locales directory."""
    return I18nSettings(
        I18N_DEFAULT_LOCALE="en-US",
        I18N_LOCALES_DIR=str(tmp_path),
        I18N_LOCALE_ALIASES={},
    )
