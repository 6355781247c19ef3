"""Feature-level fixtures for i18n system tests.

Provides JSON bundle directories and loaded catalogs for lookup scenarios.
"""

import random

import pytest

from infrastructure.i18n import Catalog, Locale
from tests.factories.i18n import make_bundle_data, write_bundle


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample JSON bundles.

    Returns a directory structure like:
    - en-US.json
    - ru.json
    - de.json
    """
    write_bundle(
        tmp_path,
        "en-US.json",
        make_bundle_data("Hello, {{.name}}!", ["See you!", "Goodbye!"]),
    )
    write_bundle(
        tmp_path,
        "ru.json",
        make_bundle_data("Привет, {{.name}}!", ["Пока!", "До свидания!"]),
    )
    write_bundle(
        tmp_path,
        "de.json",
        make_bundle_data("Hallo, {{.name}}!", ["Tschüss!", "Auf Wiedersehen!"]),
    )
    return tmp_path


@pytest.fixture
def catalog():
    """Create an empty Catalog with a seeded random source."""
    return Catalog(rng=random.Random(42))


@pytest.fixture
def loaded_catalog(catalog, temp_locales_dir):
    """Catalog with en-US, ru and de loaded and en-US as default."""
    catalog.load_bundle(Locale.RU, temp_locales_dir / "ru.json")
    catalog.load_bundle(Locale.EN_US, temp_locales_dir / "en-US.json")
    catalog.load_bundle(Locale.DE, temp_locales_dir / "de.json")
    catalog.set_default(Locale.EN_US)
    return catalog
