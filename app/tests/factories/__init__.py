"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_bundle_data,
    make_catalog,
    write_bundle,
)

__all__ = [
    "make_bundle_data",
    "make_catalog",
    "write_bundle",
]
