"""Test data factories for deterministic test data generation."""

from tests.factories.content import (
    make_collection,
    make_media_record,
    make_navigation_record,
    make_response,
    make_translation_record,
)

__all__ = [
    "make_collection",
    "make_media_record",
    "make_navigation_record",
    "make_response",
    "make_translation_record",
]
