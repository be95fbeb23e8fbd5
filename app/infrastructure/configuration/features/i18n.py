"""Language and translation feature settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


DEFAULT_CRITICAL_TRANSLATION_KEYS = [
    "nav.courses",
    "nav.instructors",
    "nav.blog",
    "nav.enrollNow",
    "common.loading",
    "common.error",
]


class I18nSettings(FeatureSettings):
    """Configuration for language session handling and cache pre-warming.

    Environment Variables:
        LANGUAGE_STORAGE_KEY: Session storage key holding the chosen language
        CRITICAL_TRANSLATION_KEYS: JSON list of keys checked after a translation publish

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        storage_key = settings.i18n.LANGUAGE_STORAGE_KEY
        ```
    """

    LANGUAGE_STORAGE_KEY: str = Field(
        default="aistudio555_language", alias="LANGUAGE_STORAGE_KEY"
    )
    CRITICAL_TRANSLATION_KEYS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CRITICAL_TRANSLATION_KEYS),
        alias="CRITICAL_TRANSLATION_KEYS",
    )
