"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    ContentClientDep,
    LanguageRegistryDep,
    LocaleResolverDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_content_client,
    get_language_registry,
    get_locale_resolver,
)

__all__ = [
    "SettingsDep",
    "ContentClientDep",
    "LanguageRegistryDep",
    "LocaleResolverDep",
    "get_settings",
    "get_content_client",
    "get_language_registry",
    "get_locale_resolver",
]
