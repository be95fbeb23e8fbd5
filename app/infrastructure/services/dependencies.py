"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.clients.content import ContentClient
from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageRegistry, LocaleResolver
from infrastructure.services.providers import (
    get_settings,
    get_content_client,
    get_language_registry,
    get_locale_resolver,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Content service client - shared cache across requests
ContentClientDep = Annotated[ContentClient, Depends(get_content_client)]

# Supported languages
LanguageRegistryDep = Annotated[LanguageRegistry, Depends(get_language_registry)]

# Accept-Language / query string locale resolution
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

__all__ = [
    "SettingsDep",
    "ContentClientDep",
    "LanguageRegistryDep",
    "LocaleResolverDep",
]
