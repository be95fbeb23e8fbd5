"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the content
service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    ContentServiceSettings: Content service settings class (for testing)
    I18nSettings: Language feature settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    base_url = settings.content.CONTENT_SERVICE_URL
    storage_key = settings.i18n.LANGUAGE_STORAGE_KEY

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.configuration.integrations.content import ContentServiceSettings

__all__ = ["Settings", "ContentServiceSettings", "I18nSettings"]
