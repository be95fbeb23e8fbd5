"""Infrastructure modules for the content gateway.

Centralized infrastructure components:
- configuration: Settings management (Settings, ContentServiceSettings, I18nSettings)
- logging: Structured logging (get_module_logger, logger, bind_request_context)
- i18n: Supported languages, locale negotiation and the session LanguageManager
- cache: TTL cache with request coalescing
- clients: Content service client (ContentClient)
- services: Dependency injection services (SettingsDep, ContentClientDep, get_settings)
"""

# Configuration
from infrastructure.configuration import Settings

# Observability
from infrastructure.logging import get_module_logger, logger

# Dependency Injection Services
from infrastructure.services import (
    ContentClientDep,
    SettingsDep,
    get_content_client,
    get_settings,
)

__all__ = [
    # Configuration
    "Settings",
    # Observability
    "get_module_logger",
    "logger",
    # Dependency Injection Services
    "SettingsDep",
    "ContentClientDep",
    "get_settings",
    "get_content_client",
]
