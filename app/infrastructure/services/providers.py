"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.clients.content import ContentClient
from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageRegistry, LocaleResolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_language_registry() -> LanguageRegistry:
    """Get the application-scoped registry of supported languages."""
    return LanguageRegistry()


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """Get the application-scoped locale resolver."""
    return LocaleResolver(registry=get_language_registry())


@lru_cache
def get_content_client() -> ContentClient:
    """Provider for the content service client.

    One client per process so every request shares the same response cache
    and connection pool. The server lifespan closes it on shutdown.

    Returns:
        ContentClient: Client configured from settings.content.

    Usage:
        @router.get("/labels")
        def labels(content: ContentClientDep):
            return content.resolve_many(["nav.courses"], "he")
    """
    settings = get_settings()
    return ContentClient(
        settings=settings.content, registry=get_language_registry()
    )
