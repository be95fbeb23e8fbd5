"""Content service (headless CMS) integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class ContentServiceSettings(IntegrationSettings):
    """Content service connection and cache configuration.

    Environment Variables:
        CONTENT_SERVICE_URL: Base URL of the content service (default: http://localhost:1337)
        CONTENT_SERVICE_API_TOKEN: Bearer token sent with every request
        CONTENT_SERVICE_TIMEOUT_SECONDS: Timeout for outbound requests (default: 10)
        CONTENT_WEBHOOK_SECRET: Shared secret expected in the x-webhook-secret header
        TRANSLATIONS_CACHE_TTL_SECONDS: Cache lifetime for translations (default: 300)
        NAVIGATION_CACHE_TTL_SECONDS: Cache lifetime for navigation (default: 600)
        MEDIA_CACHE_TTL_SECONDS: Cache lifetime for media descriptors (default: 900)
        CONTENT_PAGE_SIZE: Page size requested for collections (default: 100)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        base_url = settings.content.CONTENT_SERVICE_URL
        ttl = settings.content.TRANSLATIONS_CACHE_TTL_SECONDS
        ```
    """

    CONTENT_SERVICE_URL: str = Field(
        default="http://localhost:1337", alias="CONTENT_SERVICE_URL"
    )
    CONTENT_SERVICE_API_TOKEN: str = Field(
        default="", alias="CONTENT_SERVICE_API_TOKEN"
    )
    CONTENT_SERVICE_TIMEOUT_SECONDS: float = Field(
        default=10.0, alias="CONTENT_SERVICE_TIMEOUT_SECONDS"
    )
    CONTENT_WEBHOOK_SECRET: str = Field(default="", alias="CONTENT_WEBHOOK_SECRET")
    TRANSLATIONS_CACHE_TTL_SECONDS: int = Field(
        default=300, alias="TRANSLATIONS_CACHE_TTL_SECONDS"
    )
    NAVIGATION_CACHE_TTL_SECONDS: int = Field(
        default=600, alias="NAVIGATION_CACHE_TTL_SECONDS"
    )
    MEDIA_CACHE_TTL_SECONDS: int = Field(default=900, alias="MEDIA_CACHE_TTL_SECONDS")
    CONTENT_PAGE_SIZE: int = Field(default=100, alias="CONTENT_PAGE_SIZE")
