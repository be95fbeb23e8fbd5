from typing import List

from fastapi import APIRouter, Header, HTTPException, Query, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.clients.content import ContentServiceError
from infrastructure.i18n import InMemorySessionStorage, LanguageManager
from infrastructure.i18n.resolvers import parse_accept_language
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    ContentClientDep,
    LanguageRegistryDep,
    LocaleResolverDep,
    SettingsDep,
)

logger = get_module_logger()
router = APIRouter(tags=["I18n"])
limiter = get_limiter()


@router.get("/i18n/languages")
def list_languages(registry: LanguageRegistryDep):
    """List supported languages in fallback order."""
    return {
        "default": registry.default_locale.value,
        "languages": [config.to_dict() for config in registry.list_all()],
    }


@router.get("/i18n/translations")
@limiter.limit("120/minute")
def get_translations(
    request: Request,  # pylint: disable=unused-argument
    content: ContentClientDep,
    registry: LanguageRegistryDep,
    resolver: LocaleResolverDep,
    settings: SettingsDep,
    keys: List[str] = Query(default=[]),
    locale: str | None = None,
    accept_language: str | None = Header(default=None),
):
    """Resolve translation keys for one language.

    An explicit, supported locale wins; otherwise the language is negotiated
    from Accept-Language. Unknown keys come back unchanged.
    """
    manager = LanguageManager(
        storage=InMemorySessionStorage(),
        client_languages=parse_accept_language(accept_language),
        registry=registry,
        storage_key=settings.i18n.LANGUAGE_STORAGE_KEY,
        resolver=resolver,
    )
    if locale and registry.is_supported(locale):
        manager.set_language(locale)
    resolved = manager.get_current()

    return {
        "locale": resolved.value,
        "direction": manager.get_text_direction(),
        "translations": content.resolve_many(keys, resolved),
    }


@router.get("/i18n/navigation")
@limiter.limit("120/minute")
def get_navigation(request: Request, content: ContentClientDep):  # pylint: disable=unused-argument
    """Active navigation items as a tree."""
    try:
        items = content.get_navigation_items()
    except ContentServiceError as e:
        logger.error("navigation_items_unavailable", error=str(e))
        raise HTTPException(
            status_code=502, detail="Content service unavailable"
        ) from e
    return {"items": [item.model_dump(by_alias=True) for item in items]}
