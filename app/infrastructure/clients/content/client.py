"""Content service client with response caching.

Fetches translations, navigation and media descriptors from the headless
CMS over HTTP and memoizes responses in a TTL cache.

Usage:
    from infrastructure.clients.content import ContentClient

    client = ContentClient(settings=settings.content)

    title = client.resolve_one("nav.courses", "he")
    labels = client.resolve_many(["nav.blog", "common.loading"], "en")

    # After content changes
    client.invalidate("translations")
"""

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union

import requests

from infrastructure.cache import TTLCache, build_cache_key, normalize_params
from infrastructure.clients.content.errors import (
    ContentConnectionError,
    ContentFetchError,
    ContentServiceError,
    ContentTimeoutError,
)
from infrastructure.clients.content.models import (
    ContentRecord,
    HealthStatus,
    MediaEntry,
    NavigationItem,
    TranslationEntry,
)
from infrastructure.configuration import ContentServiceSettings
from infrastructure.i18n import LanguageRegistry, Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

R = TypeVar("R", bound=ContentRecord)

TRANSLATIONS = "translations"
NAVIGATION_ITEMS = "navigation-items"
NAVIGATION = "navigation"
MEDIA = "media"

NAVIGATION_POPULATE = {
    "populate[headerMenu][populate]": "*",
    "populate[ctaButton]": "*",
    "populate[footerMenu][populate]": "*",
}


class ContentClient:
    """Client for the content service (headless CMS).

    Every GET carries the bearer token and the configured timeout. Responses
    are cached per request shape with a resource-specific TTL. Collection
    fetches raise ContentServiceError subclasses; the resolve_* helpers,
    get_navigation() and health_check() never raise.

    Args:
        settings: Content service settings.
        session: Optional requests session (a new one is created if omitted).
        cache: Optional TTL cache (a new one is created if omitted).
        registry: Supported languages used for fallback resolution.
    """

    def __init__(
        self,
        settings: ContentServiceSettings,
        session: Optional[requests.Session] = None,
        cache: Optional[TTLCache] = None,
        registry: Optional[LanguageRegistry] = None,
    ) -> None:
        self.base_url = settings.CONTENT_SERVICE_URL.rstrip("/")
        self.timeout = settings.CONTENT_SERVICE_TIMEOUT_SECONDS
        self.page_size = settings.CONTENT_PAGE_SIZE
        self.cache = cache if cache is not None else TTLCache()
        self.registry = registry or LanguageRegistry()
        self._ttls = {
            TRANSLATIONS: settings.TRANSLATIONS_CACHE_TTL_SECONDS,
            NAVIGATION_ITEMS: settings.NAVIGATION_CACHE_TTL_SECONDS,
            NAVIGATION: settings.NAVIGATION_CACHE_TTL_SECONDS,
            MEDIA: settings.MEDIA_CACHE_TTL_SECONDS,
        }
        self._default_ttl = settings.TRANSLATIONS_CACHE_TTL_SECONDS
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {settings.CONTENT_SERVICE_API_TOKEN}",
        }
        self._session = session or requests.Session()
        self._logger = logger.bind(base_url=self.base_url)

        if not settings.CONTENT_SERVICE_API_TOKEN:
            self._logger.warning(
                "content_service_token_missing",
                detail="API calls may be rejected by the content service",
            )

    def ttl_for(self, resource_type: str) -> float:
        """Cache lifetime for a resource type, in seconds."""
        return self._ttls.get(resource_type, self._default_ttl)

    def fetch_collection(
        self,
        resource_type: str,
        filters: Optional[Dict[str, Any]] = None,
        ttl_seconds: Optional[float] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch a collection, served from cache while fresh.

        Args:
            resource_type: Collection name (e.g. "translations", "media").
            filters: Query parameters; their order does not affect caching.
            ttl_seconds: Override for the resource's cache lifetime.

        Returns:
            The records in the response's "data" list.

        Raises:
            ContentFetchError: Non-success HTTP status.
            ContentTimeoutError: Request exceeded the timeout.
            ContentConnectionError: Content service unreachable.
        """
        body = self._cached_get(resource_type, filters, ttl_seconds)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            return []
        return list(data)

    def get_translations(
        self,
        category: Optional[str] = None,
        page: Optional[str] = None,
        section: Optional[str] = None,
        is_active: Optional[bool] = True,
    ) -> List[TranslationEntry]:
        """Fetch translation entries, active ones only by default.

        Raises:
            ContentServiceError: When the collection cannot be fetched.
        """
        filters = {
            "filters[category][$eq]": category,
            "filters[page][$eq]": page,
            "filters[section][$eq]": section,
            "filters[isActive][$eq]": is_active,
            "sort": "order:asc,key:asc",
            "pagination[pageSize]": self.page_size,
        }
        records = self.fetch_collection(TRANSLATIONS, filters)
        return self._parse_records(TranslationEntry, records, TRANSLATIONS)

    def get_media(
        self,
        page: Optional[str] = None,
        section: Optional[str] = None,
        language: Optional[str] = None,
        media_type: Optional[str] = None,
    ) -> List[MediaEntry]:
        """Fetch active media descriptors.

        Raises:
            ContentServiceError: When the collection cannot be fetched.
        """
        filters = {
            "filters[page][$eq]": page,
            "filters[section][$eq]": section,
            "filters[language][$eq]": language,
            "filters[type][$eq]": media_type,
            "filters[isActive][$eq]": True,
            "sort": "order:asc",
            "pagination[pageSize]": self.page_size,
        }
        records = self.fetch_collection(MEDIA, filters)
        return self._parse_records(MediaEntry, records, MEDIA)

    def get_navigation_items(self) -> List[NavigationItem]:
        """Fetch active navigation items as a tree.

        Items whose parent is not in the response are dropped.

        Returns:
            Root items in service order, children attached.

        Raises:
            ContentServiceError: When the collection cannot be fetched.
        """
        filters = {
            "sort": "order:asc",
            "filters[isActive][$eq]": True,
            "populate": "*",
        }
        records = self.fetch_collection(NAVIGATION_ITEMS, filters)
        items = self._parse_records(NavigationItem, records, NAVIGATION_ITEMS)
        return build_navigation_tree(items)

    def get_navigation(self) -> Optional[Dict[str, Any]]:
        """Fetch the navigation document (header menu, CTA, footer menu).

        Returns:
            The document attributes, or None if missing or unavailable.
        """
        try:
            body = self._cached_get(NAVIGATION, NAVIGATION_POPULATE)
        except ContentServiceError as e:
            self._logger.error("navigation_fetch_failed", error=str(e))
            return None

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            return None
        return data.get("attributes")

    def resolve_one(self, key: str, locale: Union[Locale, str, None] = None) -> str:
        """Resolve a translation key to text.

        Resolution order: the requested locale, the default locale, any other
        populated locale, then the key itself. A missing key or an unreachable
        content service degrades to the key; nothing is raised.

        Args:
            key: Translation key (e.g. "nav.courses").
            locale: Requested language. Defaults to the default language.

        Returns:
            The translated text, or the key.
        """
        resolved_locale = self._coerce_locale(locale)
        try:
            index = self._translation_index()
        except ContentServiceError as e:
            self._logger.error("translation_fetch_failed", key=key, error=str(e))
            return key
        return self._resolve_entry(index.get(key), key, resolved_locale)

    def resolve_many(
        self, keys: Iterable[str], locale: Union[Locale, str, None] = None
    ) -> Dict[str, str]:
        """Resolve several translation keys with one (cached) fetch.

        Each key is resolved independently; a missing key maps to itself.

        Returns:
            Mapping of key to text.
        """
        keys = list(keys)
        resolved_locale = self._coerce_locale(locale)
        try:
            index = self._translation_index()
        except ContentServiceError as e:
            self._logger.error(
                "translations_map_fetch_failed", key_count=len(keys), error=str(e)
            )
            return {key: key for key in keys}
        return {
            key: self._resolve_entry(index.get(key), key, resolved_locale)
            for key in keys
        }

    def invalidate(self, cache_key: Optional[str] = None) -> int:
        """Drop cached responses.

        Args:
            cache_key: A cache key or resource type. A resource type removes
                every cached request for that resource. None clears the cache.

        Returns:
            Number of entries removed.
        """
        if cache_key is None:
            removed = self.cache.clear()
        else:
            removed = self.cache.invalidate(cache_key)
        self._logger.info(
            "content_cache_invalidated", cache_key=cache_key, removed=removed
        )
        return removed

    def health_check(self) -> HealthStatus:
        """Check that the content service answers an authenticated request.

        Never raises and never touches the cache.
        """
        try:
            self._request(TRANSLATIONS, {"pagination[pageSize]": 1})
        except ContentServiceError as e:
            return HealthStatus(status="error", message=str(e))
        except Exception as e:  # pylint: disable=broad-except
            self._logger.exception("content_health_check_failed")
            return HealthStatus(status="error", message=str(e) or type(e).__name__)
        return HealthStatus(
            status="ok", message="Content service connection successful"
        )

    def close(self) -> None:
        """Release pooled HTTP connections."""
        self._session.close()

    def _cached_get(
        self,
        resource_type: str,
        params: Optional[Dict[str, Any]] = None,
        ttl_seconds: Optional[float] = None,
    ) -> Any:
        key = build_cache_key(resource_type, params)
        ttl = ttl_seconds if ttl_seconds is not None else self.ttl_for(resource_type)
        return self.cache.get_or_fetch(
            key, ttl, lambda: self._request(resource_type, params)
        )

    def _request(
        self, resource_type: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send an authenticated GET to /api/{resource_type}.

        Returns:
            The decoded JSON body.

        Raises:
            ContentFetchError, ContentTimeoutError, ContentConnectionError
        """
        url = f"{self.base_url}/api/{resource_type.lstrip('/')}"
        query = normalize_params(params)
        log = self._logger.bind(resource_type=resource_type, url=url)
        log.debug("content_request")

        try:
            response = self._session.get(
                url, params=query, headers=self._headers, timeout=self.timeout
            )
        except requests.Timeout as e:
            log.error("content_request_timeout", timeout=self.timeout)
            raise ContentTimeoutError(self.timeout) from e
        except requests.RequestException as e:
            log.error("content_request_connection_error", error=str(e))
            raise ContentConnectionError(
                f"Content service connection failed: {e}"
            ) from e

        log = log.bind(status_code=response.status_code)
        if not 200 <= response.status_code < 300:
            message = _extract_error_message(response)
            log.warning("content_request_failed", error=message)
            raise ContentFetchError(response.status_code, message)

        try:
            body = response.json()
        except ValueError as e:
            log.error("content_response_not_json", content=response.text[:200])
            raise ContentFetchError(
                response.status_code, "Response body is not valid JSON"
            ) from e

        log.debug("content_request_succeeded")
        return body

    def _translation_index(self) -> Dict[str, TranslationEntry]:
        index: Dict[str, TranslationEntry] = {}
        for entry in self.get_translations():
            index.setdefault(entry.key, entry)
        return index

    def _resolve_entry(
        self, entry: Optional[TranslationEntry], key: str, locale: Locale
    ) -> str:
        if entry is None:
            self._logger.warning("translation_key_not_found", key=key)
            return key

        default = self.registry.default_locale
        order = [locale] if locale == default else [locale, default]
        order += [l for l in self.registry.fallback_order if l not in order]
        for candidate in order:
            value = entry.value_for(candidate)
            if value and value.strip():
                return value
        return key

    def _coerce_locale(self, locale: Union[Locale, str, None]) -> Locale:
        resolved = self.registry.coerce(locale)
        if resolved is None:
            if locale is not None:
                self._logger.warning(
                    "unsupported_locale_requested",
                    locale=str(locale),
                    fallback=self.registry.default_locale.value,
                )
            return self.registry.default_locale
        return resolved

    def _parse_records(
        self, model: Type[R], records: List[Dict[str, Any]], resource_type: str
    ) -> List[R]:
        parsed: List[R] = []
        for record in records:
            if not isinstance(record, dict):
                continue
            try:
                parsed.append(model.from_record(record))
            except ValueError as e:
                self._logger.warning(
                    "content_record_invalid",
                    resource_type=resource_type,
                    record_id=record.get("id"),
                    error=str(e),
                )
        return parsed


def build_navigation_tree(items: List[NavigationItem]) -> List[NavigationItem]:
    """Attach navigation items to their parents.

    Args:
        items: Flat items in display order.

    Returns:
        Root items; children keep display order. Items whose parent is
        missing or is the item itself are left out.
    """
    nodes = {item.id: item.model_copy(update={"children": []}) for item in items}
    roots: List[NavigationItem] = []
    for item in items:
        if item.parent_id == item.id:
            logger.warning("navigation_item_self_parented", item_id=item.id)
            continue
        node = nodes[item.id]
        if item.parent_id:
            parent = nodes.get(item.parent_id)
            if parent is not None:
                parent.children.append(node)
        else:
            roots.append(node)
    return roots


def _extract_error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("message"):
            return str(body["message"])
    return f"HTTP {response.status_code}"
