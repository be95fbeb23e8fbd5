"""Cache key builder for content service requests."""

from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

NAMESPACE_SEPARATOR = ":"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def normalize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop None values and render the rest as query strings.

    Booleans are written as "true"/"false".
    """
    if not params:
        return {}
    return {
        key: _format_value(value) for key, value in params.items() if value is not None
    }


def encode_params(params: Optional[Mapping[str, Any]]) -> str:
    """Encode query parameters in canonical (sorted) order.

    The same logical request always yields the same string.
    """
    return urlencode(sorted(normalize_params(params).items()))


def build_cache_key(
    resource_type: str, params: Optional[Mapping[str, Any]] = None
) -> str:
    """Build a deterministic cache key for a request.

    The resource type is the key's namespace, which lets a whole resource be
    invalidated at once.

    Example:
        >>> build_cache_key("media", {"sort": "order:asc", "page": "home"})
        'media:page=home&sort=order%3Aasc'
        >>> build_cache_key("navigation")
        'navigation'

    Args:
        resource_type: Content service collection (e.g. "translations").
        params: Query parameters sent with the request.

    Returns:
        Cache key string.
    """
    encoded = encode_params(params)
    if not encoded:
        return resource_type
    return f"{resource_type}{NAMESPACE_SEPARATOR}{encoded}"
