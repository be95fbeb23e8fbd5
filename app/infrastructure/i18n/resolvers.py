"""Locale resolution logic for determining a client's preferred language.

Provides strategies for resolving the appropriate locale from the client's
declared language preferences (an ordered list or an Accept-Language header).
"""

from typing import List, Optional, Sequence

import structlog
from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import LanguageRegistry

logger = structlog.get_logger().bind(component="i18n.resolver")


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into language tags by preference.

    "he-IL,he;q=0.9,en;q=0.8" -> ["he-IL", "he", "en"]. Wildcards and
    malformed quality values are tolerated; "*" is dropped.
    """
    if not accept_language:
        return []

    preferences = []
    for position, part in enumerate(accept_language.split(",")):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        preferences.append((lang_range, quality, position))

    # Stable on position so equal qualities keep header order
    preferences.sort(key=lambda x: (-x[1], x[2]))
    return [lang_range for lang_range, _, _ in preferences]


class LanguageNegotiator:
    """Matches requested language tags against available ones.

    Implements the simple subset of RFC 4647 lookup the site needs: an exact
    tag match wins, otherwise the primary language subtag is compared
    (e.g. "en-US" matches "en").
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Default if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default


class LocaleResolver:
    """Resolves a client locale from declared language preferences.

    Falls back to the registry's default locale when nothing matches.
    """

    def __init__(self, registry: Optional[LanguageRegistry] = None):
        """Initialize locale resolver.

        Args:
            registry: Supported languages. Defaults to the built-in registry.
        """
        self.registry = registry or LanguageRegistry()
        self.default_locale = self.registry.default_locale
        self.log = logger.bind(default_locale=self.default_locale.value)

    def resolve_from_preferences(self, preferences: Sequence[str]) -> Locale:
        """Resolve locale from an ordered list of client language tags.

        Args:
            preferences: Language tags, most preferred first.

        Returns:
            Resolved Locale, or the default if none match.
        """
        cleaned = [p.strip() for p in preferences if p and p.strip()]
        match = LanguageNegotiator.find_best_match(cleaned, self.registry.codes)
        if match is None:
            self.log.info("no_matching_client_language", preferences=cleaned)
            return self.default_locale

        locale = Locale(match)
        self.log.info("resolved_from_preferences", locale=locale.value)
        return locale
