"""i18n system - supported languages and per-session language handling.

Main components:
- models: Locale, LanguageConfig
- registry: LanguageRegistry with the supported language table
- resolvers: LocaleResolver and LanguageNegotiator for client language detection
- storage: SessionStorage and InMemorySessionStorage
- manager: LanguageManager tracking the active language of a session
"""

from infrastructure.i18n.manager import LANGUAGE_STORAGE_KEY, LanguageManager
from infrastructure.i18n.models import LanguageConfig, Locale
from infrastructure.i18n.registry import (
    DEFAULT_LOCALE,
    FALLBACK_ORDER,
    LANGUAGES,
    LanguageRegistry,
)
from infrastructure.i18n.resolvers import (
    LanguageNegotiator,
    LocaleResolver,
    parse_accept_language,
)
from infrastructure.i18n.storage import InMemorySessionStorage, SessionStorage

__all__ = [
    "Locale",
    "LanguageConfig",
    "LANGUAGES",
    "DEFAULT_LOCALE",
    "FALLBACK_ORDER",
    "LanguageRegistry",
    "LocaleResolver",
    "LanguageNegotiator",
    "parse_accept_language",
    "SessionStorage",
    "InMemorySessionStorage",
    "LANGUAGE_STORAGE_KEY",
    "LanguageManager",
]
