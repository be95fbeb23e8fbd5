"""Language session manager.

Resolves the active language for one client session, persists the choice in
session storage, and notifies subscribers when it changes.
"""

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from infrastructure.i18n.models import LanguageConfig, Locale
from infrastructure.i18n.registry import LanguageRegistry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.storage import SessionStorage
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LANGUAGE_STORAGE_KEY = "aistudio555_language"

LanguageListener = Callable[[Locale], None]
DirectionHook = Callable[[Dict[str, str]], None]
LocaleArg = Optional[Union[Locale, str]]


class LanguageManager:
    """Tracks the active language of a client session.

    One instance per client (or per server-side render). The manager starts
    uninitialized; the first call to initialize() or get_current() resolves
    the language from, in order: the stored session preference, the client's
    declared languages, the registry default.

    Usage:
        manager = LanguageManager(
            storage=InMemorySessionStorage(),
            client_languages=["he-IL", "en"],
        )
        manager.subscribe(lambda locale: print("now", locale))
        manager.set_language("en")

    Attributes:
        registry: Supported languages.
        storage_key: Session storage key for the chosen language.
    """

    def __init__(
        self,
        storage: Optional[SessionStorage] = None,
        client_languages: Optional[Sequence[str]] = None,
        registry: Optional[LanguageRegistry] = None,
        storage_key: str = LANGUAGE_STORAGE_KEY,
        direction_hook: Optional[DirectionHook] = None,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize the manager without resolving anything yet.

        Args:
            storage: Session storage. None means no storage is available
                (nothing is restored or persisted).
            client_languages: Client language tags, most preferred first.
            registry: Supported languages. Defaults to the built-in registry.
            storage_key: Session storage key for the chosen language.
            direction_hook: Called with {"dir", "lang"} whenever the active
                language is resolved or changed.
            resolver: Negotiates client languages. Defaults to a resolver
                over registry.
        """
        self.registry = registry or LanguageRegistry()
        self.storage_key = storage_key
        self._storage = storage
        self._client_languages = list(client_languages or [])
        self._resolver = resolver or LocaleResolver(self.registry)
        self._direction_hook = direction_hook
        self._current: Locale = self.registry.default_locale
        self._initialized = False
        self._listeners: List[LanguageListener] = []

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> Locale:
        """Resolve the session language once.

        Later calls return the already-resolved language without running
        detection again. A failure while reading storage or negotiating
        leaves the session on the default language.

        Returns:
            The active Locale.
        """
        if self._initialized:
            return self._current

        try:
            stored = self._read_stored_language()
            if stored is not None:
                self._current = stored
                logger.debug("language_restored_from_session", locale=stored.value)
            else:
                detected = self._resolver.resolve_from_preferences(
                    self._client_languages
                )
                self._current = detected
                self._store_language(detected)
                logger.debug("language_auto_detected", locale=detected.value)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "language_initialization_failed",
                error=str(e),
                fallback=self.registry.default_locale.value,
            )
            self._current = self.registry.default_locale

        self._initialized = True
        self._update_direction()
        return self._current

    def get_current(self) -> Locale:
        """Get the active language, initializing on first use."""
        if not self._initialized:
            return self.initialize()
        return self._current

    def set_language(self, language: Union[Locale, str]) -> Locale:
        """Change the active language.

        An unsupported code is replaced by the default language and logged;
        it never raises. State is updated and persisted before subscribers
        are notified, in subscription order.

        Args:
            language: Requested language code.

        Returns:
            The Locale actually applied.
        """
        locale = self.registry.coerce(language)
        if locale is None:
            logger.warning(
                "invalid_language",
                language=str(language),
                fallback=self.registry.default_locale.value,
            )
            locale = self.registry.default_locale

        previous = self._current
        self._current = locale
        self._initialized = True

        self._store_language(locale)
        self._update_direction()

        logger.debug(
            "language_changed", previous=previous.value, current=locale.value
        )
        self._notify_listeners(locale)
        return locale

    def reset(self) -> Locale:
        """Switch back to the default language."""
        return self.set_language(self.registry.default_locale)

    def subscribe(self, callback: LanguageListener) -> Callable[[], None]:
        """Register a language change listener.

        Args:
            callback: Called with the new Locale after every set_language().

        Returns:
            A function that removes the listener. Calling it twice is harmless.
        """
        if callback not in self._listeners:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def get_fallback_hierarchy(self, locale: LocaleArg = None) -> List[Locale]:
        """Locales to try, the given (or active) one first.

        The remaining locales follow in the registry's fixed order.
        """
        lang = self._locale_or_current(locale)
        return [lang] + [l for l in self.registry.fallback_order if l != lang]

    def resolve_with_fallback(
        self,
        translations: Mapping[Union[Locale, str], Optional[str]],
        locale: LocaleArg = None,
    ) -> str:
        """Pick a value from a per-language mapping.

        Walks the fallback hierarchy and returns the first non-blank value.
        When none of the supported languages has one, any non-blank value in
        the mapping is returned; otherwise an empty string.

        Args:
            translations: Mapping of language code to text, e.g. {"en": "Hi"}.
            locale: Language to prefer. Defaults to the active language.

        Returns:
            The resolved text, or "".
        """
        values = {
            (key.value if isinstance(key, Locale) else key): value
            for key, value in translations.items()
        }

        for fallback_lang in self.get_fallback_hierarchy(locale):
            text = values.get(fallback_lang.value)
            if text and text.strip():
                return text

        for text in values.values():
            if text and text.strip():
                return text
        return ""

    def get_language_config(self, locale: LocaleArg = None) -> LanguageConfig:
        return self.registry.get_config(self._locale_or_current(locale))

    def get_available_languages(self) -> List[LanguageConfig]:
        return self.registry.list_all()

    def is_rtl(self, locale: LocaleArg = None) -> bool:
        return self.get_language_config(locale).rtl

    def get_text_direction(self, locale: LocaleArg = None) -> str:
        return "rtl" if self.is_rtl(locale) else "ltr"

    def get_direction_class(self, locale: LocaleArg = None) -> str:
        return self.get_text_direction(locale)

    def get_language_class(self, locale: LocaleArg = None) -> str:
        """CSS class for the language, e.g. "lang-he"."""
        return f"lang-{self._locale_or_current(locale).value}"

    def document_attributes(self) -> Dict[str, str]:
        """Root element attributes for the active language."""
        return {
            "dir": self.get_text_direction(self._current),
            "lang": self._current.value,
        }

    def _locale_or_current(self, locale: LocaleArg) -> Locale:
        if locale is None:
            return self.get_current()
        resolved = self.registry.coerce(locale)
        if resolved is None:
            logger.warning(
                "unsupported_locale_requested",
                locale=str(locale),
                fallback=self.registry.default_locale.value,
            )
            return self.registry.default_locale
        return resolved

    def _read_stored_language(self) -> Optional[Locale]:
        if self._storage is None:
            return None
        return self.registry.coerce(self._storage.get_item(self.storage_key))

    def _store_language(self, locale: Locale) -> None:
        if self._storage is None:
            return
        try:
            self._storage.set_item(self.storage_key, locale.value)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "language_preference_store_failed", locale=locale.value, error=str(e)
            )

    def _update_direction(self) -> None:
        if self._direction_hook is None:
            return
        try:
            self._direction_hook(self.document_attributes())
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("direction_hook_failed", error=str(e))

    def _notify_listeners(self, locale: Locale) -> None:
        for callback in list(self._listeners):
            try:
                callback(locale)
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "language_listener_failed",
                    listener=getattr(callback, "__name__", repr(callback)),
                    error=str(e),
                )
