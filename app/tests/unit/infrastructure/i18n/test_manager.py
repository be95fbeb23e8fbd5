"""Tests for infrastructure.i18n.manager module."""

from unittest.mock import MagicMock, call

import pytest

from infrastructure.i18n import (
    LANGUAGE_STORAGE_KEY,
    InMemorySessionStorage,
    LanguageManager,
    Locale,
    LocaleResolver,
)


@pytest.mark.unit
class TestInitialize:
    """Tests for LanguageManager.initialize()."""

    def test_starts_uninitialized(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.is_initialized is False

    def test_restores_stored_language(self):
        storage = InMemorySessionStorage({LANGUAGE_STORAGE_KEY: "he"})
        manager = LanguageManager(storage=storage, client_languages=["en"])

        assert manager.initialize() == Locale.HE
        assert manager.is_initialized is True

    def test_ignores_invalid_stored_language(self):
        """An unsupported stored value falls through to detection."""
        storage = InMemorySessionStorage({LANGUAGE_STORAGE_KEY: "xx"})
        manager = LanguageManager(storage=storage, client_languages=["en-GB"])

        assert manager.initialize() == Locale.EN

    def test_detects_from_client_languages_and_persists(self, storage):
        manager = LanguageManager(storage=storage, client_languages=["fr", "he-IL"])

        assert manager.initialize() == Locale.HE
        assert storage.get_item(LANGUAGE_STORAGE_KEY) == "he"

    def test_uses_injected_resolver(self, storage):
        resolver = MagicMock(spec=LocaleResolver)
        resolver.resolve_from_preferences.return_value = Locale.HE
        manager = LanguageManager(
            storage=storage, client_languages=["he"], resolver=resolver
        )

        assert manager.initialize() == Locale.HE
        resolver.resolve_from_preferences.assert_called_once_with(["he"])

    def test_defaults_when_nothing_matches(self, storage):
        manager = LanguageManager(storage=storage, client_languages=["de"])
        assert manager.initialize() == Locale.RU

    def test_is_idempotent(self, storage):
        """Later calls do not re-run detection."""
        manager = LanguageManager(storage=storage, client_languages=["en"])
        manager.initialize()
        storage.set_item(LANGUAGE_STORAGE_KEY, "he")

        assert manager.initialize() == Locale.EN

    def test_storage_read_failure_uses_default(self, failing_storage_factory):
        storage = failing_storage_factory(fail_reads=True)
        manager = LanguageManager(storage=storage, client_languages=["en"])

        assert manager.initialize() == Locale.RU
        assert manager.is_initialized is True

    def test_storage_write_failure_keeps_detected_language(
        self, failing_storage_factory
    ):
        storage = failing_storage_factory(fail_writes=True)
        manager = LanguageManager(storage=storage, client_languages=["he"])

        assert manager.initialize() == Locale.HE

    def test_no_storage(self):
        manager = LanguageManager(client_languages=["en-US"])
        assert manager.initialize() == Locale.EN

    def test_custom_storage_key(self):
        storage = InMemorySessionStorage({"lang": "en"})
        manager = LanguageManager(storage=storage, storage_key="lang")
        assert manager.initialize() == Locale.EN

    def test_get_current_auto_initializes(self, storage):
        manager = LanguageManager(storage=storage, client_languages=["he"])

        assert manager.get_current() == Locale.HE
        assert manager.is_initialized is True

    def test_direction_hook_called_on_initialize(self, storage):
        hook = MagicMock()
        manager = LanguageManager(
            storage=storage, client_languages=["he"], direction_hook=hook
        )
        manager.initialize()

        hook.assert_called_once_with({"dir": "rtl", "lang": "he"})


@pytest.mark.unit
class TestSetLanguage:
    """Tests for LanguageManager.set_language()."""

    def test_set_language_persists(self, storage):
        manager = LanguageManager(storage=storage)

        assert manager.set_language("en") == Locale.EN
        assert manager.get_current() == Locale.EN
        assert storage.get_item(LANGUAGE_STORAGE_KEY) == "en"

    def test_unsupported_code_uses_default(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("he")

        assert manager.set_language("xx") == Locale.RU
        assert manager.get_current() == Locale.RU
        assert manager.get_current() != "xx"

    def test_marks_initialized(self, storage):
        """An explicit choice is not overridden by later detection."""
        manager = LanguageManager(storage=storage, client_languages=["he"])
        manager.set_language("en")

        assert manager.is_initialized is True
        assert manager.get_current() == Locale.EN

    def test_listeners_called_in_order_once_each(self, storage):
        manager = LanguageManager(storage=storage)
        calls = []
        manager.subscribe(lambda locale: calls.append(("first", locale)))
        manager.subscribe(lambda locale: calls.append(("second", locale)))

        manager.set_language("he")

        assert calls == [("first", "he"), ("second", "he")]

    def test_state_updated_before_notification(self, storage):
        manager = LanguageManager(storage=storage)
        seen = []
        manager.subscribe(
            lambda locale: seen.append(
                (manager.get_current(), storage.get_item(LANGUAGE_STORAGE_KEY))
            )
        )

        manager.set_language("en")

        assert seen == [(Locale.EN, "en")]

    def test_failing_listener_does_not_block_others(self, storage):
        manager = LanguageManager(storage=storage)
        failing = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        manager.subscribe(failing)
        manager.subscribe(healthy)

        manager.set_language("he")

        failing.assert_called_once_with(Locale.HE)
        healthy.assert_called_once_with(Locale.HE)

    def test_unsubscribe(self, storage):
        manager = LanguageManager(storage=storage)
        listener = MagicMock()
        unsubscribe = manager.subscribe(listener)

        unsubscribe()
        unsubscribe()
        manager.set_language("en")

        listener.assert_not_called()

    def test_subscribe_same_listener_once(self, storage):
        manager = LanguageManager(storage=storage)
        listener = MagicMock()
        manager.subscribe(listener)
        manager.subscribe(listener)

        manager.set_language("en")

        listener.assert_called_once_with(Locale.EN)

    def test_listener_may_unsubscribe_during_notification(self, storage):
        manager = LanguageManager(storage=storage)
        second = MagicMock()
        unsubscribe_first = None

        def first(locale):
            unsubscribe_first()

        unsubscribe_first = manager.subscribe(first)
        manager.subscribe(second)

        manager.set_language("en")

        second.assert_called_once_with(Locale.EN)

    def test_direction_hook_failure_is_ignored(self, storage):
        hook = MagicMock(side_effect=RuntimeError("no document"))
        manager = LanguageManager(storage=storage, direction_hook=hook)

        assert manager.set_language("he") == Locale.HE

    def test_direction_hook_receives_attributes(self, storage):
        hook = MagicMock()
        manager = LanguageManager(storage=storage, direction_hook=hook)

        manager.set_language("he")
        manager.set_language("en")

        assert hook.call_args_list == [
            call({"dir": "rtl", "lang": "he"}),
            call({"dir": "ltr", "lang": "en"}),
        ]

    def test_reset(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("he")

        assert manager.reset() == Locale.RU


@pytest.mark.unit
class TestFallback:
    """Tests for fallback hierarchy and resolution."""

    @pytest.mark.parametrize("locale", ["ru", "en", "he"])
    def test_hierarchy_starts_with_locale_and_covers_all_once(self, storage, locale):
        manager = LanguageManager(storage=storage)
        hierarchy = manager.get_fallback_hierarchy(locale)

        assert hierarchy[0] == locale
        assert sorted(hierarchy) == sorted([Locale.RU, Locale.EN, Locale.HE])
        assert len(hierarchy) == 3

    def test_hierarchy_order(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.get_fallback_hierarchy("he") == [Locale.HE, Locale.RU, Locale.EN]

    def test_hierarchy_defaults_to_current(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("en")
        assert manager.get_fallback_hierarchy()[0] == Locale.EN

    def test_resolve_with_fallback_crosses_hierarchy(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("ru")

        assert manager.resolve_with_fallback({"en": "Hi"}, "ru") == "Hi"

    def test_resolve_with_fallback_prefers_requested(self, storage):
        manager = LanguageManager(storage=storage)
        translations = {"ru": "Привет", "en": "Hi", "he": "שלום"}

        assert manager.resolve_with_fallback(translations, "he") == "שלום"

    def test_resolve_with_fallback_skips_blank(self, storage):
        manager = LanguageManager(storage=storage)
        translations = {"he": "  ", "ru": "", "en": "Hi"}

        assert manager.resolve_with_fallback(translations, "he") == "Hi"

    def test_resolve_with_fallback_uses_active_language(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("en")

        assert manager.resolve_with_fallback({"ru": "Да", "en": "Yes"}) == "Yes"

    def test_resolve_with_fallback_accepts_locale_keys(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.resolve_with_fallback({Locale.HE: "כן"}, "en") == "כן"

    def test_resolve_with_fallback_any_value(self, storage):
        """Values for unsupported languages are used as a last resort."""
        manager = LanguageManager(storage=storage)
        assert manager.resolve_with_fallback({"fr": "Salut"}, "en") == "Salut"

    def test_resolve_with_fallback_empty(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.resolve_with_fallback({}, "en") == ""
        assert manager.resolve_with_fallback({"en": None, "he": " "}, "en") == ""

    def test_resolve_with_fallback_unsupported_locale(self, storage):
        """An unknown code resolves from the default language onwards."""
        manager = LanguageManager(storage=storage)

        assert manager.resolve_with_fallback({"en": "Hi"}, "xx") == "Hi"
        assert manager.get_fallback_hierarchy("xx") == [Locale.RU, Locale.EN, Locale.HE]


@pytest.mark.unit
class TestPresentation:
    """Tests for direction and class helpers."""

    def test_is_rtl(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.is_rtl("he") is True
        assert manager.is_rtl("ru") is False

    def test_text_direction_for_current(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("he")

        assert manager.get_text_direction() == "rtl"
        assert manager.get_direction_class() == "rtl"

    def test_language_class(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.get_language_class("en") == "lang-en"

    def test_document_attributes(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("en")
        assert manager.document_attributes() == {"dir": "ltr", "lang": "en"}

    def test_get_language_config(self, storage):
        manager = LanguageManager(storage=storage)
        assert manager.get_language_config("he").name == "Hebrew"

    def test_get_available_languages(self, storage):
        manager = LanguageManager(storage=storage)
        codes = [config.code for config in manager.get_available_languages()]
        assert codes == [Locale.RU, Locale.EN, Locale.HE]

    def test_unsupported_locale_argument_uses_default(self, storage):
        manager = LanguageManager(storage=storage)
        manager.set_language("he")

        assert manager.is_rtl("xx") is False
        assert manager.get_language_class("xx") == "lang-ru"
