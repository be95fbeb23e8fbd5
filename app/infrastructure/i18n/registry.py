"""Static registry of supported languages."""

from typing import Dict, List, Optional, Sequence, Union

from infrastructure.i18n.models import LanguageConfig, Locale

LANGUAGES: Dict[Locale, LanguageConfig] = {
    Locale.RU: LanguageConfig(
        code=Locale.RU,
        name="Russian",
        native_name="Русский",
        rtl=False,
        flag="🇷🇺",
    ),
    Locale.EN: LanguageConfig(
        code=Locale.EN,
        name="English",
        native_name="English",
        rtl=False,
        flag="🇺🇸",
    ),
    Locale.HE: LanguageConfig(
        code=Locale.HE,
        name="Hebrew",
        native_name="עברית",
        rtl=True,
        flag="🇮🇱",
    ),
}

DEFAULT_LOCALE = Locale.RU
FALLBACK_ORDER = (Locale.RU, Locale.EN, Locale.HE)


class LanguageRegistry:
    """Read-only view over the supported languages.

    Attributes:
        default_locale: Locale used when nothing else resolves.
        fallback_order: Fixed default order used to build fallback hierarchies.
    """

    def __init__(
        self,
        languages: Optional[Dict[Locale, LanguageConfig]] = None,
        default_locale: Locale = DEFAULT_LOCALE,
        fallback_order: Sequence[Locale] = FALLBACK_ORDER,
    ):
        self._languages = dict(languages or LANGUAGES)
        self.default_locale = default_locale
        self.fallback_order = tuple(fallback_order)

    def get_config(self, locale: Union[Locale, str]) -> LanguageConfig:
        """Get display metadata for a locale.

        Raises:
            ValueError: If the code is not a supported locale.
        """
        return self._languages[Locale.from_string(locale)]

    def list_all(self) -> List[LanguageConfig]:
        """List language configs in the default fallback order."""
        return [self._languages[locale] for locale in self.fallback_order]

    def is_supported(self, code: Optional[Union[Locale, str]]) -> bool:
        return self.coerce(code) is not None

    def coerce(self, code: Optional[Union[Locale, str]]) -> Optional[Locale]:
        """Return the Locale for a code, or None when unsupported."""
        if code is None:
            return None
        try:
            locale = Locale(code)
        except ValueError:
            return None
        return locale if locale in self._languages else None

    @property
    def codes(self) -> List[str]:
        return [locale.value for locale in self.fallback_order]
