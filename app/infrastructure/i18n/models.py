"""Language models for the i18n system.

Defines the supported locales and their display metadata.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Locale(str, Enum):
    """Supported language codes.

    Codes are bare ISO 639-1 language subtags; regional variants sent by
    clients (e.g. "en-US") are reduced to these during negotiation.
    """

    RU = "ru"
    EN = "en"
    HE = "he"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Language code (e.g., "ru", "he").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If the code is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LanguageConfig:
    """Display metadata for a supported language.

    Attributes:
        code: The Locale this config describes.
        name: English name of the language.
        native_name: Name of the language in its own script.
        rtl: True when the language is written right-to-left.
        flag: Emoji flag used by language pickers.
    """

    code: Locale
    name: str
    native_name: str
    rtl: bool
    flag: str

    @property
    def direction(self) -> str:
        """Text direction, "rtl" or "ltr"."""
        return "rtl" if self.rtl else "ltr"

    def to_dict(self) -> Dict[str, object]:
        return {
            "code": self.code.value,
            "name": self.name,
            "nativeName": self.native_name,
            "rtl": self.rtl,
            "direction": self.direction,
            "flag": self.flag,
        }
