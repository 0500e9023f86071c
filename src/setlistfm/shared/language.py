"""
Summary: Languages supported by the setlist.fm API for localized results.
Why: Restrict the Accept-Language header to the codes the API understands.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Response language; the value is the wire code sent to the API."""

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    PORTUGUESE = "pt"
    TURKISH = "tr"
    ITALIAN = "it"
    POLISH = "pl"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Resolve a two-letter wire code such as ``"de"``.

        Raises:
            ValueError: If the code is not one of the supported languages.
        """

        normalized = code.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        supported = ", ".join(member.value for member in cls)
        raise ValueError(f"Unsupported language code '{code}' (expected one of: {supported})")


__all__ = ["Language"]
