"""
devtools_har/data_models/devtools/cookie_same_site.py

SameSite policy of a cookie as exported by browser DevTools.
"""

from enum import StrEnum
from typing import Any, Self


class CookieSameSite(StrEnum):
    LAX = "Lax"
    NONE = "None"
    STRICT = "Strict"

    @classmethod
    def try_parse(cls, value: Any) -> Self | None:
        """Case-insensitive lookup; None for missing or unrecognized values."""
        if value is None:
            return None
        lowered = str(value).strip().lower()
        for same_site in cls:
            if same_site.value.lower() == lowered:
                return same_site
        return None
