"""
RequestedLocale enum for the language the analysis was requested in.
"""

from enum import Enum
from typing import Union

from config import ALTERNATE_LOCALE, DEFAULT_LOCALE


class RequestedLocale(str, Enum):
    """Locale tag supplied by the caller."""
    EN = DEFAULT_LOCALE
    AR = ALTERNATE_LOCALE

    @classmethod
    def from_tag(cls, tag: Union[str, "RequestedLocale", None]) -> "RequestedLocale":
        """Normalize tags like 'AR' or 'ar-EG'; unknown tags fall back to the default locale."""
        if isinstance(tag, cls):
            return tag
        if not tag:
            return cls(DEFAULT_LOCALE)
        primary = str(tag).strip().lower().replace("_", "-").split("-")[0]
        for member in cls:
            if member.value == primary:
                return member
        return cls(DEFAULT_LOCALE)

    @property
    def is_default(self) -> bool:
        return self.value == DEFAULT_LOCALE
