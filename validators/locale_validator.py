"""
LocaleValidator for detecting results written in the wrong language.
"""

import re
from typing import Callable, Optional

from config import DEFAULT_LANGUAGE_FUNCTION_WORDS, LANGUAGE_NAMES, LOCALE_SCRIPT_RANGES
from models import AnalysisResult, LocaleMismatch, RequestedLocale

# (sample_text, requested_locale) -> True when the text reads as default-language only
LanguagePredicate = Callable[[str, RequestedLocale], bool]

FUNCTION_WORD_PATTERN = re.compile(
    r'\b(?:' + '|'.join(re.escape(w) for w in sorted(DEFAULT_LANGUAGE_FUNCTION_WORDS)) + r')\b',
    re.IGNORECASE
)

SCRIPT_PATTERNS = {
    locale: re.compile(f'[{ranges}]')
    for locale, ranges in LOCALE_SCRIPT_RANGES.items()
}


def is_default_language_only(text: str, locale: RequestedLocale) -> bool:
    """Word/script heuristic: default-language function words and no alternate-script characters."""
    script = SCRIPT_PATTERNS.get(locale.value)
    if script is not None and script.search(text):
        return False
    return FUNCTION_WORD_PATTERN.search(text) is not None


class LocaleValidator:
    """Checks that a result requested in a non-default locale is actually written in it."""

    def __init__(self, predicate: Optional[LanguagePredicate] = None):
        self.predicate = predicate or is_default_language_only

    @staticmethod
    def sample_text(result: AnalysisResult) -> str:
        """First non-empty representative text field, or '' when there is none."""
        candidates = []
        if result.characters:
            candidates.append(result.characters[0].description)
        if result.interactions:
            candidates.append(result.interactions[0].description)
        candidates.append(result.genre)
        candidates.append(result.writing_style.notes)

        for text in candidates:
            if text and text.strip():
                return text
        return ""

    def validate(self, result: AnalysisResult, locale: RequestedLocale) -> AnalysisResult:
        """Return result unchanged, or raise LocaleMismatch."""
        if locale.is_default:
            return result

        sample = self.sample_text(result)
        if not sample:
            return result

        if self.predicate(sample, locale):
            raise LocaleMismatch(
                f"Requested {LANGUAGE_NAMES.get(locale.value, locale.value)} content "
                f"but the sampled text reads as the default language",
                stage="validate",
                snippet=sample
            )
        return result
