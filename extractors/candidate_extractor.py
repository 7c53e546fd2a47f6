"""
CandidateExtractor for isolating the JSON document inside raw model output.
"""

import re
from typing import Iterable, List, Optional

from config import CHARACTERS_KEY, INTERACTIONS_KEY, LABEL_MARKERS
from models import CandidateSource, ExtractionCandidate
from utils import BracketScanner


class CandidateStrategy:
    """One way of finding the candidate. Returns None when it does not apply."""
    source: CandidateSource

    def try_extract(self, text: str) -> Optional[ExtractionCandidate]:
        raise NotImplementedError

    def _candidate(self, text: str) -> ExtractionCandidate:
        return ExtractionCandidate(text=text, source=self.source)


class FencedBlockStrategy(CandidateStrategy):
    """Content of the first triple-backtick fence pair, optionally tagged json."""
    source = CandidateSource.FENCED_BLOCK

    FENCE = re.compile(r'```[ \t]*(?:json)?[ \t]*\r?\n?(.*?)```', re.DOTALL | re.IGNORECASE)

    def try_extract(self, text: str) -> Optional[ExtractionCandidate]:
        match = self.FENCE.search(text)
        if not match:
            return None
        content = match.group(1).strip()
        return self._candidate(content) if content else None


class LabeledSectionStrategy(CandidateStrategy):
    """First balanced object after a marker such as 'JSON format'."""
    source = CandidateSource.LABELED_SECTION

    def __init__(self, markers: Iterable[str] = LABEL_MARKERS):
        self.pattern = re.compile('|'.join(re.escape(m) for m in markers), re.IGNORECASE)

    def try_extract(self, text: str) -> Optional[ExtractionCandidate]:
        match = self.pattern.search(text)
        if not match:
            return None
        start = text.find('{', match.end())
        if start == -1:
            return None
        end = BracketScanner.find_closing(text, start)
        if end == -1:
            return None
        return self._candidate(text[start:end + 1])


class StructuralMatchStrategy(CandidateStrategy):
    """From the first '{' to end of text when both document keys follow it; closes truncation."""
    source = CandidateSource.STRUCTURAL_MATCH

    REQUIRED_KEYS = (f'"{CHARACTERS_KEY}"', f'"{INTERACTIONS_KEY}"')

    def try_extract(self, text: str) -> Optional[ExtractionCandidate]:
        # Any later '{' sees a subset of this suffix, so the first one decides
        start = text.find('{')
        if start == -1:
            return None
        body = text[start:]
        if not all(key in body for key in self.REQUIRED_KEYS):
            return None

        brace_deficit, _ = BracketScanner.deficits(body)
        if brace_deficit > 0:
            body = body.rstrip() + BracketScanner.closing_suffix(body)
        return self._candidate(body)


class WholeTextStrategy(CandidateStrategy):
    """Last resort: the entire raw output."""
    source = CandidateSource.WHOLE_TEXT

    def try_extract(self, text: str) -> Optional[ExtractionCandidate]:
        return self._candidate(text)


def default_strategies() -> List[CandidateStrategy]:
    """Strategies in priority order."""
    return [
        FencedBlockStrategy(),
        LabeledSectionStrategy(),
        StructuralMatchStrategy(),
        WholeTextStrategy(),
    ]


class CandidateExtractor:
    """Runs strategies in priority order and returns the first candidate found. Never raises."""

    def __init__(self, strategies: Optional[Iterable[CandidateStrategy]] = None):
        self.strategies = list(strategies) if strategies is not None else default_strategies()

    def extract(self, raw_text: str) -> ExtractionCandidate:
        for strategy in self.strategies:
            candidate = strategy.try_extract(raw_text)
            if candidate is not None:
                return candidate
        return ExtractionCandidate(text=raw_text, source=CandidateSource.WHOLE_TEXT)
