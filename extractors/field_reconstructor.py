"""
FieldReconstructor for rebuilding the analysis document from raw text fragments.
"""

import re
from typing import Any, Dict, Optional

from config import CHARACTERS_KEY, INTERACTIONS_KEY
from models import ReconstructionFailed, StructuralParseError
from utils import BracketScanner, JSONRepairer, ResponseParser


class FieldReconstructor:
    """
    Fallback when the whole candidate does not parse.

    Pulls the 'characters' and 'interactions' arrays out of the raw
    (pre-repair) text, wraps them in a minimal object, repairs and parses it
    again. Genre and writing style are dropped on this path.
    """

    FIELDS = (CHARACTERS_KEY, INTERACTIONS_KEY)

    def __init__(self):
        self.patterns = {
            key: re.compile(r'"' + re.escape(key) + r'"\s*:\s*\[')
            for key in self.FIELDS
        }

    def extract_array(self, text: str, key: str) -> Optional[str]:
        """Bracket-balanced array text for key, or None.

        When the key appears more than once (e.g. the reply restates the
        requested structure first), the last balanced occurrence wins.
        """
        starts = [match.end() - 1 for match in self.patterns[key].finditer(text)]
        closings = BracketScanner.find_closings(text, starts)
        for start in reversed(starts):
            if start in closings:
                return text[start:closings[start] + 1]
        return None

    def reconstruct(self, raw_text: str) -> Dict[str, Any]:
        fragments = {}
        for key in self.FIELDS:
            fragment = self.extract_array(raw_text, key)
            if fragment is None:
                raise ReconstructionFailed(
                    f"No balanced '{key}' array found in model output",
                    stage="reconstruct", snippet=raw_text
                )
            fragments[key] = fragment

        assembled = '{"%s": %s, "%s": %s}' % (
            CHARACTERS_KEY, fragments[CHARACTERS_KEY],
            INTERACTIONS_KEY, fragments[INTERACTIONS_KEY],
        )
        repaired = JSONRepairer.repair(assembled)

        try:
            return ResponseParser.parse_document(repaired)
        except StructuralParseError as e:
            raise ReconstructionFailed(
                f"Reassembled fragments did not parse: {e.message}",
                stage="reconstruct", snippet=repaired
            ) from e
