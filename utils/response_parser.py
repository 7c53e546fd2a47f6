"""
ResponseParser for strict structural parsing of repaired model output.
"""

import json
from typing import Any, Dict

from config import CHARACTERS_KEY, INTERACTIONS_KEY
from models import StructuralParseError


class ResponseParser:
    """Parses candidate text into an analysis document."""

    REQUIRED_ARRAYS = (CHARACTERS_KEY, INTERACTIONS_KEY)

    @staticmethod
    def parse_document(text: str) -> Dict[str, Any]:
        """
        Strictly parse text as a JSON object with 'characters' and 'interactions' arrays.

        Record contents are not checked here; unknown fields are kept and
        ignored later. Raises StructuralParseError on any malformed input.
        """
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and oversized integer literals
            raise StructuralParseError(f"Invalid JSON: {e}", text=text) from e

        if not isinstance(data, dict):
            raise StructuralParseError(
                f"Top-level value must be an object, got {type(data).__name__}", text=text
            )

        for key in ResponseParser.REQUIRED_ARRAYS:
            if key not in data:
                raise StructuralParseError(f"Missing '{key}' field", text=text)
            if not isinstance(data[key], list):
                raise StructuralParseError(f"Field '{key}' must be an array", text=text)

        return data
