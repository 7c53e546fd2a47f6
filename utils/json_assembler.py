"""
JSONAssembler for assembling boundary JSON payloads.
"""

from typing import Any, Dict, Tuple

from config import DEFAULT_LOCALE, ERROR_MESSAGES, ERROR_STATUS_CODES
from models import AnalysisResult, PipelineError, RequestedLocale


class JSONAssembler:
    """Assembles success and error payloads for the system boundary."""

    FALLBACK_STATUS = 500

    @staticmethod
    def assemble(result: AnalysisResult) -> Dict[str, Any]:
        """Assemble a validated result into the boundary JSON shape."""
        style = result.writing_style
        return {
            "characters": [
                {
                    "name": c.name,
                    "description": c.description
                }
                for c in result.characters
            ],
            "interactions": [
                {
                    "source": i.source,
                    "target": i.target,
                    "description": i.description,
                    "strength": i.strength
                }
                for i in result.interactions
            ],
            "genre": result.genre,
            "writingStyle": {
                "formality": style.formality,
                "approach": style.approach,
                "notes": style.notes
            }
        }

    @staticmethod
    def error_payload(error: PipelineError, locale: RequestedLocale) -> Tuple[Dict[str, str], int]:
        """Return ({"error": message}, status) with a message in the requested language."""
        messages = ERROR_MESSAGES.get(locale.value, ERROR_MESSAGES[DEFAULT_LOCALE])
        message = messages.get(error.kind, messages["parse_failed"])
        status = ERROR_STATUS_CODES.get(error.kind, JSONAssembler.FALLBACK_STATUS)
        return {"error": message}, status
