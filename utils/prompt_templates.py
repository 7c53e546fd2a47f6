"""
PromptTemplates for the upstream character analysis request.
"""

from typing import List, Tuple

from config import LANGUAGE_NAMES
from models import RequestedLocale


class PromptTemplates:
    """Centralized prompt templates for the analysis request."""

    @staticmethod
    def system_instructions(locale: RequestedLocale) -> str:
        instructions = """Analyze the following text and identify all characters and their interactions with each other.
For each character provide: name and a brief description. Also identify the genre and summarize the writing style.
Return the data in JSON format with this structure:
{
  "characters": [
    {
      "name": "Character Name",
      "description": "Brief description"
    }
  ],
  "interactions": [
    {
      "source": "Character Name",
      "target": "Other Character Name",
      "description": "Brief description of their interaction",
      "strength": 5
    }
  ],
  "genre": "Genre",
  "writingStyle": {
    "formality": "Level of formality",
    "approach": "Narrative approach",
    "notes": "Other notable features"
  }
}
"strength" is an integer from 1 to 10, where 10 is the strongest connection.
Use the exact character names from "characters" in "source" and "target".
Respond with ONLY the JSON object. No explanatory text before or after it."""

        if not locale.is_default:
            language = LANGUAGE_NAMES[locale.value]
            instructions += f"""

IMPORTANT: Write every description, the genre and the writing style in {language}.
Keep the JSON keys in English exactly as shown."""

        return instructions

    @staticmethod
    def character_analysis(text: str, locale: RequestedLocale) -> List[Tuple[str, str]]:
        """Chat-style messages; completion models receive them rendered as one prompt."""
        return [
            ("system", PromptTemplates.system_instructions(locale)),
            ("human", text),
        ]
