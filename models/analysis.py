"""
Pydantic models for the validated character analysis document.
"""

from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.interaction import InteractionRecord


class CharacterRecord(BaseModel):
    """A single character found in the analyzed text."""
    name: str = Field(description="Character name")
    description: str = Field(default="", description="Brief description, may be empty")

    model_config = ConfigDict(frozen=True)

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Character name must not be empty")
        return v

    @field_validator('description', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class WritingStyle(BaseModel):
    """Free-text summary of the writing style."""
    formality: str = ""
    approach: str = ""
    notes: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator('formality', 'approach', 'notes', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class AnalysisResult(BaseModel):
    """Validated analysis: characters, interactions, genre and writing style."""
    characters: Tuple[CharacterRecord, ...] = Field(description="Characters in first-appearance order")
    interactions: Tuple[InteractionRecord, ...] = Field(description="Interactions in first-appearance order")
    genre: str = Field(default="", description="Genre label")
    writing_style: WritingStyle = Field(default_factory=WritingStyle, alias="writingStyle")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator('genre', mode='before')
    @classmethod
    def genre_none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator('writing_style', mode='before')
    @classmethod
    def coerce_writing_style(cls, v: Any) -> Any:
        if v is None:
            return {}
        # Some replies collapse the style object into a sentence
        if isinstance(v, str):
            return {"notes": v}
        return v

    def character_names(self) -> List[str]:
        return [c.name for c in self.characters]

    def dangling_references(self) -> List[str]:
        """Interaction endpoints that do not name any character (kept, only reported)."""
        known = set(self.character_names())
        dangling = []
        for interaction in self.interactions:
            for name in (interaction.source, interaction.target):
                if name not in known and name not in dangling:
                    dangling.append(name)
        return dangling
