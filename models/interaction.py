"""
InteractionRecord model for character-to-character interactions.
"""

import math
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InteractionRecord(BaseModel):
    """Pairwise interaction between two named characters."""
    source: str = Field(description="Name of the character the interaction starts from")
    target: str = Field(description="Name of the character the interaction is directed at")
    description: str = Field(default="", description="Brief description of the interaction")
    strength: Union[int, float] = Field(description="Connection strength, nominally 1-10 (not clamped)")

    model_config = ConfigDict(frozen=True)

    @field_validator('source', 'target')
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Interaction endpoints must be non-empty names")
        return v

    @field_validator('description', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator('strength', mode='before')
    @classmethod
    def coerce_strength(cls, v: Any) -> Union[int, float]:
        # bool is an int subclass but "true" is not a strength
        if isinstance(v, bool):
            raise ValueError("Interaction strength must be numeric")
        if isinstance(v, str):
            try:
                v = float(v.strip())
            except ValueError:
                raise ValueError(f"Interaction strength must be numeric, got {v!r}") from None
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("Interaction strength must be finite")
            return int(v) if v.is_integer() else v
        raise ValueError("Interaction strength must be numeric")
