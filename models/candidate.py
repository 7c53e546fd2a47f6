"""
ExtractionCandidate model for the substring believed to hold the JSON document.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CandidateSource(str, Enum):
    """Strategy that produced a candidate, in priority order."""
    FENCED_BLOCK = "fenced_block"
    LABELED_SECTION = "labeled_section"
    STRUCTURAL_MATCH = "structural_match"
    WHOLE_TEXT = "whole_text"


class ExtractionCandidate(BaseModel):
    text: str = Field(description="Candidate JSON text")
    source: CandidateSource = Field(description="Strategy that produced the candidate")

    model_config = ConfigDict(frozen=True)
