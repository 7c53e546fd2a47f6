"""
Pydantic models for structured data representation.
Contains all data models used throughout the analysis pipeline.
"""

from models.analysis import AnalysisResult, CharacterRecord, WritingStyle
from models.candidate import CandidateSource, ExtractionCandidate
from models.interaction import InteractionRecord
from models.locale import RequestedLocale
from models.state import PipelineState
from models.errors import (
    PipelineError,
    EmptyInput,
    UpstreamUnavailable,
    UpstreamRateLimited,
    StructuralParseError,
    ReconstructionFailed,
    ParseFailed,
    SchemaInvalid,
    LocaleMismatch
)


__all__ = [
    "AnalysisResult",
    "CharacterRecord",
    "WritingStyle",
    "CandidateSource",
    "ExtractionCandidate",
    "InteractionRecord",
    "RequestedLocale",
    "PipelineState",
    "PipelineError",
    "EmptyInput",
    "UpstreamUnavailable",
    "UpstreamRateLimited",
    "StructuralParseError",
    "ReconstructionFailed",
    "ParseFailed",
    "SchemaInvalid",
    "LocaleMismatch"
]
