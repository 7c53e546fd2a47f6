"""
Extraction engines for the candidate document and its fallback reconstruction.
"""

from extractors.candidate_extractor import (
    CandidateExtractor,
    CandidateStrategy,
    FencedBlockStrategy,
    LabeledSectionStrategy,
    StructuralMatchStrategy,
    WholeTextStrategy,
    default_strategies,
)
from extractors.field_reconstructor import FieldReconstructor

__all__ = [
    "CandidateExtractor",
    "CandidateStrategy",
    "FencedBlockStrategy",
    "LabeledSectionStrategy",
    "StructuralMatchStrategy",
    "WholeTextStrategy",
    "default_strategies",
    "FieldReconstructor",
]
