"""
PipelineState model for carrying one invocation through the LangGraph workflow.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict

from models.analysis import AnalysisResult
from models.candidate import ExtractionCandidate
from models.errors import PipelineError
from models.locale import RequestedLocale


class PipelineState(BaseModel):
    """State maintained across the graph."""
    raw_text: str = ""
    locale: RequestedLocale = RequestedLocale.EN

    # Stage outputs
    candidate: Optional[ExtractionCandidate] = None
    repaired_text: str = ""
    document: Optional[Dict[str, Any]] = None
    parsed_by: str = ""  # "parser" or "reconstructor"
    parse_error: str = ""
    result: Optional[AnalysisResult] = None

    # Terminal failure, kind preserved
    error: Optional[PipelineError] = None

    # Collaborators (not serialized)
    observer: Any = None
    language_predicate: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True)
