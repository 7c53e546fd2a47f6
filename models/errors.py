"""
Pipeline error taxonomy.

Every failure the pipeline can report is a PipelineError subclass with a
stable `kind`. The boundary maps kinds to user messages and status codes,
so kinds must never be collapsed into a generic error before that point.
"""

from typing import Optional

from config import SNIPPET_CHARS


class PipelineError(Exception):
    """Base class for classified pipeline failures."""
    kind = "pipeline_error"

    def __init__(self, message: str, stage: str = "", snippet: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.snippet = (snippet or "")[:SNIPPET_CHARS]

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class EmptyInput(PipelineError):
    kind = "empty_input"


class UpstreamUnavailable(PipelineError):
    kind = "upstream_unavailable"


class UpstreamRateLimited(PipelineError):
    kind = "upstream_rate_limited"


class StructuralParseError(PipelineError):
    """Strict parse of a candidate failed. Keeps the full offending text."""
    kind = "structural_parse_error"

    def __init__(self, message: str, text: str = "", stage: str = "parse"):
        super().__init__(message, stage=stage, snippet=text)
        self.text = text


class ReconstructionFailed(PipelineError):
    kind = "reconstruction_failed"


class ParseFailed(PipelineError):
    """Both strict parsing and field reconstruction failed."""
    kind = "parse_failed"

    def __init__(self, message: str, candidate: str = "", stage: str = "reconstruct"):
        super().__init__(message, stage=stage, snippet=candidate)
        self.candidate = candidate


class SchemaInvalid(PipelineError):
    kind = "schema_invalid"


class LocaleMismatch(PipelineError):
    kind = "locale_mismatch"
