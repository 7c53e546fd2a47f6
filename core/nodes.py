"""
Graph nodes for the analysis pipeline.
Each node runs one stage and returns a partial state update.
"""

from typing import Any, Dict

from extractors import CandidateExtractor, FieldReconstructor
from models import (
    PipelineState, ParseFailed, ReconstructionFailed,
    StructuralParseError, SchemaInvalid, LocaleMismatch
)
from utils import JSONRepairer, ResponseParser
from validators import SchemaValidator, LocaleValidator
from core.observer import PipelineObserver

# Stateless, shared across invocations
_extractor = CandidateExtractor()
_reconstructor = FieldReconstructor()
_null_observer = PipelineObserver()


def _observer(state: PipelineState) -> PipelineObserver:
    return state.observer or _null_observer


def extract_candidate_node(state: PipelineState) -> Dict[str, Any]:
    """Start -> Extracted: isolate the most likely JSON substring."""
    candidate = _extractor.extract(state.raw_text)
    _observer(state).stage_completed(
        "extract", source=candidate.source.value, length=len(candidate.text)
    )
    return {"candidate": candidate}


def repair_candidate_node(state: PipelineState) -> Dict[str, Any]:
    """Extracted -> Repaired: apply the healing rules."""
    repaired = JSONRepairer.repair(state.candidate.text)
    _observer(state).stage_completed(
        "repair", changed=repaired != state.candidate.text, length=len(repaired)
    )
    return {"repaired_text": repaired}


def parse_candidate_node(state: PipelineState) -> Dict[str, Any]:
    """Repaired -> Parsed, or record the failure for the reconstruction branch."""
    try:
        document = ResponseParser.parse_document(state.repaired_text)
    except StructuralParseError as e:
        _observer(state).stage_failed("parse", e)
        return {"parse_error": e.message}

    _observer(state).stage_completed("parse", parsed_by="parser")
    return {"document": document, "parsed_by": "parser"}


def route_after_parse(state: PipelineState) -> str:
    """Conditional edge: validate a parsed document, otherwise reconstruct."""
    if state.document is not None:
        return "parsed"
    else:
        return "reconstruct"


def reconstruct_document_node(state: PipelineState) -> Dict[str, Any]:
    """ReconstructAttempt -> Parsed, or Failed(ParseFailed)."""
    try:
        document = _reconstructor.reconstruct(state.raw_text)
    except ReconstructionFailed as e:
        _observer(state).stage_failed("reconstruct", e)
        error = ParseFailed(
            f"Strict parse failed ({state.parse_error}) and reconstruction failed ({e.message})",
            candidate=state.repaired_text
        )
        return {"error": error}

    _observer(state).stage_completed("reconstruct", parsed_by="reconstructor")
    return {"document": document, "parsed_by": "reconstructor"}


def route_after_reconstruct(state: PipelineState) -> str:
    """Conditional edge: stop on failure, otherwise validate."""
    if state.error is not None:
        return "failed"
    else:
        return "parsed"


def validate_result_node(state: PipelineState) -> Dict[str, Any]:
    """Parsed -> Validated, or Failed(SchemaInvalid | LocaleMismatch)."""
    try:
        result = SchemaValidator.validate(state.document)
        result = LocaleValidator(state.language_predicate).validate(result, state.locale)
    except (SchemaInvalid, LocaleMismatch) as e:
        _observer(state).stage_failed("validate", e)
        return {"error": e}

    _observer(state).stage_completed(
        "validate",
        characters=len(result.characters),
        interactions=len(result.interactions),
        parsed_by=state.parsed_by,
        dangling=len(result.dangling_references())
    )
    return {"result": result}
