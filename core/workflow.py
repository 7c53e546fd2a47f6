"""
Workflow construction and pipeline execution.
Builds the LangGraph workflow and runs the recovery pipeline.
"""

from functools import lru_cache
from typing import Any, Union

from langgraph.graph import StateGraph, END

from models import AnalysisResult, EmptyInput, PipelineState, RequestedLocale
from core.llm import CharacterAnalysisLLM
from core.observer import LoggingObserver, PipelineObserver
from core.nodes import (
    extract_candidate_node,
    repair_candidate_node,
    parse_candidate_node,
    route_after_parse,
    reconstruct_document_node,
    route_after_reconstruct,
    validate_result_node
)


def create_analysis_graph() -> Any:
    """Create the LangGraph workflow for Start -> Extracted -> Repaired -> Parsed -> Validated."""
    workflow = StateGraph(PipelineState)

    workflow.add_node("extract_candidate", extract_candidate_node)
    workflow.add_node("repair_candidate", repair_candidate_node)
    workflow.add_node("parse_candidate", parse_candidate_node)
    workflow.add_node("reconstruct_document", reconstruct_document_node)
    workflow.add_node("validate_result", validate_result_node)

    # Extraction and repair are total
    workflow.set_entry_point("extract_candidate")
    workflow.add_edge("extract_candidate", "repair_candidate")
    workflow.add_edge("repair_candidate", "parse_candidate")

    workflow.add_conditional_edges(
        "parse_candidate",
        route_after_parse,
        {
            "parsed": "validate_result",
            "reconstruct": "reconstruct_document"
        }
    )
    workflow.add_conditional_edges(
        "reconstruct_document",
        route_after_reconstruct,
        {
            "parsed": "validate_result",
            "failed": END
        }
    )
    workflow.add_edge("validate_result", END)

    return workflow.compile()


@lru_cache(maxsize=1)
def get_analysis_graph() -> Any:
    """Compiled graph, built once per process. It holds no per-invocation state."""
    return create_analysis_graph()


def run_analysis_pipeline(
    raw_text: str,
    locale: Union[RequestedLocale, str] = RequestedLocale.EN,
    observer: PipelineObserver = None,
    language_predicate: Any = None
) -> AnalysisResult:
    """
    Recover a validated AnalysisResult from raw model output.

    Args:
        raw_text: Text returned by the model
        locale: Locale the analysis was requested in
        observer: Receives stage events (defaults to logging)
        language_predicate: Replaces the default locale heuristic

    Returns:
        The validated AnalysisResult

    Raises:
        PipelineError: EmptyInput, ParseFailed, SchemaInvalid or LocaleMismatch
    """
    observer = observer or LoggingObserver()
    locale = RequestedLocale.from_tag(locale)

    if raw_text is None or not raw_text.strip():
        error = EmptyInput("No text supplied", stage="start")
        observer.stage_failed("start", error)
        raise error

    initial_state = PipelineState(
        raw_text=raw_text,
        locale=locale,
        observer=observer,
        language_predicate=language_predicate
    )
    final_state = get_analysis_graph().invoke(initial_state)

    error = final_state.get("error")
    if error is not None:
        raise error
    return final_state["result"]


def analyze_text(
    text: str,
    locale: Union[RequestedLocale, str] = RequestedLocale.EN,
    llm: CharacterAnalysisLLM = None,
    observer: PipelineObserver = None
) -> AnalysisResult:
    """Full flow: call the model on the source text, then recover its reply."""
    locale = RequestedLocale.from_tag(locale)
    if text is None or not text.strip():
        raise EmptyInput("Text is required", stage="start")

    llm = llm or CharacterAnalysisLLM()
    raw_output = llm.generate(text, locale)
    return run_analysis_pipeline(raw_output, locale, observer=observer)
