"""
Core pipeline components including the upstream LLM wrapper, graph nodes, and workflow construction.
"""

from core.llm import CharacterAnalysisLLM
from core.observer import PipelineObserver, LoggingObserver
from core.workflow import create_analysis_graph, run_analysis_pipeline, analyze_text

__all__ = [
    "CharacterAnalysisLLM",
    "PipelineObserver",
    "LoggingObserver",
    "create_analysis_graph",
    "run_analysis_pipeline",
    "analyze_text",
]
