"""
Pipeline observers: the diagnostics side-channel injected into the workflow.
"""

import logging
from typing import Any

from config import SNIPPET_CHARS
from models import PipelineError

logger = logging.getLogger(__name__)


class PipelineObserver:
    """Receives stage events. The base class drops them."""

    def stage_completed(self, stage: str, **details: Any) -> None:
        pass

    def stage_failed(self, stage: str, error: PipelineError) -> None:
        pass


class LoggingObserver(PipelineObserver):
    """Writes stage events through the standard logging module."""

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger

    @staticmethod
    def _shorten(value: Any) -> str:
        text = str(value)
        return text if len(text) <= SNIPPET_CHARS else text[:SNIPPET_CHARS] + "..."

    def stage_completed(self, stage: str, **details: Any) -> None:
        rendered = ", ".join(f"{k}={self._shorten(v)}" for k, v in sorted(details.items()))
        self.log.info("stage %s completed (%s)", stage, rendered, extra={"stage": stage})

    def stage_failed(self, stage: str, error: PipelineError) -> None:
        self.log.warning(
            "stage %s failed: %s", stage, error,
            extra={"stage": stage, "error_kind": error.kind}
        )
        if error.snippet:
            self.log.debug("stage %s snippet: %s", stage, error.snippet, extra={"stage": stage})
