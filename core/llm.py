"""
CharacterAnalysisLLM: the upstream model call, wrapped behind a LangChain interface.
"""

from typing import Any, Optional, Sequence

from langchain_core.language_models import BaseLanguageModel

from config import MAX_NEW_TOKENS, MODEL_NAME, TEMPERATURE
from models import PipelineError, RequestedLocale, UpstreamRateLimited, UpstreamUnavailable
from utils import PromptTemplates


class CharacterAnalysisLLM:
    """Sends the analysis prompt to a model and returns its raw reply text."""

    RATE_LIMIT_MARKERS = ("ratelimit", "rate_limit", "rate limit", "too many requests")

    def __init__(self, llm: Optional[BaseLanguageModel] = None, model_name: str = None):
        self.model_name = model_name or MODEL_NAME
        self.llm = llm if llm is not None else self._load_local_model(self.model_name)

    @staticmethod
    def _load_local_model(model_name: str) -> BaseLanguageModel:
        """Local Qwen pipeline via langchain-huggingface (needs the 'local' extra)."""
        import torch
        from langchain_huggingface import HuggingFacePipeline
        from transformers import AutoTokenizer, AutoModelForCausalLM, pipeline

        device = "cuda" if torch.cuda.is_available() else "cpu"
        tokenizer = AutoTokenizer.from_pretrained(model_name)
        model = AutoModelForCausalLM.from_pretrained(
            model_name,
            dtype=torch.float16 if device == "cuda" else torch.float32,
            device_map="auto" if device == "cuda" else None
        )
        if device == "cpu":
            model = model.to(device)

        # When device_map="auto" is used, don't specify device in pipeline
        pipe = pipeline(
            "text-generation",
            model=model,
            tokenizer=tokenizer,
            max_new_tokens=MAX_NEW_TOKENS,
            temperature=TEMPERATURE,
            do_sample=True,
            return_full_text=False,
            device=-1 if device == "cpu" else None
        )
        return HuggingFacePipeline(pipeline=pipe)

    def generate(self, text: str, locale: RequestedLocale) -> str:
        """Run one upstream call. Raises UpstreamRateLimited or UpstreamUnavailable; no retries."""
        messages = PromptTemplates.character_analysis(text, locale)
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            raise self.classify_failure(e) from e

        content = self._reply_text(response)
        if not content.strip():
            raise UpstreamUnavailable("Model returned an empty reply", stage="upstream")
        return content

    @staticmethod
    def _reply_text(response: Any) -> str:
        # Chat models return a message; completion models return a string
        content = getattr(response, "content", response)
        if isinstance(content, str):
            return content
        if isinstance(content, Sequence):
            return "".join(
                part if isinstance(part, str) else str(part.get("text", ""))
                for part in content
                if isinstance(part, (str, dict))
            )
        return ""

    @classmethod
    def classify_failure(cls, error: Exception) -> PipelineError:
        """Map a model-call exception to an upstream error kind. The original message is not kept."""
        status = getattr(error, "status_code", None)
        if status is None:
            status = getattr(getattr(error, "response", None), "status_code", None)

        name = type(error).__name__.lower()
        message = str(error).lower()
        if status == 429 or any(m in name or m in message for m in cls.RATE_LIMIT_MARKERS):
            return UpstreamRateLimited("Model service rate limited the request", stage="upstream")
        return UpstreamUnavailable(
            f"Model call failed ({type(error).__name__})", stage="upstream"
        )
