"""
Configuration constants for the character analysis pipeline.
All locale tables, heuristics and model settings are centralized here.
"""

# ============================================================================
# MODEL CONFIGURATION
# ============================================================================

# LLM Model (used only when no model is injected)
MODEL_NAME = "Qwen/Qwen2.5-7B-Instruct"
MAX_NEW_TOKENS = 2048  # Character analysis returns the whole document in one reply
TEMPERATURE = 0.2

# ============================================================================
# LOCALE CONFIGURATION
# ============================================================================

DEFAULT_LOCALE = "en"
ALTERNATE_LOCALE = "ar"

# Human readable language names used in prompts
LANGUAGE_NAMES = {
    "en": "English",
    "ar": "Arabic",
}

# ============================================================================
# EXTRACTION CONFIGURATION
# ============================================================================

# Markers the model uses when it restates the instructions before the payload
LABEL_MARKERS = [
    "JSON format",
    "بتنسيق JSON",
    "صيغة JSON",
]

# Keys that identify the analysis document inside free text
CHARACTERS_KEY = "characters"
INTERACTIONS_KEY = "interactions"

# ============================================================================
# LOCALE HEURISTIC CONFIGURATION
# ============================================================================

# Closed set of default-language function words (matched as whole words)
DEFAULT_LANGUAGE_FUNCTION_WORDS = frozenset({
    "the", "and", "is", "in", "of", "to", "a", "an", "was", "with",
    "his", "her", "he", "she", "they", "for", "on", "that", "who", "are",
})

# Script ranges (regex character-class bodies) per alternate locale
LOCALE_SCRIPT_RANGES = {
    ALTERNATE_LOCALE: "\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF",
}

# ============================================================================
# DIAGNOSTICS CONFIGURATION
# ============================================================================

SNIPPET_CHARS = 200  # Raw text kept on errors and log records

# ============================================================================
# OUTPUT CONFIGURATION
# ============================================================================

# Status codes per error kind (client input -> 4xx, upstream/parse -> 5xx)
ERROR_STATUS_CODES = {
    "empty_input": 400,
    "upstream_rate_limited": 429,
    "upstream_unavailable": 503,
    "parse_failed": 502,
    "schema_invalid": 502,
    "locale_mismatch": 502,
}

ERROR_MESSAGES = {
    "en": {
        "empty_input": "Text is required",
        "upstream_rate_limited": "The analysis service is busy. Please retry in a moment.",
        "upstream_unavailable": "The analysis service is unavailable. Please retry later.",
        "parse_failed": "Could not analyze this text.",
        "schema_invalid": "Could not analyze this text.",
        "locale_mismatch": "The results were returned in the wrong language. Please retry.",
    },
    "ar": {
        "empty_input": "النص مطلوب",
        "upstream_rate_limited": "خدمة التحليل مشغولة. يرجى المحاولة مرة أخرى بعد قليل.",
        "upstream_unavailable": "خدمة التحليل غير متاحة. يرجى المحاولة لاحقاً.",
        "parse_failed": "تعذر تحليل هذا النص.",
        "schema_invalid": "تعذر تحليل هذا النص.",
        "locale_mismatch": "تم إرجاع النتائج بلغة غير صحيحة. يرجى المحاولة مرة أخرى.",
    },
}

# Output File (CLI only; None writes to stdout)
OUTPUT_FILE = None
