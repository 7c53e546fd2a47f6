"""
Utility classes for scanning, repairing, parsing, prompting and output assembly.
"""

from utils.bracket_scanner import BracketScanner
from utils.json_repairer import JSONRepairer
from utils.response_parser import ResponseParser
from utils.prompt_templates import PromptTemplates
from utils.json_assembler import JSONAssembler

__all__ = [
    "BracketScanner",
    "JSONRepairer",
    "ResponseParser",
    "PromptTemplates",
    "JSONAssembler",
]
