"""
JSONRepairer for healing near-valid JSON emitted by the model.
"""

import re

from utils.bracket_scanner import BracketScanner


class JSONRepairer:
    """Applies fixed textual healing rules. Total and idempotent; output may still be invalid."""

    # Identifier key after '{' or ',' that is followed by a colon
    BARE_KEY = re.compile(r'([{,]\s*)(\w+)(\s*):')

    # A whole run of commas and whitespace, matched once from its first comma
    COMMA_RUN = re.compile(r',[\s,]*')
    CLOSERS = ('}', ']')

    @staticmethod
    def quote_bare_keys(text: str) -> str:
        """Quote unquoted identifier keys outside string literals."""
        return JSONRepairer._outside_strings(
            text, lambda segment: JSONRepairer.BARE_KEY.sub(r'\1"\2"\3:', segment)
        )

    @staticmethod
    def strip_trailing_commas(text: str) -> str:
        """Remove commas that directly precede '}' or ']' outside string literals."""
        return JSONRepairer._outside_strings(
            text, JSONRepairer._strip_comma_runs
        )

    @staticmethod
    def _strip_comma_runs(segment: str) -> str:
        def replace(match):
            run = match.group(0)
            if segment[match.end():match.end() + 1] not in JSONRepairer.CLOSERS:
                return run
            # Keep whitespace after the last comma
            return run[run.rfind(',') + 1:]

        return JSONRepairer.COMMA_RUN.sub(replace, segment)

    @staticmethod
    def balance_brackets(text: str) -> str:
        """Append missing ']' then '}' by naive count. Never removes or prepends anything."""
        suffix = BracketScanner.closing_suffix(text)
        if not suffix:
            return text
        return text.rstrip() + suffix

    @staticmethod
    def repair(text: str) -> str:
        """Apply every rule. Balancing runs first so appended closers get comma-stripped too."""
        text = JSONRepairer.balance_brackets(text)
        text = JSONRepairer.quote_bare_keys(text)
        text = JSONRepairer.strip_trailing_commas(text)
        return text

    @staticmethod
    def _outside_strings(text: str, rule) -> str:
        return ''.join(
            segment if is_string else rule(segment)
            for is_string, segment in BracketScanner.split_strings(text)
        )
