"""
BracketScanner for locating balanced brackets and string literals in JSON-like text.
"""

from typing import Dict, Iterable, List, Tuple


class BracketScanner:
    """Scans JSON-like text for string literals and bracket balance. Every scan is a single pass."""

    PAIRS = {'{': '}', '[': ']'}

    @staticmethod
    def find_closing(text: str, start: int) -> int:
        """Index of the bracket closing text[start], skipping string contents. -1 if never closed."""
        opener = text[start]
        closer = BracketScanner.PAIRS[opener]
        depth = 0
        in_string = False
        escape_next = False

        for i in range(start, len(text)):
            ch = text[i]
            if escape_next:
                escape_next = False
                continue
            if in_string:
                if ch == '\\':
                    escape_next = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    return i

        return -1

    @staticmethod
    def find_closings(text: str, starts: Iterable[int]) -> Dict[int, int]:
        """
        Closing index for every start that closes, in one pass.

        All starts must hold the same opener. String state is reset at each
        start, so the scan treats every start as lying outside a literal,
        as find_closing does. Starts that never close are absent.
        """
        starts = sorted(set(starts))
        if not starts:
            return {}
        opener = text[starts[0]]
        closer = BracketScanner.PAIRS[opener]
        resets = set(starts)
        open_positions: List[int] = []
        closings = {}
        in_string = False
        escape_next = False

        for i in range(starts[0], len(text)):
            ch = text[i]
            if i in resets:
                in_string = False
                escape_next = False
            if escape_next:
                escape_next = False
                continue
            if in_string:
                if ch == '\\':
                    escape_next = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == opener:
                open_positions.append(i)
            elif ch == closer and open_positions:
                closings[open_positions.pop()] = i

        return {start: closings[start] for start in starts if start in closings}

    @staticmethod
    def split_strings(text: str) -> List[Tuple[bool, str]]:
        """
        Split text into (is_string_literal, segment) pieces, in order.

        A literal that is never closed runs to the end of the text.
        """
        segments = []
        segment_start = 0
        in_string = False
        escape_next = False

        for i, ch in enumerate(text):
            if escape_next:
                escape_next = False
            elif in_string:
                if ch == '\\':
                    escape_next = True
                elif ch == '"':
                    segments.append((True, text[segment_start:i + 1]))
                    segment_start = i + 1
                    in_string = False
            elif ch == '"':
                if i > segment_start:
                    segments.append((False, text[segment_start:i]))
                segment_start = i
                in_string = True

        if segment_start < len(text):
            segments.append((in_string, text[segment_start:]))
        return segments

    @staticmethod
    def deficits(text: str) -> Tuple[int, int]:
        """Naive (missing '}', missing ']') counts over the whole text, string contents included."""
        brace_deficit = max(0, text.count('{') - text.count('}'))
        bracket_deficit = max(0, text.count('[') - text.count(']'))
        return brace_deficit, bracket_deficit

    @staticmethod
    def closing_suffix(text: str) -> str:
        """Closers that complete an array-then-object shape; empty when nothing is open."""
        brace_deficit, bracket_deficit = BracketScanner.deficits(text)
        return ']' * bracket_deficit + '}' * brace_deficit
