"""Tests for the candidate extraction strategies and their priority order."""

import pytest

from extractors import (
    CandidateExtractor,
    FencedBlockStrategy,
    LabeledSectionStrategy,
    StructuralMatchStrategy,
    WholeTextStrategy,
)
from models import CandidateSource


EMPTY_DOC = '{"characters":[],"interactions":[]}'


@pytest.fixture
def extractor():
    return CandidateExtractor()


class TestFencedBlock:

    def test_json_tagged_fence(self, extractor):
        candidate = extractor.extract(f"Here you go:\n```json\n{EMPTY_DOC}\n```\nEnjoy!")
        assert candidate.source == CandidateSource.FENCED_BLOCK
        assert candidate.text == EMPTY_DOC

    def test_untagged_fence(self, extractor):
        candidate = extractor.extract(f"```\n{EMPTY_DOC}\n```")
        assert candidate.source == CandidateSource.FENCED_BLOCK
        assert candidate.text == EMPTY_DOC

    def test_first_fence_pair_wins(self, extractor):
        text = '```json\n{"first": 1}\n```\n```json\n{"second": 2}\n```'
        assert extractor.extract(text).text == '{"first": 1}'

    def test_empty_fence_is_not_a_candidate(self):
        assert FencedBlockStrategy().try_extract("``````") is None

    def test_unclosed_fence_falls_through(self, extractor):
        text = '```json\n{"characters": [], "interactions": ['
        candidate = extractor.extract(text)
        assert candidate.source == CandidateSource.STRUCTURAL_MATCH
        assert candidate.text == '{"characters": [], "interactions": []}'


class TestLabeledSection:

    def test_object_after_marker(self, extractor):
        text = (
            'Returning the analysis in JSON format: '
            '{"characters": [{"name": "A", "description": "x"}], "interactions": []}'
            ' Let me know if you need more {details}.'
        )
        candidate = extractor.extract(text)
        assert candidate.source == CandidateSource.LABELED_SECTION
        assert candidate.text == '{"characters": [{"name": "A", "description": "x"}], "interactions": []}'

    def test_marker_is_case_insensitive(self):
        candidate = LabeledSectionStrategy().try_extract('in json FORMAT {"a": {"b": 1}} trailing')
        assert candidate.text == '{"a": {"b": 1}}'

    def test_arabic_marker(self):
        text = 'إليك النتيجة بتنسيق JSON: {"characters": [], "interactions": []}'
        candidate = LabeledSectionStrategy().try_extract(text)
        assert candidate.text == '{"characters": [], "interactions": []}'

    def test_braces_inside_strings_do_not_end_the_object(self):
        text = 'JSON format: {"notes": "uses } often", "x": 1} tail'
        assert LabeledSectionStrategy().try_extract(text).text == '{"notes": "uses } often", "x": 1}'

    def test_unbalanced_section_is_not_a_candidate(self):
        assert LabeledSectionStrategy().try_extract('JSON format: {"characters": [') is None

    def test_no_marker(self):
        assert LabeledSectionStrategy().try_extract(EMPTY_DOC) is None


class TestStructuralMatch:

    def test_prose_prefix_is_dropped_and_tail_kept(self):
        text = 'Sure! {"characters": [], "interactions": []} Hope it helps'
        candidate = StructuralMatchStrategy().try_extract(text)
        assert candidate.source == CandidateSource.STRUCTURAL_MATCH
        assert candidate.text == '{"characters": [], "interactions": []} Hope it helps'

    def test_truncated_document_is_closed(self):
        text = '{"characters":[{"name":"A","description":"d"}],"interactions":['
        candidate = StructuralMatchStrategy().try_extract(text)
        assert candidate.text == text + ']}'

    def test_balanced_document_is_never_over_closed(self):
        assert StructuralMatchStrategy().try_extract(EMPTY_DOC).text == EMPTY_DOC

    def test_requires_both_keys(self):
        assert StructuralMatchStrategy().try_extract('{"characters": []}') is None

    def test_requires_an_opening_brace(self):
        assert StructuralMatchStrategy().try_extract('"characters" "interactions"') is None


class TestPriorityOrder:

    def test_fence_beats_marker(self, extractor):
        text = f'JSON format: {{"ignored": true}}\n```json\n{EMPTY_DOC}\n```'
        assert extractor.extract(text).source == CandidateSource.FENCED_BLOCK

    def test_whole_text_fallback(self, extractor):
        candidate = extractor.extract("no json here")
        assert candidate.source == CandidateSource.WHOLE_TEXT
        assert candidate.text == "no json here"

    def test_custom_strategy_list(self):
        extractor = CandidateExtractor([WholeTextStrategy()])
        candidate = extractor.extract(f"```json\n{EMPTY_DOC}\n```")
        assert candidate.source == CandidateSource.WHOLE_TEXT

    def test_empty_strategy_list_still_returns_a_candidate(self):
        candidate = CandidateExtractor([]).extract("anything")
        assert candidate.source == CandidateSource.WHOLE_TEXT
        assert candidate.text == "anything"

    @pytest.mark.parametrize("text", ["", "{", "}}}}", "```", "\x00\xff", "[" * 10000])
    def test_never_raises(self, extractor, text):
        assert extractor.extract(text) is not None
