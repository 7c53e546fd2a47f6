"""Tests for the textual JSON healing rules."""

import json

import pytest

from utils import JSONRepairer


class TestTrailingCommas:

    def test_before_closers(self):
        assert JSONRepairer.strip_trailing_commas('{"a": [1, 2,], }') == '{"a": [1, 2] }'

    def test_comma_runs(self):
        assert JSONRepairer.strip_trailing_commas('[1,,]') == '[1]'

    def test_commas_inside_strings_are_kept(self):
        text = '{"a": "x,]"}'
        assert JSONRepairer.strip_trailing_commas(text) == text

    def test_comma_run_before_value_is_kept(self):
        assert JSONRepairer.strip_trailing_commas('[1, , 2]') == '[1, , 2]'

    def test_unterminated_string_is_not_touched(self):
        text = '{"a": "x,]'
        assert JSONRepairer.strip_trailing_commas(text) == text


class TestBareKeys:

    def test_quotes_unquoted_keys(self):
        assert JSONRepairer.quote_bare_keys('{characters: [], interactions: []}') == \
            '{"characters": [], "interactions": []}'

    def test_multiline_keys(self):
        text = '{\n  name: "A",\n  description: "x"\n}'
        assert JSONRepairer.quote_bare_keys(text) == '{\n  "name": "A",\n  "description": "x"\n}'

    def test_text_inside_strings_is_not_touched(self):
        text = '{"description": "Note, hero: brave"}'
        assert JSONRepairer.quote_bare_keys(text) == text

    def test_quoted_keys_unchanged(self):
        text = '{"name": "A"}'
        assert JSONRepairer.quote_bare_keys(text) == text


class TestBalance:

    def test_appends_brackets_then_braces(self):
        assert JSONRepairer.balance_brackets('{"a": [1, 2') == '{"a": [1, 2]}'

    def test_never_removes_closers(self):
        assert JSONRepairer.balance_brackets('{"a": 1}}') == '{"a": 1}}'

    def test_counts_braces_inside_strings(self):
        # Naive counting: a literal brace in a value is treated as structure
        assert JSONRepairer.balance_brackets('{"a": "{"}') == '{"a": "{"}}'


class TestRepair:

    def test_combined_rules_produce_valid_json(self):
        repaired = JSONRepairer.repair('{characters: [{name: "A",},], interactions: [')
        assert json.loads(repaired) == {"characters": [{"name": "A"}], "interactions": []}

    def test_valid_json_is_unchanged(self, sample_json):
        assert JSONRepairer.repair(sample_json) == sample_json

    @pytest.mark.parametrize("text", [
        '{characters: [{name: "A",},], interactions: [',
        '{"a": [1, 2,',
        '[1,,]',
        'plain prose, with: colons',
        '{"a": "unterminated',
        '',
    ])
    def test_idempotent(self, text):
        once = JSONRepairer.repair(text)
        assert JSONRepairer.repair(once) == once
