"""Tests for the logging observer used by default."""

import logging

import pytest

from config import SNIPPET_CHARS
from core import LoggingObserver, run_analysis_pipeline
from models import ParseFailed, SchemaInvalid


@pytest.fixture
def log_records(caplog):
    caplog.set_level(logging.DEBUG, logger="core.observer")
    return caplog


class TestLoggingObserver:

    def test_completion_is_logged_at_info(self, log_records):
        LoggingObserver().stage_completed("parse", parsed_by="parser", length=12)

        record, = log_records.records
        assert record.levelno == logging.INFO
        assert record.stage == "parse"
        assert record.getMessage() == "stage parse completed (length=12, parsed_by=parser)"

    def test_failure_is_logged_at_warning_with_kind(self, log_records):
        error = SchemaInvalid("characters.0.name: Field required", stage="validate")
        LoggingObserver().stage_failed("validate", error)

        record, = log_records.records
        assert record.levelno == logging.WARNING
        assert record.stage == "validate"
        assert record.error_kind == "schema_invalid"
        assert "characters.0.name" in record.getMessage()

    def test_snippet_goes_to_debug(self, log_records):
        error = ParseFailed("nothing parsed", candidate="x" * (SNIPPET_CHARS * 2))
        LoggingObserver().stage_failed("reconstruct", error)

        warning, debug = log_records.records
        assert warning.levelno == logging.WARNING
        assert debug.levelno == logging.DEBUG
        assert debug.getMessage() == "stage reconstruct snippet: " + "x" * SNIPPET_CHARS

    def test_no_snippet_record_without_snippet(self, log_records):
        LoggingObserver().stage_failed("start", SchemaInvalid("bad"))
        assert [r.levelno for r in log_records.records] == [logging.WARNING]

    def test_long_details_are_shortened(self):
        shortened = LoggingObserver._shorten("y" * (SNIPPET_CHARS + 50))
        assert shortened == "y" * SNIPPET_CHARS + "..."
        assert LoggingObserver._shorten("short") == "short"

    def test_injected_logger(self, caplog):
        log = logging.getLogger("analysis.custom")
        caplog.set_level(logging.INFO, logger="analysis.custom")
        LoggingObserver(log).stage_completed("extract")
        assert [r.name for r in caplog.records] == ["analysis.custom"]

    def test_pipeline_logs_every_stage_by_default(self, log_records, sample_json):
        run_analysis_pipeline(sample_json)
        stages = [
            r.stage for r in log_records.records
            if r.name == "core.observer" and r.levelno == logging.INFO
        ]
        assert stages == ["extract", "repair", "parse", "validate"]
