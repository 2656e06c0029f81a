# Area: Error Tests
"""Tests for the advisory exception hierarchy and error blocks."""

import pytest

from mind_reader.errors import (
    AdvisorySchemaError,
    AdvisoryServiceError,
    AdvisoryTimeoutError,
    AdvisoryUnavailableError,
    InvalidAdvisoryResponseError,
    MindReaderError,
)

CTX = {"guess": 25, "target": 50, "hint": "UP", "history": [25]}


class TestErrorHierarchy:

    @pytest.mark.parametrize("error", [
        AdvisoryUnavailableError(CTX, "no key"),
        AdvisoryTimeoutError(CTX, 3),
        AdvisoryServiceError(CTX, ConnectionError("reset")),
        InvalidAdvisoryResponseError(CTX, None),
        AdvisorySchemaError(CTX, {"message": 1}, ["message: Input should be a valid string"]),
    ])
    def test_all_derive_from_base(self, error):
        assert isinstance(error, MindReaderError)
        assert error.context == CTX


class TestFormatErrorLog:

    def test_timeout_block(self):
        block = AdvisoryTimeoutError(CTX, 3).format_error_log()
        assert "ADVISORY ERROR — FALLBACK USED" in block
        assert "ADVISORY_TIMEOUT" in block
        assert "Timeout:      3 seconds" in block
        assert '"guess": 25' in block

    def test_schema_block_lists_validation_errors(self):
        error = AdvisorySchemaError(CTX, {"message": 1}, ["emoji: Field required"])
        block = error.format_error_log()
        assert "ADVISORY_SCHEMA_FAILURE" in block
        assert "RESPONSE PAYLOAD" in block
        assert " • emoji: Field required" in block

    def test_invalid_response_records_type(self):
        error = InvalidAdvisoryResponseError(CTX, "text")
        assert error.raw_output_type == "str"
        assert "Expected object, got str" in error.format_error_log()

    def test_service_error_names_cause(self):
        error = AdvisoryServiceError(CTX, ConnectionError("reset"))
        assert "ConnectionError: reset" in error.format_error_log()

    def test_unavailable_block(self):
        block = AdvisoryUnavailableError(CTX, "no key").format_error_log()
        assert "ADVISORY_UNAVAILABLE" in block
        assert "Cause:        no key" in block
