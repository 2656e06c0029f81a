"""
mind_reader.errors — Custom exception classes
==============================================

Defines the exception hierarchy for the advisory path.
Each exception stores full context for structured logging. None of
them ever escapes ``AdvisoryClient.fetch_advisory``; they are raised
internally and converted to a fallback advisory.
"""

from __future__ import annotations
from typing import Any, Dict, List

from .error_formatter import format_error_block


class MindReaderError(Exception):
    """Base exception for all mind_reader package errors."""
    pass


class AdvisoryUnavailableError(MindReaderError):
    """Raised when no advisory service is configured (e.g. missing API key)."""

    def __init__(self, context: Dict[str, Any], reason: str):
        self.context = context
        self.reason = reason
        super().__init__(f"Advisory service unavailable: {reason}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="ADVISORY_UNAVAILABLE",
            context=self.context,
            cause=self.reason,
        )


class AdvisoryTimeoutError(MindReaderError):
    """Raised when the advisory request exceeds its timeout."""

    def __init__(self, context: Dict[str, Any], timeout_seconds: float):
        self.context = context
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Advisory request timed out after {timeout_seconds} seconds")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="ADVISORY_TIMEOUT",
            context=self.context,
            timeout_seconds=self.timeout_seconds,
        )


class AdvisoryServiceError(MindReaderError):
    """Raised on network failures or errors reported by the service."""

    def __init__(self, context: Dict[str, Any], cause: BaseException):
        self.context = context
        self.cause = cause
        super().__init__(f"Advisory service failed: {cause.__class__.__name__}: {cause}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="ADVISORY_SERVICE_FAILURE",
            context=self.context,
            cause=f"{self.cause.__class__.__name__}: {self.cause}",
        )


class InvalidAdvisoryResponseError(MindReaderError):
    """Raised when the response carries no structured object payload."""

    def __init__(self, context: Dict[str, Any], raw_output: Any):
        self.context = context
        self.raw_output = raw_output
        self.raw_output_type = type(raw_output).__name__
        super().__init__(
            f"Advisory response carried {self.raw_output_type} instead of an object"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_ADVISORY_RESPONSE",
            context=self.context,
            output_payload={"raw_output": repr(self.raw_output), "type": self.raw_output_type},
            validation_errors=[f"Expected object, got {self.raw_output_type}"],
        )


class AdvisorySchemaError(MindReaderError):
    """Raised when the structured payload fails AdvisoryResult validation."""

    def __init__(
        self,
        context: Dict[str, Any],
        output_payload: Dict[str, Any],
        validation_errors: List[str],
    ):
        self.context = context
        self.output_payload = output_payload
        self.validation_errors = validation_errors
        super().__init__(f"Advisory response failed validation: {validation_errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="ADVISORY_SCHEMA_FAILURE",
            context=self.context,
            output_payload=self.output_payload,
            validation_errors=self.validation_errors,
        )
