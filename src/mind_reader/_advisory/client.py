# Area: Advisory
"""
mind_reader._advisory.client — Best-effort advisory client
===========================================================

Wraps one Anthropic Messages API call per guess with:
1. Credential check (missing key → unavailable)
2. Request with a hard timeout and no retries
3. Structured payload extraction (forced tool call)
4. Schema validation against AdvisoryResult

Any failure in those steps is logged and converted to the
deterministic fallback for the hint. fetch_advisory() never raises.
"""

from __future__ import annotations
import logging
from typing import Any, Optional, Sequence

import anthropic
from pydantic import ValidationError

from .._config import AdvisoryConfig
from .._shared.logging_config import log_advisory_error
from ..errors import (
    AdvisorySchemaError,
    AdvisoryServiceError,
    AdvisoryTimeoutError,
    AdvisoryUnavailableError,
    InvalidAdvisoryResponseError,
    MindReaderError,
)
from ..types import AdvisoryContext, AdvisoryResult, Hint
from .fallback import fallback_advisory
from .prompts import ADVISORY_TOOL, ADVISORY_TOOL_NAME, build_prompt

logger = logging.getLogger("mind_reader.advisory")


class AdvisoryClient:
    """
    Stateless request/response wrapper around the generation service.

    Usage
    -----
        client = AdvisoryClient(load_config())
        advisory = client.fetch_advisory(42, 57, [10, 42], Hint.UP)

    A pre-built ``anthropic.Anthropic`` instance (or any object with the
    same ``messages.create`` signature) may be passed as ``client``.
    """

    def __init__(self, config: Optional[AdvisoryConfig] = None, client: Any = None):
        self.config = config or AdvisoryConfig()
        self._client = client
        if self._client is None:
            self._init_client()

    def _init_client(self) -> None:
        if not self.config.has_credentials:
            return
        self._client = anthropic.Anthropic(
            api_key=self.config.api_key,
            timeout=self.config.timeout_seconds,
            max_retries=0,
        )

    def is_available(self) -> bool:
        return self._client is not None

    def fetch_advisory(
        self,
        guess: int,
        target: int,
        history_values: Sequence[int],
        hint: Hint,
    ) -> AdvisoryResult:
        """
        Ask the service for a comment on a guess.

        Parameters
        ----------
        guess : int
            The value just submitted.
        target : int
            The secret number.
        history_values : Sequence[int]
            All guessed values so far.
        hint : Hint
            The hint computed for the guess.

        Returns
        -------
        AdvisoryResult
            The service's advisory, or the fallback for ``hint`` on any failure.
        """
        ctx: AdvisoryContext = {
            "guess": guess,
            "target": target,
            "hint": hint.value,
            "history": list(history_values),
        }
        try:
            advisory = self._request_advisory(ctx)
        except MindReaderError as e:
            log_advisory_error(e)
        except Exception:
            logger.exception("[ADVISORY] Unexpected failure, using fallback")
        else:
            logger.debug(f"[ADVISORY] Received advisory for guess {guess}")
            return advisory
        return fallback_advisory(hint)

    def _request_advisory(self, ctx: AdvisoryContext) -> AdvisoryResult:
        # ── Step 1: Credentials ───────────────────────────────
        if self._client is None:
            raise AdvisoryUnavailableError(ctx, "no ANTHROPIC_API_KEY configured")

        # ── Step 2: Request ───────────────────────────────────
        try:
            response = self._client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                tools=[ADVISORY_TOOL],
                tool_choice={"type": "tool", "name": ADVISORY_TOOL_NAME},
                messages=[{"role": "user", "content": build_prompt(ctx)}],
            )
        except anthropic.APITimeoutError as e:
            raise AdvisoryTimeoutError(ctx, self.config.timeout_seconds) from e
        except anthropic.APIError as e:
            raise AdvisoryServiceError(ctx, e) from e

        # ── Step 3: Extract structured payload ────────────────
        payload = extract_tool_input(response)
        if not isinstance(payload, dict):
            raise InvalidAdvisoryResponseError(ctx, payload)

        # ── Step 4: Validate against schema ───────────────────
        try:
            return AdvisoryResult.model_validate(payload)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            raise AdvisorySchemaError(ctx, payload, errors) from e


def extract_tool_input(response: Any) -> Any:
    """Return the input of the advisory tool call, or None if there is none."""
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "tool_use" and getattr(block, "name", None) == ADVISORY_TOOL_NAME:
            return block.input
    return None
