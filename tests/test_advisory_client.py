# Area: Advisory Tests
"""Tests for AdvisoryClient request handling and fallbacks."""

import logging
from types import SimpleNamespace

import anthropic
import httpx
import pytest

from mind_reader._advisory import (
    ADVISORY_TOOL,
    ADVISORY_TOOL_NAME,
    AdvisoryClient,
    FALLBACKS,
    build_prompt,
    extract_tool_input,
    fallback_advisory,
)
from mind_reader._config import AdvisoryConfig
from mind_reader.types import AdvisoryResult, Hint

REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def tool_response(payload, name=ADVISORY_TOOL_NAME):
    return SimpleNamespace(content=[
        SimpleNamespace(type="text", text="Here you go"),
        SimpleNamespace(type="tool_use", name=name, input=payload),
    ])


class FakeMessages:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAnthropic:
    """Stand-in for anthropic.Anthropic exposing messages.create()."""

    def __init__(self, response=None, error=None):
        self.messages = FakeMessages(response, error)


def make_client(response=None, error=None):
    fake = FakeAnthropic(response, error)
    config = AdvisoryConfig(api_key="sk-test", model="test-model", max_tokens=64, timeout_seconds=3)
    return AdvisoryClient(config, client=fake), fake


class TestFetchAdvisorySuccess:
    """The service's structured answer is returned as-is."""

    def test_returns_parsed_advisory(self):
        client, _ = make_client(tool_response({"message": "Warmer!", "emoji": "🔥"}))
        result = client.fetch_advisory(40, 50, [10, 40], Hint.UP)
        assert result == AdvisoryResult(message="Warmer!", emoji="🔥")

    def test_request_forces_tool_call(self):
        client, fake = make_client(tool_response({"message": "Nope", "emoji": "🙃"}))
        client.fetch_advisory(60, 50, [60], Hint.DOWN)

        call = fake.messages.calls[0]
        assert call["model"] == "test-model"
        assert call["max_tokens"] == 64
        assert call["tools"] == [ADVISORY_TOOL]
        assert call["tool_choice"] == {"type": "tool", "name": ADVISORY_TOOL_NAME}
        prompt = call["messages"][0]["content"]
        assert "guessed 60" in prompt
        assert "DOWN" in prompt

    def test_extra_fields_ignored(self):
        client, _ = make_client(tool_response({"message": "Yes!", "emoji": "🎯", "mood": "happy"}))
        result = client.fetch_advisory(50, 50, [50], Hint.CORRECT)
        assert result.message == "Yes!"


class TestFetchAdvisoryFallback:
    """Every failure resolves to the fallback for the hint."""

    @pytest.mark.parametrize("error", [
        anthropic.APITimeoutError(request=REQUEST),
        anthropic.APIConnectionError(request=REQUEST),
        anthropic.InternalServerError(
            "overloaded", response=httpx.Response(529, request=REQUEST), body=None,
        ),
        RuntimeError("unexpected"),
    ])
    def test_request_errors_fall_back(self, error):
        client, _ = make_client(error=error)
        result = client.fetch_advisory(25, 50, [25], Hint.UP)
        assert result == FALLBACKS[Hint.UP]

    @pytest.mark.parametrize("response", [
        SimpleNamespace(content=[SimpleNamespace(type="text", text='{"message": "hi", "emoji": "👋"}')]),
        SimpleNamespace(content=[]),
        SimpleNamespace(content=None),
        tool_response({"message": "hi", "emoji": "👋"}, name="other_tool"),
        tool_response("not an object"),
        tool_response({"message": "hi"}),
        tool_response({"message": 42, "emoji": "👋"}),
        tool_response({"message": "   ", "emoji": "👋"}),
        tool_response({"message": "hi", "emoji": ""}),
    ])
    def test_malformed_responses_fall_back(self, response):
        client, _ = make_client(response)
        result = client.fetch_advisory(75, 50, [75], Hint.DOWN)
        assert result == FALLBACKS[Hint.DOWN]

    def test_missing_api_key_falls_back_without_request(self):
        client = AdvisoryClient(AdvisoryConfig(api_key=None))
        assert not client.is_available()
        result = client.fetch_advisory(50, 50, [50], Hint.CORRECT)
        assert result == FALLBACKS[Hint.CORRECT]

    def test_failure_is_logged_as_warning(self, caplog):
        client, _ = make_client(error=anthropic.APITimeoutError(request=REQUEST))
        with caplog.at_level(logging.WARNING, logger="mind_reader"):
            client.fetch_advisory(25, 50, [25], Hint.UP)
        messages = [r.getMessage() for r in caplog.records if r.name == "mind_reader.advisory"]
        assert any("AdvisoryTimeoutError" in m for m in messages)

    def test_no_retry_on_failure(self):
        client, fake = make_client(error=anthropic.APIConnectionError(request=REQUEST))
        client.fetch_advisory(25, 50, [25], Hint.UP)
        assert len(fake.messages.calls) == 1


class TestFallbacks:
    """Tests for the static advisories."""

    @pytest.mark.parametrize("hint", list(Hint))
    def test_every_hint_has_non_empty_fallback(self, hint):
        result = fallback_advisory(hint)
        assert result.message
        assert result.emoji

    def test_correct_fallback_celebrates(self):
        assert fallback_advisory(Hint.CORRECT).emoji == "🎉"
        assert fallback_advisory(Hint.UP).emoji == "💡"
        assert fallback_advisory(Hint.DOWN).emoji == "💡"


class TestPromptAndExtraction:
    """Tests for prompt rendering and tool payload extraction."""

    def test_prompt_lists_history(self):
        prompt = build_prompt({"guess": 30, "target": 44, "hint": "UP", "history": [10, 20, 30]})
        assert "[10, 20, 30]" in prompt
        assert ADVISORY_TOOL_NAME in prompt

    def test_schema_requires_both_fields(self):
        assert ADVISORY_TOOL["input_schema"]["required"] == ["message", "emoji"]

    def test_extract_returns_none_without_tool_block(self):
        assert extract_tool_input(SimpleNamespace(content=[])) is None
        assert extract_tool_input(object()) is None
