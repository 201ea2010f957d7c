"""Tests for the OpenAI suggestion adapter."""

import asyncio

import httpx
import openai
import pytest

from body_tracker.adapters.openai_suggestion_client import OpenAISuggestionClient
from body_tracker.services.suggestions import (
    SuggestionError,
    SuggestionPaymentRequiredError,
    SuggestionRateLimitError,
)

_URL = "https://gateway.test/v1/chat/completions"


def _status_error(cls: type[openai.APIStatusError], code: int) -> Exception:
    request = httpx.Request("POST", _URL)
    response = httpx.Response(code, request=request, json={"error": "nope"})
    return cls("upstream failed", response=response, body={"error": "nope"})


class _FakeCompletions:
    def __init__(
        self, content: str | None = "Eat well.", error: Exception | None = None
    ) -> None:
        self.content = content
        self.error = error
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        if self.error is not None:
            raise self.error
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        return type("Resp", (), {"choices": [choice]})()


class _FakeOpenAI:
    def __init__(self, completions: _FakeCompletions) -> None:
        self.chat = type("Chat", (), {"completions": completions})()


def _complete(client: OpenAISuggestionClient) -> str:
    return asyncio.run(
        client.complete(model="m", system_prompt="sys", user_prompt="user")
    )


def test_openai_suggestion_client_returns_content() -> None:
    completions = _FakeCompletions()
    client = OpenAISuggestionClient(client=_FakeOpenAI(completions))

    assert _complete(client) == "Eat well."
    assert completions.last_payload is not None
    assert completions.last_payload["model"] == "m"
    assert completions.last_payload["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "user"},
    ]


def test_openai_suggestion_client_maps_rate_limit() -> None:
    error = _status_error(openai.RateLimitError, 429)
    client = OpenAISuggestionClient(
        client=_FakeOpenAI(_FakeCompletions(error=error))
    )

    with pytest.raises(SuggestionRateLimitError):
        _complete(client)


def test_openai_suggestion_client_maps_payment_required() -> None:
    error = _status_error(openai.APIStatusError, 402)
    client = OpenAISuggestionClient(
        client=_FakeOpenAI(_FakeCompletions(error=error))
    )

    with pytest.raises(SuggestionPaymentRequiredError):
        _complete(client)


def test_openai_suggestion_client_maps_other_status() -> None:
    error = _status_error(openai.InternalServerError, 500)
    client = OpenAISuggestionClient(
        client=_FakeOpenAI(_FakeCompletions(error=error))
    )

    with pytest.raises(SuggestionError) as exc_info:
        _complete(client)

    assert exc_info.type is SuggestionError
    assert "500" in str(exc_info.value)


def test_openai_suggestion_client_rejects_empty_content() -> None:
    client = OpenAISuggestionClient(
        client=_FakeOpenAI(_FakeCompletions(content=""))
    )

    with pytest.raises(SuggestionError):
        _complete(client)


def test_openai_suggestion_client_create_uses_base_url() -> None:
    client = OpenAISuggestionClient.create(
        api_key="key", base_url="https://gateway.test/v1"
    )

    assert str(client.client.base_url).startswith("https://gateway.test/v1")
    asyncio.run(client.close())
