"""OpenAI-compatible chat completions client for coaching suggestions."""

import logging
from dataclasses import dataclass
from http import HTTPStatus

import openai
from openai import AsyncOpenAI

from body_tracker.services.suggestions import (
    SuggestionClient,
    SuggestionError,
    SuggestionPaymentRequiredError,
    SuggestionRateLimitError,
)

_logger = logging.getLogger(__name__)


@dataclass
class OpenAISuggestionClient(SuggestionClient):
    """Suggestion client backed by the chat completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, base_url: str | None = None
    ) -> "OpenAISuggestionClient":
        """Create a client, optionally pointed at an OpenAI-compatible gateway."""
        return cls(client=AsyncOpenAI(api_key=api_key, base_url=base_url))

    async def complete(
        self, *, model: str, system_prompt: str, user_prompt: str
    ) -> str:
        """Call chat completions and return the first message's content."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.RateLimitError as exc:
            _logger.warning("Suggestion backend rate limited: %s", exc)
            raise SuggestionRateLimitError(
                "Rate limit exceeded. Please try again later."
            ) from exc
        except openai.APIStatusError as exc:
            _logger.error(
                "Suggestion backend error: status=%s body=%s",
                exc.status_code,
                exc.body,
            )
            if exc.status_code == HTTPStatus.PAYMENT_REQUIRED:
                raise SuggestionPaymentRequiredError(
                    "Payment required. Please add credits to your workspace."
                ) from exc
            raise SuggestionError(
                f"AI gateway error: {exc.status_code}"
            ) from exc
        except openai.APIError as exc:
            _logger.error("Suggestion backend request failed: %s", exc)
            raise SuggestionError("AI gateway request failed") from exc

        if not response.choices:
            raise SuggestionError("AI gateway returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise SuggestionError("AI gateway returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
