"""Claude as an alternative plan provider.

The SDK's own retry layer is switched off; 429 and 503 get the same bounded,
linearly spaced retries as the Hugging Face client and everything else is final.
"""

from __future__ import annotations

import asyncio
from typing import Any

import anthropic
import structlog

from aesthetic.clients.huggingface import MAX_RETRIES, RETRY_DELAY_SECONDS, RETRYABLE_STATUSES
from aesthetic.errors import GenerativeModelFailure
from aesthetic.models.contracts import ModelTextResponse
from aesthetic.utils.model_text import from_anthropic_message

log = structlog.get_logger("aesthetic.anthropic")

SYSTEM_PROMPT = "You are an interior designer. Reply with a single JSON object and nothing else."


class AnthropicTextGenerator:
    provider = "anthropic"

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        client: anthropic.AsyncAnthropic | None = None,
        retry_delay: float = RETRY_DELAY_SECONDS,
    ):
        self.model = model
        self._retry_delay = retry_delay
        self._client = client or anthropic.AsyncAnthropic(api_key=api_key, max_retries=0)

    async def _create(self, prompt: str, parameters: dict[str, Any]) -> Any:
        try:
            return await self._client.messages.create(
                model=self.model,
                max_tokens=int(parameters.get("max_new_tokens", 420)),
                temperature=float(parameters.get("temperature", 0.45)),
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.RateLimitError as e:
            log.warning("anthropic_plan_rate_limited", model=self.model)
            raise GenerativeModelFailure(f"Claude rate limited: {e}", status=429) from e
        except anthropic.APIStatusError as e:
            log.error("anthropic_plan_api_error", model=self.model, status=e.status_code)
            raise GenerativeModelFailure(
                f"Claude API error ({e.status_code}): {e}", status=e.status_code
            ) from e
        except anthropic.APIConnectionError as e:
            log.warning("anthropic_plan_connection_error", model=self.model)
            raise GenerativeModelFailure(f"Claude unreachable: {e}") from e

    async def generate(self, prompt: str, parameters: dict[str, Any]) -> ModelTextResponse:
        attempt = 0
        while True:
            try:
                response = await self._create(prompt, parameters)
            except GenerativeModelFailure as e:
                if e.status not in RETRYABLE_STATUSES or attempt >= MAX_RETRIES:
                    raise
                attempt += 1
                delay = self._retry_delay * attempt
                log.warning(
                    "anthropic_plan_retrying",
                    model=self.model,
                    status=e.status,
                    attempt=attempt,
                    delay=delay,
                )
                await asyncio.sleep(delay)
                continue
            return from_anthropic_message(response)
