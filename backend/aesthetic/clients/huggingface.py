"""Hugging Face Inference API client for image captions and plan text.

Model cold starts answer 503 and rate limits answer 429; both are retried a
bounded number of times with a linearly growing delay. Anything else that
isn't 2xx is final.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog

from aesthetic.errors import GenerativeModelFailure
from aesthetic.models.contracts import ImagePayload, ModelTextResponse
from aesthetic.utils.model_text import from_huggingface_payload

log = structlog.get_logger("aesthetic.huggingface")

MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 0.8
RETRYABLE_STATUSES = (429, 503)


def _error_message(response: httpx.Response) -> str:
    try:
        detail = response.json()
    except ValueError:
        detail = response.text
    if isinstance(detail, dict):
        detail = detail.get("error") or detail.get("message")
    return str(detail or f"Request failed with status {response.status_code}")


class HuggingFaceInferenceClient:
    provider = "huggingface"

    def __init__(
        self,
        token: str,
        *,
        base_url: str,
        caption_model: str,
        plan_model: str,
        timeout: float = 30.0,
        retry_delay: float = RETRY_DELAY_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self.caption_model = caption_model
        self.plan_model = plan_model
        self._timeout = timeout
        self._retry_delay = retry_delay
        self._transport = transport

    async def invoke(self, model: str, payload: dict[str, Any]) -> Any:
        """POST ``payload`` to ``model`` and return the decoded JSON body."""
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }
        url = f"{self._base_url}/{model}"

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            attempt = 0
            while True:
                try:
                    resp = await client.post(url, headers=headers, json=payload)
                except httpx.HTTPError as e:
                    log.warning("huggingface_request_error", model=model, error=str(e))
                    raise GenerativeModelFailure(f"Hugging Face request failed: {e}") from e

                if resp.status_code in RETRYABLE_STATUSES and attempt < MAX_RETRIES:
                    attempt += 1
                    delay = self._retry_delay * attempt
                    log.warning(
                        "huggingface_retrying",
                        model=model,
                        status=resp.status_code,
                        attempt=attempt,
                        delay=delay,
                    )
                    await asyncio.sleep(delay)
                    continue

                if resp.is_success:
                    try:
                        return resp.json()
                    except ValueError as e:
                        raise GenerativeModelFailure(
                            "Hugging Face returned a non-JSON body", status=resp.status_code
                        ) from e

                log.warning("huggingface_request_failed", model=model, status=resp.status_code)
                raise GenerativeModelFailure(_error_message(resp), status=resp.status_code)

    async def caption(self, image: ImagePayload) -> str | None:
        payload = {"inputs": image.data_uri, "options": {"wait_for_model": True}}
        result = from_huggingface_payload(await self.invoke(self.caption_model, payload))
        return result.text.strip() if result.text else None

    async def generate(self, prompt: str, parameters: dict[str, Any]) -> ModelTextResponse:
        payload = {
            "inputs": prompt,
            "parameters": parameters,
            "options": {"wait_for_model": True},
        }
        return from_huggingface_payload(await self.invoke(self.plan_model, payload))
