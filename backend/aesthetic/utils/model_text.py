"""Normalise provider responses into ``ModelTextResponse``.

Hosted inference endpoints disagree on where the text lives: a bare string,
a list of candidates, ``generated_text``, ``text``, ``output``, ``caption``,
``choices[0].text`` or ``data[0].generated_text``. Each provider gets one
adapter here so call sites only ever see the canonical shape.
"""

from __future__ import annotations

from typing import Any

import anthropic

from aesthetic.models.contracts import ModelTextResponse

_TEXT_KEYS = ("generated_text", "text", "output", "caption")


def _text_from_mapping(payload: dict[str, Any]) -> str | None:
    for key in _TEXT_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    choices = payload.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        value = choices[0].get("text")
        if isinstance(value, str):
            return value
    data = payload.get("data")
    if isinstance(data, list) and data and isinstance(data[0], dict):
        value = data[0].get("generated_text")
        if isinstance(value, str):
            return value
    return None


def text_from_payload(payload: Any) -> str | None:
    """Pull the first usable text out of any known inference response shape."""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, list):
        return text_from_payload(payload[0]) if payload else None
    if isinstance(payload, dict):
        return _text_from_mapping(payload)
    return None


def from_huggingface_payload(payload: Any) -> ModelTextResponse:
    return ModelTextResponse.of("huggingface", text_from_payload(payload))


def from_anthropic_message(message: anthropic.types.Message) -> ModelTextResponse:
    text = "".join(block.text for block in message.content if hasattr(block, "text"))
    return ModelTextResponse.of("anthropic", text)
