"""OpenAI completion response to Maxim generation result converter."""

from __future__ import annotations

from typing import Any, Iterable

from openai.types.chat import ChatCompletion
from openai.types.chat.chat_completion import Choice
from pydantic import BaseModel

DEFAULT_FINISH_REASON = "stop"


def _field(obj: Any, name: str) -> Any:
    """Read a field from a pydantic model or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def convert_openai_choices(
    choices: Iterable[Choice | dict[str, Any]],
) -> list[dict[str, Any]]:
    """
    Convert OpenAI response choices to Maxim completion choices.

    Every message is logged as assistant output, logprobs are dropped and
    a missing finish_reason becomes "stop".
    """
    converted: list[dict[str, Any]] = []

    for choice in choices:
        message = _field(choice, "message") or {}
        converted.append(
            {
                "index": _field(choice, "index"),
                "message": {
                    "role": "assistant",
                    "content": _field(message, "content"),
                    "tool_calls": _dump(_field(message, "tool_calls")),
                    "function_call": _dump(_field(message, "function_call")),
                },
                "logprobs": None,
                "finish_reason": _field(choice, "finish_reason")
                or DEFAULT_FINISH_REASON,
            }
        )

    return converted


def convert_openai_completion(
    completion: ChatCompletion | dict[str, Any],
) -> dict[str, Any]:
    """Convert a full OpenAI ChatCompletion to a Maxim generation result."""
    usage = _field(completion, "usage")

    return {
        "id": _field(completion, "id"),
        "object": "chat.completion",
        "created": _field(completion, "created"),
        "model": _field(completion, "model"),
        "choices": convert_openai_choices(_field(completion, "choices") or []),
        "usage": {
            "prompt_tokens": _field(usage, "prompt_tokens") or 0,
            "completion_tokens": _field(usage, "completion_tokens") or 0,
            "total_tokens": _field(usage, "total_tokens") or 0,
        },
    }
