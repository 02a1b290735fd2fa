"""OpenAI chat messages to Maxim message converter."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from openai_maxim.converters.content import resolve_content
from openai_maxim.core.protocols import MessageConverter
from openai_maxim.core.types import (
    Attachment,
    NormalizedBatch,
    NormalizedMessage,
    Role,
)

logger = logging.getLogger(__name__)


def resolve_role(role: Any) -> Any:
    """Map ``developer`` to ``system``; every other role is forwarded as-is."""
    match role:
        case Role.DEVELOPER:
            return Role.SYSTEM.value
        case _:
            return role


def normalize_message(
    message: dict[str, Any],
) -> tuple[NormalizedMessage, list[Attachment]]:
    """
    Normalize a single OpenAI message.

    Returns:
        Tuple of (normalized message, attachments extracted from it)
    """
    role = resolve_role(message.get("role"))
    resolved = resolve_content(message.get("content"))

    if role == Role.ASSISTANT:
        normalized: NormalizedMessage = {
            "role": Role.ASSISTANT.value,
            "content": resolved.content if isinstance(resolved.content, str) else None,
        }
        # tool_calls wins over the legacy function_call
        if message.get("tool_calls"):
            normalized["tool_calls"] = message["tool_calls"]
        elif message.get("function_call"):
            normalized["function_call"] = message["function_call"]
    else:
        normalized = {"role": role, "content": resolved.content}
        if message.get("tool_call_id"):
            normalized["tool_call_id"] = message["tool_call_id"]
        # Legacy function messages carry `name`; Maxim has no field for it

    return normalized, resolved.attachments


def normalize_messages(messages: Iterable[dict[str, Any]]) -> NormalizedBatch:
    """
    Normalize OpenAI messages into Maxim messages plus a flat attachment list.

    Messages and attachments keep their input order.
    """
    batch = NormalizedBatch()

    for message in messages:
        normalized, attachments = normalize_message(message)
        batch.messages.append(normalized)
        batch.attachments.extend(attachments)

    logger.debug(
        f"Normalized {len(batch.messages)} messages, "
        f"{len(batch.attachments)} attachments"
    )
    return batch


class OpenAIMessageConverter(MessageConverter[NormalizedBatch]):
    """
    Converts OpenAI chat messages to Maxim's logging format.

    Output: NormalizedBatch(messages=[{"role", "content", ...}], attachments=[...])

    Note:
    - developer messages become system messages
    - image parts are extracted as URL attachments (and kept inline)
    - single text-part content collapses to a plain string
    - unknown roles are forwarded, unknown content parts are dropped
    """

    def convert(self, messages: Iterable[dict[str, Any]]) -> NormalizedBatch:
        """Convert OpenAI messages to Maxim format."""
        return normalize_messages(messages)
