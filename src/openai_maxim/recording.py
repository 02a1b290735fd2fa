"""
Completion recording on Maxim.

One OpenAI chat completion becomes one Maxim trace with a single
generation:

    trace
    └── generation (provider="openai", normalized request messages)
        ├── attachments (one UrlAttachment per image part)
        └── result (converted ChatCompletion)
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any

from maxim.logger.components.attachment import UrlAttachment
from openai.types.chat import ChatCompletion

from openai_maxim.converters import OpenAIMessageConverter, convert_openai_completion
from openai_maxim.core.protocols import CompletionRecorder, MessageConverter
from openai_maxim.core.types import NormalizedBatch
from openai_maxim.runtime import MaximLoggerHandle

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class CompletionEvent:
    """One OpenAI request/response pair to log."""

    messages: list[dict[str, Any]]
    completion: ChatCompletion | dict[str, Any]
    model: str
    model_parameters: dict[str, Any] = field(default_factory=dict)
    name: str | None = None
    trace_id: str = field(default_factory=_new_id)
    generation_id: str = field(default_factory=_new_id)


class MaximCompletionRecorder(CompletionRecorder):
    """
    Logs OpenAI completions to a Maxim log repository.

    The Maxim logger is taken from the handle on each call, so the handle
    can be initialized lazily by the first recorded completion.
    """

    def __init__(
        self,
        handle: MaximLoggerHandle,
        converter: MessageConverter[NormalizedBatch] | None = None,
    ):
        self._handle = handle
        self._converter = converter or OpenAIMessageConverter()

    def record_completion(self, event: CompletionEvent) -> str:
        """
        Record one completion as a trace + generation.

        Raises:
            LoggerInitializationError: If the Maxim logger cannot be created
        """
        maxim_logger = self._handle.get()
        batch = self._converter.convert(event.messages)

        trace_config: dict[str, Any] = {"id": event.trace_id}
        generation_config: dict[str, Any] = {
            "id": event.generation_id,
            "provider": "openai",
            "model": event.model,
            "messages": batch.messages,
            "model_parameters": event.model_parameters,
        }
        if event.name:
            trace_config["name"] = event.name
            generation_config["name"] = event.name

        trace = maxim_logger.trace(trace_config)
        try:
            generation = trace.generation(generation_config)

            for attachment in batch.attachments:
                generation.add_attachment(
                    UrlAttachment(
                        url=attachment.url,
                        id=attachment.id,
                        name=attachment.id,
                        mime_type=attachment.mime_type,
                    )
                )

            generation.result(convert_openai_completion(event.completion))
        except Exception:
            logger.exception(f"Failed to record completion on trace {event.trace_id}")
            raise
        finally:
            trace.end()

        logger.debug(
            f"Recorded completion on trace {event.trace_id} "
            f"({len(batch.messages)} messages, {len(batch.attachments)} attachments)"
        )
        return event.trace_id
