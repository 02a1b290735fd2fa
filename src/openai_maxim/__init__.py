"""
openai-maxim - Log OpenAI chat completions to Maxim.

Converters:
    OpenAIMessageConverter: OpenAI messages → Maxim messages + attachments
    normalize_messages / resolve_content: Functional forms of the same
    convert_openai_choices / convert_openai_completion: Response conversion

Runtime:
    MaximLoggerHandle: One-time initialized Maxim logger, injected into callers
    MaximCompletionRecorder: Records a CompletionEvent as a Maxim trace

Configuration:
    load_maxim_settings: MAXIM_API_KEY / MAXIM_LOG_REPO_ID (or maxim_config.yaml)

Example:
    from openai_maxim import CompletionEvent, MaximCompletionRecorder, MaximLoggerHandle

    handle = MaximLoggerHandle()
    recorder = MaximCompletionRecorder(handle)

    completion = client.chat.completions.create(model="gpt-4o", messages=messages)
    recorder.record_completion(
        CompletionEvent(messages=messages, completion=completion, model="gpt-4o")
    )

    handle.shutdown()
"""

from openai_maxim.config import MaximSettings, load_maxim_settings
from openai_maxim.converters import (
    OpenAIMessageConverter,
    convert_openai_choices,
    convert_openai_completion,
    normalize_messages,
    resolve_content,
)
from openai_maxim.core import (
    Attachment,
    CompletionRecorder,
    MessageConverter,
    NormalizedBatch,
    NormalizedMessage,
    ResolvedContent,
)
from openai_maxim.recording import CompletionEvent, MaximCompletionRecorder
from openai_maxim.runtime import LoggerInitializationError, MaximLoggerHandle

__all__ = [
    # Converters
    "OpenAIMessageConverter",
    "normalize_messages",
    "resolve_content",
    "convert_openai_choices",
    "convert_openai_completion",
    # Types
    "Attachment",
    "NormalizedBatch",
    "NormalizedMessage",
    "ResolvedContent",
    "MessageConverter",
    "CompletionRecorder",
    # Runtime
    "MaximLoggerHandle",
    "LoggerInitializationError",
    "CompletionEvent",
    "MaximCompletionRecorder",
    # Configuration
    "MaximSettings",
    "load_maxim_settings",
]
