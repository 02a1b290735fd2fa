"""Built-in OpenAI to Maxim converters."""

from openai_maxim.converters.choices import (
    convert_openai_choices,
    convert_openai_completion,
)
from openai_maxim.converters.content import new_attachment_id, resolve_content
from openai_maxim.converters.messages import (
    OpenAIMessageConverter,
    normalize_message,
    normalize_messages,
    resolve_role,
)

__all__ = [
    "OpenAIMessageConverter",
    "convert_openai_choices",
    "convert_openai_completion",
    "new_attachment_id",
    "normalize_message",
    "normalize_messages",
    "resolve_content",
    "resolve_role",
]
