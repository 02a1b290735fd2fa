"""
Core types for the OpenAI to Maxim adapter.

Input messages are OpenAI ``ChatCompletionMessageParam`` dicts. Output
messages are plain dicts shaped like Maxim's ``CompletionRequest`` /
``ChatCompletionMessage``, and attachments are collected separately:

    OpenAI messages  →  NormalizedBatch(messages, attachments)
    (list[dict])         (list[NormalizedMessage], list[Attachment])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, NotRequired, TypedDict, Union

# Media type cannot be derived from a URL alone
DEFAULT_IMAGE_MIME_TYPE = "image/*"
DEFAULT_IMAGE_DETAIL = "auto"


class Role(str, Enum):
    """Roles an OpenAI chat message can carry."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    FUNCTION = "function"
    DEVELOPER = "developer"  # Legacy alias for system


class PartKind(str, Enum):
    """Content part kinds the normalizer understands."""

    TEXT = "text"
    IMAGE_URL = "image_url"


class TextPart(TypedDict):
    type: Literal["text"]
    text: str


class ImageURL(TypedDict):
    url: str
    detail: str


class ImageURLPart(TypedDict):
    type: Literal["image_url"]
    image_url: ImageURL


ContentPart = Union[TextPart, ImageURLPart]
Content = Union[str, list[ContentPart]]


class NormalizedMessage(TypedDict):
    """
    Message in Maxim's logging shape.

    ``content`` is ``None`` only for assistant messages whose resolved
    content was not a plain string.
    """

    role: str
    content: Content | None
    tool_call_id: NotRequired[str]
    tool_calls: NotRequired[list[dict[str, Any]]]
    function_call: NotRequired[dict[str, Any]]


@dataclass(frozen=True)
class Attachment:
    """An image reference pulled out of inline message content."""

    id: str
    url: str
    mime_type: str = DEFAULT_IMAGE_MIME_TYPE
    type: Literal["url"] = field(default="url", init=False)

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "type": self.type,
            "url": self.url,
            "mimeType": self.mime_type,
        }


@dataclass
class ResolvedContent:
    """Result of resolving one message's content."""

    content: Content
    attachments: list[Attachment] = field(default_factory=list)


@dataclass
class NormalizedBatch:
    """Normalized messages plus every attachment extracted from them, in order."""

    messages: list[NormalizedMessage] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
