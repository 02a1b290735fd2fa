"""Core types and protocols."""

from openai_maxim.core.protocols import CompletionRecorder, MessageConverter
from openai_maxim.core.types import (
    Attachment,
    NormalizedBatch,
    NormalizedMessage,
    PartKind,
    ResolvedContent,
    Role,
)

__all__ = [
    "Attachment",
    "CompletionRecorder",
    "MessageConverter",
    "NormalizedBatch",
    "NormalizedMessage",
    "PartKind",
    "ResolvedContent",
    "Role",
]
