"""Protocols for the seams between the adapter and its collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from openai_maxim.recording import CompletionEvent

T = TypeVar("T")


@runtime_checkable
class MessageConverter(Protocol[T]):
    """
    Converts OpenAI chat messages to a logging-platform format.

    The package ships OpenAIMessageConverter for Maxim.
    """

    def convert(self, messages: Iterable[dict[str, Any]]) -> T:
        """
        Convert OpenAI messages.

        Args:
            messages: ChatCompletionMessageParam dicts, in conversation order

        Returns:
            Platform-specific message batch
        """
        ...


@runtime_checkable
class CompletionRecorder(Protocol):
    """
    Records one completion (request messages + response) on a logging backend.

    Implementations: MaximCompletionRecorder
    """

    def record_completion(self, event: "CompletionEvent") -> str:
        """
        Record a completion event.

        Returns:
            ID of the trace the completion was logged under
        """
        ...
