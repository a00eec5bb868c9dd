# src/novelizer/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from novelizer.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    USER = "user"


@dataclass(frozen=True)
class Message:
    """A single message sent to a provider.

    Immutable. Provider-agnostic.
    """

    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Normalized LLM response.

    Provider details never leak outside the adapter.
    """

    content: str
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage
    latency_ms: float


class LLMClient(Protocol):
    """Protocol for LLM clients.

    - Stateless: every call receives the full message list
    - One request per call: no retries, no streaming
    - No leakage: provider objects and SDK exceptions never escape the adapter
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion.

        Raises:
            ProviderError: Non-success HTTP status or transport failure.
        """
        ...

    async def generate(
        self,
        prompt: str,
        *,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> str:
        """Send one user prompt and return the generated text."""
        response = await self.complete(
            messages=[Message(role=Role.USER, content=prompt)],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.content
