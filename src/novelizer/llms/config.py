# src/novelizer/llms/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["openai", "anthropic"]


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. `timeout=None` leaves requests unbounded.
    """

    provider: Provider
    model: str
    api_key: str | None = None
    base_url: str | None = None  # None means the provider's public endpoint
    timeout: float | None = None
    max_tokens: int = 4000
    temperature: float = 0.7
