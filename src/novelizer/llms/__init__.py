# src/novelizer/llms/__init__.py

"""LLM client layer for novelizer.

A thin, stateless abstraction over text-completion providers.

Design principles:
- Stateless: Every call receives the full message list
- One shot: No retries, no streaming, no caching
- No leakage: Provider objects and SDK errors never escape the adapter

Example:
    >>> from novelizer.llms import create_llm_client, LLMConfig
    >>>
    >>> config = LLMConfig(provider="openai", model="gpt-4", api_key="sk-...")
    >>> client = create_llm_client(config)
    >>>
    >>> text = await client.generate("Hello!", temperature=0.7, max_tokens=4000)
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig, Provider
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    "Provider",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
