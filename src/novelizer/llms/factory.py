# src/novelizer/llms/factory.py

from novelizer.errors import UnsupportedProviderError
from novelizer.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create an LLM client from config.

    Args:
        config: LLM configuration specifying provider, model, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured LLMClient implementation.

    Raises:
        UnsupportedProviderError: If provider is unknown.
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout,
            metrics_hook=metrics_hook,
        )

    raise UnsupportedProviderError(config.provider)
