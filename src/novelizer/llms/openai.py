# src/novelizer/llms/openai.py

import logging
from time import monotonic
from typing import Any, Literal

from openai import NOT_GIVEN, APIConnectionError, APIStatusError, AsyncOpenAI

from novelizer.errors import ProviderError
from novelizer.observability import names
from novelizer.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient, LLMResponse, Message, Usage

logger = logging.getLogger(__name__)

PROVIDER_NAME = "OpenAI"


class OpenAILLMClient(LLMClient):
    """OpenAI Chat Completions client.

    Stateless. One request per call: SDK retries are disabled.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4",
        base_url: str | None = None,
        timeout: float | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )
        self._model = model
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAILLMClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        start = monotonic()
        labels = {"provider": "openai", "model": self._model}

        logger.debug(
            "Calling OpenAI: model=%s, messages=%d", self._model, len(messages)
        )

        try:
            raw = await self._call_api(
                messages=self._convert_messages(messages),
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except ProviderError:
            self.metrics_hook.increment(names.LLM_ERRORS_TOTAL, labels=labels)
            raise

        elapsed_ms = 1000 * (monotonic() - start)

        # Normalize immediately - provider objects never escape
        response = self._normalize_response(raw, elapsed_ms)

        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.LLM_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.increment(
            names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens
        )
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "OpenAI completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            elapsed_ms,
        )
        return response

    async def _call_api(
        self,
        *,
        messages: list[dict[str, Any]],
        temperature: float,
        max_tokens: int | None,
    ) -> Any:
        """Single request. SDK errors are translated to ProviderError here."""
        try:
            return await self._client.chat.completions.create(
                model=self._model,
                messages=messages,  # type: ignore[arg-type]
                temperature=temperature,
                max_tokens=max_tokens if max_tokens else NOT_GIVEN,
            )
        except APIStatusError as exc:
            logger.error("OpenAI request failed with status %d", exc.status_code)
            raise ProviderError(
                PROVIDER_NAME,
                status_code=exc.status_code,
                reason=exc.response.reason_phrase or exc.message,
            ) from exc
        except APIConnectionError as exc:
            logger.error("OpenAI request failed: %s", exc.message)
            raise ProviderError(PROVIDER_NAME, reason=exc.message) from exc

    def _convert_messages(self, messages: list[Message]) -> list[dict]:
        """Convert Message objects to OpenAI format."""
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        """Normalize OpenAI response to LLMResponse.

        This is the boundary. Raw provider objects stop here.
        """
        choice = raw.choices[0]

        finish_reason: Literal["stop", "length", "error"]
        if choice.finish_reason == "stop":
            finish_reason = "stop"
        elif choice.finish_reason == "length":
            finish_reason = "length"
            logger.warning("OpenAI completion truncated at max_tokens")
        else:
            finish_reason = "error"

        if raw.usage is None:
            usage = Usage(prompt_tokens=0, completion_tokens=0, total_tokens=0)
        else:
            usage = Usage(
                prompt_tokens=raw.usage.prompt_tokens,
                completion_tokens=raw.usage.completion_tokens,
                total_tokens=raw.usage.total_tokens,
            )

        return LLMResponse(
            content=choice.message.content or "",
            finish_reason=finish_reason,
            usage=usage,
            latency_ms=latency_ms,
        )
