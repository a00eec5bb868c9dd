# tests/unit/llms/test_openai.py

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError, APIStatusError

from novelizer.errors import ProviderError
from novelizer.llms.base import Message, Role
from novelizer.llms.openai import OpenAILLMClient

ENDPOINT = "https://api.openai.com/v1/chat/completions"


@pytest.fixture
def mock_openai_response() -> MagicMock:
    """Create a mock OpenAI response."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = "It was a dark and stormy night."
    response.choices[0].finish_reason = "stop"
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 8
    response.usage.total_tokens = 18
    return response


def status_error(status_code: int) -> APIStatusError:
    request = httpx.Request("POST", ENDPOINT)
    response = httpx.Response(status_code, request=request)
    return APIStatusError("request failed", response=response, body=None)


class TestOpenAILLMClient:
    def test_sdk_retries_disabled(self) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            OpenAILLMClient(api_key="test-key", base_url="https://proxy.local/v1")

            mock_openai.assert_called_once_with(
                api_key="test-key",
                base_url="https://proxy.local/v1",
                timeout=None,
                max_retries=0,
            )

    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_openai_response: MagicMock) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key", model="gpt-4")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Hello!")]
            )

            assert response.content == "It was a dark and stormy night."
            assert response.finish_reason == "stop"
            assert response.usage.total_tokens == 18
            assert response.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_generate_sends_single_user_message(
        self, mock_openai_response: MagicMock
    ) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key", model="gpt-4")
            text = await client.generate("Write.", temperature=0.7, max_tokens=4000)

            assert text == "It was a dark and stormy night."
            mock_client.chat.completions.create.assert_awaited_once_with(
                model="gpt-4",
                messages=[{"role": "user", "content": "Write."}],
                temperature=0.7,
                max_tokens=4000,
            )

    @pytest.mark.asyncio
    async def test_missing_content_becomes_empty_string(
        self, mock_openai_response: MagicMock
    ) -> None:
        mock_openai_response.choices[0].message.content = None
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")

            assert await client.generate("Write.") == ""

    @pytest.mark.asyncio
    async def test_length_finish_reason(self, mock_openai_response: MagicMock) -> None:
        mock_openai_response.choices[0].finish_reason = "length"
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Hi")]
            )

            assert response.finish_reason == "length"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 429, 500])
    async def test_non_success_status_raises_provider_error(
        self, status_code: int
    ) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.side_effect = status_error(status_code)
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")

            with pytest.raises(ProviderError) as exc_info:
                await client.generate("Write.")

            assert exc_info.value.provider == "OpenAI"
            assert exc_info.value.status_code == status_code
            assert exc_info.value.reason == httpx.codes.get_reason_phrase(status_code)
            assert mock_client.chat.completions.create.await_count == 1

    @pytest.mark.asyncio
    async def test_connection_error_raises_provider_error(self) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.side_effect = APIConnectionError(
                request=httpx.Request("POST", ENDPOINT)
            )
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key")

            with pytest.raises(ProviderError) as exc_info:
                await client.generate("Write.")

            assert exc_info.value.status_code is None

    def test_message_conversion(self) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI"):
            client = OpenAILLMClient(api_key="test-key")

            converted = client._convert_messages(
                [
                    Message(role=Role.USER, content="Hello"),
                    Message(role=Role.USER, content="Continue."),
                ]
            )

            assert converted == [
                {"role": "user", "content": "Hello"},
                {"role": "user", "content": "Continue."},
            ]

    @pytest.mark.asyncio
    async def test_metrics_hook_called(self, mock_openai_response: MagicMock) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.return_value = mock_openai_response
            mock_openai.return_value = mock_client

            metrics_hook = MagicMock()
            client = OpenAILLMClient(api_key="test-key", metrics_hook=metrics_hook)

            await client.generate("Hi")

            metrics_hook.record_latency.assert_called_once()
            assert metrics_hook.record_latency.call_args[0][0] == (
                "llm_completion_duration"
            )
            metrics_hook.increment.assert_any_call("llm_tokens_total", 18)

    @pytest.mark.asyncio
    async def test_error_counter_incremented(self) -> None:
        with patch("novelizer.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = AsyncMock()
            mock_client.chat.completions.create.side_effect = status_error(503)
            mock_openai.return_value = mock_client

            metrics_hook = MagicMock()
            client = OpenAILLMClient(api_key="test-key", metrics_hook=metrics_hook)

            with pytest.raises(ProviderError):
                await client.generate("Hi")

            metrics_hook.increment.assert_called_once_with(
                "llm_errors_total", labels={"provider": "openai", "model": "gpt-4"}
            )
            metrics_hook.record_latency.assert_not_called()
