from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.llm.exceptions import LLMError, LLMNetworkError
from app.llm.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "app.llm.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", model="m", timeout_seconds=30)


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        adapter = _make_adapter(mock_client)
        assert adapter.complete("prompt") == '{"ok": true}'

    def test_sends_single_user_message(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("hi")
        adapter = _make_adapter(mock_client)
        adapter.complete("analyze this")
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["messages"] == [{"role": "user", "content": "analyze this"}]

    def test_configures_timeout_and_base_url(self) -> None:
        with patch("app.llm.openai_client_adapter.openai.OpenAI") as mock_openai:
            OpenAIClientAdapter(
                api_key="k",
                model="m",
                timeout_seconds=12,
                base_url="https://openrouter.ai/api/v1",
            )
        kwargs = mock_openai.call_args.kwargs
        assert kwargs["timeout"] == 12
        assert kwargs["base_url"] == "https://openrouter.ai/api/v1"
        assert kwargs["max_retries"] == 0

    def test_empty_content_returns_empty_string(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        adapter = _make_adapter(mock_client)
        assert adapter.complete("prompt") == ""

    def test_raises_when_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        adapter = _make_adapter(mock_client)
        with pytest.raises(LLMError, match="no choices"):
            adapter.complete("prompt")

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(LLMNetworkError, match="network error"):
            adapter.complete("prompt")

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        adapter = _make_adapter(mock_client)
        with pytest.raises(LLMNetworkError, match="network error"):
            adapter.complete("prompt")

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(LLMNetworkError, match="API error"):
            adapter.complete("prompt")
