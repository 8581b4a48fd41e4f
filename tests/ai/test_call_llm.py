"""Tests for the completion service handler."""
import httpx
import pytest
from openai import APIConnectionError

from shoplist.ai.call_llm import LLMHandler
from shoplist.ai.errors import RemoteUnavailableError, UnparsableResponseError
from shoplist.ai.models import LLMConfig


def _connection_error() -> APIConnectionError:
    request = httpx.Request("POST", "https://llm.test/v1/chat/completions")
    return APIConnectionError(request=request)


@pytest.mark.asyncio
async def test_complete_returns_stripped_text(llm_handler, mock_openai, completion):
    """Reply text is returned without surrounding whitespace."""
    mock_openai.chat.completions.create.return_value = completion('  [{"name": "חלב"}]\n')

    reply = await llm_handler.complete("prompt", "model-a")

    assert reply == '[{"name": "חלב"}]'
    mock_openai.chat.completions.create.assert_awaited_once()
    kwargs = mock_openai.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "model-a"
    assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]
    assert kwargs["temperature"] == 0.0
    assert kwargs["max_tokens"] == 256


def test_handler_disabled_without_api_key(llm_config):
    """No key and no client means the remote stage is off."""
    handler = LLMHandler(llm_config)
    assert handler.client is None
    assert not handler.enabled


@pytest.mark.asyncio
async def test_complete_when_disabled(llm_config):
    handler = LLMHandler(llm_config)
    with pytest.raises(RemoteUnavailableError) as exc_info:
        await handler.complete("prompt", "model-a")
    assert exc_info.value.suggestions


def test_handler_builds_client_from_settings(monkeypatch, llm_config):
    """A configured key creates an OpenAI client."""
    monkeypatch.setenv("LLM_API_KEY", "sk-test-key")
    monkeypatch.setenv("LLM_BASE_URL", "https://llm.test/v1/")

    handler = LLMHandler(llm_config)

    assert handler.enabled
    assert str(handler.client.base_url) == "https://llm.test/v1/"


@pytest.mark.asyncio
async def test_complete_connection_error(llm_handler, mock_openai):
    """Transport failures become RemoteUnavailableError."""
    mock_openai.chat.completions.create.side_effect = _connection_error()

    with pytest.raises(RemoteUnavailableError) as exc_info:
        await llm_handler.complete("prompt", "model-a")

    assert exc_info.value.metadata["model"] == "model-a"
    assert exc_info.value.metadata["error_type"] == "APIConnectionError"
    assert mock_openai.chat.completions.create.await_count == 1


@pytest.mark.asyncio
async def test_complete_unexpected_error(llm_handler, mock_openai):
    """Any other client failure is also treated as unavailable."""
    mock_openai.chat.completions.create.side_effect = RuntimeError("socket closed")

    with pytest.raises(RemoteUnavailableError) as exc_info:
        await llm_handler.complete("prompt", "model-a")

    assert "socket closed" in exc_info.value.message


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, "", "   "])
async def test_complete_empty_reply(llm_handler, mock_openai, completion, content):
    """Empty replies are unparsable."""
    mock_openai.chat.completions.create.return_value = completion(content)

    with pytest.raises(UnparsableResponseError):
        await llm_handler.complete("prompt", "model-a")


@pytest.mark.asyncio
async def test_complete_retries_transient_errors(mock_openai, completion):
    """With more attempts configured, transient errors are retried."""
    config = LLMConfig(models=("model-a",), max_attempts=2, timeout=5)
    handler = LLMHandler(config, client=mock_openai)
    mock_openai.chat.completions.create.side_effect = [
        _connection_error(),
        completion("[]"),
    ]

    reply = await handler.complete("prompt", "model-a")

    assert reply == "[]"
    assert mock_openai.chat.completions.create.await_count == 2
