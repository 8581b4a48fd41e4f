"""Test configuration and fixtures for shoplist."""
import os
from types import SimpleNamespace
from unittest.mock import Mock, AsyncMock

import pytest

# Never reach a real completion service from tests
os.environ['LLM_API_KEY'] = ''

from shoplist.config.settings import clear_settings_cache
from shoplist.ai.call_llm import LLMHandler
from shoplist.ai.models import LLMConfig
from shoplist.ai.remote_parser import RemoteItemParser
from shoplist.services.parser_service import TextItemParser


def make_completion(content):
    """Build an object shaped like an OpenAI ChatCompletion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def completion():
    """Factory for fake chat completions."""
    return make_completion


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_openai():
    """Create a mock OpenAI client."""
    mock = Mock()
    mock.chat.completions.create = AsyncMock()
    return mock


@pytest.fixture
def llm_config():
    """Two-model configuration without retries."""
    return LLMConfig(
        models=("model-a", "model-b"),
        temperature=0.0,
        timeout=5,
        max_tokens=256,
        max_attempts=1
    )


@pytest.fixture
def llm_handler(mock_openai, llm_config):
    """LLM handler wired to the mock client."""
    return LLMHandler(llm_config, client=mock_openai)


@pytest.fixture
def remote_parser(llm_handler):
    """Remote parser using the mock client."""
    return RemoteItemParser(llm_handler)


@pytest.fixture
def text_parser(remote_parser):
    """Full parser with the remote stage enabled."""
    return TextItemParser(remote=remote_parser, use_remote=True)


@pytest.fixture
def local_text_parser():
    """Parser with the remote stage disabled."""
    return TextItemParser(use_remote=False)
