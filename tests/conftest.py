"""Shared test fixtures for tv-show-emoji."""

from unittest.mock import AsyncMock

import httpx
import pytest

from tv_show_emoji.config import Settings
from tv_show_emoji.domain.models import PromptRequest
from tv_show_emoji.gateway.ollama_gateway import OllamaGateway

_SAMPLE_RESPONSE = """Here are your emojis:

1. 🧪 - Walter's chemistry expertise drives the entire story.
2. 💰 - Money and greed slowly corrupt every character.
3. 🏜️ - The New Mexico desert frames the isolation of the drug trade.
"""


@pytest.fixture
def mock_settings() -> Settings:
    """Settings with test-safe defaults."""
    return Settings(
        ollama_url="http://localhost:11434",
        ollama_model="test-model",
        ollama_timeout=10,
        ollama_tags_timeout=5,
        fallback_models=["llama3.2:latest", "mistral:latest"],
        default_emoji_count=5,
        max_parse_retries=1,
        log_level="DEBUG",
        log_format="console",
    )


@pytest.fixture
def mock_client():
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def gateway(mock_client, mock_settings):
    return OllamaGateway(mock_client, mock_settings)


@pytest.fixture
def sample_request() -> PromptRequest:
    return PromptRequest(show="Breaking Bad", subject="overall", count=3)


@pytest.fixture
def sample_response() -> str:
    """A typical model answer with chatter, list markers and three results."""
    return _SAMPLE_RESPONSE
