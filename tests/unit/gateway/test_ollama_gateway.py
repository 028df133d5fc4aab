"""Tests for OllamaGateway."""

import asyncio
from unittest.mock import MagicMock

import httpx
import pytest

from tv_show_emoji.config import Settings
from tv_show_emoji.exceptions import (
    ModelNotFoundError,
    OllamaConnectionError,
    OllamaTimeoutError,
)
from tv_show_emoji.gateway.ollama_gateway import OllamaGateway, normalize_model_name


def _json_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


def _status_error(status_code: int, url: str):
    request = httpx.Request("POST", url)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}",
        request=request,
        response=httpx.Response(status_code, request=request),
    )


def _tags(*names):
    return _json_response({"models": [{"name": name} for name in names]})


def test_normalize_model_name():
    assert normalize_model_name("llama3.2") == "llama3.2:latest"
    assert normalize_model_name("llama3.2:1b") == "llama3.2:1b"
    assert normalize_model_name(" mistral ") == "mistral:latest"


class TestListModels:
    async def test_returns_names(self, gateway, mock_client):
        mock_client.get.return_value = _tags("llama3.2:latest", "mistral:latest")

        models = await gateway.list_models()

        assert models == ["llama3.2:latest", "mistral:latest"]
        mock_client.get.assert_called_once_with(
            "http://localhost:11434/api/tags", timeout=5
        )

    async def test_empty_server(self, gateway, mock_client):
        mock_client.get.return_value = _json_response({})
        assert await gateway.list_models() == []

    async def test_connection_refused(self, gateway, mock_client):
        mock_client.get.side_effect = httpx.ConnectError("refused")

        with pytest.raises(OllamaConnectionError) as exc_info:
            await gateway.list_models()

        message = str(exc_info.value)
        assert "Cannot connect to Ollama at http://localhost:11434" in message
        assert "ollama serve" in message

    async def test_timeout(self, gateway, mock_client):
        mock_client.get.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(OllamaTimeoutError, match="timed out after 5 seconds") as exc_info:
            await gateway.list_models()
        assert exc_info.value.timeout == 5

    async def test_http_error_status(self, gateway, mock_client):
        response = MagicMock()
        response.raise_for_status.side_effect = _status_error(
            500, "http://localhost:11434/api/tags"
        )
        mock_client.get.return_value = response

        with pytest.raises(OllamaConnectionError, match="HTTP 500"):
            await gateway.list_models()

    async def test_invalid_json(self, gateway, mock_client):
        response = _json_response(None)
        response.json.side_effect = ValueError("bad json")
        mock_client.get.return_value = response

        with pytest.raises(OllamaConnectionError, match="invalid JSON"):
            await gateway.list_models()

    @pytest.mark.parametrize("payload", [None, [], "text", 3])
    async def test_json_that_is_not_an_object(self, gateway, mock_client, payload):
        mock_client.get.return_value = _json_response(payload)

        with pytest.raises(OllamaConnectionError, match="invalid JSON"):
            await gateway.list_models()


class TestFindBestAvailableModel:
    async def test_requested_model_installed(self, gateway, mock_client):
        mock_client.get.return_value = _tags("test-model:latest", "mistral:latest")

        assert await gateway.find_best_available_model("test-model") == "test-model:latest"
        mock_client.get.assert_called_once()

    async def test_requested_tag_installed(self, gateway, mock_client):
        mock_client.get.return_value = _tags("llama3.2:1b")
        assert await gateway.find_best_available_model("llama3.2:1b") == "llama3.2:1b"

    async def test_falls_back_in_order(self, gateway, mock_client):
        mock_client.get.return_value = _tags("mistral:latest", "llama3.2:latest")

        model = await gateway.find_best_available_model("gpt-oss")

        assert model == "llama3.2:latest"

    async def test_no_models_installed(self, gateway, mock_client):
        mock_client.get.return_value = _tags()

        with pytest.raises(ModelNotFoundError, match="No models available") as exc_info:
            await gateway.find_best_available_model("gpt-oss")
        assert "ollama pull gpt-oss" in str(exc_info.value)

    async def test_no_fallback_installed(self, gateway, mock_client):
        mock_client.get.return_value = _tags("phi3:latest", "gemma:2b")

        with pytest.raises(ModelNotFoundError) as exc_info:
            await gateway.find_best_available_model("gpt-oss")

        error = exc_info.value
        assert error.requested == "gpt-oss"
        assert error.available_models == ["phi3:latest", "gemma:2b"]
        assert "Available models: phi3:latest, gemma:2b" in str(error)


class TestGenerate:
    async def test_success(self, gateway, mock_client):
        mock_client.post.return_value = _json_response({"response": "🔥 - Hot."})

        text = await gateway.generate("llama3.2:latest", "prompt text")

        assert text == "🔥 - Hot."
        mock_client.post.assert_called_once_with(
            "http://localhost:11434/api/generate",
            json={"model": "llama3.2:latest", "prompt": "prompt text", "stream": False},
            timeout=10,
        )

    async def test_missing_response_field(self, gateway, mock_client):
        mock_client.post.return_value = _json_response({"done": True})
        assert await gateway.generate("m", "p") == ""

    @pytest.mark.parametrize("payload", [None, ["🔥 - Hot."]])
    async def test_json_that_is_not_an_object(self, gateway, mock_client, payload):
        mock_client.post.return_value = _json_response(payload)

        with pytest.raises(OllamaConnectionError, match="invalid JSON from Ollama"):
            await gateway.generate("m", "p")

    async def test_http_timeout(self, gateway, mock_client):
        mock_client.post.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(OllamaTimeoutError, match="Request timed out after 10 seconds"):
            await gateway.generate("m", "p")

    async def test_overall_deadline(self, mock_client, mock_settings):
        settings = mock_settings.model_copy(update={"ollama_timeout": 0.01})
        gateway = OllamaGateway(mock_client, settings)

        async def hang(*args, **kwargs):
            await asyncio.sleep(1)

        mock_client.post.side_effect = hang

        with pytest.raises(OllamaTimeoutError) as exc_info:
            await gateway.generate("m", "p")
        assert exc_info.value.timeout == 0.01

    async def test_model_missing_on_server(self, gateway, mock_client):
        response = MagicMock()
        response.raise_for_status.side_effect = _status_error(
            404, "http://localhost:11434/api/generate"
        )
        mock_client.post.return_value = response

        with pytest.raises(ModelNotFoundError, match="ollama pull m"):
            await gateway.generate("m", "p")

    async def test_server_error(self, gateway, mock_client):
        response = MagicMock()
        response.raise_for_status.side_effect = _status_error(
            503, "http://localhost:11434/api/generate"
        )
        mock_client.post.return_value = response

        with pytest.raises(OllamaConnectionError, match="HTTP 503"):
            await gateway.generate("m", "p")

    async def test_connection_refused(self, gateway, mock_client):
        mock_client.post.side_effect = httpx.ConnectError("refused")

        with pytest.raises(OllamaConnectionError, match="Is Ollama running"):
            await gateway.generate("m", "p")


def test_base_url_trailing_slash(mock_client):
    gateway = OllamaGateway(mock_client, Settings(ollama_url="http://ollama:11434/"))
    assert gateway._base_url == "http://ollama:11434"


class TestModelAvailability:
    async def test_is_model_available_normalizes(self, gateway):
        assert await gateway.is_model_available("mistral", ["mistral:latest"])
        assert not await gateway.is_model_available("mistral:7b", ["mistral:latest"])

    async def test_is_model_available_fetches_list(self, gateway, mock_client):
        mock_client.get.return_value = _tags("phi3:latest")
        assert await gateway.is_model_available("phi3")

    async def test_check_connection(self, gateway, mock_client):
        mock_client.get.return_value = _tags()
        await gateway.check_connection()

        mock_client.get.side_effect = httpx.ConnectError("refused")
        with pytest.raises(OllamaConnectionError):
            await gateway.check_connection()
