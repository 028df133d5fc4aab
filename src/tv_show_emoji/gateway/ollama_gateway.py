"""Ollama gateway: implements LLMPort over the Ollama HTTP API."""

import asyncio
import time

import httpx
import structlog

from tv_show_emoji.config import Settings
from tv_show_emoji.exceptions import (
    ModelNotFoundError,
    OllamaConnectionError,
    OllamaTimeoutError,
)

logger = structlog.get_logger()

DEFAULT_TAG = "latest"


def normalize_model_name(name: str) -> str:
    """Add the implicit ``:latest`` tag to a bare model name."""
    name = name.strip()
    if ":" in name:
        return name
    return f"{name}:{DEFAULT_TAG}"


class OllamaGateway:
    """Ollama HTTP client: model discovery with fallbacks, and text generation."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._base_url = settings.ollama_url.rstrip("/")
        self._timeout = settings.ollama_timeout
        self._tags_timeout = settings.ollama_tags_timeout
        self._fallback_models = list(settings.fallback_models)

    def _connection_error(self) -> OllamaConnectionError:
        return OllamaConnectionError(
            f"Cannot connect to Ollama at {self._base_url}. Is Ollama running?\n"
            "Start Ollama with: ollama serve"
        )

    async def list_models(self) -> list[str]:
        """Names of the models installed on the server, e.g. ``llama3.2:latest``."""
        try:
            response = await self._client.get(
                f"{self._base_url}/api/tags", timeout=self._tags_timeout
            )
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
        except httpx.TimeoutException as e:
            logger.error("Ollama list models timeout", url=self._base_url)
            raise OllamaTimeoutError(
                f"Connection to Ollama timed out after {self._tags_timeout:g} seconds",
                self._tags_timeout,
            ) from e
        except httpx.ConnectError as e:
            logger.error("Ollama connection refused", url=self._base_url, error=str(e))
            raise self._connection_error() from e
        except httpx.HTTPStatusError as e:
            logger.error("Ollama HTTP error", status_code=e.response.status_code)
            raise OllamaConnectionError(
                f"Failed to fetch available models: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Ollama request failed", error=str(e))
            raise OllamaConnectionError(f"Failed to connect to Ollama: {e}") from e
        except ValueError as e:
            raise OllamaConnectionError(
                "Failed to fetch available models: invalid JSON from Ollama"
            ) from e

        return [m.get("name", "") for m in data.get("models", []) if m.get("name")]

    async def check_connection(self) -> None:
        """Raise ``OllamaConnectionError`` unless the server answers."""
        await self.list_models()

    async def is_model_available(
        self, name: str, available: list[str] | None = None
    ) -> bool:
        if available is None:
            available = await self.list_models()
        wanted = normalize_model_name(name)
        return any(normalize_model_name(model) == wanted for model in available)

    async def find_best_available_model(self, requested: str) -> str:
        """Return the requested model if installed, else the first installed fallback."""
        available = await self.list_models()

        if await self.is_model_available(requested, available):
            return normalize_model_name(requested)

        for fallback in self._fallback_models:
            if await self.is_model_available(fallback, available):
                logger.warning(
                    "Requested model not found, using fallback",
                    requested=requested,
                    fallback=fallback,
                )
                return normalize_model_name(fallback)

        if not available:
            raise ModelNotFoundError(
                "No models available in Ollama.\n"
                f"Pull a model with: ollama pull {requested}",
                requested=requested,
            )
        raise ModelNotFoundError(
            f'Model "{requested}" not found and no fallback models available.\n'
            f"Available models: {', '.join(available)}\n"
            f"Pull the requested model with: ollama pull {requested}",
            requested=requested,
            available_models=available,
        )

    async def generate(self, model: str, prompt: str) -> str:
        """Run one non-streaming completion and return the generated text."""
        started = time.monotonic()
        try:
            async with asyncio.timeout(self._timeout):
                response = await self._client.post(
                    f"{self._base_url}/api/generate",
                    json={"model": model, "prompt": prompt, "stream": False},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()
                if not isinstance(data, dict):
                    raise ValueError("expected a JSON object")
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.error("Ollama request timeout", model=model, timeout=self._timeout)
            raise OllamaTimeoutError(
                f"Request timed out after {self._timeout:g} seconds", self._timeout
            ) from e
        except httpx.ConnectError as e:
            logger.error("Ollama connection refused", url=self._base_url, error=str(e))
            raise self._connection_error() from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Ollama HTTP error", status_code=status, model=model)
            if status == 404:
                raise ModelNotFoundError(
                    f'Model "{model}" not found.\nPull it with: ollama pull {model}',
                    requested=model,
                ) from e
            raise OllamaConnectionError(
                f"Failed to generate completion: HTTP {status}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Ollama request failed", error=str(e))
            raise OllamaConnectionError(f"Failed to generate completion: {e}") from e
        except ValueError as e:
            raise OllamaConnectionError(
                "Failed to generate completion: invalid JSON from Ollama"
            ) from e

        text = str(data.get("response", ""))
        logger.info(
            "Ollama generate completed",
            model=model,
            prompt_length=len(prompt),
            response_length=len(text),
            elapsed_seconds=round(time.monotonic() - started, 2),
        )
        return text
