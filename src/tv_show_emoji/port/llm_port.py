"""LLM port: abstract interface for the model server."""

from typing import Protocol


class LLMPort(Protocol):
    """Protocol for a local model server (Ollama)."""

    async def list_models(self) -> list[str]: ...

    async def find_best_available_model(self, requested: str) -> str: ...

    async def generate(self, model: str, prompt: str) -> str: ...
