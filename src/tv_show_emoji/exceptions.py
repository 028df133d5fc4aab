"""Exception hierarchy for tv-show-emoji.

Every error the CLI reports to the user derives from ``EmojiCliError`` so the
entry point can turn it into a message and a non-zero exit code.
"""

from __future__ import annotations

from tv_show_emoji.domain.models import ParseFailure


class EmojiCliError(Exception):
    """Base class for all tv-show-emoji errors."""


class InvalidArgumentError(EmojiCliError):
    """A show name, subject or emoji count supplied by the user is not usable."""


class OllamaError(EmojiCliError):
    """Base class for failures talking to the Ollama server."""


class OllamaConnectionError(OllamaError):
    """The Ollama server could not be reached or answered with an error."""


class OllamaTimeoutError(OllamaConnectionError):
    """A request to the Ollama server did not finish within its timeout."""

    def __init__(self, message: str, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(message)


class ModelNotFoundError(OllamaError):
    """Neither the requested model nor any fallback model is installed."""

    def __init__(
        self,
        message: str,
        requested: str,
        available_models: list[str] | None = None,
    ) -> None:
        self.requested = requested
        self.available_models = list(available_models or [])
        super().__init__(message)


class ParseError(EmojiCliError):
    """The model response could not be parsed into the requested emoji results.

    ``kind`` tells callers which check failed; ``raw_response`` keeps the
    model output for diagnosis.
    """

    def __init__(
        self,
        kind: ParseFailure,
        message: str,
        expected: int = 0,
        found: int = 0,
        raw_response: str = "",
    ) -> None:
        self.kind = kind
        self.expected = expected
        self.found = found
        self.raw_response = raw_response
        super().__init__(message)
