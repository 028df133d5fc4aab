"""Domain models for tv-show-emoji."""

from dataclasses import dataclass, field
from enum import Enum


class ParseFailure(str, Enum):
    """Reasons a model response could not be turned into emoji results."""

    EMPTY_RESPONSE = "empty_response"
    NO_EMOJIS = "no_emojis"
    TOO_FEW = "too_few"


@dataclass(frozen=True)
class EmojiResult:
    """One suggested emoji and the sentence explaining it."""

    emoji: str
    explanation: str

    def to_line(self) -> str:
        """Render in the ``emoji - explanation`` form the model is asked for."""
        return f"{self.emoji} - {self.explanation}"


@dataclass(frozen=True)
class PromptRequest:
    """What to ask the model for: a show, an aspect of it, and how many emojis."""

    show: str
    subject: str
    count: int


@dataclass
class SuggestionResult:
    """Outcome of one suggestion run."""

    request: PromptRequest
    model: str
    results: list[EmojiResult] = field(default_factory=list)
    raw_response: str = ""
    attempts: int = 1

    @property
    def count(self) -> int:
        return len(self.results)
