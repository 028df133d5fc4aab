"""tv-show-emoji: ask a local Ollama model for emojis that describe a TV show.

Usage:
    tv-show-emoji "Breaking Bad" --subject character --count 3
    tv-show-emoji            # interactive mode
    python -m tv_show_emoji --list-shows
"""

from tv_show_emoji.domain.models import EmojiResult, PromptRequest, SuggestionResult

__all__ = ["EmojiResult", "PromptRequest", "SuggestionResult"]
__version__ = "1.0.0"
