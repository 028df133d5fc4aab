"""Port interfaces for external dependencies."""

from tv_show_emoji.port.llm_port import LLMPort

__all__ = ["LLMPort"]
