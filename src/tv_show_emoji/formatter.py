"""Rendering of emoji suggestions and errors for the terminal.

Colored output is rich markup; plain output is screen-reader and pipe
friendly text in the ``N. emoji - explanation`` form.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from tv_show_emoji.domain.models import EmojiResult
from tv_show_emoji.domain.prompts import pluralize_emoji

RULE_WIDTH = 50
LIMITED_TERMINALS = frozenset({"dumb", "cons25", "emacs", "linux"})
EMOJI_WARNING = "Note: Your terminal may not display emojis correctly. Output will be in plain text."


@dataclass(frozen=True)
class FormatOptions:
    show: str
    subject: str
    emoji_count: int
    interactive: bool


def _is_tty(stream: TextIO | None) -> bool:
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def should_use_colors(stream: TextIO | None = None) -> bool:
    """Colors only on a TTY, and never when NO_COLOR or CI is set."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    return _is_tty(stream)


def supports_emoji(stream: TextIO | None = None) -> bool:
    """Best guess whether the terminal can draw emoji."""
    term = os.environ.get("TERM", "").lower()
    if term in LIMITED_TERMINALS:
        return False

    lang = (os.environ.get("LANG") or os.environ.get("LC_ALL") or "").upper()
    if lang and "UTF-8" not in lang and "UTF8" not in lang:
        return False

    return _is_tty(stream)


def emoji_warning(use_colors: bool, stream: TextIO | None = None) -> str | None:
    if supports_emoji(stream):
        return None
    if use_colors:
        return f"[yellow]⚠ {EMOJI_WARNING}[/yellow]\n"
    return f"{EMOJI_WARNING}\n"


def format_emoji_results(
    results: list[EmojiResult],
    options: FormatOptions,
    use_colors: bool = False,
) -> str:
    """Render results, with a header and footer in interactive mode."""
    lines: list[str] = []

    if options.interactive:
        lines.append("")
        if use_colors:
            lines.append("[bold cyan]✨ Emoji Suggestions[/bold cyan]")
            lines.append(f"[dim]{'━' * RULE_WIDTH}[/dim]")
        else:
            lines.append("=== Emoji Suggestions ===")
            lines.append("")
        lines.append("")

    for index, result in enumerate(results, start=1):
        if use_colors:
            lines.append(f"[dim]{index}.[/dim]   {escape(result.emoji)}   {escape(result.explanation)}")
            if index < len(results):
                lines.append("[dim]   │[/dim]")
        else:
            lines.append(f"{index}. {result.to_line()}")

    if options.interactive:
        footer = (
            f'Generated {pluralize_emoji(options.emoji_count)} for "{options.show}" '
            f"({options.subject})"
        )
        lines.append("")
        if use_colors:
            lines.append(f"[dim]{'━' * RULE_WIDTH}[/dim]")
            lines.append(f"[dim]{escape(footer)}[/dim]")
        else:
            lines.append(footer)
        lines.append("")

    return "\n".join(lines)


def format_error(error: BaseException, use_colors: bool = False) -> str:
    if use_colors:
        return f"\n[red]✗ Error: {escape(str(error))}[/red]\n"
    return f"\nError: {error}\n"


def format_raw_response(raw_response: str, use_colors: bool = False) -> str:
    """Show the unparsed model output beneath a parse error."""
    body = raw_response.strip() or "(empty response)"
    if use_colors:
        return f"[dim]Raw model output:[/dim]\n{escape(body)}\n"
    return f"Raw model output:\n{body}\n"


def make_console(use_colors: bool, stderr: bool = False) -> Console:
    """Console that renders markup only when colors are on."""
    return Console(
        stderr=stderr,
        no_color=not use_colors,
        markup=use_colors,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
