"""Command-line driver.

Validates flags, resolves the model, then either answers a single request
(show and subject given) or runs the interactive loop.
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import sys
from collections.abc import Callable
from dataclasses import dataclass

import httpx
import structlog
from pydantic import ValidationError

from tv_show_emoji import __version__
from tv_show_emoji import interactive
from tv_show_emoji.config import Settings
from tv_show_emoji.domain.catalog import (
    DEFAULT_CATALOG,
    MAX_EMOJI_COUNT,
    MIN_EMOJI_COUNT,
    Catalog,
)
from tv_show_emoji.domain.models import PromptRequest, SuggestionResult
from tv_show_emoji.domain.validators import (
    validate_emoji_count,
    validate_show,
    validate_subject,
)
from tv_show_emoji.exceptions import EmojiCliError, ParseError
from tv_show_emoji.formatter import (
    FormatOptions,
    emoji_warning,
    format_emoji_results,
    format_error,
    format_raw_response,
    make_console,
    should_use_colors,
)
from tv_show_emoji.gateway.ollama_gateway import OllamaGateway
from tv_show_emoji.usecase.suggest_emojis import SuggestEmojisUsecase
from tv_show_emoji.utils.logging import configure_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


@dataclass(frozen=True)
class RunOptions:
    """Validated command-line values. ``None`` means "ask interactively"."""

    show: str | None
    subject: str | None
    model: str
    count: int

    @property
    def interactive(self) -> bool:
        return self.show is None or self.subject is None


@dataclass(frozen=True)
class Prompts:
    """Sources of interactive answers; swapped out in tests."""

    show: Callable[[Catalog], str] = interactive.prompt_for_show
    subject: Callable[[Catalog], str] = interactive.prompt_for_subject
    again: Callable[[], bool] = interactive.prompt_for_continue


class Output:
    """Writes results to stdout and errors to stderr."""

    def __init__(self, use_colors: bool) -> None:
        self.use_colors = use_colors
        self.console = make_console(use_colors)
        self.err_console = make_console(use_colors, stderr=True)

    def text(self, message: str) -> None:
        self.console.print(message)

    def results(self, result: SuggestionResult, interactive_mode: bool) -> None:
        options = FormatOptions(
            show=result.request.show,
            subject=result.request.subject,
            emoji_count=result.count,
            interactive=interactive_mode,
        )
        self.console.print(format_emoji_results(result.results, options, self.use_colors))

    def error(self, error: BaseException) -> None:
        self.err_console.print(format_error(error, self.use_colors))
        if isinstance(error, ParseError):
            self.err_console.print(format_raw_response(error.raw_response, self.use_colors))

    def warning(self) -> None:
        message = emoji_warning(self.use_colors)
        if message:
            self.err_console.print(message)

    def working(self, message: str):
        """Spinner while waiting on the model; nothing when output is plain."""
        if self.use_colors:
            return self.err_console.status(message)
        return contextlib.nullcontext()


def create_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from settings."""
    parser = argparse.ArgumentParser(
        prog="tv-show-emoji",
        description="Suggest emojis for a TV show using a local Ollama model.",
    )
    parser.add_argument(
        "show",
        nargs="?",
        default=None,
        help="TV show name (must be in the predefined list; see --list-shows)",
    )
    parser.add_argument(
        "-s",
        "--subject",
        default=None,
        help=f"Aspect of the show to analyze: {', '.join(DEFAULT_CATALOG.subjects)}",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=settings.ollama_model,
        help=f"Ollama model to use (default: {settings.ollama_model})",
    )
    parser.add_argument(
        "-c",
        "--count",
        default=str(settings.default_emoji_count),
        help=(
            f"Number of emojis, {MIN_EMOJI_COUNT}-{MAX_EMOJI_COUNT} "
            f"(default: {settings.default_emoji_count})"
        ),
    )
    parser.add_argument(
        "--list-shows",
        action="store_true",
        help="Print the predefined TV shows and exit",
    )
    parser.add_argument(
        "--list-subjects",
        action="store_true",
        help="Print the available subjects and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def resolve_options(
    args: argparse.Namespace, catalog: Catalog = DEFAULT_CATALOG
) -> RunOptions:
    """Validate flag values before anything touches the network."""
    show = validate_show(args.show, catalog) if args.show is not None else None
    subject = validate_subject(args.subject, catalog) if args.subject is not None else None
    return RunOptions(
        show=show,
        subject=subject,
        model=args.model,
        count=validate_emoji_count(args.count),
    )


async def suggest(
    usecase: SuggestEmojisUsecase,
    output: Output,
    request: PromptRequest,
    model: str,
    interactive_mode: bool,
) -> SuggestionResult:
    with output.working(f"Asking {model} about {request.show} ({request.subject})..."):
        result = await usecase.execute(request, model)
    output.results(result, interactive_mode)
    return result


async def run_session(
    options: RunOptions,
    usecase: SuggestEmojisUsecase,
    output: Output,
    prompts: Prompts = Prompts(),
    catalog: Catalog = DEFAULT_CATALOG,
) -> int:
    """Resolve the model, then run one request or the interactive loop."""
    model = await usecase.resolve_model(options.model)

    if not options.interactive:
        request = PromptRequest(show=options.show, subject=options.subject, count=options.count)
        await suggest(usecase, output, request, model, interactive_mode=False)
        return EXIT_OK

    show = options.show or prompts.show(catalog)
    subject = options.subject
    while True:
        if subject is None:
            subject = prompts.subject(catalog)
        request = PromptRequest(show=show, subject=subject, count=options.count)
        try:
            await suggest(usecase, output, request, model, interactive_mode=True)
        except ParseError as e:
            # Only this request failed; the user may still try another subject.
            output.error(e)

        if not prompts.again():
            break
        subject = None

    output.text("Goodbye!")
    return EXIT_OK


async def run(options: RunOptions, settings: Settings, output: Output) -> int:
    """Wire the gateway and usecase around one HTTP client."""
    timeout = httpx.Timeout(settings.ollama_timeout, connect=5)
    async with httpx.AsyncClient(timeout=timeout) as client:
        gateway = OllamaGateway(client, settings)
        usecase = SuggestEmojisUsecase(gateway, settings)
        return await run_session(options, usecase, output)


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    use_colors = should_use_colors(sys.stdout)
    output = Output(use_colors)

    try:
        settings = Settings()
    except ValidationError as e:
        output.error(EmojiCliError(f"Invalid configuration: {e}"))
        return EXIT_ERROR

    args = create_parser(settings).parse_args(argv)
    configure_logging("DEBUG" if args.verbose else settings.log_level, settings.log_format)

    if args.list_shows:
        output.text("\n".join(DEFAULT_CATALOG.shows))
        return EXIT_OK
    if args.list_subjects:
        output.text("\n".join(DEFAULT_CATALOG.subjects))
        return EXIT_OK

    try:
        options = resolve_options(args)
        output.warning()
        return asyncio.run(run(options, settings, output))
    except KeyboardInterrupt:
        output.text("\nCancelled.")
        return EXIT_INTERRUPTED
    except EmojiCliError as e:
        logger.debug("Command failed", error_type=type(e).__name__)
        output.error(e)
        return EXIT_ERROR
