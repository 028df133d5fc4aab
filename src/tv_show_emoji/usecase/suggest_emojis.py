"""Suggest emojis usecase: prompt the model and parse its answer."""

import structlog

from tv_show_emoji.config import Settings
from tv_show_emoji.domain.models import PromptRequest, SuggestionResult
from tv_show_emoji.domain.prompts import build_prompt_for
from tv_show_emoji.domain.response_parser import parse_emoji_response
from tv_show_emoji.exceptions import ParseError
from tv_show_emoji.port.llm_port import LLMPort

logger = structlog.get_logger()


class SuggestEmojisUsecase:
    """Resolves the model to use, then runs one request at a time against it."""

    def __init__(self, llm: LLMPort, settings: Settings) -> None:
        self._llm = llm
        self._max_retries = settings.max_parse_retries

    async def resolve_model(self, requested: str) -> str:
        model = await self._llm.find_best_available_model(requested)
        logger.info("Model resolved", requested=requested, model=model)
        return model

    async def execute(self, request: PromptRequest, model: str) -> SuggestionResult:
        """Ask ``model`` for ``request.count`` emojis.

        A response that cannot be parsed is retried up to ``max_parse_retries``
        times; the last ``ParseError`` is raised if none succeeds.
        """
        prompt = build_prompt_for(request)
        log = logger.bind(show=request.show, subject=request.subject, model=model)

        attempt = 0
        while True:
            attempt += 1
            raw = await self._llm.generate(model, prompt)
            try:
                results = parse_emoji_response(raw, request.count)
            except ParseError as e:
                if attempt > self._max_retries:
                    log.error("Response could not be parsed", kind=e.kind.value, attempts=attempt)
                    raise
                log.warning(
                    "Response could not be parsed, retrying",
                    kind=e.kind.value,
                    attempt=attempt,
                )
                continue

            log.info("Suggestions generated", count=len(results), attempts=attempt)
            return SuggestionResult(
                request=request,
                model=model,
                results=results,
                raw_response=raw,
                attempts=attempt,
            )
