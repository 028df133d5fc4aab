"""Turn free-text model output into a fixed-size list of emoji results.

The model is asked for ``emoji - explanation`` lines but routinely adds list
markers, other separators, chatter and over-long explanations. Each line is
parsed on its own; unusable lines are skipped and long explanations are cut
down instead of rejected. Only the overall count is enforced strictly.
"""

import re

import emoji
import structlog

from tv_show_emoji.domain.models import EmojiResult, ParseFailure
from tv_show_emoji.exceptions import ParseError

logger = structlog.get_logger()

MAX_EXPLANATION_WORDS = 50

ZERO_WIDTH_JOINER = "\u200d"

# Characters that may trail a recognized emoji without being one themselves:
# ZWJ, variation selectors, the keycap mark and the skin-tone modifiers.
_EMOJI_TRAILERS = frozenset(
    {ZERO_WIDTH_JOINER, "\ufe0e", "\ufe0f", "\u20e3"}
    | {chr(cp) for cp in range(0x1F3FB, 0x1F400)}
)

# One numeric ("1. ", "2) ") or bullet ("• ", "- ", "* ") marker per line. A bullet
# followed by U+FE0F or U+20E3 is the base of a keycap emoji.
_LIST_MARKER = re.compile(r"^(?:\d+[.)]|[•\-*](?![\ufe0f\u20e3]))\s*")
_LEADING_SEPARATORS = re.compile(r"^[\s\-:|•]+")
_SENTENCE_END = re.compile(r"[.!?]")


def contains_emoji(text: str) -> bool:
    return ZERO_WIDTH_JOINER in text or emoji.emoji_count(text) > 0


def leading_emoji(text: str) -> str:
    """Return the run of emoji at the very start of ``text`` ("" if none).

    Adjacent emoji are kept together, so ``"🔥🔥 - ..."`` yields ``"🔥🔥"``.
    """
    end = 0
    for token in emoji.emoji_list(text):
        if token["match_start"] != end:
            break
        end = token["match_end"]
        while end < len(text) and text[end] in _EMOJI_TRAILERS:
            end += 1
    return text[:end]


def strip_list_marker(line: str) -> str:
    return _LIST_MARKER.sub("", line, count=1).strip()


def shorten_explanation(explanation: str) -> str:
    """Keep explanations within ``MAX_EXPLANATION_WORDS`` words.

    An over-long explanation is cut to its first sentence (terminator
    dropped); if that is still too long it is hard-truncated.
    """
    if len(explanation.split()) <= MAX_EXPLANATION_WORDS:
        return explanation

    first_sentence = _SENTENCE_END.split(explanation, maxsplit=1)[0].strip() or explanation
    words = first_sentence.split()
    if len(words) > MAX_EXPLANATION_WORDS:
        return " ".join(words[:MAX_EXPLANATION_WORDS])
    return first_sentence


def parse_line(line: str) -> EmojiResult | None:
    """Parse one response line, or return None if it carries no usable result."""
    text = line.strip()
    if not text:
        return None

    text = strip_list_marker(text)
    if not contains_emoji(text):
        return None

    symbol = leading_emoji(text)
    if not symbol:
        return None

    explanation = _LEADING_SEPARATORS.sub("", text[len(symbol):]).strip()
    if not explanation:
        return None

    return EmojiResult(emoji=symbol, explanation=shorten_explanation(explanation))


def parse_emoji_response(response: str, expected_count: int) -> list[EmojiResult]:
    """Parse a model response into exactly ``expected_count`` results.

    Extra results are dropped; too few raise ``ParseError`` with
    ``ParseFailure.TOO_FEW``.
    """
    if not response or not response.strip():
        raise ParseError(
            ParseFailure.EMPTY_RESPONSE,
            "Response is empty",
            expected=expected_count,
            raw_response=response or "",
        )

    lines = response.split("\n")
    results = [parsed for parsed in map(parse_line, lines) if parsed is not None]

    logger.debug(
        "Parsed model response",
        lines=len(lines),
        found=len(results),
        expected=expected_count,
    )

    if not results:
        raise ParseError(
            ParseFailure.NO_EMOJIS,
            "No emojis found in response",
            expected=expected_count,
            raw_response=response,
        )

    if len(results) < expected_count:
        noun = "emoji" if expected_count == 1 else "emojis"
        raise ParseError(
            ParseFailure.TOO_FEW,
            f"Expected {expected_count} {noun}, but only found {len(results)}",
            expected=expected_count,
            found=len(results),
            raw_response=response,
        )

    return results[:expected_count]
