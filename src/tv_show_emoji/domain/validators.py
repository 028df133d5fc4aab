"""Validation and normalization of user-supplied show, subject and count values."""

import re

from tv_show_emoji.domain.catalog import (
    DEFAULT_CATALOG,
    MAX_EMOJI_COUNT,
    MIN_EMOJI_COUNT,
    Catalog,
)
from tv_show_emoji.domain.text_matcher import DEFAULT_SUGGESTION_LIMIT, suggest
from tv_show_emoji.exceptions import InvalidArgumentError

MAX_CUSTOM_SUBJECT_LENGTH = 50

_LEADING_INT = re.compile(r"[+-]?[0-9]+")
_DISALLOWED_SUBJECT_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def validate_subject(value: str, catalog: Catalog = DEFAULT_CATALOG) -> str:
    """Return the normalized subject or raise ``InvalidArgumentError``."""
    normalized = value.strip().lower()
    if normalized not in catalog.subjects:
        raise InvalidArgumentError(
            f'Invalid subject "{value}". Must be one of: {", ".join(catalog.subjects)}'
        )
    return normalized


def validate_emoji_count(value: str) -> int:
    """Parse the leading integer of ``value`` and check it is within bounds.

    Mirrors ``parseInt`` semantics: ``"10.5"`` becomes 10, ``"a10"`` is rejected.
    """
    match = _LEADING_INT.match(value.strip())
    if match is None:
        raise InvalidArgumentError(f'Emoji count must be a number, got "{value}"')

    count = int(match.group())
    if count < MIN_EMOJI_COUNT or count > MAX_EMOJI_COUNT:
        raise InvalidArgumentError(
            f"Emoji count must be between {MIN_EMOJI_COUNT} and {MAX_EMOJI_COUNT}, got {count}"
        )
    return count


def validate_show(value: str, catalog: Catalog = DEFAULT_CATALOG) -> str:
    """Return the catalog spelling of the show or raise with suggestions."""
    canonical = catalog.find_show(value)
    if canonical is not None:
        return canonical

    trimmed = value.strip()
    suggestions = suggest(trimmed, catalog.shows, DEFAULT_SUGGESTION_LIMIT)
    if suggestions:
        listed = "\n".join(f"  - {show}" for show in suggestions)
        raise InvalidArgumentError(
            f'TV show "{trimmed}" is not in the predefined list. '
            f"Did you mean one of these?\n{listed}"
        )
    raise InvalidArgumentError(
        f'TV show "{trimmed}" is not in the predefined list. '
        "Run with --help to see how to list available shows (--list-shows)."
    )


def sanitize_custom_subject(value: str) -> str:
    """Lowercase a free-form subject and strip everything but words, spaces and hyphens."""
    cleaned = _DISALLOWED_SUBJECT_CHARS.sub("", value.strip().lower())
    return _WHITESPACE_RUN.sub(" ", cleaned)


def validate_custom_subject(value: str) -> str:
    """Sanitize a free-form subject and reject empty or over-long results."""
    sanitized = sanitize_custom_subject(value).strip()
    if not sanitized:
        raise InvalidArgumentError("Subject cannot be empty")
    if len(sanitized) > MAX_CUSTOM_SUBJECT_LENGTH:
        raise InvalidArgumentError(
            f"Subject must be {MAX_CUSTOM_SUBJECT_LENGTH} characters or less"
        )
    return sanitized
