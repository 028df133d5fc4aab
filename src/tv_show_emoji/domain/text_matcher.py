"""Scored matching of user input against a list of names.

Used for tab-completion of show names and for "did you mean" suggestions.
"""

from collections.abc import Sequence

EXACT_SCORE = 1000
PREFIX_SCORE = 900
CONTAINS_SCORE = 500
FUZZY_SCORE = 100

DEFAULT_MATCH_LIMIT = 10
DEFAULT_SUGGESTION_LIMIT = 5


def is_subsequence(query: str, target: str) -> bool:
    """True when every character of ``query`` appears in ``target`` in order."""
    position = 0
    for char in target:
        if position == len(query):
            break
        if char == query[position]:
            position += 1
    return position == len(query)


def score(query: str, candidate: str) -> int:
    """Score ``candidate`` against an already trimmed, lowercased query.

    Returns 0 when the candidate does not match at all.
    """
    lowered = candidate.lower()
    if lowered == query:
        return EXACT_SCORE
    if lowered.startswith(query):
        return PREFIX_SCORE
    if query in lowered:
        return CONTAINS_SCORE
    if is_subsequence(query, lowered):
        return FUZZY_SCORE
    return 0


def match(
    query: str,
    candidates: Sequence[str],
    limit: int = DEFAULT_MATCH_LIMIT,
) -> list[str]:
    """Rank ``candidates`` against ``query``, best first, at most ``limit`` entries.

    Candidates with equal scores keep their original order. An empty query
    returns the first ``limit`` candidates unchanged.
    """
    needle = query.strip().lower()
    if not needle:
        return list(candidates[:limit])

    scored = [(score(needle, candidate), candidate) for candidate in candidates]
    ranked = sorted(
        (item for item in scored if item[0] > 0),
        key=lambda item: item[0],
        reverse=True,
    )
    return [candidate for _, candidate in ranked[:limit]]


def suggest(
    query: str,
    candidates: Sequence[str],
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[str]:
    """Candidates containing ``query`` (case-insensitive), in their original order."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [c for c in candidates if needle in c.lower()][:limit]


def completer(candidates: Sequence[str], limit: int = DEFAULT_MATCH_LIMIT):
    """Build a ``(text, state)`` completion function over ``candidates``.

    Repeated calls with an increasing ``state`` cycle through the ranked
    matches; with no match the typed text is returned unchanged.
    """

    def complete(text: str, state: int) -> str:
        options = match(text, candidates, limit)
        if not options:
            return text
        return options[state % len(options)]

    return complete
