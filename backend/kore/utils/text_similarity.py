"""Typo-tolerant similarity between two title tokens."""

from collections.abc import Iterable
from typing import Final

from kore.utils.edit_distance import levenshtein

# Similarity tiers returned by token_similarity()
EXACT_MATCH: Final[float] = 1.0
NEAR_MATCH: Final[float] = 0.85
LOOSE_MATCH: Final[float] = 0.6
NO_MATCH: Final[float] = 0.0

# Edit-distance and length gates for each fuzzy tier
NEAR_MAX_DISTANCE: Final[int] = 1
NEAR_MIN_LENGTH: Final[int] = 5
LOOSE_MAX_DISTANCE: Final[int] = 2
LOOSE_MIN_LENGTH: Final[int] = 6

# A token counts as present on one side above this similarity
FUZZY_PRESENCE_THRESHOLD: Final[float] = 0.5


def token_similarity(a: str, b: str) -> float:
    """Compare two tokens on a small discrete scale.

    Returns:
        ``EXACT_MATCH`` for identical tokens, ``NEAR_MATCH`` for one edit on
        tokens of at least 5 characters, ``LOOSE_MATCH`` for two edits on
        tokens of at least 6 characters, ``NO_MATCH`` otherwise.
    """
    if a == b:
        return EXACT_MATCH
    max_len = max(len(a), len(b))
    if max_len == 0:
        return EXACT_MATCH

    distance = levenshtein(a, b)
    if distance <= NEAR_MAX_DISTANCE and max_len >= NEAR_MIN_LENGTH:
        return NEAR_MATCH
    if distance <= LOOSE_MAX_DISTANCE and max_len >= LOOSE_MIN_LENGTH:
        return LOOSE_MATCH
    return NO_MATCH


def fuzzy_contains(tokens: Iterable[str], term: str) -> bool:
    """True when any of ``tokens`` is close enough to ``term``."""
    return any(
        token_similarity(token, term) > FUZZY_PRESENCE_THRESHOLD for token in tokens
    )
