"""Levenshtein edit distance between two tokens."""

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions.

    Examples:
        >>> levenshtein("beton", "betons")
        1
        >>> levenshtein("", "abc")
        3
    """
    return Levenshtein.distance(a, b)
