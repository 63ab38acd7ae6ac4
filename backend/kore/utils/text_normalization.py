"""Title normalisation and tokenisation for duplicate detection."""

import re
import unicodedata

MIN_TOKEN_LENGTH = 3

_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_title(title: str | None) -> str:
    """Lowercase, strip accents, and replace punctuation with single spaces.

    Examples:
        >>> normalize_title("Procédé  Industriel!")
        'procede industriel'
        >>> normalize_title("---")
        ''
    """
    if not title:
        return ""
    title = unicodedata.normalize("NFD", title.lower())
    title = _COMBINING_MARKS_RE.sub("", title)
    return _NON_ALNUM_RE.sub(" ", title).strip()


def tokenize(title: str | None) -> list[str]:
    """Split a title into distinct comparable tokens.

    Tokens shorter than ``MIN_TOKEN_LENGTH`` are dropped and duplicates keep
    their first position, so ``"Plan de plan 100"`` gives ``["plan", "100"]``.
    """
    tokens: list[str] = []
    seen: set[str] = set()
    for token in normalize_title(title).split():
        if len(token) < MIN_TOKEN_LENGTH or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens
