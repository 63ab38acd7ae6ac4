"""Duplicate-title detection: weighted fuzzy scoring and ranking.

A proposed title is compared with every document of the same discipline.
Each comparison is a weighted Jaccard coefficient where:

* terms are the normalised tokens of both titles,
* a term is present on a side when any token of that side fuzzy-matches it
  (see ``kore.utils.text_similarity``),
* each term is weighted by its rarity across the proposed title and the
  compared documents (see ``kore.utils.term_weights``).

Every call is a pure function of its arguments. The weight table is rebuilt
per call and nothing is cached between calls.
"""

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Final

from kore.models.document import CorpusDocument, MatchResult
from kore.utils.term_weights import compute_term_weights
from kore.utils.text_normalization import tokenize
from kore.utils.text_similarity import fuzzy_contains

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD: Final[float] = 0.35
MAX_RESULTS: Final[int] = 3
MIN_TITLE_LENGTH: Final[int] = 5


def title_length(title: str) -> int:
    """Length of ``title`` in UTF-16 code units, as browsers count input length."""
    return len(title.encode("utf-16-le")) // 2


def to_percent(fraction: float) -> int:
    """Convert a fraction to an integer percentage, rounding halves up."""
    return math.floor(fraction * 100 + 0.5)


def weighted_similarity(
    candidate_tokens: Sequence[str],
    document_tokens: Sequence[str],
    weights: Mapping[str, float],
) -> float:
    """Fuzzy-tolerant weighted Jaccard between two token sets.

    Every term of the union adds its weight to the denominator. It adds to
    the numerator only when both sides contain it, exactly or through a
    fuzzy match. Terms missing from ``weights`` count as 1.

    Returns:
        A float between 0.0 and 1.0; 0.0 when both token sets are empty.
    """
    intersection_weight = 0.0
    union_weight = 0.0

    for term in dict.fromkeys([*candidate_tokens, *document_tokens]):
        weight = weights.get(term, 1.0)
        in_candidate = fuzzy_contains(candidate_tokens, term)
        in_document = fuzzy_contains(document_tokens, term)

        if in_candidate and in_document:
            intersection_weight += weight
        union_weight += weight

    if union_weight == 0:
        return 0.0
    return intersection_weight / union_weight


def find_similar_documents(
    title: str | None,
    documents: Sequence[CorpusDocument],
    discipline_code: str,
    threshold: float = DEFAULT_THRESHOLD,
    *,
    max_results: int = MAX_RESULTS,
    min_title_length: int = MIN_TITLE_LENGTH,
) -> list[MatchResult]:
    """Return the documents of ``discipline_code`` that probably duplicate ``title``.

    Args:
        title: Proposed document title, as typed by the user.
        documents: Existing documents. Only those of ``discipline_code`` are
            compared.
        discipline_code: Discipline of the proposed document.
        threshold: Minimum similarity fraction to report a match.
        max_results: Maximum number of matches returned.
        min_title_length: Titles shorter than this are not checked. The raw
            title is measured with ``title_length``, before normalisation.

    Returns:
        At most ``max_results`` matches, best score first. Documents with
        equal scores keep their input order.
    """
    if not title or title_length(title) < min_title_length:
        return []

    same_discipline = [doc for doc in documents if doc.discipline_code == discipline_code]
    if not same_discipline:
        return []

    candidate_tokens = tokenize(title)
    document_tokens = [tokenize(doc.title) for doc in same_discipline]
    weights = compute_term_weights([candidate_tokens, *document_tokens])

    min_score = to_percent(threshold)
    results: list[MatchResult] = []
    for doc, tokens in zip(same_discipline, document_tokens):
        score = to_percent(weighted_similarity(candidate_tokens, tokens, weights))
        if score >= min_score:
            results.append(MatchResult(**doc.model_dump(), score=score))

    # sorted() is stable, so equal scores keep corpus order
    ranked = sorted(results, key=lambda match: match.score, reverse=True)[:max_results]

    logger.debug(
        "[DuplicateDetector] %d %s documents compared, %d above %d%%, returning %d",
        len(same_discipline),
        discipline_code,
        len(results),
        min_score,
        len(ranked),
    )
    return ranked


def find_doc_number_conflict(
    doc_number: str | None, documents: Sequence[CorpusDocument]
) -> CorpusDocument | None:
    """Return the first document already registered under ``doc_number``.

    Both numbers are compared after trimming surrounding whitespace, so a
    number pasted with a trailing space still collides. Case is significant.
    """
    if not doc_number or not doc_number.strip():
        return None
    wanted = doc_number.strip()
    return next(
        (doc for doc in documents if doc.doc_number and doc.doc_number.strip() == wanted),
        None,
    )
