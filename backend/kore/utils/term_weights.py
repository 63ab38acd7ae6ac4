"""Inverse-document-frequency weights over a small comparison set."""

import math
from collections import Counter
from collections.abc import Iterable, Sequence


def compute_term_weights(token_sets: Sequence[Iterable[str]]) -> dict[str, float]:
    """Weight each term by how rare it is across ``token_sets``.

    ``weight(t) = ln((N + 1) / (df(t) + 1)) + 1`` where ``N`` is the number of
    sets and ``df(t)`` the number of sets containing ``t``. A term repeated
    inside one set is counted once. Weights are never below 1.

    The table only describes the sets passed in; build a new one per
    comparison.
    """
    doc_count = len(token_sets)
    doc_freq: Counter[str] = Counter()
    for tokens in token_sets:
        doc_freq.update(set(tokens))

    return {
        term: math.log((doc_count + 1) / (freq + 1)) + 1
        for term, freq in doc_freq.items()
    }
