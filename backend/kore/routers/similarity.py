"""POST /api/similarity/check — warn about probable duplicate titles."""

import logging
import time

from fastapi import APIRouter, HTTPException

from kore.config import settings
from kore.models.api import SimilarityCheckRequest, SimilarityCheckResponse
from kore.services.duplicate_detector import (
    find_doc_number_conflict,
    find_similar_documents,
)
from kore.utils.text_normalization import tokenize

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_threshold(requested: float | None) -> float:
    return requested if requested is not None else settings.similarity_threshold


@router.post("/similarity/check", response_model=SimilarityCheckResponse)
def check_similarity(body: SimilarityCheckRequest):
    if len(body.documents) > settings.max_corpus_documents:
        logger.warning(
            "[Similarity] Rejected request with %d documents (limit %d)",
            len(body.documents),
            settings.max_corpus_documents,
        )
        raise HTTPException(
            status_code=400,
            detail=(
                f"Too many documents: {len(body.documents)} "
                f"(limit {settings.max_corpus_documents}). "
                "Filter the register by discipline before checking."
            ),
        )

    start = time.monotonic()
    threshold = _resolve_threshold(body.threshold)

    matches = find_similar_documents(
        body.title,
        body.documents,
        body.discipline_code,
        threshold,
        max_results=settings.max_similar_results,
        min_title_length=settings.min_title_length,
    )
    conflict = find_doc_number_conflict(body.doc_number, body.documents)
    compared = sum(1 for doc in body.documents if doc.discipline_code == body.discipline_code)

    elapsed = time.monotonic() - start

    logger.info(
        "[Similarity] %s: %d compared, %d matches (threshold %.2f)%s in %.3fs",
        body.discipline_code,
        compared,
        len(matches),
        threshold,
        ", doc number already used" if conflict else "",
        elapsed,
    )

    return SimilarityCheckResponse(
        matches=matches,
        candidate_tokens=tokenize(body.title),
        compared_count=compared,
        doc_number_conflict=conflict,
        processing_time_seconds=round(elapsed, 4),
    )
