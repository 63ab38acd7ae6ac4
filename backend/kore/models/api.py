"""API request/response models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from kore.models.document import CorpusDocument, MatchResult

_MAX_TITLE_LENGTH = 500


class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Human-readable error message")


class SimilarityCheckRequest(BaseModel):
    """Proposed title to check against the documents of one discipline."""

    title: str = Field(..., description="Proposed document title")
    discipline_code: str = Field(..., description="Discipline to compare within")
    documents: list[CorpusDocument] = Field(
        default_factory=list, description="Existing documents fetched by the caller"
    )
    threshold: Optional[float] = Field(
        default=None,
        gt=0.0,
        le=1.0,
        description="Minimum similarity fraction; defaults to the server setting",
    )
    doc_number: Optional[str] = Field(
        default=None, description="Proposed document number, checked for collisions"
    )

    @field_validator("title")
    @classmethod
    def validate_title_length(cls, v: str) -> str:
        if len(v) > _MAX_TITLE_LENGTH:
            return v[:_MAX_TITLE_LENGTH]
        return v

    @field_validator("doc_number")
    @classmethod
    def validate_doc_number(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class SimilarityCheckResponse(BaseModel):
    matches: list[MatchResult]
    candidate_tokens: list[str]
    compared_count: int
    doc_number_conflict: Optional[CorpusDocument] = None
    processing_time_seconds: float
