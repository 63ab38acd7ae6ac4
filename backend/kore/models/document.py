"""Data models for register documents and duplicate matches."""

from typing import Optional

from pydantic import BaseModel, Field


class CorpusDocument(BaseModel):
    """An existing document of the register, as seen by the duplicate check."""

    id: str = Field(..., description="Stable identifier of the document")
    doc_number: Optional[str] = Field(
        default=None, description="Codified document number (e.g., 'P100-GCV-PLN-0001')"
    )
    title: str = Field(..., description="Display title (designation) of the document")
    discipline_code: str = Field(
        ..., description="Discipline classifier (e.g., 'GCV', 'ELE')"
    )


class MatchResult(CorpusDocument):
    """A document suspected to duplicate the proposed title."""

    score: int = Field(
        ..., ge=0, le=100, description="Weighted similarity with the proposed title"
    )
