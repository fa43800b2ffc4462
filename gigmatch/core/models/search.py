"""Résumé search models: indexed documents, queries and results."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from .base import GigBaseModel, utc_now
from .resume import ResumeData


class RAGDocument(GigBaseModel):
    """Résumé document held by the in-memory index.

    ``tokens``, ``skills_lower`` and ``indexed_at`` are derived at index time.
    """

    worker_id: str = Field(..., description="Worker identifier (unique key)")
    worker_name: str = Field("", description="Worker display name")
    text: str = Field("", description="Raw résumé text")
    parsed: ResumeData = Field(default_factory=ResumeData, description="Parsed résumé")
    phone: str | None = Field(None, description="Contact phone")

    tokens: list[str] = Field(default_factory=list, description="Deduplicated lowercase tokens")
    skills_lower: list[str] = Field(default_factory=list, description="Lowercased parsed skills")
    indexed_at: datetime = Field(default_factory=utc_now, description="Index time")


class RAGQuery(GigBaseModel):
    """Résumé search query."""

    text: str = Field("", description="Free-text query")
    skills: list[str] = Field(default_factory=list, description="Explicit skills to match")
    min_experience: float | None = Field(None, description="Minimum years of experience")
    limit: int = Field(10, description="Maximum results")

    @field_validator("limit")
    @classmethod
    def _clamp_limit(cls, value: int) -> int:
        return max(value, 0)


class RAGSearchResult(GigBaseModel):
    """A ranked résumé match."""

    worker_id: str = Field(..., description="Worker identifier")
    worker_name: str = Field("", description="Worker display name")
    phone: str | None = Field(None, description="Contact phone")
    score: float = Field(..., description="Keyword score, or LLM relevance after re-ranking")
    matched_skills: list[str] = Field(default_factory=list, description="Matched résumé skills")
    matched_keywords: list[str] = Field(default_factory=list, description="Matched query terms")
    parsed: ResumeData = Field(default_factory=ResumeData, description="Parsed résumé")
    explanation: str | None = Field(None, description="LLM relevance explanation")


class RerankItem(GigBaseModel):
    """One element of an LLM re-ranking response."""

    index: int = Field(..., description="1-based position in the candidate summary list")
    relevance: float = Field(..., description="Relevance 0-100")
    reason: str | None = Field(None, description="One-sentence reason")


class ParsedQuery(GigBaseModel):
    """LLM interpretation of a natural-language résumé query."""

    model_config = ConfigDict(populate_by_name=True)

    keywords: str | None = Field(None, description="Search terms")
    skills: list[str] = Field(default_factory=list, description="Skills mentioned")
    min_experience: float | None = Field(None, alias="minExperience", description="Minimum years")

    @field_validator("skills", mode="before")
    @classmethod
    def _drop_empty_skills(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [s for s in value if s]
        return value
