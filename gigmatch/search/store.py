"""In-memory résumé document index with keyword scoring.

Scoring per document (accumulated):
 1. +5 per query skill overlapping an indexed skill
 2. +min(count, 3) per query term found among résumé tokens
 3. +3 per (experience entry, term) hit on title/company/description
 4. +2 per (project, term) hit on name/description/technologies
 5. +1 per (education entry, term) hit on degree/institution
 6. With a minimum experience: -10 (floored at 0) when short, else +2

Documents scoring <= 0 are dropped. Equal scores keep insertion order.
"""

import math
from typing import Any, Iterable, Mapping

from pydantic import Field

from ..core.models.base import GigBaseModel, utc_now
from ..core.models.resume import ResumeData
from ..core.models.search import RAGDocument, RAGQuery, RAGSearchResult
from ..observability.logger import get_logger
from .experience import estimate_total_experience_years
from .tokenizer import count_occurrences, tokenize

SKILL_POINTS = 5
KEYWORD_CAP = 3
EXPERIENCE_POINTS = 3
PROJECT_POINTS = 2
EDUCATION_POINTS = 1
EXPERIENCE_SHORTFALL_PENALTY = 10
EXPERIENCE_MET_BONUS = 2

# Shorter query terms only count through explicit skill matches
MIN_TERM_LENGTH = 3


class DocumentScore(GigBaseModel):
    """Score of one document against a query."""

    total: float = Field(0.0, description="Accumulated score, rounded to 2 decimals")
    matched_skills: list[str] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)


class RAGStore:
    """Keyword-searchable collection of résumé documents, keyed by worker id.

    Not persisted: after a restart the owner rebuilds it with ``bulk_index``.
    Re-indexing a worker replaces the previous document.
    """

    def __init__(self, current_year: int | None = None):
        """Initialize an empty index.

        Args:
            current_year: Fixed year for open-ended experience durations (tests)
        """
        self._documents: dict[str, RAGDocument] = {}
        self.current_year = current_year
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def index(self, doc: RAGDocument) -> RAGDocument:
        """Add or replace a worker's résumé in the index.

        Derived fields (tokens, lowercased skills, index time) are recomputed
        from ``doc.text`` and ``doc.parsed``; whatever the caller put there is
        ignored.

        Returns:
            The stored document
        """
        stored = doc.model_copy(
            update={
                "tokens": tokenize(doc.text),
                "skills_lower": [s.lower() for s in doc.parsed.skills],
                "indexed_at": utc_now(),
            }
        )
        self._documents[stored.worker_id] = stored
        self.logger.debug("document_indexed", worker_id=stored.worker_id, tokens=len(stored.tokens))
        return stored

    def bulk_index(self, workers: Iterable[Mapping[str, Any]]) -> int:
        """Index many résumés, skipping entries without text or parsed data.

        Each entry needs ``worker_id``, ``worker_name``, ``text`` and ``parsed``
        (a ``ResumeData`` or a dict of its fields); ``phone`` is optional.

        Returns:
            Number of documents indexed
        """
        count = 0
        for worker in workers:
            text = worker.get("text")
            parsed = worker.get("parsed")
            if not text or not parsed:
                continue
            if not isinstance(parsed, ResumeData):
                parsed = ResumeData.model_validate(parsed)
            self.index(
                RAGDocument(
                    worker_id=worker["worker_id"],
                    worker_name=worker.get("worker_name", ""),
                    text=text,
                    parsed=parsed,
                    phone=worker.get("phone"),
                )
            )
            count += 1

        self.logger.info("bulk_index_complete", indexed=count, size=self.size)
        return count

    def remove(self, worker_id: str) -> None:
        """Remove a worker's résumé; no-op if absent."""
        self._documents.pop(worker_id, None)

    def clear(self) -> None:
        self._documents.clear()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, worker_id: object) -> bool:
        return worker_id in self._documents

    def get(self, worker_id: str) -> RAGDocument | None:
        return self._documents.get(worker_id)

    def documents(self) -> list[RAGDocument]:
        """All indexed documents in insertion order."""
        return list(self._documents.values())

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search(self, query: RAGQuery) -> list[RAGSearchResult]:
        """Keyword search over indexed résumés.

        Args:
            query: Search query; ``limit`` caps the result count

        Returns:
            Results with score > 0, best first. Empty when the query has no
            terms and no minimum experience.
        """
        query_skills = [s.lower() for s in query.skills]
        query_terms = list(dict.fromkeys(tokenize(query.text) + query_skills))

        if not query_terms and not query.min_experience:
            return []

        results: list[RAGSearchResult] = []
        for doc in self._documents.values():
            score = self.score_document(doc, query_terms, query_skills, query.min_experience)
            if score.total > 0:
                results.append(
                    RAGSearchResult(
                        worker_id=doc.worker_id,
                        worker_name=doc.worker_name,
                        phone=doc.phone,
                        score=score.total,
                        matched_skills=score.matched_skills,
                        matched_keywords=score.matched_keywords,
                        parsed=doc.parsed,
                    )
                )

        # Stable sort: ties keep insertion order
        results.sort(key=lambda r: r.score, reverse=True)

        self.logger.debug(
            "keyword_search_complete",
            terms=len(query_terms),
            scored=len(results),
            size=self.size,
        )
        return results[: query.limit]

    def score_document(
        self,
        doc: RAGDocument,
        query_terms: list[str],
        query_skills: list[str],
        min_experience: float | None = None,
    ) -> DocumentScore:
        """Score one document against lowercased query terms and skills."""
        score = 0.0
        matched_skills: list[str] = []
        matched_keywords: list[str] = []
        terms = [t for t in query_terms if len(t) >= MIN_TERM_LENGTH]

        for skill in query_skills:
            hit = next(
                (
                    original
                    for original, lower in zip(doc.parsed.skills, doc.skills_lower)
                    if skill in lower or lower in skill
                ),
                None,
            )
            if hit is not None:
                score += SKILL_POINTS
                matched_skills.append(hit)

        for term in terms:
            count = count_occurrences(doc.tokens, term)
            if count > 0:
                score += min(count, KEYWORD_CAP)
                matched_keywords.append(term)

        def section_hits(texts: list[str], points: int, record: bool) -> float:
            gained = 0.0
            for text in texts:
                lower = text.lower()
                for term in terms:
                    if term in lower:
                        gained += points
                        if record and term not in matched_keywords:
                            matched_keywords.append(term)
            return gained

        parsed = doc.parsed
        score += section_hits(
            [f"{e.title} {e.company} {e.description}" for e in parsed.experience],
            EXPERIENCE_POINTS,
            record=True,
        )
        score += section_hits(
            [f"{p.name} {p.description} {' '.join(p.technologies)}" for p in parsed.projects],
            PROJECT_POINTS,
            record=True,
        )
        score += section_hits(
            [f"{e.degree} {e.institution}" for e in parsed.education],
            EDUCATION_POINTS,
            record=False,
        )

        if min_experience and min_experience > 0:
            years = estimate_total_experience_years(parsed.experience, self.current_year)
            if years < min_experience:
                score = max(0.0, score - EXPERIENCE_SHORTFALL_PENALTY)
            else:
                score += EXPERIENCE_MET_BONUS

        return DocumentScore(
            total=math.floor(score * 100 + 0.5) / 100,
            matched_skills=matched_skills,
            matched_keywords=matched_keywords,
        )
