"""Hybrid résumé ranking: keyword search first, optional LLM re-rank second.

``rag_search`` never raises. If the text generator is missing, fails or returns
something unusable, callers still get the keyword-ranked candidates.
"""

from typing import Any

from pydantic import TypeAdapter

from ..core.models.base import RemoteResult
from ..core.models.search import ParsedQuery, RAGQuery, RAGSearchResult, RerankItem
from ..integrations.generation import TextGenerator, generation_unavailable, parse_json_payload
from ..observability.logger import get_logger
from .store import RAGStore

logger = get_logger(__name__)

RERANK_SYSTEM = "You are a recruiter assistant. Reply with JSON only."

QUERY_PARSE_EXAMPLES = """Examples:
- "find python developers with 3 years experience" -> {"keywords":"python developer","skills":["Python"],"minExperience":3}
- "resumes with data analytics projects" -> {"keywords":"data analytics","skills":["Data Analytics","Data Analysis"],"minExperience":null}
- "experienced plumber who knows pipe fitting" -> {"keywords":"plumber pipe fitting","skills":["Plumbing","Pipe Fitting"],"minExperience":null}"""

_rerank_adapter = TypeAdapter(list[RerankItem])


def summarize_candidate(position: int, result: RAGSearchResult) -> str:
    """One prompt line describing a candidate, numbered from 1."""
    parsed = result.parsed
    skills = ", ".join(parsed.skills[:8])
    experience = "; ".join(f"{e.title} at {e.company}" for e in parsed.experience[:2])
    projects = ", ".join(p.name for p in parsed.projects[:2])
    return (
        f"[{position}] {result.worker_name}: Skills: {skills}. "
        f"Exp: {experience or 'N/A'}. Projects: {projects or 'N/A'}"
    )


def build_rerank_prompt(query: RAGQuery, candidates: list[RAGSearchResult], limit: int) -> str:
    """Prompt asking for a JSON relevance ranking of ``candidates``."""
    lines = [f'The employer searched: "{query.text}"']
    if query.skills:
        lines.append(f"Required skills: {', '.join(query.skills)}")
    if query.min_experience:
        lines.append(f"Minimum experience: {query.min_experience:g} years")

    summaries = "\n".join(summarize_candidate(i, c) for i, c in enumerate(candidates, start=1))
    lines.extend(
        [
            "",
            "Here are the candidate summaries:",
            summaries,
            "",
            "Return ONLY a JSON array ranking them by relevance. Each element:",
            '{"index": <1-based>, "relevance": <0-100>, "reason": "one sentence why"}',
            "",
            "Rules:",
            "- Rank only relevant candidates (relevance > 30)",
            f"- Return max {limit} results",
            "- No markdown, only JSON array",
        ]
    )
    return "\n".join(lines)


def apply_rankings(
    candidates: list[RAGSearchResult], rankings: list[RerankItem], limit: int
) -> list[RAGSearchResult]:
    """Map LLM rankings back onto candidates.

    Elements whose 1-based index falls outside ``candidates`` are skipped.
    Each kept candidate takes the relevance as its score and the reason as
    its explanation.
    """
    reranked = [
        candidates[item.index - 1].model_copy(
            update={"score": item.relevance, "explanation": item.reason or None}
        )
        for item in rankings
        if 1 <= item.index <= len(candidates)
    ]
    reranked.sort(key=lambda r: r.score, reverse=True)
    return reranked[:limit]


class HybridRanker:
    """Keyword search over a ``RAGStore`` with optional LLM re-ranking."""

    def __init__(
        self,
        store: RAGStore,
        generator: TextGenerator | None = None,
        candidate_pool: int = 20,
        rerank_top: int = 10,
        min_rerank_candidates: int = 4,
    ):
        """Initialize the ranker.

        Args:
            store: Document index to search
            generator: Text generator used for re-ranking and query parsing
            candidate_pool: Keyword candidates fetched before re-ranking
            rerank_top: Candidates summarized for the generator
            min_rerank_candidates: Fewer candidates than this skip the generator
        """
        self.store = store
        self.generator = generator
        self.candidate_pool = candidate_pool
        self.rerank_top = rerank_top
        self.min_rerank_candidates = min_rerank_candidates

    @classmethod
    def from_config(cls, store: RAGStore, config: dict[str, Any]) -> "HybridRanker":
        """Build a ranker from the ``search`` and ``llm`` config sections.

        The OpenAI client is only attached when at least one API key is set.
        """
        from ..integrations.openai_client import OpenAIClient

        search_config = config.get("search", {})
        client = OpenAIClient.from_config(config)
        return cls(
            store,
            generator=client if client.available else None,
            candidate_pool=search_config.get("candidate_pool", 20),
            rerank_top=search_config.get("rerank_top", 10),
            min_rerank_candidates=search_config.get("min_rerank_candidates", 4),
        )

    async def rag_search(self, query: RAGQuery) -> list[RAGSearchResult]:
        """Rank indexed résumés for ``query``.

        Returns:
            Up to ``query.limit`` results, LLM-ranked when that succeeded,
            keyword-ranked otherwise
        """
        limit = query.limit
        candidates = self.store.search(query.model_copy(update={"limit": self.candidate_pool}))

        if not candidates:
            return []

        if len(candidates) < self.min_rerank_candidates or generation_unavailable(self.generator):
            logger.debug(
                "rerank_skipped",
                candidates=len(candidates),
                generator=not generation_unavailable(self.generator),
            )
            return candidates[:limit]

        result = await self._attempt_rerank(query, candidates[: self.rerank_top], limit)
        ranked = result.or_else(lambda: candidates[:limit])

        logger.info(
            "rag_search_complete",
            candidates=len(candidates),
            returned=len(ranked),
            reranked=result.available,
        )
        return ranked

    async def _attempt_rerank(
        self, query: RAGQuery, top: list[RAGSearchResult], limit: int
    ) -> RemoteResult[list[RAGSearchResult]]:
        prompt = build_rerank_prompt(query, top, limit)
        try:
            raw = await self.generator.generate(prompt, system=RERANK_SYSTEM)
            rankings = _rerank_adapter.validate_python(parse_json_payload(raw))
        except Exception as e:
            logger.warning("rerank_failed", error=str(e))
            return RemoteResult.unavailable(str(e))

        reranked = apply_rankings(top, rankings, limit)
        if not reranked:
            logger.warning("rerank_empty", rankings=len(rankings))
            return RemoteResult.unavailable("no usable rankings")
        return RemoteResult.of(reranked)

    async def parse_rag_query(self, natural_query: str) -> RAGQuery:
        """Turn a recruiter's free-text request into a structured query.

        Falls back to searching the raw text when the generator is missing or
        its answer cannot be parsed.
        """
        result = await self._attempt_query_parse(natural_query)
        return result.or_else(lambda: RAGQuery(text=natural_query, limit=10))

    async def _attempt_query_parse(self, natural_query: str) -> RemoteResult[RAGQuery]:
        if generation_unavailable(self.generator):
            return RemoteResult.unavailable("no text generator configured")

        prompt = (
            "Parse this recruiter search query into structured filters.\n"
            f'Query: "{natural_query}"\n\n'
            "Return ONLY JSON:\n"
            '{"keywords": "search terms", "skills": ["skill1", "skill2"], '
            '"minExperience": <number or null>}\n\n'
            f"{QUERY_PARSE_EXAMPLES}"
        )
        try:
            raw = await self.generator.generate(prompt)
            parsed = ParsedQuery.model_validate(parse_json_payload(raw))
        except Exception as e:
            logger.warning("query_parse_failed", error=str(e))
            return RemoteResult.unavailable(str(e))

        return RemoteResult.of(
            RAGQuery(
                text=parsed.keywords or natural_query,
                skills=parsed.skills,
                min_experience=parsed.min_experience,
                limit=10,
            )
        )
