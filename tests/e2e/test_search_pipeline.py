"""End-to-end résumé search: bulk index, query parsing and re-ranking with a stub LLM."""

import asyncio
import json

from gigmatch.core.config.loader import load_config
from gigmatch.search.ranker import HybridRanker
from gigmatch.search.store import RAGStore

RESUMES = [
    {
        "worker_id": f"w{i}",
        "worker_name": name,
        "text": f"{name} - python developer, {years} years building web apps",
        "parsed": {
            "skills": ["Python", "Django"] if i % 2 == 0 else ["Python"],
            "experience": [
                {"title": "Python Developer", "company": f"Firm {i}", "duration": f"{years} years"}
            ],
        },
    }
    for i, (name, years) in enumerate(
        [("Asha", 6), ("Ravi", 1), ("Meena", 4), ("Kiran", 3), ("Divya", 8)]
    )
]


class StubLLM:
    """Answers query-parse prompts and re-rank prompts with fixed JSON."""

    available = True

    def __init__(self):
        self.prompts: list[str] = []

    async def generate(self, prompt: str, system: str | None = None) -> str:
        self.prompts.append(prompt)
        if prompt.startswith("Parse this recruiter search query"):
            return json.dumps({"keywords": "python developer", "skills": ["Django"], "minExperience": 3})
        return json.dumps(
            [
                {"index": 2, "relevance": 88, "reason": "Django plus long Python record"},
                {"index": 1, "relevance": 75, "reason": "Solid Django experience"},
            ]
        )


def test_search_pipeline_stub():
    store = RAGStore(current_year=2024)
    assert store.bulk_index(RESUMES) == 5

    llm = StubLLM()
    ranker = HybridRanker.from_config(store, load_config())
    ranker.generator = llm

    async def run():
        query = await ranker.parse_rag_query("python devs who know django, 3+ years")
        return query, await ranker.rag_search(query)

    query, results = asyncio.run(run())

    assert query.skills == ["Django"]
    assert query.min_experience == 3
    assert len(llm.prompts) == 2
    assert [r.explanation for r in results] == [
        "Django plus long Python record",
        "Solid Django experience",
    ]
    assert all(r.score in (88, 75) for r in results)

    # Without the LLM the same query falls back to keyword order; Ravi (1 year) is filtered out
    keyword_only = asyncio.run(HybridRanker(store).rag_search(query))
    assert "w1" not in [r.worker_id for r in keyword_only]
    assert keyword_only[0].matched_skills == ["Django"]
