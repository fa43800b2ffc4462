"""Résumé index and hybrid keyword/LLM ranking."""

from .experience import estimate_total_experience_years
from .ranker import HybridRanker
from .store import RAGStore
from .tokenizer import tokenize

__all__ = [
    "RAGStore",
    "HybridRanker",
    "estimate_total_experience_years",
    "tokenize",
]
