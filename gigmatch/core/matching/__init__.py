"""Worker/job matching: scoring, explanations, skills and recommendations."""

from .explainer import explain_job_match, generate_match_explanation_with_ai
from .recommend import category_matches, get_basic_recommendations, get_recommended_jobs, match_jobs
from .scorer import calculate_match_score, score_breakdown
from .skills import extract_skills, extract_skills_with_ai

__all__ = [
    "calculate_match_score",
    "score_breakdown",
    "explain_job_match",
    "generate_match_explanation_with_ai",
    "extract_skills",
    "extract_skills_with_ai",
    "category_matches",
    "get_recommended_jobs",
    "get_basic_recommendations",
    "match_jobs",
]
