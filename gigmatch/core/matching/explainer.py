"""Human-readable match explanations.

The deterministic explainer re-derives the skills, category, location and
availability signals with the scorer's own helpers, so every signal that
earned points produces a matching sentence fragment.
"""

from ...integrations.generation import TextGenerator, generation_unavailable
from ...observability.logger import get_logger
from ..models.base import RemoteResult
from ..models.profiles import Job, WorkerProfile
from .scorer import (
    AVAILABILITY_EXACT,
    LOCATION_EXACT,
    availability_points,
    location_points,
    matched_required_skills,
    skills_overlap,
)

logger = get_logger(__name__)

AI_EXPLANATION_SYSTEM = (
    "You are a job match explanation assistant for a hyperlocal job platform in India. "
    "Write a single, short, encouraging sentence (maximum 20 words) explaining why a worker "
    "is a match for a job. Treat synonymous skills as equivalent: chef/cook/khansama = Cooking; "
    "driver/chauffeur = Driving; guard/watchman/chowkidar = Security; electrician/wireman = "
    "Electrical Work; plumber/pipe fitter = Plumbing; maid/domestic help = Housekeeping. "
    "No markdown, no greetings, no extra text - just the explanation sentence."
)


def explain_job_match(worker: WorkerProfile, job: Job, score: int) -> str:
    """Explain why ``job`` suits ``worker`` without calling any model.

    Args:
        worker: Worker profile
        job: Job posting
        score: Match score previously computed for the pair (informational)

    Returns:
        Fragments joined with ". ", or a generic sentence when no signal applies
    """
    reasons: list[str] = []

    if matched_required_skills(worker, job):
        matching = [
            skill
            for skill in worker.skills
            if any(skills_overlap(skill, required) for required in job.required_skills)
        ]
        reasons.append(f"Your skills ({', '.join(matching)}) match the job requirements")

    if job.category in worker.categories:
        reasons.append(f"You have experience in {job.category}")

    location = location_points(worker.location, job.location)
    if location == LOCATION_EXACT:
        reasons.append("Job is in your city")
    elif location:
        reasons.append("Job is close to your area")

    availability = availability_points(worker.availability, job.job_type)
    if availability == AVAILABILITY_EXACT:
        reasons.append("Job timing matches your availability")
    elif availability:
        reasons.append("Job timing partly fits your availability")

    if not reasons:
        return (
            f"This {job.job_type} {job.category} position might be a good fit "
            "for you based on your profile."
        )

    return ". ".join(reasons) + "."


def _match_quality(score: int) -> str:
    if score >= 70:
        return "great"
    if score >= 40:
        return "good"
    return "possible"


async def _attempt_ai_explanation(
    worker: WorkerProfile, job: Job, score: int, generator: TextGenerator | None
) -> RemoteResult[str]:
    if generation_unavailable(generator):
        return RemoteResult.unavailable("no text generator configured")

    prompt = (
        f"Worker skills: {', '.join(worker.skills)} | Categories: {', '.join(worker.categories)}\n"
        f"Job requires: {', '.join(job.required_skills)} in {job.category} at {job.location}\n"
        f"Match score: {score}%. Write ONE sentence (max 20 words) explaining why this is a "
        f"{_match_quality(score)} match."
    )
    try:
        text = await generator.generate(prompt, system=AI_EXPLANATION_SYSTEM)
    except Exception as e:
        logger.warning("match_explanation_failed", job_id=job.id, error=str(e))
        return RemoteResult.unavailable(str(e))

    cleaned = text.strip().strip("\"'").strip()
    if not cleaned:
        return RemoteResult.unavailable("empty completion")
    return RemoteResult.of(cleaned)


async def generate_match_explanation_with_ai(
    worker: WorkerProfile,
    job: Job,
    score: int,
    generator: TextGenerator | None = None,
) -> str:
    """One-sentence explanation from the text generator, else the deterministic one.

    Never raises; display-only.
    """
    result = await _attempt_ai_explanation(worker, job, score, generator)
    return result.or_else(lambda: explain_job_match(worker, job, score))
