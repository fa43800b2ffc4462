"""Job recommendations for workers, built on the match scorer."""

from typing import Awaitable, Callable

from ...observability.logger import get_logger
from ..models.enums import JobStatus
from ..models.profiles import Job, JobRecommendation, WorkerProfile
from .scorer import calculate_match_score

logger = get_logger(__name__)

# Jobs must score above this to be recommended
MIN_RECOMMENDATION_SCORE = 20

# Employer-side category slugs -> worker-facing category names
CATEGORY_ALIASES: dict[str, list[str]] = {
    "home-services": ["Cleaning", "Gardening", "Security", "Housekeeping"],
    "delivery": ["Delivery", "Driving"],
    "repair": ["Plumbing", "Electrical", "Mechanical", "Carpentry"],
    "construction": ["Construction", "Carpentry", "Painting"],
    "office-work": ["Office Work", "Data Entry", "Customer Service", "Teaching"],
    "hospitality": ["Hospitality", "Cooking"],
    "teaching": ["Teaching"],
    "sales": ["Sales", "Retail"],
    "other": ["Other"],
}

ProfileFetcher = Callable[[str], Awaitable[WorkerProfile | None]]


def category_matches(job_category: str, worker_categories: list[str]) -> bool:
    """Alias-aware category match used for browsing.

    Accepts a direct case-insensitive match, a slug alias, or a substring
    match in either direction.
    """
    jc = job_category.lower()
    wc = [c.lower() for c in worker_categories]
    if not jc:
        return False

    if jc in wc:
        return True

    if any(alias.lower() in wc for alias in CATEGORY_ALIASES.get(jc, [])):
        return True

    return any(w and (w in jc or jc in w) for w in wc)


def _active(jobs: list[Job]) -> list[Job]:
    return [job for job in jobs if job.status == JobStatus.ACTIVE]


def _newest_first(jobs: list[Job]) -> list[Job]:
    return sorted(jobs, key=lambda job: job.created_at, reverse=True)


def get_recommended_jobs(
    worker: WorkerProfile, jobs: list[Job], limit: int = 10
) -> list[JobRecommendation]:
    """Active jobs scoring above the recommendation threshold, best first."""
    scored = [
        JobRecommendation(job=job, score=calculate_match_score(worker, job))
        for job in _active(jobs)
    ]
    recommended = [rec for rec in scored if rec.score > MIN_RECOMMENDATION_SCORE]
    recommended.sort(key=lambda rec: rec.score, reverse=True)
    return recommended[:limit]


def get_basic_recommendations(categories: list[str], jobs: list[Job], limit: int = 10) -> list[Job]:
    """Category-only recommendations for workers with incomplete profiles.

    With no categories, the newest active jobs are returned.
    """
    active = _active(jobs)
    if categories:
        active = [job for job in active if category_matches(job.category, categories)]
    return _newest_first(active)[:limit]


async def match_jobs(
    worker_id: str,
    jobs: list[Job],
    get_worker_profile: ProfileFetcher | None = None,
) -> list[JobRecommendation]:
    """Score every active job for a worker, fetching the profile on demand.

    Without a fetcher, or when no profile exists, jobs come back newest first
    with a score of 0.
    """
    active = _active(jobs)
    profile = await get_worker_profile(worker_id) if get_worker_profile else None

    if profile is None:
        logger.info("match_jobs_unscored", worker_id=worker_id, jobs=len(active))
        return [JobRecommendation(job=job, score=0) for job in _newest_first(active)]

    scored = [JobRecommendation(job=job, score=calculate_match_score(profile, job)) for job in active]
    scored.sort(key=lambda rec: rec.score, reverse=True)
    return scored
