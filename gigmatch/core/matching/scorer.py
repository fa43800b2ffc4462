"""Deterministic worker/job match scoring.

Scoring breakdown (sums to 100):
 - Skills overlap:   40 pts, proportional to required skills matched
 - Category match:   20 pts
 - Location:         15 pts same city / 10 pts partial overlap
 - Availability:     15 pts direct fit / 8 pts looser fit
 - Experience:       10 pts when the worker wrote something substantive

Skills match by case-insensitive substring in either direction, so "JS" and
"JavaScript" count as the same skill. Short skills over-match ("C" matches
"Cooking"); that is current behaviour.
"""

from ..models.enums import JobType
from ..models.profiles import Job, MatchBreakdown, WorkerProfile

SKILLS_WEIGHT = 40
CATEGORY_WEIGHT = 20
LOCATION_EXACT = 15
LOCATION_PARTIAL = 10
AVAILABILITY_EXACT = 15
AVAILABILITY_PARTIAL = 8
EXPERIENCE_WEIGHT = 10

# Narratives longer than this earn the experience bonus
EXPERIENCE_MIN_CHARS = 20


def skills_overlap(a: str, b: str) -> bool:
    """Case-insensitive substring match in either direction."""
    a, b = a.lower(), b.lower()
    return a in b or b in a


def matched_required_skills(worker: WorkerProfile, job: Job) -> list[str]:
    """Required skills of ``job`` that some worker skill overlaps."""
    return [
        required
        for required in job.required_skills
        if any(skills_overlap(skill, required) for skill in worker.skills)
    ]


def extract_city(location: str) -> str:
    """First comma-separated part of a location, lowercased."""
    return location.split(",", 1)[0].strip().lower()


def location_points(worker_location: str, job_location: str) -> int:
    if not worker_location.strip() or not job_location.strip():
        return 0

    worker_city = extract_city(worker_location)
    job_city = extract_city(job_location)
    if worker_city == job_city:
        return LOCATION_EXACT

    if (job_city and job_city in worker_location.lower()) or (
        worker_city and worker_city in job_location.lower()
    ):
        return LOCATION_PARTIAL
    return 0


def availability_points(availability: str, job_type: str) -> int:
    avail = availability.lower()
    if not avail:
        return 0

    if (
        ("full" in avail and job_type == JobType.FULL_TIME)
        or ("part" in avail and job_type == JobType.PART_TIME)
        or "flexible" in avail
        or "any" in avail
    ):
        return AVAILABILITY_EXACT

    if ("part" in avail and job_type == JobType.GIG) or (
        "full" in avail and job_type == JobType.PART_TIME
    ):
        return AVAILABILITY_PARTIAL
    return 0


def score_breakdown(worker: WorkerProfile, job: Job) -> MatchBreakdown:
    """Compute each weighted signal of a worker/job match."""
    skills = 0.0
    if job.required_skills:
        matched = len(matched_required_skills(worker, job))
        skills = matched / len(job.required_skills) * SKILLS_WEIGHT

    category = CATEGORY_WEIGHT if job.category in worker.categories else 0
    experience = EXPERIENCE_WEIGHT if len(worker.experience) > EXPERIENCE_MIN_CHARS else 0

    return MatchBreakdown(
        skills=skills,
        category=category,
        location=location_points(worker.location, job.location),
        availability=availability_points(worker.availability, job.job_type),
        experience=experience,
    )


def calculate_match_score(worker: WorkerProfile, job: Job) -> int:
    """Calculate a 0-100 match score between a worker profile and a job.

    Pure and deterministic. Missing signals contribute zero rather than
    raising.

    Args:
        worker: Worker profile
        job: Job posting

    Returns:
        Integer score in [0, 100]
    """
    return score_breakdown(worker, job).total
