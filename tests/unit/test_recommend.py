"""Job recommendations on top of the match scorer."""

import asyncio
from datetime import datetime, timedelta, timezone

from gigmatch.core.matching.recommend import (
    category_matches,
    get_basic_recommendations,
    get_recommended_jobs,
    match_jobs,
)
from gigmatch.core.models.enums import JobStatus, JobType
from gigmatch.core.models.profiles import Job, WorkerProfile

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _jobs() -> list[Job]:
    return [
        Job(
            id="cook-guntur",
            required_skills=["Cooking"],
            category="Cooking",
            location="Guntur",
            job_type=JobType.PART_TIME,
            created_at=NOW - timedelta(days=3),
        ),
        Job(
            id="cook-closed",
            required_skills=["Cooking"],
            category="Cooking",
            location="Guntur",
            status=JobStatus.CLOSED,
            created_at=NOW,
        ),
        Job(
            id="driver-pune",
            required_skills=["Driving"],
            category="Delivery",
            location="Pune",
            created_at=NOW - timedelta(days=1),
        ),
        Job(
            id="cook-hyd",
            required_skills=["Cooking"],
            category="hospitality",
            location="Hyderabad",
            job_type=JobType.FULL_TIME,
            created_at=NOW - timedelta(days=2),
        ),
    ]


def _worker() -> WorkerProfile:
    return WorkerProfile(
        user_id="w1",
        skills=["Cooking"],
        categories=["Cooking"],
        location="Guntur",
        availability="Part-time",
    )


def test_recommended_jobs_sorted_and_filtered():
    recs = get_recommended_jobs(_worker(), _jobs())

    # cook-guntur: 40 + 20 + 15 + 15; cook-hyd: 40; driver-pune: 8 is under the threshold
    assert [(r.job.id, r.score) for r in recs] == [("cook-guntur", 90), ("cook-hyd", 40)]


def test_recommended_jobs_limit():
    assert len(get_recommended_jobs(_worker(), _jobs(), limit=1)) == 1


def test_category_aliases():
    assert category_matches("hospitality", ["Cooking"])
    assert category_matches("repair", ["plumbing"])
    assert category_matches("Home Cooking", ["cooking"])
    assert not category_matches("delivery", ["Cooking"])
    assert not category_matches("", ["Cooking"])


def test_basic_recommendations_newest_first():
    jobs = get_basic_recommendations(["Cooking"], _jobs())
    assert [j.id for j in jobs] == ["cook-hyd", "cook-guntur"]


def test_basic_recommendations_without_categories():
    jobs = get_basic_recommendations([], _jobs(), limit=2)
    assert [j.id for j in jobs] == ["driver-pune", "cook-hyd"]


def test_match_jobs_with_profile():
    async def fetch(worker_id: str):
        return _worker() if worker_id == "w1" else None

    recs = asyncio.run(match_jobs("w1", _jobs(), fetch))

    assert [r.job.id for r in recs] == ["cook-guntur", "cook-hyd", "driver-pune"]
    # gig job still earns the looser part-time availability fit
    assert recs[-1].score == 8


def test_match_jobs_without_profile_is_unscored():
    async def fetch(worker_id: str):
        return None

    recs = asyncio.run(match_jobs("ghost", _jobs(), fetch))

    assert [r.job.id for r in recs] == ["driver-pune", "cook-hyd", "cook-guntur"]
    assert {r.score for r in recs} == {0}
