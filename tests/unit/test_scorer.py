"""Match scoring and deterministic explanations."""

from gigmatch.core.matching.explainer import explain_job_match
from gigmatch.core.matching.scorer import (
    availability_points,
    calculate_match_score,
    location_points,
    score_breakdown,
)
from gigmatch.core.models.enums import JobType
from gigmatch.core.models.profiles import Job, MatchBreakdown, WorkerProfile


def _cook() -> WorkerProfile:
    return WorkerProfile(
        skills=["Cooking"],
        categories=["Cooking"],
        location="Guntur, AP",
        availability="Part-time",
        experience="3 years as a home cook",
    )


def _cooking_job(location: str = "Guntur, AP") -> Job:
    return Job(
        title="Home cook",
        required_skills=["Cooking", "Food Preparation"],
        category="Cooking",
        location=location,
        job_type=JobType.PART_TIME,
    )


def test_same_city_cook_scores_80():
    breakdown = score_breakdown(_cook(), _cooking_job())

    assert breakdown.skills == 20
    assert breakdown.category == 20
    assert breakdown.location == 15
    assert breakdown.availability == 15
    assert breakdown.experience == 10
    assert calculate_match_score(_cook(), _cooking_job()) == 80


def test_other_city_drops_location_points():
    assert calculate_match_score(_cook(), _cooking_job("Hyderabad, Telangana")) == 65


def test_score_is_deterministic():
    worker, job = _cook(), _cooking_job()
    assert calculate_match_score(worker, job) == calculate_match_score(worker, job)


def test_empty_profile_scores_zero():
    assert calculate_match_score(WorkerProfile(), Job()) == 0


def test_score_bounded_for_perfect_match():
    worker = WorkerProfile(
        skills=["Driving", "Delivery"],
        categories=["Delivery"],
        location="Pune",
        availability="Flexible",
        experience="Five years of two-wheeler delivery work",
    )
    job = Job(
        required_skills=["Driving", "Delivery"],
        category="Delivery",
        location="Pune",
        job_type=JobType.GIG,
    )
    assert calculate_match_score(worker, job) == 100


def test_no_required_skills_gives_no_skill_points():
    job = _cooking_job().model_copy(update={"required_skills": []})
    assert score_breakdown(_cook(), job).skills == 0


def test_short_skill_substring_overmatches():
    # "C" is contained in "Cooking"; kept as current behaviour
    worker = WorkerProfile(skills=["C"])
    job = Job(required_skills=["Cooking"])
    assert score_breakdown(worker, job).skills == 40


def test_category_match_is_literal():
    worker = WorkerProfile(categories=["cooking"])
    assert score_breakdown(worker, Job(category="Cooking")).category == 0


def test_partial_location_match():
    assert location_points("Guntur", "Guntur Road, Vijayawada") == 10
    assert location_points("Guntur, AP", "guntur, andhra pradesh") == 15
    assert location_points("", "Guntur") == 0


def test_availability_rules():
    assert availability_points("Full-time", JobType.FULL_TIME) == 15
    assert availability_points("Part-time", JobType.PART_TIME) == 15
    assert availability_points("Flexible", JobType.FREELANCE) == 15
    assert availability_points("Any time", JobType.GIG) == 15
    assert availability_points("Part-time", JobType.GIG) == 8
    assert availability_points("Full-time", JobType.PART_TIME) == 8
    assert availability_points("Weekends", JobType.FULL_TIME) == 0
    assert availability_points("", JobType.GIG) == 0


def test_experience_bonus_needs_more_than_20_chars():
    assert score_breakdown(WorkerProfile(experience="x" * 20), Job()).experience == 0
    assert score_breakdown(WorkerProfile(experience="x" * 21), Job()).experience == 10


def test_total_rounds_half_up():
    assert MatchBreakdown(skills=13.5, category=0, location=0, availability=0, experience=0).total == 14
    assert MatchBreakdown(skills=13.3).total == 13


def test_explanation_mentions_every_signal():
    text = explain_job_match(_cook(), _cooking_job(), 80)

    assert "Your skills (Cooking) match the job requirements" in text
    assert "You have experience in Cooking" in text
    assert "Job is in your city" in text
    assert "Job timing matches your availability" in text
    assert text.endswith(".")


def test_explanation_covers_partial_signals():
    worker = WorkerProfile(location="Guntur", availability="Part-time")
    job = Job(location="Guntur Road, Vijayawada", job_type=JobType.GIG)

    assert score_breakdown(worker, job).location == 10
    text = explain_job_match(worker, job, 18)
    assert "Job is close to your area" in text
    assert "Job timing partly fits your availability" in text


def test_explanation_fallback_when_nothing_matches():
    job = Job(category="Plumbing", job_type=JobType.GIG)
    text = explain_job_match(WorkerProfile(), job, 0)
    assert text == "This gig Plumbing position might be a good fit for you based on your profile."


def test_nonzero_signals_always_explained():
    workers = [
        _cook(),
        WorkerProfile(categories=["Cooking"]),
        WorkerProfile(location="Guntur"),
        WorkerProfile(availability="flexible"),
    ]
    for worker in workers:
        job = _cooking_job()
        breakdown = score_breakdown(worker, job)
        text = explain_job_match(worker, job, breakdown.total)
        if breakdown.category:
            assert "experience in Cooking" in text
        if breakdown.location:
            assert "Job is" in text
        if breakdown.availability:
            assert "Job timing" in text


def test_padded_narrative_keeps_raw_length():
    worker = WorkerProfile(experience="    three yrs cooking    ")

    assert worker.experience == "    three yrs cooking    "
    assert score_breakdown(worker, Job()).experience == 10


def test_padded_category_is_not_trimmed():
    worker = WorkerProfile(categories=[" Cooking"])
    assert score_breakdown(worker, Job(category="Cooking")).category == 0


def test_adding_required_skills_never_lowers_score():
    pairs = [
        (_cook(), _cooking_job()),
        (WorkerProfile(), Job(required_skills=["Plumbing", "Pipe Fitting", "Welding"])),
        (
            WorkerProfile(skills=["Driving"], location="Pune", availability="Part-time"),
            Job(required_skills=["Driving", "Navigation", "Delivery"], location="Pune", job_type=JobType.GIG),
        ),
    ]
    for worker, job in pairs:
        skills_before = score_breakdown(worker, job).skills
        total_before = calculate_match_score(worker, job)
        for required in job.required_skills:
            worker = worker.model_copy(update={"skills": [*worker.skills, required]})
            breakdown = score_breakdown(worker, job)
            assert breakdown.skills >= skills_before
            assert breakdown.total >= total_before
            skills_before, total_before = breakdown.skills, breakdown.total
        assert skills_before == 40
