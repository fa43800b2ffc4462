"""Worker profile, job posting and match score models (Pydantic only)."""

import math
from datetime import datetime

from pydantic import ConfigDict, Field

from .base import GigBaseModel, utc_now
from .enums import JobStatus, JobType
from .resume import ResumeData


class WorkerProfile(GigBaseModel):
    """Worker profile as read from the marketplace.

    Every signal is optional; a missing signal contributes nothing to a match.
    """

    # Scoring reads the raw strings, padding included
    model_config = ConfigDict(str_strip_whitespace=False)

    user_id: str | None = Field(None, description="Worker user identifier")
    skills: list[str] = Field(default_factory=list, description="Free-text skills")
    categories: list[str] = Field(default_factory=list, description="Category labels")
    location: str = Field("", description="Location, optionally 'city, region'")
    availability: str = Field("", description="e.g. 'Full-time', 'Part-time', 'Flexible'")
    experience: str = Field("", description="Free-text experience narrative")
    resume_text: str | None = Field(None, description="Raw résumé text for indexing")
    resume_parsed: ResumeData | None = Field(None, description="Parsed résumé")


class Job(GigBaseModel):
    """Job posting as read from the marketplace."""

    model_config = ConfigDict(str_strip_whitespace=False)

    id: str | None = Field(None, description="Job identifier")
    title: str = Field("", description="Job title")
    description: str = Field("", description="Job description")
    job_type: JobType = Field(JobType.GIG, validate_default=True, description="Engagement type")
    category: str = Field("", description="Category label")
    required_skills: list[str] = Field(default_factory=list, description="Required skills")
    location: str = Field("", description="Location, optionally 'city, region'")
    status: JobStatus = Field(JobStatus.ACTIVE, validate_default=True, description="Lifecycle status")
    created_at: datetime = Field(default_factory=utc_now, description="Posting time")


class MatchBreakdown(GigBaseModel):
    """Per-signal contributions to a worker/job match score."""

    skills: float = Field(0.0, ge=0.0, le=40.0, description="Skill overlap (0-40)")
    category: float = Field(0.0, ge=0.0, le=20.0, description="Category match (0 or 20)")
    location: float = Field(0.0, ge=0.0, le=15.0, description="Location proximity (0, 10 or 15)")
    availability: float = Field(0.0, ge=0.0, le=15.0, description="Availability fit (0, 8 or 15)")
    experience: float = Field(0.0, ge=0.0, le=10.0, description="Experience bonus (0 or 10)")

    @property
    def total(self) -> int:
        """Final 0-100 score."""
        raw = self.skills + self.category + self.location + self.availability + self.experience
        # Half-up, so 62.5 scores 63
        return math.floor(min(raw, 100) + 0.5)


class JobRecommendation(GigBaseModel):
    """A job paired with its match score for a worker."""

    job: Job
    score: int = Field(..., ge=0, le=100, description="Match score")
