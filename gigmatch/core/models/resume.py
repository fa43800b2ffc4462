"""Structured résumé data supplied by the résumé parsing collaborator."""

from pydantic import Field

from .base import GigBaseModel


class ResumeExperience(GigBaseModel):
    """Single work experience entry."""

    title: str = Field("", description="Job title")
    company: str = Field("", description="Company name")
    duration: str = Field("", description="Free-text duration, e.g. 'Jan 2020 - Dec 2022'")
    description: str = Field("", description="What the worker did")


class ResumeEducation(GigBaseModel):
    """Single education entry."""

    degree: str = Field("", description="Degree or qualification")
    institution: str = Field("", description="Institution name")
    year: str | None = Field(None, description="Completion year")


class ResumeProject(GigBaseModel):
    """Single project entry."""

    name: str = Field("", description="Project name")
    description: str = Field("", description="Project description")
    technologies: list[str] = Field(default_factory=list, description="Technologies used")


class ResumeData(GigBaseModel):
    """Parsed résumé structure."""

    summary: str | None = Field(None, description="Professional summary")
    skills: list[str] = Field(default_factory=list, description="Listed skills")
    experience: list[ResumeExperience] = Field(default_factory=list, description="Work experience")
    education: list[ResumeEducation] = Field(default_factory=list, description="Education history")
    projects: list[ResumeProject] = Field(default_factory=list, description="Projects")
    certifications: list[str] = Field(default_factory=list, description="Certifications")
