"""gigmatch data models for workers, jobs, safety findings and résumé search."""

from .base import GigBaseModel, RemoteResult, utc_now
from .enums import FilterCategory, JobStatus, JobType, SuspicionCategory
from .profiles import Job, JobRecommendation, MatchBreakdown, WorkerProfile
from .resume import ResumeData, ResumeEducation, ResumeExperience, ResumeProject
from .safety import ChatFilterResult, FraudScan, MessageSuspicion
from .search import ParsedQuery, RAGDocument, RAGQuery, RAGSearchResult, RerankItem

__all__ = [
    # Base
    "GigBaseModel",
    "RemoteResult",
    "utc_now",
    # Enums
    "JobType",
    "JobStatus",
    "SuspicionCategory",
    "FilterCategory",
    # Profiles
    "WorkerProfile",
    "Job",
    "MatchBreakdown",
    "JobRecommendation",
    # Resume
    "ResumeData",
    "ResumeExperience",
    "ResumeEducation",
    "ResumeProject",
    # Safety
    "FraudScan",
    "MessageSuspicion",
    "ChatFilterResult",
    # Search
    "RAGDocument",
    "RAGQuery",
    "RAGSearchResult",
    "RerankItem",
    "ParsedQuery",
]
