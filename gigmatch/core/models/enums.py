"""Enumeration types for gigmatch models."""

from enum import Enum


class JobType(str, Enum):
    """Engagement type of a job posting."""

    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    GIG = "gig"
    FREELANCE = "freelance"


class JobStatus(str, Enum):
    """Lifecycle status of a job posting."""

    ACTIVE = "active"
    FILLED = "filled"
    CLOSED = "closed"
    DRAFT = "draft"


class SuspicionCategory(str, Enum):
    """Why a chat message was flagged by the suspicion scan."""

    PHONE = "phone"
    WHATSAPP = "whatsapp"
    EMAIL = "email"
    PAYMENT = "payment"


class FilterCategory(str, Enum):
    """Why a chat message was blocked by the chat filter."""

    PHONE = "phone"
    CONTACT = "contact"
    FRAUD = "fraud"
    SOCIAL = "social"
