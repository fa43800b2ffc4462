"""Safety filter findings."""

from pydantic import Field

from .base import GigBaseModel
from .enums import FilterCategory, SuspicionCategory


class FraudScan(GigBaseModel):
    """Fraud keywords found in job text."""

    is_suspicious: bool = Field(False, description="True when any keyword was found")
    keywords: list[str] = Field(default_factory=list, description="Matched keywords in scan order")


class MessageSuspicion(GigBaseModel):
    """First suspicious pattern found in a chat message."""

    is_suspicious: bool = Field(False, description="True when a pattern matched")
    reason: str | None = Field(None, description="User-facing reason")
    category: SuspicionCategory | None = Field(None, description="Which check matched")


class ChatFilterResult(GigBaseModel):
    """Outcome of the blocking chat filter."""

    blocked: bool = Field(False, description="True when the message must not be delivered")
    reason: str | None = Field(None, description="User-facing reason")
    category: FilterCategory | None = Field(None, description="Block category")
