"""Base Pydantic schemas and helpers for gigmatch models."""

from datetime import datetime, timezone
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# Type variable for generic result types
T = TypeVar("T")


# =============================================================================
# Pydantic Base Classes
# =============================================================================


class GigBaseModel(BaseModel):
    """Base Pydantic model for all schemas with common configuration."""

    model_config = ConfigDict(
        # Allow ORM / attribute-object conversion
        from_attributes=True,
        # Validate on assignment
        validate_assignment=True,
        # Use enum values instead of enum members
        use_enum_values=True,
        str_strip_whitespace=True,
    )


# =============================================================================
# Remote call outcome
# =============================================================================


class RemoteResult(GigBaseModel, Generic[T]):
    """Outcome of a call to an external service.

    Either holds a value, or records why the service was unavailable. Callers
    resolve it with ``or_else`` so a deterministic result is always produced.
    """

    available: bool = Field(..., description="Whether the remote call produced a usable value")
    value: T | None = Field(None, description="Remote value when available")
    error: str | None = Field(None, description="Reason the remote value is unavailable")

    @classmethod
    def of(cls, value: T) -> "RemoteResult[T]":
        return cls(available=True, value=value)

    @classmethod
    def unavailable(cls, error: str) -> "RemoteResult[T]":
        return cls(available=False, error=error)

    def or_else(self, fallback: Callable[[], T]) -> T:
        """Return the remote value, or compute the fallback when unavailable."""
        if self.available:
            return self.value  # type: ignore[return-value]
        return fallback()


# =============================================================================
# Utility Functions
# =============================================================================


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)
