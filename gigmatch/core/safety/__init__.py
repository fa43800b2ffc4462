"""Safety filters for job postings and chat messages."""

from .fraud import (
    FRAUD_KEYWORDS,
    FraudulentPostingError,
    detect_fraud_keywords,
    ensure_job_postable,
    screen_job_posting,
)
from .messages import check_message_suspicion, filter_chat_message, mask_sensitive_content

__all__ = [
    "FRAUD_KEYWORDS",
    "FraudulentPostingError",
    "detect_fraud_keywords",
    "screen_job_posting",
    "ensure_job_postable",
    "check_message_suspicion",
    "filter_chat_message",
    "mask_sensitive_content",
]
