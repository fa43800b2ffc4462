"""Fraud keyword detection for job postings."""

from ...observability.logger import get_logger
from ..models.safety import FraudScan

logger = get_logger(__name__)

# Phrases that indicate a potentially fraudulent job posting, in scan order
FRAUD_KEYWORDS: tuple[str, ...] = (
    "registration fee",
    "deposit required",
    "pay to apply",
    "advance payment",
    "training fee",
    "security deposit",
    "upfront payment",
    "send money",
    "bank details",
    "credit card",
    "ssn",
    "aadhaar card required",
    "guaranteed income",
    "get rich quick",
    "work from home guaranteed",
    "no experience needed high pay",
)

DEFAULT_POSTING_BLOCK_THRESHOLD = 2


class FraudulentPostingError(ValueError):
    """Raised when a job posting trips the fraud gate."""

    def __init__(self, keywords: list[str]):
        self.keywords = keywords
        super().__init__(
            f"Job blocked by fraud filter: suspicious keywords detected ({', '.join(keywords)})"
        )


def detect_fraud_keywords(text: str) -> FraudScan:
    """Scan text for fraud keywords.

    Advisory only: any hit marks the text suspicious. Keywords are reported
    in ``FRAUD_KEYWORDS`` order, not in the order they appear in the text.
    """
    lower = text.lower()
    found = [kw for kw in FRAUD_KEYWORDS if kw in lower]
    return FraudScan(is_suspicious=bool(found), keywords=found)


def screen_job_posting(title: str, description: str) -> FraudScan:
    """Fraud scan over a posting's title and description together."""
    return detect_fraud_keywords(f"{title} {description}")


def ensure_job_postable(
    title: str,
    description: str,
    threshold: int = DEFAULT_POSTING_BLOCK_THRESHOLD,
) -> FraudScan:
    """Write-time gate: reject postings with ``threshold`` or more fraud keywords.

    Args:
        title: Job title
        description: Job description
        threshold: Number of distinct keywords that blocks creation

    Returns:
        The scan, when the posting may be created

    Raises:
        FraudulentPostingError: If the posting is blocked
    """
    scan = screen_job_posting(title, description)
    if len(scan.keywords) >= threshold:
        logger.warning("job_posting_blocked", keywords=scan.keywords, threshold=threshold)
        raise FraudulentPostingError(scan.keywords)
    return scan
