"""Approximate years of experience from free-text durations.

Heuristic only: "Jan 2020 - Dec 2022", "3 years 6 months" and "2021 - Present"
style durations are understood, anything else counts as zero.
"""

import math
import re
from datetime import datetime, timezone

from ..core.models.resume import ResumeExperience

_YEAR = re.compile(r"\b(?:19|20)\d{2}\b")
_YEARS = re.compile(r"(\d+)\s*(?:year|yr)", re.IGNORECASE)
_MONTHS = re.compile(r"(\d+)\s*(?:month|mo)", re.IGNORECASE)
_ONGOING = re.compile(r"present|current|ongoing", re.IGNORECASE)


def duration_months(duration: str, current_year: int) -> int:
    """Months represented by a single duration string."""
    text = duration.lower()
    years = [int(y) for y in _YEAR.findall(text)]

    if len(years) >= 2:
        return abs(years[-1] - years[0]) * 12

    months = 0
    years_match = _YEARS.search(text)
    months_match = _MONTHS.search(text)
    if years_match:
        months += int(years_match.group(1)) * 12
    if months_match:
        months += int(months_match.group(1))
    if years_match or months_match:
        return months

    if _ONGOING.search(text) and len(years) == 1:
        return max(current_year - years[0], 0) * 12
    return 0


def estimate_total_experience_years(
    experience: list[ResumeExperience], current_year: int | None = None
) -> int:
    """Estimate total years across experience entries, rounded to whole years.

    Args:
        experience: Parsed experience entries
        current_year: Year used for open-ended roles (defaults to this year)
    """
    if current_year is None:
        current_year = datetime.now(timezone.utc).year

    total_months = sum(duration_months(entry.duration, current_year) for entry in experience)
    # Half-up rounding
    return math.floor(total_months / 12 + 0.5)
