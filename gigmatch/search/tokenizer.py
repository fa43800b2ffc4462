"""Text tokenization shared by the résumé index and its queries."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")

MIN_TOKEN_LENGTH = 2


def tokenize(text: str) -> list[str]:
    """Lowercase, split on anything non-alphanumeric, drop 1-char tokens, dedupe.

    Order follows first occurrence.
    """
    cleaned = _NON_ALNUM.sub(" ", text.lower())
    return list(dict.fromkeys(t for t in cleaned.split() if len(t) >= MIN_TOKEN_LENGTH))


def count_occurrences(tokens: list[str], term: str) -> int:
    """Number of tokens that contain ``term`` or are contained in it."""
    return sum(1 for t in tokens if term in t or t in term)
