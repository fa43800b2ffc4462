"""Chat message safety: advisory suspicion scan, blocking filter and masking."""

import re

from ..models.enums import FilterCategory, SuspicionCategory
from ..models.safety import ChatFilterResult, MessageSuspicion

# Indian mobile number, optionally prefixed with +91 / 91
PHONE_REGEX = re.compile(r"(\+91|91)?[\s-]?[6-9]\d{9}")
EMAIL_REGEX = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

PAYMENT_KEYWORDS: tuple[str, ...] = (
    "paytm",
    "gpay",
    "phonepe",
    "bank transfer",
    "send money",
    "payment",
)

PHONE_REASON = "Contains phone number - please use in-app chat only"
WHATSAPP_REASON = "Contains WhatsApp reference - please use in-app chat only"
EMAIL_REASON = "Contains email address - please use in-app chat only"
PAYMENT_REASON = (
    "Contains off-platform payment reference - all payments must go through platform escrow"
)


def check_message_suspicion(message: str) -> MessageSuspicion:
    """Flag the first suspicious pattern in a chat message.

    Checks run in a fixed order and stop at the first hit: phone number,
    WhatsApp, email address, payment keywords.
    """
    if PHONE_REGEX.search(message):
        return MessageSuspicion(is_suspicious=True, reason=PHONE_REASON, category=SuspicionCategory.PHONE)

    lower = message.lower()
    if "whatsapp" in lower or "wa.me" in lower:
        return MessageSuspicion(
            is_suspicious=True, reason=WHATSAPP_REASON, category=SuspicionCategory.WHATSAPP
        )

    if EMAIL_REGEX.search(message):
        return MessageSuspicion(is_suspicious=True, reason=EMAIL_REASON, category=SuspicionCategory.EMAIL)

    if any(kw in lower for kw in PAYMENT_KEYWORDS):
        return MessageSuspicion(
            is_suspicious=True, reason=PAYMENT_REASON, category=SuspicionCategory.PAYMENT
        )

    return MessageSuspicion(is_suspicious=False)


# =============================================================================
# Blocking filter
# =============================================================================

FILTER_PHONE_PATTERNS: list[re.Pattern] = [
    re.compile(r"\+91\s*[6-9]\d{9}"),
    re.compile(r"\b0?[6-9]\d{9}\b"),
    re.compile(r"\b91[6-9]\d{9}\b"),
    # Ten digits with up to two separators between each
    re.compile(r"\d(?:[\s\-.]{0,2}\d){9}"),
]

FILTER_KEYWORD_PATTERNS: list[re.Pattern] = [
    re.compile(p, re.IGNORECASE)
    for p in (
        # Off-platform apps
        r"\bwhatsapp\b",
        r"\bwhatsap\b",
        r"\bwa\.me\b",
        r"\bwa\s*me\b",
        r"\btelegram\b",
        r"\bsignal\b",
        r"\bwechat\b",
        # Contact requests, including Hindi variants
        r"\bcall\s*me\b",
        r"\bcontact\s*me\b",
        r"\bmy\s*number\b",
        r"\bphone\s*number\b",
        r"\bmobile\s*number\b",
        r"\bgive\s*(me\s*)?(your|ur)\s*(no|num|number)",
        r"\b(call|contact)\s*(on|at|thru|through)",
        r"\bcall\s*(kar|karo|karna|pls|plz)\b",
        r"\bnumber\s*(do|dena|share)\b",
        # Fraud
        r"registration\s*fee",
        r"deposit\s*required",
        r"advance\s*payment",
        r"bank\s*transfer",
        r"gpay\s*first",
        r"phonepay\s*first",
        r"paytm\s*first",
        r"send\s*money",
        # Email
        r"\b[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}\b",
        # Social handles
        r"\binstagram\b",
        r"\bfacebook\b",
        r"\blinkedin\b",
        r"\btwitter\b",
        r"\binsta\b",
    )
]

_FRAUD = re.compile(r"registration\s*fee|deposit\s*required|advance\s*payment|send\s*money", re.IGNORECASE)
_SOCIAL = re.compile(r"whatsapp|wa\.me|telegram|signal|wechat", re.IGNORECASE)
_EMAIL = re.compile(r"\b[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}\b", re.IGNORECASE)


def filter_chat_message(message: str) -> ChatFilterResult:
    """Decide whether a chat message must be blocked before delivery.

    Stricter than ``check_message_suspicion``: spaced-out digits, social
    handles and contact requests are blocked too.
    """
    if any(p.search(message) for p in FILTER_PHONE_PATTERNS):
        return ChatFilterResult(
            blocked=True,
            reason="Phone numbers cannot be shared in chat. Use the in-app chat to communicate safely.",
            category=FilterCategory.PHONE,
        )

    if not any(p.search(message) for p in FILTER_KEYWORD_PATTERNS):
        return ChatFilterResult(blocked=False)

    if _FRAUD.search(message):
        return ChatFilterResult(
            blocked=True,
            reason=(
                "This message was blocked because it contains potential fraud keywords. "
                "If you need help, contact platform support."
            ),
            category=FilterCategory.FRAUD,
        )

    if _SOCIAL.search(message):
        return ChatFilterResult(
            blocked=True,
            reason=(
                "Please keep all conversations within the app for your safety. "
                "External contact sharing is not allowed."
            ),
            category=FilterCategory.SOCIAL,
        )

    if _EMAIL.search(message):
        return ChatFilterResult(
            blocked=True,
            reason="Email addresses cannot be shared in chat. Use the in-app chat to stay safe.",
            category=FilterCategory.CONTACT,
        )

    return ChatFilterResult(
        blocked=True,
        reason=(
            "This message appears to share personal contact information. "
            "All communication must stay within the app."
        ),
        category=FilterCategory.CONTACT,
    )


_MASK_PHONE = [
    re.compile(r"\+91\s*[6-9]\d{9}"),
    re.compile(r"\b0?[6-9]\d{9}\b"),
    re.compile(r"\b91[6-9]\d{9}\b"),
]


def mask_sensitive_content(message: str) -> str:
    """Hide phone numbers and email addresses that slipped past the filter."""
    masked = message
    for pattern in _MASK_PHONE:
        masked = pattern.sub("[phone hidden]", masked)
    return _EMAIL.sub("[email hidden]", masked)
