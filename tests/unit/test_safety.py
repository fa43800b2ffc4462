"""Fraud keyword scan, posting gate and chat message filters."""

import pytest

from gigmatch.core.models.enums import FilterCategory, SuspicionCategory
from gigmatch.core.safety.fraud import (
    FraudulentPostingError,
    detect_fraud_keywords,
    ensure_job_postable,
    screen_job_posting,
)
from gigmatch.core.safety.messages import (
    EMAIL_REASON,
    PAYMENT_REASON,
    PHONE_REASON,
    check_message_suspicion,
    filter_chat_message,
    mask_sensitive_content,
)


def test_fraud_keywords_in_list_order():
    scan = detect_fraud_keywords("Pay a registration fee of ₹500 to apply, guaranteed income!")
    assert scan.is_suspicious
    assert scan.keywords == ["registration fee", "guaranteed income"]


def test_fraud_keyword_order_ignores_text_order():
    scan = detect_fraud_keywords("Guaranteed income after you pay the Registration Fee")
    assert scan.keywords == ["registration fee", "guaranteed income"]


def test_fraud_scan_is_pure():
    text = "Security deposit and bank details needed. Send money today."
    assert detect_fraud_keywords(text) == detect_fraud_keywords(text)


def test_clean_posting_not_suspicious():
    scan = detect_fraud_keywords("Cook needed for a family of four in Guntur")
    assert not scan.is_suspicious
    assert scan.keywords == []


def test_screen_job_posting_checks_title_too():
    scan = screen_job_posting("Get rich quick", "Simple packing work")
    assert scan.keywords == ["get rich quick"]


def test_single_keyword_posting_allowed():
    scan = ensure_job_postable("Delivery rider", "Guaranteed income every week")
    assert scan.keywords == ["guaranteed income"]


def test_two_keywords_block_posting():
    with pytest.raises(FraudulentPostingError) as exc:
        ensure_job_postable("Data entry", "Pay a registration fee. Guaranteed income!")
    assert exc.value.keywords == ["registration fee", "guaranteed income"]
    assert "registration fee" in str(exc.value)


def test_posting_threshold_is_configurable():
    with pytest.raises(FraudulentPostingError):
        ensure_job_postable("Helper", "Training fee applies", threshold=1)


def test_phone_checked_before_email():
    result = check_message_suspicion("call me at 9876543210, email me@x.com")
    assert result.is_suspicious
    assert result.reason == PHONE_REASON
    assert result.category == SuspicionCategory.PHONE


def test_whatsapp_reference_flagged():
    result = check_message_suspicion("Contact me on WhatsApp")
    assert result.is_suspicious
    assert "WhatsApp" in result.reason


def test_email_flagged():
    result = check_message_suspicion("write to ravi.kumar@example.in")
    assert result.reason == EMAIL_REASON


def test_payment_keyword_flagged():
    result = check_message_suspicion("I will pay you on GPay")
    assert result.reason == PAYMENT_REASON
    assert result.category == SuspicionCategory.PAYMENT


def test_plain_message_not_flagged():
    result = check_message_suspicion("I can start on Monday morning")
    assert not result.is_suspicious
    assert result.reason is None


def test_filter_blocks_spaced_digits():
    result = filter_chat_message("my num is 98 76 54 32 10")
    assert result.blocked
    assert result.category == FilterCategory.PHONE


def test_filter_categories():
    assert filter_chat_message("advance payment first please").category == FilterCategory.FRAUD
    assert filter_chat_message("ping me on telegram").category == FilterCategory.SOCIAL
    assert filter_chat_message("mail ravi@example.com").category == FilterCategory.CONTACT
    assert filter_chat_message("follow me on instagram").category == FilterCategory.CONTACT


def test_filter_allows_normal_chat():
    result = filter_chat_message("What time should I arrive tomorrow?")
    assert not result.blocked
    assert result.reason is None


def test_mask_sensitive_content():
    masked = mask_sensitive_content("Reach me at +91 9876543210 or ravi@example.com")
    assert masked == "Reach me at [phone hidden] or [email hidden]"
