"""Unit tests for infrastructure.logging.formatters module.

Tests cover:
- mask_sensitive_data processor
- truncate_large_values processor
- SENSITIVE_PATTERNS constant
"""

import pytest
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)


@pytest.mark.unit
class TestMaskSensitiveData:
    def test_masks_client_secret_and_tokens(self):
        processor = mask_sensitive_data()
        event_dict = {
            "event": "graph_session_created",
            "client_secret": "s3cr3t",
            "access_token": "eyJ...",
            "Authorization": "Bearer eyJ...",
            "group_id": "g1",
        }

        result = processor(None, "info", event_dict)

        assert result["client_secret"] == "***REDACTED***"
        assert result["access_token"] == "***REDACTED***"
        assert result["Authorization"] == "***REDACTED***"
        assert result["group_id"] == "g1"
        assert result["event"] == "graph_session_created"

    def test_none_values_not_masked(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"page_token": None})

        assert result["page_token"] is None

    def test_custom_mask_and_patterns(self):
        processor = mask_sensitive_data(
            mask_value="[hidden]", additional_patterns=frozenset({"mail"})
        )

        result = processor(None, "info", {"user_mail": "a@test.com"})

        assert result["user_mail"] == "[hidden]"

    def test_patterns_cover_credentials(self):
        assert {"secret", "token", "credential", "private_key"} <= SENSITIVE_PATTERNS


@pytest.mark.unit
class TestTruncateLargeValues:
    def test_truncates_long_strings(self):
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"body": "x" * 25})

        assert result["body"].startswith("x" * 10)
        assert "25 chars total" in result["body"]

    def test_short_and_non_string_values_untouched(self):
        processor = truncate_large_values(max_length=10)

        result = processor(None, "info", {"short": "abc", "count": 12345678901})

        assert result == {"short": "abc", "count": 12345678901}
