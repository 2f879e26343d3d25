"""Tests for secret masking and the exception hierarchy."""

from __future__ import annotations

import pytest

from sendgrid_notifier.exceptions import (
    MediaResolutionError,
    NotificationDeliveryError,
    NotifierError,
    SendGridDeliveryError,
    UnknownSettingError,
)
from sendgrid_notifier.sanitization import REDACTED, MetadataSanitizer


class TestMetadataSanitizer:
    def test_masks_api_key(self) -> None:
        sanitizer = MetadataSanitizer()
        assert sanitizer.sanitize({"apikey": "SG.x", "to": "a@x.com"}) == {
            "apikey": REDACTED,
            "to": "a@x.com",
        }

    def test_case_insensitive_and_nested(self) -> None:
        sanitizer = MetadataSanitizer()
        assert sanitizer.sanitize({"outer": {"Authorization": "Bearer x"}}) == {
            "outer": {"Authorization": REDACTED}
        }

    def test_empty_secret_not_masked(self) -> None:
        assert MetadataSanitizer().mask("apikey", "") == ""
        assert MetadataSanitizer().mask("apikey", None) is None

    def test_extra_fields(self) -> None:
        sanitizer = MetadataSanitizer(redact_fields={"to"})
        assert sanitizer.mask("to", "a@x.com") == REDACTED
        assert sanitizer.is_sensitive("apikey")


class TestExceptions:
    @pytest.mark.parametrize(
        "error",
        [
            UnknownSettingError("cc"),
            MediaResolutionError("http://x", "HTTP 404"),
            NotificationDeliveryError("a@x.com", "down"),
            SendGridDeliveryError(500, "oops", "a@x.com"),
        ],
    )
    def test_all_derive_from_root(self, error: Exception) -> None:
        assert isinstance(error, NotifierError)

    def test_unknown_setting_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise UnknownSettingError("cc")
        assert str(UnknownSettingError("cc")) == "Unknown setting 'cc'"

    def test_media_error_without_source(self) -> None:
        assert "<object>" in str(MediaResolutionError(None, "bad"))

    def test_sendgrid_error_message(self) -> None:
        err = SendGridDeliveryError(403, "forbidden", "a@x.com")
        assert str(err) == "Failed to deliver email to a@x.com: SendGrid API error (403): forbidden"
