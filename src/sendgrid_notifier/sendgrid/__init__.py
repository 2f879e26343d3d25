"""SendGrid email transport."""

from __future__ import annotations

from .client import SendGridClient, SendGridConfig, build_payload

__all__ = ["SendGridClient", "SendGridConfig", "build_payload"]
