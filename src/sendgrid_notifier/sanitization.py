"""Secret masking for log lines and settings exposed over HTTP."""

from __future__ import annotations

from typing import Any

REDACTED = "***"

_DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "apikey",
        "api_key",
        "password",
        "secret",
        "token",
        "authorization",
        # Note: to/from addresses are NOT in this list, they identify the delivery
    }
)


class MetadataSanitizer:
    """
    Redacts credentials from settings and metadata before they are logged
    or returned to a host UI.
    """

    def __init__(
        self,
        *,
        redact_fields: set[str] | None = None,
        sensitive_fields: set[str] | None = None,
    ) -> None:
        sensitive = set(sensitive_fields or _DEFAULT_SENSITIVE_FIELDS)
        sensitive.update(redact_fields or set())
        self._sensitive_fields = {f.lower() for f in sensitive}

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._sensitive_fields

    def mask(self, key: str, value: Any) -> Any:
        """Return ``***`` for a non-empty sensitive value, else the value."""
        if value and self.is_sensitive(key):
            return REDACTED
        return value

    def sanitize(self, metadata: dict[str, Any]) -> dict[str, Any]:
        """Return a sanitized copy of metadata safe for logging."""
        result: dict[str, Any] = {}
        for key, value in metadata.items():
            if isinstance(value, dict):
                result[str(key)] = self.sanitize(value)
            else:
                result[str(key)] = self.mask(str(key), value)
        return result


# Default instance for convenience
default_sanitizer = MetadataSanitizer()
