"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

from storefront_security.kernel.security import DEFAULT_SENSITIVE_FIELDS, mask_email


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]`` and mask e-mails."""

    REDACTED = "[REDACTED]"

    def __init__(
        self,
        sensitive_fields: frozenset[str] | None = None,
        *,
        mask_emails: bool = True,
    ) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS
        self._mask_emails = mask_emails

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            elif isinstance(v, str) and self._mask_emails:
                result[k] = mask_email(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        """structlog processor entry point."""
        return self.redact_deep(event_dict)


__all__ = ["SensitiveFieldsFilter"]
