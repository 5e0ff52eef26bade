"""Security – inbound webhook signature verification (HMAC-SHA256, hex digest)."""
from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterable
from typing import Any

from storefront_security.observability.logging import get_logger

__all__ = [
    "WebhookSignatureVerifier",
    "is_trusted_source",
    "validate_webhook_payload",
    "webhook_event_type",
]

_log = get_logger(__name__)


class WebhookSignatureVerifier:
    """Verifies the hex HMAC-SHA256 signature sent alongside a webhook body.

    Without a configured secret every signature is rejected.
    """

    def __init__(self, secret: str | None) -> None:
        self._secret = secret or ""

    def __repr__(self) -> str:
        return f"WebhookSignatureVerifier(configured={bool(self._secret)})"

    def sign(self, payload: bytes | str) -> str:
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return hmac.new(self._secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()

    def verify(self, payload: bytes | str, signature: str | None) -> bool:
        if not self._secret:
            _log.warning("webhook_secret_missing")
            return False
        if not signature:
            return False
        expected = self.sign(payload)
        return hmac.compare_digest(expected.encode("ascii"), signature.strip().lower().encode("utf-8"))


def validate_webhook_payload(payload: Any) -> bool:
    """A webhook body needs ``hook.hookId``, ``hook.event`` and ``payload``."""
    if not isinstance(payload, dict):
        return False
    hook = payload.get("hook")
    if not isinstance(hook, dict) or not hook.get("hookId") or not hook.get("event"):
        return False
    return bool(payload.get("payload"))


def webhook_event_type(payload: Any) -> str | None:
    if not isinstance(payload, dict) or not isinstance(payload.get("hook"), dict):
        return None
    return payload["hook"].get("event") or None


def is_trusted_source(payload: Any, trusted_tenants: Iterable[str]) -> bool:
    """An empty tenant list trusts everyone."""
    tenants = [t for t in trusted_tenants if t]
    if not tenants:
        return True
    hook = payload.get("hook") if isinstance(payload, dict) else None
    tenant = hook.get("tenant") if isinstance(hook, dict) else None
    return tenant in tenants
