"""Config settings – SecuritySettings for the credential and session core."""
from __future__ import annotations

import dataclasses
from datetime import timedelta
from typing import ClassVar

from storefront_security.config.settings.base import Settings
from storefront_security.config.validation import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclasses.dataclass(frozen=True)
class SecuritySettings(Settings):
    """Secrets and tunables supplied by the host process.

    Algorithm parameters (KDF iterations, key length, digest) are constants in
    the crypto modules and deliberately absent here.
    """

    _prefix: ClassVar[str] = "STOREFRONT"

    encryption_passphrase: str
    jwt_secret: str
    session_ttl_seconds: int = 60 * 60 * 24
    webhook_secret: str = ""
    trusted_tenants: list[str] = dataclasses.field(default_factory=list)
    token_refresh_margin_seconds: float = 5.0

    def _validate(self) -> None:
        if not self.encryption_passphrase:
            raise MissingRequiredSettingError(f"{self._prefix}_ENCRYPTION_PASSPHRASE")
        if not self.jwt_secret:
            raise MissingRequiredSettingError(f"{self._prefix}_JWT_SECRET")
        if self.session_ttl_seconds <= 0:
            raise InvalidSettingValueError("session_ttl_seconds", "must be positive")
        if self.token_refresh_margin_seconds < 0:
            raise InvalidSettingValueError("token_refresh_margin_seconds", "must not be negative")

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(seconds=self.session_ttl_seconds)

    def __repr__(self) -> str:
        return (
            f"SecuritySettings(session_ttl_seconds={self.session_ttl_seconds}, "
            f"webhook_secret_set={bool(self.webhook_secret)}, "
            f"trusted_tenants={self.trusted_tenants!r})"
        )


__all__ = ["SecuritySettings"]
