"""Security – password sign-up / sign-in issuing session tokens.

Credential handling only: the caller owns the account table and maps the
raised errors to HTTP responses.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol

from storefront_security.kernel.errors import ConflictError, InvalidCredentialsError
from storefront_security.kernel.security import PasswordCredential, PasswordHasher
from storefront_security.observability.logging import get_logger
from storefront_security.security.jwt import SessionTokenIssuer
from storefront_security.security.passwords import Pbkdf2PasswordHasher

__all__ = [
    "AccountCredentials",
    "CredentialStore",
    "InMemoryCredentialStore",
    "SessionAuthenticator",
]

_log = get_logger(__name__)


@dataclass(frozen=True)
class AccountCredentials:
    account_id: int | str
    email: str
    credential: PasswordCredential


class CredentialStore(Protocol):
    """Account credential persistence.

    ``save`` must reject an email that is already stored with
    :class:`ConflictError` (a unique constraint on the email column).
    """

    async def find_by_email(self, email: str) -> AccountCredentials | None: ...
    async def save(self, account: AccountCredentials) -> None: ...


class InMemoryCredentialStore:
    """Fake CredentialStore for unit tests."""

    def __init__(self) -> None:
        self._by_email: dict[str, AccountCredentials] = {}

    async def find_by_email(self, email: str) -> AccountCredentials | None:
        return self._by_email.get(email.lower())

    async def save(self, account: AccountCredentials) -> None:
        key = account.email.lower()
        if key in self._by_email:
            raise ConflictError("User already exists")
        self._by_email[key] = account


class SessionAuthenticator:
    """Registers accounts and signs them in, returning a session token.

    KDF work runs in a worker thread so the event loop is not blocked.
    """

    def __init__(
        self,
        store: CredentialStore,
        issuer: SessionTokenIssuer,
        hasher: PasswordHasher | None = None,
    ) -> None:
        self._store = store
        self._issuer = issuer
        self._hasher = hasher or Pbkdf2PasswordHasher()
        self._decoy: PasswordCredential | None = None

    async def register(self, account_id: int | str, email: str, password: str) -> str:
        # Early exit skips the KDF; the store still enforces uniqueness on save.
        if await self._store.find_by_email(email) is not None:
            raise ConflictError("User already exists")
        credential = await asyncio.to_thread(self._hasher.hash, password)
        await self._store.save(AccountCredentials(account_id, email, credential))
        _log.info("account_registered", account_id=account_id)
        return self._issuer.issue(account_id, email)

    async def sign_in(self, email: str, password: str) -> str:
        account = await self._store.find_by_email(email)
        if account is None:
            # Spend the same KDF time as a real check before failing.
            await asyncio.to_thread(self._hasher.verify, password, await self._decoy_credential())
            _log.info("sign_in_failed")
            raise InvalidCredentialsError()
        valid = await asyncio.to_thread(self._hasher.verify, password, account.credential)
        if not valid:
            _log.info("sign_in_failed")
            raise InvalidCredentialsError()
        _log.info("sign_in_succeeded", account_id=account.account_id)
        return self._issuer.issue(account.account_id, account.email)

    async def _decoy_credential(self) -> PasswordCredential:
        if self._decoy is None:
            self._decoy = await asyncio.to_thread(self._hasher.hash, "decoy-password")
        return self._decoy
