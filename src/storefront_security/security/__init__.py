"""Security — field encryption, password credentials, session tokens."""
from storefront_security.security.cookies import (
    SESSION_COOKIE_NAME,
    session_cookie_options,
    sign_cookie_value,
    unsign_cookie_value,
)
from storefront_security.security.encryption import (
    FieldCipher,
    FieldKeyRotation,
    decrypt_field,
    encrypt_field,
)
from storefront_security.security.jwt import (
    SessionClaims,
    SessionTokenIssuer,
    SessionTokenVerifier,
    sign_token,
    verify_token,
)
from storefront_security.security.passwords import (
    PasswordCredential,
    Pbkdf2PasswordHasher,
    hash_password,
    verify_password,
)
from storefront_security.security.sessions import (
    AccountCredentials,
    CredentialStore,
    InMemoryCredentialStore,
    SessionAuthenticator,
)
from storefront_security.security.tokens import CachedToken, ServiceTokenCache
from storefront_security.security.webhooks import (
    WebhookSignatureVerifier,
    is_trusted_source,
    validate_webhook_payload,
    webhook_event_type,
)

__all__ = [
    "AccountCredentials",
    "CachedToken",
    "CredentialStore",
    "FieldCipher",
    "FieldKeyRotation",
    "InMemoryCredentialStore",
    "PasswordCredential",
    "Pbkdf2PasswordHasher",
    "SESSION_COOKIE_NAME",
    "ServiceTokenCache",
    "SessionAuthenticator",
    "SessionClaims",
    "SessionTokenIssuer",
    "SessionTokenVerifier",
    "WebhookSignatureVerifier",
    "decrypt_field",
    "encrypt_field",
    "hash_password",
    "is_trusted_source",
    "session_cookie_options",
    "sign_cookie_value",
    "sign_token",
    "unsign_cookie_value",
    "validate_webhook_payload",
    "verify_password",
    "verify_token",
    "webhook_event_type",
]
