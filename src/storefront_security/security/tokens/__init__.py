"""Security – cached access tokens for external services."""
from storefront_security.security.tokens.cache import CachedToken, ServiceTokenCache, TokenFetcher

__all__ = ["CachedToken", "ServiceTokenCache", "TokenFetcher"]
