"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   ├── FormatError
    │   └── ConflictError
    └── ApplicationError         (application.py)
        ├── AuthenticationError
        │   └── SessionExpiredError
        ├── InvalidCredentialsError
        └── ConfigurationError   (config/validation/errors.py)
"""

from storefront_security.kernel.errors.application import (
    ApplicationError,
    AuthenticationError,
    InvalidCredentialsError,
    SessionExpiredError,
)
from storefront_security.kernel.errors.base import BaseError
from storefront_security.kernel.errors.domain import (
    ConflictError,
    DomainError,
    FormatError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "FormatError",
    "InvalidCredentialsError",
    "SessionExpiredError",
    "ValidationError",
]
