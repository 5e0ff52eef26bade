"""Domain errors — malformed or invalid input handed to the core."""

from __future__ import annotations

from typing import Any

from storefront_security.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an input or invariant of the core is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level failures, each a dict with ``field``
    and ``reason`` keys.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class FormatError(DomainError):
    """A serialized token does not have the expected delimited layout."""

    default_code = "malformed_input"

    def __init__(
        self,
        message: str = "Malformed input",
        *,
        kind: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.kind = kind


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "FormatError",
    "ValidationError",
]
