"""Observability – structured logging helpers."""
from storefront_security.observability.logging.filters import SensitiveFieldsFilter
from storefront_security.observability.logging.factory import JsonLoggerFactory
from storefront_security.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
