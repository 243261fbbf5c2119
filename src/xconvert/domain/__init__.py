"""
Domain Layer - Pure Business Objects

This package contains the conversion models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from xconvert.domain.models import ConversionRequest, ConversionResult
from xconvert.domain.errors import (
    ApiLogicError,
    ApiRequestError,
    ConfigurationError,
    DomainError,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    MalformedResponseError,
    UnknownCurrencyError,
)

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "DomainError",
    "ConfigurationError",
    "ApiRequestError",
    "ApiLogicError",
    "MalformedResponseError",
    "UnknownCurrencyError",
    "InvalidAmountError",
    "InvalidCurrencyCodeError",
]
