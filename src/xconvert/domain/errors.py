# src/xconvert/domain/errors.py
"""
Domain Errors - Conversion Failure Taxonomy

This module defines the typed failures a conversion can end with. None of
them is retried; the GUI turns each one into a short message.

Files that USE this module:
- xconvert.domain.models (request invariants)
- xconvert.shared.validators (amount parsing)
- xconvert.adapters.providers.* (fetching and extraction)
- xconvert.application.conversion_service (calculator)
- xconvert.adapters.formatting.formatter (user-facing messages)

Files that this module USES:
- None (pure domain layer)
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ConfigurationError(DomainError):
    """Raised when the API key is missing or still the placeholder."""
    pass


class ApiRequestError(DomainError):
    """
    Raised when the HTTP request fails.

    Attributes:
        status_code: HTTP status returned, or None for transport failures
        body: Response body text, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ApiLogicError(DomainError):
    """
    Raised when the API answers but reports an error inside the body.

    Attributes:
        body: Full response body for diagnosis
        error_type: Value of the "error-type" field when it could be read
    """

    def __init__(self, body: str, error_type: Optional[str] = None):
        super().__init__(f"API returned an error: {body}")
        self.body = body
        self.error_type = error_type


class MalformedResponseError(DomainError):
    """Raised when the response body does not have the expected shape."""
    pass


class UnknownCurrencyError(DomainError):
    """Raised when the target currency is absent from the returned rates."""

    def __init__(self, code: str):
        super().__init__(f"Currency code '{code}' not found in API response.")
        self.code = code


class InvalidAmountError(DomainError):
    """Raised when an amount is non-positive, non-numeric or not finite."""
    pass


class InvalidCurrencyCodeError(DomainError):
    """Raised when a currency code is not three uppercase letters."""

    def __init__(self, code: str):
        super().__init__(f"Invalid currency code: {code!r}")
        self.code = code
