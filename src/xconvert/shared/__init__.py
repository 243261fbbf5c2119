"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Currency catalogue
- Logging configuration
"""

from xconvert.shared.validators import (
    parse_amount,
    validate_api_key,
    validate_currency_code,
)
from xconvert.shared.currencies import (
    SUPPORTED_CURRENCIES,
    available_currencies,
)

__all__ = [
    "parse_amount",
    "validate_api_key",
    "validate_currency_code",
    "SUPPORTED_CURRENCIES",
    "available_currencies",
]
