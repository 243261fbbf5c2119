# src/xconvert/adapters/formatting/formatter.py
"""
Result Formatter - Text Shown in the Result Label

This module turns a ConversionResult into the result line and turns each
domain error into a short message for the window.

Files that USE this module:
- xconvert.adapters.gui.controller (result and error display)
- tests.test_formatter (unit tests)

Files that this module USES:
- xconvert.domain.models (ConversionResult)
- xconvert.domain.errors (error taxonomy for messages)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Union

from xconvert.domain.errors import (
    ApiLogicError,
    ApiRequestError,
    ConfigurationError,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    MalformedResponseError,
    UnknownCurrencyError,
)
from xconvert.domain.models import ConversionResult, round_money


def _fmt_money(value: Union[Decimal, float]) -> str:
    """
    Format a value with exactly 2 decimals, rounding half-up.

    Args:
        value: Amount to format

    Returns:
        String like "9.25"
    """
    return str(round_money(Decimal(str(value))))


def format_conversion(result: ConversionResult) -> str:
    """
    Format a conversion as "{amount} {from} = {converted} {to}".

    Args:
        result: Completed conversion

    Returns:
        e.g. "10.00 USD = 9.25 EUR"
    """
    req = result.request
    return (
        f"{_fmt_money(req.amount)} {req.from_currency} = "
        f"{_fmt_money(result.converted_amount)} {req.to_currency}"
    )


def format_rate(from_currency: str, to_currency: str, rate: float, decimals: int = 4) -> str:
    """Format the unit rate, e.g. "1 USD = 0.9200 EUR"."""
    return f"1 {from_currency} = {rate:.{decimals}f} {to_currency}"


def format_error(exc: BaseException) -> str:
    """
    Map an exception to a short message for the result label.

    Args:
        exc: Exception raised by validation or by the conversion

    Returns:
        One-line message; unexpected errors get a generic text
    """
    if isinstance(exc, InvalidAmountError):
        return str(exc) or "Invalid amount."
    if isinstance(exc, InvalidCurrencyCodeError):
        return f"Invalid currency code: {exc.code}"
    if isinstance(exc, UnknownCurrencyError):
        return f"No rate available for {exc.code}."
    if isinstance(exc, ConfigurationError):
        return "API key is not set. See EXCHANGERATE_API_KEY."
    if isinstance(exc, ApiRequestError):
        if exc.status_code is None:
            return "Could not reach the rate service."
        return f"Rate service error (HTTP {exc.status_code})."
    if isinstance(exc, ApiLogicError):
        if exc.error_type:
            return f"Rate service error: {exc.error_type}"
        return "Rate service returned an error."
    if isinstance(exc, MalformedResponseError):
        return "Unexpected response from the rate service."
    return "Error fetching rate. Check the log."
