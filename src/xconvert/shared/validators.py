"""
Input Validation Utilities - Amounts, Currency Codes and API Keys

This module validates what the user types into the form and what the
operator puts into configuration, so that bad input is rejected before any
network call is made.

Files that USE this module:
- xconvert.config.settings (currency code validators on default fields)
- xconvert.adapters.providers.exchangerate_api (API key check)
- xconvert.adapters.gui.controller (amount parsing on click)

Files that this module USES:
- xconvert.domain.errors (InvalidAmountError)
"""
import re
from decimal import Decimal, InvalidOperation

from xconvert.domain.errors import InvalidAmountError

PLACEHOLDER_API_KEYS = frozenset({"YOUR_API_KEY_HERE", "changeme"})
MAX_AMOUNT = Decimal("1e100")


def validate_currency_code(code: str) -> bool:
    """
    Validate an ISO 4217 style currency code.

    Args:
        code: Code to validate (e.g. "USD")

    Returns:
        True if the code is exactly three uppercase ASCII letters
    """
    if not code:
        return False
    return bool(re.fullmatch(r'[A-Z]{3}', code))


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise (empty, blank, too short or placeholder)
    """
    if not api_key or api_key.isspace():
        return False
    if api_key.strip() in PLACEHOLDER_API_KEYS:
        return False
    return len(api_key.strip()) >= min_length


def parse_amount(value: str) -> Decimal:
    """
    Parse the amount typed by the user.

    Args:
        value: Raw text from the amount field

    Returns:
        The amount as a Decimal

    Raises:
        InvalidAmountError: If the text is empty, non-numeric, not finite,
            zero, negative or at least MAX_AMOUNT
    """
    text = (value or "").strip()
    # Decimal() accepts digit separators like "1_000"; a plain number does not
    if not text or "_" in text:
        raise InvalidAmountError("Invalid amount.")

    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise InvalidAmountError("Invalid amount.") from e

    if not amount.is_finite():
        raise InvalidAmountError("Invalid amount.")
    if amount <= 0:
        raise InvalidAmountError("Amount must be positive.")
    if amount >= MAX_AMOUNT:
        raise InvalidAmountError("Amount is too large.")
    return amount
