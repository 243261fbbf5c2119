# src/xconvert/domain/models.py
"""
Domain Models - Conversion Request and Result

Both objects live for a single conversion only and are never persisted.

Files that USE this module:
- xconvert.application.conversion_service (builds ConversionResult)
- xconvert.adapters.formatting.formatter (renders ConversionResult)
- xconvert.adapters.gui.controller (builds ConversionRequest from the form)
- tests.* (test data)

Files that this module USES:
- xconvert.domain.errors (invariant violations)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import re  # Currency code pattern
from dataclasses import dataclass  # Decorator for creating data classes
from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation, localcontext  # Exact decimal amounts

from xconvert.domain.errors import InvalidAmountError, InvalidCurrencyCodeError

CURRENCY_CODE_RE = re.compile(r"^[A-Z]{3}$")
TWO_PLACES = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """
    Round half-up to exactly 2 decimal places, whatever the magnitude.

    The working precision is widened to fit every integer digit, so large
    amounts are not rejected by the default 28-digit context.

    Raises:
        InvalidAmountError: If the value is not finite or exceeds the
            decimal exponent range
    """
    if not value.is_finite():
        raise InvalidAmountError("Invalid amount.")
    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + 4)
            return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except DecimalException as e:
        raise InvalidAmountError("Amount is too large.") from e


@dataclass(frozen=True)
class ConversionRequest:
    """
    One user-triggered conversion.

    Attributes:
        from_currency: Base currency code (e.g. "USD")
        to_currency: Target currency code (e.g. "EUR")
        amount: Positive amount in the base currency
    """
    from_currency: str
    to_currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        for code in (self.from_currency, self.to_currency):
            if not isinstance(code, str) or not CURRENCY_CODE_RE.fullmatch(code):
                raise InvalidCurrencyCodeError(code)
        try:
            amount = Decimal(str(self.amount))
        except InvalidOperation as e:
            raise InvalidAmountError("Invalid amount.") from e
        if not amount.is_finite():
            raise InvalidAmountError("Invalid amount.")
        if amount <= 0:
            raise InvalidAmountError("Amount must be positive.")
        object.__setattr__(self, "amount", amount)


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion.

    Attributes:
        request: The request that produced this result
        rate: Units of to_currency per one unit of from_currency
        converted_amount: amount * rate rounded half-up to 2 places
    """
    request: ConversionRequest
    rate: float
    converted_amount: Decimal
