# src/xconvert/application/conversion_service.py
"""
Conversion Service - Business Logic for Currency Conversion

This module contains the conversion use case: fetch the rates for the base
currency, read the target rate, apply it to the amount and round for display.

Files that USE this module:
- xconvert.app (composition root builds ConversionService)
- xconvert.adapters.gui.controller (runs convert in the background)
- tests.test_conversion_service (unit tests)

Files that this module USES:
- xconvert.adapters.providers.base (RateSource protocol)
- xconvert.adapters.providers.extractor (parse_rate default extractor)
- xconvert.domain.models (ConversionRequest, ConversionResult)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from decimal import Decimal, DecimalException, InvalidOperation, localcontext  # Exact decimal arithmetic
from typing import Callable, Union

from xconvert.adapters.providers.base import RateSource
from xconvert.adapters.providers.extractor import parse_rate
from xconvert.domain.errors import InvalidAmountError
from xconvert.domain.models import ConversionRequest, ConversionResult, round_money

log = logging.getLogger(__name__)

Number = Union[Decimal, float, int, str]
RateExtractor = Callable[[str, str], float]


def _to_decimal(value: Number, name: str) -> Decimal:
    """
    Convert a number to Decimal through its decimal text.

    Going through str() keeps 0.925 as 0.925 instead of the nearest binary
    double, so half-up rounding sees the digits the user sees.
    """
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidAmountError(f"{name} is not a number: {value!r}") from e
    if not result.is_finite():
        raise InvalidAmountError(f"{name} is not finite: {value!r}")
    return result


def convert(amount: Number, rate: Number) -> Decimal:
    """
    Apply a conversion rate and round half-up to 2 decimal places.

    Args:
        amount: Amount in the base currency
        rate: Units of target currency per unit of base currency

    Returns:
        Rounded converted amount (e.g. convert(10, 0.925) == Decimal("9.25"))

    Raises:
        InvalidAmountError: If either input is non-numeric or not finite, or
            the product leaves the decimal exponent range
    """
    a = _to_decimal(amount, "Amount")
    b = _to_decimal(rate, "Rate")
    try:
        with localcontext() as ctx:
            # Exact product: its coefficient never has more digits than both operands together
            ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(b.as_tuple().digits))
            product = a * b
    except DecimalException as e:
        raise InvalidAmountError("Amount is too large.") from e
    return round_money(product)


class ConversionService:
    """
    Runs one conversion end to end.

    The extractor defaults to the structured parser; any callable with the
    ``(body, target) -> float`` contract can be passed instead.
    """
    def __init__(self, source: RateSource, extractor: RateExtractor = parse_rate):
        self.source = source
        self.extractor = extractor

    def rate(self, from_currency: str, to_currency: str) -> float:
        """
        Get the current rate from ``from_currency`` to ``to_currency``.

        Raises:
            DomainError: Any failure from fetching or extraction
        """
        body = self.source.fetch(from_currency)
        return self.extractor(body, to_currency)

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """
        Convert ``request.amount`` from the base to the target currency.

        Returns:
            ConversionResult with the rate and the rounded amount
        """
        rate = self.rate(request.from_currency, request.to_currency)
        converted = convert(request.amount, rate)
        log.info(
            "Converted %s %s -> %s %s (rate=%s)",
            request.amount, request.from_currency, converted, request.to_currency, rate,
        )
        return ConversionResult(request=request, rate=rate, converted_amount=converted)
