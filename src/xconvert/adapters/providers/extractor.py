# src/xconvert/adapters/providers/extractor.py
"""
Rate Extraction - Reading One Rate out of a Response Body

Two extractors with the same contract, ``(body, target) -> float``, and the
same error taxonomy:

- extract_rate: literal-marker scan over the unparsed text. Kept for
  compatibility with bodies that are only known by their substring shape.
- parse_rate: structured parse into RateResponse. Used by the application.

Files that USE this module:
- xconvert.application.conversion_service (parse_rate is the default extractor)
- tests.test_extractor (unit tests)

Files that this module USES:
- xconvert.adapters.providers.schemas (RateResponse)
- xconvert.domain.errors (error taxonomy)
"""
import logging

from xconvert.adapters.providers.schemas import RateResponse
from xconvert.domain.errors import (
    ApiLogicError,
    MalformedResponseError,
    UnknownCurrencyError,
)

log = logging.getLogger(__name__)

RATES_MARKER = '"conversion_rates":{'
ERROR_MARKER = '"result":"error"'


def extract_rate(body: str, target: str) -> float:
    """
    Locate the rate for ``target`` by substring search.

    The first ``"<TARGET>":`` after the rates marker wins. The value ends at
    the nearer of the next comma or closing brace.

    Args:
        body: Raw response text
        target: Target currency code (e.g. "EUR")

    Returns:
        The rate as float

    Raises:
        ApiLogicError: Marker absent and the body reports an error
        MalformedResponseError: Marker absent, value unterminated or non-numeric
        UnknownCurrencyError: Target code absent after the marker
    """
    rates_start = body.find(RATES_MARKER)
    if rates_start == -1:
        if ERROR_MARKER in body:
            log.error("API reported an error: %s", body)
            raise ApiLogicError(body)
        raise MalformedResponseError("Could not find 'conversion_rates' in API response.")

    target_marker = f'"{target}":'
    target_start = body.find(target_marker, rates_start)
    if target_start == -1:
        raise UnknownCurrencyError(target)

    value_start = target_start + len(target_marker)
    ends = [i for i in (body.find(",", value_start), body.find("}", value_start)) if i != -1]
    if not ends:
        raise MalformedResponseError(f"Could not parse rate value for {target}")

    rate_text = body[value_start:min(ends)].strip()
    try:
        return float(rate_text)
    except ValueError as e:
        raise MalformedResponseError(f"Could not parse rate value for {target}: {rate_text!r}") from e


def parse_rate(body: str, target: str) -> float:
    """
    Read the rate for ``target`` from a structurally parsed body.

    Raises:
        ApiLogicError: The body has ``"result": "error"``
        MalformedResponseError: The body is not the expected JSON shape
        UnknownCurrencyError: Target code absent from ``conversion_rates``
    """
    response = RateResponse.from_body(body)
    log.debug("Parsed %d rates for base %s", len(response.conversion_rates or {}), response.base_code)
    return response.rate_for(target)
