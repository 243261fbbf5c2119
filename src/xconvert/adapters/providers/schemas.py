"""
Response Schemas - Typed Shape of the ExchangeRate-API ``latest`` Response

Files that USE this module:
- xconvert.adapters.providers.extractor (parse_rate validates into RateResponse)
- tests.test_extractor (unit tests)

Files that this module USES:
- pydantic (model validation)
- xconvert.domain.errors (error taxonomy)
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError

from xconvert.domain.errors import (
    ApiLogicError,
    MalformedResponseError,
    UnknownCurrencyError,
)


class RateResponse(BaseModel):
    """
    Rates for one base currency at one point in time.

    Only ``conversion_rates`` is required for a successful response; error
    responses carry ``result == "error"`` and an ``error-type`` instead.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    result: Optional[str] = None
    base_code: Optional[str] = None
    time_last_update_utc: Optional[str] = None
    error_type: Optional[str] = Field(default=None, alias="error-type")
    # JSON numbers only; a quoted "0.92" is malformed, as in the marker scan
    conversion_rates: Optional[Dict[str, Union[StrictInt, StrictFloat]]] = None

    raw_body: str = Field(default="", exclude=True)

    @classmethod
    def from_body(cls, body: str) -> "RateResponse":
        """
        Validate a response body.

        Raises:
            ApiLogicError: If the API reported an error in the body
            MalformedResponseError: If the body is not JSON of the expected shape
        """
        try:
            response = cls.model_validate_json(body)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected API response: {e.error_count()} validation error(s)") from e
        response.raw_body = body

        if response.result == "error":
            raise ApiLogicError(body, error_type=response.error_type)
        if response.conversion_rates is None:
            raise MalformedResponseError("Could not find 'conversion_rates' in API response.")
        return response

    def rate_for(self, code: str) -> float:
        rates = self.conversion_rates or {}
        if code not in rates:
            raise UnknownCurrencyError(code)
        return float(rates[code])
