"""
Provider Adapters - External API Clients

This package contains the ExchangeRate-API client and the code that reads a
rate out of its responses.
"""

from xconvert.adapters.providers.base import RateSource
from xconvert.adapters.providers.exchangerate_api import RateFetcher
from xconvert.adapters.providers.extractor import extract_rate, parse_rate
from xconvert.adapters.providers.schemas import RateResponse

__all__ = [
    "RateSource",
    "RateFetcher",
    "RateResponse",
    "extract_rate",
    "parse_rate",
]
