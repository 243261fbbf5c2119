# src/xconvert/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Sources

This module defines the abstract base class for rate sources. A source
returns the raw response body for a base currency; extraction is separate.

Files that USE this module:
- xconvert.adapters.providers.exchangerate_api (RateFetcher implements RateSource)
- xconvert.application.conversion_service (depends on the RateSource contract)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod

class RateSource(ABC):
    @abstractmethod
    def fetch(self, base_currency: str) -> str:
        """Return the raw response body with rates relative to base_currency."""
        raise NotImplementedError
