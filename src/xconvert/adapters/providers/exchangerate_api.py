# src/xconvert/adapters/providers/exchangerate_api.py
"""
ExchangeRate-API Provider

This module implements the HTTP client for the ExchangeRate-API v6
``latest`` endpoint. It issues exactly one GET per call and returns the body
unparsed. There is no cache and no retry.

Files that USE this module:
- xconvert.app (builds the RateFetcher from settings)
- xconvert.application.conversion_service (calls fetch)
- tests.test_providers (unit tests)

Files that this module USES:
- xconvert.adapters.providers.base (RateSource interface)
- xconvert.config (settings for API key, base URL and timeout)
- xconvert.shared.validators (API key check)
"""
import logging
import requests
from typing import Optional

from xconvert.adapters.providers.base import RateSource
from xconvert.config import settings
from xconvert.domain.errors import ApiRequestError, ConfigurationError
from xconvert.shared.validators import validate_api_key

log = logging.getLogger(__name__)


class RateFetcher(RateSource):
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the ExchangeRate-API client.

        Args:
            api_key: API key (defaults to settings.api_key)
            base_url: API root, e.g. https://v6.exchangerate-api.com/v6
                (defaults to settings.base_url)
            timeout: HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.api_key = (settings.api_key if api_key is None else api_key).strip()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds

    def build_url(self, base_currency: str) -> str:
        return f"{self.base_url}/{self.api_key}/latest/{base_currency}"

    def _redacted_url(self, base_currency: str) -> str:
        return f"{self.base_url}/***/latest/{base_currency}"

    def fetch(self, base_currency: str) -> str:
        """
        Fetch the latest rates for ``base_currency``.

        Args:
            base_currency: 3-letter code the rates are relative to

        Returns:
            The response body as text

        Raises:
            ConfigurationError: If the API key is missing or a placeholder
            ApiRequestError: On a non-2xx status or a transport failure
        """
        if not validate_api_key(self.api_key):
            raise ConfigurationError(
                "ExchangeRate-API key is not set. Put EXCHANGERATE_API_KEY in the "
                "environment or .env (free key at https://www.exchangerate-api.com)."
            )

        url = self.build_url(base_currency)
        try:
            log.info("Fetching latest rates: %s", self._redacted_url(base_currency))
            resp = requests.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("ExchangeRate-API timeout after %d seconds", self.timeout)
            raise ApiRequestError(f"ExchangeRate-API timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            # The exception text may contain the URL, and so the key
            log.warning("ExchangeRate-API request failed (network/connection error): %s", type(e).__name__)
            raise ApiRequestError("ExchangeRate-API request failed (network/connection error)") from e

        if not 200 <= resp.status_code < 300:
            log.error("ExchangeRate-API returned HTTP %d", resp.status_code)
            raise ApiRequestError(
                f"API Request Failed. Response Code: {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )

        log.debug("ExchangeRate-API returned %d bytes", len(resp.text))
        return resp.text
