"""
Provider Tests - Unit Tests for the ExchangeRate-API Client

This module tests RateFetcher: URL construction, the API key check, status
handling and transport failures. requests.get is patched so no real network
call is made.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xconvert.adapters.providers.exchangerate_api (RateFetcher for testing)
- xconvert.domain.errors (expected exceptions)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking exceptions)

from xconvert.adapters.providers.exchangerate_api import RateFetcher  # ExchangeRate-API client to test
from xconvert.domain.errors import ApiRequestError, ConfigurationError  # Expected exceptions

API_KEY = "test-api-key-0000"
BASE_URL = "https://v6.exchangerate-api.com/v6"
BODY = '{"result":"success","base_code":"USD","conversion_rates":{"USD":1,"EUR":0.92}}'


def _response(status_code=200, text=BODY):
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.text = text
    return mock_response


class TestRateFetcherInit:
    def test_init_with_explicit_values(self):
        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL + "/", timeout=5)
        assert fetcher.api_key == API_KEY
        assert fetcher.base_url == BASE_URL
        assert fetcher.timeout == 5

    def test_init_falls_back_to_settings(self):
        with patch('xconvert.adapters.providers.exchangerate_api.settings') as mock_settings:
            mock_settings.api_key = API_KEY
            mock_settings.base_url = "https://example.test/v6"
            mock_settings.http_timeout_seconds = 7
            fetcher = RateFetcher()
        assert fetcher.api_key == API_KEY
        assert fetcher.base_url == "https://example.test/v6"
        assert fetcher.timeout == 7

    def test_build_url(self):
        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL, timeout=5)
        assert fetcher.build_url("USD") == f"{BASE_URL}/{API_KEY}/latest/USD"


class TestRateFetcherFetch:
    @patch('xconvert.adapters.providers.exchangerate_api.requests.get')
    def test_fetch_success(self, mock_get):
        mock_get.return_value = _response()

        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL, timeout=5)
        body = fetcher.fetch("USD")

        assert body == BODY
        mock_get.assert_called_once_with(f"{BASE_URL}/{API_KEY}/latest/USD", timeout=5)

    @patch('xconvert.adapters.providers.exchangerate_api.requests.get')
    def test_fetch_404(self, mock_get):
        mock_get.return_value = _response(status_code=404, text="Not Found")

        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL, timeout=5)
        with pytest.raises(ApiRequestError, match="404") as exc_info:
            fetcher.fetch("USD")
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "Not Found"

    @patch('xconvert.adapters.providers.exchangerate_api.requests.get')
    def test_fetch_server_error(self, mock_get):
        mock_get.return_value = _response(status_code=503, text="")

        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL, timeout=5)
        with pytest.raises(ApiRequestError) as exc_info:
            fetcher.fetch("EUR")
        assert exc_info.value.status_code == 503
        mock_get.assert_called_once()

    @patch('xconvert.adapters.providers.exchangerate_api.requests.get')
    def test_fetch_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL, timeout=5)
        with pytest.raises(ApiRequestError, match="timeout") as exc_info:
            fetcher.fetch("USD")
        assert exc_info.value.status_code is None
        mock_get.assert_called_once()

    @patch('xconvert.adapters.providers.exchangerate_api.requests.get')
    def test_fetch_connection_error_does_not_leak_key(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError(f"cannot reach /{API_KEY}/latest/USD")

        fetcher = RateFetcher(api_key=API_KEY, base_url=BASE_URL, timeout=5)
        with pytest.raises(ApiRequestError) as exc_info:
            fetcher.fetch("USD")
        assert exc_info.value.status_code is None
        assert API_KEY not in str(exc_info.value)

    @pytest.mark.parametrize("api_key", ["", "   ", "YOUR_API_KEY_HERE"])
    @patch('xconvert.adapters.providers.exchangerate_api.requests.get')
    def test_missing_key_fails_before_request(self, mock_get, api_key):
        fetcher = RateFetcher(api_key=api_key, base_url=BASE_URL, timeout=5)
        with pytest.raises(ConfigurationError, match="EXCHANGERATE_API_KEY"):
            fetcher.fetch("USD")
        mock_get.assert_not_called()
