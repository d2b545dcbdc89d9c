"""Tests for URL validation and the page fetcher."""

from unittest.mock import MagicMock, patch

import pytest
import requests

import scraper
from errors import FetchError, ValidationError
from scraper import fetch_page, validate_url


def _response(status_code=200, text="<html><body>ok</body></html>"):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.encoding = "utf-8"
    response.apparent_encoding = "utf-8"
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


class TestValidateUrl:
    def test_strips_and_accepts_absolute_url(self):
        assert validate_url("  https://example.com/post?id=1 ") == "https://example.com/post?id=1"

    def test_missing_url(self):
        with pytest.raises(ValidationError, match="URL is required"):
            validate_url(None)

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "/relative/path",
            "mailto:someone@example.com",
            "http://",
            "http://exa mple.com/",
            "https://example.com:abc/",
            "http://example.com:99999/",
        ],
    )
    def test_malformed_url(self, url):
        with pytest.raises(ValidationError, match="Invalid URL format"):
            validate_url(url)


class TestFetchPage:
    def test_success_returns_body(self):
        with patch("scraper.requests.get", return_value=_response()) as get:
            page = fetch_page("https://example.com")

        assert page == {
            "url": "https://example.com",
            "html": "<html><body>ok</body></html>",
            "status_code": 200,
        }
        _, kwargs = get.call_args
        assert kwargs["timeout"] == scraper.FETCH_TIMEOUT_SECONDS
        assert "Mozilla/5.0" in kwargs["headers"]["User-Agent"]

    def test_body_decoded_with_detected_encoding(self):
        """A text/html response without a charset defaults to ISO-8859-1 in requests."""
        response = _response()
        response.encoding = "ISO-8859-1"
        with patch("scraper.requests.get", return_value=response):
            fetch_page("https://example.com")

        assert response.encoding == "utf-8"

    def test_timeout_raises_fetch_error(self):
        with patch("scraper.requests.get", side_effect=requests.Timeout("slow")):
            with pytest.raises(FetchError) as excinfo:
                fetch_page("https://example.com", timeout=10)

        assert isinstance(excinfo.value.__cause__, requests.Timeout)
        assert excinfo.value.url == "https://example.com"

    def test_unreachable_host_raises_fetch_error(self):
        with patch("scraper.requests.get", side_effect=requests.ConnectionError("dns")):
            with pytest.raises(FetchError):
                fetch_page("https://no-such-host.invalid")

    def test_error_status_raises_fetch_error(self):
        with patch("scraper.requests.get", return_value=_response(status_code=404)):
            with pytest.raises(FetchError) as excinfo:
                fetch_page("https://example.com/missing")

        assert excinfo.value.status_code == 404
