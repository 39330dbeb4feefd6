"""
Unit tests for the HTTP feed fetcher.

Uses respx to mock httpx HTTP calls (never makes real HTTP requests).

Test categories:
  - Success: 200 → Result.success(body)
  - Non-200: 404/500 → Result.failure(FETCH_ERROR) naming the status
  - Timeout/network: → Result.failure(FETCH_ERROR) (never raises)
  - No retry: exactly one request per fetch
"""

from __future__ import annotations

import httpx
import pytest
import respx

from certlint.adapters.http_client import FeedStatusError, HttpFeedFetcher
from certlint.config import HttpSettings
from certlint.result import ErrorCode
from certlint.testing import ResultAssertions

FEED_URL = "https://feeds.example.com/gtlds.json"


@pytest.fixture()
def fetcher() -> HttpFeedFetcher:
    """Create an HttpFeedFetcher with the default per-phase timeouts."""
    return HttpFeedFetcher(timeout=HttpSettings().timeout())


class TestFetchSuccess:
    """
    GIVEN a feed answering 200 OK
    WHEN fetch is called
    THEN the raw body is returned.
    """

    @respx.mock
    def test_returns_body(self, fetcher: HttpFeedFetcher) -> None:
        respx.get(FEED_URL).mock(return_value=httpx.Response(200, content=b'{"gTLDs": []}'))

        body = ResultAssertions.assert_success(fetcher.fetch(FEED_URL))

        assert body == b'{"gTLDs": []}'

    @respx.mock
    def test_single_get_request(self, fetcher: HttpFeedFetcher) -> None:
        route = respx.get(FEED_URL).mock(return_value=httpx.Response(200, content=b"COM\n"))

        fetcher.fetch(FEED_URL)

        assert route.call_count == 1
        assert route.calls.last.request.method == "GET"


class TestFetchStatusFailure:
    """
    GIVEN a feed answering anything but 200
    WHEN fetch is called
    THEN it returns Failure(FETCH_ERROR) carrying the status, without retrying.
    """

    @pytest.mark.parametrize("status", [204, 301, 404, 500, 503])
    @respx.mock
    def test_non_200_is_fetch_error(self, fetcher: HttpFeedFetcher, status: int) -> None:
        route = respx.get(FEED_URL).mock(return_value=httpx.Response(status))

        result = fetcher.fetch(FEED_URL)

        error = ResultAssertions.assert_failure(result, ErrorCode.FETCH_ERROR)
        assert isinstance(error.exception, FeedStatusError)
        assert error.exception.status_code == status
        assert route.call_count == 1

    @respx.mock
    def test_message_names_url_and_status(self, fetcher: HttpFeedFetcher) -> None:
        respx.get(FEED_URL).mock(return_value=httpx.Response(404))

        result = fetcher.fetch(FEED_URL)

        ResultAssertions.assert_failure_message_contains(result, FEED_URL)
        ResultAssertions.assert_failure_message_contains(result, "got 404")


class TestFetchTransportFailure:
    """
    GIVEN a feed that cannot be reached or is too slow
    WHEN fetch is called
    THEN it returns Failure(FETCH_ERROR) and does not raise.
    """

    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectTimeout("connect timed out"),
            httpx.ReadTimeout("read timed out"),
            httpx.ConnectError("connection refused"),
        ],
    )
    @respx.mock
    def test_transport_errors(self, fetcher: HttpFeedFetcher, exc: Exception) -> None:
        route = respx.get(FEED_URL).mock(side_effect=exc)

        result = fetcher.fetch(FEED_URL)

        error = ResultAssertions.assert_failure(result, ErrorCode.FETCH_ERROR)
        assert isinstance(error.exception, type(exc))
        assert route.call_count == 1


class TestTimeouts:
    def test_default_phase_timeouts(self) -> None:
        """
        GIVEN default HTTP settings
        THEN connect (TCP and TLS handshake) is 15 s and read is 5 s
        """
        timeout = HttpSettings().timeout()

        assert timeout.connect == 15.0
        assert timeout.read == 5.0
        assert timeout.write == 5.0
        assert timeout.pool == 5.0
