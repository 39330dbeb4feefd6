"""
HTTP adapter — fetches the ICANN/IANA reference feeds via httpx.

Implements the FeedFetcher port. Each phase of a request is bounded by an
explicit httpx.Timeout: `connect` caps TCP connection establishment and, as a
separate step, the TLS handshake; `read` caps the wait for the first (and
every following) response byte. No retry: a failed fetch ends the build.
"""

from __future__ import annotations

import httpx
import structlog

from certlint.result import ErrorCode, Result

log = structlog.get_logger()


class FeedStatusError(Exception):
    """A feed answered with something other than 200 OK."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(
            f"unexpected status code fetching data from {url!r}: "
            f"expected status {httpx.codes.OK} got {status_code}"
        )
        self.url = url
        self.status_code = status_code


class HttpFeedFetcher:
    """Fetch a feed body with a single bounded GET request."""

    def __init__(self, timeout: httpx.Timeout) -> None:
        self._timeout = timeout

    def fetch(self, url: str) -> Result[bytes]:
        """
        GET the feed at `url`.

        Returns Result[bytes] with the response body on 200 OK,
        or Result.failure(FETCH_ERROR, ...) on any other outcome.
        """
        return Result.from_computation(
            lambda: self._do_fetch(url),
            ErrorCode.FETCH_ERROR,
            f"unable to fetch data from {url!r}",
        )

    def _do_fetch(self, url: str) -> bytes:
        """HTTP GET — exceptions caught by from_computation."""
        with httpx.Client(timeout=self._timeout) as client:
            response = client.get(url)
            if response.status_code != httpx.codes.OK:
                raise FeedStatusError(url, response.status_code)
            data = response.content
            log.info("feed.fetched", url=url, size_bytes=len(data))
            return data
