"""
Ports — Protocol-based interfaces for the TLD data build's I/O.

The builder only knows these contracts; `certlint.adapters` provides the
httpx-backed fetcher and the stdout/file output writers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from certlint.result import Result


@runtime_checkable
class FeedFetcher(Protocol):
    """
    Port: fetch the raw body of a reference-data feed.

    Returns Result[bytes]; any transport failure or non-200 status is a
    FETCH_ERROR failure. Implementations must not retry.
    """

    def fetch(self, url: str) -> Result[bytes]: ...


@runtime_checkable
class OutputWriter(Protocol):
    """
    Port: write the rendered TLD module to its destination.

    Called only with fully rendered text, so a failure earlier in the build
    never touches the destination. Returns the number of characters written.
    """

    def write(self, text: str) -> Result[int]: ...
