"""
Pipeline — the TLD validity data build as a single ROP railway.

    fetch(gTLD JSON) → parse → drop undelegated → validate
      → fetch(TLD list) → parse
        → merge (gTLD entries win, onion forced)
          → render module → write

Each stage returns Result[T]; the first failure short-circuits, so the
writer is only reached with a fully rendered table and no partial output
is ever produced.
"""

from __future__ import annotations

import structlog

from certlint.domain.models import GTLDPeriod
from certlint.domain.ports import FeedFetcher, OutputWriter
from certlint.gtld.feeds import (
    delegated_gtlds,
    parse_gtld_json,
    parse_tld_list,
    validate_gtlds,
)
from certlint.gtld.render import render_tld_module
from certlint.gtld.table import merge_tld_table
from certlint.result import Result

log = structlog.get_logger()


def fetch_delegated_gtlds(fetcher: FeedFetcher, gtld_json_url: str) -> Result[list[GTLDPeriod]]:
    """Source A: fetch, parse, keep delegated entries, validate their dates."""
    return (
        fetcher.fetch(gtld_json_url)
        .flat_map(parse_gtld_json)
        .map(delegated_gtlds)
        .flat_map(validate_gtlds)
    )


def fetch_listed_tlds(fetcher: FeedFetcher, tld_list_url: str) -> Result[list[GTLDPeriod]]:
    """Source B: fetch and parse the flat TLD list."""
    return fetcher.fetch(tld_list_url).flat_map(parse_tld_list)


def build_tld_table(
    fetcher: FeedFetcher,
    gtld_json_url: str,
    tld_list_url: str,
) -> Result[dict[str, GTLDPeriod]]:
    """
    Build the merged label → GTLDPeriod table.

    Source B is only fetched once Source A validated, matching the order
    in which failures are reported.
    """
    return fetch_delegated_gtlds(fetcher, gtld_json_url).flat_map(
        lambda delegated: fetch_listed_tlds(fetcher, tld_list_url).map(
            lambda listed: merge_tld_table(delegated, listed)
        )
    ).peek(lambda table: log.info("tld_table.built", entries=len(table)))


def run_tld_update(
    fetcher: FeedFetcher,
    writer: OutputWriter,
    gtld_json_url: str,
    tld_list_url: str,
) -> Result[int]:
    """
    Build, render and write the TLD table.

    Returns Result[int] with the number of characters written on success,
    or the failure of the first failing stage.
    """
    return (
        build_tld_table(fetcher, gtld_json_url, tld_list_url)
        .flat_map(render_tld_module)
        .flat_map(writer.write)
    )
