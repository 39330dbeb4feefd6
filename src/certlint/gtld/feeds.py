"""
Feed parsing — turns the two raw ICANN/IANA payloads into GTLDPeriod lists.

Source A (ICANN gTLD JSON, v2) is authoritative for dates and also lists
gTLDs that were never delegated. Source B (IANA tlds-alpha-by-domain.txt)
covers ccTLDs and gTLDs alike but carries no dates at all.
"""

from __future__ import annotations

import re
from datetime import datetime

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from certlint.domain.models import GTLD_PERIOD_DATE_FORMAT, GTLDPeriod
from certlint.result import ErrorCode, Result

log = structlog.get_logger()

# The TLD list carries no dates, so every label is assumed to have been
# delegated together with "com".
COM_DELEGATION_DATE = "1985-01-01"

_DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ─────────────────────── Source A: gTLD JSON ───────────────────────


class GtldFeedEntry(BaseModel):
    """
    One record of the ICANN gTLD registry. Extra fields are ignored.

    `gTLD` is required: a record without it rejects the whole feed.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    gtld: str = Field(alias="gTLD")
    delegation_date: str = Field(default="", alias="delegationDate")
    removal_date: str = Field(default="", alias="removalDate")

    @field_validator("delegation_date", "removal_date", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        """ICANN publishes missing dates as null; treat them as empty."""
        return "" if value is None else value


class GtldFeed(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    gtlds: list[GtldFeedEntry] = Field(default_factory=list, alias="gTLDs")


def parse_gtld_json(raw: bytes) -> Result[list[GTLDPeriod]]:
    """
    Decode the gTLD JSON into GTLDPeriods, labels lower-cased.

    Entries are returned as-is, including ones never delegated.
    Returns Result.failure(PARSE_ERROR, ...) on malformed JSON or structure.
    """
    return Result.from_computation(
        lambda: [
            GTLDPeriod(
                gtld=entry.gtld.strip().lower(),
                delegation_date=entry.delegation_date,
                removal_date=entry.removal_date,
            )
            for entry in GtldFeed.model_validate_json(raw).gtlds
        ],
        ErrorCode.PARSE_ERROR,
        "unexpected error unmarshaling ICANN gTLD JSON response body",
    )


def delegated_gtlds(entries: list[GTLDPeriod]) -> list[GTLDPeriod]:
    """Drop entries that were never delegated from the root zone."""
    return [entry for entry in entries if entry.delegation_date != ""]


def is_valid_period_date(value: str) -> bool:
    if not _DATE_SHAPE.match(value):
        return False
    try:
        datetime.strptime(value, GTLD_PERIOD_DATE_FORMAT)
    except ValueError:
        return False
    return True


def validate_gtlds(entries: list[GTLDPeriod]) -> Result[list[GTLDPeriod]]:
    """
    Check every entry has a parseable delegation date and, when not empty,
    a parseable removal date.

    Run after `delegated_gtlds`: an empty delegation date is an error here.
    The first bad entry fails the whole list.
    """
    for entry in entries:
        if not is_valid_period_date(entry.delegation_date):
            return Result.failure(
                ErrorCode.VALIDATION_ERROR,
                f"gTLD {entry.gtld!r} has invalid delegation date "
                f"{entry.delegation_date!r}",
            )
        if entry.removal_date and not is_valid_period_date(entry.removal_date):
            return Result.failure(
                ErrorCode.VALIDATION_ERROR,
                f"gTLD {entry.gtld!r} has invalid removal date {entry.removal_date!r}",
            )
    log.info("gtld_feed.validated", entries=len(entries))
    return Result.success(entries)


# ─────────────────────── Source B: TLD list ───────────────────────


def parse_tld_list(raw: bytes) -> Result[list[GTLDPeriod]]:
    """
    Turn the newline-separated TLD list into GTLDPeriods.

    Blank lines and the `#` header line are skipped. Every label gets the
    "com" delegation date and no removal date.
    """
    return Result.from_computation(
        lambda: _tld_list_periods(raw.decode("utf-8")),
        ErrorCode.PARSE_ERROR,
        "unexpected error decoding IANA TLD list",
    )


def _tld_list_periods(text: str) -> list[GTLDPeriod]:
    results: list[GTLDPeriod] = []
    for line in text.splitlines():
        label = line.strip()
        if not label or label.startswith("#"):
            continue
        results.append(GTLDPeriod(gtld=label.lower(), delegation_date=COM_DELEGATION_DATE))
    return results
