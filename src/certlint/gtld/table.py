"""
TLD validity table — merge of the two feeds plus the consumer-side lookup.

Source A entries go in first; Source B only fills labels Source A does not
know about. Within one source the last duplicate wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime

from certlint.domain.models import GTLDPeriod

# .onion is not a delegated gTLD, but CABF ballot 144 allows EV issuance for
# .onion names, so it is always present with the ballot date.
# https://cabforum.org/2015/02/18/ballot-144-validation-rules-dot-onion-names/
ONION_PERIOD = GTLDPeriod(gtld="onion", delegation_date="2015-02-18", removal_date="")

type TldTable = Mapping[str, GTLDPeriod]


def merge_tld_table(
    delegated: Iterable[GTLDPeriod],
    listed: Iterable[GTLDPeriod],
) -> dict[str, GTLDPeriod]:
    """
    Build the label → period table.

    `delegated` are validated Source A entries; `listed` are Source B
    entries carrying the default delegation date. The onion entry replaces
    whatever either feed said about that label.
    """
    table: dict[str, GTLDPeriod] = {}
    for period in delegated:
        table[period.gtld.lower()] = period
    listed_only: dict[str, GTLDPeriod] = {}
    for period in listed:
        label = period.gtld.lower()
        if label not in table:
            listed_only[label] = period
    table.update(listed_only)
    table[ONION_PERIOD.gtld] = ONION_PERIOD
    return table


def tld_of(domain: str) -> str:
    """Right-most label of a DNS name, lower-cased, trailing dot ignored."""
    return domain.rstrip(".").rsplit(".", 1)[-1].lower()


def has_valid_tld(domain: str, when: datetime, table: TldTable) -> bool:
    """
    True if `domain` ends in a TLD that was delegated (and not yet removed)
    at `when`.
    """
    period = table.get(tld_of(domain))
    if period is None:
        return False
    return period.valid_at(when)
