"""
Domain models — immutable data structures for lints, verdicts and TLD periods.

A Lint bundles its metadata with two plain callables: an applicability
predicate and a verdict function. Both receive a decoded
`cryptography.x509.Certificate`; decoding happens outside this package.

All models are frozen dataclasses.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum, unique

from cryptography import x509

# Date layout used by both ICANN feeds and the generated TLD table.
GTLD_PERIOD_DATE_FORMAT = "%Y-%m-%d"


@unique
class LintStatus(Enum):
    """The fixed outcome classification of a lint run."""

    NA = "NA"
    PASS = "pass"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


@unique
class LintSource(Enum):
    """The standard a lint's rule is drawn from."""

    CABF_BASELINE_REQUIREMENTS = "CABF_BR"
    RFC5280 = "RFC5280"
    ETSI_ESI = "ETSI_ESI"


@dataclass(frozen=True, slots=True)
class LintResult:
    """Verdict of one lint against one certificate."""

    status: LintStatus
    details: str | None = None


type CheckApplies = Callable[[x509.Certificate], bool]
type CheckExecute = Callable[[x509.Certificate], LintResult]


@dataclass(frozen=True, slots=True)
class Lint:
    """
    A named, self-contained conformance check.

    The rule is in force for certificates whose notBefore falls inside
    [effective_date, ineffective_date); either bound may be None.
    """

    name: str
    description: str
    citation: str
    source: LintSource
    check_applies: CheckApplies
    execute: CheckExecute
    effective_date: datetime | None = None
    ineffective_date: datetime | None = None

    def is_effective(self, issued: datetime) -> bool:
        """True when a certificate issued at `issued` falls inside the window."""
        if self.effective_date is not None and issued < self.effective_date:
            return False
        if self.ineffective_date is not None and issued >= self.ineffective_date:
            return False
        return True


@dataclass(frozen=True, slots=True)
class GTLDPeriod:
    """
    Validity period of one top-level domain.

    `removal_date` is empty while the TLD is still delegated. Dates are only
    written to the generated table after they were validated, so `valid_at`
    parses them without guarding.
    """

    gtld: str
    delegation_date: str
    removal_date: str = ""

    def valid_at(self, when: datetime) -> bool:
        delegated = _parse_period_date(self.delegation_date)
        if when < delegated:
            return False
        if self.removal_date:
            return when <= _parse_period_date(self.removal_date)
        return True


def _parse_period_date(value: str) -> datetime:
    return datetime.strptime(value, GTLD_PERIOD_DATE_FORMAT).replace(tzinfo=UTC)
