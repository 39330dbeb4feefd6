"""
Unit tests for domain models — immutability and the two date predicates.
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from certlint.domain.models import GTLDPeriod, Lint, LintResult, LintSource, LintStatus


class TestLintStatus:
    def test_status_values(self) -> None:
        assert [status.value for status in LintStatus] == ["NA", "pass", "warn", "error", "fatal"]


class TestLintResult:
    def test_is_frozen(self) -> None:
        result = LintResult(LintStatus.PASS)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.status = LintStatus.ERROR  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert LintResult(LintStatus.WARN, "x") == LintResult(LintStatus.WARN, "x")
        assert LintResult(LintStatus.WARN) != LintResult(LintStatus.WARN, "x")


class TestLintEffectivity:
    """Lint.is_effective — half-open [effective_date, ineffective_date)."""

    START = datetime(2017, 11, 1, tzinfo=UTC)
    END = datetime(2020, 9, 1, tzinfo=UTC)

    def _lint(self, start: datetime | None, end: datetime | None) -> Lint:
        return Lint(
            name="e_window",
            description="",
            citation="",
            source=LintSource.RFC5280,
            check_applies=lambda certificate: True,
            execute=lambda certificate: LintResult(LintStatus.PASS),
            effective_date=start,
            ineffective_date=end,
        )

    def test_start_bound_is_inclusive(self) -> None:
        lint = self._lint(self.START, None)

        assert lint.is_effective(self.START) is True
        assert lint.is_effective(datetime(2017, 10, 31, tzinfo=UTC)) is False

    def test_end_bound_is_exclusive(self) -> None:
        lint = self._lint(None, self.END)

        assert lint.is_effective(self.END) is False
        assert lint.is_effective(datetime(2020, 8, 31, tzinfo=UTC)) is True

    def test_no_bounds_always_effective(self) -> None:
        lint = self._lint(None, None)

        assert lint.is_effective(datetime(1990, 1, 1, tzinfo=UTC)) is True
        assert lint.is_effective(datetime(2090, 1, 1, tzinfo=UTC)) is True


class TestGTLDPeriod:
    """GTLDPeriod.valid_at."""

    def test_delegated_and_not_removed(self) -> None:
        period = GTLDPeriod("example", "2014-03-01")

        assert period.valid_at(datetime(2014, 3, 1, tzinfo=UTC)) is True
        assert period.valid_at(datetime(2030, 1, 1, tzinfo=UTC)) is True
        assert period.valid_at(datetime(2014, 2, 28, tzinfo=UTC)) is False

    def test_removed(self) -> None:
        """
        GIVEN a TLD delegated 2014-03-01 and removed 2017-06-30
        THEN it is valid in between, on the removal day, and not after
        """
        period = GTLDPeriod("example", "2014-03-01", "2017-06-30")

        assert period.valid_at(datetime(2016, 1, 1, tzinfo=UTC)) is True
        assert period.valid_at(datetime(2017, 6, 30, tzinfo=UTC)) is True
        assert period.valid_at(datetime(2017, 7, 1, tzinfo=UTC)) is False

    def test_is_frozen(self) -> None:
        period = GTLDPeriod("com", "1985-01-01")

        with pytest.raises(dataclasses.FrozenInstanceError):
            period.removal_date = "2000-01-01"  # type: ignore[misc]
