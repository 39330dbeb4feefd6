"""
Unit tests for the lint execution engine.

Covers the evaluation order (effectivity → applicability → verdict), fault
containment and the batch helpers. Lints here are hand-built so each test
controls exactly what the check does.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from cryptography import x509

from certlint.domain.models import Lint, LintResult, LintSource, LintStatus
from certlint.lints.engine import execute, execute_all, execute_named
from certlint.lints.registry import Registry, build_default_registry
from certlint.result import ErrorCode
from certlint.testing import ResultAssertions
from tests.conftest import build_certificate, etsi_fixture_certificates

START = datetime(2018, 1, 1, tzinfo=UTC)
END = datetime(2020, 1, 1, tzinfo=UTC)


def make_lint(
    name: str = "e_test_lint",
    status: LintStatus = LintStatus.PASS,
    applies: bool = True,
    effective_date: datetime | None = None,
    ineffective_date: datetime | None = None,
) -> Lint:
    return Lint(
        name=name,
        description="test lint",
        citation="test",
        source=LintSource.RFC5280,
        check_applies=lambda certificate: applies,
        execute=lambda certificate: LintResult(status),
        effective_date=effective_date,
        ineffective_date=ineffective_date,
    )


def raising_lint(exc: Exception, in_applies: bool = False) -> Lint:
    def _raise(certificate: x509.Certificate) -> LintResult:
        raise exc

    return Lint(
        name="e_raising_lint",
        description="raises",
        citation="test",
        source=LintSource.RFC5280,
        check_applies=_raise if in_applies else (lambda certificate: True),
        execute=_raise,
    )


# ─────────────────────── Effectivity ───────────────────────


class TestEffectivity:
    """A lint only runs for certificates issued inside [effective, ineffective)."""

    @pytest.mark.parametrize(
        "issued, expected",
        [
            (datetime(2017, 12, 31, 23, 59, 59, tzinfo=UTC), LintStatus.NA),
            (START, LintStatus.ERROR),
            (datetime(2019, 6, 1, tzinfo=UTC), LintStatus.ERROR),
            (END, LintStatus.NA),
            (datetime(2021, 1, 1, tzinfo=UTC), LintStatus.NA),
        ],
    )
    def test_window_is_half_open(self, issued: datetime, expected: LintStatus) -> None:
        """
        GIVEN a lint that always reports Error, in force [2018-01-01, 2020-01-01)
        WHEN certificates issued around the bounds are checked
        THEN only those inside the window reach the check
        """
        lint = make_lint(status=LintStatus.ERROR, effective_date=START, ineffective_date=END)

        assert execute(lint, build_certificate(not_before=issued)).status is expected

    def test_effectivity_checked_before_applicability(self) -> None:
        """
        GIVEN a lint whose applicability check raises
        WHEN the certificate predates the lint
        THEN the check never runs and the result is NA
        """
        lint = Lint(
            name="e_guarded",
            description="",
            citation="",
            source=LintSource.RFC5280,
            check_applies=lambda certificate: 1 / 0 > 0,
            execute=lambda certificate: LintResult(LintStatus.PASS),
            effective_date=START,
        )
        certificate = build_certificate(not_before=datetime(2016, 1, 1, tzinfo=UTC))

        assert execute(lint, certificate).status is LintStatus.NA

    def test_open_window_always_effective(self) -> None:
        lint = make_lint(status=LintStatus.WARN)

        assert execute(lint, build_certificate()).status is LintStatus.WARN


# ─────────────────────── Applicability ───────────────────────


class TestApplicability:
    def test_not_applicable_short_circuits_verdict(self) -> None:
        lint = make_lint(status=LintStatus.ERROR, applies=False)

        result = execute(lint, build_certificate())

        assert result == LintResult(LintStatus.NA)

    @pytest.mark.parametrize(
        "status", [LintStatus.PASS, LintStatus.WARN, LintStatus.ERROR, LintStatus.FATAL]
    )
    def test_verdict_returned_as_is(self, status: LintStatus) -> None:
        assert execute(make_lint(status=status), build_certificate()).status is status


# ─────────────────────── Fault containment ───────────────────────


class TestFaultContainment:
    """Nothing a lint or certificate raises escapes execute()."""

    def test_exception_in_execute_is_fatal(self) -> None:
        """
        GIVEN a lint whose check raises RuntimeError
        WHEN executed
        THEN a Fatal result carries the error text
        """
        result = execute(raising_lint(RuntimeError("boom")), build_certificate())

        assert result.status is LintStatus.FATAL
        assert "e_raising_lint" in (result.details or "")
        assert "boom" in (result.details or "")

    def test_exception_in_check_applies_is_fatal(self) -> None:
        result = execute(raising_lint(KeyError("x"), in_applies=True), build_certificate())

        assert result.status is LintStatus.FATAL

    def test_malformed_certificate_object_is_fatal(self) -> None:
        """
        GIVEN an object that is not a usable certificate
        WHEN a lint runs against it
        THEN the result is Fatal instead of an AttributeError
        """
        result = execute(make_lint(), object())  # type: ignore[arg-type]

        assert result.status is LintStatus.FATAL

    def test_non_result_return_is_fatal(self) -> None:
        lint = Lint(
            name="e_wrong_return",
            description="",
            citation="",
            source=LintSource.RFC5280,
            check_applies=lambda certificate: True,
            execute=lambda certificate: "pass",  # type: ignore[arg-type, return-value]
        )

        result = execute(lint, build_certificate())

        assert result.status is LintStatus.FATAL
        assert "LintResult" in (result.details or "")

    @pytest.mark.parametrize("status", ["pass", None, 1])
    def test_status_outside_the_enum_is_fatal(self, status: object) -> None:
        """
        GIVEN a lint returning a LintResult whose status is not a LintStatus
        WHEN executed
        THEN the result is Fatal rather than the bogus status
        """
        lint = Lint(
            name="e_bogus_status",
            description="",
            citation="",
            source=LintSource.RFC5280,
            check_applies=lambda certificate: True,
            execute=lambda certificate: LintResult(status),  # type: ignore[arg-type]
        )

        result = execute(lint, build_certificate())

        assert result.status is LintStatus.FATAL
        assert "LintStatus" in (result.details or "")

    def test_batch_completes_despite_fault(self) -> None:
        """
        GIVEN a registry where the middle lint raises
        WHEN execute_all runs
        THEN every lint has a result and only the raising one is Fatal
        """
        registry = Registry(
            [
                make_lint("e_first", LintStatus.PASS),
                raising_lint(ValueError("bad")),
                make_lint("e_last", LintStatus.ERROR),
            ]
        )

        results = execute_all(registry, build_certificate())

        assert {name: r.status for name, r in results.items()} == {
            "e_first": LintStatus.PASS,
            "e_raising_lint": LintStatus.FATAL,
            "e_last": LintStatus.ERROR,
        }


# ─────────────────────── Batch helpers ───────────────────────


class TestBatch:
    def test_execute_all_keeps_registry_order(self) -> None:
        registry = Registry([make_lint("e_b"), make_lint("e_a"), make_lint("e_c")])

        results = execute_all(registry, build_certificate())

        assert list(results) == ["e_b", "e_a", "e_c"]

    def test_execute_named_runs_one_lint(self) -> None:
        registry = Registry([make_lint("e_a", LintStatus.WARN), make_lint("e_b")])

        result = ResultAssertions.assert_success(
            execute_named(registry, "e_a", build_certificate())
        )

        assert result.status is LintStatus.WARN

    def test_execute_named_unknown_is_not_found(self) -> None:
        registry = Registry([make_lint("e_a")])

        result = execute_named(registry, "e_missing", build_certificate())

        ResultAssertions.assert_failure(result, ErrorCode.NOT_FOUND)
        ResultAssertions.assert_failure_message_contains(result, "e_missing")


# ─────────────────────── Default registry properties ───────────────────────


class TestDefaultRegistryProperties:
    """Properties that hold for every shipped lint over the fixture set."""

    def test_every_result_is_a_known_status(self) -> None:
        """
        GIVEN every registered lint and every fixture certificate
        WHEN executed
        THEN each call returns a LintResult with a status from the fixed set
        """
        registry = build_default_registry()

        for _, certificate in etsi_fixture_certificates():
            for name, result in execute_all(registry, certificate).items():
                assert isinstance(result, LintResult), name
                assert result.status in set(LintStatus), name

    def test_execution_is_deterministic(self, etsi_fixtures) -> None:
        """
        GIVEN the same lint and certificate
        WHEN executed twice
        THEN both results are identical
        """
        registry = build_default_registry()

        for _, certificate in etsi_fixtures:
            assert execute_all(registry, certificate) == execute_all(registry, certificate)
