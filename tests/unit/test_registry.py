"""
Unit tests for the lint registry and its builder.
"""

from __future__ import annotations

import pytest

from certlint.domain.models import GTLDPeriod, Lint, LintResult, LintSource, LintStatus
from certlint.lints.engine import execute_named
from certlint.lints.etsi import ETSI_LINTS
from certlint.lints.registry import (
    DuplicateLintError,
    Registry,
    RegistryBuilder,
    build_default_registry,
)
from certlint.result import ErrorCode
from certlint.testing import ResultAssertions
from tests.conftest import build_certificate


def make_lint(name: str, source: LintSource = LintSource.RFC5280) -> Lint:
    return Lint(
        name=name,
        description=f"{name} description",
        citation="RFC 5280",
        source=source,
        check_applies=lambda certificate: True,
        execute=lambda certificate: LintResult(LintStatus.PASS),
    )


class TestRegistryBuilder:
    def test_build_preserves_registration_order(self) -> None:
        registry = (
            RegistryBuilder()
            .register(make_lint("e_one"))
            .register_all([make_lint("e_two"), make_lint("e_three")])
            .build()
        )

        assert registry.names() == ("e_one", "e_two", "e_three")
        assert len(registry) == 3

    def test_duplicate_name_rejected(self) -> None:
        """
        GIVEN a builder holding "e_one"
        WHEN another lint named "e_one" is registered
        THEN DuplicateLintError names the clash
        """
        builder = RegistryBuilder().register(make_lint("e_one"))

        with pytest.raises(DuplicateLintError, match="e_one"):
            builder.register(make_lint("e_one"))

    def test_registry_rejects_duplicates_directly(self) -> None:
        with pytest.raises(DuplicateLintError):
            Registry([make_lint("e_one"), make_lint("e_one")])

    def test_builder_changes_after_build_do_not_leak(self) -> None:
        builder = RegistryBuilder().register(make_lint("e_one"))
        registry = builder.build()

        builder.register(make_lint("e_two"))

        assert registry.names() == ("e_one",)


class TestRegistryLookup:
    def test_get_known_lint(self) -> None:
        lint = make_lint("e_one")
        registry = Registry([lint])

        assert ResultAssertions.assert_success(registry.get("e_one")) is lint

    def test_get_unknown_lint_is_not_found(self) -> None:
        result = Registry([make_lint("e_one")]).get("e_nope")

        ResultAssertions.assert_failure(result, ErrorCode.NOT_FOUND)
        ResultAssertions.assert_failure_message_contains(result, "e_nope")

    def test_membership_and_iteration(self) -> None:
        registry = Registry([make_lint("e_one"), make_lint("e_two")])

        assert "e_one" in registry
        assert "e_three" not in registry
        assert [lint.name for lint in registry] == ["e_one", "e_two"]

    def test_by_source(self) -> None:
        registry = Registry(
            [
                make_lint("e_rfc"),
                make_lint("e_etsi", LintSource.ETSI_ESI),
                make_lint("e_cabf", LintSource.CABF_BASELINE_REQUIREMENTS),
            ]
        )

        assert [lint.name for lint in registry.by_source(LintSource.ETSI_ESI)] == ["e_etsi"]
        assert registry.by_source(LintSource.RFC5280)[0].name == "e_rfc"


class TestDefaultRegistry:
    def test_contains_every_shipped_lint(self) -> None:
        registry = build_default_registry()

        assert registry.names() == (
            *(lint.name for lint in ETSI_LINTS),
            "e_dnsname_not_valid_tld",
        )

    def test_each_call_builds_an_independent_registry(self) -> None:
        assert build_default_registry() is not build_default_registry()

    def test_custom_tld_table_is_bound(self) -> None:
        """
        GIVEN a table without "com"
        WHEN the default registry is built with it
        THEN the TLD lint uses that table
        """
        registry = build_default_registry({"org": GTLDPeriod("org", "1985-01-01")})

        result = execute_named(registry, "e_dnsname_not_valid_tld", build_certificate())

        assert ResultAssertions.assert_success(result).status is LintStatus.ERROR
