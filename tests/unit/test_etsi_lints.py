"""
Unit tests for the ETSI EN 319 412-5 QC statement lints.

Every certificate is built in-process (see tests/conftest.py) with a
notBefore after the V2.2.1 publication date unless a test says otherwise.
Lints are run through the engine so effectivity and applicability are part
of what is verified.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from asn1crypto import core
from cryptography import x509

from certlint.domain.models import LintSource, LintStatus
from certlint.lints.engine import execute
from certlint.lints.etsi import ETSI_EN_319_412_5_V2_2_1_DATE, ETSI_LINTS
from certlint.lints.qcstatements import (
    ETSI_QCS_QC_COMPLIANCE,
    ETSI_QCS_QC_LIMIT_VALUE,
    ETSI_QCS_QC_PDS,
    ETSI_QCS_QC_RETENTION_PERIOD,
    ETSI_QCS_QC_SSCD,
    ETSI_QCS_QC_TYPE,
    ETSI_QCT_ESEAL,
    ETSI_QCT_ESIGN,
    ETSI_QCT_WEB,
    Iso4217CurrencyCode,
    MonetaryValue,
)
from tests.conftest import (
    build_certificate,
    pds_info,
    qc_certificate,
    qc_statement,
    qc_type_info,
    retention_info,
)

LINTS = {lint.name: lint for lint in ETSI_LINTS}

COMPLIANCE = qc_statement(ETSI_QCS_QC_COMPLIANCE)
ESIGN_TYPE = qc_statement(ETSI_QCS_QC_TYPE, qc_type_info(ETSI_QCT_ESIGN))
ENGLISH_PDS = ("https://pds.example.com/pds-en.pdf", "en")


def run(name: str, certificate: x509.Certificate) -> LintStatus:
    return execute(LINTS[name], certificate).status


def limit_value_info(currency: Iso4217CurrencyCode, amount: int = 1000) -> bytes:
    return MonetaryValue({"currency": currency, "amount": amount, "exponent": 0}).dump()


# ─────────────────────── Catalogue ───────────────────────


class TestCatalogue:
    """Shape of the ETSI lint set."""

    def test_names_are_unique(self) -> None:
        """
        GIVEN the ETSI lint tuple
        THEN no name appears twice
        """
        assert len(LINTS) == len(ETSI_LINTS)

    def test_all_lints_share_source_and_effective_date(self) -> None:
        """
        GIVEN every ETSI lint
        THEN each is drawn from ETSI ESI and in force from 2017-11-01
        """
        for lint in ETSI_LINTS:
            assert lint.source is LintSource.ETSI_ESI
            assert lint.effective_date == ETSI_EN_319_412_5_V2_2_1_DATE
            assert lint.ineffective_date is None
            assert lint.citation.startswith("ETSI EN 319 412 - 5")

    def test_warning_lints_use_w_prefix(self) -> None:
        """
        GIVEN the lint names
        THEN error lints start with e_ and warning lints with w_
        """
        for name in LINTS:
            assert name.startswith(("e_", "w_"))


# ─────────────────────── Fixture scenario ───────────────────────


class TestTypeAsStatementScenario:
    """e_qcstatem_etsi_type_as_statem over the named fixture certificates."""

    def test_fixture_results_in_order(self, etsi_fixtures) -> None:
        """
        GIVEN the seven named ETSI fixture certificates
        WHEN e_qcstatem_etsi_type_as_statem runs over each
        THEN the verdicts are Error, Error, Pass, Pass, Pass, NA, Pass
        """
        lint = LINTS["e_qcstatem_etsi_type_as_statem"]

        statuses = [execute(lint, certificate).status for _, certificate in etsi_fixtures]

        assert statuses == [
            LintStatus.ERROR,
            LintStatus.ERROR,
            LintStatus.PASS,
            LintStatus.PASS,
            LintStatus.PASS,
            LintStatus.NA,
            LintStatus.PASS,
        ]

    def test_error_details_name_the_misused_oid(self, etsi_fixtures) -> None:
        """
        GIVEN the certificate using the esign QcType OID as a statement id
        WHEN the lint runs
        THEN the details name that OID
        """
        _, certificate = etsi_fixtures[0]

        result = execute(LINTS["e_qcstatem_etsi_type_as_statem"], certificate)

        assert result.details is not None
        assert ETSI_QCT_ESIGN in result.details

    @pytest.mark.parametrize("qc_type", [ETSI_QCT_ESIGN, ETSI_QCT_ESEAL, ETSI_QCT_WEB])
    def test_each_qc_type_oid_is_rejected_as_statement(self, qc_type: str) -> None:
        """
        GIVEN any of the three QcType OIDs used as a statement id
        THEN the lint reports Error
        """
        certificate = qc_certificate(COMPLIANCE, qc_statement(qc_type))

        assert run("e_qcstatem_etsi_type_as_statem", certificate) is LintStatus.ERROR

    def test_issued_before_effective_date_is_not_applicable(self) -> None:
        """
        GIVEN a certificate that misuses a QcType OID
        AND was issued before 2017-11-01
        THEN the lint is not evaluated
        """
        certificate = qc_certificate(
            COMPLIANCE,
            qc_statement(ETSI_QCT_ESIGN),
            not_before=datetime(2016, 6, 1, tzinfo=UTC),
        )

        assert run("e_qcstatem_etsi_type_as_statem", certificate) is LintStatus.NA


# ─────────────────────── Criticality and mandatory statements ───────────────────────


class TestExtensionLevelLints:
    """Criticality and QcCompliance presence."""

    def test_critical_extension_is_error(self) -> None:
        """
        GIVEN a critical QC statements extension with ETSI statements
        THEN e_qcstatem_etsi_present_qcs_critical reports Error
        """
        certificate = qc_certificate(COMPLIANCE, ESIGN_TYPE, critical=True)

        assert run("e_qcstatem_etsi_present_qcs_critical", certificate) is LintStatus.ERROR

    def test_non_critical_extension_passes(self) -> None:
        certificate = qc_certificate(COMPLIANCE, ESIGN_TYPE)

        assert run("e_qcstatem_etsi_present_qcs_critical", certificate) is LintStatus.PASS

    def test_non_etsi_statements_only_is_not_applicable(self) -> None:
        """
        GIVEN a QC statements extension without any ETSI statement
        THEN the ETSI extension-level lints do not apply
        """
        certificate = qc_certificate(qc_statement("1.3.6.1.5.5.7.11.2"), critical=True)

        assert run("e_qcstatem_etsi_present_qcs_critical", certificate) is LintStatus.NA
        assert run("e_qcstatem_mandatory_etsi_statems", certificate) is LintStatus.NA

    def test_missing_qc_compliance_is_error(self) -> None:
        """
        GIVEN ETSI statements without QcCompliance
        THEN e_qcstatem_mandatory_etsi_statems reports Error
        """
        certificate = qc_certificate(ESIGN_TYPE)

        assert run("e_qcstatem_mandatory_etsi_statems", certificate) is LintStatus.ERROR

    def test_qc_compliance_present_passes(self) -> None:
        certificate = qc_certificate(COMPLIANCE, ESIGN_TYPE)

        assert run("e_qcstatem_mandatory_etsi_statems", certificate) is LintStatus.PASS

    def test_no_extension_is_not_applicable(self) -> None:
        certificate = build_certificate()

        for lint in ETSI_LINTS:
            assert execute(lint, certificate).status is LintStatus.NA, lint.name


# ─────────────────────── Statements without info ───────────────────────


class TestInfoLessStatements:
    """QcCompliance and QcSSCD must not carry statement info."""

    @pytest.mark.parametrize(
        "name, statement_id",
        [
            ("e_qcstatem_qccompliance_valid", ETSI_QCS_QC_COMPLIANCE),
            ("e_qcstatem_qcsscd_valid", ETSI_QCS_QC_SSCD),
        ],
    )
    def test_bare_statement_passes(self, name: str, statement_id: str) -> None:
        certificate = qc_certificate(qc_statement(statement_id))

        assert run(name, certificate) is LintStatus.PASS

    @pytest.mark.parametrize(
        "name, statement_id",
        [
            ("e_qcstatem_qccompliance_valid", ETSI_QCS_QC_COMPLIANCE),
            ("e_qcstatem_qcsscd_valid", ETSI_QCS_QC_SSCD),
        ],
    )
    def test_statement_with_info_is_error(self, name: str, statement_id: str) -> None:
        """
        GIVEN the statement followed by an INTEGER info
        THEN the lint reports Error
        """
        certificate = qc_certificate(qc_statement(statement_id, core.Integer(1).dump()))

        assert run(name, certificate) is LintStatus.ERROR

    def test_sscd_lint_not_applicable_without_sscd(self) -> None:
        certificate = qc_certificate(COMPLIANCE)

        assert run("e_qcstatem_qcsscd_valid", certificate) is LintStatus.NA


# ─────────────────────── QcType ───────────────────────


class TestQcType:
    """e_qcstatem_qctype_valid."""

    @pytest.mark.parametrize(
        "qc_types",
        [(ETSI_QCT_ESIGN,), (ETSI_QCT_ESEAL,), (ETSI_QCT_WEB,), (ETSI_QCT_ESIGN, ETSI_QCT_ESEAL)],
    )
    def test_allowed_types_pass(self, qc_types: tuple[str, ...]) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_TYPE, qc_type_info(*qc_types))
        )

        assert run("e_qcstatem_qctype_valid", certificate) is LintStatus.PASS

    def test_empty_type_list_is_error(self) -> None:
        certificate = qc_certificate(COMPLIANCE, qc_statement(ETSI_QCS_QC_TYPE, qc_type_info()))

        result = execute(LINTS["e_qcstatem_qctype_valid"], certificate)

        assert result.status is LintStatus.ERROR
        assert "empty" in (result.details or "")

    def test_unknown_type_oid_is_error(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_TYPE, qc_type_info("0.4.0.1862.1.6.9"))
        )

        assert run("e_qcstatem_qctype_valid", certificate) is LintStatus.ERROR

    def test_missing_info_is_error(self) -> None:
        certificate = qc_certificate(COMPLIANCE, qc_statement(ETSI_QCS_QC_TYPE))

        assert run("e_qcstatem_qctype_valid", certificate) is LintStatus.ERROR

    def test_info_of_wrong_type_is_error(self) -> None:
        """
        GIVEN a QcType statement whose info is an INTEGER
        THEN the decoding problem is reported as Error
        """
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_TYPE, core.Integer(3).dump())
        )

        assert run("e_qcstatem_qctype_valid", certificate) is LintStatus.ERROR


# ─────────────────────── QcRetentionPeriod ───────────────────────


class TestRetentionPeriod:
    """e_qcstatem_qcretentionperiod_valid."""

    @pytest.mark.parametrize("years", [0, 7, 30])
    def test_non_negative_years_pass(self, years: int) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_RETENTION_PERIOD, retention_info(years))
        )

        assert run("e_qcstatem_qcretentionperiod_valid", certificate) is LintStatus.PASS

    def test_negative_years_is_error(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_RETENTION_PERIOD, retention_info(-1))
        )

        assert run("e_qcstatem_qcretentionperiod_valid", certificate) is LintStatus.ERROR

    def test_non_integer_info_is_error(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE,
            qc_statement(ETSI_QCS_QC_RETENTION_PERIOD, core.PrintableString("ten").dump()),
        )

        assert run("e_qcstatem_qcretentionperiod_valid", certificate) is LintStatus.ERROR


# ─────────────────────── QcLimitValue ───────────────────────


class TestLimitValue:
    """e_qcstatem_qclimitvalue_valid."""

    @pytest.mark.parametrize(
        "currency",
        [
            Iso4217CurrencyCode(name="alphabetic", value="EUR"),
            Iso4217CurrencyCode(name="numeric", value=978),
        ],
    )
    def test_well_formed_currency_passes(self, currency: Iso4217CurrencyCode) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_LIMIT_VALUE, limit_value_info(currency))
        )

        assert run("e_qcstatem_qclimitvalue_valid", certificate) is LintStatus.PASS

    @pytest.mark.parametrize(
        "currency",
        [
            Iso4217CurrencyCode(name="alphabetic", value="EURO"),
            Iso4217CurrencyCode(name="alphabetic", value="E1R"),
            Iso4217CurrencyCode(name="numeric", value=0),
            Iso4217CurrencyCode(name="numeric", value=1000),
        ],
    )
    def test_malformed_currency_is_error(self, currency: Iso4217CurrencyCode) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_LIMIT_VALUE, limit_value_info(currency))
        )

        assert run("e_qcstatem_qclimitvalue_valid", certificate) is LintStatus.ERROR

    def test_not_applicable_without_statement(self) -> None:
        certificate = qc_certificate(COMPLIANCE)

        assert run("e_qcstatem_qclimitvalue_valid", certificate) is LintStatus.NA


# ─────────────────────── QcPDS ───────────────────────


class TestPds:
    """e_qcstatem_qcpds_valid and w_qcstatem_qcpds_lang_case."""

    def test_english_https_pds_passes(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_PDS, pds_info(ENGLISH_PDS))
        )

        assert run("e_qcstatem_qcpds_valid", certificate) is LintStatus.PASS
        assert run("w_qcstatem_qcpds_lang_case", certificate) is LintStatus.PASS

    def test_missing_english_pds_is_error(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE,
            qc_statement(ETSI_QCS_QC_PDS, pds_info(("https://pds.example.com/de", "de"))),
        )

        result = execute(LINTS["e_qcstatem_qcpds_valid"], certificate)

        assert result.status is LintStatus.ERROR
        assert "English" in (result.details or "")

    def test_three_letter_language_is_error(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE,
            qc_statement(
                ETSI_QCS_QC_PDS,
                pds_info(ENGLISH_PDS, ("https://pds.example.com/deu", "deu")),
            ),
        )

        assert run("e_qcstatem_qcpds_valid", certificate) is LintStatus.ERROR

    def test_plain_http_url_is_error(self) -> None:
        certificate = qc_certificate(
            COMPLIANCE,
            qc_statement(ETSI_QCS_QC_PDS, pds_info(("http://pds.example.com/en", "en"))),
        )

        assert run("e_qcstatem_qcpds_valid", certificate) is LintStatus.ERROR

    def test_empty_pds_list_is_error(self) -> None:
        certificate = qc_certificate(COMPLIANCE, qc_statement(ETSI_QCS_QC_PDS, pds_info()))

        assert run("e_qcstatem_qcpds_valid", certificate) is LintStatus.ERROR

    def test_upper_case_language_warns(self) -> None:
        """
        GIVEN a PDS location with language "EN"
        THEN the structure is valid but the case lint warns
        """
        certificate = qc_certificate(
            COMPLIANCE,
            qc_statement(ETSI_QCS_QC_PDS, pds_info(("https://pds.example.com/en", "EN"))),
        )

        assert run("e_qcstatem_qcpds_valid", certificate) is LintStatus.PASS
        assert run("w_qcstatem_qcpds_lang_case", certificate) is LintStatus.WARN

    def test_undecodable_pds_is_fatal_for_case_lint(self) -> None:
        """
        GIVEN a QcPDS statement whose info is not a PDS location list
        THEN the structural lint reports Error and the case lint Fatal
        """
        certificate = qc_certificate(
            COMPLIANCE, qc_statement(ETSI_QCS_QC_PDS, core.Integer(1).dump())
        )

        assert run("e_qcstatem_qcpds_valid", certificate) is LintStatus.ERROR
        assert run("w_qcstatem_qcpds_lang_case", certificate) is LintStatus.FATAL


# ─────────────────────── Undecodable extension ───────────────────────


class TestUndecodableExtension:
    """A QC statements extension that is not a SEQUENCE OF QCStatement."""

    def test_statement_lints_report_error(self, etsi_fixtures) -> None:
        """
        GIVEN the tagged-value fixture
        WHEN the statement-specific lints run
        THEN each applies and reports the decoding error as Error
        """
        _, certificate = etsi_fixtures[1]

        for name in (
            "e_qcstatem_mandatory_etsi_statems",
            "e_qcstatem_qccompliance_valid",
            "e_qcstatem_qctype_valid",
        ):
            result = execute(LINTS[name], certificate)
            assert result.status is LintStatus.ERROR, name
            assert "QcStatements" in (result.details or "")
