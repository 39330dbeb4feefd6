"""
ETSI EN 319 412-5 lints — QC statements of qualified certificates.

All rules here came into force with ETSI EN 319 412-5 V2.2.1 (2017-11);
certificates issued earlier are not evaluated. A QC statements extension
that cannot be decoded is a rule violation (Error), not a lint fault.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar

from cryptography import x509

from certlint.domain.models import Lint, LintResult, LintSource, LintStatus
from certlint.lints.qcstatements import (
    ETSI_QC_TYPES,
    ETSI_QCS_QC_COMPLIANCE,
    ETSI_QCS_QC_LIMIT_VALUE,
    ETSI_QCS_QC_PDS,
    ETSI_QCS_QC_RETENTION_PERIOD,
    ETSI_QCS_QC_SSCD,
    ETSI_QCS_QC_TYPE,
    QcStatement,
    certificate_qc_statements,
    decode_limit_value,
    decode_pds_locations,
    decode_qc_types,
    decode_retention_period,
    find_statement,
    has_etsi_statement,
    has_qc_statements,
    qc_statements_extension,
    statement_present,
)
from certlint.result import ErrorCode, Result

T = TypeVar("T")

ETSI_EN_319_412_5_V2_2_1_DATE = datetime(2017, 11, 1, tzinfo=UTC)

_CITATION = "ETSI EN 319 412 - 5 V2.2.1 (2017 - 11)"

PASS = LintResult(LintStatus.PASS)


def _error(details: str) -> LintResult:
    return LintResult(LintStatus.ERROR, details)


# ─────────────────────── Shared Plumbing ───────────────────────


def _with_statements(
    certificate: x509.Certificate,
    check: Callable[[list[QcStatement]], LintResult],
) -> LintResult:
    """Decode the extension and run `check`; decoding failures become Error."""
    return Result.from_computation(
        lambda: certificate_qc_statements(certificate),
        ErrorCode.PARSE_ERROR,
        "error parsing QcStatements extension",
    ).either(on_success=check, on_failure=lambda err: _error(err.describe()))


def _with_statement_info(
    certificate: x509.Certificate,
    statement_id: str,
    check: Callable[[bytes | None], LintResult],
) -> LintResult:
    def _check_statement(statements: list[QcStatement]) -> LintResult:
        statement = find_statement(statements, statement_id)
        if statement is None:
            return LintResult(LintStatus.NA)
        return check(statement.info)

    return _with_statements(certificate, _check_statement)


def _decoded_info(
    info: bytes,
    decoder: Callable[[bytes], T],
    label: str,
    check: Callable[[T], LintResult],
) -> LintResult:
    return Result.from_computation(
        lambda: decoder(info),
        ErrorCode.PARSE_ERROR,
        f"error parsing {label} statement",
    ).either(on_success=check, on_failure=lambda err: _error(err.describe()))


def _etsi_statements_present(certificate: x509.Certificate) -> bool:
    if not has_qc_statements(certificate):
        return False
    try:
        return has_etsi_statement(certificate_qc_statements(certificate))
    except ValueError:
        return True


def _etsi_lint(
    name: str,
    description: str,
    section: str,
    check_applies: Callable[[x509.Certificate], bool],
    execute: Callable[[x509.Certificate], LintResult],
) -> Lint:
    return Lint(
        name=name,
        description=description,
        citation=f"{_CITATION} / Section {section}",
        source=LintSource.ETSI_ESI,
        check_applies=check_applies,
        execute=execute,
        effective_date=ETSI_EN_319_412_5_V2_2_1_DATE,
    )


# ─────────────────────── QcType OIDs used as statements ───────────────────────


def _check_type_as_statem(statements: list[QcStatement]) -> LintResult:
    misused = [s.statement_id for s in statements if s.statement_id in ETSI_QC_TYPES]
    if misused:
        return _error("ETSI QC Type OID used as QcStatement: " + ", ".join(misused))
    return PASS


def execute_type_as_statem(certificate: x509.Certificate) -> LintResult:
    return _with_statements(certificate, _check_type_as_statem)


# ─────────────────────── Extension criticality ───────────────────────


def execute_present_qcs_critical(certificate: x509.Certificate) -> LintResult:
    extension = qc_statements_extension(certificate)
    if extension is not None and extension.critical:
        return _error("QcStatements extension carrying ETSI statements is marked critical")
    return PASS


# ─────────────────────── Mandatory statements ───────────────────────


def _check_mandatory(statements: list[QcStatement]) -> LintResult:
    if find_statement(statements, ETSI_QCS_QC_COMPLIANCE) is None:
        return _error("missing mandatory ETSI statement QcCompliance")
    return PASS


def execute_mandatory_etsi_statems(certificate: x509.Certificate) -> LintResult:
    return _with_statements(certificate, _check_mandatory)


# ─────────────────────── Statements without info ───────────────────────


def _no_info(label: str) -> Callable[[bytes | None], LintResult]:
    def _check(info: bytes | None) -> LintResult:
        if info is not None:
            return _error(f"statement info present in {label} statement")
        return PASS

    return _check


def execute_qccompliance_valid(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(certificate, ETSI_QCS_QC_COMPLIANCE, _no_info("QcCompliance"))


def execute_qcsscd_valid(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(certificate, ETSI_QCS_QC_SSCD, _no_info("QcSSCD"))


# ─────────────────────── QcType ───────────────────────


def _check_qc_types(qc_types: list[str]) -> LintResult:
    if not qc_types:
        return _error("no QcType present, sequence of OIDs is empty")
    invalid = [oid for oid in qc_types if oid not in ETSI_QC_TYPES]
    if invalid:
        return _error("encountered invalid ETSI QcType OID: " + ", ".join(invalid))
    return PASS


def _check_qc_type_info(info: bytes | None) -> LintResult:
    if info is None:
        return _error("QcType statement has no statement info")
    return _decoded_info(info, decode_qc_types, "QcType", _check_qc_types)


def execute_qctype_valid(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(certificate, ETSI_QCS_QC_TYPE, _check_qc_type_info)


# ─────────────────────── QcRetentionPeriod ───────────────────────


def _check_retention(years: int) -> LintResult:
    if years < 0:
        return _error(f"retention period is negative: {years}")
    return PASS


def _check_retention_info(info: bytes | None) -> LintResult:
    if info is None:
        return _error("QcRetentionPeriod statement has no statement info")
    return _decoded_info(info, decode_retention_period, "QcRetentionPeriod", _check_retention)


def execute_qcretentionperiod_valid(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(
        certificate, ETSI_QCS_QC_RETENTION_PERIOD, _check_retention_info
    )


# ─────────────────────── QcLimitValue ───────────────────────


def _check_limit_value(value: tuple[str | int, int, int]) -> LintResult:
    currency = value[0]
    if isinstance(currency, str):
        if len(currency) != 3 or not currency.isalpha():
            return _error(f"invalid alphabetic ISO 4217 currency code {currency!r}")
    elif not 1 <= currency <= 999:
        return _error(f"numeric ISO 4217 currency code {currency} out of range 1..999")
    return PASS


def _check_limit_value_info(info: bytes | None) -> LintResult:
    if info is None:
        return _error("QcLimitValue statement has no statement info")
    return _decoded_info(info, decode_limit_value, "QcLimitValue", _check_limit_value)


def execute_qclimitvalue_valid(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(certificate, ETSI_QCS_QC_LIMIT_VALUE, _check_limit_value_info)


# ─────────────────────── QcPDS ───────────────────────


def _check_pds_locations(locations: list[tuple[str, str]]) -> LintResult:
    if not locations:
        return _error("PDS location list is empty")
    problems: list[str] = []
    for url, language in locations:
        if len(language) != 2:
            problems.append(f"PDS language {language!r} is not a two-letter code")
        if not url.lower().startswith("https://"):
            problems.append(f"PDS URL {url!r} does not use https")
    if not any(language.lower() == "en" for _, language in locations):
        problems.append("no English PDS present")
    if problems:
        return _error("; ".join(problems))
    return PASS


def _check_pds_info(info: bytes | None) -> LintResult:
    if info is None:
        return _error("QcPDS statement has no statement info")
    return _decoded_info(info, decode_pds_locations, "QcPDS", _check_pds_locations)


def execute_qcpds_valid(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(certificate, ETSI_QCS_QC_PDS, _check_pds_info)


def _check_pds_lang_case(info: bytes | None) -> LintResult:
    # Structural problems belong to e_qcstatem_qcpds_valid; this check cannot run.
    if info is None:
        return LintResult(LintStatus.FATAL, "QcPDS statement has no statement info")
    try:
        locations = decode_pds_locations(info)
    except ValueError as e:
        return LintResult(LintStatus.FATAL, f"error parsing QcPDS statement: {e}")
    upper = [language for _, language in locations if language != language.lower()]
    if upper:
        return LintResult(
            LintStatus.WARN, "PDS language code not lower case: " + ", ".join(upper)
        )
    return PASS


def execute_qcpds_lang_case(certificate: x509.Certificate) -> LintResult:
    return _with_statement_info(certificate, ETSI_QCS_QC_PDS, _check_pds_lang_case)


# ─────────────────────── Lint Definitions ───────────────────────


def _applies_to(statement_id: str) -> Callable[[x509.Certificate], bool]:
    def _check_applies(certificate: x509.Certificate) -> bool:
        return statement_present(certificate, statement_id)

    return _check_applies


ETSI_LINTS: tuple[Lint, ...] = (
    _etsi_lint(
        "e_qcstatem_etsi_type_as_statem",
        "Checks for erroneous QC Statement OIDs that are actually ETSI ESI QC type OIDs",
        "4.2.3",
        has_qc_statements,
        execute_type_as_statem,
    ),
    _etsi_lint(
        "e_qcstatem_etsi_present_qcs_critical",
        "Checks that a QC Statement extension carrying ETSI ESI statements is not critical",
        "4.1",
        _etsi_statements_present,
        execute_present_qcs_critical,
    ),
    _etsi_lint(
        "e_qcstatem_mandatory_etsi_statems",
        "Checks that a QC Statement extension carrying ETSI ESI statements "
        "also carries the mandatory QcCompliance statement",
        "5",
        _etsi_statements_present,
        execute_mandatory_etsi_statems,
    ),
    _etsi_lint(
        "e_qcstatem_qccompliance_valid",
        "Checks that a QcCompliance statement carries no statement info",
        "4.2.1",
        _applies_to(ETSI_QCS_QC_COMPLIANCE),
        execute_qccompliance_valid,
    ),
    _etsi_lint(
        "e_qcstatem_qcsscd_valid",
        "Checks that a QcSSCD statement carries no statement info",
        "4.2.2",
        _applies_to(ETSI_QCS_QC_SSCD),
        execute_qcsscd_valid,
    ),
    _etsi_lint(
        "e_qcstatem_qctype_valid",
        "Checks that a QcType statement holds a non-empty list of only the allowed QcType OIDs",
        "4.2.3",
        _applies_to(ETSI_QCS_QC_TYPE),
        execute_qctype_valid,
    ),
    _etsi_lint(
        "e_qcstatem_qcretentionperiod_valid",
        "Checks that a QcRetentionPeriod statement holds a non-negative number of years",
        "4.3.3",
        _applies_to(ETSI_QCS_QC_RETENTION_PERIOD),
        execute_qcretentionperiod_valid,
    ),
    _etsi_lint(
        "e_qcstatem_qclimitvalue_valid",
        "Checks that a QcLimitValue statement holds a well-formed ISO 4217 currency",
        "4.3.2",
        _applies_to(ETSI_QCS_QC_LIMIT_VALUE),
        execute_qclimitvalue_valid,
    ),
    _etsi_lint(
        "e_qcstatem_qcpds_valid",
        "Checks that a QcPDS statement lists https PDS locations with two-letter "
        "languages, at least one of them English",
        "4.3.4",
        _applies_to(ETSI_QCS_QC_PDS),
        execute_qcpds_valid,
    ),
    _etsi_lint(
        "w_qcstatem_qcpds_lang_case",
        "Checks that the language codes of QcPDS locations are lower case",
        "4.3.4",
        _applies_to(ETSI_QCS_QC_PDS),
        execute_qcpds_lang_case,
    ),
)
