"""
QC statements extension — ASN.1 decoding for the ETSI lints.

`cryptography` surfaces id-pe-qcStatements (RFC 3739) as an
UnrecognizedExtension holding the raw extnValue. The structures below let
asn1crypto decode it:

    QCStatements ::= SEQUENCE OF QCStatement
    QCStatement  ::= SEQUENCE {
        statementId   OBJECT IDENTIFIER,
        statementInfo ANY DEFINED BY statementId OPTIONAL }

and the ETSI EN 319 412-5 statement infos (QcType, QcPDS, QcRetentionPeriod,
QcLimitValue). Decoding errors surface as ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass

from asn1crypto import core
from cryptography import x509

QC_STATEMENTS_OID = x509.ObjectIdentifier("1.3.6.1.5.5.7.1.3")

# ─────────────────────── ETSI EN 319 412-5 OIDs ───────────────────────

ETSI_QCS_QC_COMPLIANCE = "0.4.0.1862.1.1"
ETSI_QCS_QC_LIMIT_VALUE = "0.4.0.1862.1.2"
ETSI_QCS_QC_RETENTION_PERIOD = "0.4.0.1862.1.3"
ETSI_QCS_QC_SSCD = "0.4.0.1862.1.4"
ETSI_QCS_QC_PDS = "0.4.0.1862.1.5"
ETSI_QCS_QC_TYPE = "0.4.0.1862.1.6"

ETSI_QCT_ESIGN = "0.4.0.1862.1.6.1"
ETSI_QCT_ESEAL = "0.4.0.1862.1.6.2"
ETSI_QCT_WEB = "0.4.0.1862.1.6.3"

ETSI_QC_TYPES = (ETSI_QCT_ESIGN, ETSI_QCT_ESEAL, ETSI_QCT_WEB)

ETSI_STATEMENT_IDS = (
    ETSI_QCS_QC_COMPLIANCE,
    ETSI_QCS_QC_LIMIT_VALUE,
    ETSI_QCS_QC_RETENTION_PERIOD,
    ETSI_QCS_QC_SSCD,
    ETSI_QCS_QC_PDS,
    ETSI_QCS_QC_TYPE,
)


# ─────────────────────── ASN.1 Schema ───────────────────────


class _QcStatement(core.Sequence):  # type: ignore[misc]
    _fields = [
        ("statement_id", core.ObjectIdentifier),
        ("statement_info", core.Any, {"optional": True}),
    ]


class _QcStatements(core.SequenceOf):  # type: ignore[misc]
    _child_spec = _QcStatement


class QcTypeInfo(core.SequenceOf):  # type: ignore[misc]
    """QcType-statement ::= SEQUENCE OF OBJECT IDENTIFIER"""

    _child_spec = core.ObjectIdentifier


class PdsLocation(core.Sequence):  # type: ignore[misc]
    _fields = [
        ("url", core.IA5String),
        ("language", core.PrintableString),
    ]


class PdsLocations(core.SequenceOf):  # type: ignore[misc]
    _child_spec = PdsLocation


class Iso4217CurrencyCode(core.Choice):  # type: ignore[misc]
    _alternatives = [
        ("alphabetic", core.PrintableString),
        ("numeric", core.Integer),
    ]


class MonetaryValue(core.Sequence):  # type: ignore[misc]
    _fields = [
        ("currency", Iso4217CurrencyCode),
        ("amount", core.Integer),
        ("exponent", core.Integer),
    ]


# ─────────────────────── Decoded Form ───────────────────────


@dataclass(frozen=True, slots=True)
class QcStatement:
    """One decoded statement; `info` is the DER of statementInfo, if present."""

    statement_id: str
    info: bytes | None = None


def qc_statements_extension(certificate: x509.Certificate) -> x509.Extension | None:
    """Return the QC statements extension, or None when the certificate lacks it."""
    try:
        return certificate.extensions.get_extension_for_oid(QC_STATEMENTS_OID)
    except x509.ExtensionNotFound:
        return None


def has_qc_statements(certificate: x509.Certificate) -> bool:
    return qc_statements_extension(certificate) is not None


def _extension_der(extension: x509.Extension) -> bytes:
    value = extension.value
    if isinstance(value, x509.UnrecognizedExtension):
        return value.value
    return value.public_bytes()


def parse_qc_statements(der: bytes) -> list[QcStatement]:
    """
    Fully decode a QCStatements value.

    asn1crypto parses lazily, so every statement is walked here to make
    malformed content fail now rather than inside a lint.
    """
    statements = _QcStatements.load(der, strict=True)
    decoded: list[QcStatement] = []
    for statement in statements:
        info = statement["statement_info"]
        decoded.append(
            QcStatement(
                statement_id=statement["statement_id"].dotted,
                info=None if isinstance(info, core.Void) else info.dump(),
            )
        )
    return decoded


def certificate_qc_statements(certificate: x509.Certificate) -> list[QcStatement]:
    """Decoded statements of `certificate`; empty when the extension is absent."""
    extension = qc_statements_extension(certificate)
    if extension is None:
        return []
    return parse_qc_statements(_extension_der(extension))


def find_statement(statements: list[QcStatement], statement_id: str) -> QcStatement | None:
    for statement in statements:
        if statement.statement_id == statement_id:
            return statement
    return None


def has_etsi_statement(statements: list[QcStatement]) -> bool:
    return any(s.statement_id in ETSI_STATEMENT_IDS for s in statements)


def statement_present(certificate: x509.Certificate, statement_id: str) -> bool:
    """
    Applicability helper: does the certificate carry `statement_id`?

    An undecodable extension counts as "present" so the statement's own lint
    runs and reports the decoding error.
    """
    if not has_qc_statements(certificate):
        return False
    try:
        statements = certificate_qc_statements(certificate)
    except ValueError:
        return True
    return find_statement(statements, statement_id) is not None


def decode_qc_types(info: bytes) -> list[str]:
    return [oid.dotted for oid in QcTypeInfo.load(info, strict=True)]


def decode_pds_locations(info: bytes) -> list[tuple[str, str]]:
    return [
        (location["url"].native, location["language"].native)
        for location in PdsLocations.load(info, strict=True)
    ]


def decode_retention_period(info: bytes) -> int:
    return core.Integer.load(info, strict=True).native


def decode_limit_value(info: bytes) -> tuple[str | int, int, int]:
    """(currency, amount, exponent) of a QcLimitValue statement."""
    value = MonetaryValue.load(info, strict=True)
    return (
        value["currency"].native,
        value["amount"].native,
        value["exponent"].native,
    )
