"""
Shared test fixtures and helpers for the certlint test suite.

Certificates are built at test time with cryptography's CertificateBuilder.
QC statements are DER-encoded by hand (plus asn1crypto for the statement
infos) so that deliberately malformed extensions can be produced too.

The ETSI fixture set mirrors the named certificates the QC statement lints
were originally checked against.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import pytest
from asn1crypto import core
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from certlint.lints.qcstatements import (
    ETSI_QCS_QC_COMPLIANCE,
    ETSI_QCS_QC_PDS,
    ETSI_QCS_QC_RETENTION_PERIOD,
    ETSI_QCS_QC_SSCD,
    ETSI_QCS_QC_TYPE,
    ETSI_QCT_ESEAL,
    ETSI_QCT_ESIGN,
    QC_STATEMENTS_OID,
    PdsLocations,
    QcTypeInfo,
)

FIXTURE_NOT_BEFORE = datetime(2019, 1, 1, tzinfo=UTC)

_KEY = ec.generate_private_key(ec.SECP256R1())
_ISSUER = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "certlint Test CA")])


# ─────────────────────── DER helpers ───────────────────────


def der_tlv(tag: int, content: bytes) -> bytes:
    """Encode a single DER TLV with a definite length."""
    length = len(content)
    if length < 0x80:
        return bytes([tag, length]) + content
    encoded = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([tag, 0x80 | len(encoded)]) + encoded + content


def qc_statement(statement_id: str, info: bytes | None = None) -> bytes:
    """QCStatement ::= SEQUENCE { statementId, statementInfo OPTIONAL }"""
    return der_tlv(0x30, core.ObjectIdentifier(statement_id).dump() + (info or b""))


def qc_statements(*statements: bytes) -> bytes:
    return der_tlv(0x30, b"".join(statements))


def qc_type_info(*oids: str) -> bytes:
    return QcTypeInfo(list(oids)).dump()


def pds_info(*locations: tuple[str, str]) -> bytes:
    return PdsLocations([{"url": url, "language": lang} for url, lang in locations]).dump()


def retention_info(years: int) -> bytes:
    return core.Integer(years).dump()


# ─────────────────────── Certificate builder ───────────────────────


def build_certificate(
    extensions: Sequence[tuple[x509.ExtensionType, bool]] = (),
    not_before: datetime = FIXTURE_NOT_BEFORE,
    common_name: str = "qc.example.com",
) -> x509.Certificate:
    """Build a signed end-entity certificate carrying `extensions`."""
    builder = (
        x509.CertificateBuilder()
        .subject_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)]))
        .issuer_name(_ISSUER)
        .public_key(_KEY.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_before)
        .not_valid_after(not_before + timedelta(days=365))
    )
    for extension, critical in extensions:
        builder = builder.add_extension(extension, critical=critical)
    return builder.sign(_KEY, hashes.SHA256())


def qc_extension(der: bytes, critical: bool = False) -> tuple[x509.ExtensionType, bool]:
    return x509.UnrecognizedExtension(QC_STATEMENTS_OID, der), critical


def qc_certificate(
    *statements: bytes,
    critical: bool = False,
    not_before: datetime = FIXTURE_NOT_BEFORE,
) -> x509.Certificate:
    """Certificate whose QC statements extension holds exactly `statements`."""
    return build_certificate(
        [qc_extension(qc_statements(*statements), critical)],
        not_before=not_before,
    )


# ─────────────────────── ETSI fixture set ───────────────────────


def _tagged_value_statements() -> bytes:
    # A statement encoded as [0] { OID } instead of SEQUENCE { OID ... }.
    oid = core.ObjectIdentifier(ETSI_QCS_QC_COMPLIANCE).dump()
    return der_tlv(0x30, der_tlv(0xA0, oid))


def etsi_fixture_certificates() -> list[tuple[str, x509.Certificate]]:
    """The seven named ETSI QC statement fixtures, in scenario order."""
    return [
        (
            "QcStmtEtsiQcTypeAsQcStmtCert10",
            qc_certificate(qc_statement(ETSI_QCS_QC_COMPLIANCE), qc_statement(ETSI_QCT_ESIGN)),
        ),
        (
            "QcStmtEtsiTaggedValueCert20",
            build_certificate([qc_extension(_tagged_value_statements())]),
        ),
        (
            "QcStmtEtsiValidCert03",
            qc_certificate(
                qc_statement(ETSI_QCS_QC_COMPLIANCE),
                qc_statement(ETSI_QCS_QC_TYPE, qc_type_info(ETSI_QCT_ESIGN)),
            ),
        ),
        (
            "QcStmtEtsiEsealValidCert02",
            qc_certificate(
                qc_statement(ETSI_QCS_QC_COMPLIANCE),
                qc_statement(ETSI_QCS_QC_TYPE, qc_type_info(ETSI_QCT_ESEAL)),
            ),
        ),
        (
            "QcStmtEtsiTwoQcTypesCert15",
            qc_certificate(
                qc_statement(ETSI_QCS_QC_COMPLIANCE),
                qc_statement(ETSI_QCS_QC_TYPE, qc_type_info(ETSI_QCT_ESIGN, ETSI_QCT_ESEAL)),
            ),
        ),
        (
            "QcStmtEtsiNoQcStatmentsCert22",
            build_certificate(),
        ),
        (
            "QcStmtEtsiValidCert24",
            qc_certificate(
                qc_statement(ETSI_QCS_QC_COMPLIANCE),
                qc_statement(ETSI_QCS_QC_SSCD),
                qc_statement(ETSI_QCS_QC_RETENTION_PERIOD, retention_info(15)),
                qc_statement(
                    ETSI_QCS_QC_PDS, pds_info(("https://pds.example.com/pds-en.pdf", "en"))
                ),
                qc_statement(ETSI_QCS_QC_TYPE, qc_type_info(ETSI_QCT_ESIGN)),
            ),
        ),
    ]


@pytest.fixture(scope="session")
def etsi_fixtures() -> list[tuple[str, x509.Certificate]]:
    return etsi_fixture_certificates()
