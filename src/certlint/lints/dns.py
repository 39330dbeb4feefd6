"""
CA/Browser Forum Baseline Requirements lints on DNS names.

`e_dnsname_not_valid_tld` is the consumer of the generated TLD validity
table: every DNS name of a subscriber certificate must end in a TLD that
was delegated, and not yet removed, when the certificate was issued.
"""

from __future__ import annotations

import ipaddress
from functools import partial

from cryptography import x509
from cryptography.x509.oid import NameOID

from certlint.domain.models import Lint, LintResult, LintSource, LintStatus
from certlint.gtld.table import TldTable, has_valid_tld


def is_subscriber_certificate(certificate: x509.Certificate) -> bool:
    """Not a CA: basicConstraints absent or cA false."""
    try:
        constraints = certificate.extensions.get_extension_for_class(x509.BasicConstraints)
    except x509.ExtensionNotFound:
        return True
    return not constraints.value.ca


def _is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def dns_names(certificate: x509.Certificate) -> list[str]:
    """SAN dNSName entries followed by subject commonName values that are not IPs."""
    names: list[str] = []
    try:
        san = certificate.extensions.get_extension_for_class(x509.SubjectAlternativeName)
        names.extend(san.value.get_values_for_type(x509.DNSName))
    except x509.ExtensionNotFound:
        pass
    for attribute in certificate.subject.get_attributes_for_oid(NameOID.COMMON_NAME):
        if isinstance(attribute.value, str) and not _is_ip_address(attribute.value):
            names.append(attribute.value)
    return names


def _applies_not_valid_tld(certificate: x509.Certificate) -> bool:
    return is_subscriber_certificate(certificate) and bool(dns_names(certificate))


def _execute_not_valid_tld(certificate: x509.Certificate, table: TldTable) -> LintResult:
    issued = certificate.not_valid_before_utc
    invalid = [name for name in dns_names(certificate) if not has_valid_tld(name, issued, table)]
    if invalid:
        return LintResult(
            LintStatus.ERROR,
            "DNS name(s) without a TLD valid at issuance: " + ", ".join(invalid),
        )
    return LintResult(LintStatus.PASS)


def not_valid_tld_lint(table: TldTable) -> Lint:
    """The TLD lint bound to a specific validity table."""
    return Lint(
        name="e_dnsname_not_valid_tld",
        description="DNSNames must have a valid TLD at the time of issuance",
        citation="BRs: 3.2.2.4",
        source=LintSource.CABF_BASELINE_REQUIREMENTS,
        check_applies=_applies_not_valid_tld,
        execute=partial(_execute_not_valid_tld, table=table),
    )


def dns_lints(table: TldTable) -> tuple[Lint, ...]:
    return (not_valid_tld_lint(table),)
